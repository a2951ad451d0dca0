import os
from dataclasses import dataclass, fields
from typing import Optional

from .errors import InvalidConfig, InvalidDimensions

# Environment variable -> config attribute. Explicit overrides passed to
# ``CaveConfig.from_env`` take precedence over these.
ENV_MAP = {
    "CAVEGEN_WIDTH": "width",
    "CAVEGEN_HEIGHT": "height",
    "CAVEGEN_SEED": "seed",
    "CAVEGEN_FILL_PERCENT": "fill_percent",
    "CAVEGEN_SMOOTH_ITERATIONS": "smooth_iterations",
    "CAVEGEN_MIN_REGION_SIZE": "min_region_size",
    "CAVEGEN_CORRIDOR_RADIUS": "corridor_radius",
    "CAVEGEN_ENABLE_METRICS": "enable_metrics",
}

_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class CaveConfig:
    width: int = 32
    height: int = 32
    seed: Optional[int] = None
    fill_percent: int = 50
    smooth_iterations: int = 255
    min_region_size: int = 50
    corridor_radius: int = 7
    enable_metrics: bool = True

    def validate(self) -> "CaveConfig":
        """Reject configurations that cannot produce a map.

        Dimensions are checked first so callers always see InvalidDimensions
        for a grid with no interior, whatever else is wrong.
        """
        if self.width <= 2 or self.height <= 2:
            raise InvalidDimensions(self.width, self.height)
        if not 0 <= self.fill_percent <= 100:
            raise InvalidConfig(f"fill_percent must be within 0-100 (got {self.fill_percent})")
        if self.smooth_iterations < 0:
            raise InvalidConfig(f"smooth_iterations must be >= 0 (got {self.smooth_iterations})")
        if self.min_region_size < 0:
            raise InvalidConfig(f"min_region_size must be >= 0 (got {self.min_region_size})")
        if self.corridor_radius < 1:
            raise InvalidConfig(f"corridor_radius must be >= 1 (got {self.corridor_radius})")
        return self

    @classmethod
    def from_env(cls, environ=None, **overrides) -> "CaveConfig":
        environ = os.environ if environ is None else environ
        values = {}
        for env_key, attr in ENV_MAP.items():
            if env_key not in environ:
                continue
            raw = environ[env_key].strip()
            if attr == "enable_metrics":
                values[attr] = raw.lower() not in _FALSE_VALUES
                continue
            if attr == "seed" and raw == "":
                continue
            try:
                values[attr] = int(raw)
            except ValueError as e:
                raise InvalidConfig(f"{env_key} must be an integer (got {raw!r})") from e
        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise InvalidConfig(f"Unknown option: {key}")
            if value is not None:
                values[key] = value
        return cls(**values)


__all__ = ["CaveConfig", "ENV_MAP"]
