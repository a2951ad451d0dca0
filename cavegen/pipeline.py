"""Pipeline orchestration for cave generation.

Provides the public CaveMap class and the one-call ``generate`` helper,
coordinating the fill, smoothing, pruning and connection modules.

Public contract consumed elsewhere:
    CaveMap(CaveConfig(...)) OR CaveMap(width=W, height=H, seed=S, **options)
    Attributes: grid (Grid), rooms (largest first), config, seed, metrics
    Queries: get(x, y), is_wall(x, y), is_floor(x, y), is_in_range(x, y)
"""
from __future__ import annotations

import random
import time
from dataclasses import fields, replace
from typing import Any, Dict, List

from .config import CaveConfig
from .connectivity import connect_closest_rooms
from .errors import InvalidConfig
from .fill import random_fill
from .grid import Grid
from .logging_utils import get_logger
from .metrics import init_metrics
from .pruning import prune_floor_regions, prune_wall_regions
from .rooms import Room, sort_rooms
from .smoothing import smooth
from .tiles import BORDER, FLOOR, WALL, TileType

log = get_logger("pipeline")


class CaveMap:
    def __init__(self, config: CaveConfig | None = None, **options):
        known = {f.name for f in fields(CaveConfig)}
        for key in options:
            if key not in known:
                raise InvalidConfig(f"Unknown option: {key}")
        # Work on a copy; the caller's config keeps its own seed and values
        config = CaveConfig(**options) if config is None else replace(config, **options)
        self.config = config.validate()
        self.rooms: List[Room] = []
        self.metrics: Dict[str, Any] = {}
        self.seed: int = 0
        self.regenerate(config.seed)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def get(self, x: int, y: int) -> TileType:
        return self.grid.get(x, y)

    def is_wall(self, x: int, y: int) -> bool:
        return self.grid.is_wall(x, y)

    def is_floor(self, x: int, y: int) -> bool:
        return self.grid.is_floor(x, y)

    def is_in_range(self, x: int, y: int) -> bool:
        return self.grid.is_in_range(x, y)

    @property
    def main_room(self) -> Room | None:
        return self.rooms[0] if self.rooms else None

    def regenerate(self, seed: int | None = None) -> Grid:
        """Run the whole pipeline again, replacing grid and rooms.

        ``None`` draws a fresh seed; 0 is a valid deterministic seed.
        """
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        self.config.seed = seed
        # Local RNG so outside use of ``random`` does not perturb the map
        self._rng = random.Random(seed)
        self.grid = Grid(self.config.width, self.config.height)
        self.rooms = []
        self.metrics = init_metrics() if self.config.enable_metrics else {}
        self._run_pipeline()
        return self.grid

    def _run_pipeline(self):
        """Execute ordered generation phases with per-phase timing.

        When metrics are enabled ``phase_ms`` maps phase name -> duration (ms).
        """
        cfg = self.config
        start = time.perf_counter()
        phase_times: Dict[str, float] = {}

        def _phase(label, fn, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            phase_times[label] = round((time.perf_counter() - ps) * 1000, 2)
            return r

        _phase('fill', random_fill, self.grid, self._rng, cfg.fill_percent)
        passes = _phase('smooth', smooth, self.grid, cfg.smooth_iterations)
        walls_removed = _phase('prune_walls', prune_wall_regions, self.grid, cfg.min_region_size)
        rooms, floors_removed = _phase('prune_floors', prune_floor_regions, self.grid, cfg.min_region_size)
        self.rooms = sort_rooms(rooms)
        if self.rooms:
            self.rooms[0].accessible_from_main = True
        passages, sweeps = _phase('connect', connect_closest_rooms, self.grid, self.rooms, cfg.corridor_radius)
        runtime_ms = round((time.perf_counter() - start) * 1000, 2)

        if cfg.enable_metrics:
            self.metrics.update(
                smoothing_passes=passes,
                wall_regions_removed=walls_removed,
                floor_regions_removed=floors_removed,
                rooms=len(self.rooms),
                passages_created=passages,
                connection_sweeps=sweeps,
                tiles_floor=self.grid.count(FLOOR),
                tiles_wall=self.grid.count(WALL),
                tiles_border=self.grid.count(BORDER),
                runtime_ms=runtime_ms,
                phase_ms=phase_times,
            )
        log.debug(event="cave_generated", seed=self.seed, width=cfg.width, height=cfg.height,
                  rooms=len(self.rooms), passages=passages, runtime_ms=runtime_ms)


def generate(width: int, height: int, seed: int | None = None, **options) -> Grid:
    """Generate a map and return its grid."""
    return CaveMap(width=width, height=height, seed=seed, **options).grid


__all__ = ["CaveMap", "generate"]
