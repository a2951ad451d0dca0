"""Exceptions raised while configuring a cave generation run.

Generation stages themselves never raise on a well-formed grid; everything
here is rejected up front before the fill starts.
"""


class CaveGenError(Exception):
    """Base class for cavegen errors."""


class InvalidDimensions(CaveGenError, ValueError):
    """Width or height too small to leave any interior inside the border ring."""

    def __init__(self, width: int, height: int):
        super().__init__(f"Grid dimensions must both be greater than 2 (got {width}x{height})")
        self.width = width
        self.height = height


class InvalidConfig(CaveGenError, ValueError):
    """A tunable is outside its accepted range or could not be parsed."""


__all__ = ["CaveGenError", "InvalidDimensions", "InvalidConfig"]
