from typing import Dict


def init_metrics() -> Dict[str, int | float]:
    return {
        'smoothing_passes': 0,
        'wall_regions_removed': 0,
        'floor_regions_removed': 0,
        'rooms': 0,
        'passages_created': 0,
        'connection_sweeps': 0,
        'tiles_floor': 0,
        'tiles_wall': 0,
        'tiles_border': 0,
        'runtime_ms': 0.0,
    }
