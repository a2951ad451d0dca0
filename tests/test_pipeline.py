import random

import pytest

from cavegen import CaveConfig, CaveMap, InvalidConfig, InvalidDimensions, generate
from cavegen.tiles import BORDER


@pytest.mark.parametrize("size", [(2, 10), (10, 2), (0, 0), (-5, 8)])
def test_invalid_dimensions_rejected(size):
    with pytest.raises(InvalidDimensions):
        generate(size[0], size[1], 1)


def test_invalid_dimensions_is_value_error():
    with pytest.raises(ValueError):
        CaveMap(width=1, height=1, seed=1)


@pytest.mark.parametrize(
    "options",
    [
        {"fill_percent": 101},
        {"fill_percent": -1},
        {"smooth_iterations": -3},
        {"min_region_size": -1},
        {"corridor_radius": 0},
    ],
)
def test_invalid_tunables_rejected(options):
    with pytest.raises(InvalidConfig):
        CaveMap(width=20, height=20, seed=1, **options)


def test_unknown_option_rejected():
    with pytest.raises(InvalidConfig):
        CaveMap(width=20, height=20, seed=1, bogus=True)
    with pytest.raises(InvalidConfig):
        CaveMap(CaveConfig(width=20, height=20), bogus=True)


def test_config_object_and_overrides():
    cave = CaveMap(CaveConfig(width=24, height=20, corridor_radius=3), seed=11)
    assert (cave.width, cave.height, cave.seed) == (24, 20, 11)
    assert cave.config.corridor_radius == 3


def test_rooms_largest_first_and_main_marked(small_cave):
    sizes = [r.size for r in small_cave.rooms]
    assert sizes == sorted(sizes, reverse=True)
    if small_cave.rooms:
        assert small_cave.main_room is small_cave.rooms[0]
        assert small_cave.main_room.accessible_from_main


def test_regenerate_replaces_grid():
    cave = CaveMap(width=30, height=30, seed=5)
    first = cave.grid.snapshot()
    cave.regenerate(6)
    assert cave.seed == 6
    cave.regenerate(5)
    assert cave.grid.snapshot() == first


def test_missing_seed_is_drawn_and_recorded():
    cave = CaveMap(width=20, height=20)
    assert isinstance(cave.seed, int)
    assert cave.config.seed == cave.seed
    assert CaveMap(width=20, height=20, seed=cave.seed).grid == cave.grid


def test_zero_seed_is_deterministic():
    assert generate(20, 20, 0) == generate(20, 20, 0)


def test_global_random_state_untouched():
    random.seed(5)
    expected = random.random()
    random.seed(5)
    CaveMap(width=20, height=20, seed=3)
    assert random.random() == expected


def test_metrics_populated(small_cave):
    m = small_cave.metrics
    for k in [
        "smoothing_passes",
        "wall_regions_removed",
        "floor_regions_removed",
        "rooms",
        "passages_created",
        "connection_sweeps",
        "tiles_floor",
        "tiles_wall",
        "tiles_border",
        "runtime_ms",
    ]:
        assert k in m
    assert m["rooms"] == len(small_cave.rooms)
    assert m["tiles_floor"] + m["tiles_wall"] + m["tiles_border"] == 40 * 30
    assert m["tiles_border"] == small_cave.grid.count(BORDER)
    assert set(m["phase_ms"]) == {"fill", "smooth", "prune_walls", "prune_floors", "connect"}
    assert m["passages_created"] >= len(small_cave.rooms) - 1


def test_metrics_disabled():
    cave = CaveMap(width=20, height=20, seed=1, enable_metrics=False)
    assert cave.metrics == {}


def test_shared_config_is_not_modified():
    cfg = CaveConfig(width=30, height=30)
    first = CaveMap(cfg)
    assert cfg.seed is None
    assert first.config is not cfg
    assert first.config.seed == first.seed

    narrow = CaveMap(cfg, corridor_radius=2, seed=9)
    assert narrow.config.corridor_radius == 2
    assert cfg.corridor_radius == 7
    assert cfg.seed is None


def test_rejected_override_leaves_config_intact():
    cfg = CaveConfig(width=30, height=30, seed=4)
    with pytest.raises(InvalidConfig):
        CaveMap(cfg, fill_percent=150)
    assert cfg.fill_percent == 50
    assert CaveMap(cfg).grid == CaveMap(cfg).grid


def test_one_summary_event_per_run(monkeypatch, capsys):
    monkeypatch.setenv("CAVEGEN_LOG_LEVEL", "debug")
    CaveMap(width=20, height=20, seed=8)
    lines = [ln for ln in capsys.readouterr().out.splitlines() if "cave_generated" in ln]
    assert len(lines) == 1
    assert "seed=8" in lines[0]
