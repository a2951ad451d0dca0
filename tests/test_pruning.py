from cavegen.pruning import prune_floor_regions, prune_wall_regions
from cavegen.regions import find_regions
from cavegen.tiles import FLOOR, WALL

from tests.cave_test_utils import bordered, paint


def test_small_wall_specks_become_floor():
    g = bordered(10, 10, interior=FLOOR)
    g.tiles[4][4] = WALL
    g.tiles[4][5] = WALL
    paint(g, 6, 1, 8, 8, WALL)  # 24 tiles, kept
    removed = prune_wall_regions(g, 3)
    assert removed == 1
    assert g.tiles[4][4] == FLOOR and g.tiles[4][5] == FLOOR
    assert g.count(WALL) == 24


def test_small_floor_pockets_become_wall_and_rest_become_rooms():
    g = bordered(12, 10)
    paint(g, 1, 1, 1, 2)  # 2-tile pocket
    paint(g, 4, 2, 7, 4)  # 12 tiles
    paint(g, 9, 6, 10, 8)  # 6 tiles
    rooms, removed = prune_floor_regions(g, 5)
    assert removed == 1
    assert [r.size for r in rooms] == [12, 6]
    assert g.tiles[1][1] == WALL and g.tiles[1][2] == WALL
    assert len(find_regions(g, FLOOR)) == 2


def test_nothing_survives_when_threshold_exceeds_every_region():
    g = bordered(6, 6)
    paint(g, 1, 1, 2, 2)
    rooms, removed = prune_floor_regions(g, 50)
    assert rooms == [] and removed == 1
    assert g.count(FLOOR) == 0
