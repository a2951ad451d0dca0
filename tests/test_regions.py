import pytest

from cavegen.regions import find_regions, flood_reachable, region_at
from cavegen.tiles import BORDER, FLOOR, WALL

from tests.cave_test_utils import bordered, paint


def two_blobs():
    g = bordered(12, 8)
    paint(g, 1, 1, 3, 3)  # 9 tiles
    paint(g, 7, 2, 8, 5)  # 8 tiles
    return g


def test_finds_separate_regions_in_scan_order():
    g = two_blobs()
    regions = find_regions(g, FLOOR)
    assert [len(r) for r in regions] == [9, 8]
    assert regions[0][0] == (1, 1)
    assert regions[1][0] == (7, 2)


def test_regions_do_not_overlap_and_cover_all_tiles():
    g = two_blobs()
    walls = find_regions(g, WALL)
    tiles = [t for r in walls for t in r]
    assert len(tiles) == len(set(tiles))
    assert len(tiles) == g.count(WALL)


def test_diagonal_contact_does_not_join():
    g = bordered(6, 6)
    g.tiles[1][1] = FLOOR
    g.tiles[2][2] = FLOOR
    assert [len(r) for r in find_regions(g, FLOOR)] == [1, 1]


def test_grid_is_not_modified():
    g = two_blobs()
    before = g.snapshot()
    find_regions(g, FLOOR)
    find_regions(g, WALL)
    assert g.snapshot() == before


def test_border_is_its_own_region():
    g = bordered(5, 4)
    regions = find_regions(g, BORDER)
    assert len(regions) == 1 and len(regions[0]) == 14


def test_region_at():
    g = two_blobs()
    assert sorted(region_at(g, 8, 5)) == sorted((x, y) for x in (7, 8) for y in range(2, 6))
    with pytest.raises(IndexError):
        region_at(g, 20, 0)


def test_flood_reachable_stays_on_floor():
    g = two_blobs()
    reach = flood_reachable(g, [(1, 1)])
    assert len(reach) == 9
    assert (7, 2) not in reach
    assert flood_reachable(g, [(0, 0)]) == set()
