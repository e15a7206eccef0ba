from __future__ import annotations

from indent_engine.buffer import Region, RegionSet


def test_reversed_region_normalizes() -> None:
    region = Region(3, 0)

    assert region.reversed()
    assert region.normalized() == Region(0, 3)
    assert (region.begin(), region.end(), region.size()) == (0, 3, 3)


def test_zero_width_region() -> None:
    region = Region(4, 4)

    assert region.empty()
    assert region.normalized() is region


def test_adjust_for_insert_moves_endpoints_at_or_after_position() -> None:
    selection = RegionSet([Region(0, 1), Region(5, 3)])

    selection.adjust_for_insert(3, 2)

    assert selection.regions() == (Region(0, 1), Region(7, 5))


def test_adjust_for_erase_collapses_inner_endpoints() -> None:
    selection = RegionSet([Region(2, 6), Region(9, 10)])

    selection.adjust_for_erase(4, 8)

    assert selection.regions() == (Region(2, 4), Region(5, 6))


def test_region_set_keeps_overlaps_and_order() -> None:
    selection = RegionSet()
    selection.add(Region(1, 2))
    selection.add_all([Region(0, 0), Region(1, 2)])

    assert len(selection) == 3
    assert list(selection) == [Region(1, 2), Region(0, 0), Region(1, 2)]

    selection.clear()
    assert selection.regions() == ()
