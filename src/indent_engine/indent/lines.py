"""Map selection regions to the rows they touch."""

from __future__ import annotations

from typing import Iterable, Tuple

from indent_engine.buffer import Region, TextDocument


def normalize_region(region: Region) -> Tuple[int, int]:
    """Return ``(lo, hi)`` regardless of the direction the region was made in."""

    region = region.normalized()
    return region.a, region.b


def lines_for_region(document: TextDocument, region: Region) -> range:
    """Inclusive row span touched by ``region``; never empty."""

    lo, hi = normalize_region(region)
    return range(document.row_of(lo), document.row_of(hi) + 1)


def collect_lines(document: TextDocument, regions: Iterable[Region]) -> Tuple[int, ...]:
    """Union of the rows touched by ``regions``, ascending and duplicate-free."""

    rows: set[int] = set()
    for region in regions:
        rows.update(lines_for_region(document, region))
    return tuple(sorted(rows))


__all__ = ["normalize_region", "lines_for_region", "collect_lines"]
