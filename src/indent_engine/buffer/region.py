"""Offset regions and the selection set that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple


@dataclass(frozen=True, slots=True)
class Region:
    """Pair of buffer offsets. ``a > b`` is a reversed selection, not an error."""

    a: int
    b: int

    def begin(self) -> int:
        return min(self.a, self.b)

    def end(self) -> int:
        return max(self.a, self.b)

    def size(self) -> int:
        return self.end() - self.begin()

    def empty(self) -> bool:
        return self.a == self.b

    def reversed(self) -> bool:
        return self.a > self.b

    def normalized(self) -> "Region":
        if self.reversed():
            return Region(self.b, self.a)
        return self

    def as_tuple(self) -> Tuple[int, int]:
        return (self.a, self.b)


def _shift_for_insert(point: int, position: int, length: int) -> int:
    if point >= position:
        return point + length
    return point


def _shift_for_erase(point: int, start: int, stop: int) -> int:
    if point >= stop:
        return point - (stop - start)
    if point > start:
        return start
    return point


class RegionSet:
    """Ordered, mutable collection of regions; a view's selection."""

    def __init__(self, regions: Iterable[Region] = ()) -> None:
        self._regions: List[Region] = list(regions)

    def add(self, region: Region) -> None:
        self._regions.append(region)

    def add_all(self, regions: Iterable[Region]) -> None:
        self._regions.extend(regions)

    def clear(self) -> None:
        self._regions.clear()

    def regions(self) -> Tuple[Region, ...]:
        return tuple(self._regions)

    def replace(self, regions: Iterable[Region]) -> None:
        self._regions = list(regions)

    def adjust_for_insert(self, position: int, length: int) -> None:
        """Shift every endpoint at or after ``position`` by ``length``."""

        self._regions = [
            Region(
                _shift_for_insert(region.a, position, length),
                _shift_for_insert(region.b, position, length),
            )
            for region in self._regions
        ]

    def adjust_for_erase(self, start: int, stop: int) -> None:
        """Collapse endpoints inside ``(start, stop)`` and pull later ones back."""

        self._regions = [
            Region(
                _shift_for_erase(region.a, start, stop),
                _shift_for_erase(region.b, start, stop),
            )
            for region in self._regions
        ]

    def __len__(self) -> int:
        return len(self._regions)

    def __iter__(self) -> Iterator[Region]:
        return iter(tuple(self._regions))

    def __repr__(self) -> str:
        spans = ", ".join(f"({r.a}, {r.b})" for r in self._regions)
        return f"RegionSet([{spans}])"


__all__ = ["Region", "RegionSet"]
