"""Permanent left/right display sides."""

from __future__ import annotations

from typing import Dict, Iterator, Optional

from rngarena.domain import Match, Seating, Side


class SeatMap:
    """Remembers the side each participant first appeared on.

    A side is recorded once and kept for the rest of the tournament; later
    assignments are ignored.
    """

    def __init__(self) -> None:
        self._sides: Dict[str, Side] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._sides

    def __iter__(self) -> Iterator[str]:
        return iter(self._sides)

    def __len__(self) -> int:
        return len(self._sides)

    def side_of(self, name: str) -> Optional[Side]:
        return self._sides.get(name)

    def assign(self, name: str, side: Side) -> Side:
        """Record *side* for *name* unless one is already recorded."""

        return self._sides.setdefault(name, side)

    def seat(self, match: Match, followed: str) -> Seating:
        first, second = match.participants

        if first not in self._sides:
            other = self._sides.get(second)
            self.assign(first, other.opposite if other is not None else Side.LEFT)
        if second not in self._sides:
            self.assign(second, self._sides[first].opposite)

        # Two veterans of the same side: the first keeps its seat.
        if self._sides[first] is Side.LEFT:
            left, right = first, second
        else:
            left, right = second, first
        return Seating(left=left, right=right, followed_on_left=left == followed)

    def as_dict(self) -> Dict[str, str]:
        return {name: side.value for name, side in self._sides.items()}

    def clear(self) -> None:
        self._sides.clear()


__all__ = ["SeatMap"]
