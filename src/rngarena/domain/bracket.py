"""Value objects exchanged between the bracket engine and its consumers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Slot = Optional[str]


class Side(str, Enum):
    """Display side a participant is seated on."""

    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> Side:
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


@dataclass(frozen=True)
class Match:
    """Two occupied slots of a round that meet each other."""

    round_index: int
    match_index: int
    first: str
    second: str

    @property
    def slot_indices(self) -> Tuple[int, int]:
        return 2 * self.match_index, 2 * self.match_index + 1

    @property
    def participants(self) -> Tuple[str, str]:
        return self.first, self.second

    def involves(self, name: str) -> bool:
        return name in (self.first, self.second)

    def opponent_of(self, name: str) -> str:
        if name == self.first:
            return self.second
        if name == self.second:
            return self.first
        raise ValueError(f"'{name}' is not part of this match.")


@dataclass(frozen=True)
class Seating:
    """Left/right placement of a match for display."""

    left: str
    right: str
    followed_on_left: bool


@dataclass(frozen=True)
class ByeInfo:
    """The followed participant has no opponent in the current round."""

    character: str
    position: Side


@dataclass(frozen=True)
class MatchResult:
    """Outcome of a watched match."""

    match: Match
    winner: str
    loser: str
    following_changed: bool
    hero_eliminated: bool = False


@dataclass(frozen=True)
class RoundInfo:
    current: int
    total: int
    name: str
    participants_remaining: int


@dataclass(frozen=True)
class BracketStats:
    current_round: int
    total_rounds: int
    round_name: str
    participants_left: int
    matches_completed: int
    total_matches: int


__all__ = [
    "Slot",
    "Side",
    "Match",
    "Seating",
    "ByeInfo",
    "MatchResult",
    "RoundInfo",
    "BracketStats",
]
