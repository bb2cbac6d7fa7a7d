"""Single-elimination bracket engine.

The engine owns one :class:`BracketState` and moves it forward one command at
a time. Only the match involving the followed participant is ever handed
out; every other match of a round is settled by a coin flip when the round
has to close.
"""

from __future__ import annotations

import logging
import random
from dataclasses import asdict, dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Set, Tuple

from rngarena.domain import (
    BracketStats,
    ByeInfo,
    ConfigurationError,
    InvalidStateError,
    Match,
    MatchResult,
    RoundInfo,
    Seating,
    Side,
    Slot,
)

from .seating import SeatMap
from .seeding import is_power_of_two, next_power_of_two, round_zero_slots

logger = logging.getLogger(__name__)

Round = List[Slot]

# Keyed by the number of slots in the round.
_NAMED_ROUNDS: Dict[int, str] = {
    8: "Quarterfinals",
    4: "Semifinals",
    2: "Final",
    1: "Champion",
}


def build_bracket(participants: Sequence[str], bracket_size: int | None = None) -> List[Round]:
    """Seed round zero and allocate every later round.

    Participants without an opponent in round zero are copied straight into
    round one. That is a bye, not a win.
    """

    names = list(participants)
    _check_participants(names)

    size = bracket_size if bracket_size is not None else next_power_of_two(len(names))
    if not is_power_of_two(size):
        raise ConfigurationError(f"Bracket size {size} is not a power of two.")
    if len(names) > size:
        raise ConfigurationError(
            f"{len(names)} participants do not fit in a bracket of {size}."
        )

    rounds: List[Round] = [round_zero_slots(names, size)]
    length = size // 2
    while length >= 1:
        rounds.append([None] * length)
        length //= 2

    if len(rounds) > 1:
        first_round, second_round = rounds[0], rounds[1]
        for match_index, (first, second) in _pairs(first_round):
            if (first is None) != (second is None):
                second_round[match_index] = first if first is not None else second

    return rounds


def _check_participants(names: List[str]) -> None:
    if not names:
        raise ConfigurationError("A bracket needs at least one participant.")
    seen: Set[str] = set()
    for name in names:
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError(f"Invalid participant name {name!r}.")
        if name in seen:
            raise ConfigurationError(f"Duplicate participant '{name}'.")
        seen.add(name)


def _pairs(slots: Round) -> Iterator[Tuple[int, Tuple[Slot, Slot]]]:
    for position in range(0, len(slots) - 1, 2):
        yield position // 2, (slots[position], slots[position + 1])


def round_name(round_index: int, slot_count: int) -> str:
    return _NAMED_ROUNDS.get(slot_count, f"Round {round_index + 1}")


@dataclass
class BracketState:
    """Everything a running tournament knows about itself."""

    rounds: List[Round]
    participants: List[str]
    hero: str
    following: str
    hero_alive: bool = True
    current_round: int = 0
    seats: SeatMap = field(default_factory=SeatMap)
    winners: Set[str] = field(default_factory=set)
    completed_matches: int = 0

    @property
    def bracket_size(self) -> int:
        return len(self.rounds[0])

    @property
    def last_round(self) -> int:
        return len(self.rounds) - 1


class BracketEngine:
    """Query/command surface over a :class:`BracketState`."""

    def __init__(
        self,
        participants: Sequence[str],
        *,
        hero: str | None = None,
        bracket_size: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.rng = rng or random.Random()
        self._bracket_size = bracket_size
        self.state = self._initial_state(participants, hero)

    def reset(self, participants: Sequence[str], *, hero: str | None = None) -> None:
        """Start a new tournament, dropping seats, winners and progress."""

        self.state = self._initial_state(participants, hero)

    def _initial_state(self, participants: Sequence[str], hero: str | None) -> BracketState:
        names = list(participants)
        rounds = build_bracket(names, self._bracket_size)
        starter = hero if hero is not None else names[0]
        if starter not in names:
            raise ConfigurationError(f"Hero '{starter}' is not among the participants.")
        logger.debug(
            "Built bracket of %d for %d participants (%d rounds), following %s",
            len(rounds[0]),
            len(names),
            len(rounds),
            starter,
        )
        return BracketState(rounds=rounds, participants=names, hero=starter, following=starter)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def following(self) -> str:
        return self.state.following

    @property
    def hero(self) -> str:
        return self.state.hero

    @property
    def hero_alive(self) -> bool:
        return self.state.hero_alive

    @property
    def bracket_size(self) -> int:
        return self.state.bracket_size

    @property
    def current_round_index(self) -> int:
        return self.state.current_round

    @property
    def winners(self) -> frozenset[str]:
        return frozenset(self.state.winners)

    def rounds(self) -> List[Round]:
        return [list(slots) for slots in self.state.rounds]

    # ------------------------------------------------------------------
    # Match location and seating
    # ------------------------------------------------------------------
    def current_match(self) -> Optional[Match]:
        """The unresolved match of the followed participant in this round."""

        state = self.state
        index = state.current_round
        for match_index, (first, second) in _pairs(state.rounds[index]):
            if first is None or second is None:
                continue
            if state.following not in (first, second):
                continue
            if self._next_slot(index, match_index) is not None:
                continue
            return Match(round_index=index, match_index=match_index, first=first, second=second)
        return None

    def has_match_to_fight(self) -> bool:
        return self.current_match() is not None

    def has_followed_character_bye(self) -> Optional[ByeInfo]:
        following = self.state.following
        for _, (first, second) in _pairs(self.state.rounds[self.state.current_round]):
            if first == following and second is None:
                return ByeInfo(character=first, position=Side.LEFT)
            if second == following and first is None:
                return ByeInfo(character=second, position=Side.RIGHT)
        return None

    def seats_for(self, match: Match) -> Seating:
        return self.state.seats.seat(match, self.state.following)

    def side_of(self, name: str) -> Optional[Side]:
        return self.state.seats.side_of(name)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def apply_result(self, left_won: bool) -> MatchResult:
        """Record the outcome of the watched match."""

        match = self.current_match()
        if match is None:
            raise InvalidStateError(
                f"No match for '{self.state.following}' is waiting in round "
                f"{self.state.current_round + 1}."
            )

        state = self.state
        seating = self.seats_for(match)
        if left_won:
            winner, loser = seating.left, seating.right
        else:
            winner, loser = seating.right, seating.left

        if match.round_index < state.last_round:
            state.rounds[match.round_index + 1][match.match_index] = winner
        state.winners.add(winner)
        state.completed_matches += 1

        following_changed = loser == state.following
        hero_eliminated = loser == state.hero
        if hero_eliminated:
            state.hero_alive = False
        if following_changed:
            state.following = winner
            logger.info("%s eliminated %s; now following %s", winner, loser, winner)
        else:
            logger.debug("%s beat %s", winner, loser)

        return MatchResult(
            match=match,
            winner=winner,
            loser=loser,
            following_changed=following_changed,
            hero_eliminated=hero_eliminated,
        )

    def simulate_remaining_matches(self) -> int:
        """Settle every other match of the current round by a coin flip.

        Lone occupants move forward as byes. The followed participant's
        match is left for :meth:`apply_result`. Returns the number of
        matches decided.
        """

        state = self.state
        index = state.current_round
        if index >= state.last_round:
            return 0

        next_round = state.rounds[index + 1]
        decided = 0
        for match_index, (first, second) in _pairs(state.rounds[index]):
            if next_round[match_index] is not None:
                continue
            if first is None and second is None:
                continue
            if first is None or second is None:
                next_round[match_index] = first if first is not None else second
                continue
            if state.following in (first, second):
                continue
            winner = first if self.rng.random() < 0.5 else second
            next_round[match_index] = winner
            state.winners.add(winner)
            state.completed_matches += 1
            decided += 1

        if decided:
            logger.debug("Simulated %d matches in round %d", decided, index + 1)
        return decided

    def advance_round(self) -> bool:
        """Close the current round if every pair has a result."""

        self.simulate_remaining_matches()

        state = self.state
        index = state.current_round
        if index >= state.last_round:
            return False

        next_round = state.rounds[index + 1]
        for match_index, (first, second) in _pairs(state.rounds[index]):
            if (first is not None or second is not None) and next_round[match_index] is None:
                logger.debug("Round %d still waits on match %d", index + 1, match_index)
                return False

        state.current_round += 1
        logger.info("Advanced to %s", self.round_info().name)
        return True

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def round_info(self) -> RoundInfo:
        state = self.state
        slots = state.rounds[state.current_round]
        return RoundInfo(
            current=state.current_round + 1,
            total=len(state.rounds),
            name=round_name(state.current_round, len(slots)),
            participants_remaining=sum(1 for slot in slots if slot is not None),
        )

    def is_complete(self) -> bool:
        state = self.state
        return state.current_round >= state.last_round and state.rounds[-1][0] is not None

    def winner(self) -> Optional[str]:
        if self.is_complete():
            return self.state.rounds[-1][0]
        return None

    def is_ever_winner(self, name: str) -> bool:
        return name in self.state.winners

    def stats(self) -> BracketStats:
        info = self.round_info()
        return BracketStats(
            current_round=info.current,
            total_rounds=info.total,
            round_name=info.name,
            participants_left=info.participants_remaining,
            matches_completed=self.state.completed_matches,
            total_matches=len(self.state.participants) - 1,
        )

    def snapshot(self) -> Dict[str, object]:
        """Plain-data view of the bracket, ready for ``json.dump``."""

        match = self.current_match()
        return {
            "bracket_size": self.bracket_size,
            "rounds": self.rounds(),
            "round_info": asdict(self.round_info()),
            "current_match": asdict(match) if match is not None else None,
            "following": self.state.following,
            "hero": self.state.hero,
            "hero_alive": self.state.hero_alive,
            "winners": sorted(self.state.winners),
            "sides": self.state.seats.as_dict(),
            "stats": asdict(self.stats()),
            "champion": self.winner(),
        }

    def _next_slot(self, round_index: int, match_index: int) -> Slot:
        if round_index >= self.state.last_round:
            return None
        return self.state.rounds[round_index + 1][match_index]


__all__ = ["BracketEngine", "BracketState", "build_bracket", "round_name"]
