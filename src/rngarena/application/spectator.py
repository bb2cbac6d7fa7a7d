"""Walks a tournament from the spectator's seat."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from rngarena.domain import (
    BracketStats,
    ByeInfo,
    InvalidStateError,
    Match,
    MatchResult,
    RoundInfo,
    Seating,
)
from rngarena.tournament import BracketEngine

logger = logging.getLogger(__name__)

ResolveFn = Callable[[Match, Seating], bool]


def coin_flip_resolver(rng: random.Random) -> ResolveFn:
    """Resolver that lets the left side win half of the time."""

    def _resolve(match: Match, seating: Seating) -> bool:
        return rng.random() < 0.5

    return _resolve


@dataclass(frozen=True)
class WatchedMatch:
    round: RoundInfo
    seating: Seating
    result: MatchResult


@dataclass(frozen=True)
class ByeRecord:
    round: RoundInfo
    bye: ByeInfo


@dataclass
class SpectatorRunResult:
    watched: List[WatchedMatch] = field(default_factory=list)
    byes: List[ByeRecord] = field(default_factory=list)
    champion: Optional[str] = None
    hero_alive: bool = True
    stats: Optional[BracketStats] = None


class SpectatorSession:
    """Feed watched matches to a resolver and keep the bracket moving.

    Whenever the followed participant has nothing to fight, whether because
    of a bye or because their match is already settled, the round is
    advanced before looking again.
    """

    def __init__(self, engine: BracketEngine, resolve_fn: ResolveFn) -> None:
        self.engine = engine
        self.resolve_fn = resolve_fn
        self.byes: List[ByeRecord] = []

    def next_match(self) -> Optional[Match]:
        """Advance through byes and settled rounds to the next watched match."""

        engine = self.engine
        while not engine.is_complete():
            match = engine.current_match()
            if match is not None:
                return match

            bye = engine.has_followed_character_bye()
            if bye is not None:
                record = ByeRecord(round=engine.round_info(), bye=bye)
                self.byes.append(record)
                logger.info("%s has a bye in %s", bye.character, record.round.name)

            if not engine.advance_round():
                raise InvalidStateError(
                    f"Bracket stalled in round {engine.current_round_index + 1}: "
                    f"nothing to watch for '{engine.following}' and the round cannot close."
                )
        return None

    def play_next(self) -> Optional[WatchedMatch]:
        match = self.next_match()
        if match is None:
            return None
        info = self.engine.round_info()
        seating = self.engine.seats_for(match)
        left_won = self.resolve_fn(match, seating)
        result = self.engine.apply_result(left_won)
        return WatchedMatch(round=info, seating=seating, result=result)

    def run(self) -> SpectatorRunResult:
        outcome = SpectatorRunResult()
        while True:
            watched = self.play_next()
            if watched is None:
                break
            outcome.watched.append(watched)

        outcome.byes = list(self.byes)
        outcome.champion = self.engine.winner()
        outcome.hero_alive = self.engine.hero_alive
        outcome.stats = self.engine.stats()
        logger.info("Tournament complete, champion %s", outcome.champion)
        return outcome


__all__ = [
    "ByeRecord",
    "ResolveFn",
    "SpectatorRunResult",
    "SpectatorSession",
    "WatchedMatch",
    "coin_flip_resolver",
]
