"""Participant ordering and round-zero layout."""

from __future__ import annotations

import random
from typing import List, Sequence

from rngarena.domain import ConfigurationError, Slot


def is_power_of_two(value: int) -> bool:
    return value >= 1 and value & (value - 1) == 0


def next_power_of_two(count: int) -> int:
    """Return the smallest power of two that is >= *count*."""

    if count < 1:
        raise ConfigurationError("A bracket needs at least one participant.")
    size = 1
    while size < count:
        size *= 2
    return size


def seeded_order(participants: Sequence[str], hero: str, rng: random.Random) -> List[str]:
    """Put *hero* first and shuffle everyone else with *rng*."""

    if hero not in participants:
        raise ConfigurationError(f"Hero '{hero}' is not among the participants.")
    rest = [name for name in participants if name != hero]
    rng.shuffle(rest)
    return [hero, *rest]


def round_zero_slots(participants: Sequence[str], bracket_size: int) -> List[Slot]:
    """Lay out round zero, keeping the input order.

    Full pairs are filled first and the remaining participants each get a
    pair of their own, in the even slot, so the bye count is
    ``bracket_size - len(participants)``. An oversized bracket (fewer
    participants than pairs) gives one participant to each leading pair.
    """

    count = len(participants)
    pairs = bracket_size // 2
    slots: List[Slot] = [None] * bracket_size

    if count <= pairs:
        for index, name in enumerate(participants):
            slots[2 * index] = name
        return slots

    full_pairs = count - pairs
    for index, name in enumerate(participants):
        if index < 2 * full_pairs:
            slots[index] = name
        else:
            slots[2 * full_pairs + 2 * (index - 2 * full_pairs)] = name
    return slots


__all__ = ["is_power_of_two", "next_power_of_two", "seeded_order", "round_zero_slots"]
