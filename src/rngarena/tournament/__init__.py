"""Bracket engine and seeding utilities."""

from __future__ import annotations

from .engine import BracketEngine, BracketState, build_bracket, round_name
from .seating import SeatMap
from .seeding import is_power_of_two, next_power_of_two, round_zero_slots, seeded_order

__all__ = [
    "BracketEngine",
    "BracketState",
    "SeatMap",
    "build_bracket",
    "is_power_of_two",
    "next_power_of_two",
    "round_name",
    "round_zero_slots",
    "seeded_order",
]
