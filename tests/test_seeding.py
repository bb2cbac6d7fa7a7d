"""Tests for seeding helpers."""

from __future__ import annotations

import random

import pytest

from rngarena.domain import ConfigurationError
from rngarena.tournament import is_power_of_two, next_power_of_two, round_zero_slots, seeded_order


def test_next_power_of_two() -> None:
    assert next_power_of_two(1) == 1
    assert next_power_of_two(2) == 2
    assert next_power_of_two(3) == 4
    assert next_power_of_two(100) == 128
    assert next_power_of_two(128) == 128


def test_next_power_of_two_rejects_zero() -> None:
    with pytest.raises(ConfigurationError):
        next_power_of_two(0)


def test_is_power_of_two() -> None:
    assert is_power_of_two(1)
    assert is_power_of_two(64)
    assert not is_power_of_two(0)
    assert not is_power_of_two(96)


def test_seeded_order_keeps_hero_first() -> None:
    names = ["Sir Lagalot", "Daring Hero", "Lord Boulder", "Duke Potato", "Count Blizzard"]
    order = seeded_order(names, "Daring Hero", random.Random("7:roster"))
    assert order[0] == "Daring Hero"
    assert sorted(order) == sorted(names)


def test_seeded_order_is_reproducible() -> None:
    names = [f"Fighter {index}" for index in range(20)]
    first = seeded_order(names, "Fighter 5", random.Random(3))
    second = seeded_order(names, "Fighter 5", random.Random(3))
    assert first == second


def test_seeded_order_requires_hero() -> None:
    with pytest.raises(ConfigurationError):
        seeded_order(["A", "B"], "C", random.Random(1))


def test_round_zero_slots_puts_full_pairs_first() -> None:
    assert round_zero_slots(["a", "b", "c"], 4) == ["a", "b", "c", None]
    assert round_zero_slots(["a", "b", "c", "d", "e"], 8) == ["a", "b", "c", None, "d", None, "e", None]
