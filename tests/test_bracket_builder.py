"""Tests for bracket construction and the initial bye pass."""

from __future__ import annotations

import pytest

from rngarena.domain import ConfigurationError
from rngarena.tournament import BracketEngine, build_bracket


def _names(count: int) -> list[str]:
    return [f"Fighter {index:03d}" for index in range(count)]


@pytest.mark.parametrize("count", [1, 2, 3, 5, 8, 17, 64, 100, 128])
def test_round_lengths_halve_down_to_one(count: int) -> None:
    rounds = build_bracket(_names(count))
    assert len(rounds[-1]) == 1
    for current, following in zip(rounds, rounds[1:]):
        assert len(following) * 2 == len(current)


def test_hundred_participants_fill_a_bracket_of_128() -> None:
    names = _names(100)
    rounds = build_bracket(names, bracket_size=128)

    assert len(rounds) == 8
    assert len(rounds[0]) == 128
    assert rounds[0].count(None) == 28
    for name in names:
        assert rounds[0].count(name) == 1

    byes = [slot for slot in rounds[1] if slot is not None]
    assert len(byes) == 28
    assert rounds[1].count(None) == 36
    assert all(slot is None for slot in rounds[1][:36])


@pytest.mark.parametrize("count", [3, 5, 6, 7, 9, 33, 100, 127])
def test_bye_count_is_bracket_size_minus_participants(count: int) -> None:
    rounds = build_bracket(_names(count))
    size = len(rounds[0])
    lone = 0
    for position in range(0, size, 2):
        first, second = rounds[0][position], rounds[0][position + 1]
        if (first is None) != (second is None):
            lone += 1
            assert rounds[1][position // 2] == (first or second)
    assert lone == size - count


def test_bye_is_not_a_win() -> None:
    engine = BracketEngine(_names(100), bracket_size=128)
    bye_participant = engine.rounds()[1][36]
    assert bye_participant is not None
    assert not engine.is_ever_winner(bye_participant)
    assert engine.winners == frozenset()


def test_input_order_is_kept() -> None:
    names = _names(6)
    rounds = build_bracket(names)
    assert rounds[0] == names[:4] + [names[4], None, names[5], None]


def test_oversized_bracket_gives_everyone_a_bye() -> None:
    names = _names(4)
    rounds = build_bracket(names, bracket_size=8)
    assert rounds[0] == [names[0], None, names[1], None, names[2], None, names[3], None]
    assert rounds[1] == names


def test_single_participant_is_champion_immediately() -> None:
    engine = BracketEngine(["Lone Wolf"])
    assert engine.is_complete()
    assert engine.winner() == "Lone Wolf"
    assert engine.current_match() is None


def test_empty_input_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_bracket([])


def test_duplicate_participants_rejected() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        build_bracket(["Sir Lagalot", "Lord Boulder", "Sir Lagalot"])
    assert "Sir Lagalot" in str(excinfo.value)


def test_too_many_participants_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_bracket(_names(9), bracket_size=8)


def test_bracket_size_must_be_power_of_two() -> None:
    with pytest.raises(ConfigurationError):
        build_bracket(_names(4), bracket_size=6)


def test_blank_names_rejected() -> None:
    with pytest.raises(ConfigurationError):
        build_bracket(["Sir Lagalot", "  "])


def test_hero_must_be_a_participant() -> None:
    with pytest.raises(ConfigurationError):
        BracketEngine(_names(4), hero="Daring Hero")
