"""Tests for win rate aggregation."""
from decimal import Decimal

import pytest

from hero_snapshot.errors import NoDataError
from hero_snapshot.models.hero import BracketStats, HeroRecord, PrimaryAttribute
from hero_snapshot.services.win_rate import compute_win_rate


def _hero(picks, wins):
    return HeroRecord(
        id=7,
        internal_name="npc_dota_hero_earthshaker",
        localized_name="Earthshaker",
        primary_attribute=PrimaryAttribute.STRENGTH,
        brackets=tuple(
            BracketStats(bracket=i, picks=p, wins=w)
            for i, (p, w) in enumerate(zip(picks, wins), start=1)
        ),
    )


def test_anti_mage_win_rate(roster):
    """1000 picks / 530 wins across brackets is 53.00%."""
    anti_mage = roster[0]
    assert anti_mage.total_picks == 1000
    assert anti_mage.total_wins == 530
    assert compute_win_rate(anti_mage) == Decimal("53.00")
    assert str(compute_win_rate(anti_mage)) == "53.00"


def test_win_rate_rounds_to_two_places():
    hero = _hero([3] + [0] * 7, [1] + [0] * 7)
    assert compute_win_rate(hero) == Decimal("33.33")


def test_win_rate_rounds_half_up():
    """1 win in 800 picks is exactly 0.125%, which rounds up."""
    assert compute_win_rate(_hero([800] + [0] * 7, [1] + [0] * 7)) == Decimal("0.13")


def test_win_rate_bounds(roster):
    for hero in roster:
        if hero.total_picks:
            assert Decimal(0) <= compute_win_rate(hero) <= Decimal(100)


def test_all_wins_is_one_hundred():
    assert compute_win_rate(_hero([5] * 8, [5] * 8)) == Decimal("100.00")


def test_zero_picks_raises_no_data():
    with pytest.raises(NoDataError) as exc_info:
        compute_win_rate(_hero([0] * 8, [0] * 8))
    assert exc_info.value.hero_id == 7
