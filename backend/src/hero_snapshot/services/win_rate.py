"""Win rate aggregation over skill brackets."""

from decimal import ROUND_HALF_UP, Decimal

from hero_snapshot.errors import NoDataError
from hero_snapshot.models.hero import HeroRecord

TWO_PLACES = Decimal("0.01")


def compute_win_rate(hero: HeroRecord) -> Decimal:
    """Win rate across all brackets as a percentage with two decimals.

    Raises:
        NoDataError: The hero has zero picks in every bracket.
    """
    total_picks = hero.total_picks
    if total_picks == 0:
        raise NoDataError(hero.id)
    percent = Decimal(100 * hero.total_wins) / Decimal(total_picks)
    return percent.quantize(TWO_PLACES, rounding=ROUND_HALF_UP)
