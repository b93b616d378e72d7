"""Builds a hero profile for a search query or a random pick."""

import logging
import random
from typing import Optional

from hero_snapshot.errors import HeroNotFoundError, NoDataError
from hero_snapshot.models.hero import HeroRecord
from hero_snapshot.models.profile import HeroProfile
from hero_snapshot.services.hero_resolver import resolve_hero
from hero_snapshot.services.item_pipeline import build_phase_items
from hero_snapshot.services.opendota_client import DatasetSource
from hero_snapshot.services.reference_cache import SnapshotContext
from hero_snapshot.services.win_rate import compute_win_rate

logger = logging.getLogger(__name__)


def normalize_query(query: Optional[str]) -> str:
    return (query or "").strip().lower()


class ProfileService:
    """Composes hero lookup, win rate and item selection into a HeroProfile."""

    def __init__(
        self,
        context: SnapshotContext,
        source: DatasetSource,
        rng: Optional[random.Random] = None,
        strict_item_lists: bool = False,
    ):
        """Initialize the profile service.

        Args:
            context: Reference tables and roster loaded at startup
            source: Upstream used to fetch item popularity per request
            rng: Random source for random picks (seeded in tests)
            strict_item_lists: Fail instead of returning short item lists
        """
        self.context = context
        self.source = source
        self.rng = rng or random.Random()
        self.strict_item_lists = strict_item_lists

    def pick_random_query(self) -> str:
        """Choose a roster hero uniformly and return its resolver query."""
        roster = self.context.roster
        if not roster:
            raise HeroNotFoundError("")
        # randrange excludes the upper bound, so the index is always in range
        hero = roster[self.rng.randrange(len(roster))]
        return hero.short_name

    async def build_profile(
        self,
        query: Optional[str] = None,
        random_pick: bool = False,
    ) -> HeroProfile:
        """Resolve a hero and assemble its profile.

        An empty query is handled the same way as ``random_pick=True``.

        Raises:
            HeroNotFoundError: No hero matched the query.
            IntegrityError: The resolved hero has no reference metadata.
            TransportError: The popularity fetch failed.
            InsufficientDataError: Strict mode and a phase has < 5 items.
        """
        normalized = normalize_query(query)
        if random_pick or not normalized:
            normalized = self.pick_random_query()
            logger.info(f"Random pick: {normalized}")

        hero = resolve_hero(normalized, self.context.roster)
        metadata = self.context.reference.hero_metadata(hero.id)
        win_rate = self._win_rate(hero)

        payload = await self.source.fetch_popularity(hero.id)
        items = build_phase_items(
            payload, self.context.reference, strict=self.strict_item_lists
        )
        return HeroProfile(
            hero=hero,
            metadata=metadata,
            win_rate_percent=win_rate,
            items=items,
        )

    def _win_rate(self, hero: HeroRecord):
        try:
            return compute_win_rate(hero)
        except NoDataError:
            logger.warning(f"No recorded picks for {hero.localized_name}, win rate unavailable")
            return None
