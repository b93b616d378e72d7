"""Free-text hero lookup against the roster."""

from typing import Iterable

from hero_snapshot.errors import HeroNotFoundError
from hero_snapshot.models.hero import HeroRecord

# "io" is a substring of several hero names; it only ever means Io itself.
EXACT_MATCH_QUERIES = frozenset({"io"})


def matches_query(hero: HeroRecord, query: str) -> bool:
    """Check whether a hero matches a lower-cased, trimmed query."""
    localized = hero.localized_name.lower()
    if query in EXACT_MATCH_QUERIES:
        return localized == query
    return query in localized or query in hero.short_name


def resolve_hero(query: str, roster: Iterable[HeroRecord]) -> HeroRecord:
    """Return the first hero in roster order matching the query.

    Args:
        query: Search text, already lower-cased and trimmed
        roster: Heroes in load order

    Raises:
        HeroNotFoundError: Empty query or no hero matched.
    """
    if query:
        for hero in roster:
            if matches_query(hero, query):
                return hero
    raise HeroNotFoundError(query)
