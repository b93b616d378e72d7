"""Data models for the hero snapshot."""

from hero_snapshot.models.hero import (
    BracketStats,
    HeroMetadata,
    HeroRecord,
    PrimaryAttribute,
)
from hero_snapshot.models.item import GamePhase, ItemMetadata, PopularityPayload
from hero_snapshot.models.profile import HeroProfile

__all__ = [
    "BracketStats",
    "HeroMetadata",
    "HeroRecord",
    "PrimaryAttribute",
    "GamePhase",
    "ItemMetadata",
    "PopularityPayload",
    "HeroProfile",
]
