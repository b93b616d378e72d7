"""Hero roster and hero reference models."""

from dataclasses import dataclass
from enum import Enum

# Namespace carried by every internal hero name (e.g. npc_dota_hero_antimage)
HERO_NAME_PREFIX = "npc_dota_hero_"

BRACKET_COUNT = 8


class PrimaryAttribute(str, Enum):
    """Primary attribute of a hero."""

    STRENGTH = "strength"
    AGILITY = "agility"
    INTELLIGENCE = "intelligence"
    UNIVERSAL = "universal"

    @classmethod
    def from_abbreviation(cls, value: str) -> "PrimaryAttribute":
        """Map OpenDota's short attribute code (str/agi/int/all)."""
        return ATTRIBUTE_ABBREVIATIONS[value]

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def icon_path(self) -> str:
        return f"images/{self.value}.png"


ATTRIBUTE_ABBREVIATIONS: dict[str, PrimaryAttribute] = {
    "str": PrimaryAttribute.STRENGTH,
    "agi": PrimaryAttribute.AGILITY,
    "int": PrimaryAttribute.INTELLIGENCE,
    "all": PrimaryAttribute.UNIVERSAL,
}


@dataclass(frozen=True)
class BracketStats:
    """Pick and win counters for one skill bracket."""

    bracket: int  # 1-8
    picks: int
    wins: int


@dataclass(frozen=True)
class HeroRecord:
    """One playable hero with its per-bracket statistics."""

    id: int
    internal_name: str  # npc_dota_hero_*
    localized_name: str
    primary_attribute: PrimaryAttribute
    brackets: tuple[BracketStats, ...] = ()

    @property
    def short_name(self) -> str:
        """Internal name with the namespace prefix stripped."""
        return self.internal_name.removeprefix(HERO_NAME_PREFIX)

    @property
    def total_picks(self) -> int:
        return sum(b.picks for b in self.brackets)

    @property
    def total_wins(self) -> int:
        return sum(b.wins for b in self.brackets)


@dataclass(frozen=True)
class HeroMetadata:
    """Cosmetic reference data for a hero."""

    id: int
    img: str
    icon: str | None = None
    name: str | None = None
    localized_name: str | None = None
