"""Hero profile view model returned by the profile pipeline."""

from dataclasses import dataclass, field
from decimal import Decimal

from hero_snapshot.models.hero import HeroMetadata, HeroRecord
from hero_snapshot.models.item import GamePhase, ItemMetadata

DEFAULT_CDN_BASE_URL = "https://cdn.dota2.com/"


def cdn_url(base_url: str, path: str) -> str:
    """Join a CDN base with an image path from the reference tables."""
    return base_url.rstrip("/") + "/" + path.lstrip("/")


@dataclass(frozen=True)
class HeroProfile:
    """Snapshot of one hero: identity, win rate and top items per phase."""

    hero: HeroRecord
    metadata: HeroMetadata
    win_rate_percent: Decimal | None  # None when the hero has no recorded picks
    items: dict[GamePhase, tuple[ItemMetadata, ...]] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.hero.localized_name.upper()

    def items_for(self, phase: GamePhase) -> tuple[ItemMetadata, ...]:
        return self.items.get(phase, ())

    def to_dict(self, cdn_base_url: str = DEFAULT_CDN_BASE_URL) -> dict:
        """Serialize to dictionary for JSON response."""
        attribute = self.hero.primary_attribute
        return {
            "hero": {
                "id": self.hero.id,
                "name": self.hero.internal_name,
                "localized_name": self.hero.localized_name,
                "display_name": self.display_name,
                "primary_attribute": attribute.value,
                "attribute_label": attribute.display_name,
                "attribute_icon": attribute.icon_path,
                "image_url": cdn_url(cdn_base_url, self.metadata.img),
            },
            "win_rate_percent": (
                f"{self.win_rate_percent:.2f}"
                if self.win_rate_percent is not None
                else None
            ),
            "items": {
                phase.value: [
                    {
                        "id": item.id,
                        "name": item.name,
                        "display_name": item.display_name,
                        "image_url": cdn_url(cdn_base_url, item.img),
                    }
                    for item in self.items_for(phase)
                ]
                for phase in GamePhase
            },
        }
