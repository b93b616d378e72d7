"""Item reference and item popularity models."""

from dataclasses import dataclass, field
from enum import Enum


class GamePhase(str, Enum):
    """Temporal segments of a match used to group item purchases."""

    EARLY = "early"
    MID = "mid"
    LATE = "late"

    @property
    def payload_key(self) -> str:
        """Key of this phase in the OpenDota itemPopularity document."""
        return f"{self.value}_game_items"


@dataclass(frozen=True)
class ItemMetadata:
    """Reference data for one item, keyed by its internal name."""

    id: int
    name: str  # internal name, e.g. "blink"
    img: str
    components: tuple[str, ...] | None = None  # set for recipe-built items
    display_name: str | None = None
    cost: int | None = None

    @property
    def is_recipe_built(self) -> bool:
        return bool(self.components)


@dataclass(frozen=True)
class PopularityPayload:
    """Purchase counts per phase for a single hero.

    Each phase maps item id -> purchase count, in the iteration order of the
    source document.
    """

    hero_id: int
    phases: dict[GamePhase, dict[int, int]] = field(default_factory=dict)

    def counts_for(self, phase: GamePhase) -> dict[int, int]:
        return self.phases.get(phase, {})
