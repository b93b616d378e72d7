"""Immutable snapshot context: reference tables and hero roster.

Built once at startup and passed by reference into every pipeline call.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from hero_snapshot.errors import IntegrityError, TransportError
from hero_snapshot.models.hero import HeroMetadata, HeroRecord
from hero_snapshot.models.item import ItemMetadata
from hero_snapshot.services.opendota_client import DatasetSource

logger = logging.getLogger(__name__)


def _frozen(mapping: dict) -> Mapping:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class ReferenceCache:
    """Read-only lookup tables for heroes and items."""

    heroes: Mapping[int, HeroMetadata] = field(default_factory=lambda: _frozen({}))
    items: Mapping[str, ItemMetadata] = field(default_factory=lambda: _frozen({}))
    item_ids: Mapping[int, str] = field(default_factory=lambda: _frozen({}))

    @classmethod
    def from_tables(
        cls,
        heroes: dict[str, Any],
        items: dict[str, Any],
        item_ids: dict[str, Any],
    ) -> "ReferenceCache":
        """Build the cache from raw OpenDota constants tables."""
        return cls(
            heroes=_frozen(parse_hero_table(heroes)),
            items=_frozen(parse_item_table(items)),
            item_ids=_frozen(parse_item_id_table(item_ids)),
        )

    def hero_metadata(self, hero_id: int) -> HeroMetadata:
        """Get metadata for a roster hero.

        Raises:
            IntegrityError: The hero id is missing from the reference table.
        """
        try:
            return self.heroes[hero_id]
        except KeyError:
            raise IntegrityError(
                f"Hero {hero_id} is in the roster but not in the hero reference table"
            ) from None

    def resolve_item(self, item_id: int) -> ItemMetadata | None:
        """Resolve an item id through the id index and the item table.

        Returns None when the id has no name, or the name has no metadata.
        """
        name = self.item_ids.get(item_id)
        if name is None:
            logger.debug(f"Dropping item {item_id}: not in item id index")
            return None
        item = self.items.get(name)
        if item is None:
            logger.debug(f"Dropping item {item_id}: no metadata for {name!r}")
            return None
        return item


@dataclass(frozen=True)
class SnapshotContext:
    """Process-wide state shared by every profile request."""

    reference: ReferenceCache
    roster: tuple[HeroRecord, ...] = ()


def parse_hero_table(raw: dict[str, Any]) -> dict[int, HeroMetadata]:
    heroes: dict[int, HeroMetadata] = {}
    for key, entry in raw.items():
        try:
            hero_id = int(entry.get("id", key))
            heroes[hero_id] = HeroMetadata(
                id=hero_id,
                img=str(entry["img"]),
                icon=entry.get("icon"),
                name=entry.get("name"),
                localized_name=entry.get("localized_name"),
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise TransportError(f"Malformed hero constant {key!r}: {e!r}") from e
    return heroes


def parse_item_table(raw: dict[str, Any]) -> dict[str, ItemMetadata]:
    items: dict[str, ItemMetadata] = {}
    for name, entry in raw.items():
        try:
            components = entry.get("components")
            cost = entry.get("cost")
            items[name] = ItemMetadata(
                id=int(entry["id"]),
                name=name,
                img=str(entry["img"]),
                components=tuple(components) if components else None,
                display_name=entry.get("dname"),
                cost=int(cost) if cost is not None else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise TransportError(f"Malformed item constant {name!r}: {e!r}") from e
    return items


def parse_item_id_table(raw: dict[str, Any]) -> dict[int, str]:
    try:
        return {int(item_id): str(name) for item_id, name in raw.items()}
    except (TypeError, ValueError) as e:
        raise TransportError(f"Malformed item id table: {e}") from e


async def load_snapshot_context(source: DatasetSource) -> SnapshotContext:
    """Fetch reference tables and the roster once and freeze them."""
    heroes = await source.fetch_reference_table("heroes")
    items = await source.fetch_reference_table("items")
    item_ids = await source.fetch_reference_table("item_ids")
    roster = await source.fetch_hero_roster()

    reference = ReferenceCache.from_tables(heroes, items, item_ids)
    logger.info(
        f"Loaded snapshot context: {len(roster)} heroes in roster, "
        f"{len(reference.heroes)} hero constants, {len(reference.items)} items, "
        f"{len(reference.item_ids)} item ids"
    )
    return SnapshotContext(reference=reference, roster=tuple(roster))
