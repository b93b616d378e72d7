"""Top item selection from raw purchase counts.

Per phase: rank ids by purchase count, resolve them to item records,
prefer recipe-built and always-interesting items, then pad from the
unfiltered ranking so the display still shows a full row.
"""

import logging
from typing import Iterable, Sequence

from hero_snapshot.errors import InsufficientDataError
from hero_snapshot.models.item import GamePhase, ItemMetadata, PopularityPayload
from hero_snapshot.services.reference_cache import ReferenceCache

logger = logging.getLogger(__name__)

TOP_ITEM_COUNT = 5

# Blink Dagger, Bottle, Aghanim's Shard
ALWAYS_INTERESTING_ITEM_IDS = frozenset({1, 41, 609})


def rank_item_counts(counts: dict[int, int]) -> list[tuple[int, int]]:
    """Sort (item_id, count) pairs by count descending.

    Sort is stable, so ties keep the iteration order of ``counts``.
    """
    return sorted(counts.items(), key=lambda pair: pair[1], reverse=True)


def resolve_ranked_items(
    ranked: Iterable[tuple[int, int]],
    reference: ReferenceCache,
) -> list[ItemMetadata]:
    """Resolve ranked ids to item records, dropping unknown ids."""
    items = []
    for item_id, _count in ranked:
        item = reference.resolve_item(item_id)
        if item is not None:
            items.append(item)
    return items


def is_interesting(item: ItemMetadata) -> bool:
    """Recipe-built items and a few staple purchases are worth showing."""
    return item.id in ALWAYS_INTERESTING_ITEM_IDS or item.is_recipe_built


def pad_from_pool(
    selected: Sequence[ItemMetadata],
    pool: Sequence[ItemMetadata],
    size: int,
) -> list[ItemMetadata]:
    """Append the first pool items not already selected until ``size`` is reached."""
    result = list(selected)
    seen = {item.id for item in result}
    for item in pool:
        if len(result) >= size:
            break
        if item.id not in seen:
            result.append(item)
            seen.add(item.id)
    return result


def select_top_items(
    counts: dict[int, int],
    reference: ReferenceCache,
    size: int = TOP_ITEM_COUNT,
    phase: str = "",
    strict: bool = False,
) -> list[ItemMetadata]:
    """Pick the top ``size`` items for one phase.

    Args:
        counts: Item id -> purchase count
        reference: Reference tables used to resolve ids
        size: Number of items to return
        phase: Phase label, used in log and error messages
        strict: Raise instead of returning a short list

    Returns:
        Up to ``size`` items; fewer only when fewer resolve at all.

    Raises:
        InsufficientDataError: ``strict`` is set and fewer than ``size``
            items could be resolved.
    """
    pool = resolve_ranked_items(rank_item_counts(counts), reference)
    filtered = [item for item in pool if is_interesting(item)]
    top = pad_from_pool(filtered, pool, size)[:size]

    if len(top) < size:
        if strict:
            raise InsufficientDataError(phase, len(top), size)
        logger.warning(
            f"Only {len(top)} resolvable items for {phase or 'phase'}, expected {size}"
        )
    return top


def build_phase_items(
    payload: PopularityPayload,
    reference: ReferenceCache,
    strict: bool = False,
) -> dict[GamePhase, tuple[ItemMetadata, ...]]:
    """Run top item selection for every game phase."""
    return {
        phase: tuple(
            select_top_items(
                payload.counts_for(phase),
                reference,
                phase=phase.value,
                strict=strict,
            )
        )
        for phase in GamePhase
    }
