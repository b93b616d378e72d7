"""Shared fixtures: a small roster, reference tables and a fake upstream."""

import pytest

from hero_snapshot.errors import TransportError
from hero_snapshot.models.item import PopularityPayload
from hero_snapshot.services.opendota_client import parse_hero_record, parse_popularity
from hero_snapshot.services.reference_cache import ReferenceCache, SnapshotContext


def hero_stats(hero_id, name, localized_name, primary_attr, picks, wins):
    """Raw /heroStats entry with per-bracket counters."""
    entry = {
        "id": hero_id,
        "name": name,
        "localized_name": localized_name,
        "primary_attr": primary_attr,
    }
    for bracket, (p, w) in enumerate(zip(picks, wins), start=1):
        entry[f"{bracket}_pick"] = p
        entry[f"{bracket}_win"] = w
    return entry


RAW_HERO_STATS = [
    hero_stats(
        1, "npc_dota_hero_antimage", "Anti-Mage", "agi",
        [100, 150, 200, 100, 150, 100, 100, 100],
        [50, 80, 110, 50, 80, 50, 55, 55],
    ),
    hero_stats(2, "npc_dota_hero_axe", "Axe", "str", [10] * 8, [5] * 8),
    hero_stats(26, "npc_dota_hero_lion", "Lion", "int", [20] * 8, [9] * 8),
    hero_stats(91, "npc_dota_hero_wisp", "Io", "all", [4] * 8, [3] * 8),
    hero_stats(135, "npc_dota_hero_dawnbreaker", "Dawnbreaker", "str", [0] * 8, [0] * 8),
]

RAW_HERO_CONSTANTS = {
    str(entry["id"]): {
        "id": entry["id"],
        "name": entry["name"],
        "localized_name": entry["localized_name"],
        "img": f"/apps/dota2/images/dota_react/heroes/{entry['name'][14:]}.png?",
        "icon": f"/apps/dota2/images/dota_react/heroes/icons/{entry['name'][14:]}.png?",
    }
    for entry in RAW_HERO_STATS
}

RAW_ITEM_CONSTANTS = {
    "blink": {"id": 1, "img": "/items/blink.png", "dname": "Blink Dagger", "cost": 2250, "components": None},
    "bottle": {"id": 41, "img": "/items/bottle.png", "dname": "Bottle", "cost": 675, "components": None},
    "aghanims_shard": {"id": 609, "img": "/items/shard.png", "dname": "Aghanim's Shard", "cost": 1400},
    "tango": {"id": 44, "img": "/items/tango.png", "dname": "Tango", "cost": 90, "components": None},
    "branches": {"id": 16, "img": "/items/branches.png", "dname": "Iron Branch", "cost": 50, "components": None},
    "magic_wand": {"id": 36, "img": "/items/magic_wand.png", "dname": "Magic Wand", "components": ["branches", "branches", "magic_stick"]},
    "power_treads": {"id": 63, "img": "/items/power_treads.png", "dname": "Power Treads", "components": ["boots", "gloves", "belt_of_strength"]},
    "bfury": {"id": 145, "img": "/items/bfury.png", "dname": "Battle Fury", "components": ["quelling_blade", "demon_edge", "ring_of_health"]},
    "manta": {"id": 147, "img": "/items/manta.png", "dname": "Manta Style", "components": ["yasha", "ultimate_orb"]},
    "boots": {"id": 29, "img": "/items/boots.png", "dname": "Boots of Speed", "components": []},
    "quelling_blade": {"id": 11, "img": "/items/quelling_blade.png", "dname": "Quelling Blade"},
    "plain_item": {"id": 101, "img": "/items/plain.png"},
    "recipe_item": {"id": 102, "img": "/items/recipe.png", "components": ["x", "y"]},
    "staple_item": {"id": 103, "img": "/items/staple.png"},
}

RAW_ITEM_IDS = {str(entry["id"]): name for name, entry in RAW_ITEM_CONSTANTS.items()}
# Known to the id index but missing from the item table
RAW_ITEM_IDS["999"] = "retired_item"

RAW_POPULARITY = {
    "start_game_items": {"44": 900, "16": 800},
    "early_game_items": {"44": 500, "29": 400, "36": 300, "11": 250, "63": 200, "12345": 150, "999": 100},
    "mid_game_items": {"145": 300, "147": 120, "1": 80, "41": 10},
    "late_game_items": {"609": 90, "147": 30},
}


@pytest.fixture
def raw_hero_stats():
    return [dict(entry) for entry in RAW_HERO_STATS]


@pytest.fixture
def roster():
    return tuple(parse_hero_record(entry) for entry in RAW_HERO_STATS)


@pytest.fixture
def reference():
    return ReferenceCache.from_tables(RAW_HERO_CONSTANTS, RAW_ITEM_CONSTANTS, RAW_ITEM_IDS)


@pytest.fixture
def context(reference, roster):
    return SnapshotContext(reference=reference, roster=roster)


class FakeDatasetSource:
    """In-memory upstream recording which heroes were fetched."""

    def __init__(self, popularity=None, fail=False):
        self.popularity = popularity if popularity is not None else RAW_POPULARITY
        self.fail = fail
        self.popularity_requests: list[int] = []

    async def fetch_hero_roster(self):
        return [parse_hero_record(entry) for entry in RAW_HERO_STATS]

    async def fetch_reference_table(self, kind):
        return {
            "heroes": RAW_HERO_CONSTANTS,
            "items": RAW_ITEM_CONSTANTS,
            "item_ids": RAW_ITEM_IDS,
        }[kind]

    async def fetch_popularity(self, hero_id) -> PopularityPayload:
        self.popularity_requests.append(hero_id)
        if self.fail:
            raise TransportError("upstream unavailable")
        return parse_popularity(hero_id, self.popularity)


@pytest.fixture
def source():
    return FakeDatasetSource()
