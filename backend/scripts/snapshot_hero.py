#!/usr/bin/env python3
"""
Print a hero meta snapshot to the terminal.

Usage:
    python backend/scripts/snapshot_hero.py "anti-mage"
    python backend/scripts/snapshot_hero.py --random
    python backend/scripts/snapshot_hero.py io --json
"""

import argparse
import asyncio
import json
import sys

from hero_snapshot.config import settings
from hero_snapshot.errors import HeroNotFoundError, SnapshotError
from hero_snapshot.models.item import GamePhase
from hero_snapshot.services.opendota_client import OpenDotaClient
from hero_snapshot.services.profile_service import ProfileService
from hero_snapshot.services.reference_cache import load_snapshot_context


async def run(query: str | None, random_pick: bool, as_json: bool) -> int:
    client = OpenDotaClient(
        base_url=settings.opendota_base_url,
        timeout=settings.request_timeout,
    )
    try:
        context = await load_snapshot_context(client)
        service = ProfileService(
            context, client, strict_item_lists=settings.strict_item_lists
        )
        profile = await service.build_profile(query=query, random_pick=random_pick)
    except HeroNotFoundError:
        print("Could not find that hero.", file=sys.stderr)
        return 1
    except SnapshotError as e:
        print(f"Snapshot failed: {e}", file=sys.stderr)
        return 2
    finally:
        await client.close()

    data = profile.to_dict(cdn_base_url=settings.cdn_base_url)
    if as_json:
        print(json.dumps(data, indent=2))
        return 0

    hero = data["hero"]
    win_rate = data["win_rate_percent"]
    print(f"{hero['display_name']} ({hero['attribute_label']})")
    print(f"Winrate: {win_rate}%" if win_rate is not None else "Winrate: no data")
    for phase in GamePhase:
        names = [item["display_name"] or item["name"] for item in data["items"][phase.value]]
        print(f"  {phase.value.title():<6} {', '.join(names)}")
    return 0


def main():
    parser = argparse.ArgumentParser(description="Show a Dota 2 hero meta snapshot")
    parser.add_argument("query", nargs="?", default="", help="Hero name or part of it")
    parser.add_argument("--random", action="store_true", help="Pick a random hero")
    parser.add_argument("--json", action="store_true", help="Print the raw JSON profile")
    args = parser.parse_args()

    sys.exit(asyncio.run(run(args.query, args.random, args.json)))


if __name__ == "__main__":
    main()
