"""
Find item ids in a player's match history that the catalog doesn't know.

Prints a ready-to-paste ITEM_IDS stub for each new id.

Usage:
    cd backend
    python -m scripts.find_unknown_items 76561198015042012
"""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from data.catalog import Catalog, Fallback
from services.players import fetch_match_history
from services.steam import to_account_id
from utils import close_session


def unknown_item_ids(matches: list[dict], catalog: Catalog) -> list[int]:
    found: set[int] = set()
    for match in matches:
        for entry in match.get("items") or []:
            raw = entry.get("item_id") if isinstance(entry, dict) else entry
            try:
                item_id = int(raw)
            except (TypeError, ValueError):
                continue
            if isinstance(catalog.resolve_item(item_id), Fallback):
                found.add(item_id)
    return sorted(found)


async def run(steam_ids: list[str]) -> int:
    catalog = Catalog()
    unknown: set[int] = set()
    try:
        for steam_id in steam_ids:
            matches = await fetch_match_history(to_account_id(steam_id))
            if matches is None:
                print(f"[find_unknown_items] Could not fetch matches for {steam_id}")
                continue
            ids = unknown_item_ids(matches, catalog)
            print(f"[find_unknown_items] {steam_id}: {len(matches)} matches, {len(ids)} unknown item ids")
            unknown.update(ids)
    finally:
        await close_session()

    for item_id in sorted(unknown):
        print(f'    ({item_id}, "???"),  # {catalog.resolve_item_name(item_id)}')
    print(f"\n{len(unknown)} unknown item ids")
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List unmapped item ids from match histories")
    parser.add_argument("steam_ids", nargs="+", help="SteamID64 or account ids to scan")
    args = parser.parse_args(argv)
    return asyncio.run(run(args.steam_ids))


if __name__ == "__main__":
    sys.exit(main())
