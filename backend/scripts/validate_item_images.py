"""
Validate every catalog image URL against the CDN.

Usage:
    cd backend
    python -m scripts.validate_item_images
    python -m scripts.validate_item_images --timeout 10
"""

import argparse
import asyncio
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from data.catalog import Catalog
from utils import head_status, close_session


async def validate(catalog: Catalog, timeout: float = 5) -> dict[str, list[str]]:
    """HEAD each distinct image once. Returns {"working": [...], "broken": [...]} of item names."""
    results = {"working": [], "broken": []}
    status_by_url: dict[str, int | None] = {}

    for name, record in sorted(catalog.items_by_name.items()):
        url = record.image_ref
        if url not in status_by_url:
            status_by_url[url] = await head_status(url, timeout=timeout)
        status = status_by_url[url]
        if status == 200:
            results["working"].append(name)
            print(f"  [OK] {name}")
        else:
            results["broken"].append(name)
            print(f"  [BROKEN] {name} - {status or 'NETWORK_ERROR'} {url}")
    return results


async def run(timeout: float) -> int:
    try:
        results = await validate(Catalog(), timeout)
    finally:
        await close_session()

    print(f"\nWorking: {len(results['working'])}")
    print(f"Broken: {len(results['broken'])}")
    return 1 if results["broken"] else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="HEAD-check all item image URLs")
    parser.add_argument("--timeout", type=float, default=5, help="Per-request timeout in seconds")
    args = parser.parse_args(argv)
    return asyncio.run(run(args.timeout))


if __name__ == "__main__":
    sys.exit(main())
