"""
Check that every item a build template can show has its own image.

Items without an entry in the catalog render with the default weapon image.

Usage:
    cd backend
    python -m scripts.check_item_mapping
    python -m scripts.check_item_mapping "Kinetic Dash" "Phantom Strike"
"""

import argparse
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from data.builds import template_item_names
from data.catalog import Catalog


def find_unmapped(names: list[str], catalog: Catalog) -> list[str]:
    return [name for name in names if name not in catalog.items_by_name]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Report item names with no catalog image")
    parser.add_argument("names", nargs="*", help="Item names to check (default: all build template items)")
    args = parser.parse_args(argv)

    catalog = Catalog()
    names = args.names or template_item_names()
    missing = find_unmapped(names, catalog)

    for name in names:
        mark = "MISSING" if name in missing else "OK"
        print(f"  [{mark}] {name}")

    print(f"\n{len(names) - len(missing)} mapped, {len(missing)} missing")
    return 1 if missing else 0


if __name__ == "__main__":
    sys.exit(main())
