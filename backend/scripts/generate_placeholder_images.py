"""
Write an SVG placeholder for every catalog item.

Files land in static/images/items/<category>/<slug>.svg and are served under
/static, for running the site without CDN access.

Usage:
    cd backend
    python -m scripts.generate_placeholder_images
    python -m scripts.generate_placeholder_images --out /tmp/items
"""

import argparse
import os
import sys
from html import escape

sys.path.insert(0, os.path.dirname(os.path.dirname(__file__)))

from data.catalog import Catalog
from utils import slugify

DEFAULT_OUT = os.path.join(os.path.dirname(os.path.dirname(__file__)), "static", "images", "items")

CATEGORY_COLORS = {
    "weapon": "D35400",
    "vitality": "27AE60",
    "spirit": "8E44AD",
}


def item_svg(name: str, category: str, tier: int) -> str:
    initials = "".join(word[0] for word in name.split()[:2]).upper()
    color = CATEGORY_COLORS.get(category, "4A90E2")
    return (
        '<svg width="64" height="64" xmlns="http://www.w3.org/2000/svg">'
        f'<title>{escape(name)}</title>'
        f'<rect width="100%" height="100%" fill="#{color}" rx="8"/>'
        '<text x="32" y="38" text-anchor="middle" fill="white" '
        f'font-family="Arial, sans-serif" font-size="22" font-weight="bold">{escape(initials)}</text>'
        f'<text x="58" y="58" text-anchor="end" fill="white" font-family="Arial, sans-serif" font-size="10">{tier}</text>'
        "</svg>"
    )


def write_placeholders(catalog: Catalog, out_dir: str) -> list[str]:
    written = []
    for name, record in sorted(catalog.items_by_name.items()):
        category_dir = os.path.join(out_dir, record.category)
        os.makedirs(category_dir, exist_ok=True)
        path = os.path.join(category_dir, f"{slugify(name)}.svg")
        with open(path, "w", encoding="utf-8") as f:
            f.write(item_svg(name, record.category, record.tier))
        written.append(path)
    return written


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Generate SVG item placeholders")
    parser.add_argument("--out", default=DEFAULT_OUT, help="Output directory")
    args = parser.parse_args(argv)

    written = write_placeholders(Catalog(), args.out)
    print(f"[placeholders] Wrote {len(written)} images to {args.out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
