"""Per-hero item build templates.

Used to fill a match's item list when the match history API returns a match
without purchase data.
"""

import random

CATEGORIES = ("weapon", "vitality", "spirit")
ITEMS_PER_CATEGORY = 2

HERO_BUILD_TEMPLATES: dict[str, dict[str, list[str]]] = {
    "Infernus": {
        "weapon": ["Toxic Bullets", "Monster Rounds", "Titanic Magazine", "Glass Cannon"],
        "vitality": ["Extra Health", "Bullet Armor", "Metal Skin", "Lifestrike"],
        "spirit": ["Extra Spirit", "Mystic Burst", "Improved Spirit", "Boundless Spirit"],
    },
    "Seven": {
        "weapon": ["Basic Magazine", "Active Reload", "Tesla Bullets", "Pristine Emblem"],
        "vitality": ["Extra Health", "Spirit Armor", "Improved Spirit Armor", "Colossus"],
        "spirit": ["Extra Spirit", "Cold Front", "Echo Shard", "Mystic Reverb"],
    },
    "default": {
        "weapon": ["Basic Magazine", "Monster Rounds", "Active Reload", "Berserker", "Toxic Bullets", "Headshot Booster"],
        "vitality": ["Extra Health", "Sprint Boots", "Bullet Armor", "Improved Bullet Armor", "Metal Skin", "Leech"],
        "spirit": ["Extra Spirit", "Mystic Burst", "Cold Front", "Improved Spirit", "Ethereal Shift", "Boundless Spirit"],
    },
}


def build_template(hero_name: str) -> dict[str, list[str]]:
    return HERO_BUILD_TEMPLATES.get(hero_name) or HERO_BUILD_TEMPLATES["default"]


def template_item_names() -> list[str]:
    """Every item name referenced by any template, first occurrence order."""
    names: list[str] = []
    for template in HERO_BUILD_TEMPLATES.values():
        for category in CATEGORIES:
            for name in template.get(category, []):
                if name not in names:
                    names.append(name)
    return names


def pick_build(hero_name: str, rng: random.Random | None = None) -> list[tuple[str, str]]:
    """Pick ITEMS_PER_CATEGORY items from each category of the hero's template.

    Returns (name, category) pairs in weapon, vitality, spirit order.
    """
    rng = rng or random
    template = build_template(hero_name)
    picked = []
    for category in CATEGORIES:
        pool = template.get(category, [])
        for name in rng.sample(pool, min(ITEMS_PER_CATEGORY, len(pool))):
            picked.append((name, category))
    return picked
