"""Read-only identifier resolver for items and heroes."""

from __future__ import annotations
from dataclasses import dataclass
from types import MappingProxyType

from data.heroes import HERO_NAMES
from data.items import SHOP, ITEM_IDS, IMAGE_OVERRIDES, TIER_COSTS, DEFAULT_ITEM_IMAGE, image_url
from models import ItemRecord, HeroRecord, MatchItemView
from utils import slugify


@dataclass(frozen=True)
class Resolved:
    id: int
    name: str


@dataclass(frozen=True)
class Fallback:
    id: int


Resolution = Resolved | Fallback


def unknown_item_name(item_id: int) -> str:
    return f"Unknown Item ({item_id})"


def unknown_hero_name(hero_id: int) -> str:
    return f"Hero_{hero_id}"


class Catalog:
    """Item and hero lookups built once at startup.

    Shop items are indexed by name, match history ids point into that index.
    When several ids share a name they share one ItemRecord, whose ``id`` is
    the first id listed.
    """

    def __init__(
        self,
        shop: dict[str, list[dict]] | None = None,
        item_ids: list[tuple[int, str]] | None = None,
        heroes: dict[int, str] | None = None,
    ):
        shop = SHOP if shop is None else shop
        item_ids = ITEM_IDS if item_ids is None else item_ids
        heroes = HERO_NAMES if heroes is None else heroes

        self.items_by_name = MappingProxyType(self._index_shop(shop, item_ids))
        self.items = MappingProxyType(self._index_ids(item_ids, self.items_by_name))
        self.heroes = MappingProxyType({hid: HeroRecord(id=hid, name=name) for hid, name in heroes.items()})

        print(f"[catalog] Indexed {len(self.items)} item ids ({len(self.items_by_name)} shop items), {len(self.heroes)} hero ids")

    @staticmethod
    def _index_shop(shop: dict[str, list[dict]], item_ids: list[tuple[int, str]]) -> dict[str, ItemRecord]:
        first_ids: dict[str, int] = {}
        for item_id, name in item_ids:
            first_ids.setdefault(name, item_id)

        idx: dict[str, ItemRecord] = {}
        for category, entries in shop.items():
            for entry in entries:
                name = entry["name"]
                if name in idx:
                    raise ValueError(f"duplicate shop item {name}")
                path = IMAGE_OVERRIDES.get(name, f"{category}/{slugify(name)}")
                idx[name] = ItemRecord(
                    id=first_ids.get(name),
                    name=name,
                    category=category,
                    tier=entry["tier"],
                    cost=TIER_COSTS[entry["tier"]],
                    image_ref=image_url(path),
                    stats=entry.get("stats", []),
                    description=entry.get("description", ""),
                )
        return idx

    @staticmethod
    def _index_ids(item_ids: list[tuple[int, str]], by_name) -> dict[int, ItemRecord]:
        idx: dict[int, ItemRecord] = {}
        for item_id, name in item_ids:
            if item_id in idx:
                raise ValueError(f"duplicate item id {item_id} ({name})")
            if name not in by_name:
                raise ValueError(f"item id {item_id} points at unknown item {name}")
            idx[item_id] = by_name[name]
        return idx

    # --- Items ---

    def resolve_item(self, item_id: int) -> Resolution:
        record = self.items.get(item_id)
        if record is None:
            return Fallback(item_id)
        return Resolved(item_id, record.name)

    def resolve_item_name(self, item_id: int) -> str:
        result = self.resolve_item(item_id)
        if isinstance(result, Resolved):
            return result.name
        return unknown_item_name(result.id)

    def resolve_item_image(self, name: str) -> str:
        record = self.items_by_name.get(name)
        return record.image_ref if record else DEFAULT_ITEM_IMAGE

    def item_view(self, item_id: int, slot: int | None = None) -> MatchItemView:
        record = self.items.get(item_id)
        if record is None:
            return MatchItemView(
                name=unknown_item_name(item_id),
                image_url=DEFAULT_ITEM_IMAGE,
                slot=slot,
                item_id=item_id,
            )
        return MatchItemView(
            name=record.name,
            category=record.category,
            image_url=record.image_ref,
            slot=slot,
            item_id=item_id,
        )

    def item_view_by_name(self, name: str, category: str | None = None, slot: int | None = None) -> MatchItemView:
        record = self.items_by_name.get(name)
        return MatchItemView(
            name=name,
            category=record.category if record else category,
            image_url=self.resolve_item_image(name),
            slot=slot,
            item_id=record.id if record else None,
        )

    def items_grouped(self) -> dict[str, dict[int, list[ItemRecord]]]:
        """Distinct items grouped as category -> tier -> records, sorted by name."""
        grouped: dict[str, dict[int, list[ItemRecord]]] = {"weapon": {}, "vitality": {}, "spirit": {}}
        for record in self.items_by_name.values():
            grouped[record.category].setdefault(record.tier, []).append(record)
        for tiers in grouped.values():
            for records in tiers.values():
                records.sort(key=lambda r: r.name)
        return {cat: dict(sorted(tiers.items())) for cat, tiers in grouped.items()}

    # --- Heroes ---

    def resolve_hero(self, hero_id: int) -> Resolution:
        record = self.heroes.get(hero_id)
        if record is None:
            return Fallback(hero_id)
        return Resolved(hero_id, record.name)

    def resolve_hero_name(self, hero_id: int) -> str:
        result = self.resolve_hero(hero_id)
        if isinstance(result, Resolved):
            return result.name
        return unknown_hero_name(result.id)
