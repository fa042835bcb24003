import pytest

from data.catalog import Catalog, Resolved, Fallback
from data.items import DEFAULT_ITEM_IMAGE, IMAGE_OVERRIDES, ITEM_IDS, SHOP
from utils import slugify
from data.builds import template_item_names


def test_known_item_id_resolves_to_name(catalog):
    assert catalog.resolve_item_name(3005970438) == "Improved Reach"
    assert catalog.resolve_item(715762406) == Resolved(715762406, "Basic Magazine")


def test_unknown_item_id_falls_back(catalog):
    assert catalog.resolve_item(999999999) == Fallback(999999999)
    assert catalog.resolve_item_name(999999999) == "Unknown Item (999999999)"


def test_hero_names(catalog):
    assert catalog.resolve_hero_name(11) == "Infernus"
    assert catalog.resolve_hero_name(9999) == "Hero_9999"
    assert catalog.resolve_hero(9999) == Fallback(9999)


def test_reissued_ids_share_one_record(catalog):
    assert catalog.resolve_item_name(968099481) == "Extra Health"
    assert catalog.resolve_item_name(1537272748) == "Extra Health"
    assert catalog.item_view(968099481).image_url == catalog.item_view(1537272748).image_url
    # the name index keeps the first id listed
    assert catalog.items_by_name["Extra Health"].id == 1537272748


def test_item_image_by_name(catalog):
    assert catalog.resolve_item_image("Toxic Bullets").endswith("/weapon/toxic_bullets.webp")
    assert catalog.resolve_item_image("Extra Spirit").endswith("/spirit/extra_spirit.webp")


def test_item_image_overrides(catalog):
    assert catalog.resolve_item_image("Leech").endswith("/weapon/toxic_bullets.webp")
    assert catalog.resolve_item_image("Bullet Armor").endswith("/vitality/extra_health.webp")


def test_unknown_item_name_gets_default_image(catalog):
    assert catalog.resolve_item_image("Not An Item") == DEFAULT_ITEM_IMAGE


def test_every_item_name_resolves_to_its_own_image(catalog):
    for item_id, name in ITEM_IDS:
        assert catalog.resolve_item_image(name) == catalog.item_view(item_id).image_url


def test_item_view_unknown(catalog):
    view = catalog.item_view(42, slot=3)
    assert view.name == "Unknown Item (42)"
    assert view.category is None
    assert view.image_url == DEFAULT_ITEM_IMAGE
    assert view.slot == 3


def test_item_view_by_name_uses_catalog_category(catalog):
    view = catalog.item_view_by_name("Metal Skin", category="weapon")
    assert view.category == "vitality"
    assert view.item_id == 2617435668


def test_costs_follow_tier(catalog):
    assert catalog.items[715762406].cost == 800
    assert catalog.items[3731635960].cost == 6400


def test_tables_are_read_only(catalog):
    with pytest.raises(TypeError):
        catalog.items[1] = None
    with pytest.raises(TypeError):
        catalog.heroes[1] = None


def test_duplicate_item_id_rejected():
    with pytest.raises(ValueError):
        Catalog(item_ids=[(1, "Basic Magazine"), (1, "Extra Health")])


def test_item_id_must_point_at_shop_item():
    with pytest.raises(ValueError):
        Catalog(item_ids=[(1, "Not An Item")])


def test_duplicate_shop_name_rejected():
    shop = {"weapon": [{"name": "A", "tier": 1}, {"name": "A", "tier": 2}]}
    with pytest.raises(ValueError):
        Catalog(shop=shop, item_ids=[])


def test_every_build_template_item_is_in_catalog(catalog):
    missing = [name for name in template_item_names() if name not in catalog.items_by_name]
    assert missing == []


def test_items_grouped(catalog):
    grouped = catalog.items_grouped()
    assert set(grouped) == {"weapon", "vitality", "spirit"}
    assert list(grouped["weapon"]) == sorted(grouped["weapon"])
    names = [r.name for records in grouped["vitality"].values() for r in records]
    assert names.count("Extra Health") == 1


def test_shop_covers_every_category_and_tier(catalog):
    grouped = catalog.items_grouped()
    for category in ("weapon", "vitality", "spirit"):
        assert list(grouped[category]) == [1, 2, 3, 4]
    assert len(catalog.items_by_name) == sum(len(entries) for entries in SHOP.values())
    assert len(catalog.items_by_name) >= 111


def test_every_shop_item_has_stats_and_description(catalog):
    for record in catalog.items_by_name.values():
        assert record.stats, record.name
        assert record.description, record.name


def test_item_stats(catalog):
    record = catalog.items[1537272748]
    assert record.stats == ["+125 Max Health"]
    assert record.description == "Increases maximum health."


def test_shop_only_item_has_no_id(catalog):
    record = catalog.items_by_name["Phantom Strike"]
    assert record.id is None
    assert record.category == "vitality"
    assert record.cost == 6400
    assert catalog.resolve_item_image("Phantom Strike").endswith("/vitality/phantom_strike.webp")


def test_image_overrides_borrow_existing_art(catalog):
    own_paths = {f"{r.category}/{slugify(r.name)}" for r in catalog.items_by_name.values()}
    for name, path in IMAGE_OVERRIDES.items():
        assert path in own_paths, name


def test_spirit_armor_shares_spirit_lifesteal_art(catalog):
    assert catalog.items_by_name["Spirit Lifesteal"].category == "vitality"
    assert catalog.resolve_item_image("Spirit Armor") == catalog.resolve_item_image("Spirit Lifesteal")
