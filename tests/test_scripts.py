import os

from conftest import SAMPLE_MATCHES
from scripts.check_item_mapping import find_unmapped
from scripts.find_unknown_items import unknown_item_ids
from scripts.generate_placeholder_images import item_svg, write_placeholders


def test_find_unmapped(catalog):
    assert find_unmapped(["Basic Magazine", "Vampiric Burst", "Leech"], catalog) == ["Vampiric Burst"]


def test_unknown_item_ids(catalog):
    matches = SAMPLE_MATCHES + [{"items": [{"item_id": 123}, 999999999, "junk", {"item_id": None}]}]
    assert unknown_item_ids(matches, catalog) == [123, 999999999]


def test_item_svg_escapes_name():
    svg = item_svg("Mo & Krill", "spirit", 2)
    assert "Mo &amp; Krill" in svg
    assert ">M&amp;<" in svg
    assert svg.startswith("<svg")


def test_write_placeholders(catalog, tmp_path):
    written = write_placeholders(catalog, str(tmp_path))
    assert len(written) == len(catalog.items_by_name)
    path = tmp_path / "weapon" / "basic_magazine.svg"
    assert str(path) in written
    assert os.path.exists(path)
    assert "Basic Magazine" in path.read_text(encoding="utf-8")
