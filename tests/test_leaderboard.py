import asyncio
import random

import pytest

from config import REAL_STEAM_IDS
from models import LeaderboardRow, SteamProfile
from services.leaderboard import (
    PINNED_ASIA_TOP_NAME,
    PLAYER_NAMES,
    build_leaderboard,
    enrich_page,
    filter_rows,
    generate_page,
    medal_for_rank,
    player_name,
    synthetic_steam_id,
)


def make_row(rank: int, heroes: list[str], medal: str) -> LeaderboardRow:
    return LeaderboardRow(
        rank=rank,
        player_name=f"p{rank}",
        avatar_url="https://example.com/a.png",
        steam_id=str(rank),
        country_flag="",
        heroes_played=heroes,
        medal=medal,
        subrank=1,
        score=100,
        wins=1,
        losses=1,
    )


def fake_profile_fetch(calls: list):
    async def _fetch(steam_id, api_key):
        calls.append(steam_id)
        return SteamProfile(steam_id=steam_id, name=f"real-{steam_id}", avatar_url="https://steam/avatar.jpg")
    return _fetch


# --- Generation ---

def test_ranks_and_ids_are_stable_across_rngs():
    a = generate_page("europe", 3, 20, random.Random(1))
    b = generate_page("europe", 3, 20, random.Random(2))
    assert [r.rank for r in a.rows] == [r.rank for r in b.rows] == list(range(41, 61))
    assert [r.steam_id for r in a.rows] == [r.steam_id for r in b.rows]
    assert [r.player_name for r in a.rows] == [r.player_name for r in b.rows]


def test_synthetic_steam_id_format():
    steam_id = synthetic_steam_id("asia", 2, 5)
    assert steam_id == "76561198" + "2" + "00002" + "005"
    assert len(steam_id) == 17


def test_steam_ids_unique_within_page_and_across_regions():
    ids = set()
    for region in ("europe", "asia", "north_america"):
        for page in (1, 2):
            ids.update(r.steam_id for r in generate_page(region, page, 100).rows)
    assert len(ids) == 3 * 2 * 100


def test_asia_rank_one_is_pinned():
    page = generate_page("asia", 1, 50)
    assert page.rows[0].player_name == PINNED_ASIA_TOP_NAME
    assert generate_page("europe", 1, 50).rows[0].player_name == PLAYER_NAMES["europe"][0]


def test_names_cycle_with_suffix():
    pool = PLAYER_NAMES["europe"]
    assert player_name("europe", len(pool), len(pool) + 1) == f"{pool[0]}_2"
    assert player_name("europe", 2 * len(pool) + 3, 2 * len(pool) + 4) == f"{pool[3]}_3"
    assert generate_page("europe", 2, 10).rows[0].player_name == f"{pool[0]}_2"
    assert player_name("asia", 10, 11) == "Hanabi_2"


def test_scores_never_increase_with_rank():
    for seed in range(5):
        rows = generate_page("north_america", 1, 100, random.Random(seed)).rows
        scores = [r.score for r in rows]
        assert scores == sorted(scores, reverse=True)


def test_row_fields_in_range():
    for row in generate_page("asia", 4, 100, random.Random(7)).rows:
        assert 1 <= len(row.heroes_played) <= 3
        assert len(set(row.heroes_played)) == len(row.heroes_played)
        assert 1 <= row.subrank <= 6
        assert 120 <= row.wins + row.losses <= 480
        assert row.score >= 0


def test_pagination():
    page = generate_page("europe", 1, 50)
    assert page.pagination.total_count == 1000
    assert page.pagination.total_pages == 20
    assert page.pagination.per_page == 50
    assert generate_page("europe", 1, 30).pagination.total_pages == 34


def test_medal_tiers():
    assert medal_for_rank(1) == "Eternus"
    assert medal_for_rank(25) == "Eternus"
    assert medal_for_rank(26) == "Ascendant"
    assert medal_for_rank(851) == "Ritualist"
    assert medal_for_rank(50000) == "Ritualist"


@pytest.mark.parametrize("page,size", [(0, 50), (-1, 50), (100000, 50), (1, 0), (1, 101)])
def test_invalid_page_arguments(page, size):
    with pytest.raises(ValueError):
        generate_page("europe", page, size)


def test_unknown_region_rejected():
    with pytest.raises(ValueError):
        generate_page("mars", 1, 50)


# --- Filters ---

def test_medal_filter_keeps_only_that_medal():
    rows = generate_page("europe", 1, 50).rows
    eternus = filter_rows(rows, medal="eternus")
    assert len(eternus) == 25
    assert all(r.medal == "Eternus" for r in eternus)
    assert len(eternus) <= len(rows)


def test_hero_filter_ignores_case_and_punctuation():
    rows = [
        make_row(1, ["Mo & Krill", "Haze"], "Eternus"),
        make_row(2, ["Grey Talon"], "Eternus"),
        make_row(3, ["Haze"], "Ascendant"),
    ]
    assert [r.rank for r in filter_rows(rows, hero="MO&KRILL")] == [1]
    assert [r.rank for r in filter_rows(rows, hero="grey-talon")] == [2]
    assert [r.rank for r in filter_rows(rows, hero="haze", medal="Eternus")] == [1]


def test_all_filters_pass_everything():
    rows = generate_page("asia", 1, 20).rows
    assert filter_rows(rows, "all", "all") == rows
    assert filter_rows(rows, None, None) == rows


# --- Enrichment ---

def test_enrichment_overlays_first_rows():
    calls = []
    result = generate_page("europe", 1, 10)
    synthetic = list(result.rows)

    included = asyncio.run(enrich_page(result, 1, "key", fake_profile_fetch(calls)))

    assert included is True
    assert calls == REAL_STEAM_IDS[:3]
    assert result.rows[0].player_name == f"real-{REAL_STEAM_IDS[0]}"
    assert result.rows[0].steam_id == REAL_STEAM_IDS[0]
    assert result.rows[0].rank == 1
    assert result.rows[3:] == synthetic[3:]


def test_enrichment_pool_is_round_robin_by_page():
    calls = []
    asyncio.run(enrich_page(generate_page("europe", 2, 10), 2, "key", fake_profile_fetch(calls)))
    assert calls == [REAL_STEAM_IDS[3], REAL_STEAM_IDS[4], REAL_STEAM_IDS[0]]


def test_failed_lookups_leave_rows_unchanged():
    async def broken(steam_id, api_key):
        raise TimeoutError("steam is slow")

    async def empty(steam_id, api_key):
        return None

    for fetch in (broken, empty):
        result = generate_page("asia", 1, 10)
        before = list(result.rows)
        assert asyncio.run(enrich_page(result, 1, "key", fetch)) is False
        assert result.rows == before


def test_build_leaderboard_without_key_makes_no_calls():
    calls = []
    result = asyncio.run(build_leaderboard("asia", 1, 50, fetch=fake_profile_fetch(calls)))
    assert calls == []
    assert result.steam_data_included is False
    assert result.success is True
    assert result.region == "asia"
    assert len(result.rows) == 50
    assert result.rows[0].player_name == PINNED_ASIA_TOP_NAME


def test_build_leaderboard_with_key():
    calls = []
    result = asyncio.run(build_leaderboard("north_america", 1, 20, api_key="key", fetch=fake_profile_fetch(calls)))
    assert result.steam_data_included is True
    assert result.region == "north-america"
    assert len(calls) == 3


def test_build_leaderboard_filters_after_generation():
    result = asyncio.run(build_leaderboard("europe", 1, 50, medal="Eternus"))
    assert len(result.rows) == 25
    assert result.pagination.per_page == 50


def test_build_leaderboard_rejects_bad_limit():
    with pytest.raises(ValueError):
        asyncio.run(build_leaderboard("europe", 1, 500))


def test_enrichment_keeps_pinned_asia_name():
    calls = []
    result = asyncio.run(build_leaderboard("asia", 1, 50, api_key="key", fetch=fake_profile_fetch(calls)))
    top = result.rows[0]
    assert result.steam_data_included is True
    assert top.rank == 1
    assert top.player_name == PINNED_ASIA_TOP_NAME
    assert top.steam_id == synthetic_steam_id("asia", 1, 0)
    assert top.avatar_url == "https://steam/avatar.jpg"
    assert result.rows[1].player_name == f"real-{REAL_STEAM_IDS[1]}"


def test_broken_enrichment_serves_synthetic_page():
    async def not_a_profile(steam_id, api_key):
        return "not a profile"

    result = asyncio.run(build_leaderboard("asia", 1, 50, api_key="key", fetch=not_a_profile))
    assert result.steam_data_included is False
    assert len(result.rows) == 50
    assert [r.rank for r in result.rows] == list(range(1, 51))
    assert result.rows[0].player_name == PINNED_ASIA_TOP_NAME
    assert [r.steam_id for r in result.rows] == [synthetic_steam_id("asia", 1, i) for i in range(50)]
