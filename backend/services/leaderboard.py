"""Synthetic regional leaderboards.

There is no ranking store behind the site, so leaderboard pages are generated.
For a given (region, page, page_size, row) the rank and the synthetic Steam id
never change; heroes, subrank, score jitter and win/loss counts are drawn from
``rng`` on every call.
"""

import math
import random
from typing import Awaitable, Callable

from config import (
    REGION_CODES, REAL_STEAM_IDS, ENRICH_ROW_COUNT,
    LEADERBOARD_TOTAL_COUNT, LEADERBOARD_MAX_LIMIT, LEADERBOARD_MAX_PAGE,
    region_slug,
)
from data.heroes import playable_heroes
from models import LeaderboardPage, LeaderboardResponse, LeaderboardRow, Pagination, SteamProfile
from services.steam import fetch_player_summary
from utils import normalize_key, country_flag

STEAM_ID_PREFIX = "76561198"

PLAYER_NAMES: dict[str, list[str]] = {
    "europe": [
        "Flameborn", "KaiserWraith", "NordicHaze", "Vodka_Viscous", "LeChat",
        "Pilsner", "Drifter", "SirLashalot", "BrickTop", "Zugzwang",
    ],
    "asia": [
        "Hanabi", "RyuKelvin", "Moonlit", "Tiger_Shiv", "Sakuya",
        "JadeLotus", "Baekho", "Kitsune", "Tsubame", "Dokkaebi",
    ],
    "north_america": [
        "Dustdevil", "BigBebop", "Maplesyrup", "Cactus_Jack", "TacoTalon",
        "Hollowpoint", "Bayou", "Redwood", "Lonestar", "Gridlock",
    ],
}

# Rank 1 of Asia is always this player
PINNED_ASIA_TOP_NAME = "Hamsuyeon"

REGION_COUNTRIES: dict[str, list[str]] = {
    "europe": ["de", "fr", "gb", "se", "pl", "es", "nl", "fi", "ua", "it"],
    "asia": ["kr", "jp", "cn", "tw", "sg", "th", "ph", "vn"],
    "north_america": ["us", "ca", "mx"],
}

AVATAR_URL = "https://api.dicebear.com/7.x/identicon/svg?seed={seed}"

MEDALS = ["Eternus", "Ascendant", "Phantom", "Oracle", "Archon", "Emissary", "Ritualist"]

# Inclusive upper rank for each medal; everyone below is Ritualist
MEDAL_RANK_CUTOFFS = [
    (25, "Eternus"),
    (100, "Ascendant"),
    (250, "Phantom"),
    (450, "Oracle"),
    (650, "Archon"),
    (850, "Emissary"),
]

SCORE_CEILING = 6000
SCORE_STEP = 4  # jitter stays below the step so scores never increase with rank

SummaryFetcher = Callable[[str, str], Awaitable[SteamProfile | None]]


def medal_for_rank(rank: int) -> str:
    for cutoff, medal in MEDAL_RANK_CUTOFFS:
        if rank <= cutoff:
            return medal
    return MEDALS[-1]


def synthetic_steam_id(region: str, page: int, row_index: int) -> str:
    return f"{STEAM_ID_PREFIX}{REGION_CODES[region]}{page:05d}{row_index:03d}"


def player_name(region: str, position: int, rank: int) -> str:
    """Cycle the region's name pool; later passes get a _2, _3, ... suffix."""
    if region == "asia" and rank == 1:
        return PINNED_ASIA_TOP_NAME
    pool = PLAYER_NAMES[region]
    base = pool[position % len(pool)]
    cycle = position // len(pool)
    return base if cycle == 0 else f"{base}_{cycle + 1}"


def validate_page_args(region: str, page: int, page_size: int):
    if region not in REGION_CODES:
        raise ValueError(f"Unknown region: {region}")
    if not 1 <= page <= LEADERBOARD_MAX_PAGE:
        raise ValueError(f"page must be between 1 and {LEADERBOARD_MAX_PAGE}")
    if not 1 <= page_size <= LEADERBOARD_MAX_LIMIT:
        raise ValueError(f"limit must be between 1 and {LEADERBOARD_MAX_LIMIT}")


def _build_row(region: str, page: int, page_size: int, row_index: int, rng, heroes: list[str]) -> LeaderboardRow:
    position = (page - 1) * page_size + row_index
    rank = position + 1
    name = player_name(region, position, rank)
    countries = REGION_COUNTRIES[region]

    hero_count = 1 + (rank + page) % 3
    score = max(0, SCORE_CEILING - SCORE_STEP * rank + rng.randint(0, SCORE_STEP - 1))

    games = rng.randint(120, 480)
    win_rate = 0.68 - 0.2 * min(rank, LEADERBOARD_TOTAL_COUNT) / LEADERBOARD_TOTAL_COUNT
    win_rate += rng.uniform(-0.03, 0.03)
    wins = round(games * win_rate)

    return LeaderboardRow(
        rank=rank,
        player_name=name,
        avatar_url=AVATAR_URL.format(seed=name),
        steam_id=synthetic_steam_id(region, page, row_index),
        country_flag=country_flag(countries[position % len(countries)]),
        heroes_played=rng.sample(heroes, hero_count),
        medal=medal_for_rank(rank),
        subrank=rng.randint(1, 6),
        score=score,
        wins=wins,
        losses=games - wins,
    )


def generate_page(region: str, page: int, page_size: int, rng: random.Random | None = None) -> LeaderboardPage:
    """Build one synthetic leaderboard page. Raises ValueError on bad arguments."""
    validate_page_args(region, page, page_size)
    rng = rng or random.Random()
    heroes = playable_heroes()

    rows = [_build_row(region, page, page_size, i, rng, heroes) for i in range(page_size)]
    pagination = Pagination(
        current_page=page,
        total_pages=math.ceil(LEADERBOARD_TOTAL_COUNT / page_size),
        total_count=LEADERBOARD_TOTAL_COUNT,
        per_page=page_size,
    )
    return LeaderboardPage(rows=rows, pagination=pagination)


async def enrich_page(
    result: LeaderboardPage,
    page: int,
    api_key: str,
    fetch: SummaryFetcher = fetch_player_summary,
) -> bool:
    """Overlay real Steam profiles on the first few rows.

    One call per row, no retries. A failed lookup leaves the row as it was.
    Returns True if at least one row was overlaid.
    """
    if not api_key or not REAL_STEAM_IDS:
        return False

    overlaid = False
    for i in range(min(ENRICH_ROW_COUNT, len(result.rows))):
        steam_id = REAL_STEAM_IDS[((page - 1) * ENRICH_ROW_COUNT + i) % len(REAL_STEAM_IDS)]
        try:
            profile = await fetch(steam_id, api_key)
        except Exception as e:
            print(f"[leaderboard] Steam lookup failed for {steam_id}: {e}")
            continue
        if profile is None:
            continue
        row = result.rows[i]
        update = {"avatar_url": profile.avatar_url or row.avatar_url}
        # The pinned top player keeps their name and id, only the avatar is real
        if not (row.rank == 1 and row.player_name == PINNED_ASIA_TOP_NAME):
            update.update(player_name=profile.name, steam_id=profile.steam_id)
        result.rows[i] = row.model_copy(update=update)
        overlaid = True
    return overlaid


def filter_rows(rows: list[LeaderboardRow], hero: str | None = "all", medal: str | None = "all") -> list[LeaderboardRow]:
    """Apply hero/medal filters to an already generated page."""
    hero_key = normalize_key(hero) if hero and hero.lower() != "all" else ""
    medal_key = medal.lower().strip() if medal and medal.lower() != "all" else ""

    filtered = rows
    if hero_key:
        filtered = [
            r for r in filtered
            if any(hero_key in normalize_key(h) for h in r.heroes_played)
        ]
    if medal_key:
        filtered = [r for r in filtered if r.medal.lower() == medal_key]
    return filtered


async def build_leaderboard(
    region: str,
    page: int = 1,
    limit: int = 50,
    hero: str | None = "all",
    medal: str | None = "all",
    api_key: str = "",
    rng: random.Random | None = None,
    fetch: SummaryFetcher = fetch_player_summary,
) -> LeaderboardResponse:
    """Generate, enrich and filter a leaderboard page for the API."""
    validate_page_args(region, page, limit)

    try:
        result = generate_page(region, page, limit, rng)
        included = await enrich_page(result, page, api_key, fetch) if api_key else False
    except Exception as e:
        print(f"[leaderboard] Enrichment failed, serving synthetic page: {e}")
        result = generate_page(region, page, limit, rng)
        included = False

    rows = filter_rows(result.rows, hero, medal)
    return LeaderboardResponse(
        region=region_slug(region),
        steam_data_included=included,
        rows=rows,
        pagination=result.pagination,
    )
