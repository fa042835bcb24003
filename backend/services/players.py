"""Player pages: match history from the Deadlock API, resolved for display."""

import random

from config import DEADLOCK_API_BASE, CACHE_TTL_PLAYERS
from cache import cache
from data.builds import pick_build
from data.catalog import Catalog
from models import MatchView, PlayerStats, HeroStats
from services.steam import fetch_player_summary, to_account_id, to_steam_id64
from utils import fetch_json

RECENT_MATCHES_MAX = 50


async def fetch_match_history(account_id: int) -> list[dict] | None:
    """Raw match history for an account, newest first. None when upstream fails."""
    cache_key = f"match_history:{account_id}"
    cached = cache.get(cache_key)
    if cached is not None:
        return cached

    removed = cache.cleanup()
    if removed:
        print(f"[players] Dropped {removed} expired cache entries")

    url = f"{DEADLOCK_API_BASE}/players/{account_id}/match-history"
    data = await fetch_json(url)
    if data is None:
        return None

    matches = data.get("matches", []) if isinstance(data, dict) else data
    if not isinstance(matches, list):
        return None

    cache.set(cache_key, matches, CACHE_TTL_PLAYERS)
    return matches


def is_win(match: dict) -> bool:
    team = match.get("player_team")
    result = match.get("match_result")
    return team is not None and result is not None and team == result


def _item_id(entry) -> int | None:
    raw = entry.get("item_id") if isinstance(entry, dict) else entry
    try:
        return int(raw)
    except (TypeError, ValueError):
        return None


def build_match_view(match: dict, catalog: Catalog, rng: random.Random | None = None) -> MatchView:
    hero_id = match.get("hero_id")
    hero = catalog.resolve_hero_name(int(hero_id)) if hero_id is not None else "Unknown"

    items = []
    for entry in match.get("items") or []:
        item_id = _item_id(entry)
        if item_id is not None:
            items.append(catalog.item_view(item_id, slot=len(items) + 1))

    source = "api"
    if not items:
        # No purchase data on this match, show the hero's usual build
        source = "template"
        items = [
            catalog.item_view_by_name(name, category, slot=slot)
            for slot, (name, category) in enumerate(pick_build(hero, rng), start=1)
        ]

    return MatchView(
        match_id=int(match.get("match_id") or 0),
        hero=hero,
        hero_id=hero_id,
        result="win" if is_win(match) else "loss",
        kills=match.get("player_kills") or 0,
        deaths=match.get("player_deaths") or 0,
        assists=match.get("player_assists") or 0,
        net_worth=match.get("net_worth") or 0,
        duration_s=match.get("match_duration_s") or 0,
        items=items,
        items_source=source,
    )


def _win_rate(wins: int, matches: int) -> float:
    return round(wins / matches * 100, 1) if matches else 0.0


def aggregate_stats(matches: list[dict], catalog: Catalog) -> PlayerStats:
    """Totals plus per-hero stats, heroes sorted by matches played."""
    heroes: dict[str, HeroStats] = {}
    stats = PlayerStats()

    for match in matches:
        hero_id = match.get("hero_id")
        hero = catalog.resolve_hero_name(int(hero_id)) if hero_id is not None else "Unknown"
        h = heroes.setdefault(hero, HeroStats(hero=hero))

        won = is_win(match)
        kills = match.get("player_kills") or 0
        deaths = match.get("player_deaths") or 0
        assists = match.get("player_assists") or 0

        h.matches += 1
        h.wins += int(won)
        h.kills += kills
        h.deaths += deaths
        h.assists += assists

        stats.matches += 1
        stats.wins += int(won)
        stats.kills += kills
        stats.deaths += deaths
        stats.assists += assists

    for h in heroes.values():
        h.win_rate = _win_rate(h.wins, h.matches)

    stats.losses = stats.matches - stats.wins
    stats.win_rate = _win_rate(stats.wins, stats.matches)
    stats.kda = round((stats.kills + stats.assists) / max(stats.deaths, 1), 2)
    stats.heroes = sorted(heroes.values(), key=lambda h: (-h.matches, h.hero))
    return stats


async def get_player_stats(steam_id: str, catalog: Catalog) -> PlayerStats | None:
    matches = await fetch_match_history(to_account_id(steam_id))
    if matches is None:
        return None
    return aggregate_stats(matches, catalog)


async def get_recent_matches(
    steam_id: str,
    catalog: Catalog,
    limit: int = 10,
    rng: random.Random | None = None,
) -> list[MatchView] | None:
    matches = await fetch_match_history(to_account_id(steam_id))
    if matches is None:
        return None
    limit = max(1, min(limit, RECENT_MATCHES_MAX))
    return [build_match_view(m, catalog, rng) for m in matches[:limit]]


async def get_player_profile(
    steam_id: str,
    catalog: Catalog,
    api_key: str = "",
    limit: int = 10,
) -> dict | None:
    """Everything the player page needs in one payload."""
    account_id = to_account_id(steam_id)
    matches = await fetch_match_history(account_id)
    if matches is None:
        return None

    steam_id64 = to_steam_id64(account_id)
    summary = await fetch_player_summary(steam_id64, api_key) if api_key else None

    return {
        "account_id": account_id,
        "steam_id": steam_id64,
        "name": summary.name if summary else f"Player {account_id}",
        "avatar": summary.avatar_url if summary else None,
        "stats": aggregate_stats(matches, catalog).model_dump(),
        "recent_matches": [
            build_match_view(m, catalog).model_dump()
            for m in matches[:max(1, min(limit, RECENT_MATCHES_MAX))]
        ],
    }
