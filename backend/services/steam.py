"""Steam Web API player summaries."""

from config import STEAM_SUMMARIES_URL, STEAM_TIMEOUT, CACHE_TTL_STEAM
from cache import cache
from models import SteamProfile
from utils import fetch_json

STEAM_ID64_OFFSET = 76561197960265728


def to_steam_id64(account_id: int | str) -> str:
    """SteamID3 account id -> SteamID64. SteamID64 input is returned as-is."""
    value = int(account_id)
    if value >= STEAM_ID64_OFFSET:
        return str(value)
    return str(value + STEAM_ID64_OFFSET)


def to_account_id(steam_id: int | str) -> int:
    """SteamID64 -> SteamID3 account id. Account ids are returned as-is."""
    value = int(steam_id)
    if value >= STEAM_ID64_OFFSET:
        return value - STEAM_ID64_OFFSET
    return value


async def fetch_player_summary(
    steam_id: str,
    api_key: str,
    timeout: float = STEAM_TIMEOUT,
) -> SteamProfile | None:
    """Fetch one player's public profile. Returns None on any failure."""
    if not api_key:
        return None

    cache_key = f"steam_summary:{steam_id}"
    cached = cache.get(cache_key)
    if cached:
        return cached

    data = await fetch_json(
        STEAM_SUMMARIES_URL,
        {"key": api_key, "steamids": steam_id},
        timeout=timeout,
    )
    if not isinstance(data, dict):
        print(f"[steam] Summary lookup failed for {steam_id}")
        return None

    players = (data.get("response") or {}).get("players") or []
    if not players:
        return None

    p = players[0]
    name = p.get("personaname")
    if not name:
        return None

    profile = SteamProfile(
        steam_id=str(p.get("steamid", steam_id)),
        name=name,
        avatar_url=p.get("avatarfull") or p.get("avatarmedium") or p.get("avatar") or "",
        profile_url=p.get("profileurl"),
    )
    cache.set(cache_key, profile, CACHE_TTL_STEAM)
    return profile
