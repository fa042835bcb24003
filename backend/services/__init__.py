"""Request-facing services: leaderboards, player pages, Steam profiles."""

from services.leaderboard import build_leaderboard, generate_page, filter_rows
from services.players import get_player_stats, get_recent_matches, get_player_profile
from services.steam import fetch_player_summary, to_account_id, to_steam_id64

__all__ = [
    "build_leaderboard",
    "generate_page",
    "filter_rows",
    "get_player_stats",
    "get_recent_matches",
    "get_player_profile",
    "fetch_player_summary",
    "to_account_id",
    "to_steam_id64",
]
