import os
from dotenv import load_dotenv

load_dotenv()

# --- Environment ---
APP_ENV = os.getenv("APP_ENV", "development")
PORT = int(os.getenv("PORT", "3000"))
SESSION_SECRET = os.getenv("SESSION_SECRET", "dev-session-secret-change-me")
ALLOWED_ORIGINS = [
    o.strip() for o in os.getenv("ALLOWED_ORIGINS", "http://localhost:3000").split(",") if o.strip()
]

# --- API Keys ---
STEAM_API_KEY = os.getenv("STEAM_API_KEY", "")

# --- External API URLs ---
DEADLOCK_API_BASE = os.getenv("DEADLOCK_API_BASE", "https://api.deadlock-api.com/v1")
STEAM_SUMMARIES_URL = "https://api.steampowered.com/ISteamUser/GetPlayerSummaries/v0002/"
ITEM_IMAGE_BASE = "https://cdn.deadlock.coach/vpk/panorama/images/items"

# --- Timeouts (seconds) ---
HTTP_TIMEOUT = 15
STEAM_TIMEOUT = 3  # per enrichment call

# --- Cache TTLs (seconds) ---
CACHE_TTL_PLAYERS = 300     # 5 minutes for match history
CACHE_TTL_STEAM = 3600      # 1 hour for Steam profile summaries

# --- Rate limits ---
LEADERBOARD_RATE_LIMIT = "60/minute"

# --- Leaderboard ---
LEADERBOARD_TOTAL_COUNT = 1000  # synthetic, there is no backing ranking store
LEADERBOARD_DEFAULT_LIMIT = 50
LEADERBOARD_MAX_LIMIT = 100
LEADERBOARD_MAX_PAGE = 99999
ENRICH_ROW_COUNT = 3

# Canonical region names. URL slugs use dashes.
REGIONS = ["europe", "asia", "north_america"]

REGION_ALIASES = {
    "europe": "europe",
    "asia": "asia",
    "north-america": "north_america",
    "north_america": "north_america",
}

REGION_DISPLAY_NAMES = {
    "europe": "Europe",
    "asia": "Asia",
    "north_america": "North America",
}

# One digit per region, part of the synthetic Steam id
REGION_CODES = {
    "europe": "1",
    "asia": "2",
    "north_america": "3",
}

# Real Steam ids used round-robin when overlaying live profiles
REAL_STEAM_IDS = [
    "76561198015042012",
    "76561198023325380",
    "76561198063061652",
    "76561198111466240",
    "76561198048291570",
]


def resolve_region(name: str) -> str | None:
    """Resolve a URL region slug to the canonical region name."""
    if not name:
        return None
    return REGION_ALIASES.get(name.lower().strip())


def region_slug(region: str) -> str:
    return region.replace("_", "-")
