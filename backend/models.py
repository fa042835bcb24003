from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

ItemCategory = Literal["weapon", "vitality", "spirit"]


class ItemRecord(BaseModel):
    id: int | None = None   # first match history id, None for shop-only items
    name: str
    category: ItemCategory
    tier: int       # 1-4
    cost: int
    image_ref: str
    stats: list[str] = []
    description: str = ""


class HeroRecord(BaseModel):
    id: int
    name: str


class MatchItemView(BaseModel):
    name: str
    category: ItemCategory | None = None
    image_url: str
    slot: int | None = None
    item_id: int | None = None


class LeaderboardRow(BaseModel):
    rank: int
    player_name: str
    avatar_url: str
    steam_id: str
    country_flag: str
    heroes_played: list[str]
    medal: str
    subrank: int
    score: int
    wins: int
    losses: int


class Pagination(BaseModel):
    current_page: int
    total_pages: int
    total_count: int
    per_page: int


class LeaderboardPage(BaseModel):
    rows: list[LeaderboardRow]
    pagination: Pagination


class LeaderboardResponse(LeaderboardPage):
    success: bool = True
    region: str
    steam_data_included: bool = False


class SteamProfile(BaseModel):
    steam_id: str
    name: str
    avatar_url: str
    profile_url: str | None = None


class MatchView(BaseModel):
    match_id: int
    hero: str
    hero_id: int | None = None
    result: Literal["win", "loss"]
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    net_worth: int = 0
    duration_s: int = 0
    items: list[MatchItemView] = []
    items_source: Literal["api", "template"] = "template"


class HeroStats(BaseModel):
    hero: str
    matches: int = 0
    wins: int = 0
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    win_rate: float = 0.0


class PlayerStats(BaseModel):
    matches: int = 0
    wins: int = 0
    losses: int = 0
    win_rate: float = 0.0
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    kda: float = 0.0
    heroes: list[HeroStats] = []


class SessionUser(BaseModel):
    steam_id: str
    username: str
    avatar: str | None = None
