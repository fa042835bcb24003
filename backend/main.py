"""FastAPI application entry point."""

import os
import traceback
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from config import (
    APP_ENV, PORT, SESSION_SECRET, ALLOWED_ORIGINS, STEAM_API_KEY,
    LEADERBOARD_RATE_LIMIT, LEADERBOARD_DEFAULT_LIMIT,
    REGION_DISPLAY_NAMES, resolve_region,
)
from cache import cache
from data.catalog import Catalog
from models import SessionUser
from services.leaderboard import build_leaderboard
from services.players import get_player_stats, get_recent_matches, get_player_profile
from utils import close_session

BASE_DIR = os.path.dirname(__file__)
TEMPLATES_DIR = os.path.join(BASE_DIR, "templates")
STATIC_DIR = os.path.join(BASE_DIR, "static")

limiter = Limiter(key_func=get_remote_address)
templates = Jinja2Templates(directory=TEMPLATES_DIR)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the identifier tables
    print("[startup] Building item/hero catalog...")
    app.state.catalog = Catalog()
    if not STEAM_API_KEY:
        print("[startup] STEAM_API_KEY not set, leaderboards are synthetic only")
    print(f"[startup] Ready! ({APP_ENV})")
    yield
    # Shutdown: close HTTP session
    await close_session()
    print("[shutdown] Closed.")


app = FastAPI(
    title="Deadlock Fan Site API",
    version="1.0.0",
    lifespan=lifespan,
)

# Rate limiting
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET, same_site="lax")
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.mount("/static", StaticFiles(directory=STATIC_DIR, check_dir=False), name="static")


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def session_user(request: Request) -> SessionUser | None:
    raw = request.session.get("user")
    if not raw:
        return None
    try:
        return SessionUser.model_validate(raw)
    except ValidationError:
        print("[auth] Dropping malformed session user")
        request.session.pop("user", None)
        return None


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def render(request: Request, template: str, title: str, region: str | None = None, status_code: int = 200, **context):
    return templates.TemplateResponse(
        request,
        template,
        {"user": session_user(request), "title": title, "region": region, **context},
        status_code=status_code,
    )


# --- Errors ---

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404 and not request.url.path.startswith("/api"):
        return render(request, "404.html", "Page not found", status_code=404)
    return error_response(exc.status_code, str(exc.detail))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    print(f"[error] {request.method} {request.url.path}: {exc}")
    traceback.print_exc()
    return error_response(500, "Internal server error")


# --- API ---

@app.get("/health")
async def health(request: Request):
    catalog = get_catalog(request)
    return {
        "status": "ok",
        "environment": APP_ENV,
        "items": len(catalog.items),
        "item_names": len(catalog.items_by_name),
        "heroes": len(catalog.heroes),
        "steam_api_configured": bool(STEAM_API_KEY),
        "cache_entries": len(cache),
    }


@app.get("/api/v1/leaderboards/{region}")
@limiter.limit(LEADERBOARD_RATE_LIMIT)
async def leaderboard_endpoint(
    request: Request,
    region: str,
    page: int = 1,
    limit: int = LEADERBOARD_DEFAULT_LIMIT,
    hero: str = "all",
    medal: str = "all",
):
    canonical = resolve_region(region)
    if canonical is None:
        return error_response(400, f"Invalid region '{region}'. Use europe, asia or north-america.")

    try:
        result = await build_leaderboard(canonical, page, limit, hero, medal, api_key=STEAM_API_KEY)
    except ValueError as e:
        return error_response(400, str(e))
    except Exception as e:
        print(f"[leaderboard] {region} page {page} failed: {e}")
        traceback.print_exc()
        return error_response(500, "Internal server error")
    return result.model_dump()


@app.get("/api/v1/auth/login/ko")
async def login_status(request: Request):
    user = session_user(request)
    if not user:
        return {"success": False}
    return {"success": True, "user": user.model_dump()}


@app.post("/api/v1/auth/logout")
async def logout(request: Request):
    request.session.pop("user", None)
    return {"success": True}


@app.get("/api/v1/items")
async def items_endpoint(request: Request):
    grouped = get_catalog(request).items_grouped()
    return {
        "success": True,
        "categories": {
            category: {str(tier): [r.model_dump() for r in records] for tier, records in tiers.items()}
            for category, tiers in grouped.items()
        },
    }


@app.get("/api/player/{steam_id}/stats")
async def player_stats_endpoint(request: Request, steam_id: str):
    if not steam_id.isdigit():
        return error_response(400, "Steam id must be numeric")
    stats = await get_player_stats(steam_id, get_catalog(request))
    if stats is None:
        return error_response(502, f"Could not fetch match history for {steam_id}")
    return {"success": True, "steam_id": steam_id, "stats": stats.model_dump()}


@app.get("/api/player/{steam_id}/recent")
async def player_recent_endpoint(request: Request, steam_id: str, limit: int = 10):
    if not steam_id.isdigit():
        return error_response(400, "Steam id must be numeric")
    matches = await get_recent_matches(steam_id, get_catalog(request), limit)
    if matches is None:
        return error_response(502, f"Could not fetch match history for {steam_id}")
    return {"success": True, "steam_id": steam_id, "matches": [m.model_dump() for m in matches]}


@app.get("/api/v1/players/{steam_id}")
async def player_profile_endpoint(request: Request, steam_id: str, limit: int = 10):
    if not steam_id.isdigit():
        return error_response(400, "Steam id must be numeric")
    profile = await get_player_profile(steam_id, get_catalog(request), STEAM_API_KEY, limit)
    if profile is None:
        return error_response(502, f"Could not fetch match history for {steam_id}")
    return {"success": True, **profile}


# --- Pages ---

@app.get("/favicon.ico", include_in_schema=False)
async def favicon():
    return Response(status_code=204)


@app.get("/")
async def index_page(request: Request):
    return render(request, "index.html", "Deadlock Coach")


@app.get("/leaderboards/{region}")
async def leaderboard_page(request: Request, region: str, page: int = 1, hero: str = "all", medal: str = "all"):
    canonical = resolve_region(region)
    if canonical is None:
        return render(request, "404.html", "Page not found", status_code=404)
    try:
        result = await build_leaderboard(canonical, page, LEADERBOARD_DEFAULT_LIMIT, hero, medal, api_key=STEAM_API_KEY)
    except ValueError:
        return render(request, "404.html", "Page not found", status_code=404)
    return render(
        request,
        "leaderboards.html",
        f"{REGION_DISPLAY_NAMES[canonical]} Leaderboard",
        region=result.region,
        leaderboard=result,
        hero=hero,
        medal=medal,
    )


@app.get("/items")
async def items_page(request: Request):
    return render(request, "items.html", "Items", grouped=get_catalog(request).items_grouped())


@app.get("/players/{steam_id}")
async def player_page(request: Request, steam_id: str):
    if not steam_id.isdigit():
        return render(request, "404.html", "Page not found", status_code=404)
    profile = await get_player_profile(steam_id, get_catalog(request), STEAM_API_KEY)
    title = profile["name"] if profile else f"Player {steam_id}"
    return render(request, "player.html", title, profile=profile, steam_id=steam_id)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=APP_ENV == "development")
