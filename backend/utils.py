import asyncio
import re
import aiohttp

from config import HTTP_TIMEOUT

_session: aiohttp.ClientSession | None = None

USER_AGENT = "DeadlockFanSite/1.0 (+https://github.com/deadlock-fansite)"


async def get_session() -> aiohttp.ClientSession:
    global _session
    if _session is None or _session.closed:
        _session = aiohttp.ClientSession(
            headers={"User-Agent": USER_AGENT},
            timeout=aiohttp.ClientTimeout(total=HTTP_TIMEOUT),
        )
    return _session


async def close_session():
    global _session
    if _session and not _session.closed:
        await _session.close()
        _session = None


async def fetch_json(url: str, params: dict | None = None, timeout: float | None = None) -> dict | list | None:
    """Fetch JSON from a URL. Returns None on error."""
    session = await get_session()
    request_timeout = aiohttp.ClientTimeout(total=timeout) if timeout else None
    try:
        async with session.get(url, params=params, timeout=request_timeout) as resp:
            if resp.status == 200:
                return await resp.json()
            return None
    except (aiohttp.ClientError, asyncio.TimeoutError, ValueError):
        return None


async def head_status(url: str, timeout: float = 5) -> int | None:
    """HEAD a URL and return its status code, or None on network error."""
    session = await get_session()
    try:
        async with session.head(url, timeout=aiohttp.ClientTimeout(total=timeout), allow_redirects=True) as resp:
            return resp.status
    except (aiohttp.ClientError, asyncio.TimeoutError):
        return None


def normalize_key(text: str) -> str:
    """Lowercase and drop everything but letters and digits ("Mo & Krill" -> "mokrill")."""
    return re.sub(r"[^0-9a-z]", "", (text or "").lower())


def slugify(name: str) -> str:
    """Item display name to CDN file slug ("Headshot Booster" -> "headshot_booster")."""
    slug = name.lower().replace("'", "")
    slug = re.sub(r"[^0-9a-z]+", "_", slug)
    return slug.strip("_")


def country_flag(code: str) -> str:
    """ISO 3166 alpha-2 code to its flag emoji."""
    code = (code or "").upper()
    if len(code) != 2 or not code.isalpha():
        return ""
    return "".join(chr(0x1F1E6 + ord(c) - ord("A")) for c in code)
