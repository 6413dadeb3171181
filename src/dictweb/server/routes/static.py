"""
Static routes: /static/<asset>

Only assets listed in ASSETS are served, looked up by name; the request
path is never joined onto a directory.
"""

from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse, Response

from dictweb.logging_setup import get_logger
from dictweb.server.deps import rate_limited

log = get_logger("server")

router = APIRouter(prefix="/static", tags=["static"])

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

# asset id -> (file in STATIC_DIR, media type)
ASSETS: dict[str, tuple[str, str]] = {
    "dict.css": ("dict.css", "text/css; charset=utf-8"),
}


@router.get("/{asset:path}", dependencies=[Depends(rate_limited("static"))])
def static_asset(asset: str):
    log.info("serving static file: %s", asset)
    entry = ASSETS.get(asset)
    if entry is None:
        log.warning("static file not whitelisted: %s", asset)
        return PlainTextResponse("Oops", status_code=404)

    filename, media_type = entry
    try:
        data = (STATIC_DIR / filename).read_bytes()
    except OSError as e:
        log.error("failed to read static file %s: %s", filename, e)
        return PlainTextResponse("Oops", status_code=500)
    return Response(content=data, media_type=media_type)
