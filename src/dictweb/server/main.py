"""
dictweb server.

    uvicorn --factory dictweb.server.main:create_app --port 8080
"""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Callable

import httpx
from fastapi import FastAPI, Request
from fastapi.routing import APIRoute
from fastapi.templating import Jinja2Templates

from dictweb.config import Settings, get_settings, init_cache_dir
from dictweb.core.cache import CacheStore
from dictweb.core.client import DictionaryClient
from dictweb.core.context import PresentationContext
from dictweb.core.errors import MalformedPayloadError
from dictweb.core.lookup import LookupService
from dictweb.core.models import LookupFailure
from dictweb.core.ratelimit import TokenBucket
from dictweb.logging_setup import get_logger, setup_logging
from dictweb.server.routes import pages, static

log = get_logger("server")

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"

INTERNAL_FAILURE = LookupFailure(
    title="Something went wrong",
    message="The dictionary returned data we could not read. Please try again later.",
)


def print_routes(app: FastAPI):
    print("\n" + "=" * 60)
    print("dictweb routes")
    print("=" * 60)

    routes = []
    for route in app.routes:
        if isinstance(route, APIRoute):
            methods = ", ".join(route.methods - {"HEAD", "OPTIONS"})
            routes.append((methods, route.path, route.name))

    routes.sort(key=lambda r: (r[1], r[0]))

    for methods, path, name in routes:
        print(f"  {methods:8} {path:40} → {name}")

    print("=" * 60 + "\n")


@asynccontextmanager
async def lifespan(app: FastAPI):
    print_routes(app)
    yield
    app.state.lookup.client.close()


async def handle_malformed_payload(request: Request, exc: MalformedPayloadError):
    log.error("%s (%s)", exc, request.url.path)
    return pages.render_page(
        request,
        PresentationContext.failed(exc.key, INTERNAL_FAILURE),
        status_code=500,
    )


def create_app(
    settings: Settings | None = None,
    http: httpx.Client | None = None,
    clock: Callable[[], float] | None = None,
) -> FastAPI:
    """
    Build the app.

    `http` replaces the outbound HTTP client (tests pass one backed by
    httpx.MockTransport); `clock` drives the rate limiter.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level)

    app = FastAPI(title="dictweb", lifespan=lifespan)
    app.state.settings = settings

    cache = CacheStore(init_cache_dir(settings))
    client = DictionaryClient(settings.api_url, settings.timeout, http=http)
    app.state.lookup = LookupService(cache, client)
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

    limiter_args = {"capacity": settings.rate_burst, "interval": settings.rate_interval}
    if clock is not None:
        limiter_args["clock"] = clock
    app.state.limiter = TokenBucket(**limiter_args)

    app.add_exception_handler(MalformedPayloadError, handle_malformed_payload)

    app.include_router(pages.router)
    app.include_router(static.router)

    return app
