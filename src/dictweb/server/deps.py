"""
Shared dependencies for routes.

Everything a route needs hangs off app.state, set up by create_app(), so
every app instance (and every test) gets its own cache, client and limiter.
"""

import math

from fastapi import HTTPException, Request
from fastapi.templating import Jinja2Templates

from dictweb.core.lookup import LookupService
from dictweb.core.ratelimit import TokenBucket
from dictweb.logging_setup import get_logger

log = get_logger("server")


def get_lookup_service(request: Request) -> LookupService:
    return request.app.state.lookup


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def get_limiter(request: Request) -> TokenBucket:
    return request.app.state.limiter


def rate_limited(label: str):
    """
    Dependency that admits a request only if the shared bucket has a token.

    `label` names the handler in the rejection log line.
    """

    def check(request: Request):
        limiter = get_limiter(request)
        if limiter.try_acquire():
            return
        log.warning("%s: rate limit exceeded", label)
        retry = max(1, math.ceil(limiter.retry_after()))
        raise HTTPException(
            status_code=429,
            detail="Too Many Requests",
            headers={"Retry-After": str(retry)},
        )

    return check
