"""
Page routes: / and /search
"""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, PlainTextResponse, RedirectResponse
from jinja2 import TemplateError

from dictweb.core.cache import normalize_key
from dictweb.core.context import PresentationContext
from dictweb.core.lookup import LookupService
from dictweb.logging_setup import get_logger
from dictweb.server.deps import get_lookup_service, get_templates, rate_limited

log = get_logger("server")

router = APIRouter(tags=["pages"])

TEMPLATE = "main.html"


def render_page(request: Request, ctx: PresentationContext, status_code: int = 200):
    """Render the main template for ctx; a broken template gives a bare 500."""
    templates = get_templates(request)
    try:
        return templates.TemplateResponse(
            request, TEMPLATE, {"ctx": ctx}, status_code=status_code
        )
    except TemplateError as e:
        log.error("failed to execute template: %s", e)
        return PlainTextResponse("Oops", status_code=500)


@router.get("/", response_class=HTMLResponse, dependencies=[Depends(rate_limited("root"))])
async def root(request: Request):
    """Empty search page."""
    return render_page(request, PresentationContext.empty())


@router.get("/search", response_class=HTMLResponse, dependencies=[Depends(rate_limited("search"))])
def search(
    request: Request,
    word: str = "",
    service: LookupService = Depends(get_lookup_service),
):
    """Look up `word` and render entries or the error."""
    log.info("handle search: %s", word)
    if not normalize_key(word):
        return RedirectResponse("/", status_code=303)

    ctx = service.resolve(word)
    return render_page(request, ctx)
