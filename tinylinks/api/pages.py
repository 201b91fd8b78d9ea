from pathlib import Path
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from tinylinks.api.deps import public_base_url
from tinylinks.core.errors import NotFoundError
from tinylinks.db import database
from tinylinks.services.shortener import LinkService

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

router = APIRouter(include_in_schema=False)


@router.get("/_ping", response_class=PlainTextResponse)
def ping():
    return "ok-debug"


@router.get("/_test-html", response_class=HTMLResponse)
def test_html():
    # renders without going through Jinja2
    return "<html><body><h1>test html OK</h1></body></html>"


@router.get("/", response_class=HTMLResponse)
def dashboard(request: Request):
    logger.info(f"GET / from {request.client.host if request.client else 'unknown'} host={request.headers.get('host')}")
    return templates.TemplateResponse(request, "dashboard.html")


@router.get("/stats/{code}", response_class=HTMLResponse)
def stats_page(code: str, request: Request, db: Session = Depends(database.get_db)):
    try:
        link = LinkService.get_link(db, code)
    except NotFoundError as e:
        logger.warning(f"Stats 404: Short code not found: {code}")
        return templates.TemplateResponse(
            request, "404.html", {"message": e.message}, status_code=status.HTTP_404_NOT_FOUND
        )
    except Exception as e:
        # HTML route: answer in plain text rather than the JSON error body
        logger.error(f"Stats page failed for {code}: {e}", exc_info=True)
        return PlainTextResponse("Server error", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
    return templates.TemplateResponse(
        request,
        "stats.html",
        {"link": link, "full_short_url": LinkService.short_url(public_base_url(request), link.code)},
    )
