from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, RedirectResponse
from sqlalchemy.orm import Session
import logging

from tinylinks.core.errors import NotFoundError
from tinylinks.db import database
from tinylinks.services.shortener import LinkService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["redirect"])


@router.get("/{code}")
def redirect_to_url_endpoint(code: str, db: Session = Depends(database.get_db)):
    """
    Access the short code and get redirected to the original long URL.
    Must be registered after every fixed route.
    """
    try:
        url = LinkService.resolve_redirect(db, code)
    except NotFoundError as e:
        logger.warning(f"Redirect 404: {code}: {e.message}")
        return PlainTextResponse(e.message, status_code=status.HTTP_404_NOT_FOUND)

    logger.info(f"Redirecting {code} -> {url[:50]}")
    return RedirectResponse(url=url, status_code=status.HTTP_302_FOUND)
