from fastapi import APIRouter, Depends, Query, Request, status
from sqlalchemy.orm import Session
from typing import List, Optional
import logging

from tinylinks.api.deps import get_context, public_base_url
from tinylinks.core.context import AppContext
from tinylinks.db import database
from tinylinks.schemas.link import LinkCreateRequest, LinkCreatedResponse, LinkResponse, MessageResponse
from tinylinks.services.shortener import LinkService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/links", tags=["links"])


@router.get("", response_model=List[LinkResponse])
def list_links_endpoint(search: Optional[str] = Query(None), db: Session = Depends(database.get_db)):
    links = LinkService.list_links(db, search)
    logger.info(f"Listed {len(links)} links (search={search!r})")
    return links


@router.post("", response_model=LinkCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_link_endpoint(
    link_request: LinkCreateRequest,
    request: Request,
    db: Session = Depends(database.get_db),
    context: AppContext = Depends(get_context),
):
    link = LinkService.create_link(
        db,
        link_request.url,
        link_request.code,
        length=context.settings.CODE_LENGTH,
        max_attempts=context.settings.CODE_MAX_ATTEMPTS,
    )
    return LinkCreatedResponse(
        code=link.code,
        full_url=LinkService.short_url(public_base_url(request), link.code),
        url=link.url,
        clicks=link.clicks,
    )


@router.delete("/{code}", response_model=MessageResponse)
def delete_link_endpoint(code: str, db: Session = Depends(database.get_db)):
    LinkService.delete_link(db, code)
    return MessageResponse(message="Short URL deleted")
