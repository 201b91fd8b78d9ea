from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import or_
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError
import logging

from tinylinks.core.errors import ConflictError
from tinylinks.db.models import Link

logger = logging.getLogger(__name__)


def list_links(db: Session, search: Optional[str] = None) -> List[Link]:
    query = db.query(Link)
    if search:
        query = query.filter(or_(
            Link.code.icontains(search, autoescape=True),
            Link.url.icontains(search, autoescape=True),
        ))
    return query.order_by(Link.created_at.desc(), Link.id.desc()).all()


def get_link_by_code(db: Session, code: str) -> Optional[Link]:
    return db.query(Link).filter(Link.code == code).first()


def code_exists(db: Session, code: str) -> bool:
    return db.query(Link.id).filter(Link.code == code).first() is not None


def create_link(db: Session, code: str, url: str) -> Link:
    link = Link(code=code, url=url, clicks=0, last_clicked=None)
    try:
        db.add(link)
        db.commit()
        db.refresh(link)
        return link
    except IntegrityError as e:
        db.rollback()
        logger.warning("IntegrityError creating Link code=%s url=%s: %s", code, url[:50], str(e.orig))
        raise ConflictError("Code already in use")


def delete_link(db: Session, code: str) -> int:
    deleted = db.query(Link).filter(Link.code == code).delete(synchronize_session=False)
    db.commit()
    return deleted


def utcnow() -> datetime:
    # naive UTC, matching the TIMESTAMP columns
    return datetime.now(timezone.utc).replace(tzinfo=None)


def record_click(db: Session, code: str, now: Optional[datetime] = None) -> Optional[str]:
    """Bump the click counter, stamp last_clicked and return the target URL, in one transaction."""
    updated = db.query(Link).filter(Link.code == code).update({
        Link.clicks: Link.clicks + 1,
        Link.last_clicked: now or utcnow(),
    }, synchronize_session=False)
    if not updated:
        db.rollback()
        return None
    url = db.query(Link.url).filter(Link.code == code).scalar()
    db.commit()
    return url
