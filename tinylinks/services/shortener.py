from datetime import datetime
from typing import Callable, List, Optional
import logging

from sqlalchemy.orm import Session

from tinylinks.core.errors import ConflictError, ExhaustedError, NotFoundError, ValidationError
from tinylinks.db import repository
from tinylinks.db.models import Link
from tinylinks.utils.encoding import (
    DEFAULT_CODE_LENGTH,
    generate_code,
    is_reserved_code,
    is_valid_code,
    is_valid_url,
)

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10


class LinkService:

    @staticmethod
    def list_links(db: Session, search: Optional[str] = None) -> List[Link]:
        return repository.list_links(db, search.strip() if search else None)

    @staticmethod
    def validate_custom_code(db: Session, custom_code: str) -> str:
        if not is_valid_code(custom_code):
            raise ValidationError("Code must be 6-8 chars [A-Za-z0-9]")
        if repository.code_exists(db, custom_code):
            logger.warning(f"Custom code collision: '{custom_code}'")
            raise ConflictError("Code already in use")
        return custom_code

    @staticmethod
    def generate_unique_code(
        db: Session,
        length: int = DEFAULT_CODE_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        generator: Optional[Callable[[int], str]] = None,
    ) -> str:
        generator = generator or generate_code
        for attempt in range(max_attempts):
            candidate = generator(length)
            if is_reserved_code(candidate) or repository.code_exists(db, candidate):
                logger.info(f"Short code collision on attempt {attempt + 1}/{max_attempts}")
                continue
            return candidate
        raise ExhaustedError(f"Unable to generate unique code after {max_attempts} attempts")

    @staticmethod
    def create_link(
        db: Session,
        url: Optional[str],
        custom_code: Optional[str] = None,
        length: int = DEFAULT_CODE_LENGTH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        generator: Optional[Callable[[int], str]] = None,
    ) -> Link:
        if not is_valid_url(url):
            raise ValidationError("Invalid or missing URL")
        url = url.strip()

        if custom_code:
            code = LinkService.validate_custom_code(db, custom_code)
        else:
            code = LinkService.generate_unique_code(db, length, max_attempts, generator)

        # A concurrent creator can still win the code between the check and here;
        # the unique constraint turns that into ConflictError.
        link = repository.create_link(db, code, url)
        logger.info("Created short code '%s' for URL: %s", link.code, url[:50])
        return link

    @staticmethod
    def delete_link(db: Session, code: str):
        if not repository.delete_link(db, code):
            raise NotFoundError("Short URL not found")
        logger.info(f"Deleted short code '{code}'")

    @staticmethod
    def get_link(db: Session, code: str) -> Link:
        link = repository.get_link_by_code(db, code)
        if link is None:
            raise NotFoundError("Short URL not found")
        return link

    @staticmethod
    def resolve_redirect(db: Session, code: str, now: Optional[datetime] = None) -> str:
        if is_reserved_code(code):
            raise NotFoundError("Not found")
        url = repository.record_click(db, code, now)
        if url is None:
            raise NotFoundError("Short URL not found")
        return url

    @staticmethod
    def short_url(base_url: str, code: str) -> str:
        return f"{base_url.rstrip('/')}/{code}"
