import re
import secrets
import string

from pydantic import HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

# Base62 alphabet, case-sensitive
ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits
DEFAULT_CODE_LENGTH = 6

CODE_PATTERN = re.compile(r"^[A-Za-z0-9]{6,8}$")

# First path segments owned by other routes; never redirected
RESERVED_CODES = frozenset({"api", "stats", "health"})

_url_adapter = TypeAdapter(HttpUrl)


def generate_code(length: int = DEFAULT_CODE_LENGTH) -> str:
    """Draw `length` independent characters uniformly from ALPHABET. Not guaranteed unique."""
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def is_valid_code(code) -> bool:
    return isinstance(code, str) and CODE_PATTERN.fullmatch(code) is not None


def is_reserved_code(code: str) -> bool:
    return code in RESERVED_CODES


def is_valid_url(value) -> bool:
    """True for an absolute http(s) URL with a host. Hosts without a dot (localhost, intranet names) are allowed."""
    if not isinstance(value, str) or not value.strip():
        return False
    try:
        parsed = _url_adapter.validate_python(value.strip())
    except PydanticValidationError:
        return False
    return bool(parsed.host)


def format_uptime(seconds: int) -> str:
    hours, rem = divmod(int(seconds), 3600)
    minutes, secs = divmod(rem, 60)
    return f"{hours}h {minutes}m {secs}s"
