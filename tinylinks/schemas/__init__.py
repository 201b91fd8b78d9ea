# re-export common schemas for simpler imports
from .link import LinkCreateRequest, LinkCreatedResponse, LinkResponse, MessageResponse
from .health import HealthResponse

__all__ = [
    "LinkCreateRequest",
    "LinkCreatedResponse",
    "LinkResponse",
    "MessageResponse",
    "HealthResponse",
]
