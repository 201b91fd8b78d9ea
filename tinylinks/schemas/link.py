from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime
from typing import Optional


# Request DTOs
class LinkCreateRequest(BaseModel):
    # Both optional here so the service can answer a missing URL with 400
    url: Optional[str] = None
    code: Optional[str] = None


# Response DTOs
class LinkResponse(BaseModel):
    code: str
    url: str
    clicks: int = 0
    last_clicked: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class LinkCreatedResponse(BaseModel):
    # full_url is the Python field, 'fullUrl' is the JSON key
    code: str
    full_url: str = Field(..., alias="fullUrl")
    url: str
    clicks: int = 0

    model_config = ConfigDict(populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
