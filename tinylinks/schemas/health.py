from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    uptime: str
    timestamp: str
    environment: str
    database: str
