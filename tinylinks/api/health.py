from fastapi import APIRouter, Depends

from tinylinks.api.deps import get_context
from tinylinks.core.context import AppContext
from tinylinks.schemas.health import HealthResponse
from tinylinks.services.health import health_report

router = APIRouter(tags=["health"])


# simple liveness
@router.get("/health", response_model=HealthResponse)
def health(context: AppContext = Depends(get_context)):
    return health_report(context)
