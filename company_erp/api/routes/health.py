from fastapi import APIRouter, Request

from company_erp.schemas.common import DataResponse

router = APIRouter(tags=["System Health"])


@router.get("/health", response_model=DataResponse[dict])
def health_check(request: Request) -> DataResponse[dict]:
    """Liveness probe."""
    settings = request.app.state.settings
    return DataResponse[dict](data={"status": "healthy", "version": settings.APP_VERSION})
