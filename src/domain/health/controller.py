from fastapi import APIRouter, Depends, Request
from src.domain.health.service import HealthService


router = APIRouter(prefix="/health", tags=["health"])


def get_health_service(request: Request) -> HealthService:
    return request.app.state.health_container.service()


@router.get("", summary="Health check endpoint")
async def health_check(service: HealthService = Depends(get_health_service),
                       ) -> dict:
    return service.check()
