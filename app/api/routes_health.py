from fastapi import APIRouter, Request
from app.models.schemas import HealthResponse

router = APIRouter()


@router.get("/", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    service = request.app.state.generate_service
    return HealthResponse(status="ok", provider_configured=service.llm_client is not None)
