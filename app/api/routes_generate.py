import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.errors import error_message
from app.models.schemas import ErrorResponse, GenerateRequest, GenerateResponse
from app.services.generate_service import GenerateService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_generate_service(request: Request) -> GenerateService:
    return request.app.state.generate_service


async def _read_body(request: Request):
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


@router.api_route(
    "",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD"],
    response_model=GenerateResponse,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def generate_api(request: Request):
    try:
        req = GenerateRequest.from_body(await _read_body(request))
        return await get_generate_service(request).handle(req)
    except Exception as exc:
        logger.exception("[API Error]")
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=error_message(exc)).model_dump(),
        )
