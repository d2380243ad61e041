from typing import Any, Dict, Optional
import logging
import time

from app.core.errors import ConfigurationError
from app.llm.llm_client import LLMClient
from app.models.schemas import GenerateRequest, GenerateResponse
from app.services.model_service import (
    build_optional_params,
    build_reasoning_params,
    resolve_model,
)
from app.services.prompt_service import build_system_prompt

logger = logging.getLogger(__name__)

MISSING_API_KEY_MESSAGE = "Server Error: Missing OPENAI_API_KEY env variable."


def build_extra_params(real_model: str, temperature: Any) -> Dict[str, Any]:
    params: Dict[str, Any] = {}
    params.update(build_reasoning_params(real_model))
    params.update(build_optional_params(real_model, temperature))
    return params


class GenerateService:
    """單次請求的代理流程：檢查設定 -> 模型映射 -> 組提示詞 -> 呼叫供應商 -> 整理回應。"""

    def __init__(self, llm_client: Optional[LLMClient]) -> None:
        self.llm_client = llm_client

    async def handle(self, req: GenerateRequest) -> GenerateResponse:
        if self.llm_client is None:
            raise ConfigurationError(MISSING_API_KEY_MESSAGE)

        real_model, is_proxy = resolve_model(req.model)
        logger.info(f"[Lab] Request: {req.model} -> Real Model: {real_model}")

        system_prompt = build_system_prompt(req.model, req.strategy)
        extra_params = build_extra_params(real_model, req.temperature)

        start = time.perf_counter()
        result = await self.llm_client.generate(
            model=real_model,
            instructions=system_prompt,
            user_input=req.prompt,
            extra_params=extra_params,
        )
        latency = int(round((time.perf_counter() - start) * 1000))

        output = result.get("output") or ""
        return GenerateResponse(
            output=output,
            latency=latency,
            length=len(output),
            model_used=req.model,
            real_model_used=real_model,
            is_proxy=is_proxy,
        )
