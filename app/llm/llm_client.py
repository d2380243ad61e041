from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
import logging

from openai import AsyncOpenAI, OpenAIError

from app.core.config import Settings
from app.core.errors import ProviderError

logger = logging.getLogger(__name__)


class LLMClient(ABC):    #所有 LLM 供應商的規格書
    @abstractmethod
    async def generate(
        self,
        model: str,
        instructions: str,
        user_input: Optional[str],
        extra_params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        raise NotImplementedError


class OpenAIResponsesClient(LLMClient):
    """使用 OpenAI Responses API。"""

    def __init__(
        self,
        api_key: str,
        base_url: Optional[str] = None,
        timeout: float = 600.0,
        client: Any = None,
    ) -> None:
        if client is None:
            client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.client = client

    async def generate(
        self,
        model: str,
        instructions: str,
        user_input: Optional[str],
        extra_params: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        params: Dict[str, Any] = {
            "model": model,
            "instructions": instructions,
        }
        if user_input is not None:
            params["input"] = user_input
        if extra_params:
            params.update(extra_params)

        try:
            resp = await self.client.responses.create(**params)
        except OpenAIError as e:
            raise ProviderError(str(e)) from e

        output = getattr(resp, "output_text", None) or ""
        usage = None
        if getattr(resp, "usage", None):
            usage = {
                "input_tokens": resp.usage.input_tokens,
                "output_tokens": resp.usage.output_tokens,
                "total_tokens": resp.usage.total_tokens,
            }
        return {
            "output": output,
            "model": getattr(resp, "model", model),
            "usage": usage,
        }


def build_llm_client(settings: Settings) -> Optional[LLMClient]:
    """有金鑰才建立 client；沒有金鑰時回傳 None，由 GenerateService 回報設定錯誤。"""
    if not settings.provider_configured:
        logger.warning("OPENAI_API_KEY 未設置，/api/generate 將回傳 500。")
        return None
    logger.info("Using OpenAIResponsesClient")
    return OpenAIResponsesClient(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        timeout=settings.llm_request_timeout,
    )
