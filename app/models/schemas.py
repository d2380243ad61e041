from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, field_validator


class HealthResponse(BaseModel):
    status: str = "ok"
    provider_configured: bool = False


class GenerateRequest(BaseModel):
    """前端送來的欄位全部可省略，型別不符時退化為缺值，不回 422。"""

    prompt: Optional[str] = None
    model: Optional[str] = None
    strategy: Optional[str] = None
    temperature: Any = None

    @field_validator("prompt", "model", "strategy", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> Optional[str]:
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return None

    @classmethod
    def from_body(cls, body: Any) -> "GenerateRequest":
        if not isinstance(body, dict):
            return cls()
        return cls.model_validate(body)


class GenerateResponse(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    output: str
    latency: int
    length: int
    model_used: Optional[str] = None
    real_model_used: str
    is_proxy: bool


class ErrorResponse(BaseModel):
    error: str
