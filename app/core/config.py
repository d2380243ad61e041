from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # OpenAI 金鑰（未設定時 /api/generate 一律回 500）
    openai_api_key: str = ""

    # 選填：OpenAI 相容 API 位址
    openai_base_url: Optional[str] = None

    # 逾時交給 openai client 處理（秒）
    llm_request_timeout: float = 600.0

    log_level: str = "INFO"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"

    @property
    def provider_configured(self) -> bool:
        return bool(self.openai_api_key)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
