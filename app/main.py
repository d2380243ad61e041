from typing import Optional

from fastapi import FastAPI
from app.api import routes_health, routes_generate
from app.core.config import Settings, get_settings
from app.core.cors import StaticCORSMiddleware
from app.core.logging import setup_logging
from app.llm.llm_client import LLMClient, build_llm_client
from app.services.generate_service import GenerateService


def create_app(
    settings: Optional[Settings] = None,
    llm_client: Optional[LLMClient] = None,
) -> FastAPI:
    """建立並回傳 FastAPI 主應用。llm_client 未指定時依 settings 建立。"""
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    app = FastAPI(
        title="LLM Lab Proxy",
        description="繁體中文 LLM 實驗用代理端點",
        version="0.1.0",
    )

    if llm_client is None:
        llm_client = build_llm_client(settings)
    app.state.settings = settings
    app.state.generate_service = GenerateService(llm_client)

    app.add_middleware(StaticCORSMiddleware)

    app.include_router(routes_health.router, prefix="/health", tags=["health"])
    app.include_router(routes_generate.router, prefix="/api/generate", tags=["generate"])

    return app


app = create_app()
