from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.llm.llm_client import LLMClient
from app.main import create_app


class RecordingLLMClient(LLMClient):
    """不連網的假 client，記錄每次送出的參數。"""

    def __init__(self, output: Optional[str] = "測試回覆", error: Optional[Exception] = None) -> None:
        self.output = output
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, model, instructions, user_input, extra_params=None):
        self.calls.append({
            "model": model,
            "instructions": instructions,
            "user_input": user_input,
            "extra_params": dict(extra_params or {}),
        })
        if self.error is not None:
            raise self.error
        return {"output": self.output, "model": model, "usage": None}


@pytest.fixture
def llm_client() -> RecordingLLMClient:
    return RecordingLLMClient()


@pytest.fixture
def client(llm_client) -> TestClient:
    app = create_app(settings=Settings(openai_api_key="sk-test"), llm_client=llm_client)
    return TestClient(app)


@pytest.fixture
def unconfigured_client() -> TestClient:
    app = create_app(settings=Settings(openai_api_key=""))
    return TestClient(app)
