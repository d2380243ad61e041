from types import MappingProxyType
from typing import Mapping, Optional

from app.models.enums import ResearchModel, Strategy

BASE_SYSTEM_PROMPT = "你是一個繁體中文 AI 助理。"

# (A) 模型特性模擬：依「前端代號」而非真實模型
MODEL_DIRECTIVES: Mapping[str, str] = MappingProxyType({
    ResearchModel.gpt_5_2.value: "你現在是 GPT-5.2。請展現極高的邏輯性、準確度與安全意識。遇到不確定的事請保守回答。",
    ResearchModel.gpt_5_nano.value: "你現在是 GPT-5 Nano。回答必須非常簡短、快速。",
    ResearchModel.o3.value: "你是推理模型。請以清楚條列方式回答，必要時先列出推理步驟再給結論。",
})

# (B) 策略注入
STRATEGY_DIRECTIVES: Mapping[str, str] = MappingProxyType({
    Strategy.persona.value: "你是一位精通繁體中文與台灣文化的學術專家。",
    Strategy.cot.value: "請一步一步思考 (step by step)，但避免輸出冗長內在獨白，使用條列化推理即可。",
})


def build_system_prompt(research_model: Optional[str], strategy: Optional[str]) -> str:
    system_prompt = BASE_SYSTEM_PROMPT
    for directive in (
        MODEL_DIRECTIVES.get(research_model),
        STRATEGY_DIRECTIVES.get(strategy),
    ):
        if directive:
            system_prompt += " " + directive
    return system_prompt
