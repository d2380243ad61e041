"""
模型映射層 (Research Model -> Real Model)

前端代號維持不變，實際呼叫的是對照表裡的真實模型。
溫度等參數只在明確相容的模型上帶入，避免實驗因參數被拒而中斷。
"""
import math
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from app.models.enums import ReasoningEffort, ResearchModel

DEFAULT_REAL_MODEL = ResearchModel.gpt_4o_mini.value

MODEL_MAPPING: Mapping[str, str] = MappingProxyType({
    # 與前端實驗頁面的 value 完全一致
    ResearchModel.gpt_4o.value: "gpt-4o",
    ResearchModel.gpt_5_2.value: "gpt-5.2",
    ResearchModel.gpt_4o_mini.value: "gpt-4o-mini",
    ResearchModel.gpt_5_nano.value: "gpt-5-nano",
    ResearchModel.o3.value: "o3",
    # thinking 代號對應到同一個真實模型
    ResearchModel.gpt_5_2_thinking.value: "gpt-5.2",
})

TEMPERATURE_MODELS = frozenset({"gpt-4o", "gpt-4o-mini", "gpt-5.2"})

# gpt-5.2 一律固定 reasoning.effort="none"
REASONING_PINNED_MODELS: Mapping[str, str] = MappingProxyType({
    "gpt-5.2": ReasoningEffort.none.value,
})

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def map_model(research_model: Optional[str]) -> str:
    return MODEL_MAPPING.get(research_model, DEFAULT_REAL_MODEL)


def resolve_model(research_model: Optional[str]) -> Tuple[str, bool]:
    """回傳 (真實模型, 是否被代換)。"""
    real_model = map_model(research_model)
    return real_model, research_model != real_model


def parse_temperature(value: Any) -> Optional[float]:
    """寬鬆解析：字串取開頭的數字部分，非有限數值一律視為未提供。"""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            t = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        match = _FLOAT_PREFIX.match(value.strip())
        if not match:
            return None
        t = float(match.group(0))
    else:
        return None
    return t if math.isfinite(t) else None


def build_optional_params(real_model: str, temperature: Any) -> Dict[str, Any]:
    t = parse_temperature(temperature)
    if t is None or real_model not in TEMPERATURE_MODELS:
        # gpt-5-nano / o3：保守起見不帶 temperature
        return {}
    return {"temperature": t}


def build_reasoning_params(real_model: str) -> Dict[str, Any]:
    effort = REASONING_PINNED_MODELS.get(real_model)
    if effort is None:
        return {}
    return {"reasoning": {"effort": effort}}
