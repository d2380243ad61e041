from enum import Enum


class ResearchModel(str, Enum):
    """前端實驗頁面送來的模型代號。"""
    gpt_4o = "gpt-4o"
    gpt_5_2 = "gpt-5.2"
    gpt_4o_mini = "gpt-4o-mini"
    gpt_5_nano = "gpt-5-nano"
    o3 = "o3"
    gpt_5_2_thinking = "gpt-5.2-thinking"


class Strategy(str, Enum):
    persona = "persona"
    cot = "cot"


class ReasoningEffort(str, Enum):
    none = "none"
