UNKNOWN_ERROR_MESSAGE = "Unknown API Error"


class ProxyError(Exception):
    """代理端點的錯誤基底類別。"""


class ConfigurationError(ProxyError):
    """伺服器設定缺漏（例如沒有 OPENAI_API_KEY）。"""


class ProviderError(ProxyError):
    """呼叫 LLM 供應商失敗：網路、驗證、參數被拒等。"""


def error_message(exc: BaseException) -> str:
    return str(exc) or UNKNOWN_ERROR_MESSAGE
