"""Webhook 异常体系"""


class WebHookError(Exception):
    """webhook 包基础异常"""

    def __init__(self, message: str, recoverable: bool = True) -> None:
        """
        Args:
            message: 错误描述
            recoverable: 是否可通过重试恢复
        """
        super().__init__(message)
        self.recoverable = recoverable


class WebHookTokenError(WebHookError, ValueError):
    """webhook token 无法解析或环境变量缺失"""

    def __init__(self, message: str) -> None:
        super().__init__(message, recoverable=False)


class WebHookUnreachableError(WebHookError):
    """Slack webhook 不可达（连接失败、超时等）"""

    def __init__(self, url: str, original_error: Exception) -> None:
        """
        Args:
            url: 尝试连接的地址（不含 token）
            original_error: 原始异常
        """
        super().__init__(
            f"Slack webhook 不可达: {url} -- {original_error}",
            recoverable=True,
        )
        self.url = url
        self.original_error = original_error


class WebHookResponseError(WebHookError):
    """Slack 返回了无法识别的响应内容"""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            f"无法识别的 webhook 响应: HTTP {status_code} -- {body!r}",
            recoverable=False,
        )
        self.status_code = status_code
        self.body = body
