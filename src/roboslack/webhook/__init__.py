"""roboslack.webhook -- Slack incoming webhook 客户端"""

from .client import SlackWebHookClient
from .config import WebHookConfig, load_webhook_config
from .exceptions import (
    WebHookError,
    WebHookResponseError,
    WebHookTokenError,
    WebHookUnreachableError,
)
from .logging_config import setup_logging
from .response import ResponseCode
from .token import WebHookToken

__all__ = [
    # 客户端
    "SlackWebHookClient",
    "WebHookToken",
    "ResponseCode",
    # 配置
    "WebHookConfig",
    "load_webhook_config",
    "setup_logging",
    # 异常
    "WebHookError",
    "WebHookTokenError",
    "WebHookUnreachableError",
    "WebHookResponseError",
]
