"""WebHookConfig -- webhook 客户端配置加载

从环境变量加载配置，缺失或非法的值回退到默认值，不阻塞启动。
"""

import os

import structlog
from pydantic import BaseModel, Field

log = structlog.get_logger()

DEFAULT_WEB_HOOK_URL = "https://hooks.slack.com/services/"
DEFAULT_USER_AGENT = "RoboSlack/1.0"
DEFAULT_TIMEOUT_S = 10


class WebHookConfig(BaseModel):
    """webhook 客户端配置 -- 从环境变量加载

    环境变量:
        ROBOSLACK_WEBHOOK_URL: webhook 基础 URL
        ROBOSLACK_USER_AGENT: 请求 User-Agent
        ROBOSLACK_TIMEOUT_S: 请求超时（秒，默认 10）
    """

    base_url: str = Field(default=DEFAULT_WEB_HOOK_URL, description="webhook 基础 URL")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent")
    timeout_s: int = Field(default=DEFAULT_TIMEOUT_S, ge=1, description="请求超时（秒）")


def load_webhook_config() -> WebHookConfig:
    """从环境变量加载 webhook 配置

    环境变量映射:
        ROBOSLACK_WEBHOOK_URL -> base_url (默认 "https://hooks.slack.com/services/")
        ROBOSLACK_USER_AGENT -> user_agent (默认 "RoboSlack/1.0")
        ROBOSLACK_TIMEOUT_S -> timeout_s (默认 10)

    Returns:
        WebHookConfig 实例
    """
    kwargs: dict = {}

    if val := os.environ.get("ROBOSLACK_WEBHOOK_URL"):
        kwargs["base_url"] = val

    if val := os.environ.get("ROBOSLACK_USER_AGENT"):
        kwargs["user_agent"] = val

    if val := os.environ.get("ROBOSLACK_TIMEOUT_S"):
        try:
            timeout_s = int(val)
            if timeout_s < 1:
                raise ValueError(val)
            kwargs["timeout_s"] = timeout_s
        except ValueError:
            log.warning(
                "invalid_timeout_config",
                env_var="ROBOSLACK_TIMEOUT_S",
                value=val,
                fallback=DEFAULT_TIMEOUT_S,
            )

    return WebHookConfig(**kwargs)
