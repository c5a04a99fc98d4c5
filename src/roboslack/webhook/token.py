"""WebHookToken -- Slack incoming webhook token

token 由三段组成：T 开头的 team、B 开头的 bot、24 位密钥，
可从字符串（含完整 webhook URL）或环境变量加载。
"""

import os
import re

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import WebHookTokenError

SEPARATOR = "/"
TOKEN_PATTERN = re.compile(r"(T[a-zA-Z0-9]{8})/(B[a-zA-Z0-9]{8})/([a-zA-Z0-9]{24})")

# 环境变量名
KEY_T_PART = "ROBOSLACK_TOKEN_TPART"
KEY_B_PART = "ROBOSLACK_TOKEN_BPART"
KEY_X_PART = "ROBOSLACK_TOKEN_XPART"
TOKEN_ENV_KEYS = (KEY_T_PART, KEY_B_PART, KEY_X_PART)


def missing_token_keys() -> list[str]:
    """返回环境中缺失的 token 变量名"""
    return [key for key in TOKEN_ENV_KEYS if not os.environ.get(key)]


class WebHookToken(BaseModel):
    """Slack webhook token"""

    model_config = ConfigDict(frozen=True)

    part_t: str = Field(description="team 段，T 开头")
    part_b: str = Field(description="bot 段，B 开头")
    part_x: str = Field(description="密钥段")

    @classmethod
    def from_string(cls, text: str) -> "WebHookToken":
        """从字符串中解析 token（可以是完整的 webhook URL）

        Raises:
            WebHookTokenError: 文本中找不到合法 token
        """
        match = TOKEN_PATTERN.search(text)
        if match is None:
            raise WebHookTokenError(f"无法解析 webhook token: {text}")
        return cls(part_t=match.group(1), part_b=match.group(2), part_x=match.group(3))

    @classmethod
    def from_environment(cls) -> "WebHookToken":
        """从环境变量加载

        环境变量:
            ROBOSLACK_TOKEN_TPART -> part_t
            ROBOSLACK_TOKEN_BPART -> part_b
            ROBOSLACK_TOKEN_XPART -> part_x

        Raises:
            WebHookTokenError: 任一变量缺失（一次性列出全部缺失项）
        """
        missing = missing_token_keys()
        if missing:
            raise WebHookTokenError(f"环境变量中缺少以下 key: [{', '.join(missing)}]")
        return cls(
            part_t=os.environ[KEY_T_PART],
            part_b=os.environ[KEY_B_PART],
            part_x=os.environ[KEY_X_PART],
        )

    def __str__(self) -> str:
        return SEPARATOR.join((self.part_t, self.part_b, self.part_x))
