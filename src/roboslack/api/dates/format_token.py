"""FormatToken -- Slack 动态日期格式 token

每个 token 在模式串中写作 {name}，并携带一个 strftime 模式，
用于在本地渲染 fallback 文本。
"""

from enum import Enum

from ..enums import LookupMixin
from ..markdown import StringDecorator

TOKEN_DECORATOR = StringDecorator.of("{", "}")


class FormatToken(LookupMixin, Enum):
    """Slack 支持的日期/时间 token

    of() / of_safe() 接受 "{date}" 或 "date"，忽略大小写。
    """

    DATE = "date"
    DATE_NUM = "date_num"
    DATE_SHORT = "date_short"
    DATE_LONG = "date_long"
    DATE_PRETTY = "date_pretty"
    DATE_SHORT_PRETTY = "date_short_pretty"
    DATE_LONG_PRETTY = "date_long_pretty"
    TIME = "time"
    TIME_SECS = "time_secs"

    @property
    def pattern(self) -> str:
        """strftime 模式"""
        return _PATTERNS[self]

    def __str__(self) -> str:
        return TOKEN_DECORATOR.decorate(self.value)


_PATTERNS: dict[FormatToken, str] = {
    FormatToken.DATE: "%B %d, %Y",
    FormatToken.DATE_NUM: "%Y-%m-%d",
    FormatToken.DATE_SHORT: "%b %d, %Y",
    FormatToken.DATE_LONG: "%A, %B %d, %Y",
    # *_pretty 在客户端会显示为 today / yesterday，本地 fallback 沿用对应格式
    FormatToken.DATE_PRETTY: "%B %d, %Y",
    FormatToken.DATE_SHORT_PRETTY: "%b %d, %Y",
    FormatToken.DATE_LONG_PRETTY: "%A, %B %d, %Y",
    # 12 小时制
    FormatToken.TIME: "%I:%M %p",
    FormatToken.TIME_SECS: "%I:%M:%S %p",
}
