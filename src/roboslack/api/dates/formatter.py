"""DateTimeFormat -- 日期模式串解析与渲染

模式串由 FormatToken 占位符与字面文本交错组成，例如
"Meeting at {time} on {date_long}"。解析结果是有序的片段序列：

    literal("Meeting at ") token(TIME) literal(" on ") token(DATE_LONG)

token 匹配忽略大小写；字面文本保留原始大小写。形似 {...} 但不是已注册
token 的文本按字面处理，不报错。
"""

import re
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field, model_validator

from ..wire import FrozenModel
from .format_token import FormatToken

log = structlog.get_logger()

# 较长的 token 优先匹配
_TOKEN_PATTERN = re.compile(
    "|".join(
        re.escape(str(token))
        for token in sorted(FormatToken, key=lambda t: len(str(t)), reverse=True)
    ),
    re.IGNORECASE,
)
_PLACEHOLDER_PATTERN = re.compile(r"\{[^{}]*\}")

# 多个 token 之间的默认连接符
DEFAULT_TOKEN_JOINER = " "


class PatternSegment(FrozenModel):
    """模式串片段：字面文本或 token 引用"""

    text: str = Field(description="片段在模式串中的原始文本")
    token: FormatToken | None = Field(default=None, description="token 片段对应的 FormatToken")

    @property
    def is_token(self) -> bool:
        return self.token is not None

    def render(self, moment: datetime) -> str:
        if self.token is None:
            return self.text
        return moment.strftime(self.token.pattern)


def tokenize_pattern(pattern: str) -> tuple[PatternSegment, ...]:
    """把模式串切分为有序的字面/ token 片段

    Args:
        pattern: 原始模式串

    Returns:
        片段元组，拼接全部片段的 text 等于原模式串
    """
    segments: list[PatternSegment] = []
    position = 0
    for match in _TOKEN_PATTERN.finditer(pattern):
        if match.start() > position:
            segments.append(PatternSegment(text=pattern[position : match.start()]))
        segments.append(
            PatternSegment(text=match.group(), token=FormatToken.of(match.group()))
        )
        position = match.end()
    if position < len(pattern):
        segments.append(PatternSegment(text=pattern[position:]))

    for segment in segments:
        if not segment.is_token and _PLACEHOLDER_PATTERN.search(segment.text):
            log.debug("date_pattern_literal_placeholder", literal=segment.text)
    return tuple(segments)


class DateTimeFormat(FrozenModel):
    """已编译的日期格式

    构造时完成切分与校验，必须至少包含一个 FormatToken。
    """

    pattern: str = Field(description="原始模式串")
    segments: tuple[PatternSegment, ...] = Field(
        default=(), exclude=True, repr=False, description="切分结果（派生）"
    )

    @classmethod
    def of(cls, pattern: str) -> "DateTimeFormat":
        return cls(pattern=pattern)

    @classmethod
    def of_tokens(cls, token: FormatToken, *tokens: FormatToken) -> "DateTimeFormat":
        """由一个或多个 token 构造，token 之间以单个空格连接"""
        return cls.of(DEFAULT_TOKEN_JOINER.join(str(t) for t in (token, *tokens)))

    @model_validator(mode="before")
    @classmethod
    def compile_pattern(cls, data: Any) -> Any:
        if not isinstance(data, dict) or not isinstance(data.get("pattern"), str):
            return data
        pattern = data["pattern"]
        if not pattern:
            raise ValueError("日期模式串不能为空 (pattern cannot be empty)")
        segments = tokenize_pattern(pattern)
        if not any(segment.is_token for segment in segments):
            raise ValueError(
                f"日期模式串 '{pattern}' 必须至少包含一个 FormatToken "
                "(must contain at least one FormatToken)"
            )
        return {**data, "segments": segments}

    @property
    def tokens(self) -> tuple[FormatToken, ...]:
        return tuple(s.token for s in self.segments if s.token is not None)

    def format(self, moment: datetime) -> str:
        """按模式渲染 moment，片段按原顺序拼接"""
        return "".join(segment.render(moment) for segment in self.segments)

    def render(self, epoch_seconds: int) -> str:
        """渲染 epoch 秒对应的 UTC 时刻"""
        return self.format(datetime.fromtimestamp(epoch_seconds, UTC))

    def __str__(self) -> str:
        return self.pattern


LOCAL_DATE_TIME = DateTimeFormat.of_tokens(FormatToken.DATE_NUM, FormatToken.TIME_SECS)
