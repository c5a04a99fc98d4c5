"""Slack markdown -- 装饰器与 markdown 识别"""

from .decorator import NEWLINE_SEPARATOR, Decorator, LinkDecorator, StringDecorator
from .slack_markdown import (
    BOLD,
    EMOJI,
    ITALIC,
    LINK,
    LIST_SINGLE_LEVEL,
    MENTION_CHANNEL,
    MENTION_USER,
    NEWLINE,
    PATTERN,
    PREFORMAT,
    PREFORMAT_MULTILINE,
    QUOTE,
    QUOTE_MULTILINE,
    STRIKE,
    STRING_DECORATORS,
    SpecialMention,
    contains_markdown,
)

__all__ = [
    "Decorator",
    "StringDecorator",
    "LinkDecorator",
    "NEWLINE_SEPARATOR",
    "PATTERN",
    "contains_markdown",
    "SpecialMention",
    "STRING_DECORATORS",
    "BOLD",
    "ITALIC",
    "STRIKE",
    "EMOJI",
    "PREFORMAT",
    "PREFORMAT_MULTILINE",
    "MENTION_USER",
    "MENTION_CHANNEL",
    "QUOTE",
    "QUOTE_MULTILINE",
    "NEWLINE",
    "LINK",
    "LIST_SINGLE_LEVEL",
]
