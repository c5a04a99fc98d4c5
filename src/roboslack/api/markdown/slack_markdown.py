"""Slack markdown 目录 -- 固定的装饰器注册表与 markdown 识别模式

模块级常量在导入时初始化一次，运行期只读。
"""

import re

from ..enums import CaseInsensitiveStrEnum
from .decorator import NEWLINE_SEPARATOR, LinkDecorator, StringDecorator

# 识别 Slack 会按 markdown 处理的内容
# 粗体/斜体/删除线/emoji/预格式按成对出现识别，单个符号不算
PATTERN = re.compile(r"(@|#|!|\*.+\*|~.+~|_.+_|:.+:|-.+-|\n|`.+`|>{3}|%E2%80%A2)")

BOLD_DECORATION = "*"
ITALIC_DECORATION = "_"
STRIKE_DECORATION = "~"
EMOJI_DECORATION = ":"
PREFORMAT_DECORATION = "`"
PREFORMAT_MULTILINE_DECORATION = "```"
SPECIAL_MENTION_DECORATION = "!"

MENTION_USER_PREFIX = "@"
MENTION_CHANNEL_PREFIX = "#"
QUOTE_PREFIX = ">"
QUOTE_MULTILINE_PREFIX = ">>>"
LINK_PREFIX = "<"
LINK_SUFFIX = ">"
LINK_TEXT_SEPARATOR = "|"
LIST_BULLET_PREFIX = "• "

BOLD = StringDecorator.of(BOLD_DECORATION)
ITALIC = StringDecorator.of(ITALIC_DECORATION)
STRIKE = StringDecorator.of(STRIKE_DECORATION)
EMOJI = StringDecorator.of(EMOJI_DECORATION)
PREFORMAT = StringDecorator.of(PREFORMAT_DECORATION)
PREFORMAT_MULTILINE = StringDecorator.of(
    PREFORMAT_MULTILINE_DECORATION + NEWLINE_SEPARATOR, PREFORMAT_MULTILINE_DECORATION
)
MENTION_USER = StringDecorator.of_prefix(MENTION_USER_PREFIX)
MENTION_CHANNEL = StringDecorator.of_prefix(MENTION_CHANNEL_PREFIX)
QUOTE = StringDecorator.of(NEWLINE_SEPARATOR + QUOTE_PREFIX, NEWLINE_SEPARATOR)
QUOTE_MULTILINE = StringDecorator.of(
    QUOTE_MULTILINE_PREFIX + NEWLINE_SEPARATOR, NEWLINE_SEPARATOR
)
NEWLINE = StringDecorator.of_suffix(NEWLINE_SEPARATOR)
LINK = LinkDecorator.of(LINK_PREFIX, LINK_TEXT_SEPARATOR, LINK_SUFFIX)
LIST_SINGLE_LEVEL = StringDecorator.of(LIST_BULLET_PREFIX, NEWLINE_SEPARATOR)

# 所有单值装饰器，按名称索引
STRING_DECORATORS: dict[str, StringDecorator] = {
    "bold": BOLD,
    "italic": ITALIC,
    "strike": STRIKE,
    "emoji": EMOJI,
    "preformat": PREFORMAT,
    "preformat_multiline": PREFORMAT_MULTILINE,
    "mention_user": MENTION_USER,
    "mention_channel": MENTION_CHANNEL,
    "quote": QUOTE,
    "quote_multiline": QUOTE_MULTILINE,
    "newline": NEWLINE,
    "list_single_level": LIST_SINGLE_LEVEL,
}


def contains_markdown(text: str | None) -> bool:
    """判断文本是否包含 Slack 会按 markdown 处理的内容"""
    return text is not None and PATTERN.search(text) is not None


class SpecialMention(CaseInsensitiveStrEnum):
    """特殊提及：@channel / @here / @everyone"""

    CHANNEL = "channel"
    HERE = "here"
    EVERYONE = "everyone"

    @property
    def mention(self) -> str:
        """消息中可直接使用的提及文本，如 <!here>"""
        return LINK_PREFIX + SPECIAL_MENTION_DECORATION + self.value + LINK_SUFFIX
