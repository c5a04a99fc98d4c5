"""roboslack.api -- Slack 消息模型、markdown 装饰与动态日期

公共类型从此入口导入。
"""

# 附件
from .attachments import (
    Attachment,
    AttachmentBuilder,
    AttachmentField,
    Author,
    Color,
    ColorPreset,
    Footer,
    Title,
)

# 动态日期
from .dates import (
    LOCAL_DATE_TIME,
    DateTimeFormat,
    DateTimeValue,
    FormatToken,
    TemporalKind,
    to_epoch_seconds,
)

# 枚举
from .enums import MarkdownInput, ParseMode

# 异常
from .exceptions import NotAPresetError, RoboSlackError, TemporalConversionError

# markdown
from .markdown import LinkDecorator, SpecialMention, StringDecorator, contains_markdown

# 消息
from .message import MessageRequest, MessageRequestBuilder

__all__ = [
    # 消息
    "MessageRequest",
    "MessageRequestBuilder",
    # 附件
    "Attachment",
    "AttachmentBuilder",
    "AttachmentField",
    "Author",
    "Color",
    "ColorPreset",
    "Footer",
    "Title",
    # 枚举
    "ParseMode",
    "MarkdownInput",
    # markdown
    "StringDecorator",
    "LinkDecorator",
    "SpecialMention",
    "contains_markdown",
    # 动态日期
    "DateTimeValue",
    "DateTimeFormat",
    "FormatToken",
    "TemporalKind",
    "LOCAL_DATE_TIME",
    "to_epoch_seconds",
    # 异常
    "RoboSlackError",
    "NotAPresetError",
    "TemporalConversionError",
]
