"""MessageRequest -- webhook 消息请求（顶层聚合）

构造即校验：attachments 数量受上限约束；icon_emoji 自动规范化为 :name:，
这是唯一的自动修正步骤，其余违规一律构造失败。
"""

from collections.abc import Iterable
from typing import Any

import structlog
from pydantic import Field, HttpUrl, field_validator

from .attachments import Attachment
from .config import MAX_ATTACHMENTS_COUNT
from .enums import ParseMode
from .markdown import EMOJI
from .validation import check_max_count, check_not_empty
from .wire import WireModel

log = structlog.get_logger()


class MessageRequest(WireModel):
    """Slack webhook 消息请求

    icon_emoji 与 icon_url 同时存在时 icon_emoji 优先。
    顶层 text 不做 markdown 检查（见 validation 模块的校验表）。
    """

    text: str = Field(description="消息文本")
    username: str = Field(description="显示的发送者名称")
    icon_emoji: str | None = Field(default=None, description="图标 emoji，存储为 :name: 形式")
    icon_url: HttpUrl | None = Field(default=None, description="图标 URL")
    channel: str | None = Field(default=None, description="目标频道（#channel 或 @user）")
    link_names: bool = Field(default=True, description="是否解析 @user / #channel")
    unfurl_media: bool = Field(default=False, description="是否展开媒体链接")
    unfurl_links: bool = Field(default=False, description="是否展开普通链接")
    markdown_enabled: bool = Field(default=True, alias="mrkdwn", description="是否启用 markdown")
    parse: ParseMode = Field(default=ParseMode.NONE, description="解析模式")
    attachments: tuple[Attachment, ...] = Field(default=(), description="附件列表，有序")

    @classmethod
    def builder(cls) -> "MessageRequestBuilder":
        return MessageRequestBuilder()

    @field_validator("icon_emoji")
    @classmethod
    def normalize_icon_emoji(cls, value: str | None) -> str | None:
        if value is None:
            return None
        check_not_empty("icon_emoji", value)
        normalized = EMOJI.decorate(value)
        if normalized != value:
            log.debug("icon_emoji_normalized", original=value, normalized=normalized)
        return normalized

    @field_validator("attachments")
    @classmethod
    def check_attachments(cls, value: tuple[Attachment, ...]) -> tuple[Attachment, ...]:
        check_max_count("attachments", len(value), MAX_ATTACHMENTS_COUNT)
        return value

    @property
    def icon(self) -> str | None:
        """实际生效的图标：icon_emoji 优先，其次 icon_url"""
        if self.icon_emoji is not None:
            return self.icon_emoji
        if self.icon_url is not None:
            return str(self.icon_url)
        return None


class MessageRequestBuilder:
    """MessageRequest 分步构造器

    只累积字段值，不做校验；build() 时一次性校验，
    要么返回完整校验过的 MessageRequest，要么抛出 ValidationError。
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._attachments: list[Attachment] = []

    def _set(self, name: str, value: Any) -> "MessageRequestBuilder":
        self._values[name] = value
        return self

    def from_request(self, request: MessageRequest) -> "MessageRequestBuilder":
        """以已有消息的字段值作为初始值"""
        for name in MessageRequest.model_fields:
            value = getattr(request, name)
            if name == "attachments":
                self._attachments = list(value)
            elif value is not None:
                self._values[name] = value
        return self

    def text(self, text: str) -> "MessageRequestBuilder":
        return self._set("text", text)

    def username(self, username: str) -> "MessageRequestBuilder":
        return self._set("username", username)

    def icon_emoji(self, icon_emoji: str) -> "MessageRequestBuilder":
        return self._set("icon_emoji", icon_emoji)

    def icon_url(self, icon_url: str) -> "MessageRequestBuilder":
        return self._set("icon_url", icon_url)

    def channel(self, channel: str) -> "MessageRequestBuilder":
        return self._set("channel", channel)

    def link_names(self, link_names: bool) -> "MessageRequestBuilder":
        return self._set("link_names", link_names)

    def unfurl_media(self, unfurl_media: bool) -> "MessageRequestBuilder":
        return self._set("unfurl_media", unfurl_media)

    def unfurl_links(self, unfurl_links: bool) -> "MessageRequestBuilder":
        return self._set("unfurl_links", unfurl_links)

    def markdown_enabled(self, markdown_enabled: bool) -> "MessageRequestBuilder":
        return self._set("markdown_enabled", markdown_enabled)

    def parse(self, parse: "ParseMode | str") -> "MessageRequestBuilder":
        return self._set("parse", parse)

    def add_attachments(self, *attachments: Attachment) -> "MessageRequestBuilder":
        self._attachments.extend(attachments)
        return self

    def attachments(self, attachments: Iterable[Attachment]) -> "MessageRequestBuilder":
        self._attachments = list(attachments)
        return self

    def build(self) -> MessageRequest:
        return MessageRequest(**self._values, attachments=tuple(self._attachments))
