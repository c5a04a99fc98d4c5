"""Attachment -- 消息附件聚合

线上格式中 color / author / title / footer 被展平到 attachment 同一层，
mrkdwn_in 由 pretext、text、fields 的内容推导：构造时计算一次并固定，
解码时忽略输入中的 mrkdwn_in。
"""

from collections.abc import Iterable
from typing import Any

from pydantic import (
    Field,
    HttpUrl,
    PrivateAttr,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    field_validator,
    model_serializer,
    model_validator,
)

from ..enums import MarkdownInput
from ..markdown import contains_markdown
from ..validation import check_not_empty
from ..wire import WireModel
from .components import AttachmentField, Author, Color, Footer, Title

MARKDOWN_INPUTS_FIELD = "mrkdwn_in"

# 组件字段 -> (线上标记字段, 该组件全部线上字段)
_FLATTENED_COMPONENTS: dict[str, tuple[str, tuple[str, ...]]] = {
    "author": ("author_name", ("author_name", "author_link", "author_icon")),
    "title": ("title", ("title", "title_link")),
    "footer": ("footer", ("footer", "footer_icon", "ts")),
}


class Attachment(WireModel):
    """消息附件

    fallback 必填且非空；markdown_inputs 为派生值，不可直接设置。
    """

    fallback: str = Field(description="无法渲染富文本时显示的纯文本")
    color: Color | None = Field(default=None, description="左侧色条颜色")
    pretext: str | None = Field(default=None, description="附件上方文本")
    author: Author | None = Field(default=None, description="作者")
    title: Title | None = Field(default=None, description="标题")
    text: str | None = Field(default=None, description="正文")
    image_url: HttpUrl | None = Field(default=None, description="图片 URL")
    thumb_url: HttpUrl | None = Field(default=None, description="缩略图 URL")
    footer: Footer | None = Field(default=None, description="页脚")
    fields: tuple[AttachmentField, ...] = Field(default=(), description="键值字段，有序")

    _markdown_inputs: frozenset[MarkdownInput] = PrivateAttr(default=frozenset())

    @classmethod
    def builder(cls) -> "AttachmentBuilder":
        return AttachmentBuilder()

    @model_validator(mode="before")
    @classmethod
    def unflatten(cls, data: Any) -> Any:
        """把线上展平的组件字段还原为嵌套结构"""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data.pop(MARKDOWN_INPUTS_FIELD, None)
        data.pop("markdown_inputs", None)
        for component, (marker, wire_keys) in _FLATTENED_COMPONENTS.items():
            if not isinstance(data.get(marker), str):
                # 没有标记字段时，同组的其他线上字段无处归属
                orphans = [key for key in wire_keys if key != marker and key in data]
                if orphans:
                    raise ValueError(
                        f"字段 {orphans} 缺少对应的 '{marker}' (missing '{marker}')"
                    )
                continue
            data[component] = {key: data.pop(key) for key in wire_keys if key in data}
        return data

    @field_validator("fallback")
    @classmethod
    def check_fallback(cls, value: str) -> str:
        return check_not_empty("fallback", value)

    def model_post_init(self, context: Any, /) -> None:
        inputs: set[MarkdownInput] = set()
        if contains_markdown(self.pretext):
            inputs.add(MarkdownInput.PRETEXT)
        if contains_markdown(self.text):
            inputs.add(MarkdownInput.TEXT)
        # 任一字段值命中即可
        if any(contains_markdown(field.value) for field in self.fields):
            inputs.add(MarkdownInput.FIELDS)
        self._markdown_inputs = frozenset(inputs)

    @property
    def markdown_inputs(self) -> frozenset[MarkdownInput]:
        """需要 Slack 按 markdown 解析的子字段"""
        return self._markdown_inputs

    @model_serializer(mode="wrap")
    def flatten(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        # 按枚举定义顺序输出，保证编码稳定
        markdown_inputs = [m.value for m in MarkdownInput if m in self._markdown_inputs]
        if not info.by_alias:
            data["markdown_inputs"] = markdown_inputs
            return data

        payload: dict[str, Any] = {}
        for key, value in data.items():
            if key in _FLATTENED_COMPONENTS and isinstance(value, dict):
                payload.update(value)
            else:
                payload[key] = value
        payload[MARKDOWN_INPUTS_FIELD] = markdown_inputs
        return payload


class AttachmentBuilder:
    """Attachment 分步构造器

    只累积字段值，不做校验；build() 时一次性校验并返回不可变的 Attachment。
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}
        self._fields: list[AttachmentField] = []

    def _set(self, name: str, value: Any) -> "AttachmentBuilder":
        self._values[name] = value
        return self

    def fallback(self, fallback: str) -> "AttachmentBuilder":
        return self._set("fallback", fallback)

    def color(self, color: "Color | str") -> "AttachmentBuilder":
        return self._set("color", color)

    def pretext(self, pretext: str) -> "AttachmentBuilder":
        return self._set("pretext", pretext)

    def author(self, author: Author) -> "AttachmentBuilder":
        return self._set("author", author)

    def title(self, title: Title) -> "AttachmentBuilder":
        return self._set("title", title)

    def text(self, text: str) -> "AttachmentBuilder":
        return self._set("text", text)

    def image_url(self, image_url: str) -> "AttachmentBuilder":
        return self._set("image_url", image_url)

    def thumb_url(self, thumb_url: str) -> "AttachmentBuilder":
        return self._set("thumb_url", thumb_url)

    def footer(self, footer: Footer) -> "AttachmentBuilder":
        return self._set("footer", footer)

    def add_fields(self, *fields: AttachmentField) -> "AttachmentBuilder":
        self._fields.extend(fields)
        return self

    def fields(self, fields: Iterable[AttachmentField]) -> "AttachmentBuilder":
        self._fields = list(fields)
        return self

    def build(self) -> Attachment:
        return Attachment(**self._values, fields=tuple(self._fields))
