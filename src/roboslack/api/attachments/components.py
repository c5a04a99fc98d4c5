"""Attachment 组件 -- Color、Author、Title、AttachmentField、Footer

每个组件独立构造、独立校验。字段 alias 即 Slack 线上字段名，
Author / Title / Footer 在 Attachment 序列化时被展平到同一层。
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from pydantic import ConfigDict, Field, HttpUrl, RootModel, field_validator

from ..config import MAX_FOOTER_CHARACTER_LENGTH
from ..enums import CaseInsensitiveStrEnum
from ..exceptions import NotAPresetError
from ..validation import (
    check_character_length,
    check_does_not_contain_markdown,
    check_hex_color,
    check_not_empty,
)
from ..wire import WireModel


class ColorPreset(CaseInsensitiveStrEnum):
    """Slack 预设颜色"""

    GOOD = "good"  # 绿
    WARNING = "warning"  # 黄
    DANGER = "danger"  # 红


class Color(RootModel[str]):
    """Attachment 颜色 -- 预设名称或 #?????? 十六进制

    构造时统一转为小写；序列化为裸字符串。
    """

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(cls, value: "str | ColorPreset") -> "Color":
        return cls(value)

    @classmethod
    def good(cls) -> "Color":
        return cls.of(ColorPreset.GOOD)

    @classmethod
    def warning(cls) -> "Color":
        return cls.of(ColorPreset.WARNING)

    @classmethod
    def danger(cls) -> "Color":
        return cls.of(ColorPreset.DANGER)

    @field_validator("root", mode="before")
    @classmethod
    def lower_case(cls, value: object) -> object:
        if isinstance(value, str):
            return str(value).lower()
        return value

    @field_validator("root")
    @classmethod
    def check_value(cls, value: str) -> str:
        if ColorPreset.of_safe(value) is None:
            check_hex_color(value)
        return value

    @property
    def value(self) -> str:
        return self.root

    @property
    def is_preset(self) -> bool:
        return ColorPreset.of_safe(self.root) is not None

    def as_preset(self) -> ColorPreset:
        """返回对应的预设颜色

        Raises:
            NotAPresetError: 当前颜色是十六进制值而非预设
        """
        preset = ColorPreset.of_safe(self.root)
        if preset is None:
            raise NotAPresetError(self.root, [p.value for p in ColorPreset])
        return preset

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> "Color":
        """复制颜色；带 update 时对新值重新规范化与校验"""
        if not update:
            return super().model_copy(deep=deep)
        return type(self)(update.get("root", self.root))

    def __str__(self) -> str:
        return self.root


class ComponentModel(WireModel):
    """组件公共基类：不可变，可按字段名或线上 alias 构造"""


class Author(ComponentModel):
    """作者信息，名称不能包含 markdown"""

    name: str = Field(alias="author_name", description="作者名称")
    link: HttpUrl | None = Field(default=None, alias="author_link", description="作者链接")
    icon: HttpUrl | None = Field(default=None, alias="author_icon", description="作者图标")

    @classmethod
    def of(cls, name: str) -> "Author":
        return cls(name=name)

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return check_does_not_contain_markdown("author_name", value)


class Title(ComponentModel):
    """标题，文本不能为空"""

    text: str = Field(alias="title", description="标题文本")
    link: HttpUrl | None = Field(default=None, alias="title_link", description="标题链接")

    @classmethod
    def of(cls, text: str) -> "Title":
        return cls(text=text)

    @field_validator("text")
    @classmethod
    def check_text(cls, value: str) -> str:
        return check_not_empty("title", value)


class AttachmentField(ComponentModel):
    """Attachment 中的键值字段

    is_short 表示值足够短，可与相邻字段并排显示。
    """

    title: str = Field(description="字段标题，不能包含 markdown")
    value: str = Field(description="字段值")
    is_short: bool = Field(default=True, alias="short", description="是否并排显示")

    @classmethod
    def of(cls, title: str, value: str, is_short: bool = True) -> "AttachmentField":
        return cls(title=title, value=value, is_short=is_short)

    @field_validator("title")
    @classmethod
    def check_title(cls, value: str) -> str:
        return check_does_not_contain_markdown("title", value)


class Footer(ComponentModel):
    """页脚：文本不超过 300 字符且不能包含 markdown，可附带 unix 时间戳"""

    text: str = Field(alias="footer", description="页脚文本")
    icon: HttpUrl | None = Field(default=None, alias="footer_icon", description="页脚图标")
    timestamp: int | None = Field(default=None, alias="ts", description="unix 时间戳（秒）")

    @classmethod
    def of(cls, text: str) -> "Footer":
        return cls(text=text)

    @field_validator("text")
    @classmethod
    def check_text(cls, value: str) -> str:
        check_character_length("footer", value, MAX_FOOTER_CHARACTER_LENGTH)
        return check_does_not_contain_markdown("footer", value)

    @property
    def timestamp_datetime(self) -> datetime | None:
        """时间戳对应的 UTC 时间"""
        if self.timestamp is None:
            return None
        return datetime.fromtimestamp(self.timestamp, UTC)
