"""枚举定义 -- ParseMode、MarkdownInput，以及所有枚举共用的大小写不敏感查找

find_member 是唯一的查找规则：同时比较 member.value 与 str(member)，
忽略大小写。StrEnum 子类通过 _missing_ 让 ParseMode("FULL") 与
pydantic 字段校验都走同一规则。
"""

from enum import Enum, StrEnum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


def find_member(enum_cls: type[E], value: object) -> E | None:
    """大小写不敏感地查找枚举成员

    Args:
        enum_cls: 枚举类
        value: 待匹配的值（非字符串直接返回 None）

    Returns:
        匹配的成员，未找到返回 None
    """
    if not isinstance(value, str):
        return None
    needle = value.lower()
    for member in enum_cls:
        if needle in (str(member.value).lower(), str(member).lower()):
            return member
    return None


class LookupMixin:
    """为枚举提供 of() / of_safe() 查找入口"""

    @classmethod
    def of_safe(cls, value: object):
        """查找成员，未找到返回 None"""
        return find_member(cls, value)  # type: ignore[arg-type]

    @classmethod
    def of(cls, value: object):
        """查找成员，未找到抛出 ValueError"""
        member = find_member(cls, value)  # type: ignore[arg-type]
        if member is None:
            valid = ", ".join(str(m) for m in cls)  # type: ignore[attr-defined]
            raise ValueError(f"{cls.__name__} 值 '{value}' 无效，合法值: [{valid}]")
        return member


class CaseInsensitiveStrEnum(LookupMixin, StrEnum):
    """值为小写字符串、解析时忽略大小写的枚举基类"""

    @classmethod
    def _missing_(cls, value: object):
        return find_member(cls, value)


class ParseMode(CaseInsensitiveStrEnum):
    """消息文本解析模式"""

    FULL = "full"
    NONE = "none"


class MarkdownInput(CaseInsensitiveStrEnum):
    """需要 Slack 按 markdown 解析的 attachment 子字段（mrkdwn_in）

    由 Attachment 根据字段内容推导，不可直接设置。
    """

    PRETEXT = "pretext"
    TEXT = "text"
    FIELDS = "fields"
