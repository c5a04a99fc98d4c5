"""Decorator -- 前后缀装饰器

StringDecorator 包装单个字符串，LinkDecorator 用分隔符拼接 (url, text)
后再包装。decorate 是幂等的：已带有前缀/后缀的值不会被重复包装。
"""

from collections.abc import Iterable

from pydantic import Field, model_validator

from ..wire import FrozenModel

NEWLINE_SEPARATOR = "\n"


def _decorate(prefix: str | None, suffix: str | None, value: str) -> str:
    """按需添加前缀和后缀（已存在则跳过）"""
    if prefix and not value.startswith(prefix):
        value = prefix + value
    if suffix and not value.endswith(suffix):
        value = value + suffix
    return value


class Decorator(FrozenModel):
    """装饰器基类：prefix / suffix 至少一个存在且非空"""

    prefix: str | None = Field(default=None, description="前缀")
    suffix: str | None = Field(default=None, description="后缀")

    @model_validator(mode="after")
    def check_present(self) -> "Decorator":
        if not self.prefix and not self.suffix:
            raise ValueError("至少需要一个字段存在且有效 (present and valid): [prefix, suffix]")
        return self


class StringDecorator(Decorator):
    """单字符串装饰器"""

    @classmethod
    def of(cls, prefix: str, suffix: str | None = None) -> "StringDecorator":
        """构造装饰器；省略 suffix 时前后使用同一字符串"""
        return cls(prefix=prefix, suffix=prefix if suffix is None else suffix)

    @classmethod
    def of_prefix(cls, prefix: str) -> "StringDecorator":
        return cls(prefix=prefix)

    @classmethod
    def of_suffix(cls, suffix: str) -> "StringDecorator":
        return cls(suffix=suffix)

    def decorate(self, value: str) -> str:
        """为 value 添加前缀和后缀（幂等）"""
        return _decorate(self.prefix, self.suffix, value)

    def decorate_multiline(self, values: Iterable[str]) -> str:
        """逐行装饰后用换行符拼接，保持输入顺序"""
        return NEWLINE_SEPARATOR.join(self.decorate(value) for value in values)


class LinkDecorator(Decorator):
    """链接装饰器 -- 以 separator 拼接 (url, text) 后包装

    例: LinkDecorator.of("<", "|", ">").decorate(url, "text") -> "<url|text>"
    """

    separator: str = Field(description="url 与 text 之间的分隔符，必填且非空")

    @classmethod
    def of(cls, prefix: str, separator: str, suffix: str) -> "LinkDecorator":
        return cls(prefix=prefix, separator=separator, suffix=suffix)

    @model_validator(mode="after")
    def check_separator(self) -> "LinkDecorator":
        if not self.separator:
            raise ValueError("separator 必须存在且有效 (present and valid)，不能为空字符串")
        return self

    def decorate(self, url: object, text: str) -> str:
        """拼接 url 与 text 并包装"""
        return _decorate(self.prefix, self.suffix, f"{url}{self.separator}{text}")
