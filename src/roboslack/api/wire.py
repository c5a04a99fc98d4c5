"""FrozenModel / WireModel -- 不可变模型基类与线上 JSON 编解码约定

编码使用字段 alias 作为线上字段名，缺省的可选字段不输出；
解码后再编码得到逐字节一致的 JSON。
"""

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """不可变模型基类

    model_copy(update=...) 按合并后的字段值重新构造，
    校验、规范化与派生值（model_post_init）都会重新执行。
    """

    model_config = ConfigDict(frozen=True)

    def model_copy(self, *, update: Mapping[str, Any] | None = None, deep: bool = False) -> Self:
        if not update:
            return super().model_copy(deep=deep)
        values = {name: getattr(self, name) for name in type(self).model_fields}
        return self.model_validate({**values, **update})


class WireModel(FrozenModel):
    """可编码为 Slack 线上 JSON 的不可变模型"""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """编码为 JSON 兼容的 dict"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """编码为紧凑 JSON 字符串"""
        return self.model_dump_json(by_alias=True, exclude_none=True)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> Self:
        """从线上 dict 解码"""
        return cls.model_validate(payload)

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """从线上 JSON 解码"""
        return cls.model_validate_json(text)
