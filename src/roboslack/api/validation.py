"""构造期校验工具

所有检查失败时抛出 ValueError，在 pydantic validator 内部调用，
由 pydantic 包装为 ValidationError。

校验表:

    字段                       规则
    ------------------------  ------------------------------------------
    Attachment.fallback        非空
    Author.name                不能包含 markdown
    Title.text                 非空
    Field.title                不能包含 markdown
    Footer.text                不超过 300 字符，不能包含 markdown
    Color                      预设名称或 #?????? 十六进制
    MessageRequest.attachments 不超过 100 个
    MessageRequest.icon_emoji  自动规范化为 :name:（唯一的自动修正）
    MessageRequest.text        不检查 markdown（有意保留与 Author 等字段的不对称）
"""

import re

from .markdown import contains_markdown

HEX_COLOR_PATTERN = re.compile(r"#[0-9a-fA-F]{6}")


def check_not_empty(field_name: str, value: str) -> str:
    """检查字符串非空"""
    if not value:
        raise ValueError(f"字段 '{field_name}' 不能为空 (cannot be null or empty)")
    return value


def check_character_length(field_name: str, value: str, limit: int) -> str:
    """检查字符数不超过 limit"""
    if len(value) > limit:
        raise ValueError(
            f"字段 '{field_name}' 不能超过 {limit} 个字符（实际 {len(value)} 个）"
        )
    return value


def check_does_not_contain_markdown(field_name: str, value: str) -> str:
    """检查文本不包含 markdown"""
    if contains_markdown(value):
        raise ValueError(f"字段 '{field_name}' 不能包含 markdown (cannot contain markdown)")
    return value


def check_hex_color(value: str) -> str:
    """检查十六进制颜色格式 #??????（含 # 号）"""
    if HEX_COLOR_PATTERN.fullmatch(value) is None:
        raise ValueError(
            f"'{value}' 不是合法的十六进制颜色值，合法格式为: #??????（包含 # 号）"
        )
    return value


def check_max_count(field_name: str, count: int, limit: int) -> int:
    """检查集合元素数不超过 limit"""
    if count > limit:
        raise ValueError(f"字段 '{field_name}' 不能超过 {limit} 个（实际 {count} 个）")
    return count
