"""Slack 动态日期 -- token、模式串格式化、epoch 转换"""

from .date_time import DateTimeValue
from .epoch import TemporalKind, classify, to_epoch_seconds
from .format_token import FormatToken
from .formatter import LOCAL_DATE_TIME, DateTimeFormat, PatternSegment, tokenize_pattern

__all__ = [
    "DateTimeValue",
    "DateTimeFormat",
    "PatternSegment",
    "tokenize_pattern",
    "LOCAL_DATE_TIME",
    "FormatToken",
    "TemporalKind",
    "classify",
    "to_epoch_seconds",
]
