"""epoch 时间戳转换 -- 支持的时间类型是一个封闭集合

    TemporalKind          Python 值
    --------------------  -------------------------------------------
    INSTANT               tzinfo 为 UTC 的 datetime
    OFFSET_DATE_TIME      tzinfo 为固定偏移 (datetime.timezone) 的 datetime
    ZONED_DATE_TIME       其他 tzinfo（如 zoneinfo.ZoneInfo）的 datetime
    LOCAL_DATE_TIME       naive datetime，按 UTC 解释
    LOCAL_DATE            date，取 UTC 当日零点
    LOCAL_TIME            naive time，锚定到 UTC 的"今天"
    OFFSET_TIME           带 tzinfo 的 time，锚定到 UTC 的"今天"

集合之外的类型抛出 TemporalConversionError。
"""

from collections.abc import Callable
from datetime import UTC, date, datetime, time, timedelta, timezone
from enum import StrEnum

from ..exceptions import TemporalConversionError

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_ONE_SECOND = timedelta(seconds=1)

Temporal = datetime | date | time


class TemporalKind(StrEnum):
    """支持的时间类型"""

    INSTANT = "instant"
    OFFSET_DATE_TIME = "offset_date_time"
    ZONED_DATE_TIME = "zoned_date_time"
    LOCAL_DATE_TIME = "local_date_time"
    LOCAL_DATE = "local_date"
    LOCAL_TIME = "local_time"
    OFFSET_TIME = "offset_time"


def classify(value: object) -> TemporalKind:
    """判断值所属的时间类型

    Raises:
        TemporalConversionError: 不在支持集合内
    """
    # datetime 是 date 的子类，必须先判断
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return TemporalKind.LOCAL_DATE_TIME
        if value.tzinfo is UTC:
            return TemporalKind.INSTANT
        if isinstance(value.tzinfo, timezone):
            return TemporalKind.OFFSET_DATE_TIME
        return TemporalKind.ZONED_DATE_TIME
    if isinstance(value, date):
        return TemporalKind.LOCAL_DATE
    if isinstance(value, time):
        if value.tzinfo is None:
            return TemporalKind.LOCAL_TIME
        return TemporalKind.OFFSET_TIME
    raise TemporalConversionError(value)


def _utc_today() -> date:
    return datetime.now(UTC).date()


def _seconds_since_epoch(moment: datetime) -> int:
    # 向下取整，忽略亚秒部分
    return (moment - _EPOCH) // _ONE_SECOND


def convert_aware(value: datetime, today: date) -> int:
    return _seconds_since_epoch(value)


def convert_local_date_time(value: datetime, today: date) -> int:
    return _seconds_since_epoch(value.replace(tzinfo=UTC))


def convert_local_date(value: date, today: date) -> int:
    return convert_local_date_time(datetime.combine(value, time.min), today)


def convert_local_time(value: time, today: date) -> int:
    return convert_local_date_time(datetime.combine(today, value), today)


def convert_offset_time(value: time, today: date) -> int:
    # combine 保留 time 的 tzinfo
    return convert_aware(datetime.combine(today, value), today)


_CONVERTERS: dict[TemporalKind, Callable[..., int]] = {
    TemporalKind.INSTANT: convert_aware,
    TemporalKind.OFFSET_DATE_TIME: convert_aware,
    TemporalKind.ZONED_DATE_TIME: convert_aware,
    TemporalKind.LOCAL_DATE_TIME: convert_local_date_time,
    TemporalKind.LOCAL_DATE: convert_local_date,
    TemporalKind.LOCAL_TIME: convert_local_time,
    TemporalKind.OFFSET_TIME: convert_offset_time,
}


def to_epoch_seconds(value: Temporal, today: date | None = None) -> int:
    """将时间值转换为 UTC epoch 秒

    Args:
        value: 支持集合内的时间值
        today: 仅 time 类型使用的锚定日期，默认取 UTC 当天

    Returns:
        epoch 秒

    Raises:
        TemporalConversionError: 不支持的类型
    """
    kind = classify(value)
    return _CONVERTERS[kind](value, today or _utc_today())
