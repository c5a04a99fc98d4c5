"""DateTimeValue -- Slack 动态日期

输出形如 <!date^00001234^{date_num} {time_secs}^https://example.com/x|1970-01-01 12:20:34 AM>：
客户端按查看者的时区/语言实时渲染 epoch 与模式串，
无法渲染时显示 "|" 之后按 UTC 计算的 fallback 文本。
"""

from pydantic import Field, HttpUrl, field_validator

from ..config import DATE_EPOCH_MIN_DIGITS
from ..wire import FrozenModel
from .epoch import Temporal, to_epoch_seconds
from .formatter import LOCAL_DATE_TIME, DateTimeFormat

DATE_DIRECTIVE_PREFIX = "<!date"
DATE_DIRECTIVE_SUFFIX = ">"
DATE_DIRECTIVE_SEPARATOR = "^"
FALLBACK_SEPARATOR = "|"


class DateTimeValue(FrozenModel):
    """绑定了格式与可选链接的时间点，构造后不可变"""

    epoch_seconds: int = Field(description="UTC epoch 秒")
    date_format: DateTimeFormat = Field(default=LOCAL_DATE_TIME, description="渲染格式")
    link: HttpUrl | None = Field(default=None, description="点击日期时打开的链接")

    @classmethod
    def of(
        cls,
        value: "int | Temporal",
        link: str | None = None,
        date_format: DateTimeFormat | None = None,
    ) -> "DateTimeValue":
        """由 epoch 秒或支持的时间值构造

        Args:
            value: epoch 秒（int）或 datetime / date / time
            link: 可选链接，格式非法时构造失败
            date_format: 渲染格式，默认 LOCAL_DATE_TIME

        Raises:
            TemporalConversionError: 不支持的时间类型
            ValidationError: 链接格式非法
        """
        epoch_seconds = value if isinstance(value, int) else to_epoch_seconds(value)
        return cls(
            epoch_seconds=epoch_seconds,
            date_format=date_format or LOCAL_DATE_TIME,
            link=link,
        )

    @field_validator("epoch_seconds", mode="before")
    @classmethod
    def reject_bool(cls, value: object) -> object:
        if isinstance(value, bool):
            raise ValueError("epoch_seconds 必须是整数时间戳，不能是 bool")
        return value

    def fallback_text(self) -> str:
        """按 UTC 渲染的纯文本"""
        return self.date_format.render(self.epoch_seconds)

    def format(self) -> str:
        """生成 Slack 动态日期指令"""
        parts = [
            DATE_DIRECTIVE_PREFIX,
            f"{self.epoch_seconds:0{DATE_EPOCH_MIN_DIGITS}d}",
            self.date_format.pattern,
        ]
        if self.link is not None:
            parts.append(str(self.link))
        directive = DATE_DIRECTIVE_SEPARATOR.join(parts)
        return f"{directive}{FALLBACK_SEPARATOR}{self.fallback_text()}{DATE_DIRECTIVE_SUFFIX}"

    def __str__(self) -> str:
        return self.format()
