"""roboslack.api 异常体系

构造期校验失败统一由 pydantic 抛出 ValidationError（ValueError 子类），
此处只定义不属于"校验失败"的两类错误。
"""


class RoboSlackError(Exception):
    """roboslack 包基础异常"""


class NotAPresetError(RoboSlackError):
    """对非预设颜色调用 Color.as_preset()

    属于调用方编程错误，而非输入校验失败。
    """

    def __init__(self, value: str, presets: list[str]) -> None:
        """
        Args:
            value: 当前颜色值
            presets: 合法的预设名称
        """
        super().__init__(
            f"颜色值 '{value}' 不是预设颜色，合法的预设值: [{', '.join(presets)}]"
        )
        self.value = value


class TemporalConversionError(RoboSlackError, TypeError):
    """无法将对象转换为 epoch 时间戳（不支持的时间类型）"""

    def __init__(self, value: object) -> None:
        """
        Args:
            value: 无法转换的对象
        """
        self.temporal_type = type(value).__name__
        super().__init__(
            f"无法将类型 '{self.temporal_type}' 的对象转换为 epoch 时间戳"
        )
