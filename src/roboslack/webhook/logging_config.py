"""structlog 配置模块

dev 模式：ConsoleRenderer 可读输出
json 模式：单行 JSON 输出

webhook token 即凭据，所有日志字段在渲染前经过 redact_webhook_tokens 脱敏；
httpx / httpcore 的请求日志会打印完整 URL，因此最低只开到 WARNING。
"""

import logging
import os
from typing import Any

import structlog

from .token import TOKEN_PATTERN

REDACTED_TOKEN = "T********/B********/************************"

# 会在 INFO 级别输出带 token 的请求 URL
_NOISY_LOGGERS = ("httpx", "httpcore")


def _redact(value: Any) -> Any:
    """递归替换字符串及 dict / list / tuple 中的 token"""
    if isinstance(value, str):
        return TOKEN_PATTERN.sub(REDACTED_TOKEN, value)
    if isinstance(value, dict):
        return {key: _redact(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_redact(item) for item in value]
    if isinstance(value, tuple):
        return tuple(_redact(item) for item in value)
    return value


def redact_webhook_tokens(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor：把日志字段中的 webhook token 替换为掩码

    覆盖字符串以及嵌套的 dict / list / tuple。json 模式下异常堆栈先由
    format_exc_info 格式化为 "exception" 字符串，因此同样被脱敏；dev 模式的
    ConsoleRenderer 自行渲染堆栈，不经过此处理。
    """
    for key, value in event_dict.items():
        event_dict[key] = _redact(value)
    return event_dict


def setup_logging(log_format: str | None = None, log_level: str | None = None) -> None:
    """初始化 structlog 配置

    Args:
        log_format: "json" 或 "dev"，None 时读取 ROBOSLACK_LOG_FORMAT（默认 dev）
        log_level: 日志级别名，None 时读取 ROBOSLACK_LOG_LEVEL（默认 INFO），
            无法识别的级别按 INFO 处理
    """
    log_format = log_format or os.environ.get("ROBOSLACK_LOG_FORMAT", "dev")
    log_level = log_level or os.environ.get("ROBOSLACK_LOG_LEVEL", "INFO")
    level = getattr(logging, log_level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if log_format == "json":
        # 堆栈在脱敏之前格式化为字符串
        shared_processors.append(structlog.processors.format_exc_info)
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer(
            ensure_ascii=False
        )
    else:
        renderer = structlog.dev.ConsoleRenderer()
    shared_processors.append(redact_webhook_tokens)

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # foreign_pre_chain 让第三方库的 stdlib 日志同样经过脱敏
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
