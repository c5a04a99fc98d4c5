"""SlackWebHookClient -- incoming webhook 发送封装

把 MessageRequest 编码为 JSON，POST 到 {base_url}{token}，
并把纯文本响应体映射为 ResponseCode。不做重试。
"""

import time

import httpx
import structlog

from roboslack.api import MessageRequest

from .config import WebHookConfig
from .exceptions import WebHookResponseError, WebHookUnreachableError
from .response import ResponseCode
from .token import WebHookToken

log = structlog.get_logger()

# 连接类异常（触发 WebHookUnreachableError）
_CONNECTION_ERROR_TYPES = (
    OSError,
    httpx.TransportError,
)


class SlackWebHookClient:
    """Slack incoming webhook 客户端

    token 只用于拼接请求地址，不写入日志。
    """

    def __init__(
        self,
        token: WebHookToken,
        config: WebHookConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """初始化客户端

        Args:
            token: webhook token
            config: 客户端配置，None 时使用默认配置
            transport: 自定义 httpx transport（测试时注入）
        """
        self._token = token
        self._config = config or WebHookConfig()
        self._transport = transport

    @property
    def url(self) -> str:
        return f"{self._config.base_url.rstrip('/')}/{self._token}"

    async def send_message(self, request: MessageRequest) -> ResponseCode:
        """发送消息

        Args:
            request: 已校验的消息请求

        Returns:
            Slack 返回的 ResponseCode（非 ok 也正常返回，由调用方判断）

        Raises:
            WebHookUnreachableError: 连接失败或超时
            WebHookResponseError: 响应体无法识别
        """
        start_time = time.monotonic()
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._config.timeout_s,
                headers={"User-Agent": self._config.user_agent},
            ) as http_client:
                resp = await http_client.post(
                    self.url,
                    content=request.to_json(),
                    headers={"Content-Type": "application/json"},
                )
        except _CONNECTION_ERROR_TYPES as e:
            log.error(
                "webhook_send_failed",
                base_url=self._config.base_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise WebHookUnreachableError(self._config.base_url, e) from e

        duration_ms = int((time.monotonic() - start_time) * 1000)
        body = resp.text.strip()
        code = ResponseCode.of_safe(body)
        if code is None:
            log.error(
                "webhook_unknown_response",
                status_code=resp.status_code,
                body=body,
            )
            raise WebHookResponseError(resp.status_code, body)

        if code.is_ok:
            log.info(
                "webhook_send_completed",
                status_code=resp.status_code,
                attachment_count=len(request.attachments),
                duration_ms=duration_ms,
            )
        else:
            log.warning(
                "webhook_send_rejected",
                status_code=resp.status_code,
                response_code=code.value,
                duration_ms=duration_ms,
            )
        return code
