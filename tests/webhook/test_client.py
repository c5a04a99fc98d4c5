"""SlackWebHookClient 单元测试

使用 httpx.MockTransport 替代真实网络，验证请求内容、响应码映射与异常转换。
"""

import json

import httpx
import pytest
from roboslack.api import Attachment, MessageRequest
from roboslack.webhook import (
    ResponseCode,
    SlackWebHookClient,
    WebHookConfig,
    WebHookResponseError,
    WebHookUnreachableError,
)


def _transport(status_code: int = 200, body: str = "ok", captured: list | None = None):
    """构造返回固定响应的 MockTransport，并记录收到的请求"""

    def handler(request: httpx.Request) -> httpx.Response:
        if captured is not None:
            captured.append(request)
        return httpx.Response(status_code, text=body)

    return httpx.MockTransport(handler)


@pytest.fixture
def message() -> MessageRequest:
    return MessageRequest(
        text="Deploy finished",
        username="roboslack",
        attachments=(Attachment(fallback="details"),),
    )


class TestSendMessage:
    """send_message() 方法测试"""

    async def test_successful_send(self, token, message):
        """成功发送返回 OK，并按约定构造请求"""
        captured: list[httpx.Request] = []
        client = SlackWebHookClient(token, transport=_transport(captured=captured))

        code = await client.send_message(message)

        assert code is ResponseCode.OK
        assert len(captured) == 1
        request = captured[0]
        assert request.method == "POST"
        assert str(request.url) == f"https://hooks.slack.com/services/{token}"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"] == "RoboSlack/1.0"
        assert json.loads(request.content) == message.to_payload()

    async def test_custom_config(self, token, message):
        captured: list[httpx.Request] = []
        config = WebHookConfig(base_url="http://localhost:8080/hooks", user_agent="Tester/0.1")
        client = SlackWebHookClient(token, config, transport=_transport(captured=captured))

        await client.send_message(message)

        assert str(captured[0].url) == f"http://localhost:8080/hooks/{token}"
        assert captured[0].headers["User-Agent"] == "Tester/0.1"

    async def test_error_code_returned(self, token, message):
        """Slack 返回错误码时正常返回，由调用方判断"""
        client = SlackWebHookClient(token, transport=_transport(403, "invalid_token"))

        code = await client.send_message(message)

        assert code is ResponseCode.INVALID_TOKEN
        assert code.is_ok is False

    async def test_body_whitespace_ignored(self, token, message):
        client = SlackWebHookClient(token, transport=_transport(404, "channel_not_found\n"))
        assert await client.send_message(message) is ResponseCode.CHANNEL_NOT_FOUND

    async def test_unknown_body_raises(self, token, message):
        client = SlackWebHookClient(token, transport=_transport(502, "Bad Gateway"))

        with pytest.raises(WebHookResponseError) as exc_info:
            await client.send_message(message)

        assert exc_info.value.status_code == 502
        assert exc_info.value.body == "Bad Gateway"
        assert exc_info.value.recoverable is False

    async def test_connection_error_raises_unreachable(self, token, message):
        """连接失败转换为 WebHookUnreachableError，地址中不含 token"""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        client = SlackWebHookClient(token, transport=httpx.MockTransport(handler))

        with pytest.raises(WebHookUnreachableError) as exc_info:
            await client.send_message(message)

        assert exc_info.value.recoverable is True
        assert isinstance(exc_info.value.original_error, httpx.ConnectError)
        assert token.part_x not in str(exc_info.value)

    async def test_timeout_raises_unreachable(self, token, message):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        client = SlackWebHookClient(token, transport=httpx.MockTransport(handler))

        with pytest.raises(WebHookUnreachableError):
            await client.send_message(message)

    def test_url(self, token):
        client = SlackWebHookClient(token)
        assert client.url == f"https://hooks.slack.com/services/{token}"
