"""全局 pytest 配置 -- 共享的消息、附件与 token 测试数据"""

import pytest
from roboslack.api import (
    Attachment,
    AttachmentField,
    Author,
    Color,
    Footer,
    MessageRequest,
    Title,
)
from roboslack.webhook import WebHookToken


@pytest.fixture
def token() -> WebHookToken:
    """合法的 webhook token"""
    return WebHookToken(part_t="T00000000", part_b="B00000000", part_x="X" * 24)


@pytest.fixture
def full_attachment() -> Attachment:
    """所有字段都已填写的附件"""
    return (
        Attachment.builder()
        .fallback("Deploy finished")
        .color(Color.good())
        .pretext("*Deploy* report")
        .author(
            Author(
                name="Build Bot",
                link="https://example.com/bots/build",
                icon="https://example.com/icons/bot.png",
            )
        )
        .title(Title(text="Release 42", link="https://example.com/releases/42"))
        .text("All checks passed")
        .image_url("https://example.com/images/chart.png")
        .thumb_url("https://example.com/images/thumb.png")
        .footer(
            Footer(
                text="CI pipeline",
                icon="https://example.com/icons/ci.png",
                timestamp=1392734382,
            )
        )
        .add_fields(
            AttachmentField.of("Status", "_green_"),
            AttachmentField.of("Duration", "3 minutes", is_short=False),
        )
        .build()
    )


@pytest.fixture
def simple_message() -> MessageRequest:
    """只含必填字段的消息"""
    return MessageRequest(text="hello world", username="roboslack")
