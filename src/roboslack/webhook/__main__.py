"""CLI 入口模块 -- python -m roboslack.webhook <command>

支持的命令：
  send <text>  通过环境变量配置的 webhook 发送一条纯文本消息
"""

import asyncio
import sys

from roboslack.api import MessageRequest

from .client import SlackWebHookClient
from .config import load_webhook_config
from .exceptions import WebHookError
from .logging_config import setup_logging
from .response import ResponseCode
from .token import WebHookToken

DEFAULT_USERNAME = "roboslack"


def main(argv: list[str] | None = None) -> None:
    """CLI 主入口"""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("用法: python -m roboslack.webhook <command>")
        print("命令:")
        print("  send <text>  发送一条纯文本消息")
        sys.exit(1)

    command = args[0]

    if command == "send":
        if len(args) < 2:
            print("用法: python -m roboslack.webhook send <text>")
            sys.exit(1)
        setup_logging()
        try:
            code = asyncio.run(send_text(" ".join(args[1:])))
        except WebHookError as e:
            print(f"发送失败: {e}")
            sys.exit(2)
        print(f"响应: {code.value}")
        if not code.is_ok:
            sys.exit(2)
    else:
        print(f"未知命令: {command}")
        print("可用命令: send")
        sys.exit(1)


async def send_text(text: str) -> ResponseCode:
    """用环境变量中的 token 和配置发送文本消息"""
    token = WebHookToken.from_environment()
    client = SlackWebHookClient(token, load_webhook_config())
    request = MessageRequest.builder().username(DEFAULT_USERNAME).text(text).build()
    return await client.send_message(request)


if __name__ == "__main__":
    main()
