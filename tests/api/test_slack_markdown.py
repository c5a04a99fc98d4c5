"""Slack markdown 目录与 markdown 识别测试"""

import pytest
from roboslack.api.markdown import (
    BOLD,
    EMOJI,
    ITALIC,
    LINK,
    LIST_SINGLE_LEVEL,
    MENTION_CHANNEL,
    MENTION_USER,
    NEWLINE,
    PREFORMAT,
    PREFORMAT_MULTILINE,
    QUOTE,
    QUOTE_MULTILINE,
    STRIKE,
    STRING_DECORATORS,
    SpecialMention,
    StringDecorator,
    contains_markdown,
)


class TestContainsMarkdown:
    """contains_markdown() 识别规则"""

    @pytest.mark.parametrize(
        "text",
        [
            "ping @alice",
            "see #general",
            "alert!",
            "a *bold* word",
            "a ~struck~ word",
            "an _italic_ word",
            "an :emoji: here",
            "a -struck- word",
            "line one\nline two",
            "run `make`",
            ">>> quoted",
            "%E2%80%A2 bullet",
        ],
    )
    def test_markdown_detected(self, text):
        assert contains_markdown(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "plain text",
            "",
            "2 * 3",
            "snake_case",
            "time 10:30",
            "well-known",
            "a > b",
        ],
    )
    def test_plain_text_not_detected(self, text):
        """单个符号不构成 markdown"""
        assert contains_markdown(text) is False

    def test_none_is_not_markdown(self):
        assert contains_markdown(None) is False


class TestDecoratorCatalog:
    """固定装饰器的输出"""

    def test_inline_styles(self):
        assert BOLD.decorate("x") == "*x*"
        assert ITALIC.decorate("x") == "_x_"
        assert STRIKE.decorate("x") == "~x~"
        assert EMOJI.decorate("smile") == ":smile:"
        assert PREFORMAT.decorate("code") == "`code`"

    def test_preformat_multiline(self):
        assert PREFORMAT_MULTILINE.decorate("code") == "```\ncode```"

    def test_mentions(self):
        assert MENTION_USER.decorate("alice") == "@alice"
        assert MENTION_CHANNEL.decorate("general") == "#general"

    def test_quotes(self):
        assert QUOTE.decorate("said") == "\n>said\n"
        assert QUOTE_MULTILINE.decorate("said") == ">>>\nsaid\n"

    def test_newline_and_list(self):
        assert NEWLINE.decorate("line") == "line\n"
        assert LIST_SINGLE_LEVEL.decorate("item") == "• item\n"

    def test_link(self):
        assert LINK.decorate("https://example.com/a", "A") == "<https://example.com/a|A>"

    def test_registry(self):
        """注册表包含全部单值装饰器"""
        assert STRING_DECORATORS["bold"] is BOLD
        assert STRING_DECORATORS["list_single_level"] is LIST_SINGLE_LEVEL
        assert len(STRING_DECORATORS) == 12
        assert all(isinstance(d, StringDecorator) for d in STRING_DECORATORS.values())


class TestSpecialMention:
    """@channel / @here / @everyone"""

    def test_mention_text(self):
        assert SpecialMention.HERE.mention == "<!here>"
        assert SpecialMention.CHANNEL.mention == "<!channel>"
        assert SpecialMention.EVERYONE.mention == "<!everyone>"

    def test_lookup_ignores_case(self):
        assert SpecialMention("HERE") is SpecialMention.HERE
        assert SpecialMention.of("Everyone") is SpecialMention.EVERYONE

    def test_mention_is_markdown(self):
        assert contains_markdown(SpecialMention.HERE.mention) is True
