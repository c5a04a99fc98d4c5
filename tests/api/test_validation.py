"""构造期校验工具测试"""

import pytest
from roboslack.api.validation import (
    check_character_length,
    check_does_not_contain_markdown,
    check_hex_color,
    check_max_count,
    check_not_empty,
)


class TestCheckNotEmpty:
    def test_non_empty_passes(self):
        assert check_not_empty("fallback", "x") == "x"

    def test_empty_rejected(self):
        with pytest.raises(ValueError, match="cannot be null or empty"):
            check_not_empty("fallback", "")


class TestCheckCharacterLength:
    def test_at_limit_passes(self):
        assert check_character_length("footer", "a" * 5, 5) == "aaaaa"

    def test_over_limit_rejected(self):
        with pytest.raises(ValueError, match="5"):
            check_character_length("footer", "a" * 6, 5)


class TestCheckDoesNotContainMarkdown:
    def test_plain_passes(self):
        assert check_does_not_contain_markdown("author_name", "Build Bot") == "Build Bot"

    def test_markdown_rejected(self):
        with pytest.raises(ValueError, match="cannot contain markdown"):
            check_does_not_contain_markdown("author_name", "*Build* Bot")


class TestCheckHexColor:
    @pytest.mark.parametrize("value", ["#ff00aa", "#FF00AA", "#123456"])
    def test_valid(self, value):
        assert check_hex_color(value) == value

    @pytest.mark.parametrize("value", ["ff00aa", "#ff00a", "#ff00aa0", "#gg0000", ""])
    def test_invalid(self, value):
        with pytest.raises(ValueError, match="十六进制"):
            check_hex_color(value)


class TestCheckMaxCount:
    def test_at_limit_passes(self):
        assert check_max_count("attachments", 100, 100) == 100

    def test_over_limit_rejected(self):
        with pytest.raises(ValueError, match="101"):
            check_max_count("attachments", 101, 100)
