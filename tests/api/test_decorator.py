"""StringDecorator / LinkDecorator 单元测试"""

import pytest
from pydantic import ValidationError
from roboslack.api.markdown import STRING_DECORATORS, Decorator, LinkDecorator, StringDecorator


class TestStringDecorator:
    """单字符串装饰器"""

    def test_of_uses_prefix_as_suffix(self):
        """省略 suffix 时前后使用同一字符串"""
        decorator = StringDecorator.of("*")
        assert decorator.prefix == "*"
        assert decorator.suffix == "*"
        assert decorator.decorate("text") == "*text*"

    def test_of_with_distinct_suffix(self):
        decorator = StringDecorator.of("{", "}")
        assert decorator.decorate("date") == "{date}"

    def test_prefix_only(self):
        decorator = StringDecorator.of_prefix("@")
        assert decorator.suffix is None
        assert decorator.decorate("alice") == "@alice"

    def test_suffix_only(self):
        decorator = StringDecorator.of_suffix("\n")
        assert decorator.prefix is None
        assert decorator.decorate("line") == "line\n"

    def test_decorate_is_idempotent(self):
        """已带前后缀的值不会被重复包装"""
        decorator = StringDecorator.of(":")
        once = decorator.decorate("smile")
        assert once == ":smile:"
        assert decorator.decorate(once) == once

    def test_decorate_adds_only_missing_part(self):
        decorator = StringDecorator.of(":")
        assert decorator.decorate(":smile") == ":smile:"
        assert decorator.decorate("smile:") == ":smile:"

    def test_decorate_multiline_keeps_order(self):
        decorator = StringDecorator.of("*")
        assert decorator.decorate_multiline(["first", "second"]) == "*first*\n*second*"

    def test_decorate_multiline_empty(self):
        assert StringDecorator.of("*").decorate_multiline([]) == ""

    def test_missing_prefix_and_suffix_rejected(self):
        """prefix / suffix 都缺失时构造失败"""
        with pytest.raises(ValidationError, match="present and valid"):
            StringDecorator()

    def test_empty_prefix_and_suffix_rejected(self):
        with pytest.raises(ValidationError, match="present and valid"):
            StringDecorator(prefix="", suffix="")

    def test_base_decorator_validates_too(self):
        with pytest.raises(ValidationError):
            Decorator(prefix=None, suffix=None)

    def test_frozen(self):
        decorator = StringDecorator.of("*")
        with pytest.raises(ValidationError):
            decorator.prefix = "_"


class TestLinkDecorator:
    """链接装饰器"""

    def test_decorate(self):
        decorator = LinkDecorator.of("<", "|", ">")
        result = decorator.decorate("https://example.com/docs", "Docs")
        assert result == "<https://example.com/docs|Docs>"

    def test_decorate_accepts_non_str_url(self):
        """url 参数通过 str() 拼接"""

        class _Url:
            def __str__(self) -> str:
                return "https://example.com/page"

        decorator = LinkDecorator.of("<", "|", ">")
        assert decorator.decorate(_Url(), "Page") == "<https://example.com/page|Page>"

    def test_empty_separator_rejected(self):
        with pytest.raises(ValidationError, match="separator"):
            LinkDecorator.of("<", "", ">")

    def test_missing_separator_rejected(self):
        with pytest.raises(ValidationError):
            LinkDecorator(prefix="<", suffix=">")

    def test_missing_prefix_and_suffix_rejected(self):
        with pytest.raises(ValidationError, match="present and valid"):
            LinkDecorator(separator="|")


class TestCatalogIdempotence:
    """目录中每个装饰器：decorate 两次与一次结果相同"""

    @pytest.mark.parametrize("name", sorted(STRING_DECORATORS))
    @pytest.mark.parametrize("value", ["", "*", "\n", "x", "```", "• item"])
    def test_decorate_twice_equals_once(self, name, value):
        decorator = STRING_DECORATORS[name]
        once = decorator.decorate(value)
        assert decorator.decorate(once) == once

    @pytest.mark.parametrize("name", sorted(STRING_DECORATORS))
    def test_result_carries_prefix_and_suffix(self, name):
        decorator = STRING_DECORATORS[name]
        result = decorator.decorate("x")
        assert result.startswith(decorator.prefix or "")
        assert result.endswith(decorator.suffix or "")


class TestDecoratorCopy:
    """model_copy(update=...) 重新校验"""

    def test_copy_with_valid_update(self):
        decorator = StringDecorator.of("*").model_copy(update={"suffix": "!"})
        assert decorator.decorate("x") == "*x!"

    def test_copy_cannot_drop_both_sides(self):
        with pytest.raises(ValidationError, match="present and valid"):
            StringDecorator.of("*").model_copy(update={"prefix": None, "suffix": None})

    def test_link_copy_cannot_empty_separator(self):
        with pytest.raises(ValidationError, match="separator"):
            LinkDecorator.of("<", "|", ">").model_copy(update={"separator": ""})
