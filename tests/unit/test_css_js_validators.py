"""
Unit tests for delimiter counting and the CSS / JS validators.
"""
import pytest

from codeguard.validation.balance import BalanceCount, count_pair, describe_imbalance
from codeguard.validation.css_validator import validate_css
from codeguard.validation.js_validator import check_delimiters, validate_js


class TestBalance:
    def test_counts_each_token(self):
        count = count_pair("a{b{c}", "{", "}")
        assert count == BalanceCount(opening=2, closing=1)
        assert count.is_balanced is False

    def test_empty_text_is_balanced(self):
        assert count_pair("", "(", ")").is_balanced is True

    def test_string_literals_are_counted(self):
        # No awareness of quoting
        assert count_pair('const s = "{";', "{", "}").opening == 1

    def test_describe_imbalance(self):
        msg = describe_imbalance("brackets", BalanceCount(opening=3, closing=1))
        assert msg == "Unbalanced brackets: 3 opening, 1 closing"


class TestValidateCss:
    def test_balanced_css_valid(self):
        result = validate_css("a{color:red}")
        assert result.is_valid is True
        assert result.errors == ()

    def test_missing_close_brace(self):
        result = validate_css("a{color:red")
        assert result.is_valid is False
        assert len(result.errors) == 1
        assert "1 opening, 0 closing" in result.errors[0]

    def test_extra_close_brace(self):
        result = validate_css("a{color:red}}")
        assert "1 opening, 2 closing" in result.errors[0]

    @pytest.mark.parametrize("code", ["", "  \n "])
    def test_empty_css_is_valid(self, code):
        result = validate_css(code)
        assert result.is_valid is True
        assert result.errors == ()
        assert result.warnings == ()

    def test_double_semicolon_warns(self):
        result = validate_css("a{color:red;;}")
        assert result.is_valid is True
        assert result.warnings == ("Double semicolons detected",)

    def test_error_and_warning_together(self):
        result = validate_css("a{color:red;;")
        assert len(result.errors) == 1
        assert len(result.warnings) == 1

    def test_sanitized_absent(self, clean_css):
        assert validate_css(clean_css).sanitized is None


class TestValidateJs:
    def test_clean_js(self, clean_js):
        result = validate_js(clean_js)
        assert result.is_valid is True
        assert result.warnings == ()

    def test_unbalanced_bracket_reported(self):
        result = validate_js("function f() { return [1,2; }")
        assert result.is_valid is False
        assert result.errors == ("Unbalanced brackets: 1 opening, 0 closing",)

    def test_three_independent_errors(self):
        errors = check_delimiters("({[")
        assert len(errors) == 3
        assert errors[0].startswith("Unbalanced braces")
        assert errors[1].startswith("Unbalanced brackets")
        assert errors[2].startswith("Unbalanced parentheses")

    def test_empty_js_is_valid(self):
        result = validate_js("")
        assert result.is_valid is True
        assert result.errors == () and result.warnings == ()

    def test_eval_warns(self):
        result = validate_js("eval(userInput);")
        assert result.is_valid is True
        assert any("eval()" in w for w in result.warnings)

    def test_inner_html_without_text_content_warns(self):
        result = validate_js("el.innerHTML = data;")
        assert any("innerHTML" in w for w in result.warnings)

    def test_inner_html_with_text_content_anywhere_is_fine(self):
        code = "el.innerHTML = '';\n\n\nother.textContent = data;"
        assert validate_js(code).warnings == ()

    def test_sanitized_absent(self, clean_js):
        assert validate_js(clean_js).sanitized is None
