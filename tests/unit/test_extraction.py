"""
Unit tests for code extraction from model responses.
"""
from codeguard.config.constants import SCRIPT_LINK, STYLESHEET_LINK
from codeguard.validation.extraction import extract_code, extract_separated_code, minify_html


class TestExtractCode:
    def test_html_fence(self, model_response, full_page_html):
        assert extract_code(model_response) == full_page_html

    def test_html_fence_preferred_over_generic(self):
        text = "```\nconsole.log(1)\n```\n\n```html\n<p>page</p>\n```"
        assert extract_code(text) == "<p>page</p>"

    def test_generic_fence(self):
        assert extract_code("Sure:\n```\n  <div>x</div>  \n```") == "<div>x</div>"

    def test_bare_document(self):
        text = "  <!DOCTYPE html><html><body></body></html>\n"
        assert extract_code(text) == "<!DOCTYPE html><html><body></body></html>"

    def test_no_code(self):
        assert extract_code("I could not generate that, sorry.") is None


class TestExtractSeparatedCode:
    def test_splits_style_and_script(self):
        html = (
            "<html><head><style>a{color:red}</style></head>"
            "<body><p>x</p><script>console.log(1)</script></body></html>"
        )
        separated = extract_separated_code(html)

        assert separated.css == "a{color:red}"
        assert separated.js == "console.log(1)"
        assert STYLESHEET_LINK in separated.html
        assert SCRIPT_LINK in separated.html
        assert "<style>" not in separated.html
        assert "console.log" not in separated.html

    def test_multiple_blocks_joined(self):
        html = '<style>a{}</style><style media="print">b{}</style>'
        separated = extract_separated_code(html)
        assert separated.css == "a{}\n\nb{}"
        assert separated.html.count(STYLESHEET_LINK) == 2

    def test_nothing_to_split(self):
        separated = extract_separated_code("<p>x</p>")
        assert separated.html == "<p>x</p>"
        assert separated.css == ""
        assert separated.js == ""


class TestMinifyHtml:
    def test_drops_comments_and_collapses_whitespace(self):
        html = "<div>\n  <!-- hero -->\n  <p>x</p>\n</div>\n"
        assert minify_html(html) == "<div> <p>x</p> </div>"

    def test_multiline_comment(self):
        assert minify_html("<p>a</p><!--\nline\n--><p>b</p>") == "<p>a</p><p>b</p>"
