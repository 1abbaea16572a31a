"""
Code Extraction — pull generated code out of a model response.

Model responses wrap code in markdown fences or return a bare document.
These helpers locate the code and optionally split inline <style>/<script>
blocks into separate CSS/JS so each language can be validated on its own.
"""
import logging
import re
from typing import Optional

from codeguard.config.constants import SCRIPT_LINK, STYLESHEET_LINK
from codeguard.models.project_io import SeparatedCode

logger = logging.getLogger(__name__)

_HTML_FENCE_RE = re.compile(r"```html\n([\s\S]*?)\n```")
_GENERIC_FENCE_RE = re.compile(r"```\n([\s\S]*?)\n```")
_STYLE_BLOCK_RE = re.compile(r"<style[^>]*>([\s\S]*?)</style>", re.IGNORECASE)
_SCRIPT_BLOCK_RE = re.compile(r"<script[^>]*>([\s\S]*?)</script>", re.IGNORECASE)
_COMMENT_RE = re.compile(r"<!--[\s\S]*?-->")
_WHITESPACE_RE = re.compile(r"\s+")


def extract_code(text: str) -> Optional[str]:
    """
    Extract code from a model response.

    Strategy:
        1. First fenced ```` ```html ```` block.
        2. First generic fenced ```` ``` ```` block.
        3. The whole response, if it looks like a document
           (contains ``<!DOCTYPE`` or ``<html``).
        4. ``None`` — no code found.
    """
    match = _HTML_FENCE_RE.search(text)
    if match:
        return match.group(1).strip()

    match = _GENERIC_FENCE_RE.search(text)
    if match:
        return match.group(1).strip()

    if "<!DOCTYPE" in text or "<html" in text:
        return text.strip()

    return None


def extract_separated_code(html: str) -> SeparatedCode:
    """
    Split inline styles and scripts out of a single HTML document.

    Style bodies are joined (blank line between blocks) into ``css``, script
    bodies into ``js``. In the returned HTML each <style> block becomes a
    stylesheet link and each <script> block a ``script.js`` reference.
    """
    css = "\n\n".join(_STYLE_BLOCK_RE.findall(html))
    js = "\n\n".join(_SCRIPT_BLOCK_RE.findall(html))

    clean_html = _STYLE_BLOCK_RE.sub(STYLESHEET_LINK, html)
    clean_html = _SCRIPT_BLOCK_RE.sub(SCRIPT_LINK, clean_html)

    logger.debug(
        "Separated %d chars of CSS and %d chars of JS from HTML", len(css), len(js)
    )
    return SeparatedCode(html=clean_html, css=css, js=js)


def minify_html(html: str) -> str:
    """Basic minification: drop comments, collapse whitespace."""
    without_comments = _COMMENT_RE.sub("", html)
    return _WHITESPACE_RE.sub(" ", without_comments).strip()
