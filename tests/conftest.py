"""
Shared test fixtures for the validation test suite.
"""
import json

import pytest

from codeguard.models.project_io import GeneratedProject
from codeguard.models.validator_version import ValidatorVersion


# ==========================================================================
# Validator Version
# ==========================================================================

@pytest.fixture
def validator_version():
    return ValidatorVersion(ruleset_version="codeguard-rules-test", denylist_version="denylist-test")


# ==========================================================================
# HTML
# ==========================================================================

@pytest.fixture
def full_page_html():
    """Well-formed document: no warnings expected."""
    return (
        "<!DOCTYPE html>\n"
        '<html lang="en">\n'
        "<head>\n"
        '  <meta charset="utf-8">\n'
        "  <title>Landing</title>\n"
        '  <link rel="stylesheet" href="style.css">\n'
        "</head>\n"
        "<body>\n"
        '  <header class="hero"><h1>Welcome</h1></header>\n'
        '  <img src="hero.png" alt="Hero">\n'
        "  <br>\n"
        '  <p>Read <a href="/about">more</a>.</p>\n'
        "</body>\n"
        "</html>"
    )


@pytest.fixture
def dangerous_html():
    """Document carrying every denylisted construct."""
    return (
        "<html><head></head><body>"
        '<img src="x.png" onerror="steal()">'
        "<button onClick='go()'>Go</button>"
        '<a href="javascript:evil()">link</a>'
        '<iframe src="data:text/html;base64,PHA+"></iframe>'
        "</body></html>"
    )


# ==========================================================================
# CSS / JS
# ==========================================================================

@pytest.fixture
def clean_css():
    return "body { margin: 0; }\n.hero { color: #333; }"


@pytest.fixture
def clean_js():
    return (
        "document.querySelector('.hero').addEventListener('click', () => {\n"
        "  const items = [1, 2, 3];\n"
        "  console.log(items.length);\n"
        "});"
    )


# ==========================================================================
# Projects & payloads
# ==========================================================================

@pytest.fixture
def generated_project(full_page_html, clean_css, clean_js):
    return GeneratedProject(html=full_page_html, css=clean_css, js=clean_js)


@pytest.fixture
def generation_payload(full_page_html, clean_css, clean_js):
    return {"html": full_page_html, "css": clean_css, "js": clean_js}


@pytest.fixture
def generation_payload_json(generation_payload):
    return json.dumps(generation_payload, ensure_ascii=False)


@pytest.fixture
def model_response(full_page_html):
    """Chat-style model answer wrapping the page in a fenced block."""
    return (
        "Here is your landing page:\n\n"
        f"```html\n{full_page_html}\n```\n\n"
        "Let me know if you want changes."
    )
