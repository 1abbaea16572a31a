"""
Constants used across the validation engine.
Versioned and pinned for determinism.
"""
from typing import Dict, List, Set, Tuple

# =============================================================================
# Rule-set versions
# =============================================================================
RULESET_VERSION: str = "codeguard-rules-1.0.0"
DENYLIST_VERSION: str = "sanitize-denylist-2025.1"
SELF_CLOSING_VERSION: str = "void-tags-2025.1"

# =============================================================================
# HTML structure
# =============================================================================
STRUCTURAL_TAGS: List[str] = ["html", "head", "body"]

# Never require a matching closing tag
SELF_CLOSING_TAGS: Set[str] = {"br", "hr", "img", "input", "meta", "link"}

# Literal substrings flagged as suspicious script usage in HTML
SUSPICIOUS_HTML_MARKERS: List[str] = ["<script>alert", "javascript:"]

# Inline style attributes tolerated before a warning is emitted
INLINE_STYLE_LIMIT: int = 10

# =============================================================================
# Delimiter pairs (open, close, name)
# =============================================================================
CSS_BRACE_PAIR: Tuple[str, str, str] = ("{", "}", "braces")

JS_DELIMITER_PAIRS: List[Tuple[str, str, str]] = [
    ("{", "}", "braces"),
    ("[", "]", "brackets"),
    ("(", ")", "parentheses"),
]

# =============================================================================
# Sanitizer denylist
# =============================================================================
DANGEROUS_EVENT_HANDLERS: List[str] = ["onerror", "onload", "onclick", "onmouseover"]

# Literal URI fragments removed case-insensitively, in order
DANGEROUS_URI_FRAGMENTS: List[str] = ["javascript:", "data:text/html"]

# =============================================================================
# Project composition
# =============================================================================
SECTION_PREFIXES: Dict[str, str] = {
    "html": "HTML: ",
    "css": "CSS: ",
    "js": "JS: ",
}

# =============================================================================
# Report rendering
# =============================================================================
ALL_CLEAR_MESSAGE: str = "✅ **Code is valid** - no issues detected"
ERRORS_HEADING: str = "❌ **Errors detected**"
WARNINGS_HEADING: str = "⚠️  **Warnings**"

# =============================================================================
# Extraction placeholders
# =============================================================================
STYLESHEET_LINK: str = '<link rel="stylesheet" href="style.css">'
SCRIPT_LINK: str = '<script src="script.js"></script>'
