"""
JSON Schemas for generation payloads and validation pipeline output.

Two schemas:
1. GENERATION_PAYLOAD_SCHEMA — what the code-generation backend must return
2. VALIDATION_OUTPUT_SCHEMA  — the document produced by run_validation_pipeline
"""

# =============================================================================
# 1. Generation Payload Schema
# =============================================================================
GENERATION_PAYLOAD_SCHEMA: dict = {
    "name": "generated_project_v1",
    "strict": True,
    "schema": {
        "type": "object",
        "additionalProperties": False,
        "required": ["html"],
        "properties": {
            "html": {
                "type": "string",
                "description": "Full HTML document or fragment",
            },
            "css": {
                "type": ["string", "null"],
                "description": "Optional stylesheet",
            },
            "js": {
                "type": ["string", "null"],
                "description": "Optional script",
            },
        },
    },
}


# =============================================================================
# 2. Validation Output Schema
# =============================================================================
VALIDATION_OUTPUT_SCHEMA: dict = {
    "type": "object",
    "required": [
        "validator_version",
        "result",
        "report",
        "artifact",
        "diagnostics",
        "processing_metadata",
    ],
    "properties": {
        "validator_version": {
            "type": "object",
            "required": ["ruleset_version", "denylist_version"],
        },
        "result": {
            "type": "object",
            "additionalProperties": False,
            "required": ["is_valid", "errors", "warnings", "sanitized"],
            "properties": {
                "is_valid": {"type": "boolean"},
                "errors": {"type": "array", "items": {"type": "string"}},
                "warnings": {"type": "array", "items": {"type": "string"}},
                "sanitized": {"type": ["string", "null"]},
            },
        },
        "report": {"type": "string", "minLength": 1},
        "artifact": {
            "type": "object",
            "required": ["html", "css", "js"],
            "properties": {
                "html": {"type": "string"},
                "css": {"type": ["string", "null"]},
                "js": {"type": ["string", "null"]},
            },
        },
        "diagnostics": {
            "type": "object",
            "required": ["blocked", "error_count", "warning_count", "sanitizer_removals"],
            "properties": {
                "blocked": {"type": "boolean"},
                "error_count": {"type": "integer", "minimum": 0},
                "warning_count": {"type": "integer", "minimum": 0},
                "sanitizer_removals": {
                    "type": "object",
                    "additionalProperties": {"type": "integer", "minimum": 0},
                },
            },
        },
        "processing_metadata": {
            "type": "object",
            "required": ["duration_ms", "html_chars", "css_chars", "js_chars"],
            "properties": {
                "duration_ms": {"type": "integer", "minimum": 0},
                "html_chars": {"type": "integer", "minimum": 0},
                "css_chars": {"type": "integer", "minimum": 0},
                "js_chars": {"type": "integer", "minimum": 0},
            },
        },
    },
}
