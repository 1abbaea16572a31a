"""
Typed Pydantic models for the generation → validation contract.

GeneratedProject is what the code-generation backend hands over (accepted
after schema validation); SeparatedCode is the result of splitting inline
<style>/<script> blocks out of a single HTML document.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GeneratedProject(BaseModel):
    """
    One generated artifact: required HTML, optional CSS and JS.

    Empty CSS/JS strings are normalised to ``None`` so that an omitted
    language and an empty one are treated the same way downstream.
    """

    model_config = ConfigDict(extra="forbid")

    html: str = Field(..., description="Full HTML document or fragment (may be empty).")
    css: Optional[str] = Field(None, description="Optional stylesheet.")
    js: Optional[str] = Field(None, description="Optional script.")

    @field_validator("css", "js")
    @classmethod
    def empty_to_none(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v == "":
            return None
        return v


class SeparatedCode(BaseModel):
    """HTML with inline styles/scripts replaced by links, plus the extracted bodies."""

    html: str
    css: str = ""
    js: str = ""

    def to_project(self) -> GeneratedProject:
        return GeneratedProject(html=self.html, css=self.css, js=self.js)
