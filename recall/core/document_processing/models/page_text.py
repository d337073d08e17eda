"""
Extracted page text.

Dependencies: pydantic
System role: Output of PDF extraction, input of chunking
"""

from pydantic import BaseModel, Field


class PageText(BaseModel):
    """Text of one PDF page."""

    page_number: int = Field(ge=1, description="1-based page number")
    text: str = Field(description="Trimmed page text")
