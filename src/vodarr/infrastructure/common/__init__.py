"""Common infrastructure utilities."""

from __future__ import annotations

from .converters import to_page_count, to_text
from .html_text import clean_html_tags

__all__ = [
    "clean_html_tags",
    "to_page_count",
    "to_text",
]
