"""HTML-to-plain-text helpers."""

from __future__ import annotations

import re
from html.parser import HTMLParser

_WHITESPACE_RE = re.compile(r"[ \t\r\f\v]+")
_BLANK_LINES_RE = re.compile(r"\n\s*\n+")

# Block-level tags that separate paragraphs in upstream descriptions.
_BREAK_TAGS = frozenset({"br", "p", "div", "li"})


class _TagStripper(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []

    def handle_starttag(self, tag: str, attrs: list[tuple[str, str | None]]) -> None:
        if tag in _BREAK_TAGS:
            self.parts.append("\n")

    def handle_startendtag(
        self, tag: str, attrs: list[tuple[str, str | None]]
    ) -> None:
        self.handle_starttag(tag, attrs)

    def handle_data(self, data: str) -> None:
        self.parts.append(data)


def clean_html_tags(text: str) -> str:
    """Remove HTML tags and entities from *text*, keeping paragraph breaks.

    Total: never raises, returns ``""`` for empty input.
    """
    if not text:
        return ""

    stripper = _TagStripper()
    stripper.feed(text)
    stripper.close()

    plain = _WHITESPACE_RE.sub(" ", "".join(stripper.parts).replace("\xa0", " "))
    plain = "\n".join(line.strip() for line in plain.split("\n"))
    return _BLANK_LINES_RE.sub("\n", plain).strip()
