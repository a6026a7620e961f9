"""Conversion of extension description HTML into simple text markup."""

from __future__ import annotations

import logging
from html.parser import HTMLParser

logger = logging.getLogger(__name__)

_FORMATTING = frozenset({"b", "i", "u"})
_KNOWN = _FORMATTING | {"br", "p"}


class EmptyDocumentError(ValueError):
    """Raised when the HTML holds no document at all."""


def _escape(text: str) -> str:
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace("'", "&apos;")
        .replace('"', "&quot;")
    )


class _MarkupBuilder(HTMLParser):
    def __init__(self) -> None:
        super().__init__(convert_charrefs=True)
        self.parts: list[str] = []
        self.open_tags: list[str] = []
        self.has_content = False

    def handle_starttag(self, tag, attrs):
        self.has_content = True
        if tag in _FORMATTING:
            self.parts.append(f"<{tag}>")
            self.open_tags.append(tag)
        elif tag == "br":
            self.parts.append("\n")
        elif tag not in _KNOWN:
            logger.info("Ignored element: %s", tag)

    def handle_startendtag(self, tag, attrs):
        self.handle_starttag(tag, attrs)
        if tag in _FORMATTING:
            self.handle_endtag(tag)

    def handle_endtag(self, tag):
        if tag not in self.open_tags:
            return
        while self.open_tags:
            closed = self.open_tags.pop()
            self.parts.append(f"</{closed}>")
            if closed == tag:
                break

    def handle_data(self, data):
        if data.strip():
            self.has_content = True
        self.parts.append(_escape(data))

    def finish(self) -> str:
        self.close()
        while self.open_tags:
            self.parts.append(f"</{self.open_tags.pop()}>")
        return "".join(self.parts)


def convert_html(html: str) -> str:
    """Turn description HTML into markup using only <b>, <i>, <u> and newlines.

    Text is escaped; unknown elements are dropped but their contents kept.
    Raises EmptyDocumentError if the input holds no elements or text.
    """
    builder = _MarkupBuilder()
    builder.feed(html)
    result = builder.finish()
    if not builder.has_content:
        raise EmptyDocumentError("Empty HTML document.")
    return result