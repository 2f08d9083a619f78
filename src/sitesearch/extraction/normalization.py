"""Text cleanup applied to article text before indexing."""

from __future__ import annotations

import re

_TAG_RE = re.compile(r"<([^>]+)>", re.IGNORECASE)
_LINE_BREAK_RE = re.compile(r"[\r\n]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse repeated whitespace and trim boundaries."""

    return _WHITESPACE_RE.sub(" ", text).strip()


def strip_tags(text: str) -> str:
    """Drop tag-like substrings left over after entity decoding."""

    return _TAG_RE.sub("", text)


def clean_article_text(text: str) -> str:
    without_tags = strip_tags(text)
    return normalize_whitespace(_LINE_BREAK_RE.sub(" ", without_tags))
