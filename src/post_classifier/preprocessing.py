"""Tokenization of post content into bag-of-words features."""

from __future__ import annotations

import re

# ASCII whitespace only; NBSP and other Unicode spaces are word characters.
_WHITESPACE_RE = re.compile(r"[ \t\n\v\f\r]+")


def unique_words(content: str) -> frozenset[str]:
    """Return the unique whitespace-delimited words in ``content``.

    Only space, tab, newline, vertical tab, form feed and carriage return
    separate words. Words are kept exactly as written: no case folding,
    punctuation stripping, or stop-word removal. Empty content yields an
    empty set.
    """
    return frozenset(word for word in _WHITESPACE_RE.split(content) if word)
