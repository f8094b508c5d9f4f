"""HTML5 character reference encoding.

Implements the escaping side of character references: the five markup
significant characters are always replaced, and :func:`escape_ascii` can
additionally encode every non-ASCII character for sinks that are not UTF-8
capable.
"""

from __future__ import annotations

import html.entities

# Replacement order matters: "&" first so the other references are not
# encoded a second time.
_REPLACEMENTS = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def _preference(name):
    return len(name), not name.islower(), name


def _build_named_references():
    # Python's HTML5 table maps names (with and without the trailing
    # semicolon) to characters. Keep the shortest semicolon form for each
    # single non-ASCII character, lowercase spellings first ("copy;" over
    # "COPY;").
    best = {}
    for key, value in html.entities.html5.items():
        if not key.endswith(";") or len(value) != 1 or ord(value) < 128:
            continue
        current = best.get(value)
        if current is None or _preference(key) < _preference(current):
            best[value] = key
    return best


NAMED_REFERENCES = _build_named_references()


def escape(text: str | None) -> str:
    """Escape ``& < > " '`` for use in text and double-quoted attribute values.

    Escaping is not idempotent: ``escape("&amp;")`` yields ``"&amp;amp;"``.
    Callers must apply it exactly once per unit of content.
    """
    if not text:
        return ""
    text = str(text)
    for char, reference in _REPLACEMENTS:
        if char in text:
            text = text.replace(char, reference)
    return text


def encode_char(char: str) -> str:
    """Return the character reference for a single character."""
    name = NAMED_REFERENCES.get(char)
    if name is not None:
        return f"&{name}"
    return f"&#x{ord(char):X};"


def escape_ascii(text: str | None) -> str:
    """Like :func:`escape`, but the result is pure ASCII."""
    escaped = escape(text)
    if escaped.isascii():
        return escaped
    return "".join(c if ord(c) < 128 else encode_char(c) for c in escaped)
