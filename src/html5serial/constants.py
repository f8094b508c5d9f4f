"""HTML5 Serialization Constants

This module defines the element tables and fixed literals used when writing a
document tree back out as HTML5 text. Element categories are kept as ordered
tuples for stable iteration; membership tests go through frozensets.

Usage:
    from html5serial.constants import VOID_ELEMENTS, LOCAL_NAMESPACES

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/parsing.html#serialising-html-fragments
"""

from types import MappingProxyType

# Written before the document element of a full document.
DOCTYPE = "<!DOCTYPE html>"

# Written in place of node kinds that have no HTML serialization (DTD subsets,
# entity references, notations).
SKIPPED_MARKER = "<!-- Skipped -->"

NEWLINE = "\n"

# Namespaces
HTML_NAMESPACE = "http://www.w3.org/1999/xhtml"
MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"
SVG_NAMESPACE = "http://www.w3.org/2000/svg"

# Namespaces treated as native to HTML: their elements are written with the
# local name instead of the qualified name.
LOCAL_NAMESPACES = MappingProxyType({
    HTML_NAMESPACE: "html",
    MATHML_NAMESPACE: "mathml",
    SVG_NAMESPACE: "svg",
})

# Elements written as a start tag only (no end tag, no content).
VOID_ELEMENTS = (
    "area",
    "base",
    "basefont",
    "bgsound",
    "br",
    "col",
    "command",
    "embed",
    "frame",
    "hr",
    "image",
    "img",
    "input",
    "keygen",
    "link",
    "meta",
    "param",
    "source",
    "track",
    "wbr",
)

# Block-level elements. Only used to place newlines when formatting output;
# membership never changes escaping or end-tag handling.
BLOCK_ELEMENTS = (
    "address",
    "article",
    "aside",
    "audio",
    "blockquote",
    "canvas",
    "dd",
    "div",
    "dl",
    "fieldset",
    "figcaption",
    "figure",
    "footer",
    "form",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
    "header",
    "hgroup",
    "hr",
    "noscript",
    "ol",
    "output",
    "p",
    "pre",
    "section",
    "table",
    "tfoot",
    "ul",
    "video",
)

# Text inside these elements is not parsed for markup, so it is written as-is.
RAW_TEXT_ELEMENTS = (
    "iframe",
    "noembed",
    "noframes",
    "plaintext",
    "script",
    "style",
    "xmp",
)

# Escapable raw text. The tokenizer only recognizes character references and
# the matching end tag inside these.
RCDATA_ELEMENTS = (
    "textarea",
    "title",
)

# Whitespace inside these is content, so no formatting newlines are written
# anywhere below them.
PREFORMATTED_ELEMENTS = (
    "listing",
    "pre",
    "textarea",
)
