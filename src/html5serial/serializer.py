"""HTML5 serialization of html5serial document trees.

Walks a tree depth-first and writes the HTML5 text form to a stream.

References:
    - https://html.spec.whatwg.org/multipage/parsing.html#serialising-html-fragments
"""

from __future__ import annotations

import io
import logging
import os
from collections.abc import Callable, Mapping
from typing import Any

from .constants import DOCTYPE, LOCAL_NAMESPACES, NEWLINE, PREFORMATTED_ELEMENTS, SKIPPED_MARKER
from .elements import DEFAULT_CLASSIFIER, Category
from .entities import escape as default_escape
from .errors import MissingDocumentElementError
from .node import CDataSection, Comment, Document, Element, ProcessingInstruction, Text

logger = logging.getLogger(__name__)

_PREFORMATTED: frozenset[str] = frozenset(PREFORMATTED_ELEMENTS)


def _is_binary_sink(out: Any) -> bool:
    if isinstance(out, io.TextIOBase):
        return False
    if isinstance(out, (io.RawIOBase, io.BufferedIOBase)):
        return True
    return "b" in str(getattr(out, "mode", ""))


class Writer:
    """Append-only writer over a stream.

    Binary streams receive UTF-8 encoded bytes, everything else receives
    ``str``. The stream is never flushed or closed here.
    """

    __slots__ = ("binary", "out")

    def __init__(self, out: Any) -> None:
        self.out = out
        self.binary = _is_binary_sink(out)

    def write(self, text: str) -> None:
        if self.binary:
            self.out.write(text.encode("utf-8"))
        else:
            self.out.write(text)

    def newline(self) -> None:
        self.write(NEWLINE)


class Traverser:
    """Walk a document tree and write it out as HTML5.

    ``dom`` may be a :class:`Document` (written with a doctype), a list or
    tuple of sibling nodes, or a single node. The classifier, escaping
    function and local namespace table are injected so they can be replaced
    without touching the walk itself.
    """

    def __init__(
        self,
        dom: Any,
        out: Any,
        *,
        classifier: Any = None,
        escape: Callable[[str], str] | None = None,
        local_namespaces: Mapping[str, str] | None = None,
    ) -> None:
        self.dom = dom
        self.out = out
        self.pretty = True
        self.classifier = classifier if classifier is not None else DEFAULT_CLASSIFIER
        self.escape = escape if escape is not None else default_escape
        self.local_namespaces = local_namespaces if local_namespaces is not None else LOCAL_NAMESPACES
        self._writer = Writer(out)
        # Number of open pre, textarea or listing ancestors.
        self._preformatted = 0

    def format_output(self, use_formatting: bool = True) -> None:
        """Turn newline insertion around block-level elements on or off.

        Neither setting guarantees the whitespace of an origin document is
        reproduced. Both produce semantically identical HTML.
        """
        self.pretty = bool(use_formatting)

    def walk(self) -> Any:
        """Write the whole input to the stream and return the stream."""
        dom = self.dom
        if isinstance(dom, Document):
            logger.debug("Serializing document (pretty=%s)", self.pretty)
            self.doctype()
            self.document(dom)
        elif isinstance(dom, (list, tuple)):
            logger.debug("Serializing %d sibling nodes (pretty=%s)", len(dom), self.pretty)
            self.children(dom)
        else:
            logger.debug("Serializing fragment %r (pretty=%s)", dom, self.pretty)
            self.node(dom)
        return self.out

    def doctype(self) -> None:
        self.wr(DOCTYPE)
        self.nl()

    def document(self, document: Document) -> None:
        root = document.document_element
        if root is None:
            raise MissingDocumentElementError(document)
        self.node(root)
        self.nl()

    def node(self, node: Any) -> None:
        match node:
            case Element():
                self.element(node)
            case Text():
                self.text(node)
            case CDataSection():
                self.cdata(node)
            case Comment():
                self.comment(node)
            case ProcessingInstruction():
                self.processing_instruction(node)
            case Document():
                self.document(node)
            case _:
                # Doctypes, DTD subsets and anything else without an HTML form.
                logger.debug("Skipped unsupported node %r", node)
                self.wr(SKIPPED_MARKER)

    def children(self, nodes: Any) -> None:
        for child in nodes:
            self.node(child)

    # Elements

    def is_local_element(self, element: Element) -> bool:
        """True if the element's namespace is one native to HTML."""
        uri = element.namespace_uri
        if not uri:
            return False
        return uri in self.local_namespaces

    def display_name(self, element: Element) -> str:
        """Local name for HTML, MathML and SVG elements, qualified name otherwise."""
        if self.is_local_element(element):
            return element.local_name
        return element.tag_name

    def element(self, element: Element) -> None:
        # One resolved name for the tags and every category lookup.
        name = self.display_name(element)
        block = self.pretty and not self._preformatted and self.classifier.is_a(name, Category.BLOCK)

        if block:
            self.nl()

        self.open_tag(element, name)

        if self.classifier.is_a(name, Category.VOID):
            if element.children:
                logger.debug("Dropped %d children of void element <%s>", len(element.children), name)
            if block:
                self.nl()
            return

        if element.children:
            preformatted = name.lower() in _PREFORMATTED
            if preformatted:
                self._preformatted += 1
            try:
                self.children(element.children)
            finally:
                if preformatted:
                    self._preformatted -= 1
        self.close_tag(name)

    def open_tag(self, element: Element, name: str) -> None:
        self.wr("<")
        self.wr(name)
        self.attrs(element)
        self.wr(">")

    def attrs(self, element: Element) -> None:
        # Always name="value"; boolean attributes are not minimized.
        for name, value in element.attributes.items():
            self.wr(" ")
            self.wr(name)
            self.wr('="')
            self.wr(self.enc(value))
            self.wr('"')

    def close_tag(self, name: str) -> None:
        self.wr("</")
        self.wr(name)
        self.wr(">")

    # Character data

    def text(self, node: Text) -> None:
        if self.in_raw_text(node):
            self.wr(node.whole_text)
            return
        self.wr(self.enc(node.whole_text))

    def in_raw_text(self, node: Text) -> bool:
        parent = node.parent
        if not isinstance(parent, Element):
            return False
        name = self.display_name(parent)
        return self.classifier.is_a(name, Category.RAW_TEXT) or self.classifier.is_a(name, Category.RCDATA)

    def cdata(self, node: CDataSection) -> None:
        self.wr("<![CDATA[")
        self.wr(node.data)
        self.wr("]]>")

    def comment(self, node: Comment) -> None:
        self.wr("<!--")
        self.wr(node.data)
        self.wr("-->")

    def processing_instruction(self, node: ProcessingInstruction) -> None:
        self.wr("<?")
        self.wr(node.target)
        if node.data:
            self.wr(" ")
            self.wr(node.data)
        self.wr("?>")

    # Output

    def wr(self, text: str) -> None:
        self._writer.write(text)

    def nl(self) -> None:
        self._writer.newline()

    def enc(self, text: str) -> str:
        return self.escape(text)


def to_html(node: Any, *, pretty: bool = True, **collaborators: Any) -> str:
    """Serialize ``node`` (document, node list or single node) to a string."""
    out = io.StringIO()
    traverser = Traverser(node, out, **collaborators)
    traverser.format_output(pretty)
    traverser.walk()
    return out.getvalue()


def save(node: Any, out: Any, *, pretty: bool = True, **collaborators: Any) -> None:
    """Serialize ``node`` into a stream, or into a UTF-8 file given its path.

    Streams are left open. A path is opened and closed here.
    """
    if isinstance(out, (str, os.PathLike)):
        with open(out, "w", encoding="utf-8", newline="") as fh:
            save(node, fh, pretty=pretty, **collaborators)
        return
    traverser = Traverser(node, out, **collaborators)
    traverser.format_output(pretty)
    traverser.walk()
