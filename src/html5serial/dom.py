"""Adapters from third-party tree representations to html5serial nodes.

Parsers hand back their own tree types: W3C DOM trees (``xml.dom.minidom``,
html5lib's ``"dom"`` tree builder) or ElementTree-style elements (the
standard library, lxml, html5lib's ``"etree"`` tree builder). These
functions copy such a tree into :mod:`html5serial.node` classes so the
serializer sees one closed set of node kinds. The source tree is not
modified.
"""

from xml.dom import Node as DomNode

from .node import CDataSection, Comment, Document, Element, Other, ProcessingInstruction, Text

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"
XMLNS_NAMESPACE = "http://www.w3.org/2000/xmlns/"
XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"

# Prefixes used when an ElementTree attribute key carries a namespace but no
# prefix of its own.
ATTRIBUTE_PREFIXES = {
    XML_NAMESPACE: "xml",
    XMLNS_NAMESPACE: "xmlns",
    XLINK_NAMESPACE: "xlink",
}


# W3C DOM


def from_dom(node):
    """Convert a W3C DOM node, NodeList or sequence of nodes.

    Documents become :class:`Document`; document fragments, NodeLists and
    sequences become a list of converted siblings; any other node is
    converted on its own.

    Converted siblings have no parent. Text taken out of a raw text
    element this way (``script.childNodes``) is therefore escaped when
    serialized; convert the element itself to keep it verbatim.
    """
    if not hasattr(node, "nodeType"):
        return _dom_siblings(node)
    if node.nodeType == DomNode.DOCUMENT_FRAGMENT_NODE:
        return _dom_siblings(node.childNodes)
    if node.nodeType == DomNode.TEXT_NODE:
        return Text(getattr(node, "wholeText", node.data))
    return _dom_node(node)


def _dom_siblings(nodes):
    holder = Document()
    _dom_children(nodes, holder)
    converted = list(holder.children)
    for child in converted:
        child.parent = None
    return converted


def _dom_node(node):
    node_type = node.nodeType
    if node_type == DomNode.ELEMENT_NODE:
        element = Element(
            node.tagName,
            _dom_attributes(node),
            namespace_uri=node.namespaceURI,
            local_name=node.localName,
        )
        _dom_children(node.childNodes, element)
        return element
    if node_type == DomNode.DOCUMENT_NODE:
        document = Document()
        _dom_children(node.childNodes, document)
        return document
    if node_type == DomNode.CDATA_SECTION_NODE:
        return CDataSection(node.data)
    if node_type == DomNode.COMMENT_NODE:
        return Comment(node.data)
    if node_type == DomNode.PROCESSING_INSTRUCTION_NODE:
        return ProcessingInstruction(node.target, node.data)
    return Other(node.nodeName)


def _dom_children(nodes, parent):
    # Adjacent text nodes collapse into one run.
    pending = []
    for child in nodes:
        if child.nodeType == DomNode.TEXT_NODE:
            pending.append(child.data)
            continue
        if pending:
            parent.append_child(Text("".join(pending)))
            pending = []
        parent.append_child(_dom_node(child))
    if pending:
        parent.append_child(Text("".join(pending)))


def _dom_attributes(node):
    attributes = {}
    attrs = node.attributes
    if attrs is None:
        return attributes
    for i in range(attrs.length):
        attr = attrs.item(i)
        attributes[attr.name] = attr.value
    return attributes


# ElementTree


def from_etree(obj):
    """Convert an ElementTree, an element, or a sequence of elements.

    An ``ElementTree`` becomes a :class:`Document`. For a sequence, each
    element's ``tail`` text is kept as a following text node; the tail of a
    single element is not part of it and is ignored.
    """
    prefixes = dict(ATTRIBUTE_PREFIXES)
    if hasattr(obj, "getroot"):
        return Document([_etree_node(obj.getroot(), prefixes)])
    if isinstance(obj, (list, tuple)):
        converted = []
        for item in obj:
            converted.append(_etree_node(item, prefixes))
            if item.tail:
                converted.append(Text(item.tail))
        return converted
    return _etree_node(obj, prefixes)


def _split_clark(name):
    if name[:1] == "{":
        uri, _, local = name[1:].partition("}")
        return uri, local
    return None, name


def _etree_node(el, prefixes):
    tag = el.tag
    if callable(tag):
        # Comment, ProcessingInstruction and Entity factories stand in for
        # the tag of non-element nodes.
        kind = getattr(tag, "__name__", "")
        if kind == "Comment":
            return Comment(el.text or "")
        if kind in {"ProcessingInstruction", "PI"}:
            target = getattr(el, "target", None)
            if target is not None:
                return ProcessingInstruction(target, el.text or "")
            target, _, data = (el.text or "").partition(" ")
            return ProcessingInstruction(target, data)
        return Other(kind or repr(tag))

    uri, local = _split_clark(tag)
    prefix = getattr(el, "prefix", None)
    tag_name = f"{prefix}:{local}" if prefix else local
    element = Element(tag_name, _etree_attributes(el, prefixes), namespace_uri=uri, local_name=local)
    if el.text:
        element.append_child(Text(el.text))
    for child in el:
        element.append_child(_etree_node(child, prefixes))
        if child.tail:
            element.append_child(Text(child.tail))
    return element


def _etree_attributes(el, prefixes):
    attributes = {}
    for key, value in el.attrib.items():
        uri, local = _split_clark(key)
        if uri:
            local = f"{_attribute_prefix(el, uri, prefixes)}:{local}"
        attributes[local] = value
    return attributes


def _attribute_prefix(el, uri, prefixes):
    # Namespaced attributes keep a prefix so they cannot collide with an
    # unprefixed attribute of the same local name. lxml elements carry their
    # declared prefixes; otherwise one is generated per URI (ns0, ns1, ...).
    prefix = prefixes.get(uri)
    if prefix is not None:
        return prefix
    taken = set(prefixes.values())
    nsmap = getattr(el, "nsmap", None) or {}
    for declared, declared_uri in nsmap.items():
        if declared and declared_uri == uri and declared not in taken:
            prefixes[uri] = declared
            return declared
    index = 0
    while f"ns{index}" in taken:
        index += 1
    prefix = prefixes[uri] = f"ns{index}"
    return prefix
