"""Document tree model consumed by the serializer.

The node classes form a closed set: every node is exactly one of
Document, Element, Text, CDataSection, Comment, ProcessingInstruction or
Other. Parsers (or the adapters in :mod:`html5serial.dom`) build these trees;
the serializer only reads them.
"""


class Node:
    """Base class for all tree nodes.

    - parent: the containing Document or Element (None for a root)
    - children: ordered child nodes, in document order
    """

    __slots__ = ("children", "parent")

    # Character data nodes set this to False and refuse children.
    can_have_children = True

    def __init__(self, children=()):
        self.parent = None
        self.children = []
        for child in children:
            self.append_child(child)

    @property
    def has_child_nodes(self):
        return bool(self.children)

    def append_child(self, child):
        if not self.can_have_children:
            msg = f"{type(self).__name__} nodes cannot have children"
            raise ValueError(msg)
        if self._would_create_circular_reference(child):
            msg = f"Adding {child!r} as child of {self!r} would create circular reference"
            raise ValueError(msg)

        if child.parent is not None:
            child.parent.children.remove(child)
        child.parent = self
        self.children.append(child)
        return child

    def _would_create_circular_reference(self, child):
        current = self
        while current is not None:
            if current is child:
                return True
            current = current.parent
        return False


class Document(Node):
    __slots__ = ()

    @property
    def document_element(self):
        """The first Element child, or None."""
        for child in self.children:
            if isinstance(child, Element):
                return child
        return None

    def __repr__(self):
        return f"Document(children={len(self.children)})"


class Element(Node):
    """An element node.

    - tag_name: qualified name as stored, e.g. 'div' or 'svg:rect'
    - namespace_uri: namespace URI, None when the element has none
    - local_name: unprefixed name; derived from tag_name when not given
    - attributes: dict of qualified attribute name -> unescaped value,
      in insertion order
    """

    __slots__ = ("attributes", "local_name", "namespace_uri", "tag_name")

    def __init__(self, tag_name, attributes=None, children=(), *, namespace_uri=None, local_name=None):
        if tag_name is None or tag_name == "":
            msg = "Empty tag_name passed to Element constructor"
            raise ValueError(msg)
        self.tag_name = tag_name
        self.namespace_uri = namespace_uri or None
        self.local_name = local_name or tag_name.rpartition(":")[2]
        self.attributes = dict(attributes) if attributes else {}
        super().__init__(children)

    def __repr__(self):
        ns = f"{{{self.namespace_uri}}}" if self.namespace_uri else ""
        return f"Element(<{ns}{self.tag_name}>, children={len(self.children)})"


class CharacterData(Node):
    __slots__ = ("data",)

    can_have_children = False

    def __init__(self, data=""):
        super().__init__()
        self.data = data if data is not None else ""

    def __repr__(self):
        return f"{type(self).__name__}({self.data[:30]!r})"


class Text(CharacterData):
    """A contiguous run of character data.

    Adjacent text is expected to be merged already, so ``data`` is the whole
    text of the run.
    """

    __slots__ = ()

    @property
    def whole_text(self):
        return self.data


class CDataSection(CharacterData):
    __slots__ = ()


class Comment(CharacterData):
    __slots__ = ()


class ProcessingInstruction(CharacterData):
    __slots__ = ("target",)

    def __init__(self, target, data=""):
        super().__init__(data)
        self.target = target

    def __repr__(self):
        return f"ProcessingInstruction({self.target!r}, {self.data[:30]!r})"


class Other(CharacterData):
    """Any node kind without an HTML serialization (doctype, DTD subset, ...)."""

    __slots__ = ("name",)

    def __init__(self, name, data=""):
        super().__init__(data)
        self.name = name

    def __repr__(self):
        return f"Other({self.name!r})"
