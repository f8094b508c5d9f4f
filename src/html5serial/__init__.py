from .dom import from_dom, from_etree
from .elements import DEFAULT_CLASSIFIER, Category, ElementClassifier
from .entities import escape, escape_ascii
from .errors import MissingDocumentElementError, SerializerError
from .node import CDataSection, Comment, Document, Element, Other, ProcessingInstruction, Text
from .serializer import Traverser, Writer, save, to_html

__all__ = [
    "DEFAULT_CLASSIFIER",
    "CDataSection",
    "Category",
    "Comment",
    "Document",
    "Element",
    "ElementClassifier",
    "MissingDocumentElementError",
    "Other",
    "ProcessingInstruction",
    "SerializerError",
    "Text",
    "Traverser",
    "Writer",
    "escape",
    "escape_ascii",
    "from_dom",
    "from_etree",
    "save",
    "to_html",
]
