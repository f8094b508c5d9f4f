import unittest

from html5serial.constants import SVG_NAMESPACE
from html5serial.elements import DEFAULT_CLASSIFIER, Category, ElementClassifier, is_block, is_raw_text, is_void
from html5serial.node import Comment, Document, Element, Other, ProcessingInstruction, Text


class TestNode(unittest.TestCase):
    def test_children_are_parented_in_order(self):
        a, b = Text("a"), Element("b")
        p = Element("p", children=[a, b])
        assert p.children == [a, b]
        assert a.parent is p
        assert b.parent is p
        assert p.has_child_nodes

    def test_append_child_reparents(self):
        child = Element("i")
        first = Element("p", children=[child])
        second = Element("div")
        second.append_child(child)
        assert first.children == []
        assert child.parent is second

    def test_circular_reference_rejected(self):
        outer = Element("div")
        inner = Element("span")
        outer.append_child(inner)
        with self.assertRaises(ValueError):
            inner.append_child(outer)
        with self.assertRaises(ValueError):
            outer.append_child(outer)

    def test_character_data_has_no_children(self):
        with self.assertRaises(ValueError):
            Text("x").append_child(Text("y"))
        assert not Comment("c").has_child_nodes

    def test_empty_tag_name_rejected(self):
        with self.assertRaises(ValueError):
            Element("")

    def test_local_name_derived_from_tag_name(self):
        assert Element("svg:rect", namespace_uri=SVG_NAMESPACE).local_name == "rect"
        assert Element("div").local_name == "div"
        assert Element("x:y", local_name="z").local_name == "z"

    def test_attributes_are_copied(self):
        source = {"b": "1", "a": "2"}
        el = Element("p", source)
        source["c"] = "3"
        assert list(el.attributes) == ["b", "a"]

    def test_document_element(self):
        html = Element("html")
        doc = Document([Other("html"), Comment("x"), html])
        assert doc.document_element is html
        assert Document().document_element is None

    def test_whole_text(self):
        assert Text("abc").whole_text == "abc"
        assert Text(None).data == ""

    def test_reprs(self):
        assert repr(Element("p", namespace_uri="urn:x")) == "Element(<{urn:x}p>, children=0)"
        assert repr(Text("hello")) == "Text('hello')"
        assert repr(ProcessingInstruction("t", "d")) == "ProcessingInstruction('t', 'd')"
        assert repr(Document()) == "Document(children=0)"


class TestClassifier(unittest.TestCase):
    def test_default_categories(self):
        assert DEFAULT_CLASSIFIER.is_a("br", Category.VOID)
        assert DEFAULT_CLASSIFIER.is_a("div", Category.BLOCK)
        assert DEFAULT_CLASSIFIER.is_a("script", Category.RAW_TEXT)
        assert DEFAULT_CLASSIFIER.is_a("textarea", Category.RCDATA)
        assert not DEFAULT_CLASSIFIER.is_a("span", Category.BLOCK)
        assert not DEFAULT_CLASSIFIER.is_a("div", Category.VOID)

    def test_case_insensitive(self):
        assert DEFAULT_CLASSIFIER.is_a("BR", Category.VOID)
        assert DEFAULT_CLASSIFIER.is_a("Script", Category.RAW_TEXT)

    def test_empty_name(self):
        assert not DEFAULT_CLASSIFIER.is_a("", Category.VOID)

    def test_custom_table(self):
        classifier = ElementClassifier({Category.VOID: ["X-Icon"]})
        assert classifier.is_a("x-icon", Category.VOID)
        assert not classifier.is_a("x-icon", Category.BLOCK)
        assert not classifier.is_a("br", Category.VOID)

    def test_helpers(self):
        assert is_void("img")
        assert is_block("p")
        assert is_raw_text("style")
        assert is_raw_text("title")
        assert not is_raw_text("p")


if __name__ == "__main__":
    unittest.main()
