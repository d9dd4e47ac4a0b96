"""Tests for the in-memory document node model."""

import pytest

from quectodom.tree import ElementNode, TextNode


class TestTextNode:
    """Test TextNode content handling."""

    def test_default_text_is_empty(self) -> None:
        """Test a new text node has empty content."""
        assert TextNode().text_content == ""

    def test_text_content_setter_replaces_data(self) -> None:
        """Test writing text_content replaces the data."""
        node = TextNode("old")
        node.text_content = "new"
        assert node.data == "new"

    def test_text_content_setter_none_clears(self) -> None:
        """Test writing None leaves an empty text node."""
        node = TextNode("old")
        node.text_content = None
        assert node.text_content == ""

    def test_markup_is_escaped(self) -> None:
        """Test character data is escaped on serialisation."""
        assert TextNode("a < b & c").to_markup() == "a &lt; b &amp; c"


class TestElementNode:
    """Test ElementNode structure, attributes and serialisation."""

    def test_empty_tag_raises_error(self) -> None:
        """Test that empty tag raises ValueError."""
        with pytest.raises(ValueError, match="Element tag cannot be empty"):
            ElementNode(tag="")

    def test_initial_children_get_parent(self) -> None:
        """Test children passed at construction are parented."""
        child = TextNode("x")
        parent = ElementNode("p", children=[child])
        assert child.parent is parent

    def test_add_child_establishes_parent_relationship(self) -> None:
        """Test adding child establishes proper parent-child relationship."""
        parent = ElementNode("div")
        child = ElementNode("span")

        parent.add_child(child)

        assert parent.children == [child]
        assert child.parent is parent

    def test_add_child_moves_node_from_previous_parent(self) -> None:
        """Test a node is never listed under two parents."""
        first = ElementNode("div")
        second = ElementNode("div")
        child = TextNode("moving")

        first.add_child(child)
        second.add_child(child)

        assert first.children == []
        assert second.children == [child]
        assert child.parent is second

    def test_add_child_rejects_ancestor(self) -> None:
        """Test a node cannot be appended inside itself."""
        outer = ElementNode("div")
        inner = ElementNode("div")
        outer.add_child(inner)

        with pytest.raises(ValueError, match="own subtree"):
            inner.add_child(outer)

    def test_add_child_with_invalid_type_raises_error(self) -> None:
        """Test adding a non-node raises TypeError."""
        with pytest.raises(TypeError):
            ElementNode("div").add_child("text")  # type: ignore

    def test_remove_child(self) -> None:
        """Test removing a child clears its parent."""
        parent = ElementNode("div")
        child = TextNode("x")
        parent.add_child(child)

        assert parent.remove_child(child) is True
        assert parent.children == []
        assert child.parent is None
        assert parent.remove_child(child) is False

    def test_first_child(self) -> None:
        """Test first_child returns the first node or None."""
        parent = ElementNode("div")
        assert parent.first_child is None
        a, b = TextNode("a"), TextNode("b")
        parent.add_child(a)
        parent.add_child(b)
        assert parent.first_child is a

    def test_set_attribute_requires_strings(self) -> None:
        """Test attribute names and values must be strings."""
        with pytest.raises(TypeError):
            ElementNode("a").set_attribute("href", 5)  # type: ignore

    def test_remove_missing_attribute_is_noop(self) -> None:
        """Test removing an absent attribute does nothing."""
        node = ElementNode("a")
        node.remove_attribute("href")
        assert node.attributes == {}

    def test_id_property_uses_attribute(self) -> None:
        """Test the id property is backed by the id attribute."""
        node = ElementNode("div")
        assert node.id == ""
        node.id = "main"
        assert node.get_attribute("id") == "main"

    def test_class_tokens_are_a_set(self) -> None:
        """Test class tokens are unique and insertion ordered."""
        node = ElementNode("div")
        node.add_class("a")
        node.add_class("b")
        node.add_class("a")
        assert node.class_list == ["a", "b"]
        assert node.get_attribute("class") == "a b"

    def test_removing_last_class_drops_attribute(self) -> None:
        """Test the class attribute disappears when no tokens remain."""
        node = ElementNode("div")
        node.add_class("a")
        node.remove_class("a")
        node.remove_class("missing")
        assert not node.has_attribute("class")

    def test_text_content_concatenates_descendants(self) -> None:
        """Test text_content joins descendant text in document order."""
        inner = ElementNode("b", children=[TextNode("bold")])
        outer = ElementNode("p", children=[TextNode("a "), inner, TextNode(" z")])
        assert outer.text_content == "a bold z"

    def test_find_all_and_depth(self) -> None:
        """Test descendant search and depth calculation."""
        td = ElementNode("td")
        tr = ElementNode("tr", children=[td])
        table = ElementNode("table", children=[tr])

        assert table.find_all("td") == [td]
        assert table.find_all("table") == []
        assert td.get_depth() == 2

    def test_to_markup(self) -> None:
        """Test HTML serialisation escapes attribute values."""
        node = ElementNode("a", attributes={"title": 'say "hi"'})
        node.add_child(TextNode("link"))
        assert node.to_markup() == '<a title="say &quot;hi&quot;">link</a>'

    def test_to_dict(self) -> None:
        """Test dictionary representation includes children."""
        node = ElementNode("p", children=[TextNode("x")])
        assert node.to_dict() == {
            "tag": "p",
            "attributes": {},
            "children": [{"text": "x"}],
        }
