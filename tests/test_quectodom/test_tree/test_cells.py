"""Tests for cell value classification."""

from collections import namedtuple

from quectodom.tree import (
    Decorated,
    ElementWrapper,
    Leaf,
    NodeCell,
    TextWrapper,
    classify_cell,
)


class TestClassifyCell:
    """Test classify_cell dispatch."""

    def test_scalars_are_leaves(self) -> None:
        """Test primitives and None classify as Leaf."""
        for value in ("x", 3, 2.5, True, None):
            assert classify_cell(value) == Leaf(value)

    def test_wrappers_are_node_cells(self) -> None:
        """Test any wrapper classifies as NodeCell."""
        element = ElementWrapper("b")
        text = TextWrapper("t")
        assert classify_cell(element) == NodeCell(element)
        assert classify_cell(text) == NodeCell(text)

    def test_mapping_is_decorated(self) -> None:
        """Test a mapping classifies as Decorated with tuple classes."""
        shaped = classify_cell({"classes": ["hot", "big"], "content": "99"})
        assert shaped == Decorated(content="99", classes=("hot", "big"))

    def test_mapping_without_classes(self) -> None:
        """Test missing classes default to none."""
        assert classify_cell({"content": 5}) == Decorated(content=5)

    def test_mapping_without_content(self) -> None:
        """Test a mapping without content decorates an empty cell."""
        assert classify_cell({}) == Decorated(content=None, classes=())

    def test_object_with_content_attribute_is_decorated(self) -> None:
        """Test records exposing content/classes attributes are decorated."""
        Cell = namedtuple("Cell", ["content", "classes"])
        shaped = classify_cell(Cell(content="x", classes=["c"]))
        assert shaped == Decorated(content="x", classes=("c",))

    def test_tagged_values_pass_through(self) -> None:
        """Test already-tagged values are returned unchanged."""
        decorated = Decorated(content="x", classes=["a"])
        assert classify_cell(decorated) is decorated
        assert decorated.classes == ("a",)

    def test_sequences_are_decorated(self) -> None:
        """Test lists, tuples and sets are composite and decorate an empty cell."""
        for value in ([1, 2], ("a", "b"), {"x"}, []):
            assert classify_cell(value) == Decorated(content=None, classes=())

    def test_other_objects_are_decorated(self) -> None:
        """Test any non-scalar object is composite, reading attributes if present."""

        class Record:
            content = "r"

        assert classify_cell(Record()) == Decorated(content="r")
        assert classify_cell(object()) == Decorated()

    def test_plain_tuple_and_namedtuple_agree(self) -> None:
        """Test tuples classify the same way with or without named fields."""
        Pair = namedtuple("Pair", ["a", "b"])
        assert classify_cell(Pair(1, 2)) == classify_cell((1, 2))
