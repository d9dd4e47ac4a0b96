"""Literate wrappers around document tree nodes.

Each wrapper owns exactly one node, created when the wrapper is constructed,
and exposes fluent helpers for building the tree.  Wrappers are assembled from
capability mixins rather than a single inheritance chain, so a text wrapper
only carries what a text node supports:

    TreeNode      -- owns the node, serialises it
    Identifiable  -- ``set_id``
    ClassTagged   -- ``add_classes`` / ``rm_classes``
    Attributable  -- ``attribute``
    Container     -- ``clear`` / ``append``

The wrapped node is reachable through the ``node`` attribute for anything the
wrappers do not cover.

Example:
    >>> ul = ElementWrapper("ul").add_classes("menu").append(
    ...     ElementWrapper("li").append("Home"),
    ...     ElementWrapper("li").append("About"),
    ... )
    >>> ul.to_markup()
    '<ul class="menu"><li>Home</li><li>About</li></ul>'
"""

from typing import Any, Dict, Optional, TypeVar

from .nodes import ElementNode, Node, TextNode

_W = TypeVar("_W", bound="TreeNode")


class TreeNode:
    """Base class for all wrappers: sole owner of one document node."""

    node: Node

    def __init__(self, node: Node) -> None:
        self.node = node

    def to_markup(self) -> str:
        return self.node.to_markup()

    def to_dict(self) -> Dict[str, Any]:
        return self.node.to_dict()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.node!r})"


class Identifiable(TreeNode):
    """Capability: set the node identifier."""

    node: ElementNode

    def set_id(self: _W, id_value: str) -> _W:
        self.node.id = id_value
        return self


class ClassTagged(TreeNode):
    """Capability: mutate the node's class-token set.

    Falsy names (``None``, ``""``) are skipped so callers can pass optional
    classes straight through.  Other tokens are converted with ``str()``.
    """

    node: ElementNode

    def add_classes(self: _W, *classes: Any) -> _W:
        for cls in classes:
            if cls:
                self.node.add_class(str(cls))
        return self

    def rm_classes(self: _W, *classes: Any) -> _W:
        for cls in classes:
            if cls:
                self.node.remove_class(str(cls))
        return self


class Attributable(TreeNode):
    """Capability: set or remove attributes."""

    node: ElementNode

    def attribute(self: _W, name: str, value: Any) -> _W:
        """Set ``name`` to ``str(value)``, or remove it when ``value`` is None."""
        if value is not None:
            self.node.set_attribute(name, str(value))
        else:
            self.node.remove_attribute(name)
        return self


class Container(TreeNode):
    """Capability: manage child nodes."""

    node: ElementNode

    def clear(self: _W) -> _W:
        """Delete all children."""
        while self.node.first_child is not None:
            self.node.remove_child(self.node.first_child)
        return self

    def append(self: _W, *children: Any) -> _W:
        """Append children, converting plain values to text wrappers.

        See :func:`resolve_child` for the conversion rules.
        """
        for child in children:
            self.node.add_child(resolve_child(child).node)
        return self


class TextWrapper(TreeNode):
    """Wrapper around a text node; ``text`` reads and replaces its content."""

    node: TextNode

    def __init__(self, text: Optional[str] = None) -> None:
        super().__init__(TextNode("" if text is None else str(text)))

    @property
    def text(self) -> str:
        return self.node.text_content

    @text.setter
    def text(self, text: Optional[str]) -> None:
        self.node.text_content = text

    def set_text(self, text: Optional[str]) -> "TextWrapper":
        self.text = text
        return self


class ElementWrapper(Identifiable, ClassTagged, Attributable, Container):
    """Wrapper around a freshly created element node."""

    node: ElementNode

    def __init__(self, tag: str) -> None:
        super().__init__(ElementNode(tag))


def resolve_child(child: Any) -> TreeNode:
    """Resolve an ``append`` argument to the wrapper whose node gets attached.

    - ``None`` becomes an empty :class:`TextWrapper`;
    - a wrapper is used as-is;
    - a :class:`~quectodom.tree.cells.Leaf` or
      :class:`~quectodom.tree.cells.NodeCell` is unwrapped first;
    - any other value becomes a :class:`TextWrapper` of ``str(value)``.
    """
    # Imported here: cells depends on this module for TreeNode
    from .cells import Leaf, NodeCell

    if isinstance(child, Leaf):
        child = child.value
    elif isinstance(child, NodeCell):
        child = child.wrapper

    if child is None:
        return TextWrapper()
    if isinstance(child, TreeNode):
        return child
    return TextWrapper(str(child))
