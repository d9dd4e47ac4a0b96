"""In-memory document tree for quectodom.

This module implements the node model the wrappers operate on: element nodes
with attributes, a class-token set and ordered children, and leaf text nodes.
A node has at most one parent; attaching it elsewhere detaches it first.
"""

from dataclasses import dataclass, field
from html import escape
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass(eq=False)
class TextNode:
    """Leaf node holding character data."""

    data: str = ""
    parent: Optional["ElementNode"] = field(default=None, repr=False)

    @property
    def text_content(self) -> str:
        return self.data

    @text_content.setter
    def text_content(self, value: Optional[str]) -> None:
        self.data = "" if value is None else str(value)

    def to_dict(self) -> Dict[str, Any]:
        """Convert text node to dictionary representation."""
        return {"text": self.data}

    def to_markup(self) -> str:
        """Serialise as escaped character data."""
        return escape(self.data, quote=False)


@dataclass(eq=False)
class ElementNode:
    """Represents a single structural node in the document tree.

    Provides attribute access, class-token handling, child management and
    serialisation.
    """

    tag: str
    attributes: Dict[str, str] = field(default_factory=dict)
    children: List["Node"] = field(default_factory=list)
    parent: Optional["ElementNode"] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        """Validate element values and establish parent-child relationships."""
        if not self.tag:
            raise ValueError("Element tag cannot be empty")

        for child in self.children:
            child.parent = self

    @property
    def first_child(self) -> Optional["Node"]:
        """Get the first child node, if any."""
        return self.children[0] if self.children else None

    @property
    def text_content(self) -> str:
        """Get all text content of this subtree, in document order."""
        return "".join(child.text_content for child in self.children)

    def add_child(self, child: "Node") -> None:
        """Append a child node, detaching it from any previous parent."""
        if not isinstance(child, (ElementNode, TextNode)):
            raise TypeError("Child must be an ElementNode or TextNode instance")

        node: Optional[ElementNode] = self
        while node is not None:
            if node is child:
                raise ValueError("Cannot append a node to its own subtree")
            node = node.parent

        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: "Node") -> bool:
        """Remove a child node and clear parent relationship."""
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                child.parent = None
                return True
        return False

    # Attributes

    def get_attribute(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Get attribute value with optional default."""
        return self.attributes.get(name, default)

    def set_attribute(self, name: str, value: str) -> None:
        """Set attribute value."""
        if not isinstance(name, str) or not isinstance(value, str):
            raise TypeError("Attribute name and value must be strings")
        self.attributes[name] = value

    def remove_attribute(self, name: str) -> None:
        """Remove an attribute; absent attributes are ignored."""
        self.attributes.pop(name, None)

    def has_attribute(self, name: str) -> bool:
        """Check if element has specific attribute."""
        return name in self.attributes

    @property
    def id(self) -> str:
        return self.attributes.get("id", "")

    @id.setter
    def id(self, value: str) -> None:
        self.set_attribute("id", str(value))

    # Class tokens

    @property
    def class_list(self) -> List[str]:
        """Get the class tokens in insertion order."""
        return self.attributes.get("class", "").split()

    def add_class(self, token: str) -> None:
        tokens = self.class_list
        if token not in tokens:
            tokens.append(token)
            self.attributes["class"] = " ".join(tokens)

    def remove_class(self, token: str) -> None:
        tokens = self.class_list
        if token in tokens:
            tokens.remove(token)
            if tokens:
                self.attributes["class"] = " ".join(tokens)
            else:
                del self.attributes["class"]

    # Navigation

    def iter_elements(self) -> Iterator["ElementNode"]:
        """Iterate over this element and all descendant elements in document order."""
        yield self
        for child in self.children:
            if isinstance(child, ElementNode):
                yield from child.iter_elements()

    def find_all(self, tag: str) -> List["ElementNode"]:
        """Find all descendant elements with matching tag name."""
        return [
            element for element in self.iter_elements()
            if element is not self and element.tag == tag
        ]

    def get_depth(self) -> int:
        """Get depth of this element in the tree (root = 0)."""
        if self.parent is None:
            return 0
        return self.parent.get_depth() + 1

    # Serialisation

    def to_dict(self) -> Dict[str, Any]:
        """Convert element to dictionary representation."""
        result: Dict[str, Any] = {
            "tag": self.tag,
            "attributes": dict(self.attributes),
        }

        if self.children:
            result["children"] = [child.to_dict() for child in self.children]

        return result

    def to_markup(self) -> str:
        """Serialise this subtree as HTML."""
        attrs = "".join(
            f' {name}="{escape(value, quote=True)}"'
            for name, value in self.attributes.items()
        )
        inner = "".join(child.to_markup() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


Node = Union[ElementNode, TextNode]
