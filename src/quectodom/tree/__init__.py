"""Document tree construction for quectodom.

This package provides the in-memory node model, the literate wrapper layer
built on it, and the table renderer composed from those wrappers.

Key Components:
    ElementWrapper: Wrapper for a structural node with attributes and children
    TextWrapper: Wrapper for a text node with a read/write ``text`` property
    TableMaker: Header/body table builder projecting sparse rows onto headings
    classify_cell: Sorts raw row values into Leaf, NodeCell or Decorated
"""

from .cells import CellValue, Decorated, Leaf, NodeCell, classify_cell
from .nodes import ElementNode, Node, TextNode
from .table import Heading, HeadingDescriptor, TableMaker
from .wrappers import (
    Attributable,
    ClassTagged,
    Container,
    ElementWrapper,
    Identifiable,
    TextWrapper,
    TreeNode,
    resolve_child,
)

__all__ = [
    "Attributable",
    "CellValue",
    "ClassTagged",
    "Container",
    "Decorated",
    "ElementNode",
    "ElementWrapper",
    "Heading",
    "HeadingDescriptor",
    "Identifiable",
    "Leaf",
    "Node",
    "NodeCell",
    "TableMaker",
    "TextNode",
    "TextWrapper",
    "TreeNode",
    "classify_cell",
    "resolve_child",
]
