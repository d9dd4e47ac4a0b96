"""Cell value shapes for table rendering.

A table cell value is one of three shapes:

- :class:`Leaf` -- a scalar (or ``None``) rendered as text;
- :class:`NodeCell` -- a pre-built wrapper spliced into the cell;
- :class:`Decorated` -- content plus class tokens for the cell itself.

Callers may build these directly, or pass plain Python values and let
:func:`classify_cell` pick the shape.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from numbers import Number
from typing import Any, Optional, Tuple, Union

from .wrappers import TreeNode


@dataclass(frozen=True)
class Leaf:
    """Scalar cell content."""

    value: Any = None


@dataclass(frozen=True)
class NodeCell:
    """A wrapper placed directly in the cell."""

    wrapper: TreeNode


@dataclass(frozen=True)
class Decorated:
    """Cell content together with class tokens for the cell node."""

    content: Any = None
    classes: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of tokens, store an immutable tuple
        object.__setattr__(self, "classes", tuple(self.classes or ()))


CellValue = Union[Leaf, NodeCell, Decorated]

_SCALARS = (str, bytes, bytearray, Number)


def _read(value: Any, name: str) -> Optional[Any]:
    if isinstance(value, Mapping):
        return value.get(name)
    return getattr(value, name, None)


def classify_cell(value: Any) -> CellValue:
    """Classify a raw row value into one of the cell shapes.

    Scalars (``None``, strings, bytes and numbers) are leaves.  Any other
    value that is not a wrapper is composite and becomes :class:`Decorated`,
    reading ``content``/``classes`` by key or attribute.  A composite without
    them (a list, say) decorates an empty cell.
    """
    if isinstance(value, (Leaf, NodeCell, Decorated)):
        return value
    if isinstance(value, TreeNode):
        return NodeCell(value)
    if value is None or isinstance(value, _SCALARS):
        return Leaf(value)
    return Decorated(
        content=_read(value, "content"),
        classes=tuple(_read(value, "classes") or ()),
    )
