"""Table generation helper.

:class:`TableMaker` builds a ``table`` with a header row from a list of named
headings, then projects sparse row records onto it.  Every body row gets one
cell per heading, in heading order, whatever keys the record supplies.

Example:
    >>> table = TableMaker(
    ...     {"name": "t", "label": "Time"},
    ...     {"name": "v", "label": "Value"},
    ... )
    >>> table = table.append_rows(
    ...     {"t": "09:00"},
    ...     {"v": 42},
    ...     {"t": "10:00", "v": {"classes": ["hot"], "content": "99"}},
    ... )
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Optional, Tuple, Union

from quectodom.shared import TableConfig, get_logger

from .cells import Decorated, NodeCell, classify_cell
from .nodes import ElementNode
from .wrappers import ClassTagged, ElementWrapper, Identifiable, TextWrapper


class Heading(NamedTuple):
    """Column declaration passed to :class:`TableMaker`."""

    name: str
    label: str


@dataclass(eq=False)
class HeadingDescriptor:
    """A declared column and the header nodes created for it."""

    name: str
    position: int
    label: TextWrapper
    header_cell: ElementWrapper


RowRecord = Mapping


class TableMaker(Identifiable, ClassTagged):
    """Generates the basic table structure and appends rows to it.

    The header and body sections are available as ``thead`` and ``tbody``;
    ``headings`` holds the column descriptors in declaration order and
    ``headings_by_name`` indexes them by name.
    """

    node: ElementNode

    def __init__(
        self,
        *headings: Union[Heading, Mapping],
        config: Optional[TableConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> None:
        super().__init__(ElementNode("table"))
        self.config = config or TableConfig()
        self.logger = get_logger(__name__, correlation_id, "table_maker")

        self.thead = ElementWrapper("thead").add_classes(*self.config.header_classes)
        self.tbody = ElementWrapper("tbody").add_classes(*self.config.body_classes)
        self.add_classes(*self.config.table_classes)

        self.headings: List[HeadingDescriptor] = []
        self.headings_by_name: Dict[str, HeadingDescriptor] = {}

        headrow = ElementWrapper("tr")
        for position, heading in enumerate(headings):
            name, label = _heading_fields(heading)
            th_label = TextWrapper(label)
            th = ElementWrapper("th").append(th_label)
            descriptor = HeadingDescriptor(
                name=name, position=position, label=th_label, header_cell=th
            )
            self.headings_by_name[name] = descriptor
            self.headings.append(descriptor)
            headrow.append(th)

        self.thead.append(headrow)
        self.node.add_child(self.thead.node)
        self.node.add_child(self.tbody.node)

    def heading(self, name: str) -> HeadingDescriptor:
        """Look up a heading by name; raises ``KeyError`` if undeclared."""
        return self.headings_by_name[name]

    def append_rows(self, *rows: RowRecord) -> "TableMaker":
        """Append one body row per record.

        Cells follow heading order.  A heading missing from the record gets
        an empty cell; a present value goes through :func:`classify_cell`.
        """
        for row in rows:
            tr = ElementWrapper("tr")
            for col in self.headings:
                cell = ElementWrapper("td")
                if col.name in row:
                    self._fill_cell(cell, row[col.name])
                else:
                    cell.append("")
                tr.append(cell)
            self.tbody.append(tr)

        self.logger.debug(
            "Appended table rows",
            extra={"rows": len(rows), "columns": len(self.headings)},
        )
        return self

    def clear_rows(self) -> "TableMaker":
        """Remove every body row, keeping the headings."""
        self.tbody.clear()
        return self

    @property
    def row_count(self) -> int:
        return len(self.tbody.node.children)

    def _fill_cell(self, cell: ElementWrapper, value: Any) -> None:
        shaped = classify_cell(value)
        if isinstance(shaped, Decorated):
            cell.add_classes(*shaped.classes)
            cell.append(shaped.content)
        elif isinstance(shaped, NodeCell):
            cell.append(shaped.wrapper)
        else:
            cell.append(shaped.value)


def _heading_fields(heading: Union[Heading, Mapping]) -> Tuple[str, str]:
    if isinstance(heading, Mapping):
        return heading["name"], heading["label"]
    return heading.name, heading.label
