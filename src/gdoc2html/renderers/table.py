#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/gdoc2html/renderers/table.py
"""Table grid reconstruction and rendering.

The document API lists each row's cells in order, with spans only given as
per-cell metadata. A row keeps an entry for every cell a merge covers, so a
cell's array index is its column. This module rebuilds the rectangular grid
those spans imply and renders it as ``<table>`` markup.

Grid rules
----------
- The column count is the sum of the column spans of row 0's cells.
- Each cell is placed at the column equal to its index in the row. A cell
  whose slot is already covered by another cell's span is skipped.
- Placing a cell marks every other slot of its ``row_span x column_span``
  rectangle as occupied.
- Rows are not padded or trimmed. A row whose cells do not fill the column
  count, or overflow it, renders ragged; cells placed beyond the column
  count are not emitted.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from gdoc2html.ast import Table, TableCell
from gdoc2html.options.html import GoogleDocsHtmlOptions


@dataclass(frozen=True)
class Empty:
    """Grid slot that no cell was placed in or spans over."""


@dataclass(frozen=True)
class Occupied:
    """Grid slot covered by the span of a cell placed elsewhere."""


@dataclass(frozen=True)
class Origin:
    """Grid slot holding the top-left corner of a placed cell."""

    cell: TableCell
    column_span: int = 1
    row_span: int = 1


GridSlot = Union[Empty, Occupied, Origin]

EMPTY = Empty()
OCCUPIED = Occupied()


@dataclass
class TableGrid:
    """Reconstructed cell grid of a table.

    Parameters
    ----------
    row_count : int
        Number of source rows
    column_count : int
        Columns implied by row 0
    slots : dict
        ``(row, column)`` to slot; missing keys are empty

    """

    row_count: int
    column_count: int
    slots: dict[tuple[int, int], GridSlot] = field(default_factory=dict)

    def slot(self, row: int, column: int) -> GridSlot:
        return self.slots.get((row, column), EMPTY)

    def origins_in_row(self, row: int) -> list[Origin]:
        """Return the origin slots of a row within the column count, left to right."""
        origins = []
        for column in range(self.column_count):
            slot = self.slot(row, column)
            if isinstance(slot, Origin):
                origins.append(slot)
        return origins


def build_table_grid(table: Table) -> TableGrid:
    """Place every cell of the table on its reconstructed grid.

    Examples
    --------
    Cell (0, 0) spanning both rows covers row 1's first cell, which is skipped:

        >>> grid = build_table_grid(Table(rows=[
        ...     TableRow(cells=[TableCell(row_span=2), TableCell()]),
        ...     TableRow(cells=[TableCell(), TableCell()]),
        ... ]))
        >>> grid.slot(1, 0), type(grid.slot(1, 1)).__name__
        (Occupied(), 'Origin')

    """
    column_count = sum(cell.column_span for cell in table.rows[0].cells) if table.rows else 0
    grid = TableGrid(row_count=len(table.rows), column_count=column_count)

    for row_index, row in enumerate(table.rows):
        for column, cell in enumerate(row.cells):
            if isinstance(grid.slot(row_index, column), Occupied):
                continue

            grid.slots[(row_index, column)] = Origin(cell=cell, column_span=cell.column_span, row_span=cell.row_span)
            for covered_row in range(row_index, row_index + cell.row_span):
                for covered_column in range(column, column + cell.column_span):
                    if (covered_row, covered_column) == (row_index, column):
                        continue
                    if not isinstance(grid.slot(covered_row, covered_column), Origin):
                        grid.slots[(covered_row, covered_column)] = OCCUPIED

    return grid


class TableRenderer:
    """Render a reconstructed table grid.

    Cell content is rendered by dispatching each origin cell to
    ``cell_visitor.visit_table_cell``, which returns the cell's inner HTML.

    Parameters
    ----------
    options : GoogleDocsHtmlOptions
        Rendering options

    """

    def __init__(self, options: GoogleDocsHtmlOptions):
        self.options = options

    def render(self, table: Table, cell_visitor: Any) -> str:
        """Render the table, or ``""`` when it has no rows."""
        if not table.rows:
            return ""

        style = self.options.style
        grid = build_table_grid(table)
        parts = [
            f'<div class="{style.table_wrapper_class}">'
            f'<table class="{style.table_class}" style="{style.table_style}">'
        ]
        for row_index in range(grid.row_count):
            parts.append("<tr>")
            for origin in grid.origins_in_row(row_index):
                parts.append(self._render_cell(origin, cell_visitor))
            parts.append("</tr>")
        parts.append("</table></div>")
        return "".join(parts)

    def _render_cell(self, origin: Origin, cell_visitor: Any) -> str:
        attributes = []
        if origin.column_span > 1:
            attributes.append(f'colspan="{origin.column_span}"')
        if origin.row_span > 1:
            attributes.append(f'rowspan="{origin.row_span}"')
        attribute_text = f" {' '.join(attributes)}" if attributes else ""

        content = origin.cell.accept(cell_visitor)
        return f'<td{attribute_text} style="{self.options.style.cell_style}">{content}</td>'
