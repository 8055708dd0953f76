#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_table_grid.py
"""Unit tests for table grid reconstruction and table markup.

Tests cover:
- Column count from the first row
- Placement of cells at their index, skipping covered slots
- Ragged rows
- colspan/rowspan attributes and the table wrapper
"""

import re

import pytest

from gdoc2html.ast import Document, Paragraph, Table, TableCell, TableRow, TextRun
from gdoc2html.renderers.html import GoogleDocsHtmlRenderer
from gdoc2html.renderers.table import EMPTY, OCCUPIED, Origin, build_table_grid


def _cell(text="", column_span=1, row_span=1):
    content = [Paragraph(elements=[TextRun(content=f"{text}\n")])] if text else []
    return TableCell(content=content, column_span=column_span, row_span=row_span)


def _covered():
    return TableCell()


def _render(table):
    return GoogleDocsHtmlRenderer().render_to_string(Document(content=[table]))


def _rows(html):
    return re.findall(r"<tr>(.*?)</tr>", html)


@pytest.mark.unit
class TestBuildTableGrid:
    """Tests for build_table_grid."""

    def test_simple_grid(self):
        table = Table(rows=[TableRow(cells=[_cell("a"), _cell("b")]), TableRow(cells=[_cell("c"), _cell("d")])])
        grid = build_table_grid(table)
        assert (grid.row_count, grid.column_count) == (2, 2)
        assert all(isinstance(grid.slot(r, c), Origin) for r in range(2) for c in range(2))

    def test_column_count_sums_first_row_spans(self):
        table = Table(rows=[TableRow(cells=[_cell("a", column_span=2), _cell("b")])])
        assert build_table_grid(table).column_count == 3

    def test_row_span_covers_cell_below(self):
        spanning = _cell("a", row_span=2)
        below = _cell("c")
        table = Table(rows=[TableRow(cells=[spanning, _cell("b")]), TableRow(cells=[_covered(), below])])
        grid = build_table_grid(table)
        assert grid.slot(1, 0) is OCCUPIED
        assert grid.slot(1, 1).cell is below

    def test_cells_placed_at_their_index(self):
        table = Table(rows=[TableRow(cells=[_cell("a", column_span=2), _covered(), _cell("b")])])
        grid = build_table_grid(table)
        assert grid.column_count == 4
        assert grid.slot(0, 1) is OCCUPIED
        assert grid.slot(0, 2).cell.content[0].elements[0].content == "b\n"
        assert grid.slot(0, 3) is EMPTY

    def test_block_span_marks_rectangle(self):
        table = Table(
            rows=[
                TableRow(cells=[_cell("a", column_span=2, row_span=2), _covered(), _cell("b")]),
                TableRow(cells=[_covered(), _covered(), _cell("c")]),
            ]
        )
        grid = build_table_grid(table)
        assert grid.slot(0, 1) is OCCUPIED
        assert grid.slot(1, 0) is OCCUPIED
        assert grid.slot(1, 1) is OCCUPIED
        assert isinstance(grid.slot(1, 2), Origin)
        assert [len(grid.origins_in_row(row)) for row in range(2)] == [2, 1]

    def test_missing_slots_are_empty(self):
        table = Table(rows=[TableRow(cells=[_cell("a"), _cell("b")]), TableRow(cells=[_cell("c")])])
        grid = build_table_grid(table)
        assert grid.slot(1, 1) is EMPTY
        assert len(grid.origins_in_row(1)) == 1

    def test_overflowing_cells_dropped_from_row(self):
        table = Table(rows=[TableRow(cells=[_cell("a")]), TableRow(cells=[_cell("b"), _cell("c")])])
        grid = build_table_grid(table)
        assert [o.cell.content[0].elements[0].content for o in grid.origins_in_row(1)] == ["b\n"]

    def test_empty_table(self):
        grid = build_table_grid(Table())
        assert (grid.row_count, grid.column_count) == (0, 0)


@pytest.mark.unit
class TestTableMarkup:
    """Tests for rendered table markup."""

    def test_wrapper_and_cell_style(self):
        html = _render(Table(rows=[TableRow(cells=[_cell("a")])]))
        assert html.startswith(
            '<div class="overflow-scroll w-100vw"><table class="w-full border-collapse mb-6" '
            'style="border: 1px solid black; background-color: white;"><tr>'
        )
        assert html.endswith("</tr></table></div>")
        assert '<td style="border: 1px solid black; padding: 0.75rem; background-color: white;">' in html

    def test_colspan_row_then_two_cells(self):
        table = Table(
            rows=[
                TableRow(cells=[_cell("wide", column_span=2)]),
                TableRow(cells=[_cell("left"), _cell("right")]),
            ]
        )
        rows = _rows(_render(table))
        assert len(rows) == 2
        assert rows[0].count("<td") == 1
        assert 'colspan="2"' in rows[0]
        assert "rowspan" not in rows[0]
        assert rows[1].count("<td") == 2
        assert "colspan" not in rows[1]

    def test_colspan_with_covered_cell_listed(self):
        table = Table(
            rows=[
                TableRow(cells=[_cell("wide", column_span=2), _covered()]),
                TableRow(cells=[_cell("left"), _cell("right")]),
            ]
        )
        rows = _rows(_render(table))
        assert rows[0].count("<td") == 1
        assert 'colspan="2"' in rows[0]
        assert rows[1].count("<td") == 2
        assert ">left</p>" in rows[1] and ">right</p>" in rows[1]

    def test_rowspan_cell_skipped_in_following_row(self):
        table = Table(
            rows=[
                TableRow(cells=[_cell("tall", row_span=2), _cell("b")]),
                TableRow(cells=[_covered(), _cell("c")]),
            ]
        )
        rows = _rows(_render(table))
        assert 'rowspan="2"' in rows[0]
        assert rows[1].count("<td") == 1
        assert ">c</p>" in rows[1]
        assert "<br>" not in rows[1]

    def test_ragged_row_not_padded(self):
        table = Table(rows=[TableRow(cells=[_cell("a"), _cell("b"), _cell("c")]), TableRow(cells=[_cell("d")])])
        rows = _rows(_render(table))
        assert [row.count("<td") for row in rows] == [3, 1]

    def test_empty_row_renders_empty_tr(self):
        table = Table(rows=[TableRow(cells=[_cell("a")]), TableRow()])
        assert _rows(_render(table))[1] == ""

    def test_table_without_rows_renders_nothing(self):
        assert _render(Table()) == ""

    def test_cell_paragraph_class(self):
        html = _render(Table(rows=[TableRow(cells=[_cell("a")])]))
        assert '<p class="leading-relaxed text-left">a</p>' in html
        assert "mb-4 leading-relaxed" not in html
