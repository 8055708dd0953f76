#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_linked_images.py
"""Unit tests for linked-image detection."""

import pytest

from gdoc2html.ast import Document, LinkedImage, Paragraph, Table, TableCell, TableRow, TextRun, TextStyle
from gdoc2html.renderers.linked_images import LinkedImageDetector, LinkedImageIndex, find_bare_urls, is_image_url


def _para(*runs):
    return Paragraph(elements=list(runs))


@pytest.mark.unit
class TestIsImageUrl:
    """Tests for the image URL heuristic."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com/photo.png",
            "https://example.com/photo.JPEG",
            "https://lh3.googleusercontent.com/abc",
            "https://drive.google.com/file/d/123/view",
            "https://i.imgur.com/xyz",
            "https://cdn.example.com/images/banner",
        ],
    )
    def test_image_urls(self, url):
        assert is_image_url(url)

    @pytest.mark.parametrize("url", ["https://example.com/page.html", "https://docs.example.com/guide"])
    def test_non_image_urls(self, url):
        assert not is_image_url(url)

    def test_find_bare_urls(self):
        text = "see https://a.com/x.png and http://b.org/page, done"
        assert find_bare_urls(text) == ["https://a.com/x.png", "http://b.org/page,"]


@pytest.mark.unit
class TestLinkedImageDetector:
    """Tests for LinkedImageDetector."""

    def test_hyperlink_detected(self):
        doc = Document(content=[_para(TextRun(content=" Figure 1 \n", style=TextStyle(link_url="https://x.com/fig.png")))])
        records = LinkedImageDetector().detect(doc)
        assert records == [
            LinkedImage(
                url="https://x.com/fig.png",
                text="Figure 1",
                location="document-block-0-element-0",
                index=0,
                source="hyperlink",
            )
        ]

    def test_non_image_link_ignored(self):
        doc = Document(content=[_para(TextRun(content="site", style=TextStyle(link_url="https://x.com/about")))])
        assert LinkedImageDetector().detect(doc) == []

    def test_text_urls_each_recorded(self):
        doc = Document(
            content=[
                _para(TextRun(content="intro\n")),
                _para(TextRun(content="a"), TextRun(content="https://x.com/a.png and https://x.com/b.gif\n")),
            ]
        )
        records = LinkedImageDetector().detect(doc)
        assert [r.url for r in records] == ["https://x.com/a.png", "https://x.com/b.gif"]
        assert [r.index for r in records] == [0, 1]
        assert all(r.source == "text-url" for r in records)
        assert records[0].location == "document-block-1-element-1"

    def test_link_and_text_url_in_same_run(self):
        run = TextRun(content="https://x.com/t.png", style=TextStyle(link_url="https://x.com/l.png"))
        records = LinkedImageDetector().detect(Document(content=[_para(run)]))
        assert [(r.url, r.source) for r in records] == [
            ("https://x.com/l.png", "hyperlink"),
            ("https://x.com/t.png", "text-url"),
        ]

    def test_table_cell_locations(self):
        image_run = TextRun(content="https://x.com/cell.png")
        table = Table(
            rows=[
                TableRow(cells=[TableCell(), TableCell()]),
                TableRow(cells=[TableCell(), TableCell(content=[_para(TextRun(content="x")), _para(image_run)])]),
            ]
        )
        records = LinkedImageDetector().detect(Document(content=[_para(TextRun(content="x")), table]))
        assert len(records) == 1
        assert records[0].location == "table-row-1-cell-1-block-1-element-0"

    def test_nested_tables_scanned(self):
        inner = Table(rows=[TableRow(cells=[TableCell(content=[_para(TextRun(content="https://x.com/deep.png"))])])])
        outer = Table(rows=[TableRow(cells=[TableCell(content=[inner])])])
        records = LinkedImageDetector().detect(Document(content=[outer]))
        assert [r.url for r in records] == ["https://x.com/deep.png"]

    def test_location_restored_after_table(self):
        table = Table(rows=[TableRow(cells=[TableCell(content=[_para(TextRun(content="x"))])])])
        trailing = _para(TextRun(content="https://x.com/after.png"))
        records = LinkedImageDetector().detect(Document(content=[table, trailing]))
        assert records[0].location == "document-block-1-element-0"

    def test_failure_yields_empty_list(self, caplog):
        class Broken(Document):
            def accept(self, visitor):
                raise RuntimeError("boom")

        assert LinkedImageDetector().detect(Broken()) == []
        assert "boom" in caplog.text

    def test_detection_is_repeatable(self):
        doc = Document(content=[_para(TextRun(content="https://x.com/a.png"))])
        detector = LinkedImageDetector()
        assert detector.detect(doc) == detector.detect(doc)


@pytest.mark.unit
class TestLinkedImageIndex:
    """Tests for LinkedImageIndex lookups."""

    def test_first_match_wins(self):
        first = LinkedImage(url="u", text="first", location="a", index=0)
        second = LinkedImage(url="u", text="second", location="b", index=1)
        index = LinkedImageIndex([first, second])
        assert index.lookup("u") is first
        assert len(index) == 2
        assert list(index) == [first, second]

    def test_lookup_misses(self):
        index = LinkedImageIndex()
        assert index.lookup(None) is None
        assert index.lookup("nope") is None
        assert "nope" not in index
