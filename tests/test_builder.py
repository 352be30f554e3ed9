"""Tests for document assembly."""
from bugdoc.records import RENDERX_BUGS, REPORT_TITLE, BugRecord
from bugdoc.reporting.document import (
    Paragraph,
    Table,
    assemble_document,
    build_bug_log,
    divider,
    spacer,
    summary_text,
)


def _kinds(document):
    """Classify body blocks as table, spacer, divider or text."""
    spacer_block = spacer()
    divider_block = divider()
    kinds = []
    for block in document.body:
        if isinstance(block, Table):
            kinds.append("table")
        elif block == spacer_block:
            kinds.append("spacer")
        elif block == divider_block:
            kinds.append("divider")
        else:
            kinds.append("text")
    return kinds


class TestSummaryText:

    def test_plural(self):
        assert summary_text(4) == "4 bugs fixed"

    def test_singular(self):
        assert summary_text(1) == "1 bug fixed"

    def test_zero(self):
        assert summary_text(0) == "0 bugs fixed"

    def test_closing_phrase(self):
        assert summary_text(4, "renderer stable") == "4 bugs fixed — renderer stable"


class TestAssembleDocument:

    def test_end_to_end_sequence(self, two_records):
        """Title, subtitle, divider, (spacer, table, spacer) x2, divider, summary."""
        document = assemble_document(two_records, "T", "S")

        assert _kinds(document) == [
            "text", "text", "divider",
            "spacer", "table", "spacer",
            "spacer", "table", "spacer",
            "divider", "text",
        ]
        assert document.body[0].text == "T"
        assert document.body[1].text == "S"
        assert "2" in document.body[-1].text

    def test_end_to_end_tables(self, two_records):
        first, second = assemble_document(two_records, "T", "S").tables()

        assert len(first.rows[1].cells[1].paragraphs) == 1
        assert len(first.rows[2].cells[1].paragraphs) == 2
        assert len(second.rows[1].cells[1].paragraphs) == 0
        assert len(second.rows[2].cells[1].paragraphs) == 1

    def test_empty_records(self):
        document = assemble_document([], "T", "S")

        assert _kinds(document) == ["text", "text", "divider", "divider", "text"]
        last = document.body[-1]
        assert isinstance(last, Paragraph)
        assert "0" in last.text
        assert "bugs" in last.text

    def test_tables_wrapped_by_spacers_in_order(self):
        records = [BugRecord(number=n, title=f"bug {n}") for n in (5, 3, 5, 1)]
        document = assemble_document(records, "T", "S")
        body = document.body

        table_positions = [i for i, b in enumerate(body) if isinstance(b, Table)]
        assert len(table_positions) == 4
        for i in table_positions:
            assert body[i - 1] == spacer()
            assert body[i + 1] == spacer()

        headers = [t.rows[0].cells[0].blocks[0].text for t in document.tables()]
        assert headers == ["Bug #5: bug 5", "Bug #3: bug 3", "Bug #5: bug 5", "Bug #1: bug 1"]

    def test_page_and_style_defaults(self, two_records):
        document = assemble_document(two_records, "T", "S")

        assert (document.page.width, document.page.height) == (12240, 15840)
        assert document.page.margins.left == 1440
        assert document.style_defaults.default_font == "Arial"
        assert document.style_defaults.default_size == 22

        styles = document.style_defaults.heading_styles
        assert [s.style_id for s in styles] == ["Heading1", "Heading2"]
        assert [s.outline_level for s in styles] == [0, 1]

    def test_body_is_immutable_sequence(self, two_records):
        document = assemble_document(two_records, "T", "S")
        assert isinstance(document.body, tuple)


class TestBuildBugLog:

    def test_renderx_log(self):
        document = build_bug_log()

        assert len(document.tables()) == len(RENDERX_BUGS) == 4
        assert document.body[0].text == REPORT_TITLE
        assert document.body[-1].text == "4 bugs fixed — renderer stable"

    def test_tables_share_widths(self):
        widths = {t.column_widths for t in build_bug_log().tables()}
        assert widths == {(1440, 7920)}
