"""
Tests for the in-memory text buffer and clipboard.
"""
import pytest

from qnotepad.core import FontStyle, MemoryClipboard, PlainTextBuffer, TextBuffer, Clipboard


class TestPlainTextBuffer:
    """Selection, caret and edit behavior."""

    def test_new_buffer_has_caret_at_end_and_no_selection(self):
        buf = PlainTextBuffer("abc")
        assert buf.caret_position() == 3
        assert buf.selection_range() == (3, 3)
        assert buf.selected_text() is None

    def test_select_reports_ordered_range(self):
        buf = PlainTextBuffer("Hello World")
        buf.select(11, 6)
        assert buf.selection_range() == (6, 11)
        assert buf.selected_text() == "World"
        assert buf.caret_position() == 6

    def test_select_clamps_to_text(self):
        buf = PlainTextBuffer("abc")
        buf.select(-4, 99)
        assert buf.selection_range() == (0, 3)

    def test_replace_range_moves_caret_after_insertion(self):
        buf = PlainTextBuffer("Hello World")
        buf.select(6, 11)
        buf.replace_range(6, 11, "there")
        assert buf.text() == "Hello there"
        assert buf.caret_position() == 11
        assert buf.selected_text() is None

    def test_insert_at_position(self):
        buf = PlainTextBuffer("ac")
        buf.insert("b", 1)
        assert buf.text() == "abc"
        assert buf.caret_position() == 2

    @pytest.mark.parametrize("start,end", [(-1, 2), (2, 1), (0, 10)])
    def test_replace_range_rejects_invalid_ranges(self, start, end):
        buf = PlainTextBuffer("abc")
        with pytest.raises(ValueError):
            buf.replace_range(start, end, "x")

    def test_font_style(self):
        buf = PlainTextBuffer()
        assert buf.font_style() == FontStyle.PLAIN
        buf.set_font_style(FontStyle.ITALIC)
        assert buf.font_style() == FontStyle.ITALIC

    def test_satisfies_protocol(self):
        assert isinstance(PlainTextBuffer(), TextBuffer)


class TestMemoryClipboard:

    def test_empty_by_default(self):
        assert MemoryClipboard().read() is None

    def test_write_replaces_contents(self):
        clip = MemoryClipboard("old")
        clip.write("new")
        assert clip.read() == "new"

    def test_clear(self):
        clip = MemoryClipboard("x")
        clip.clear()
        assert clip.read() is None

    def test_satisfies_protocol(self):
        assert isinstance(MemoryClipboard(), Clipboard)
