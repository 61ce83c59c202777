"""Test character and line insertion in the line buffer."""

import random

from nanoedit.model import LineBuffer, CursorPosition


def test_new_buffer_has_one_empty_line():
    buf = LineBuffer()
    assert buf.lines == ("",)
    assert buf.cursor == CursorPosition(0, 0)
    assert not buf.modified


def test_buffer_from_no_lines_has_one_empty_line():
    buf = LineBuffer([])
    assert buf.lines == ("",)


def test_insert_char_splices_at_cursor():
    buf = LineBuffer(["helo"])
    buf.cursor = CursorPosition(0, 3)

    buf.insert_char("l")

    assert buf.lines == ("hello",)
    assert buf.cursor == CursorPosition(0, 4)
    assert buf.modified


def test_insert_char_at_end_of_line():
    buf = LineBuffer(["ab"])
    buf.cursor = CursorPosition(0, 2)
    buf.insert_char("c")
    assert buf.lines == ("abc",)
    assert buf.cursor.col == 3


def test_insert_char_random_positions():
    """Each insertion grows the line by one and splices at the old column."""
    rng = random.Random(1234)
    buf = LineBuffer(["the quick brown fox"])
    for _ in range(200):
        line = buf.current_line
        col = rng.randint(0, len(line))
        buf.set_cursor(0, col)
        ch = rng.choice("abcxyz!? ")

        buf.insert_char(ch)

        assert buf.current_line == line[:col] + ch + line[col:]
        assert buf.cursor.col == col + 1


def test_insert_char_rejects_multiple_characters():
    buf = LineBuffer(["abc"])
    buf.insert_char("xy")
    buf.insert_char("")
    assert buf.lines == ("abc",)
    assert not buf.modified


def test_insert_char_with_row_out_of_bounds_is_ignored():
    buf = LineBuffer(["abc"])
    buf.cursor = CursorPosition(5, 0)
    buf.insert_char("x")
    assert buf.lines == ("abc",)
    assert not buf.modified


def test_insert_line_in_middle_shifts_following_lines():
    buf = LineBuffer(["a", "c"])
    buf.insert_line(1, "b")
    assert buf.lines == ("a", "b", "c")
    assert buf.modified


def test_insert_line_at_start_and_end():
    buf = LineBuffer(["middle"])
    buf.insert_line(0, "first")
    buf.insert_line(2, "last")
    assert buf.lines == ("first", "middle", "last")


def test_insert_line_out_of_range_is_ignored():
    buf = LineBuffer(["a"])
    buf.insert_line(-1, "x")
    buf.insert_line(3, "x")
    assert buf.lines == ("a",)
    assert not buf.modified


def test_delete_line_shifts_following_lines_up():
    buf = LineBuffer(["a", "b", "c"])
    buf.delete_line(1)
    assert buf.lines == ("a", "c")
    assert buf.modified


def test_delete_last_remaining_line_leaves_empty_line():
    buf = LineBuffer(["only"])
    buf.delete_line(0)
    assert buf.lines == ("",)
    assert buf.num_lines == 1


def test_delete_line_never_empties_document():
    buf = LineBuffer([f"line {i}" for i in range(5)])
    for _ in range(10):
        buf.delete_line(0)
        assert buf.num_lines >= 1
    assert buf.lines == ("",)


def test_delete_line_out_of_range_is_ignored():
    buf = LineBuffer(["a", "b"])
    buf.delete_line(2)
    buf.delete_line(-1)
    assert buf.lines == ("a", "b")
    assert not buf.modified


def test_delete_line_under_cursor_clamps_cursor():
    buf = LineBuffer(["short", "a much longer line"])
    buf.cursor = CursorPosition(1, 10)
    buf.delete_line(1)
    assert buf.cursor == CursorPosition(0, 5)


def test_lines_view_is_read_only_copy():
    buf = LineBuffer(["a"])
    lines = buf.lines
    buf.insert_char("b")
    assert lines == ("a",)


def test_loaded_document_starts_modified():
    buf = LineBuffer.load(["one", "two"])
    assert buf.lines == ("one", "two")
    assert buf.cursor == CursorPosition(0, 0)
    assert buf.modified


def test_loading_no_lines_gives_one_modified_empty_line():
    buf = LineBuffer.load([])
    assert buf.lines == ("",)
    assert buf.modified
