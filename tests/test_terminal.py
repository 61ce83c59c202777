"""Test frame painting in the terminal interface."""

from curtsies.events import PasteEvent

from nanoedit.constants import EditorConstants
from nanoedit.terminal import TerminalInterface
from conftest import make_fake_term


def test_first_frame_paints_every_row(capsys):
    terminal = TerminalInterface(make_fake_term(width=10, height=5))

    terminal.update_frame(["ab", ""], 0, 2, status_bar="File: x", message="hi")

    out = capsys.readouterr().out
    assert "<0,0>ab        " in out
    assert "<2,0>File: x   " in out
    assert "<3,0>hi        " in out
    assert f"<4,0>{EditorConstants.HELP_LINE[:10]}" in out
    assert out.endswith("<0,2>")


def test_unchanged_rows_are_not_repainted(capsys):
    terminal = TerminalInterface(make_fake_term(width=10, height=5))
    terminal.update_frame(["ab", "cd"], 0, 0, status_bar="s")
    capsys.readouterr()

    terminal.update_frame(["ab", "cX"], 1, 1, status_bar="s")

    out = capsys.readouterr().out
    assert "<1,0>cX" in out
    assert "<0,0>" not in out
    assert out.endswith("<1,1>")


def test_invalidate_frame_forces_full_repaint(capsys):
    terminal = TerminalInterface(make_fake_term(width=10, height=5))
    terminal.update_frame(["ab", "cd"], 0, 0, status_bar="s")
    capsys.readouterr()

    terminal.invalidate_frame()
    terminal.update_frame(["ab", "cd"], 0, 0, status_bar="s")

    assert "<0,0>ab" in capsys.readouterr().out


def test_rows_are_cut_to_terminal_width(capsys):
    terminal = TerminalInterface(make_fake_term(width=4, height=4))
    terminal.update_frame(["abcdefgh"], 0, 0, status_bar="status bar")
    out = capsys.readouterr().out
    assert "<0,0>abcd" in out
    assert "abcde" not in out
    assert "<1,0>stat" in out


def test_get_key_without_input_returns_none():
    terminal = TerminalInterface(make_fake_term())
    assert terminal.get_key(timeout=0) is None
    assert not terminal.has_input


def test_short_terminal_paints_only_rows_that_fit(capsys):
    terminal = TerminalInterface(make_fake_term(width=10, height=2))

    terminal.update_frame(["ab"], 0, 1, status_bar="File: x", message="hi")

    out = capsys.readouterr().out
    assert "<0,0>ab        " in out
    assert "<1,0>File: x   " in out
    assert "<2,0>" not in out
    assert "<3,0>" not in out
    assert out.endswith("<0,1>")


def test_paste_burst_is_replayed_key_by_key():
    terminal = TerminalInterface(make_fake_term())
    paste = PasteEvent()
    paste.events = ['a', 'b', '<Ctrl-x>']
    terminal._curtsies_input = iter([paste])

    assert terminal.get_key() == 'a'
    assert terminal._pending_keys == ['b', '<Ctrl-x>']
    assert terminal.get_key() == 'b'
    assert terminal.get_key() == '<Ctrl-x>'
    assert terminal._pending_keys == []


def test_pending_keys_count_as_input():
    terminal = TerminalInterface(make_fake_term())
    terminal._pending_keys = ['z']
    assert terminal.has_input
    assert terminal.get_key(timeout=0) == 'z'
    assert not terminal.has_input
