"""Shared fixtures: an editor wired to a fake, fixed-size terminal."""

from types import SimpleNamespace

import pytest

from nanoedit.editor import Editor
from nanoedit.keyboard import KeyEvent, KeyType
from nanoedit.terminal import TerminalInterface


def make_fake_term(width=20, height=8):
    """A stand-in for blessed.Terminal with no escape sequences."""
    return SimpleNamespace(
        width=width,
        height=height,
        reverse='',
        normal='',
        home='',
        clear='',
        normal_cursor='',
        enter_fullscreen='',
        exit_fullscreen='',
        move=lambda y, x: f'<{y},{x}>',
    )


def ctrl(ch):
    return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=chr(ord(ch) - ord('a') + 1), is_ctrl=True)


def special(name):
    return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=f'<{name.upper()}>')


def char(ch):
    return KeyEvent(key_type=KeyType.REGULAR, value=ch, raw=ch)


@pytest.fixture
def fake_terminal():
    return TerminalInterface(make_fake_term())


@pytest.fixture
def editor(fake_terminal):
    return Editor(terminal=fake_terminal)
