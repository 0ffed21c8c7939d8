"""Curses front-end for termarcade."""

from termarcade.terminal.app import Panel, PanelLogHandler, TerminalApp, dashboard_layout
from termarcade.terminal.keymap import KEY_CODES, QUIT_CODES, KeyDecoder, key_from_code

__all__ = [
    "Panel",
    "PanelLogHandler",
    "TerminalApp",
    "dashboard_layout",
    "KEY_CODES",
    "QUIT_CODES",
    "KeyDecoder",
    "key_from_code",
]
