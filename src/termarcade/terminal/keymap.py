"""
Decoding of curses key codes into the abstract Keys state.

Keyboard Mapping:
    UP: Up arrow, k, w
    DOWN: Down arrow, j, s
    LEFT: Left arrow, h, a
    RIGHT: Right arrow, l, d
    SPACE (action): Space, Enter
"""

import curses
import logging
from typing import Dict, Optional, Set

from termarcade.core.input import Key, Keys

logger = logging.getLogger(__name__)

QUIT_CODES = frozenset({ord("q"), ord("Q"), 27})  # 27 = Esc


def _letters(chars: str) -> set[int]:
    return {ord(c) for c in chars + chars.upper()}


KEY_CODES: Dict[int, Key] = {}
for _codes, _key in (
    ({curses.KEY_UP} | _letters("kw"), Key.UP),
    ({curses.KEY_DOWN} | _letters("js"), Key.DOWN),
    ({curses.KEY_LEFT} | _letters("ha"), Key.LEFT),
    ({curses.KEY_RIGHT} | _letters("ld"), Key.RIGHT),
    ({curses.KEY_ENTER, ord(" "), ord("\n"), ord("\r")}, Key.SPACE),
):
    for _code in _codes:
        KEY_CODES[_code] = _key


def key_from_code(code: int) -> Optional[Key]:
    """Map a curses key code to a logical key."""
    return KEY_CODES.get(code)


class KeyDecoder:
    """Feeds terminal key codes into a Keys instance.

    Terminals only report presses (and auto-repeats while a key is held), so
    a key is released once enough ticks pass without another code for it.
    Until the first repeat arrives the wait is `first_release_after`, long
    enough to cover the terminal's auto-repeat delay; after that it is the
    shorter `release_after`. A repeat keeps the key held without raising
    just-pressed again.
    """

    def __init__(self, keys: Keys, release_after: int = 6, first_release_after: int = 20) -> None:
        if release_after <= 0:
            raise ValueError(f"release_after must be positive, got {release_after}")
        if first_release_after <= 0:
            raise ValueError(f"first_release_after must be positive, got {first_release_after}")
        self.keys = keys
        self.release_after = release_after
        self.first_release_after = first_release_after
        self._idle_ticks: Dict[Key, int] = {}
        self._repeating: Set[Key] = set()

    @property
    def held(self) -> frozenset:
        return frozenset(self._idle_ticks)

    def feed(self, code: int) -> Optional[Key]:
        """Handle one key code. Returns the logical key, if any."""
        key = key_from_code(code)
        if key is None:
            return None

        if key in self._idle_ticks:
            self._repeating.add(key)
        else:
            self.keys.press(key)
            logger.debug(f"Key down: {key.name}")
        self._idle_ticks[key] = 0
        return key

    def tick(self) -> None:
        """Age held keys by one tick and release the stale ones."""
        for key in list(self._idle_ticks):
            self._idle_ticks[key] += 1
            limit = self.release_after if key in self._repeating else self.first_release_after
            if self._idle_ticks[key] >= limit:
                del self._idle_ticks[key]
                self._repeating.discard(key)
                self.keys.release(key)
                logger.debug(f"Key up: {key.name}")
