"""
Abstract key state shared by the player, the solution generator and the
terminal front-end.

Keys keeps two bitmasks over a fixed set of logical keys: the keys currently
held and the keys that went down during the current tick. A key counts as
pressing while it is held *or* was pressed this tick, so a press and release
arriving within the same tick is never lost.
"""

from enum import IntEnum


class Key(IntEnum):
    """Logical keys. The value is the bit index in the masks."""
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    SPACE = 4  # Action

    @property
    def mask(self) -> int:
        return 1 << self.value

    @classmethod
    def from_index(cls, index: int) -> 'Key':
        """Map 0..4 to a key."""
        try:
            return cls(index)
        except ValueError:
            raise ValueError(f"Invalid key index: {index}") from None


KEY_COUNT = len(Key)


class Keys:
    """Held / just-pressed state for every logical key."""

    __slots__ = ("_just_pressed", "_pressing")

    def __init__(self, just_pressed: int = 0, pressing: int = 0) -> None:
        self._just_pressed = just_pressed
        self._pressing = pressing

    def update(self) -> None:
        """Clear just-pressed bits. Call once per tick, after gameplay reads."""
        self._just_pressed = 0

    def press(self, key: Key) -> None:
        self._just_pressed |= key.mask
        self._pressing |= key.mask

    def release(self, key: Key) -> None:
        self._pressing &= ~key.mask

    def just_pressed(self, key: Key) -> bool:
        return (self._just_pressed & key.mask) != 0

    def pressing(self, key: Key) -> bool:
        return self.just_pressed(key) or (self._pressing & key.mask) != 0

    def any_pressed(self) -> bool:
        return self._just_pressed != 0 or self._pressing != 0

    def copy(self) -> 'Keys':
        return Keys(self._just_pressed, self._pressing)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Keys):
            return NotImplemented
        return (self._just_pressed, self._pressing) == (other._just_pressed, other._pressing)

    def __hash__(self) -> int:
        return hash((self._just_pressed, self._pressing))

    def __repr__(self) -> str:
        held = ",".join(k.name for k in Key if self._pressing & k.mask)
        fresh = ",".join(k.name for k in Key if self._just_pressed & k.mask)
        return f"Keys(pressing=[{held}], just_pressed=[{fresh}])"
