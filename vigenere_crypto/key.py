"""
Vigenère key material
=====================
A key is a non-empty run of uppercase letters A–Z. Each letter stands
for a shift: A=0, B=1, ... Z=25. The key repeats over the message, so
its length is the cipher's period.

Keys are validated once, here, and are immutable afterwards. An engine
swapping keys swaps the whole object; it never edits one in place.
"""

from typing import Tuple


class InvalidKey(ValueError):
    """Key is empty, not a string, or holds a character outside A–Z."""


class VigenereKey:
    """Validated, immutable Vigenère key."""

    ALPHA = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

    __slots__ = ("_letters", "_shifts")

    def __init__(self, letters: str):
        if not isinstance(letters, str):
            raise InvalidKey(
                f"Vigenère key must be a string, got {type(letters).__name__}."
            )
        if not letters:
            raise InvalidKey("Vigenère key must not be empty.")
        for pos, ch in enumerate(letters):
            if ch not in self.ALPHA:
                raise InvalidKey(
                    f"Vigenère key must be uppercase A-Z: {ch!r} at position {pos}."
                )
        self._letters = letters
        self._shifts = tuple(ord(ch) - ord("A") for ch in letters)

    @classmethod
    def coerce(cls, value) -> "VigenereKey":
        """Pass a VigenereKey through untouched, validate anything else."""
        if isinstance(value, cls):
            return value
        return cls(value)

    @property
    def letters(self) -> str:
        return self._letters

    @property
    def shifts(self) -> Tuple[int, ...]:
        return self._shifts

    def shift_at(self, index: int) -> int:
        """Shift for absolute message position `index` (cycles with the key)."""
        return self._shifts[index % len(self._shifts)]

    def __len__(self) -> int:
        return len(self._letters)

    def __eq__(self, other):
        if not isinstance(other, VigenereKey):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self):
        return hash(self._letters)

    def __repr__(self):
        # letters stay out of reprs and tracebacks
        return f"VigenereKey(length={len(self)})"
