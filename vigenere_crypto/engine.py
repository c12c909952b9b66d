"""
Vigenère Polyalphabetic Cipher Engine
=====================================
Each letter of the message is shifted by the letter of the key sitting
at the same position, the key repeating as often as needed.

    encrypt:  C[i] = (P[i] + K[i mod L]) mod 26
    decrypt:  P[i] = (C[i] - K[i mod L] + 26) mod 26

Only A–Z are shifted. Everything else (digits, spaces, punctuation,
lowercase, non-ASCII) is copied as-is, but still takes up a position:
the key cursor is the absolute index into the message, not a count of
letters seen so far.

Historical note: Blaise de Vigenère, 1553. Not a secure primitive.
"""

import logging
from typing import List

from cryptography.hazmat.primitives import constant_time

from .key import InvalidKey, VigenereKey

logger = logging.getLogger(__name__)


def shift_forward(ch: str, n: int) -> str:
    """Advance uppercase `ch` by `n` places, wrapping Z back to A."""
    return chr(ord("A") + (ord(ch) - ord("A") + n) % 26)


def shift_backward(ch: str, n: int) -> str:
    """Retreat uppercase `ch` by `n` places, wrapping A back to Z."""
    return chr(ord("A") + (ord(ch) - ord("A") - n + 26) % 26)


class CipherEngine:
    """
    Vigenère cipher holding one replaceable key.

    The key is an immutable VigenereKey. set_key() swaps the reference,
    and every operation reads it once up front, so a single call always
    runs under one key from start to finish.
    """

    ALPHA      = VigenereKey.ALPHA
    ALPHA_SIZE = 26

    def __init__(self, key):
        self._key = VigenereKey.coerce(key)
        logger.debug(f"CipherEngine ready | key length={len(self._key)}")

    @property
    def key(self) -> str:
        return self._key.letters

    def set_key(self, new_key) -> None:
        """
        Replace the key. Raises InvalidKey and keeps the old key if
        `new_key` is empty or not uppercase A–Z.
        """
        try:
            key = VigenereKey.coerce(new_key)
        except InvalidKey as e:
            logger.warning(f"Key rejected: {e}")
            raise
        self._key = key
        logger.debug(f"Key replaced | key length={len(key)}")

    def keystream(self, length: int) -> List[int]:
        """Shift applied at each absolute position 0..length-1."""
        if length < 0:
            raise ValueError("Keystream length must be non-negative.")
        key = self._key
        return [key.shift_at(i) for i in range(length)]

    def _transform(self, message: str, shift) -> str:
        key = self._key
        result = []
        for i, ch in enumerate(message):
            if ch in self.ALPHA:
                result.append(shift(ch, key.shift_at(i)))
            else:
                result.append(ch)
        return "".join(result)

    def encrypt(self, message: str) -> str:
        """Encrypt message. Non A–Z characters pass through."""
        logger.debug(f"Encrypt: {len(message)} chars")
        return self._transform(message, shift_forward)

    def decrypt(self, message: str) -> str:
        """Decrypt message."""
        logger.debug(f"Decrypt: {len(message)} chars")
        return self._transform(message, shift_backward)

    def is_encrypted(self, ciphertext: str, plaintext: str) -> bool:
        """
        True iff `ciphertext` is exactly encrypt(plaintext) under the
        current key. This re-derives and compares; it cannot tell whether
        an arbitrary string came from this cipher without its plaintext.
        """
        expected = self.encrypt(plaintext)
        return constant_time.bytes_eq(
            ciphertext.encode("utf-8", "surrogatepass"),
            expected.encode("utf-8", "surrogatepass"),
        )

    def __repr__(self):
        return f"CipherEngine({self._key!r})"
