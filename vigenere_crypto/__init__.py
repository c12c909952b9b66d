"""
vigenere_crypto — Classical Vigenère Cipher
===========================================
Polyalphabetic substitution over the uppercase Latin alphabet A–Z.

    CipherEngine  — encrypt, decrypt, correspondence check, key replacement
    VigenereKey   — validated, immutable key (A–Z, non-empty)
    InvalidKey    — raised when a key fails validation

A historical cipher (1553). It offers no cryptographic security.

License: Apache 2.0
"""

__version__  = "1.0.0"

from .key    import InvalidKey, VigenereKey
from .engine import CipherEngine, shift_forward, shift_backward

__all__ = [
    "CipherEngine",
    "VigenereKey",
    "InvalidKey",
    "shift_forward",
    "shift_backward",
]
