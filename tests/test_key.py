"""
vigenere_crypto — VigenereKey Tests
===================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from vigenere_crypto import InvalidKey, VigenereKey

# ── Validation ───────────────────────────────────────────────────────────────
def test_valid_key():
    k = VigenereKey("KEY")
    assert k.letters == "KEY"
    assert k.shifts == (10, 4, 24)
    assert len(k) == 3

def test_full_alphabet_shifts():
    k = VigenereKey(VigenereKey.ALPHA)
    assert k.shifts == tuple(range(26))

def test_empty_key_rejected():
    with pytest.raises(InvalidKey, match="empty"):
        VigenereKey("")

def test_lowercase_rejected_not_folded():
    with pytest.raises(InvalidKey):
        VigenereKey("key")

def test_error_names_offending_position():
    with pytest.raises(InvalidKey, match="position 2"):
        VigenereKey("AB-CD")

@pytest.mark.parametrize("bad", [None, 7, b"KEY", ["K", "E", "Y"]])
def test_non_string_rejected(bad):
    with pytest.raises(InvalidKey, match="string"):
        VigenereKey(bad)

# ── Behaviour ────────────────────────────────────────────────────────────────
def test_shift_at_cycles():
    k = VigenereKey("AB")
    assert [k.shift_at(i) for i in range(5)] == [0, 1, 0, 1, 0]

def test_coerce_passes_key_through():
    k = VigenereKey("KEY")
    assert VigenereKey.coerce(k) is k
    assert VigenereKey.coerce("KEY") == k

def test_coerce_validates_strings():
    with pytest.raises(InvalidKey):
        VigenereKey.coerce("")

def test_immutable():
    k = VigenereKey("KEY")
    with pytest.raises(AttributeError):
        k.letters = "ABC"
    with pytest.raises(AttributeError):
        k.extra = 1

def test_equality_and_hash():
    assert VigenereKey("KEY") == VigenereKey("KEY")
    assert VigenereKey("KEY") != VigenereKey("KEZ")
    assert len({VigenereKey("KEY"), VigenereKey("KEY")}) == 1

def test_repr_hides_letters():
    assert repr(VigenereKey("SECRET")) == "VigenereKey(length=6)"
