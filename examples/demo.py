"""
vigenere_crypto — Live Demo
===========================
Run:  python examples/demo.py

Walks through each CipherEngine operation on a real message and
prints what comes out.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vigenere_crypto import CipherEngine, InvalidKey

LINE = "═" * 70
MSG  = "ATTACK AT DAWN, 0600 HOURS! RENDEZVOUS AT THE OLD MILL."

def header(step, name):
    print(f"\n{LINE}")
    print(f"  {step} — {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def main():
    print(f"\n{LINE}")
    print("  vigenere_crypto — Demo")
    print(LINE)
    print(f"  Message: {MSG}\n")

    header(1, "ENCRYPT / DECRYPT")
    e  = CipherEngine("LEMON")
    ct = e.encrypt(MSG)
    pt = e.decrypt(ct)
    ok("Key",        e.key)
    ok("Keystream",  " ".join(str(s) for s in e.keystream(10)) + " ...")
    ok("Encrypted",  ct)
    ok("Decrypted",  pt)
    ok("Round-trip", str(pt == MSG))

    header(2, "CORRESPONDENCE CHECK")
    ok("encrypt(MSG) matches MSG", str(e.is_encrypted(ct, MSG)))
    ok("MSG matches MSG",          str(e.is_encrypted(MSG, MSG)))

    header(3, "KEY REPLACEMENT")
    e.set_key("KEY")
    ok("New key",        e.key)
    ok("HELLO",          e.encrypt("HELLO"))
    ok("Old ciphertext", f"still matches? {e.is_encrypted(ct, MSG)}")
    try:
        e.set_key("")
    except InvalidKey as err:
        ok("Empty key rejected", str(err))
    ok("Key after rejection", e.key)

    print(f"\n{LINE}\n")

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format=' %(message)s')
    main()
