"""
tabula_crypto — Live Demo: Every Cipher
=======================================
Run:  python examples/demo_all_ciphers.py

Enciphers and deciphers one message with every cipher in the package
and prints the Vigenère and Della Porta squares.
"""

import sys, os, logging
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from tabula_crypto import (
    Autokey,
    VigenereCipher, BeaufortCipher, VariantBeaufortCipher, GronsfeldCipher,
    DellaPortaCipher, TrithemiusCipher,
    AffineCipher, CaesarCipher, ROT13Cipher, DecimationCipher, AtbashCipher,
    KeywordCipher,
)

LINE = "═" * 70
MSG  = "Meet me by the old oak tree at midnight."

def header(name):
    print(f"\n{LINE}")
    print(f"  {name}")
    print(LINE)

def ok(label, value=""):
    print(f"  ✓  {label}{f': {value}' if value else ''}")

def roundtrip(name, cipher):
    header(name)
    ct = cipher.encipher(MSG)
    pt = cipher.decipher(ct)
    assert pt == MSG, f"{name} round-trip failed"
    ok("Enciphered", ct)
    ok("Deciphered", pt)


logging.basicConfig(level=logging.INFO, format=' %(message)s')

print(f"\n{LINE}")
print("  tabula_crypto — Classical Cipher Demo")
print(LINE)
print(f"  Message: {MSG}")

# ── polyalphabetic ───────────────────────────────────────────────────────────
roundtrip("Vigenère (LEMON)",                  VigenereCipher("LEMON", caseless=True))
roundtrip("Vigenère text autoclave (QUEENLY)", VigenereCipher("QUEENLY", autokey=Autokey.TEXT, caseless=True))
roundtrip("Vigenère key autoclave (QUEENLY)",  VigenereCipher("QUEENLY", autokey=Autokey.KEY, caseless=True))
roundtrip("Beaufort (FORTIFY)",                BeaufortCipher("FORTIFY", caseless=True))
roundtrip("Variant Beaufort (FORTIFY)",        VariantBeaufortCipher("FORTIFY", caseless=True))
roundtrip("Gronsfeld (31415)",                 GronsfeldCipher("31415", caseless=True))
roundtrip("Della Porta (PORTA)",               DellaPortaCipher("PORTA", caseless=True))
roundtrip("Trithemius",                        TrithemiusCipher(caseless=True))

# ── monoalphabetic ───────────────────────────────────────────────────────────
roundtrip("Affine (5, 8)",      AffineCipher(5, 8, caseless=True))
roundtrip("Caesar (3)",         CaesarCipher(3, caseless=True))
roundtrip("ROT13",              ROT13Cipher(caseless=True))
roundtrip("Decimation (7)",     DecimationCipher(7, caseless=True))
roundtrip("Atbash",             AtbashCipher(caseless=True))
roundtrip("Keyword (CIPHER)",   KeywordCipher("CIPHER", caseless=True))

# ── squares ──────────────────────────────────────────────────────────────────
header("Vigenère square")
print(VigenereCipher("A").printable())

header("Della Porta square")
print(DellaPortaCipher("A").printable())

print(f"\n{LINE}")
print("  All ciphers: PASSED")
print(f"{LINE}\n")
