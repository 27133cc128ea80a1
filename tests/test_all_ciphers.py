"""
tabula_crypto — Named Cipher Test Suite
=======================================
Run with:  python -m pytest tests/ -v
       or:  python tests/test_all_ciphers.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from tabula_crypto.ciphers.vigenere    import VigenereCipher
from tabula_crypto.ciphers.beaufort    import BeaufortCipher, VariantBeaufortCipher
from tabula_crypto.ciphers.gronsfeld   import GronsfeldCipher
from tabula_crypto.ciphers.della_porta import DellaPortaCipher
from tabula_crypto.ciphers.trithemius  import TrithemiusCipher
from tabula_crypto.ciphers.affine      import AffineCipher
from tabula_crypto.ciphers.caesar      import CaesarCipher
from tabula_crypto.ciphers.rot13       import ROT13Cipher
from tabula_crypto.ciphers.decimation  import DecimationCipher
from tabula_crypto.ciphers.atbash      import AtbashCipher
from tabula_crypto.ciphers.keyword     import KeywordCipher
from tabula_crypto.errors              import ConfigurationError, TranscodeError
from tabula_crypto.tabula_recta        import Autokey

MSG = "ATTACK AT DAWN, HOLD THE NORTH GATE!"

# ── Vigenère ──────────────────────────────────────────────────────────────────
def test_vigenere_known_answer():
    v = VigenereCipher("KEY")
    assert v.encipher("HELLO") == "RIJVS"
    assert v.decipher("RIJVS") == "HELLO"

def test_vigenere_lemon():
    v = VigenereCipher("LEMON")
    assert v.encipher("ATTACKATDAWN") == "LXFOPVEFRNHR"

def test_vigenere_pass_through_does_not_advance_key():
    v = VigenereCipher("LEMON")
    assert v.encipher("ATTACK AT DAWN!") == "LXFOPV EF RNHR!"
    assert VigenereCipher("KEY").encipher("HE LLO") == "RI JVS"

def test_vigenere_strict_rejects_unknown_symbol():
    v = VigenereCipher("KEY", strict=True)
    with pytest.raises(TranscodeError) as info:
        v.encipher("HELLO WORLD")
    assert info.value.symbol == " "
    assert info.value.position == 5

def test_vigenere_strict_decipher_rejects_unknown_symbol():
    with pytest.raises(TranscodeError):
        VigenereCipher("KEY", strict=True).decipher("rijvs")

def test_vigenere_case_sensitive_by_default():
    assert VigenereCipher("KEY").encipher("Hello") == "Rello"

def test_vigenere_caseless():
    v = VigenereCipher("key", caseless=True)
    assert v.encipher("Hello") == "Rijvs"
    assert v.decipher("Rijvs") == "Hello"

def test_vigenere_text_autoclave_queenly():
    v = VigenereCipher("QUEENLY", autokey=Autokey.TEXT)
    assert v.encipher("ATTACKATDAWN") == "QNXEPVYTWTWP"
    assert v.decipher("QNXEPVYTWTWP") == "ATTACKATDAWN"

def test_vigenere_text_autoclave_feeds_plaintext():
    v = VigenereCipher("K", autokey="text")
    assert v.encipher("HELLO") == "RLPWZ"
    assert v.encipher("HE LLO") == "RL PWZ"

def test_vigenere_key_autoclave_feeds_ciphertext():
    v = VigenereCipher("K", autokey=Autokey.KEY)
    assert v.encipher("HELLO") == "RVGRF"
    assert v.decipher("RVGRF") == "HELLO"

def test_vigenere_key_autoclave_caseless():
    v = VigenereCipher("k", autokey=Autokey.KEY, caseless=True)
    assert v.encipher("hello") == "rvgrf"
    assert v.decipher("rvgrf") == "hello"

def test_vigenere_printable():
    v = VigenereCipher("A", alphabet="ABC")
    assert v.printable() == (
        "    A B C\n"
        "\n"
        "A   A B C\n"
        "B   B C A\n"
        "C   C A B"
    )

def test_vigenere_unicode_alphabet():
    greek = "ΑΒΓΔΕΖΗΘΙΚΛΜΝΞΟΠΡΣΤΥΦΧΨΩ"
    v = VigenereCipher("ΚΛΕΙΔΙ", alphabet=greek)
    ct = v.encipher("ΚΑΛΗΜΕΡΑ ΚΟΣΜΕ")
    assert len(ct) == len("ΚΑΛΗΜΕΡΑ ΚΟΣΜΕ")
    assert v.decipher(ct) == "ΚΑΛΗΜΕΡΑ ΚΟΣΜΕ"

def test_vigenere_countersign_outside_key_alphabet():
    with pytest.raises(ConfigurationError):
        VigenereCipher("K3Y").encipher("HELLO")

def test_vigenere_empty_countersign():
    with pytest.raises(ConfigurationError):
        VigenereCipher("").encipher("HELLO")

def test_vigenere_reusable():
    v = VigenereCipher("KEY", autokey=Autokey.TEXT)
    assert v.encipher(MSG) == v.encipher(MSG)

# ── Beaufort ──────────────────────────────────────────────────────────────────
def test_beaufort_known_answer():
    b = BeaufortCipher("KEY")
    assert b.encipher("HELLO") == "DANZQ"
    assert b.decipher("DANZQ") == "HELLO"

def test_beaufort_is_reciprocal():
    b = BeaufortCipher("FORTIFICATION")
    assert b.encipher(b.encipher(MSG)) == MSG

def test_variant_beaufort_known_answer():
    vb = VariantBeaufortCipher("KEY")
    assert vb.encipher("HELLO") == "XANBK"
    assert vb.decipher("XANBK") == "HELLO"

def test_variant_beaufort_is_vigenere_decipherment():
    assert VariantBeaufortCipher("LEMON").encipher("LXFOPVEFRNHR") == "ATTACKATDAWN"

# ── Gronsfeld ─────────────────────────────────────────────────────────────────
def test_gronsfeld_known_answer():
    g = GronsfeldCipher("3140")
    assert g.encipher("HELLO") == "KFPLR"
    assert g.decipher("KFPLR") == "HELLO"

def test_gronsfeld_equals_vigenere():
    assert GronsfeldCipher("3140").encipher(MSG) == VigenereCipher("DBEA").encipher(MSG)

def test_gronsfeld_rejects_letter_key():
    with pytest.raises(ConfigurationError):
        GronsfeldCipher("KEY").encipher("HELLO")

def test_gronsfeld_printable_rows():
    lines = GronsfeldCipher("0").printable().split("\n")
    assert len(lines) == 12
    assert lines[2] == "0   " + " ".join("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
    assert lines[-1] == "9   " + " ".join("JKLMNOPQRSTUVWXYZABCDEFGHI")

# ── Della Porta ───────────────────────────────────────────────────────────────
def test_della_porta_first_pair_swaps_halves():
    assert DellaPortaCipher("A").encipher("HELLO") == "URYYB"
    assert DellaPortaCipher("B").encipher("HELLO") == "URYYB"

def test_della_porta_pairs_share_rows():
    assert DellaPortaCipher("CB").encipher("HE") == "VR"
    assert DellaPortaCipher("DA").encipher("HE") == "VR"

@pytest.mark.parametrize("key", ["A", "KEY", "PORTA", "ZYXWV"])
def test_della_porta_is_reciprocal(key):
    d = DellaPortaCipher(key)
    assert d.encipher(MSG) == d.decipher(MSG)
    assert d.encipher(d.encipher(MSG)) == MSG

def test_della_porta_odd_alphabet():
    with pytest.raises(ConfigurationError):
        DellaPortaCipher("A", alphabet="ABC").encipher("A")

# ── Trithemius ────────────────────────────────────────────────────────────────
def test_trithemius_known_answer():
    t = TrithemiusCipher()
    assert t.encipher("HELLO") == "HFNOS"
    assert t.decipher("HFNOS") == "HELLO"

def test_trithemius_equals_vigenere_with_alphabet_key():
    alphabet = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert TrithemiusCipher().encipher(MSG) == VigenereCipher(alphabet).encipher(MSG)

# ── round trips ───────────────────────────────────────────────────────────────
POLYALPHABETIC = [
    VigenereCipher("CRYPTOGRAPHY"),
    VigenereCipher("CRYPTOGRAPHY", autokey=Autokey.TEXT),
    VigenereCipher("CRYPTOGRAPHY", autokey=Autokey.KEY),
    BeaufortCipher("CRYPTOGRAPHY"),
    BeaufortCipher("CRYPTOGRAPHY", autokey=Autokey.TEXT),
    VariantBeaufortCipher("CRYPTOGRAPHY"),
    VariantBeaufortCipher("CRYPTOGRAPHY", autokey=Autokey.KEY),
    GronsfeldCipher("27182818"),
    DellaPortaCipher("CRYPTOGRAPHY"),
    DellaPortaCipher("CRYPTOGRAPHY", autokey=Autokey.TEXT),
    TrithemiusCipher(),
]

@pytest.mark.parametrize("cipher", POLYALPHABETIC, ids=repr)
def test_polyalphabetic_roundtrip(cipher):
    ct = cipher.encipher(MSG)
    assert len(ct) == len(MSG)
    assert ct != MSG
    assert cipher.decipher(ct) == MSG

@pytest.mark.parametrize("cipher", POLYALPHABETIC, ids=repr)
def test_polyalphabetic_punctuation_stays_in_place(cipher):
    ct = cipher.encipher(MSG)
    for p, c in zip(MSG, ct):
        if not p.isalpha():
            assert c == p

# ── Monoalphabetic ────────────────────────────────────────────────────────────
def test_rot13():
    r = ROT13Cipher()
    assert r.encipher("HELLO") == "URYYB"
    assert r.encipher(r.encipher("HELLO")) == "HELLO"

def test_rot13_equals_caesar_13():
    assert ROT13Cipher().encipher(MSG) == CaesarCipher(13).encipher(MSG)

def test_rot13_caseless():
    assert ROT13Cipher(caseless=True).encipher("Hello, World") == "Uryyb, Jbeyq"

def test_caesar():
    c = CaesarCipher(3)
    assert c.encipher("HELLO") == "KHOOR"
    assert c.decipher("KHOOR") == "HELLO"

def test_caesar_negative_shift():
    assert CaesarCipher(-3).encipher("KHOOR") == "HELLO"

def test_affine():
    a = AffineCipher(5, 8)
    assert a.encipher("AFFINECIPHER") == "IHHWVCSWFRCP"
    assert a.decipher("IHHWVCSWFRCP") == "AFFINECIPHER"

def test_affine_slope_not_coprime():
    with pytest.raises(ConfigurationError):
        AffineCipher(13, 0).encipher("HELLO")

def test_decimation():
    d = DecimationCipher(3)
    assert d.encipher("ABC") == "ADG"
    assert d.decipher("ADG") == "ABC"

def test_atbash():
    a = AtbashCipher()
    assert a.encipher("HELLO") == "SVOOL"
    assert a.encipher("SVOOL") == "HELLO"

def test_keyword_tableau():
    k = KeywordCipher("CIPHER")
    assert k.printable() == (
        "PT: ABCDEFGHIJKLMNOPQRSTUVWXYZ\n"
        "CT: CIPHERABDFGJKLMNOQSTUVWXYZ"
    )

def test_keyword():
    k = KeywordCipher("CIPHER")
    assert k.encipher("HELLO") == "BEJJM"
    assert k.decipher("BEJJM") == "HELLO"

def test_monoalphabetic_strict():
    with pytest.raises(TranscodeError):
        CaesarCipher(3, strict=True).encipher("HI THERE")

MONOALPHABETIC_REPRS = [
    (AffineCipher(5, 8),        "AffineCipher(slope=5, intercept=8, alphabet='ABCDEFGHIJKLMNOPQRSTUVWXYZ')"),
    (CaesarCipher(3, "ABC"),    "CaesarCipher(shift=3, alphabet='ABC')"),
    (ROT13Cipher(),             "ROT13Cipher(shift=13)"),
    (DecimationCipher(7),       "DecimationCipher(multiplier=7)"),
    (AtbashCipher("ABC"),       "AtbashCipher(alphabet='ABC')"),
    (KeywordCipher("CIPHER"),   "KeywordCipher(keyword='CIPHER', alphabet='ABCDEFGHIJKLMNOPQRSTUVWXYZ')"),
]

@pytest.mark.parametrize("cipher, expected", MONOALPHABETIC_REPRS)
def test_monoalphabetic_repr(cipher, expected):
    assert repr(cipher) == expected

# ── run directly ──────────────────────────────────────────────────────────────
if __name__ == "__main__":
    import time

    def _each(fn, cases):
        def run():
            for case in cases:
                if isinstance(case, tuple):
                    fn(*case)
                else:
                    fn(case)
        return run

    tests = [
        ("Vigenère — known answer",            test_vigenere_known_answer),
        ("Vigenère — LEMON",                   test_vigenere_lemon),
        ("Vigenère — pass-through",            test_vigenere_pass_through_does_not_advance_key),
        ("Vigenère — strict encipher",         test_vigenere_strict_rejects_unknown_symbol),
        ("Vigenère — strict decipher",         test_vigenere_strict_decipher_rejects_unknown_symbol),
        ("Vigenère — case-sensitive",          test_vigenere_case_sensitive_by_default),
        ("Vigenère — caseless",                test_vigenere_caseless),
        ("Vigenère — text autoclave QUEENLY",  test_vigenere_text_autoclave_queenly),
        ("Vigenère — text autoclave feed",     test_vigenere_text_autoclave_feeds_plaintext),
        ("Vigenère — key autoclave",           test_vigenere_key_autoclave_feeds_ciphertext),
        ("Vigenère — key autoclave caseless",  test_vigenere_key_autoclave_caseless),
        ("Vigenère — tableau",                 test_vigenere_printable),
        ("Vigenère — Greek alphabet",          test_vigenere_unicode_alphabet),
        ("Vigenère — foreign key symbol",      test_vigenere_countersign_outside_key_alphabet),
        ("Vigenère — empty countersign",       test_vigenere_empty_countersign),
        ("Vigenère — reusable",                test_vigenere_reusable),
        ("Beaufort — known answer",            test_beaufort_known_answer),
        ("Beaufort — reciprocal",              test_beaufort_is_reciprocal),
        ("Variant Beaufort — known answer",    test_variant_beaufort_known_answer),
        ("Variant Beaufort — Vigenère inverse", test_variant_beaufort_is_vigenere_decipherment),
        ("Gronsfeld — known answer",           test_gronsfeld_known_answer),
        ("Gronsfeld — equals Vigenère",        test_gronsfeld_equals_vigenere),
        ("Gronsfeld — letter key",             test_gronsfeld_rejects_letter_key),
        ("Gronsfeld — tableau",                test_gronsfeld_printable_rows),
        ("Della Porta — first pair",           test_della_porta_first_pair_swaps_halves),
        ("Della Porta — shared rows",          test_della_porta_pairs_share_rows),
        ("Della Porta — reciprocal",           _each(test_della_porta_is_reciprocal,
                                                     ["A", "KEY", "PORTA", "ZYXWV"])),
        ("Della Porta — odd alphabet",         test_della_porta_odd_alphabet),
        ("Trithemius — known answer",          test_trithemius_known_answer),
        ("Trithemius — equals Vigenère",       test_trithemius_equals_vigenere_with_alphabet_key),
        ("Polyalphabetic — round trips",       _each(test_polyalphabetic_roundtrip, POLYALPHABETIC)),
        ("Polyalphabetic — punctuation",       _each(test_polyalphabetic_punctuation_stays_in_place,
                                                     POLYALPHABETIC)),
        ("ROT13",                              test_rot13),
        ("ROT13 — equals Caesar 13",           test_rot13_equals_caesar_13),
        ("ROT13 — caseless",                   test_rot13_caseless),
        ("Caesar",                             test_caesar),
        ("Caesar — negative shift",            test_caesar_negative_shift),
        ("Affine",                             test_affine),
        ("Affine — slope not coprime",         test_affine_slope_not_coprime),
        ("Decimation",                         test_decimation),
        ("Atbash",                             test_atbash),
        ("Keyword — tableau",                  test_keyword_tableau),
        ("Keyword",                            test_keyword),
        ("Monoalphabetic — strict",            test_monoalphabetic_strict),
        ("Monoalphabetic — repr",              _each(test_monoalphabetic_repr, MONOALPHABETIC_REPRS)),
    ]

    print("\n" + "═" * 70)
    print("  tabula_crypto — Named Cipher Tests")
    print("═" * 70)
    passed = failed = 0
    for name, fn in tests:
        t0 = time.perf_counter()
        try:
            fn()
            elapsed = time.perf_counter() - t0
            print(f"  ✓  {name:<45} {elapsed:.3f}s")
            passed += 1
        except Exception as e:
            print(f"  ✗  {name:<45} FAILED: {e}")
            failed += 1
    print("═" * 70)
    print(f"  {passed} passed  |  {failed} failed")
    print("═" * 70 + "\n")
    sys.exit(0 if failed == 0 else 1)
