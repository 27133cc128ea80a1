"""
Trithemius Cipher
=================
Johannes Trithemius, Polygraphia, 1518. The first printed tabula recta.

No key: the first symbol uses row A, the second row B, and so on
through the alphabet. Equivalent to Vigenère with the whole alphabet as
countersign.

    HELLO -> HFNOS
"""

from .vigenere import VigenereFamilyCipher


class TrithemiusCipher(VigenereFamilyCipher):

    def __init__(self, alphabet: str = None, strict: bool = False,
                 caseless: bool = False):
        super().__init__("", alphabet, strict=strict, caseless=caseless)

    def countersign(self) -> str:
        return self.alphabet

    def __repr__(self):
        return f"TrithemiusCipher(alphabet={self.alphabet!r})"
