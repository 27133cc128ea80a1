"""
Keyword Cipher
==============
The ciphertext alphabet is the keyword with repeats removed, followed
by the rest of the alphabet in order:

    PT: ABCDEFGHIJKLMNOPQRSTUVWXYZ
    CT: CIPHERABDFGJKLMNOQSTUVWXYZ      (keyword CIPHER)

Keyword symbols outside the alphabet are ignored.
"""

from ..alphabet import ALPHABET, unique
from ..masc import Tableau


class KeywordCipher:

    def __init__(self, keyword: str, alphabet: str = None,
                 strict: bool = False, caseless: bool = False):
        self._keyword  = keyword
        self._alphabet = alphabet or ALPHABET
        self._strict   = strict
        self._caseless = caseless

    def ct_alphabet(self) -> str:
        return unique("".join(c for c in self._keyword + self._alphabet if c in self._alphabet))

    def tableau(self) -> Tableau:
        return Tableau(self._alphabet, self.ct_alphabet(),
                       strict=self._strict, caseless=self._caseless)

    def encipher(self, plaintext: str) -> str:
        return self.tableau().encipher(plaintext)

    def decipher(self, ciphertext: str) -> str:
        return self.tableau().decipher(ciphertext)

    def printable(self) -> str:
        return self.tableau().printable()

    def __repr__(self):
        return f"KeywordCipher(keyword={self._keyword!r}, alphabet={self._alphabet!r})"
