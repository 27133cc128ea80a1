"""
ROT13
=====
Caesar shift of 13 over the 26-letter Latin alphabet. Thirteen is half
of 26, so the cipher is its own inverse:  ROT13(ROT13(s)) == s.
"""

from ..alphabet import ALPHABET
from ..masc import Tableau
from .caesar import CaesarCipher


class ROT13Cipher:

    SHIFT = 13

    def __init__(self, strict: bool = False, caseless: bool = False):
        self._caesar = CaesarCipher(self.SHIFT, alphabet=ALPHABET,
                                    strict=strict, caseless=caseless)

    def tableau(self) -> Tableau:
        return self._caesar.tableau()

    def encipher(self, plaintext: str) -> str:
        return self._caesar.encipher(plaintext)

    def decipher(self, ciphertext: str) -> str:
        return self._caesar.decipher(ciphertext)

    def printable(self) -> str:
        return self._caesar.printable()

    def __repr__(self):
        return f"ROT13Cipher(shift={self.SHIFT})"
