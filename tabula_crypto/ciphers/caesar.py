"""
Caesar Cipher
=============
Shift every symbol a fixed number of places:  C = P + shift (mod n).
Suetonius records Julius Caesar using a shift of three.
"""

from ..alphabet import ALPHABET
from ..masc import Tableau
from .affine import AffineCipher


class CaesarCipher:

    SLOPE = 1

    def __init__(self, shift: int, alphabet: str = None,
                 strict: bool = False, caseless: bool = False):
        self._shift    = shift
        self._alphabet = alphabet or ALPHABET
        self._affine   = AffineCipher(self.SLOPE, shift, alphabet=alphabet,
                                      strict=strict, caseless=caseless)

    def tableau(self) -> Tableau:
        return self._affine.tableau()

    def encipher(self, plaintext: str) -> str:
        return self._affine.encipher(plaintext)

    def decipher(self, ciphertext: str) -> str:
        return self._affine.decipher(ciphertext)

    def printable(self) -> str:
        return self._affine.printable()

    def __repr__(self):
        return f"CaesarCipher(shift={self._shift}, alphabet={self._alphabet!r})"
