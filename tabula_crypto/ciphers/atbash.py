"""
Atbash Cipher
=============
Hebrew mirror cipher (aleph <-> tav, beth <-> shin): the alphabet
maps onto itself reversed. Reciprocal, with no key.
"""

from ..alphabet import ALPHABET, reverse
from ..masc import Tableau


class AtbashCipher:

    def __init__(self, alphabet: str = None, strict: bool = False,
                 caseless: bool = False):
        self._alphabet = alphabet or ALPHABET
        self._strict   = strict
        self._caseless = caseless

    def tableau(self) -> Tableau:
        return Tableau(self._alphabet, reverse(self._alphabet),
                       strict=self._strict, caseless=self._caseless)

    def encipher(self, plaintext: str) -> str:
        return self.tableau().encipher(plaintext)

    def decipher(self, ciphertext: str) -> str:
        return self.tableau().decipher(ciphertext)

    def printable(self) -> str:
        return self.tableau().printable()

    def __repr__(self):
        return f"AtbashCipher(alphabet={self._alphabet!r})"
