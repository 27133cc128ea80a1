"""
Affine Cipher
=============
The general monoalphabetic substitution on an ordered alphabet:

    E(x) = (a * x + b) mod n        a = slope, b = intercept

``a`` must be coprime with n. Caesar (a = 1), ROT13 (a = 1, b = 13) and
decimation (b = 0) are special cases, and the Gronsfeld cipher builds
its rows from Caesar tableaux.
"""

from ..alphabet import ALPHABET
from ..masc import Tableau, affine_tableau


class AffineCipher:
    """Affine cipher over an arbitrary alphabet."""

    def __init__(self, slope: int, intercept: int, alphabet: str = None,
                 ct_alphabet: str = None, strict: bool = False,
                 caseless: bool = False):
        self._slope       = slope
        self._intercept   = intercept
        self._alphabet    = alphabet or ALPHABET
        self._ct_alphabet = ct_alphabet
        self._strict      = strict
        self._caseless    = caseless

    def tableau(self) -> Tableau:
        return affine_tableau(
            self._alphabet, self._slope, self._intercept,
            ct_alphabet=self._ct_alphabet,
            strict=self._strict, caseless=self._caseless,
        )

    def encipher(self, plaintext: str) -> str:
        return self.tableau().encipher(plaintext)

    def decipher(self, ciphertext: str) -> str:
        return self.tableau().decipher(ciphertext)

    def printable(self) -> str:
        return self.tableau().printable()

    def __repr__(self):
        return (f"AffineCipher(slope={self._slope}, intercept={self._intercept}, "
                f"alphabet={self._alphabet!r})")
