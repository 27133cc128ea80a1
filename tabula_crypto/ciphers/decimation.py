"""
Decimation Cipher
=================
Multiply each symbol's position:  C = P * multiplier (mod n).
The multiplier must be coprime with the alphabet length; the first
symbol always maps to the first symbol of the ciphertext alphabet.
"""

from ..masc import Tableau
from .affine import AffineCipher


class DecimationCipher:

    INTERCEPT = 0

    def __init__(self, multiplier: int, alphabet: str = None,
                 ct_alphabet: str = None, strict: bool = False,
                 caseless: bool = False):
        self._multiplier = multiplier
        self._affine = AffineCipher(multiplier, self.INTERCEPT, alphabet=alphabet,
                                    ct_alphabet=ct_alphabet, strict=strict,
                                    caseless=caseless)

    def tableau(self) -> Tableau:
        return self._affine.tableau()

    def encipher(self, plaintext: str) -> str:
        return self._affine.encipher(plaintext)

    def decipher(self, ciphertext: str) -> str:
        return self._affine.decipher(ciphertext)

    def printable(self) -> str:
        return self._affine.printable()

    def __repr__(self):
        return f"DecimationCipher(multiplier={self._multiplier})"
