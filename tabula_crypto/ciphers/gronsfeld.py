"""
Gronsfeld Cipher
================
A Vigenère cipher whose key is a string of digits: digit d selects the
row shifted by d. Only the first ten shifts of the square are reachable,
which made the cipher easy to use by hand and easier to break.

    key 3140  ==  Vigenère key DBEA
"""

from ..alphabet import DIGITS
from ..masc import Tableau
from ..tabula_recta import TabulaRecta
from .caesar import CaesarCipher
from .vigenere import VigenereFamilyCipher


class GronsfeldCipher(VigenereFamilyCipher):
    """Gronsfeld cipher. The key is drawn from the digits 0-9."""

    KEY_ALPHABET = DIGITS

    def __init__(self, key: str, alphabet: str = None,
                 strict: bool = False, caseless: bool = False):
        super().__init__(key, alphabet, strict=strict, caseless=caseless)

    def _row(self, alphabet: str, i: int) -> Tableau:
        return CaesarCipher(i, alphabet=alphabet).tableau()

    def tabula_recta(self) -> TabulaRecta:
        return TabulaRecta(
            pt_alphabet=self.alphabet,
            key_alphabet=self.KEY_ALPHABET,
            strict=self._strict,
            caseless=self._caseless,
            row_builder=self._row,
        )
