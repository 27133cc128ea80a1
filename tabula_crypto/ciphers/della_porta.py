"""
Della Porta Cipher
==================
Giambattista della Porta, De Furtivis Literarum Notis, 1563.

Key symbols are taken in pairs (AB, CD, ...) and each pair selects one
row. Every row swaps the two halves of the alphabet, so it is its own
inverse: enciphering twice with the same key gives the plaintext back.

      A B C D E F G H I J K L M N O P Q R S T U V W X Y Z
    A N O P Q R S T U V W X Y Z A B C D E F G H I J K L M
    C O P Q R S T U V W X Y Z N M A B C D E F G H I J K L

The rows come from gear-wrapping the half-rotated alphabet: the first
half turns forward by the pair number, the second half turns back.
"""

from ..alphabet import owrap, wrap
from ..errors import ConfigurationError
from ..masc import Tableau
from ..tabula_recta import TabulaRecta
from .vigenere import VigenereFamilyCipher


class DellaPortaCipher(VigenereFamilyCipher):
    """Reciprocal Della Porta cipher. The alphabet length must be even."""

    def tabula_recta(self) -> TabulaRecta:
        ct_alphabet = self.alphabet
        if len(ct_alphabet) % 2 != 0:
            raise ConfigurationError(
                f"Della Porta alphabets must have even length, got {len(ct_alphabet)}."
            )
        swapped = wrap(ct_alphabet, len(ct_alphabet) // 2)

        def row(pt_alphabet: str, i: int) -> Tableau:
            return Tableau(pt_alphabet, owrap(swapped, i // 2))

        return TabulaRecta(
            pt_alphabet=self.alphabet,
            ct_alphabet=ct_alphabet,
            key_alphabet=self.alphabet,
            strict=self._strict,
            caseless=self._caseless,
            row_builder=row,
        )
