"""
Vigenère Polyalphabetic Cipher
==============================
Giovan Battista Bellaso, 1553; misattributed to Blaise de Vigenère.
Called "le chiffre indéchiffrable" for 300 years until Kasiski (1863)
showed how to recover the period of the repeating key.

Each plaintext symbol is shifted by the alphabet position of the
current countersign symbol:  C = P + K (mod n).

    countersign KEY,  HELLO -> RIJVS

Autoclave (autokey) variants extend the key stream with the message
itself, so the key never repeats:
    Autokey.TEXT  — append each plaintext symbol  (Vigenère's own autokey)
    Autokey.KEY   — append each ciphertext symbol

VigenereFamilyCipher is the shared base for Beaufort, variant Beaufort,
Gronsfeld, Della Porta and Trithemius; they differ only in the three
alphabets, the row builder and where the countersign comes from.
"""

from typing import Union

from ..alphabet import ALPHABET
from ..tabula_recta import Autokey, TabulaRecta


class VigenereFamilyCipher:
    """Countersign-driven cipher over a tabula recta."""

    ALPHABET = ALPHABET

    def __init__(self, key: str, alphabet: str = None,
                 autokey: Union[Autokey, str] = Autokey.NONE,
                 strict: bool = False, caseless: bool = False):
        self._key      = key
        self._alphabet = alphabet or self.ALPHABET
        self._autokey  = Autokey(autokey)
        self._strict   = strict
        self._caseless = caseless

    @property
    def key(self) -> str:
        return self._key

    @property
    def alphabet(self) -> str:
        return self._alphabet

    @property
    def autokey(self) -> Autokey:
        return self._autokey

    def tabula_recta(self) -> TabulaRecta:
        """PT = CT = KEY = the base alphabet."""
        return TabulaRecta(
            pt_alphabet=self._alphabet,
            ct_alphabet=self._alphabet,
            key_alphabet=self._alphabet,
            strict=self._strict,
            caseless=self._caseless,
        )

    def countersign(self) -> str:
        return self._key

    def encipher(self, plaintext: str) -> str:
        """Encipher. Symbols outside the alphabet pass through unless strict."""
        return self.tabula_recta().encipher(
            plaintext, self.countersign(), self._autokey.encipher_feedback()
        )

    def decipher(self, ciphertext: str) -> str:
        return self.tabula_recta().decipher(
            ciphertext, self.countersign(), self._autokey.decipher_feedback()
        )

    def printable(self) -> str:
        return self.tabula_recta().printable()

    def __repr__(self):
        return (f"{type(self).__name__}(key={self._key!r}, alphabet={self._alphabet!r}, "
                f"autokey={self._autokey.value})")


class VigenereCipher(VigenereFamilyCipher):
    """Vigenère cipher, optionally text- or key-autoclave."""
