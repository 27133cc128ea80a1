"""
Beaufort Ciphers
================
Sir Francis Beaufort's reciprocal variant of the Vigenère square.

  Beaufort           C = K - P (mod n)
                     CT = KEY = reversed alphabet. Enciphering and
                     deciphering are the same operation.
  Variant Beaufort   C = P - K (mod n)
                     PT = CT = reversed alphabet, KEY = alphabet.
                     Vigenère decipherment used as encipherment.
"""

from ..alphabet import reverse
from ..tabula_recta import TabulaRecta
from .vigenere import VigenereFamilyCipher


class BeaufortCipher(VigenereFamilyCipher):

    def tabula_recta(self) -> TabulaRecta:
        rev = reverse(self.alphabet)
        return TabulaRecta(
            pt_alphabet=self.alphabet,
            ct_alphabet=rev,
            key_alphabet=rev,
            strict=self._strict,
            caseless=self._caseless,
        )


class VariantBeaufortCipher(VigenereFamilyCipher):

    def tabula_recta(self) -> TabulaRecta:
        rev = reverse(self.alphabet)
        return TabulaRecta(
            pt_alphabet=rev,
            ct_alphabet=rev,
            key_alphabet=self.alphabet,
            strict=self._strict,
            caseless=self._caseless,
        )
