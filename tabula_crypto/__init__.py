"""
tabula_crypto — Classical Substitution Ciphers
==============================================
Polyalphabetic ciphers built on one tabula recta engine, plus the
monoalphabetic ciphers its rows are made of.
From Atbash (c. 500 BC) to the autoclave ciphers of the 16th century.

Polyalphabetic:
    Vigenère            — repeating countersign, optional text/key autoclave
    Beaufort            — reciprocal, C = K - P
    Variant Beaufort    — C = P - K
    Gronsfeld           — numeric countersign
    Della Porta         — reciprocal rows from gear-wrapped half alphabets
    Trithemius          — the alphabet itself as countersign

Monoalphabetic:
    Affine, Caesar, ROT13, Decimation, Atbash, Keyword

None of these offers any security against modern cryptanalysis.
Educational and recreational use only.

License: Apache 2.0
"""

__version__ = "1.0.0"

from .errors                  import TabulaError, ConfigurationError, GeneratorError, TranscodeError
from .masc                    import Tableau, affine_tableau
from .tabula_recta            import Autokey, ReciprocalTable, TabulaRecta
from .ciphers.vigenere        import VigenereFamilyCipher, VigenereCipher
from .ciphers.beaufort        import BeaufortCipher, VariantBeaufortCipher
from .ciphers.gronsfeld       import GronsfeldCipher
from .ciphers.della_porta     import DellaPortaCipher
from .ciphers.trithemius      import TrithemiusCipher
from .ciphers.affine          import AffineCipher
from .ciphers.caesar          import CaesarCipher
from .ciphers.rot13           import ROT13Cipher
from .ciphers.decimation      import DecimationCipher
from .ciphers.atbash          import AtbashCipher
from .ciphers.keyword         import KeywordCipher

__all__ = [
    "TabulaError",
    "ConfigurationError",
    "GeneratorError",
    "TranscodeError",
    "Tableau",
    "affine_tableau",
    "Autokey",
    "ReciprocalTable",
    "TabulaRecta",
    "VigenereFamilyCipher",
    "VigenereCipher",
    "BeaufortCipher",
    "VariantBeaufortCipher",
    "GronsfeldCipher",
    "DellaPortaCipher",
    "TrithemiusCipher",
    "AffineCipher",
    "CaesarCipher",
    "ROT13Cipher",
    "DecimationCipher",
    "AtbashCipher",
    "KeywordCipher",
]
