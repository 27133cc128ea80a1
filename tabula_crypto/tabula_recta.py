"""
Tabula Recta — Polyalphabetic Substitution Engine
=================================================
A tabula recta is a family of monoalphabetic tableaux, one row per
symbol of a key alphabet. Every polyalphabetic cipher in this package
(Vigenère, Beaufort, Gronsfeld, Della Porta, Trithemius and their
autoclave variants) is a choice of three alphabets plus a key stream.

        A B C D E F ...
    A   A B C D E F ...
    B   B C D E F G ...
    C   C D E F G H ...

Rows come from one of two places:
  * a row builder  f(pt_alphabet, row_index) -> Tableau, or
  * the built-in Caesar rows: row y is the ciphertext alphabet
    rotated left by y.

Rows are rebuilt from the declarative fields on every call to
encipher / decipher / printable, so one TabulaRecta (and one cipher)
can be reused freely and shared between threads.

Key stream
----------
Seeded from the countersign. Symbol i of the message uses key symbol
``stream[n % len(stream)]`` where n counts the symbols actually
transcoded so far; pass-through symbols do not advance it. In autoclave
mode the stream grows by one symbol per transcoded symbol:

    mode   encipher appends      decipher appends
    TEXT   plaintext (input)     plaintext (output)
    KEY    ciphertext (output)   ciphertext (input)

Both parties therefore rebuild the same stream from opposite ends.
"""

import enum
import logging
from typing import Callable, Dict, Optional

from .alphabet import ALPHABET, backpermute, unique, validate
from .errors import ConfigurationError, GeneratorError, TabulaError, TranscodeError
from .masc import Tableau

logger = logging.getLogger(__name__)

RowBuilder = Callable[[str, int], Tableau]
Feedback   = Callable[[str, str], Optional[str]]


class Autokey(enum.Enum):
    """Autoclave setting for a Vigenère-family cipher."""

    NONE = "none"
    TEXT = "text"
    KEY  = "key"

    def encipher_feedback(self) -> Optional[Feedback]:
        if self is Autokey.TEXT:
            return lambda original, translated: original
        if self is Autokey.KEY:
            return lambda original, translated: translated
        return None

    def decipher_feedback(self) -> Optional[Feedback]:
        if self is Autokey.TEXT:
            return lambda original, translated: translated
        if self is Autokey.KEY:
            return lambda original, translated: original
        return None


class ReciprocalTable:
    """One fully built tabula recta: key symbol -> Tableau."""

    def __init__(self, rows: Dict[str, Tableau], caseless: bool = False):
        self._rows     = rows
        self._caseless = caseless

    def __len__(self):
        return len(self._rows)

    def __iter__(self):
        return iter(self._rows)

    def __getitem__(self, k: str) -> Tableau:
        return self.row(k)

    def row(self, k: str) -> Tableau:
        if k in self._rows:
            return self._rows[k]
        if self._caseless:
            for folded in (k.upper(), k.lower()):
                if folded in self._rows:
                    return self._rows[folded]
        raise ConfigurationError(f"key symbol {k!r} has no row in the tabula recta.")

    def encipher(self, s: str, countersign: str, feedback: Feedback = None) -> str:
        return self._stream(s, countersign, feedback, decipher=False)

    def decipher(self, s: str, countersign: str, feedback: Feedback = None) -> str:
        return self._stream(s, countersign, feedback, decipher=True)

    def _stream(self, s: str, countersign: str, feedback: Optional[Feedback],
                decipher: bool) -> str:
        if not countersign:
            raise ConfigurationError("countersign must not be empty.")
        validate(countersign, "countersign")

        key_stream = list(countersign)
        transcoded = 0
        out = []
        for pos, r in enumerate(s):
            k = key_stream[transcoded % len(key_stream)]
            tableau = self.row(k)
            if decipher:
                o, ok = tableau.decipher_rune(r)
            else:
                o, ok = tableau.encipher_rune(r)
            if o is None:
                raise TranscodeError(r, pos)
            if ok:
                transcoded += 1
                if feedback is not None:
                    extra = feedback(r, o)
                    if extra is not None:
                        key_stream.append(extra)
            out.append(o)

        logger.debug(
            f"{'Decipher' if decipher else 'Encipher'}: {transcoded}/{len(s)} symbols "
            f"transcoded, key stream {len(countersign)} -> {len(key_stream)}"
        )
        return "".join(out)


class TabulaRecta:
    """
    Declarative description of a tabula recta.

    Missing ciphertext and key alphabets default to the plaintext one.
    Repeated key symbols are dropped (first occurrence kept), so the
    table has one row per distinct key symbol.
    """

    CELL_WIDTH = 4

    def __init__(self, pt_alphabet: str = ALPHABET, ct_alphabet: str = None,
                 key_alphabet: str = None, strict: bool = False,
                 caseless: bool = False, row_builder: RowBuilder = None):
        self._pt          = pt_alphabet or ALPHABET
        self._ct          = ct_alphabet or self._pt
        self._key         = key_alphabet or self._pt
        self._strict      = strict
        self._caseless    = caseless
        self._row_builder = row_builder

    @property
    def pt_alphabet(self) -> str:
        return self._pt

    @property
    def ct_alphabet(self) -> str:
        return self._ct

    @property
    def key_alphabet(self) -> str:
        return self._key

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def caseless(self) -> bool:
        return self._caseless

    # ── construction ─────────────────────────────────────────────────────────

    def reciprocal_table(self) -> ReciprocalTable:
        """Build every row. All-or-nothing: any failure aborts the build."""
        keys = unique(validate(self._key, "key alphabet"))
        if self._row_builder is None:
            rows = self._caesar_rows(keys)
        else:
            rows = self._builder_rows(keys)
        logger.debug(f"Tabula recta built: {len(rows)} rows x {len(self._pt)} symbols")
        return ReciprocalTable(rows, caseless=self._caseless)

    def _builder_rows(self, keys: str) -> Dict[str, Tableau]:
        rows = {}
        for i, k in enumerate(keys):
            try:
                tableau = self._row_builder(self._pt, i)
            except TabulaError:
                raise
            except Exception as exc:
                raise GeneratorError(i, str(exc)) from exc
            if not isinstance(tableau, Tableau):
                raise GeneratorError(i, f"expected a Tableau, got {type(tableau).__name__}")
            rows[k] = tableau.configured(strict=self._strict, caseless=self._caseless)
        return rows

    def _caesar_rows(self, keys: str) -> Dict[str, Tableau]:
        ct = validate(self._ct, "ciphertext alphabet")
        n = len(ct)
        rows = {}
        for y, k in enumerate(keys):
            # row y: ciphertext alphabet shifted left by y
            shifted = backpermute(ct, [(x + y) % n for x in range(n)])
            rows[k] = Tableau(self._pt, shifted,
                              strict=self._strict, caseless=self._caseless)
        return rows

    # ── operations ───────────────────────────────────────────────────────────

    def encipher(self, s: str, countersign: str, feedback: Feedback = None) -> str:
        return self.reciprocal_table().encipher(s, countersign, feedback)

    def decipher(self, s: str, countersign: str, feedback: Feedback = None) -> str:
        return self.reciprocal_table().decipher(s, countersign, feedback)

    def printable(self) -> str:
        """
        Grid view: the plaintext alphabet as a header, then one row per
        key symbol showing the enciphered plaintext alphabet.
        Diagnostic output only; the layout is not a data format.
        """
        table = self.reciprocal_table()
        lines = [" " * self.CELL_WIDTH + _spaced(self._pt), ""]
        for k in table:
            row = table.row(k).encipher(self._pt)
            lines.append(k.ljust(self.CELL_WIDTH) + _spaced(row))
        return "\n".join(lines)

    def __repr__(self):
        return (f"TabulaRecta(pt={self._pt!r}, ct={self._ct!r}, "
                f"key={self._key!r})")


def _spaced(s: str) -> str:
    return " ".join(s)
