"""
Monoalphabetic Substitution Tableau
===================================
The atomic unit of every cipher in this package: two aligned alphabets
and the two lookups between them.

    PT: ABCDEFGHIJKLMNOPQRSTUVWXYZ
    CT: DEFGHIJKLMNOPQRSTUVWXYZABC      (Caesar, shift 3)

The forward (pt -> ct) and backward (ct -> pt) maps are filled
independently in one pass. Where an alphabet repeats a symbol the first
occurrence wins, so a tableau is not guaranteed to be invertible.

Policies:
  strict    — a symbol outside the alphabet is a failure
              (non-strict passes it through untouched)
  caseless  — fold the symbol's case before lookup and restore the
              original case on the result
"""

import math
from typing import Optional, Tuple

from .alphabet import ALPHABET, backpermute, validate
from .errors import ConfigurationError, TranscodeError


class Tableau:
    """Immutable pt <-> ct substitution table."""

    def __init__(self, pt_alphabet: str, ct_alphabet: str,
                 strict: bool = False, caseless: bool = False):
        validate(pt_alphabet, "plaintext alphabet")
        validate(ct_alphabet, "ciphertext alphabet")
        if len(pt_alphabet) != len(ct_alphabet):
            raise ConfigurationError(
                f"alphabet length mismatch: {len(pt_alphabet)} plaintext symbols, "
                f"{len(ct_alphabet)} ciphertext symbols."
            )
        self._pt       = pt_alphabet
        self._ct       = ct_alphabet
        self._strict   = strict
        self._caseless = caseless

        self._pt2ct = {}
        self._ct2pt = {}
        for p, c in zip(pt_alphabet, ct_alphabet):
            self._pt2ct.setdefault(p, c)
            self._ct2pt.setdefault(c, p)

    @property
    def pt_alphabet(self) -> str:
        return self._pt

    @property
    def ct_alphabet(self) -> str:
        return self._ct

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def caseless(self) -> bool:
        return self._caseless

    def configured(self, strict: Optional[bool] = None,
                   caseless: Optional[bool] = None) -> "Tableau":
        """Copy of this tableau with different strict/caseless flags."""
        return Tableau(
            self._pt, self._ct,
            strict=self._strict if strict is None else strict,
            caseless=self._caseless if caseless is None else caseless,
        )

    # ── single symbols ───────────────────────────────────────────────────────

    def encipher_rune(self, r: str) -> Tuple[Optional[str], bool]:
        """
        Returns (output, transcoded).
        A miss gives (r, False), or (None, False) in strict mode.
        """
        return self._lookup(self._pt2ct, r)

    def decipher_rune(self, r: str) -> Tuple[Optional[str], bool]:
        return self._lookup(self._ct2pt, r)

    def _lookup(self, table: dict, r: str) -> Tuple[Optional[str], bool]:
        if r in table:
            return table[r], True
        if self._caseless:
            for folded in (r.upper(), r.lower()):
                if folded != r and folded in table:
                    return _match_case(table[folded], r), True
        if self._strict:
            return None, False
        return r, False

    # ── whole strings ────────────────────────────────────────────────────────

    def encipher(self, s: str) -> str:
        return self._transcode(s, self.encipher_rune)

    def decipher(self, s: str) -> str:
        return self._transcode(s, self.decipher_rune)

    @staticmethod
    def _transcode(s: str, fn) -> str:
        out = []
        for i, r in enumerate(s):
            o, _ = fn(r)
            if o is None:
                raise TranscodeError(r, i)
            out.append(o)
        return "".join(out)

    def printable(self) -> str:
        return f"PT: {self._pt}\nCT: {self._ct}"

    def __repr__(self):
        return f"Tableau(pt={self._pt!r}, ct={self._ct!r})"


def _match_case(out: str, like: str) -> str:
    if like.islower():
        cased = out.lower()
    elif like.isupper():
        cased = out.upper()
    else:
        return out
    # some case mappings expand (e.g. "İ".lower()); keep the 1:1 transform
    return cased if len(cased) == 1 else out


def affine_tableau(alphabet: str = ALPHABET, slope: int = 1, intercept: int = 0,
                   ct_alphabet: str = None, strict: bool = False,
                   caseless: bool = False) -> Tableau:
    """
    Tableau for the affine map x -> (slope * x + intercept) mod n.

    Position x of the plaintext alphabet receives symbol
    ``ct_alphabet[(slope * x + intercept) % n]``. The ciphertext alphabet
    defaults to the plaintext one. ``slope`` must be coprime with n or
    several plaintext symbols would collide on one ciphertext symbol.
    """
    if ct_alphabet is None:
        ct_alphabet = alphabet
    n = len(ct_alphabet)
    if n == 0:
        raise ConfigurationError("affine tableau needs a non-empty alphabet.")
    if math.gcd(slope, n) != 1:
        raise ConfigurationError(
            f"slope {slope} is not coprime with alphabet length {n}."
        )
    ct = backpermute(ct_alphabet, [(slope * x + intercept) % n for x in range(n)])
    return Tableau(alphabet, ct, strict=strict, caseless=caseless)
