"""
Alphabets
=========
An alphabet is a plain ``str``: an ordered run of Unicode code points.
Python indexes strings by code point, never by byte, so the offset
arithmetic below is safe for any script.

  wrap         — rotate left by an offset (the Caesar shift of a row)
  reverse      — reverse the order (Beaufort, atbash)
  owrap        — gear-wrap: counter-rotate the two halves (Della Porta)
  backpermute  — pick symbols by index (affine rows)
"""

from typing import Iterable

from .errors import ConfigurationError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGITS   = "0123456789"


def validate(alphabet: str, name: str = "alphabet") -> str:
    """
    Reject strings whose symbol count would not match their code points.

    A lone surrogate is half of a UTF-16 pair that lost its partner; it
    would count as one symbol here but is not a character at all.
    """
    for i, ch in enumerate(alphabet):
        if 0xD800 <= ord(ch) <= 0xDFFF:
            raise ConfigurationError(
                f"{name} holds a malformed symbol (lone surrogate) at index {i}."
            )
    return alphabet


def unique(alphabet: str) -> str:
    """Drop repeated symbols, keeping the first occurrence of each."""
    return "".join(dict.fromkeys(alphabet))


def wrap(alphabet: str, offset: int) -> str:
    if not alphabet:
        return alphabet
    offset %= len(alphabet)
    return alphabet[offset:] + alphabet[:offset]


def reverse(alphabet: str) -> str:
    return alphabet[::-1]


def owrap(alphabet: str, offset: int) -> str:
    """
    Gear-wrap: split in half, rotate the first half forward by ``offset``
    and the second half forward by ``half - offset``.

    The halves turn against each other like meshing gears, which makes
    the row pt -> owrap(pt) its own inverse once the halves are swapped.
    """
    if len(alphabet) % 2 != 0:
        raise ConfigurationError(
            f"gear-wrap needs an even-length alphabet, got {len(alphabet)} symbols."
        )
    half = len(alphabet) // 2
    u, v = alphabet[:half], alphabet[half:]
    return wrap(u, offset) + wrap(v, half - offset)


def backpermute(alphabet: str, indices: Iterable[int]) -> str:
    out = []
    for i in indices:
        if not 0 <= i < len(alphabet):
            raise ConfigurationError(
                f"index {i} is out of range for an alphabet of {len(alphabet)} symbols."
            )
        out.append(alphabet[i])
    return "".join(out)
