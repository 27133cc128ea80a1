"""
Errors
======
Every failure the engine reports derives from TabulaError, which is itself
a ValueError, so ``except ValueError`` keeps working for callers that do
not care about the finer distinction.

  ConfigurationError  — malformed alphabets, length mismatches, odd
                        gear-wrap lengths, empty countersigns
  GeneratorError      — a caller-supplied row builder failed
  TranscodeError      — strict mode met a symbol outside the alphabet
"""


class TabulaError(ValueError):
    """Base class for all tabula_crypto errors."""


class ConfigurationError(TabulaError):
    """The cipher's alphabets or key material cannot build a tableau."""


class GeneratorError(TabulaError):
    """A row builder raised while the tabula recta was being built."""

    def __init__(self, index: int, message: str):
        super().__init__(f"row builder failed at row {index}: {message}")
        self.index = index


class TranscodeError(TabulaError):
    """Strict mode: a symbol has no entry in the active tableau."""

    def __init__(self, symbol: str, position: int):
        super().__init__(f"symbol {symbol!r} at position {position} is not in the alphabet")
        self.symbol   = symbol
        self.position = position
