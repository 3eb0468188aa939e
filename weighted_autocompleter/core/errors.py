# errors.py
# Exceptions raised at the call boundary of the engines and loaders.
# All of them are ValueErrors, so callers treating them as bad arguments can
# catch ValueError directly.


class AutocompleteError(ValueError):
    """Base class for every error raised by weighted_autocompleter."""


class InvalidInputError(AutocompleteError):
    """Missing word/prefix, mismatched construction input, bad k or engine name."""


class InvalidWeightError(AutocompleteError):
    """Raised when a term weight is negative or not a number."""


class TermFileError(AutocompleteError):
    """A term file line could not be parsed."""

    def __init__(self, lineno: int, line: str, reason: str) -> None:
        self.lineno = lineno
        self.line = line
        self.reason = reason
        super().__init__(f"line {lineno}: {reason}: {line!r}")
