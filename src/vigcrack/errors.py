from __future__ import annotations


class CrackError(Exception):
    """Base class for every error raised by the analysis core."""


class PreconditionNotMet(CrackError):
    """An operation was called before the state it depends on exists
    (no ciphertext loaded, no key length set, no column analysis yet)."""


class InvalidArgument(CrackError, ValueError):
    """Out-of-range position, letter outside A-Z, non-positive length."""


class InvalidKey(CrackError, ValueError):
    """Key is empty or has unset / malformed slots."""
