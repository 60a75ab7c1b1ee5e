from .classical.vigenere import decrypt, encrypt, reduce_repeating_key
from .core import (
    ColumnHypothesis,
    CrackResult,
    CrackSession,
    LengthCandidate,
    analyze_columns,
    column_ic,
    estimate_lengths,
)
from .core.utils import normalize_az
from .errors import CrackError, InvalidArgument, InvalidKey, PreconditionNotMet

__all__ = [
    "decrypt",
    "encrypt",
    "reduce_repeating_key",
    "ColumnHypothesis",
    "CrackResult",
    "CrackSession",
    "LengthCandidate",
    "analyze_columns",
    "column_ic",
    "estimate_lengths",
    "normalize_az",
    "CrackError",
    "InvalidArgument",
    "InvalidKey",
    "PreconditionNotMet",
]
