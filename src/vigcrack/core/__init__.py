from vigcrack.errors import CrackError, InvalidArgument, InvalidKey, PreconditionNotMet
from .features import column_ic, estimate_lengths
from .results import ColumnHypothesis, CrackResult, LengthCandidate
from .scoring import ENGLISH_FREQ, analyze_columns
from .session import CrackSession

__all__ = [
    "CrackError",
    "InvalidArgument",
    "InvalidKey",
    "PreconditionNotMet",
    "column_ic",
    "estimate_lengths",
    "ColumnHypothesis",
    "CrackResult",
    "LengthCandidate",
    "ENGLISH_FREQ",
    "analyze_columns",
    "CrackSession",
]
