from __future__ import annotations

import logging

from vigcrack.errors import InvalidArgument

from .results import LengthCandidate
from .utils import letter_counts

logger = logging.getLogger(__name__)

DEFAULT_MAX_LEN = 20


def column_ic(column: str) -> float:
    """
    Normalized index of coincidence of one column:
        26 * sum(n_c * (n_c - 1)) / (N * (N - 1))

    ~1.0 for uniformly random letters, ~1.73 for English, exactly 26 for
    a column of one repeated letter. Columns with N <= 1 score 0.0.
    """
    n = len(column)
    if n < 2:
        return 0.0
    num = sum(c * (c - 1) for c in letter_counts(column))
    return 26 * num / (n * (n - 1))


def average_ic(text: str, length: int) -> float:
    """Mean column IC when text is split into `length` columns (i mod length)."""
    if length <= 0:
        raise InvalidArgument(f"Key length must be positive, got {length}.")
    cols = [text[i::length] for i in range(length)]
    # Too-short columns contribute 0 but still count in the mean.
    return sum(column_ic(col) for col in cols) / length


def estimate_lengths(ciphertext: str, max_len: int = DEFAULT_MAX_LEN) -> list[LengthCandidate]:
    """
    IC test for every key length 1..min(max_len, len(ciphertext)).

    Returns candidates best-first (descending score, shorter length on ties).
    max_len should not grossly exceed the ciphertext length: long candidate
    lengths leave one-letter columns that carry no signal.
    """
    if max_len < 1:
        raise InvalidArgument(f"max_len must be positive, got {max_len}.")

    upper = min(max_len, len(ciphertext))
    candidates = [LengthCandidate(length=k, score=average_ic(ciphertext, k)) for k in range(1, upper + 1)]
    candidates.sort()

    if candidates:
        best = candidates[0]
        logger.debug("IC scan over %d lengths, best k=%d score=%.4f", upper, best.length, best.score)
    return candidates
