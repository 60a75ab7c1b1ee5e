from __future__ import annotations

import logging

from vigcrack.classical.common import rank_letter
from vigcrack.errors import InvalidArgument, PreconditionNotMet

from .results import ColumnHypothesis
from .utils import letter_counts

logger = logging.getLogger(__name__)

# ----------------------------
# Reference monogram table
# ----------------------------

# Typical English letter frequencies, indexed by letter rank (A..Z).
ENGLISH_FREQ: tuple[float, ...] = (
    0.08167, 0.01492, 0.02782, 0.04253, 0.12702, 0.02228, 0.02015, 0.06094, 0.06966,
    0.00153, 0.00772, 0.04025, 0.02406, 0.06749, 0.07507, 0.01929, 0.00095, 0.05987,
    0.06327, 0.09056, 0.02758, 0.00978, 0.02360, 0.00150, 0.01974, 0.00074,
)


# ----------------------------
# Column frequency analysis
# ----------------------------

def letter_frequencies(column: str) -> list[float]:
    """Observed relative frequency of each letter A..Z; all zeros for an empty column."""
    n = len(column)
    counts = letter_counts(column)
    if n == 0:
        return [0.0] * 26
    return [c / n for c in counts]


def shift_deviation(freqs: list[float], shift: int, ref: tuple[float, ...] = ENGLISH_FREQ) -> float:
    """
    Lower is better.

    Assumes ciphertext letter (i + shift) came from plaintext letter i and
    sums |observed - expected| weighted by the expected frequency, so
    mismatches on common letters dominate.
    """
    return sum(abs(freqs[(i + shift) % 26] - ref[i]) * ref[i] for i in range(26))


def rank_shifts(column: str) -> list[ColumnHypothesis]:
    """All 26 key-letter hypotheses for one column, best first."""
    freqs = letter_frequencies(column)
    ranked = [ColumnHypothesis(shift=rank_letter(s), deviation=shift_deviation(freqs, s)) for s in range(26)]
    ranked.sort()
    return ranked


def analyze_columns(ciphertext: str, key_len: int) -> list[list[ColumnHypothesis]]:
    """
    Split ciphertext into key_len columns and rank the shifts of each.
    Result[col] is the ranked hypothesis list for key position col.
    """
    if key_len < 1:
        raise InvalidArgument(f"Key length must be positive, got {key_len}.")
    if not ciphertext:
        raise PreconditionNotMet("Ciphertext is empty; nothing to analyze.")

    table = [rank_shifts(ciphertext[col::key_len]) for col in range(key_len)]
    logger.debug("Column analysis k=%d, best key %s", key_len, "".join(row[0].shift for row in table))
    return table
