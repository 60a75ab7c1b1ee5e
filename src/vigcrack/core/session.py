from __future__ import annotations

import logging
from typing import Optional

from vigcrack.classical.common import is_az
from vigcrack.classical.vigenere import decrypt, reduce_repeating_key
from vigcrack.errors import InvalidArgument, PreconditionNotMet

from .features import DEFAULT_MAX_LEN, estimate_lengths
from .results import ColumnHypothesis, CrackResult, LengthCandidate
from .scoring import analyze_columns
from .utils import is_sanitized

logger = logging.getLogger(__name__)


class CrackSession:
    """
    Holds one ciphertext and everything derived from it.

    Flow: load -> estimate_lengths -> set_key_length -> analyze_columns
    -> auto_fill_key / set_key_letter -> decrypt.

    load() discards all derived state (candidates, key length, key,
    column hypotheses), so nothing cached can describe another text.
    Not safe for concurrent use.
    """

    def __init__(self) -> None:
        self._ciphertext: Optional[str] = None
        self._reset()

    def _reset(self) -> None:
        self._candidates: Optional[list[LengthCandidate]] = None
        self._key: Optional[list[Optional[str]]] = None
        self._hypotheses: Optional[list[list[ColumnHypothesis]]] = None

    # --- state accessors ---

    @property
    def loaded(self) -> bool:
        return self._ciphertext is not None

    @property
    def ciphertext(self) -> str:
        return self._require_ciphertext()

    @property
    def candidates(self) -> list[LengthCandidate]:
        if self._candidates is None:
            raise PreconditionNotMet("Key length candidates not computed; run estimate_lengths first.")
        return list(self._candidates)

    @property
    def key_length(self) -> Optional[int]:
        return None if self._key is None else len(self._key)

    @property
    def key(self) -> list[Optional[str]]:
        if self._key is None:
            raise PreconditionNotMet("Key length not set.")
        return list(self._key)

    @property
    def hypotheses(self) -> list[list[ColumnHypothesis]]:
        if self._hypotheses is None:
            raise PreconditionNotMet("Columns not analyzed; run analyze_columns first.")
        return [list(row) for row in self._hypotheses]

    def _require_ciphertext(self) -> str:
        if self._ciphertext is None:
            raise PreconditionNotMet("Ciphertext not loaded.")
        return self._ciphertext

    # --- operations ---

    def load(self, ciphertext: str) -> None:
        """Load sanitized A-Z ciphertext and drop every derived result."""
        if not is_sanitized(ciphertext):
            raise InvalidArgument("Ciphertext must contain only uppercase letters A-Z; sanitize it first.")
        self._ciphertext = ciphertext
        self._reset()
        logger.debug("Loaded ciphertext of %d letters", len(ciphertext))

    def estimate_lengths(self, max_len: int = DEFAULT_MAX_LEN) -> list[LengthCandidate]:
        ct = self._require_ciphertext()
        if not ct:
            raise PreconditionNotMet("Loaded ciphertext is empty.")
        self._candidates = estimate_lengths(ct, max_len)
        return list(self._candidates)

    def top_candidates(self, n: int) -> list[LengthCandidate]:
        return self.candidates[: max(0, n)]

    def set_key_length(self, n: int) -> None:
        if n <= 0:
            raise InvalidArgument(f"Key length must be positive, got {n}.")
        self._key = [None] * n
        self._hypotheses = None
        logger.debug("Key length set to %d", n)

    def analyze_columns(self) -> list[list[ColumnHypothesis]]:
        ct = self._require_ciphertext()
        if self._key is None:
            raise PreconditionNotMet("Key length not set.")
        self._hypotheses = analyze_columns(ct, len(self._key))
        return self.hypotheses

    def set_key_letter(self, pos: int, letter: str) -> None:
        if self._key is None:
            raise PreconditionNotMet("Key length not set.")
        if not 0 <= pos < len(self._key):
            raise InvalidArgument(f"Key position {pos} out of range 0..{len(self._key) - 1}.")
        if not isinstance(letter, str) or not is_az(letter):
            raise InvalidArgument(f"Key letter must be a single letter A-Z, got {letter!r}.")
        self._key[pos] = letter
        logger.debug("Key[%d] = %s", pos, letter)

    def auto_fill_key(self) -> str:
        """Set every key slot to its column's best hypothesis; returns the key."""
        if self._hypotheses is None or self._key is None:
            raise PreconditionNotMet("Columns not analyzed; run analyze_columns first.")
        self._key = [row[0].shift for row in self._hypotheses]
        return "".join(self._key)

    def key_text(self, unset: str = "?") -> str:
        return "".join(unset if slot is None else slot for slot in self.key)

    def decrypt(self) -> str:
        ct = self._require_ciphertext()
        if self._key is None:
            raise PreconditionNotMet("Key length not set.")
        return decrypt(ct, self._key)

    def auto_crack(self, max_len: int = DEFAULT_MAX_LEN) -> CrackResult:
        """
        Fully automatic run: best IC length, best shift per column.
        A key that repeats a shorter pattern (a multiple of the true
        length won the IC test) is reduced before decrypting.
        """
        best = self.estimate_lengths(max_len)[0]
        self.set_key_length(best.length)
        self.analyze_columns()
        key = reduce_repeating_key(self.auto_fill_key())
        if len(key) != best.length:
            logger.debug("Reduced repeating key to %s", key)
            self.set_key_length(len(key))
            self.analyze_columns()
            self._key = list(key)
        plaintext = self.decrypt()
        return CrackResult(key_length=len(key), key=key, plaintext=plaintext, score=best.score)
