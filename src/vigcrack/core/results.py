from __future__ import annotations

from dataclasses import dataclass, field

from vigcrack.classical.common import letter_rank


@dataclass(frozen=True, order=True)
class LengthCandidate:
    # sort_index comes first so dataclass ordering uses it automatically
    sort_index: tuple[float, int] = field(init=False, repr=False)

    length: int
    # average column IC, ~1.0 for random text, ~1.7 for English columns
    score: float

    def __post_init__(self) -> None:
        # Higher score first; shorter key wins a tie.
        object.__setattr__(self, "sort_index", (-self.score, self.length))


@dataclass(frozen=True, order=True)
class ColumnHypothesis:
    sort_index: tuple[float, str] = field(init=False, repr=False)

    shift: str
    # Lower is better
    deviation: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "sort_index", (self.deviation, self.shift))

    @property
    def offset(self) -> int:
        return letter_rank(self.shift)


@dataclass(frozen=True)
class CrackResult:
    key_length: int
    key: str
    plaintext: str
    score: float = 0.0
