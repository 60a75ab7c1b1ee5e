from __future__ import annotations

import random

import pytest

from vigcrack.classical.common import letter_rank, rank_letter
from vigcrack.classical.vigenere import encrypt
from vigcrack.core.scoring import ENGLISH_FREQ


def english_column(rng: random.Random, scale: int = 1000) -> str:
    """Letters in (rounded) English proportions, shuffled."""
    letters = [rank_letter(i) for i, f in enumerate(ENGLISH_FREQ) for _ in range(round(f * scale))]
    rng.shuffle(letters)
    return "".join(letters)


def shift_text(text: str, shift: int) -> str:
    return "".join(rank_letter(letter_rank(ch) + shift) for ch in text)

def english_like_plaintext(key_len: int, seed: int = 7, scale: int = 1000) -> str:
    """
    Plaintext whose every column (for period key_len) has the English
    monogram distribution exactly, in a different shuffled order.
    """
    rng = random.Random(seed)
    cols = [english_column(rng, scale) for _ in range(key_len)]
    return "".join(cols[j][i] for i in range(len(cols[0])) for j in range(key_len))


@pytest.fixture
def make_ciphertext():
    def _make(key: str, seed: int = 7) -> tuple[str, str]:
        plain = english_like_plaintext(len(key), seed=seed)
        return plain, encrypt(plain, key)

    return _make


@pytest.fixture
def lemon_ciphertext() -> str:
    return encrypt("ATTACKATDAWN", "LEMON")
