from __future__ import annotations

from typing import Optional, Sequence

from vigcrack.classical.common import is_az, letter_rank, rank_letter
from vigcrack.errors import InvalidArgument, InvalidKey


def _key_shifts(key: Sequence[Optional[str]]) -> list[int]:
    if len(key) == 0:
        raise InvalidKey("Vigenère key must contain at least one letter.")
    shifts = []
    for pos, slot in enumerate(key):
        if slot is None or not is_az(slot):
            raise InvalidKey(f"Key slot {pos} is not a letter A-Z: {slot!r}")
        shifts.append(letter_rank(slot))
    return shifts


def _apply(text: str, shifts: list[int], sign: int) -> str:
    # Text is sanitized A-Z; the key index advances on every letter.
    n = len(shifts)
    out = []
    for i, ch in enumerate(text):
        if not is_az(ch):
            raise InvalidArgument(f"Expected sanitized A-Z text, found {ch!r} at {i}.")
        out.append(rank_letter(letter_rank(ch) + sign * shifts[i % n] + 26))
    return "".join(out)


def encrypt(plaintext: str, key: Sequence[Optional[str]]) -> str:
    return _apply(plaintext, _key_shifts(key), +1)


def decrypt(ciphertext: str, key: Sequence[Optional[str]]) -> str:
    """
    Decrypt sanitized A-Z ciphertext.

    key may be a string or a sequence of key slots; every slot must hold
    a letter A-Z, otherwise InvalidKey is raised and nothing is produced.
    """
    return _apply(ciphertext, _key_shifts(key), -1)


def reduce_repeating_key(key: str) -> str:
    """
    If a key is a perfect repetition of a shorter pattern, reduce it.
    Example: LEMONLEMON -> LEMON
    """
    for p in range(1, len(key) // 2 + 1):
        if len(key) % p != 0:
            continue
        base = key[:p]
        if base * (len(key) // p) == key:
            return base
    return key
