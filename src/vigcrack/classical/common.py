from __future__ import annotations

A_ORD = ord("A")
Z_ORD = ord("Z")


def is_az(ch: str) -> bool:
    """True for a single uppercase letter A-Z."""
    if len(ch) != 1:
        return False
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def letter_rank(ch: str) -> int:
    """A -> 0 ... Z -> 25. Caller guarantees is_az(ch)."""
    return ord(ch) - A_ORD


def rank_letter(rank: int) -> str:
    return chr(A_ORD + rank % 26)


def norm_key_alpha(key: str) -> str:
    """Uppercase and keep only A-Z."""
    return "".join(ch for ch in key.upper() if "A" <= ch <= "Z")
