from __future__ import annotations

import pytest

from vigcrack.core.features import average_ic, column_ic, estimate_lengths
from vigcrack.core.utils import letter_counts
from vigcrack.errors import InvalidArgument


@pytest.mark.parametrize("n", [2, 3, 17, 500])
def test_column_ic_of_repeated_letter_is_26(n):
    assert column_ic("Q" * n) == 26.0


@pytest.mark.parametrize("column", ["", "A"])
def test_column_ic_short_column_is_zero(column):
    assert column_ic(column) == 0.0


def test_column_ic_all_distinct_is_zero():
    assert column_ic("ABCDEFGHIJKLMNOPQRSTUVWXYZ") == 0.0


def test_column_ic_formula():
    # counts A=2, B=2, C=1 -> 26 * (2 + 2) / (5 * 4)
    assert column_ic("AABBC") == pytest.approx(26 * 4 / 20)


def test_average_ic_counts_short_columns_as_zero():
    # columns "AA" and "B": (26 + 0) / 2
    assert average_ic("ABA", 2) == pytest.approx(13.0)


def test_average_ic_rejects_non_positive_length():
    with pytest.raises(InvalidArgument):
        average_ic("ABC", 0)


def test_lemon_scenario_ranks_five_first(lemon_ciphertext):
    candidates = estimate_lengths(lemon_ciphertext, max_len=10)

    assert [c.length for c in candidates][0] == 5
    # only column "FF" coincides: 26 / 5
    assert candidates[0].score == pytest.approx(5.2)
    assert len(candidates) == 10


def test_one_candidate_per_length(lemon_ciphertext):
    candidates = estimate_lengths(lemon_ciphertext, max_len=10)
    assert sorted(c.length for c in candidates) == list(range(1, 11))


def test_max_len_clamped_to_ciphertext_length():
    candidates = estimate_lengths("ABCAB", max_len=50)
    assert sorted(c.length for c in candidates) == [1, 2, 3, 4, 5]


def test_sorted_by_score_descending(make_ciphertext):
    _, ct = make_ciphertext("LEMON")
    scores = [c.score for c in estimate_lengths(ct, max_len=12)]
    assert scores == sorted(scores, reverse=True)


def test_ties_prefer_shorter_length():
    # every column is all-distinct, so every score is 0
    candidates = estimate_lengths("ABCDEFG", max_len=7)
    assert [c.length for c in candidates] == [1, 2, 3, 4, 5, 6, 7]
    assert all(c.score == 0.0 for c in candidates)


def test_empty_ciphertext_gives_no_candidates():
    assert estimate_lengths("", max_len=10) == []


@pytest.mark.parametrize("max_len", [0, -4])
def test_non_positive_max_len_rejected(max_len):
    with pytest.raises(InvalidArgument):
        estimate_lengths("ABC", max_len=max_len)


@pytest.mark.parametrize("key", ["LEMON", "CIPHER", "VIGENERE", "KEY"])
def test_true_period_wins_on_long_text(make_ciphertext, key):
    _, ct = make_ciphertext(key)
    assert len(ct) >= 2000

    best = estimate_lengths(ct, max_len=12)[0]

    assert best.length % len(key) == 0
    # English columns sit well above the random baseline of 1.0
    assert best.score > 1.5


@pytest.mark.parametrize("text", ["0000", "@@", "hello", "AB1"])
def test_non_letters_are_not_counted_as_letters(text):
    with pytest.raises(InvalidArgument):
        letter_counts(text)
    with pytest.raises(InvalidArgument):
        column_ic(text)
    with pytest.raises(InvalidArgument):
        estimate_lengths(text, max_len=2)


def test_letter_counts():
    counts = letter_counts("AZZ")
    assert counts[0] == 1
    assert counts[25] == 2
    assert sum(counts) == 3
