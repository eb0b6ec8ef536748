"""
Testing letter and key classification.
"""

from collections import Counter
from itertools import product

import pytest

from wordle_game.models.game import LetterStatus
from wordle_game.services.evaluator import (
    evaluate_guess, letter_status, key_status, keyboard_status, merge_status
)

from .conftest import WORDS

C = LetterStatus.CORRECT
L = LetterStatus.CLOSE
I = LetterStatus.INCORRECT
U = LetterStatus.UNUSED


def test_misplaced_letters():
    # R, E, C are elsewhere in CRANE, A sits in place, T is absent
    assert evaluate_guess("REACT", "CRANE") == [L, L, C, L, I]


def test_exact_match():
    assert evaluate_guess("CRANE", "CRANE") == [C, C, C, C, C]


def test_repeated_letters_in_target_and_guess():
    # SPEED holds two Es, ERASE uses both as misplaced letters
    assert evaluate_guess("ERASE", "SPEED") == [L, I, I, L, L]


def test_extra_copies_beyond_target_count_are_incorrect():
    # CRANE has one E, consumed by the exact match at the end
    assert evaluate_guess("EERIE", "CRANE") == [I, I, L, I, C]


def test_close_marks_are_handed_out_left_to_right():
    # SPEED has two Es, so only the first two Es of EERIE are close
    assert evaluate_guess("EERIE", "SPEED") == [L, L, I, I, I]


def test_exact_match_consumes_before_close():
    # ABBEY has two Bs: one matched in place, one left for the misplaced B
    assert evaluate_guess("BBXBX", "ABBEY") == [L, C, I, I, I]


def test_case_insensitive():
    assert evaluate_guess("react", "Crane") == evaluate_guess("REACT", "CRANE")


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        evaluate_guess("CRAN", "CRANE")


def test_single_cell():
    assert letter_status("REACT", "CRANE", 4) == I
    assert letter_status("TRACE", "CRANE", 1) == C


@pytest.mark.parametrize("guess,target", list(product(WORDS, WORDS)))
def test_correct_and_close_respect_letter_counts(guess, target):
    statuses = evaluate_guess(guess, target)

    exact = sum(1 for g, t in zip(guess, target) if g == t)
    assert statuses.count(C) == exact

    target_counts = Counter(target)
    marked = Counter(g for g, s in zip(guess, statuses) if s in (C, L))
    for letter, count in marked.items():
        assert count <= target_counts[letter]


def test_key_unused_before_typing():
    assert key_status("Q", "CRANE", ["REACT"]) == U
    assert key_status("A", "CRANE", []) == U


def test_submit_and_backspace_keys_stay_unused():
    assert key_status("ENTER", "CRANE", ["CRANE"]) == U
    assert key_status("backspace", "CRANE", ["CRANE"]) == U


def test_key_statuses():
    guesses = ["REACT"]
    assert key_status("T", "CRANE", guesses) == I
    assert key_status("R", "CRANE", guesses) == L
    assert key_status("r", "CRANE", guesses) == L


def test_key_correct_when_any_guess_placed_it():
    assert key_status("R", "CRANE", ["REACT", "TRACE"]) == C


def test_key_never_downgrades_after_correct():
    guesses = ["TRACE"]
    assert key_status("R", "CRANE", guesses) == C
    guesses.append("REACT")
    assert key_status("R", "CRANE", guesses) == C


def test_key_status_is_pure():
    guesses = ["REACT", "STONE"]
    first = {k: key_status(k, "CRANE", guesses) for k in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
    second = {k: key_status(k, "CRANE", guesses) for k in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"}
    assert first == second


def test_keyboard_matches_single_key_queries():
    guesses = ["EERIE", "REACT", "STONE"]
    keyboard = keyboard_status("CRANE", guesses)
    assert len(keyboard) == 26
    for key, status in keyboard.items():
        assert status == key_status(key, "CRANE", guesses)


def test_keyboard_is_monotonic_as_guesses_accumulate():
    guesses = ["REACT", "TRACE", "STONE", "CRANE"]
    previous = keyboard_status("CRANE", [])
    for n in range(1, len(guesses) + 1):
        current = keyboard_status("CRANE", guesses[:n])
        for key in current:
            assert current[key].rank >= previous[key].rank
        previous = current


def test_merge_status_keeps_the_highest():
    assert merge_status(C, L) == C
    assert merge_status(L, C) == C
    assert merge_status(U, I) == I
    assert merge_status(I, U) == I
