"""
Guess Evaluator

Pure functions that classify the letters of a guess against the target
word, and the keys of the on-screen keyboard against the guesses made so far.
"""

import string
from typing import Dict, Iterable, List, Optional

from ..config.game_settings import SUBMIT_KEY, BACKSPACE_KEY
from ..models.game import LetterStatus


def evaluate_guess(guess: str, target: str) -> List[LetterStatus]:
    """
    Implements the Wordle letter evaluation algorithm.

    Exact matches are marked first and consume their target letter; the
    remaining letters are then scanned left to right and marked CLOSE only
    while an unconsumed occurrence of that letter is left in the target.

    Args:
        guess: The submitted word
        target: The word being guessed, same length as `guess`

    Returns:
        List of statuses, one per position

    Raises:
        ValueError: If the two words differ in length
    """
    guess = guess.upper()
    target = target.upper()
    if len(guess) != len(target):
        raise ValueError(f"Guess '{guess}' and target differ in length")

    result: List[Optional[LetterStatus]] = [None] * len(target)
    remaining: Dict[str, int] = {}

    # First pass: exact position matches
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            result[i] = LetterStatus.CORRECT
        else:
            remaining[t] = remaining.get(t, 0) + 1

    # Second pass: misplaced letters, capped by what is left in the target
    for i, g in enumerate(guess):
        if result[i] is not None:
            continue
        if remaining.get(g, 0) > 0:
            result[i] = LetterStatus.CLOSE
            remaining[g] -= 1
        else:
            result[i] = LetterStatus.INCORRECT

    return [status for status in result if status is not None]


def letter_status(guess: str, target: str, position: int) -> LetterStatus:
    """Status of a single board cell."""
    return evaluate_guess(guess, target)[position]


def merge_status(current: LetterStatus, new: LetterStatus) -> LetterStatus:
    """Keeps the higher of two statuses, so a key can only move up."""
    return new if new.rank > current.rank else current


def key_status(key: str, target: str, guessed_words: Iterable[str]) -> LetterStatus:
    """
    Status of one keyboard key given every completed guess of the game.

    A key is CORRECT as soon as any guess placed it where the target has it,
    CLOSE if it was typed and the target contains it elsewhere, INCORRECT if
    it was typed and the target lacks it. Untyped keys, and the submit and
    backspace actions, stay UNUSED.
    """
    key = key.upper()
    target = target.upper()
    if key in (SUBMIT_KEY, BACKSPACE_KEY) or len(key) != 1:
        return LetterStatus.UNUSED

    indices = [
        idx
        for word in guessed_words
        for idx, letter in enumerate(word.upper())
        if letter == key
    ]
    if not indices:
        return LetterStatus.UNUSED
    if key not in target:
        return LetterStatus.INCORRECT
    if any(idx < len(target) and target[idx] == key for idx in indices):
        return LetterStatus.CORRECT
    return LetterStatus.CLOSE


def keyboard_status(target: str, guessed_words: Iterable[str]) -> Dict[str, LetterStatus]:
    """
    Status of every letter key, folded guess by guess over the cell results.
    """
    statuses = {letter: LetterStatus.UNUSED for letter in string.ascii_uppercase}
    for word in guessed_words:
        for letter, status in zip(word.upper(), evaluate_guess(word, target)):
            statuses[letter] = merge_status(statuses.get(letter, LetterStatus.UNUSED), status)
    return statuses
