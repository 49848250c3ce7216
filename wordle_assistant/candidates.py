#!/usr/bin/env python3
from typing import List, Optional, Sequence

from wordle_assistant.feedback import Judgment

VOWELS = "aeiou"

# =========================
# Candidate pruning
# =========================


def prune_candidates(candidates, guess, feedback) -> List[str]:
    """
    Keep only candidates consistent with one round of feedback.

    Each position filters the survivors of the previous one:
      CORRECT           -> letter in word and at this position
      PRESENT           -> letter in word but not at this position
      ABSENT            -> letter nowhere in word
      ALREADY_ACCOUNTED -> no filter
    The input list is left untouched; the result keeps its order.
    """
    pruned = list(candidates)
    for i, (c, r) in enumerate(zip(guess, feedback)):
        if r is Judgment.CORRECT:
            pruned = [w for w in pruned if c in w]
            pruned = [w for w in pruned if w[i] == c]
        elif r is Judgment.PRESENT:
            pruned = [w for w in pruned if c in w]
            pruned = [w for w in pruned if w[i] != c]
        elif r is Judgment.ABSENT:
            pruned = [w for w in pruned if c not in w]
    return pruned


def remove_word(candidates, word) -> List[str]:
    """Drop a rejected guess (every copy of it) from the candidates."""
    return [w for w in candidates if w != word]


# =========================
# Opener heuristic
# =========================


def count_vowels(word: str) -> int:
    return sum(1 for v in VOWELS if v in word)


def opener_candidates(words: Sequence[str], min_vowels: int = 4) -> Optional[List[str]]:
    """
    Words with many distinct vowels ("audio" has four) make strong first
    guesses. Returns None for an empty word list, and a possibly empty
    list otherwise.
    """
    if len(words) == 0:
        return None
    return [w for w in words if count_vowels(w) >= min_vowels]
