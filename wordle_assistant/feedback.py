#!/usr/bin/env python3
from collections import Counter
from enum import Enum
from typing import List

from wordle_assistant.errors import FeedbackLengthError, MalformedFeedback

WORD_LENGTH = 5

# Special responses typed in place of a feedback code
REJECTED = "ERROR"  # the game did not accept the guess as a word
SOLVED = "G" * WORD_LENGTH

# =========================
# Feedback codes
# =========================


class Judgment(Enum):
    """
    Per-position verdict for one letter of a guess:
    'G' = correct (right letter, right position)
    'Y' = present (letter in word, wrong position)
    '_' = absent (letter not in word)
    'R' = already accounted for by another occurrence of the same
          letter in the guess; carries no information of its own.
    """

    CORRECT = "G"
    PRESENT = "Y"
    ABSENT = "_"
    ALREADY_ACCOUNTED = "R"


_CODES = {j.value: j for j in Judgment}


def normalize_response(line: str) -> str:
    """Trim a raw input line down to the characters a code can use."""
    return line.strip()[:WORD_LENGTH]


def parse_feedback(code: str) -> List[Judgment]:
    if len(code) != WORD_LENGTH:
        raise FeedbackLengthError(code, WORD_LENGTH)
    judgments = []
    for i, c in enumerate(code):
        try:
            judgments.append(_CODES[c])
        except KeyError:
            raise MalformedFeedback(code, position=i, char=c) from None
    return judgments


def feedback_to_string(feedback) -> str:
    return "".join(j.value for j in feedback)


def score_guess(guess: str, secret: str) -> str:
    """
    Return the code a player would type for `guess` against `secret`.

    Repeated letters beyond the number the secret holds are marked 'R'
    rather than '_', since the letter itself is in the word.
    """
    result = [Judgment.ABSENT.value] * len(guess)
    unused = Counter()
    # first pass: greens
    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            result[i] = Judgment.CORRECT.value
        else:
            unused[s] += 1
    # second pass: yellows, then repeats once a letter is used up
    for i, g in enumerate(guess):
        if result[i] == Judgment.CORRECT.value or g not in secret:
            continue
        if unused[g] > 0:
            result[i] = Judgment.PRESENT.value
            unused[g] -= 1
        else:
            result[i] = Judgment.ALREADY_ACCOUNTED.value
    return "".join(result)
