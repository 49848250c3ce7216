#!/usr/bin/env python3
import random
from typing import Optional, Sequence

# =========================
# Guess selection policies
# =========================


class Chooser:
    """Picks the next guess out of the current candidates."""

    name = "base"

    def choose(self, words: Sequence[str]) -> Optional[str]:
        raise NotImplementedError

    def __str__(self):
        return self.name


class RandomChooser(Chooser):
    """
    Uniform choice among the candidates.

    Pass either a ready `rng` or a `seed`; with neither, every run draws
    from a freshly seeded generator.
    """

    name = "random"

    def __init__(self, rng: Optional[random.Random] = None, seed=None):
        self.rng = rng if rng is not None else random.Random(seed)

    def choose(self, words):
        if not words:
            return None
        return words[self.rng.randrange(len(words))]


class FixedIndexChooser(Chooser):
    """Always takes the word at `index` (wrapping around short lists)."""

    name = "fixed"

    def __init__(self, index: int = 0):
        self.index = index

    def choose(self, words):
        if not words:
            return None
        return words[self.index % len(words)]
