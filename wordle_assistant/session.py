#!/usr/bin/env python3
from enum import Enum
from typing import List, Optional, Tuple

from wordle_assistant.candidates import opener_candidates, prune_candidates, remove_word
from wordle_assistant.chooser import Chooser, RandomChooser
from wordle_assistant.config import CONFIG
from wordle_assistant.errors import MalformedFeedback
from wordle_assistant.feedback import (
    REJECTED,
    SOLVED,
    feedback_to_string,
    normalize_response,
    parse_feedback,
)

# =========================
# Session state machine
# =========================


class SessionState(Enum):
    START = "start"
    AWAITING_FEEDBACK = "awaiting_feedback"
    PRUNING = "pruning"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


TERMINAL_STATES = (SessionState.SOLVED, SessionState.EXHAUSTED)


class Session:
    """
    One game: owns the candidate list and the current guess.

    The session never reads input or exits the process; callers feed it one
    response per round through `submit` and watch `state` for SOLVED or
    EXHAUSTED.
    """

    def __init__(
        self,
        words,
        chooser: Optional[Chooser] = None,
        min_vowels: Optional[int] = None,
        verbose: bool = False,
    ) -> None:
        self.dictionary = list(words)
        self.candidates: List[str] = list(self.dictionary)
        self.chooser = chooser if chooser is not None else RandomChooser()
        self.min_vowels = min_vowels if min_vowels is not None else CONFIG["min_vowels"]
        self.verbose = verbose
        self.state = SessionState.START
        self.guess: Optional[str] = None
        self.rounds = 0
        self.history: List[Tuple[str, str]] = []

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def start(self) -> Optional[str]:
        if self.state is not SessionState.START:
            raise RuntimeError(f"Session already started (state={self.state.value}).")
        if self.verbose:
            print(f"[session] chooser={self.chooser} words={len(self.dictionary)}")
        openers = opener_candidates(self.dictionary, self.min_vowels)
        if not openers:
            if self.verbose:
                print("[session] No opener met the vowel threshold; using the full list.")
            openers = self.dictionary
        elif self.verbose:
            print(f"[session] {len(openers)} opener candidates.")
        return self._next_guess(openers)

    def submit(self, response: str) -> SessionState:
        """
        Apply one raw feedback line to the session.

        Raises MalformedFeedback for an unreadable code; the session is
        left exactly as it was so the caller can ask again.
        """
        if self.state is not SessionState.AWAITING_FEEDBACK:
            raise RuntimeError(f"Session is not awaiting feedback (state={self.state.value}).")

        response = normalize_response(response)
        if response == SOLVED:
            self.history.append((self.guess, response))
            self.rounds += 1
            self.state = SessionState.SOLVED
            if self.verbose:
                print(f"[session] Solved with {self.guess} after {self.rounds} rounds.")
            return self.state

        if response == REJECTED:
            if self.verbose:
                print(f"[session] {self.guess} rejected; removing it.")
            self.candidates = remove_word(self.candidates, self.guess)
            self._next_guess(self.candidates)
            return self.state

        feedback = parse_feedback(response)
        self.state = SessionState.PRUNING
        before = len(self.candidates)
        self.candidates = prune_candidates(self.candidates, self.guess, feedback)
        self.history.append((self.guess, feedback_to_string(feedback)))
        self.rounds += 1
        if self.verbose:
            print(
                f"[session] {self.guess} + {feedback_to_string(feedback)}: "
                f"{before} -> {len(self.candidates)} candidates"
            )
        self._next_guess(self.candidates)
        return self.state

    def _next_guess(self, pool) -> Optional[str]:
        self.guess = self.chooser.choose(pool)
        if self.guess is None:
            self.state = SessionState.EXHAUSTED
            if self.verbose:
                print("[session] Word list exhausted.")
        else:
            self.state = SessionState.AWAITING_FEEDBACK
        return self.guess


# =========================
# Interactive driver
# =========================


def report_round(session: Session, write_line=print, display_limit=None) -> None:
    limit = display_limit if display_limit is not None else CONFIG["display_limit"]
    remaining = len(session.candidates)
    write_line(f"Possibilities: {remaining}")
    if remaining <= limit:
        write_line(str(session.candidates))
    else:
        write_line(f"Guess: {session.guess}.")


def run_session(session: Session, read_line, write_line=print, display_limit=None) -> SessionState:
    """
    Play `session` to the end against an external player.

    `read_line` returns the next response, or None once input runs out;
    in that case the session is left in its current state.
    """
    if session.state is SessionState.START:
        session.start()

    while not session.finished:
        report_round(session, write_line, display_limit)
        while True:
            line = read_line()
            if line is None:
                return session.state
            try:
                session.submit(line)
            except MalformedFeedback as e:
                write_line(f"Invalid feedback: {e} Try again.")
                continue
            break

    if session.state is SessionState.SOLVED:
        write_line("Quitting...")
    else:
        write_line("Word list exhausted. Quitting...")
    return session.state
