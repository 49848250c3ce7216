#!/usr/bin/env python3
import argparse
import sys

from wordle_assistant.chooser import RandomChooser
from wordle_assistant.config import load_config
from wordle_assistant.errors import ConfigError, DictionaryLoadError, EmptyDictionary
from wordle_assistant.feedback import score_guess
from wordle_assistant.session import Session, SessionState, run_session
from wordle_assistant.vocab import is_word, load_online_vocab, load_word_file, require_words

KEY = [
    "===== Key =====",
    "GGGGG => Complete",
    "__GR_ => If a letter is marked blank but already correct e.g. 'green'.",
    "__G__ => Letter 3 is correct.",
    "__Y__ => Letter 3 is a valid letter but in the wrong place.",
    "_____ => All letters incorrect.",
    "ERROR => Word suggestion invalid.",
]


def print_key(write_line=print):
    for line in KEY:
        write_line(line)


def read_stdin_line():
    line = sys.stdin.readline()
    if not line:
        return None
    return line


def load_words(config, online=False):
    if online:
        secret_words, _ = load_online_vocab(
            config["vocab_url"],
            config["vocab_timeout"],
            verbose=config["debug"],
        )
        return require_words(secret_words, "online vocabulary")
    return require_words(load_word_file(config["word_list_path"]), config["word_list_path"])


def demo_game(session: Session, secret: str, max_guesses: int, write_line=print):
    """Let the solver play itself against a known secret."""
    write_line("\n=== Demo game against a known secret ===")
    session.start()
    while not session.finished and session.rounds < max_guesses:
        fb = score_guess(session.guess, secret)
        write_line(f"Guess {session.rounds + 1}: {session.guess}  Feedback: {fb}")
        session.submit(fb)

    if session.state is SessionState.SOLVED:
        write_line(f"SOLVED in {session.rounds} guesses!")
    elif session.state is SessionState.EXHAUSTED:
        write_line("No candidates left - solver failed.")
    else:
        write_line(f"Failed to solve within {max_guesses} guesses.")
    write_line(f"Secret was: {secret}")
    return session.state


def build_parser():
    parser = argparse.ArgumentParser(
        description="Suggest guesses for a five-letter word game and prune the "
                    "word list from the feedback you type in."
    )
    parser.add_argument(
        "--words",
        type=str,
        default=None,
        help="Word list file, one five-letter word per line.",
    )
    parser.add_argument(
        "--online",
        action="store_true",
        help="Download the Wordle answer list instead of reading a file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random guess chooser.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="JSON file overriding the default settings.",
    )
    parser.add_argument(
        "--secret",
        type=str,
        default=None,
        help="Play automatically against this secret word.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print solver diagnostics.",
    )
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"Error: {e}")
        return 1
    if args.words is not None:
        config["word_list_path"] = args.words
    if args.seed is not None:
        config["random_seed"] = args.seed
    if args.verbose:
        config["debug"] = True

    if args.secret is not None and not is_word(args.secret):
        print(f"Error: secret {args.secret!r} is not a five-letter word.")
        return 2

    try:
        words = load_words(config, online=args.online)
    except EmptyDictionary as e:
        print(e)
        print("Word list exhausted. Quitting...")
        return 0
    except DictionaryLoadError as e:
        print(f"Error: {e}")
        return 1

    session = Session(
        words,
        chooser=RandomChooser(seed=config["random_seed"]),
        min_vowels=config["min_vowels"],
        verbose=config["debug"],
    )

    if args.secret is not None:
        demo_game(session, args.secret.lower(), config["demo_max_guesses"])
        return 0

    print_key()
    run_session(session, read_stdin_line, display_limit=config["display_limit"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
