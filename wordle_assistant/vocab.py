#!/usr/bin/env python3
import requests

from wordle_assistant.config import CONFIG
from wordle_assistant.errors import (
    DictionaryFormatError,
    DictionaryLoadError,
    EmptyDictionary,
)
from wordle_assistant.feedback import WORD_LENGTH

# =========================
# Local word list
# =========================


def is_word(text: str) -> bool:
    return (
        isinstance(text, str)
        and len(text) == WORD_LENGTH
        and text.isalpha()
        and text.isascii()
    )


def load_word_file(path):
    """
    Read a dictionary with one word per line.

    Blank lines are skipped and words are lower-cased. Any other line
    that is not a five-letter word makes the whole file invalid.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        raise DictionaryLoadError(f"Could not read word list {path}: {e}") from e

    words = []
    for line_no, line in enumerate(lines, start=1):
        word = line.strip().lower()
        if not word:
            continue
        if not is_word(word):
            raise DictionaryFormatError(path, line_no, line)
        words.append(word)
    return words


# =========================
# Online Wordle vocabulary
# =========================

# Contains a "vocab" object (~2k answer words) and an "other" object (~10k allowed guesses).


def load_online_vocab(url=None, timeout=None, verbose=False):
    """
    Download Wordle vocabulary from the online JSON.
    Returns (secret_words, allowed_guesses).
    """
    url = url or CONFIG["vocab_url"]
    timeout = timeout or CONFIG["vocab_timeout"]
    try:
        if verbose:
            print(f"[vocab] Downloading Wordle vocab from {url} ...")
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
        data = resp.json()

        vocab = data["vocab"]          # main answer list
        other = data.get("other", [])  # extra acceptable guesses
    except requests.RequestException as e:
        raise DictionaryLoadError(f"Failed to download word list from {url}: {e}") from e
    except (ValueError, KeyError, TypeError) as e:
        raise DictionaryLoadError(f"Unexpected vocab format at {url}: {e}") from e

    secret_words = [w.lower() for w in vocab if is_word(w)]
    # Allowed guesses = vocab + other (dedup, keep order)
    all_words = list(dict.fromkeys(secret_words + [w.lower() for w in other if is_word(w)]))

    if verbose:
        print(
            f"[vocab] Loaded {len(secret_words)} secret words and "
            f"{len(all_words)} allowed guesses from online source."
        )
    return secret_words, all_words


def require_words(words, source="word list"):
    if not words:
        raise EmptyDictionary(f"The {source} contains no words.")
    return words
