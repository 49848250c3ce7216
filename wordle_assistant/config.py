#!/usr/bin/env python3
import json

from wordle_assistant.errors import ConfigError

# =========================
# Default settings
# =========================

CONFIG = {
    # Randomness / reproducibility (None = fresh system seed every run)
    "random_seed": None,

    # Dictionary sources
    "word_list_path": "wordle_list.txt",
    # GitHub repo: ed-fish/wordle-vocab, vocab.json
    "vocab_url": "https://raw.githubusercontent.com/ed-fish/wordle-vocab/main/vocab.json",
    "vocab_timeout": 10,

    # Opener heuristic: distinct vowels a word needs to be an opener
    "min_vowels": 4,

    # Presentation: list every candidate once this few remain
    "display_limit": 10,

    # Demo mode: rounds allowed before giving up
    "demo_max_guesses": 10,

    # Logging
    "debug": False,
}


def load_config(path=None):
    """
    Return a copy of the default CONFIG with overrides from a JSON file.

    A missing file (or no path at all) falls back to the defaults.
    Keys that are not known settings are ignored. An unreadable file or
    one that is not a JSON object raises ConfigError.
    """
    config = dict(CONFIG)
    if path is None:
        return config
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return config
    except (OSError, ValueError) as e:
        raise ConfigError(f"Could not read settings file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Settings file {path} must hold a JSON object.")

    for key, value in data.items():
        if key in config:
            config[key] = value
        elif config.get("debug"):
            print(f"[config] ignoring unknown setting {key!r}")
    return config
