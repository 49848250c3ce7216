#!/usr/bin/env python3

# =========================
# Exception hierarchy
# =========================


class WordleAssistantError(Exception):
    """Base class for every error raised by the assistant."""


class MalformedFeedback(WordleAssistantError, ValueError):
    """A feedback code contains a character outside ``_ Y G R``."""

    def __init__(self, code, position=None, char=None, message=None):
        self.code = code
        self.position = position
        self.char = char
        if message is None and position is None:
            message = f"Invalid feedback {code!r}."
        elif message is None:
            message = (
                f"Invalid character {char!r} at position {position + 1} "
                f"of feedback {code!r}."
            )
        super().__init__(message)


class FeedbackLengthError(MalformedFeedback):
    def __init__(self, code, expected):
        self.expected = expected
        super().__init__(
            code,
            message=f"Feedback {code!r} must be exactly {expected} characters.",
        )


class EmptyDictionary(WordleAssistantError):
    """A word source produced no words at all."""


class DictionaryLoadError(WordleAssistantError):
    """The dictionary resource could not be read or downloaded."""


class DictionaryFormatError(DictionaryLoadError):
    def __init__(self, source, line_no, line):
        self.source = source
        self.line_no = line_no
        self.line = line
        super().__init__(
            f"{source}:{line_no}: {line!r} is not a five-letter word."
        )


class ConfigError(WordleAssistantError):
    """A settings file exists but cannot be used."""
