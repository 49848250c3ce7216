"""Interactive candidate-pruning assistant for five-letter word games."""

__version__ = "0.1.0"
