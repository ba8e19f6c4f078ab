"""Connect Four against a minimax / alpha-beta machine player."""

__version__ = "0.1.0"
