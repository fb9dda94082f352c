"""stacktriage - find the method behind a stack trace line."""

__version__ = "0.1.0"
