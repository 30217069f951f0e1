"""Error types.

User-facing failures derive from CartoonizeError and are reported by the CLI
as a one-line message. InternalError marks a programming defect and is kept
outside that hierarchy so it is never mistaken for bad input.
"""

from pathlib import Path


class CartoonizeError(Exception):
    """Base class for expected, user-facing failures."""


class InputError(CartoonizeError):
    def __init__(self, path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to open image {self.path}: {reason}")


class OutputError(CartoonizeError):
    def __init__(self, path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to save image {self.path}: {reason}")


class ConfigError(CartoonizeError):
    def __init__(self, option: str, reason: str):
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid value for {option}: {reason}")


class InternalError(RuntimeError):
    """An invariant was broken; this is a bug, not a user error."""
