"""Exceptions raised by the phonecode pipeline."""

from pathlib import Path
from typing import Optional


class PhoneCodeError(Exception):
    """Base class for all phonecode errors."""


class InputUnavailableError(PhoneCodeError):
    """An input file could not be opened or read."""

    def __init__(self, path: Path, reason: Optional[str] = None):
        self.path = Path(path)
        self.reason = reason
        message = f"Cannot read input file: {self.path}"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class OutputWriteError(PhoneCodeError):
    """The output sink refused a write."""
