"""
Custom exceptions for Magazine Scan Combiner.

Only two failure kinds are reported by a combine run: an input that cannot be
opened and an output that cannot be created. Both carry the offending path.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class ScanCombinerException(Exception):
    """Base exception for all scan combiner errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown scan combiner error occurred."


class _LocationError(ScanCombinerException):
    def __init__(self, location: Union[str, Path], message: str = "", *, reason: Optional[str] = None) -> None:
        self.location = Path(location)
        self.reason = reason
        super().__init__(message)


class OpenFailedError(_LocationError):
    """Raised when an input location cannot be opened as a PDF document."""

    @property
    def default_message(self) -> str:
        text = f"Could not open input PDF {self.location}."
        if self.reason:
            text = f"{text} {self.reason}"
        return text


class CreateFailedError(_LocationError):
    """Raised when the output PDF cannot be created at its location."""

    @property
    def default_message(self) -> str:
        text = f"Could not create output PDF {self.location}."
        if self.reason:
            text = f"{text} {self.reason}"
        return text


__all__ = ["ScanCombinerException", "OpenFailedError", "CreateFailedError"]
