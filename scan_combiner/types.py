"""
Type definitions and dataclasses for Magazine Scan Combiner.

This module defines data structures used throughout the library.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Optional


class OperationState(str, Enum):
    """Lifecycle of a :class:`~scan_combiner.operation.CombineOperation`."""

    IDLE = "idle"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CANCELED = "canceled"

    @property
    def is_terminal(self) -> bool:
        return self in (OperationState.SUCCEEDED, OperationState.FAILED, OperationState.CANCELED)


@dataclass(frozen=True)
class PageRect:
    """
    A page bounding rectangle in PDF user space units.

    Attributes:
        left: Lower-left x coordinate
        bottom: Lower-left y coordinate
        right: Upper-right x coordinate
        top: Upper-right y coordinate
    """
    left: float
    bottom: float
    right: float
    top: float

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.top - self.bottom

    def as_list(self) -> list[float]:
        return [self.left, self.bottom, self.right, self.top]


@dataclass(frozen=True)
class PageHandle:
    """
    Read-only reference to one page of an opened document.

    Attributes:
        document_label: Name of the side the page came from ("front" or "back")
        number: 1-based page number within its document
        media_box: The page's media box
        page: Backend-specific page object
    """
    document_label: str
    number: int
    media_box: PageRect
    page: Any

    def __str__(self) -> str:
        return f"{self.document_label} page {self.number}"


@dataclass
class CombineResult:
    """
    Result of a combine operation.

    Attributes:
        state: Terminal state the operation reached
        output_path: Path of the requested output PDF
        pages_written: Number of pages written before the run ended
        total_pages: Number of pages the output was expected to hold
        error: Error recorded if the operation failed
    """
    state: OperationState
    output_path: Path
    pages_written: int = 0
    total_pages: int = 0
    error: Optional[Exception] = None

    @property
    def success(self) -> bool:
        return self.state is OperationState.SUCCEEDED

    def __str__(self) -> str:
        """String representation of the result."""
        if self.error is not None:
            return f"CombineResult(state={self.state.value}, error='{self.error}')"
        return (
            f"CombineResult(state={self.state.value}, "
            f"pages={self.pages_written}/{self.total_pages})"
        )


__all__ = ["OperationState", "PageRect", "PageHandle", "CombineResult"]
