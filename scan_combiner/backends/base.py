"""Backend protocol for PDF reading and page-by-page writing."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Protocol

from ..types import PageHandle, PageRect


@dataclass
class BackendDocument:
    """Represents an opened input PDF with backend-specific helpers."""

    path: Path
    page_count: int
    label: str = "document"
    closed: bool = field(default=False, init=False)

    def get_page(self, number: int) -> PageHandle:
        """Return a handle for the 1-based page ``number``."""
        raise NotImplementedError

    @property
    def metadata(self) -> Dict[str, str]:
        return {}

    def close(self) -> None:
        self.closed = True


class BackendSink(Protocol):
    """A destination document assembled one page at a time."""

    path: Path

    @property
    def pages_written(self) -> int:
        """Number of pages committed with :meth:`end_page`."""

    def begin_page(self, media_box: PageRect) -> None:
        """Start a new output page sized to ``media_box``."""

    def draw_page(self, handle: PageHandle) -> None:
        """Render the source page into the current output page."""

    def end_page(self) -> None:
        """Commit the current output page."""

    def add_metadata(self, metadata: Dict[str, str]) -> None:
        """Set document information on the output."""

    def close(self) -> None:
        """Finalize and persist the output document."""

    def discard(self) -> None:
        """Abandon the output and remove whatever was written, best effort."""


class PDFBackend(Protocol):
    """Protocol defining backend operations for combining PDFs."""

    def load(self, pdf_path: Path, label: str = "document") -> BackendDocument:
        """Open a PDF file, raising ``OpenFailedError`` when that is impossible."""

    def create_sink(self, destination: Path) -> BackendSink:
        """Create an output sink, raising ``CreateFailedError`` when that is impossible."""
