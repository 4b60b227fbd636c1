"""pypdf backend implementation for Magazine Scan Combiner."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, Dict, Optional

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PdfReadError
from pypdf.generic import RectangleObject

from ..exceptions import CreateFailedError, OpenFailedError
from ..types import PageHandle, PageRect
from .base import BackendDocument, PDFBackend

LOGGER = logging.getLogger("scancombine.backend")

COPIED_METADATA_KEYS = ("/Title", "/Author", "/Subject", "/Creator")
PRODUCER = "Magazine Scan Combiner"


@dataclass
class PypdfDocument(BackendDocument):
    reader: Optional[PdfReader] = None
    stream: Optional[BinaryIO] = None

    def get_page(self, number: int) -> PageHandle:
        if self.closed or self.reader is None:
            raise ValueError(f"{self.path} has already been closed")
        if number < 1 or number > self.page_count:
            raise IndexError(f"page {number} is out of range for {self.path} ({self.page_count} pages)")

        page = self.reader.pages[number - 1]
        box = page.mediabox
        media_box = PageRect(float(box.left), float(box.bottom), float(box.right), float(box.top))
        return PageHandle(document_label=self.label, number=number, media_box=media_box, page=page)

    @property
    def metadata(self) -> Dict[str, str]:
        info = self.reader.metadata if self.reader is not None else None
        if not info:
            return {}
        return {key: str(info[key]) for key in COPIED_METADATA_KEYS if info.get(key)}

    def close(self) -> None:
        if self.closed:
            return
        if self.stream is not None:
            self.stream.close()
        self.reader = None
        self.closed = True
        LOGGER.debug("Released %s PDF %s", self.label, self.path)


@dataclass
class PypdfSink:
    """Output sink that accumulates pages in a :class:`PdfWriter`.

    The destination file is created up front so that an unwritable location is
    detected before any page is processed; the PDF bytes only land on disk when
    :meth:`close` is called.
    """

    path: Path
    stream: BinaryIO
    writer: PdfWriter = field(default_factory=PdfWriter)
    _current: Optional[PageObject] = field(default=None, init=False, repr=False)
    _pages_written: int = field(default=0, init=False)
    _finished: bool = field(default=False, init=False)

    @property
    def pages_written(self) -> int:
        return self._pages_written

    def begin_page(self, media_box: PageRect) -> None:
        if self._finished:
            raise ValueError(f"output {self.path} is already finished")
        if self._current is not None:
            raise ValueError("begin_page called before the previous page was ended")

        page = self.writer.add_blank_page(width=media_box.width, height=media_box.height)
        page.mediabox = RectangleObject(media_box.as_list())
        self._current = page

    def draw_page(self, handle: PageHandle) -> None:
        if self._current is None:
            raise ValueError("draw_page called outside of begin_page/end_page")

        source = handle.page
        self._current.merge_page(source)
        if source.rotation:
            self._current.rotation = source.rotation

    def end_page(self) -> None:
        if self._current is None:
            raise ValueError("end_page called without a matching begin_page")
        self._current = None
        self._pages_written += 1

    def add_metadata(self, metadata: Dict[str, str]) -> None:
        info = dict(metadata)
        info.setdefault("/Producer", PRODUCER)
        self.writer.add_metadata(info)

    def close(self) -> None:
        if self._finished:
            return
        try:
            self.writer.write(self.stream)
        finally:
            self.stream.close()
        self._finished = True
        LOGGER.debug("Wrote %d page(s) to %s", self._pages_written, self.path)

    def discard(self) -> None:
        if self._finished:
            return
        self._finished = True
        self._current = None
        self.stream.close()
        try:
            self.path.unlink()
        except OSError as exc:
            LOGGER.debug("Could not remove partial output %s: %s", self.path, exc)


class PypdfBackend(PDFBackend):
    """Backend implementation that uses `pypdf` under the hood."""

    def load(self, pdf_path: Path, label: str = "document") -> PypdfDocument:
        path = Path(pdf_path)
        if not path.is_file():
            raise OpenFailedError(path, reason="File not found.")

        try:
            stream = path.open("rb")
        except OSError as exc:
            raise OpenFailedError(path, reason=str(exc)) from exc

        try:
            reader = PdfReader(stream)
            if reader.is_encrypted:
                raise OpenFailedError(path, reason="PDF is encrypted.")
            page_count = len(reader.pages)
        except OpenFailedError:
            stream.close()
            raise
        except PdfReadError as exc:
            stream.close()
            raise OpenFailedError(path, reason=f"Corrupted or invalid PDF: {exc}") from exc
        except Exception as exc:
            stream.close()
            raise OpenFailedError(path, reason=f"Unexpected error reading PDF: {exc}") from exc

        LOGGER.debug("Opened %s PDF %s (%d pages)", label, path, page_count)
        return PypdfDocument(path=path, page_count=page_count, label=label, reader=reader, stream=stream)

    def create_sink(self, destination: Path) -> PypdfSink:
        path = Path(destination)
        if path.is_dir():
            raise CreateFailedError(path, reason="Path is a directory.")
        try:
            stream = path.open("wb")
        except OSError as exc:
            raise CreateFailedError(path, reason=str(exc)) from exc

        LOGGER.debug("Created output PDF %s", path)
        return PypdfSink(path=path, stream=stream)
