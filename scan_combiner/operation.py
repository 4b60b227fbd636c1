"""Combine a front pages PDF and a reversed back pages PDF into one document.

A :class:`CombineOperation` runs once. It opens both inputs and the output,
streams the pages in the order produced by
:class:`~scan_combiner.sequence.InterleavedPageSequence`, and advances its
:class:`~scan_combiner.progress.Progress` after every page. The progress
object is how other threads watch the run and ask it to stop.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from pathlib import Path
from typing import Optional

from .backends import PypdfBackend
from .backends.base import BackendDocument, BackendSink, PDFBackend
from .exceptions import CreateFailedError, OpenFailedError, ScanCombinerException
from .progress import Progress, ProgressCallback
from .sequence import InterleavedPageSequence
from .types import CombineResult, OperationState
from .utils import PathLike, ensure_path, same_file

LOGGER = logging.getLogger("scancombine.operation")


class CombineOperation:
    """Combine the pages of two scanned PDFs into a single new PDF."""

    def __init__(
        self,
        front_pages_path: PathLike,
        reversed_back_pages_path: PathLike,
        output_path: PathLike,
        *,
        backend: Optional[PDFBackend] = None,
        progress: Optional[Progress] = None,
        copy_metadata: bool = True,
    ) -> None:
        self.front_pages_path = ensure_path(front_pages_path)
        self.reversed_back_pages_path = ensure_path(reversed_back_pages_path)
        self.output_path = ensure_path(output_path)
        self.backend: PDFBackend = backend or PypdfBackend()
        self.progress = progress or Progress()
        self.copy_metadata = copy_metadata

        self._state = OperationState.IDLE
        self._state_lock = threading.Lock()
        self._error: Optional[Exception] = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------
    @property
    def state(self) -> OperationState:
        return self._state

    @property
    def error(self) -> Optional[Exception]:
        """The error recorded by a failed run, otherwise ``None``."""
        return self._error

    @property
    def is_finished(self) -> bool:
        return self._state.is_terminal

    def result(self) -> CombineResult:
        return CombineResult(
            state=self._state,
            output_path=self.output_path,
            pages_written=self.progress.completed_unit_count,
            total_pages=self.progress.total_unit_count,
            error=self._error,
        )

    def cancel(self) -> None:
        """Ask the operation to stop; honored before the next page is written."""
        self.progress.cancel()

    def _finish(self, state: OperationState, error: Optional[Exception] = None) -> None:
        self._error = error
        self._state = state

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------
    def start(self) -> None:
        with self._state_lock:
            if self._state is not OperationState.IDLE:
                return
            if self.progress.is_cancelled:
                LOGGER.info("Combine canceled before it started")
                self._finish(OperationState.CANCELED)
                return
            self._state = OperationState.RUNNING

        try:
            front = self.backend.load(self.front_pages_path, label="front")
        except OpenFailedError as exc:
            LOGGER.error("Could not open front pages PDF %s: %s", self.front_pages_path, exc)
            self._finish(OperationState.FAILED, exc)
            return

        try:
            back = self.backend.load(self.reversed_back_pages_path, label="back")
        except OpenFailedError as exc:
            front.close()
            LOGGER.error(
                "Could not open reversed back pages PDF %s: %s", self.reversed_back_pages_path, exc
            )
            self._finish(OperationState.FAILED, exc)
            return

        try:
            for source in (self.front_pages_path, self.reversed_back_pages_path):
                if same_file(self.output_path, source):
                    raise CreateFailedError(self.output_path, reason="Output would overwrite an input PDF.")
            sink = self.backend.create_sink(self.output_path)
        except CreateFailedError as exc:
            front.close()
            back.close()
            LOGGER.error("Could not create output PDF %s: %s", self.output_path, exc)
            self._finish(OperationState.FAILED, exc)
            return

        try:
            state = self._combine(front, back, sink)
        except Exception as exc:
            LOGGER.error("Combining into %s failed: %s", self.output_path, exc)
            sink.discard()
            self._finish(OperationState.FAILED, exc)
            raise
        finally:
            front.close()
            back.close()

        self._finish(state)

    def _combine(self, front: BackendDocument, back: BackendDocument, sink: BackendSink) -> OperationState:
        pages = InterleavedPageSequence(front, back)
        self.progress.total_unit_count = pages.total_pages
        LOGGER.info(
            "Combining %d front and %d back page(s) into %s",
            front.page_count,
            back.page_count,
            self.output_path,
        )

        for handle in pages:
            if self.progress.is_cancelled:
                break
            sink.begin_page(handle.media_box)
            sink.draw_page(handle)
            sink.end_page()
            LOGGER.debug("Wrote %s", handle)
            self.progress.advance()
        else:
            if self.copy_metadata:
                sink.add_metadata(front.metadata)
            sink.close()
            LOGGER.info("Combined %d page(s) into %s", sink.pages_written, self.output_path)
            return OperationState.SUCCEEDED

        sink.discard()
        LOGGER.warning(
            "Combine canceled after %d of %d page(s); discarded %s",
            self.progress.completed_unit_count,
            self.progress.total_unit_count,
            self.output_path,
        )
        return OperationState.CANCELED

    def start_in_background(self, executor: Optional[Executor] = None) -> "Future[CombineResult]":
        """Run :meth:`start` on a worker thread and return a future for the result."""

        def _run() -> CombineResult:
            self.start()
            return self.result()

        if executor is not None:
            return executor.submit(_run)

        own_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="scancombine")
        try:
            return own_executor.submit(_run)
        finally:
            own_executor.shutdown(wait=False)


def combine_scans(
    front_pages_path: PathLike,
    reversed_back_pages_path: PathLike,
    output_path: PathLike,
    *,
    progress_callback: Optional[ProgressCallback] = None,
    progress: Optional[Progress] = None,
    backend: Optional[PDFBackend] = None,
    copy_metadata: bool = True,
) -> CombineResult:
    """Combine two scans synchronously.

    Args:
        front_pages_path: PDF holding the front sides in order.
        reversed_back_pages_path: PDF holding the back sides in reverse order.
        output_path: Where to write the combined PDF.
        progress_callback: Called with ``(completed, total)`` after each page.
        progress: Shared progress object, e.g. to cancel from another thread.

    Returns:
        The result of a run that succeeded or was canceled.

    Raises:
        OpenFailedError: If an input could not be opened.
        CreateFailedError: If the output could not be created.
    """

    shared_progress = progress or Progress()
    if progress_callback is not None:
        shared_progress.add_observer(progress_callback)

    operation = CombineOperation(
        front_pages_path,
        reversed_back_pages_path,
        output_path,
        backend=backend,
        progress=shared_progress,
        copy_metadata=copy_metadata,
    )
    try:
        operation.start()
    finally:
        if progress_callback is not None:
            shared_progress.remove_observer(progress_callback)

    if isinstance(operation.error, ScanCombinerException):
        raise operation.error
    return operation.result()


__all__ = ["CombineOperation", "combine_scans"]
