"""Page ordering for combined scans.

The pages of the two inputs are combined in a peculiar way. The front pages PDF
holds sheets *P1 .. Pm* in order, but the back pages PDF was scanned after
flipping the stack, so its pages arrive reversed. The output takes the front
pages forward and the back pages backward, alternating between the two:

    P1, Qn, P2, Qn-1, ..., Pm, Q1

When one side runs out, the rest of the output comes from the other side.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterator, Optional

from .backends.base import BackendDocument
from .types import PageHandle


class PageOrder(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


def page_index_sequence(page_count: int, order: PageOrder = PageOrder.ASCENDING) -> Iterator[int]:
    """Yield the 1-based page numbers to visit for a document of ``page_count`` pages.

    ``ASCENDING`` yields ``1..page_count`` and ``DESCENDING`` yields
    ``page_count..1``. The returned generator cannot be restarted.
    """

    if page_count < 0:
        raise ValueError(f"page_count must be >= 0, got {page_count}")

    if order is PageOrder.DESCENDING:
        numbers = range(page_count, 0, -1)
    else:
        numbers = range(1, page_count + 1)

    for number in numbers:
        yield number


class DocumentPageSequence:
    """Pages of one document, visited in the order given by a page number iterator."""

    def __init__(self, document: BackendDocument, order: PageOrder = PageOrder.ASCENDING) -> None:
        self.document = document
        self.order = order
        self._numbers = page_index_sequence(document.page_count, order)

    def __iter__(self) -> "DocumentPageSequence":
        return self

    def __next__(self) -> PageHandle:
        number = next(self._numbers)
        return self.document.get_page(number)

    def next_page(self) -> Optional[PageHandle]:
        return next(self, None)


class InterleavedPageSequence:
    """Zig-zag over a front document (forward) and a back document (reversed)."""

    def __init__(self, front_document: BackendDocument, back_document: BackendDocument) -> None:
        self.front_pages = DocumentPageSequence(front_document, PageOrder.ASCENDING)
        self.back_pages = DocumentPageSequence(back_document, PageOrder.DESCENDING)
        self.total_pages = front_document.page_count + back_document.page_count
        self.next_is_front = True

    def __iter__(self) -> "InterleavedPageSequence":
        return self

    def __next__(self) -> PageHandle:
        handle = self.next_page()
        if handle is None:
            raise StopIteration
        return handle

    def next_page(self) -> Optional[PageHandle]:
        if self.next_is_front:
            first, second = self.front_pages, self.back_pages
        else:
            first, second = self.back_pages, self.front_pages

        handle = first.next_page()
        if handle is None:
            handle = second.next_page()
        if handle is None:
            return None

        # Flip even when the page came from the other side.
        self.next_is_front = not self.next_is_front
        return handle


__all__ = [
    "PageOrder",
    "page_index_sequence",
    "DocumentPageSequence",
    "InterleavedPageSequence",
]
