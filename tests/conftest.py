from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, Sequence
import sys

import pytest
from pypdf import PdfReader, PdfWriter

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from scan_combiner.backends.base import BackendDocument  # noqa: E402
from scan_combiner.types import PageHandle, PageRect  # noqa: E402

# Test pages are told apart by their width: front page n is 100 + n points
# wide, back page n is 200 + n points wide.
FRONT_BASE_WIDTH = 100
BACK_BASE_WIDTH = 200


@dataclass
class FakeDocument(BackendDocument):
    prefix: str = "P"

    def get_page(self, number: int) -> PageHandle:
        if number < 1 or number > self.page_count:
            raise IndexError(number)
        return PageHandle(
            document_label=self.label,
            number=number,
            media_box=PageRect(0, 0, 100, 100),
            page=f"{self.prefix}{number}",
        )


@pytest.fixture()
def fake_document() -> Callable[..., FakeDocument]:
    def _create(page_count: int, prefix: str = "P", label: str = "front") -> FakeDocument:
        return FakeDocument(path=Path(f"{label}.pdf"), page_count=page_count, label=label, prefix=prefix)

    return _create


@pytest.fixture()
def pdf_factory(tmp_path: Path) -> Callable[..., Path]:
    def _create(
        filename: str,
        widths: Sequence[float],
        height: float = 200,
        title: Optional[str] = None,
    ) -> Path:
        path = tmp_path / filename
        writer = PdfWriter()
        for width in widths:
            writer.add_blank_page(width=width, height=height)
        if title is not None:
            writer.add_metadata({"/Title": title})
        with path.open("wb") as handle:
            writer.write(handle)
        return path

    return _create


@pytest.fixture()
def scan_factory(pdf_factory: Callable[..., Path]) -> Callable[..., Path]:
    """Create a front or back scan whose pages encode their own page number."""

    def _create(side: str, page_count: int, title: Optional[str] = None) -> Path:
        base = FRONT_BASE_WIDTH if side == "front" else BACK_BASE_WIDTH
        widths = [base + number for number in range(1, page_count + 1)]
        return pdf_factory(f"{side}.pdf", widths, title=title)

    return _create


@pytest.fixture()
def front_pdf(scan_factory: Callable[..., Path]) -> Path:
    return scan_factory("front", 3, title="Issue 42")


@pytest.fixture()
def back_pdf(scan_factory: Callable[..., Path]) -> Path:
    return scan_factory("back", 2)


@pytest.fixture()
def empty_pdf(tmp_path: Path) -> Path:
    pdf_path = tmp_path / "empty.pdf"
    writer = PdfWriter()
    with pdf_path.open("wb") as stream:
        writer.write(stream)
    return pdf_path


@pytest.fixture()
def page_labels() -> Callable[[Path], List[str]]:
    """Read back a PDF and name each page ``P<n>`` or ``Q<n>`` from its width."""

    def _read(path: Path) -> List[str]:
        labels = []
        for page in PdfReader(str(path)).pages:
            width = round(float(page.mediabox.width))
            if width > BACK_BASE_WIDTH:
                labels.append(f"Q{width - BACK_BASE_WIDTH}")
            else:
                labels.append(f"P{width - FRONT_BASE_WIDTH}")
        return labels

    return _read
