"""Backend abstractions for Magazine Scan Combiner."""

from .base import BackendDocument, BackendSink, PDFBackend
from .pypdf_backend import PypdfBackend, PypdfDocument, PypdfSink

__all__ = [
    "BackendDocument",
    "BackendSink",
    "PDFBackend",
    "PypdfBackend",
    "PypdfDocument",
    "PypdfSink",
]
