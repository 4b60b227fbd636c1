"""
Magazine Scan Combiner - combine single-sided scans into one interleaved PDF.

Scanning a magazine through a sheet feeder produces two PDFs: one with the
front sides of every sheet and one with the back sides, scanned after the
stack was flipped and therefore in reverse. This library merges them into a
single document whose pages alternate front, back, front, back.

Quick Start:
    >>> from scan_combiner import combine_scans
    >>> result = combine_scans('fronts.pdf', 'backs.pdf', 'magazine.pdf')
    >>> result.pages_written
    24

Main Classes:
    - CombineOperation: One cancellable combine run with progress reporting
    - Progress: Shared counters and cancellation flag
    - InterleavedPageSequence: The zig-zag page order over two documents

Data Classes:
    - CombineResult: Outcome of a combine run
    - OperationState: Lifecycle states of an operation

Exceptions:
    - ScanCombinerException: Base exception
    - OpenFailedError: An input PDF could not be opened
    - CreateFailedError: The output PDF could not be created

For CLI usage, use the 'scancombine' command after installation.
"""

import logging

__version__ = "1.0.0"
__author__ = "Magazine Scan Combiner Contributors"
__license__ = "MIT"

logging.getLogger("scancombine").addHandler(logging.NullHandler())

# Core classes
from scan_combiner.operation import CombineOperation, combine_scans
from scan_combiner.progress import Progress
from scan_combiner.sequence import (
    DocumentPageSequence,
    InterleavedPageSequence,
    PageOrder,
    page_index_sequence,
)

# Data types
from scan_combiner.types import CombineResult, OperationState, PageHandle, PageRect

# Exceptions
from scan_combiner.exceptions import (
    ScanCombinerException,
    OpenFailedError,
    CreateFailedError,
)

__all__ = [
    # Main classes
    "CombineOperation",
    "Progress",
    "InterleavedPageSequence",
    "DocumentPageSequence",
    "PageOrder",
    # Functions
    "combine_scans",
    "page_index_sequence",
    # Data types
    "CombineResult",
    "OperationState",
    "PageHandle",
    "PageRect",
    # Exceptions
    "ScanCombinerException",
    "OpenFailedError",
    "CreateFailedError",
    # Version info
    "__version__",
]
