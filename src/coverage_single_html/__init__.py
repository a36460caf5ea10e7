"""Bundle Istanbul-style HTML coverage reports into one self-contained file."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = [
    "BundleOptions",
    "BundleResult",
    "ReportInputError",
    "__version__",
    "bundle_coverage",
]

from .builder.bundle import bundle_coverage as bundle_coverage
from .ingest.collector import ReportInputError as ReportInputError
from .model.report import BundleOptions as BundleOptions
from .model.report import BundleResult as BundleResult
