"""Discovery and loading of report pages and shared assets."""

from __future__ import annotations

import base64
import logging
from pathlib import Path

from coverage_single_html.model.report import INDEX_PAGE, Page, ReportAssets

logger = logging.getLogger(__name__)

# Some coverage tools write a nested duplicate of the whole report here.
DUPLICATE_REPORT_DIR = "lcov-report"

HTML_SUFFIX = ".html"

TEXT_ASSETS = {
    "base_css": "base.css",
    "prettify_css": "prettify.css",
    "prettify_js": "prettify.js",
    "sorter_js": "sorter.js",
    "block_navigation_js": "block-navigation.js",
}
IMAGE_ASSETS = {
    "favicon": "favicon.png",
    "sort_arrow_sprite": "sort-arrow-sprite.png",
}


class ReportInputError(RuntimeError):
    pass


def find_html_files(root: Path, base: str = "") -> list[Page]:
    """Recursively load every ``*.html`` file below ``root``.

    Entries are visited in sorted name order and paths are recorded relative
    to the report root with ``/`` separators. Undecodable bytes become U+FFFD.
    """

    pages: list[Page] = []
    for entry in sorted(root.iterdir(), key=lambda p: p.name):
        rel = f"{base}/{entry.name}" if base else entry.name
        if entry.is_dir():
            if entry.name == DUPLICATE_REPORT_DIR:
                logger.debug("Skipping duplicate report directory %s", rel)
                continue
            pages.extend(find_html_files(entry, rel))
        elif entry.name.endswith(HTML_SUFFIX):
            content = entry.read_text(encoding="utf-8", errors="replace")
            pages.append(Page(path=rel, content=content))
    return pages


def collect_pages(input_dir: Path) -> list[Page]:
    """Collect all report pages, failing when the report is unusable."""

    if not input_dir.is_dir():
        raise ReportInputError(f"Input directory not found: {input_dir}")

    pages = find_html_files(input_dir)
    if not pages:
        raise ReportInputError(f"No HTML files found in {input_dir}")
    if not any(p.path == INDEX_PAGE for p in pages):
        raise ReportInputError(f"No index.html found in {input_dir}")

    logger.info("Collected %d HTML pages from %s", len(pages), input_dir)
    return pages


def read_text_asset(input_dir: Path, filename: str) -> str | None:
    path = input_dir / filename
    if not path.is_file():
        logger.debug("Optional asset %s not present", filename)
        return None
    return path.read_text(encoding="utf-8", errors="replace")


def image_mime_type(filename: str) -> str:
    return "image/png" if filename.lower().endswith(".png") else "image/x-icon"


def read_image_asset(input_dir: Path, filename: str) -> str | None:
    """Return the file as a base64 ``data:`` URI, or None when absent."""

    path = input_dir / filename
    if not path.is_file():
        logger.debug("Optional asset %s not present", filename)
        return None
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{image_mime_type(filename)};base64,{payload}"


def load_assets(input_dir: Path) -> ReportAssets:
    """Load the fixed set of shared assets from the report root only."""

    text = {field: read_text_asset(input_dir, name) or "" for field, name in TEXT_ASSETS.items()}
    images = {field: read_image_asset(input_dir, name) for field, name in IMAGE_ASSETS.items()}
    return ReportAssets(**text, **images)


__all__ = [
    "DUPLICATE_REPORT_DIR",
    "ReportInputError",
    "collect_pages",
    "find_html_files",
    "load_assets",
    "read_image_asset",
    "read_text_asset",
]
