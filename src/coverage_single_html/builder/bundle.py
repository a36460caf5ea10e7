"""Assemble a collected coverage report into one self-contained HTML document."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from coverage_single_html.builder.tree import build_file_tree
from coverage_single_html.ingest.collector import collect_pages, load_assets
from coverage_single_html.model.report import (
    DEFAULT_TITLE,
    BundleOptions,
    BundleResult,
    Page,
    PathIndex,
    ReportAssets,
)
from coverage_single_html.render.templating import create_environment
from coverage_single_html.transform.links import rewrite_internal_links
from coverage_single_html.transform.page_html import extract_body, extract_title

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[str, dict[str, int | str]], None] | None


def _safe_emit(on_progress: ProgressCallback, event: str, payload: dict[str, int | str]) -> None:
    """Forward a progress event; a failing callback never aborts the bundle."""
    if on_progress is None:
        return
    try:
        on_progress(event, payload)
    except Exception:
        logger.debug("Progress callback failed on %s", event, exc_info=True)


def build_page_views(
    pages: list[Page],
    path_index: PathIndex,
    on_progress: ProgressCallback = None,
) -> list[dict[str, Any]]:
    """Prepare the per-page template context with links already rewritten."""

    views: list[dict[str, Any]] = []
    for page in pages:
        body = rewrite_internal_links(extract_body(page.content), page.path, path_index)
        views.append(
            {
                "id": page.page_id,
                "path": page.path,
                "title": extract_title(page.content),
                "body": body,
                "active": page.is_index,
            }
        )
        _safe_emit(on_progress, "page:rendered", {"path": page.path})
    return views


def render_report(
    pages: list[Page],
    assets: ReportAssets,
    title: str | None = None,
    on_progress: ProgressCallback = None,
) -> str:
    """Render the single-page document for already collected pages."""

    path_index = PathIndex.from_pages(pages)
    _safe_emit(on_progress, "render:start", {"pages": len(pages)})
    context = {
        "title": title or DEFAULT_TITLE,
        "assets": assets,
        "pages": build_page_views(pages, path_index, on_progress),
        "tree": build_file_tree(path_index),
        "path_index": path_index.to_dict(),
    }
    html = create_environment().render_report(context)
    _safe_emit(on_progress, "render:finalized", {"pages": len(pages)})
    return html


def bundle_coverage(options: BundleOptions, on_progress: ProgressCallback = None) -> BundleResult:
    """Bundle the report found in ``options.input_dir``.

    Raises ``ReportInputError`` when the directory is missing, holds no HTML
    pages, or has no root ``index.html``.
    """

    _safe_emit(on_progress, "collect:start", {"input_dir": str(options.input_dir)})
    pages = collect_pages(options.input_dir)
    assets = load_assets(options.input_dir)
    _safe_emit(on_progress, "collect:finalized", {"pages": len(pages)})

    html = render_report(pages, assets, title=options.title, on_progress=on_progress)
    total_size = len(html.encode("utf-8"))
    logger.info("Bundled %d pages into %d bytes", len(pages), total_size)
    return BundleResult(html=html, file_count=len(pages), total_size=total_size)


__all__ = ["ProgressCallback", "build_page_views", "bundle_coverage", "render_report"]
