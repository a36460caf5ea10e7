"""Rewrite links between report pages into in-document anchors."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping

logger = logging.getLogger(__name__)

_HTML_HREF_RE = re.compile(r'href="([^"]+\.html)"')
_REPEATED_SLASH_RE = re.compile(r"/+")

ABSOLUTE_URL_PREFIXES = ("http://", "https://")


def _directory_of(path: str) -> str:
    return path.rsplit("/", 1)[0] if "/" in path else ""


def resolve_relative_path(href: str, current_path: str) -> str:
    """Resolve ``href`` against the directory of ``current_path``.

    - ``./x`` is relative to the current directory
    - each leading ``..`` pops one directory segment
    - a bare relative target is appended to the current directory
    The result uses ``/`` separators without duplicate or leading slashes.
    """

    base_dir = _directory_of(current_path)
    resolved = href

    if href.startswith("./"):
        resolved = f"{base_dir}/{href[2:]}" if base_dir else href[2:]
    elif href.startswith("../"):
        parts = base_dir.split("/")
        for part in href.split("/"):
            if part == "..":
                if parts:
                    parts.pop()
            elif part != ".":
                parts.append(part)
        resolved = "/".join(parts)
    elif not href.startswith("/") and "://" not in href:
        resolved = f"{base_dir}/{href}" if base_dir else href

    resolved = _REPEATED_SLASH_RE.sub("/", resolved.replace("\\", "/"))
    return resolved.removeprefix("/")


def rewrite_internal_links(html: str, current_path: str, path_index: Mapping[str, str]) -> str:
    """Point ``href="*.html"`` links at ``#<page id>`` when the target is bundled.

    Absolute URLs and targets missing from ``path_index`` are left unchanged;
    the navigation script retries those at click time.
    """

    def _repl(m: re.Match[str]) -> str:
        href = m.group(1)
        if href.startswith(ABSOLUTE_URL_PREFIXES):
            return m.group(0)
        resolved = resolve_relative_path(href, current_path)
        page_id = path_index.get(resolved)
        if page_id:
            return f'href="#{page_id}"'
        logger.debug("Unresolved link %s in %s (resolved to %s)", href, current_path, resolved)
        return m.group(0)

    return _HTML_HREF_RE.sub(_repl, html)


__all__ = ["resolve_relative_path", "rewrite_internal_links"]
