from __future__ import annotations

import re

_UNSAFE_ID_CHARS = re.compile(r"[^A-Za-z0-9]")


def compute_page_id(path: str) -> str:
    """Derive the in-document identifier for a report page.

    Every character outside ``[A-Za-z0-9]`` becomes ``_``, so
    ``src/utils/index.html`` maps to ``src_utils_index_html``.
    """

    return _UNSAFE_ID_CHARS.sub("_", path)
