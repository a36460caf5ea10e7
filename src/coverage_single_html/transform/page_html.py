from __future__ import annotations

import html as html_lib
import re

from coverage_single_html.model.report import DEFAULT_TITLE

_TITLE_RE = re.compile(r"<title>([^<]+)</title>")
_BODY_RE = re.compile(r"<body[^>]*>(.*)</body>", re.IGNORECASE | re.DOTALL)


def extract_title(html: str) -> str:
    """Return the plain text of the page ``<title>``, or the default report title.

    Character references are decoded so the value can be escaped once on output.
    """

    m = _TITLE_RE.search(html)
    return html_lib.unescape(m.group(1)) if m else DEFAULT_TITLE


def extract_body(html: str) -> str:
    """Return the markup inside ``<body>``; the whole document when absent.

    The match runs to the last closing ``</body>`` tag.
    """

    m = _BODY_RE.search(html)
    return m.group(1) if m else html


def strip_html_suffix(name: str) -> str:
    return name.replace(".html", "", 1)
