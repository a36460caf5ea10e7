import logging
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

# 1x1 transparent PNG
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000154a24f5d0000000049454e44ae426082"
)


def make_page(title: str, body: str) -> str:
    return (
        "<!doctype html>\n<html lang=\"en\">\n<head>\n"
        f"    <title>{title}</title>\n"
        "    <link rel=\"stylesheet\" href=\"base.css\" />\n"
        "</head>\n<body>\n"
        f"{body}\n"
        "</body>\n</html>\n"
    )


@pytest.fixture
def isolate_logging():
    """Isolate logging configuration between tests to prevent CI issues.

    The CLI reconfigures the root logger with a StreamHandler bound to the
    runner's captured stderr, which is closed once the invocation returns.
    """
    original_handlers = logging.root.handlers[:]
    original_level = logging.root.level

    logging.root.handlers.clear()
    logging.root.addHandler(logging.NullHandler())

    yield

    logging.root.handlers.clear()
    logging.root.handlers.extend(original_handlers)
    logging.root.setLevel(original_level)


@pytest.fixture
def report_dir(tmp_path: Path) -> Path:
    """A small Istanbul-style report with nested pages and all shared assets."""

    root = tmp_path / "coverage"
    (root / "src" / "utils").mkdir(parents=True)
    (root / "lcov-report").mkdir()

    (root / "index.html").write_text(
        make_page(
            "Code coverage report for All files",
            '<div class="wrapper"><a href="src/index.html">src</a>'
            ' <a href="https://istanbul.js.org/">istanbul</a></div>',
        ),
        encoding="utf-8",
    )
    (root / "src" / "index.html").write_text(
        make_page(
            "Code coverage report for src",
            '<a href="../index.html">All files</a> <a href="app.ts.html">app.ts</a>'
            ' <a href="./utils/index.html">utils</a>',
        ),
        encoding="utf-8",
    )
    (root / "src" / "app.ts.html").write_text(
        make_page("Code coverage report for src/app.ts", '<a href="../index.html">All files</a>'),
        encoding="utf-8",
    )
    (root / "src" / "utils" / "index.html").write_text(
        make_page(
            "Code coverage report for src/utils",
            '<a href="../../index.html">All files</a> <a href="format.ts.html">format.ts</a>',
        ),
        encoding="utf-8",
    )
    (root / "src" / "utils" / "format.ts.html").write_text(
        make_page(
            "Code coverage report for src/utils/format.ts",
            '<a href="../../index.html">All files</a> <a href="missing.ts.html">gone</a>',
        ),
        encoding="utf-8",
    )
    (root / "lcov-report" / "index.html").write_text(
        make_page("duplicate", "<p>nested copy</p>"), encoding="utf-8"
    )

    (root / "base.css").write_text("body { margin: 0; }\n", encoding="utf-8")
    (root / "prettify.css").write_text(".pln { color: #000; }\n", encoding="utf-8")
    (root / "prettify.js").write_text("window.prettyPrint = function () {};\n", encoding="utf-8")
    (root / "sorter.js").write_text("var addSorting = function () {};\n", encoding="utf-8")
    (root / "block-navigation.js").write_text("var jumpToCode = 1;\n", encoding="utf-8")
    (root / "favicon.png").write_bytes(PNG_BYTES)
    (root / "sort-arrow-sprite.png").write_bytes(PNG_BYTES)
    return root


@pytest.fixture
def minimal_report_dir(tmp_path: Path) -> Path:
    """index.html linking to file.html, plus base.css and favicon.png."""

    root = tmp_path / "minimal"
    root.mkdir()
    (root / "index.html").write_text(
        make_page("All files", '<a href="file.html">file</a>'), encoding="utf-8"
    )
    (root / "file.html").write_text(make_page("file", "<pre>covered</pre>"), encoding="utf-8")
    (root / "base.css").write_text(".coverage { color: green; }\n", encoding="utf-8")
    (root / "favicon.png").write_bytes(PNG_BYTES)
    return root
