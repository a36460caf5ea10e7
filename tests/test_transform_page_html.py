from __future__ import annotations

from coverage_single_html.transform.page_html import extract_body, extract_title, strip_html_suffix


def test_extract_title() -> None:
    assert extract_title("<head><title>Code coverage report for src</title></head>") == (
        "Code coverage report for src"
    )


def test_extract_title_defaults_when_missing() -> None:
    assert extract_title("<html><body>x</body></html>") == "Coverage Report"
    assert extract_title("<title></title>") == "Coverage Report"


def test_extract_body_spans_lines_and_attributes() -> None:
    html = '<html><BODY class="x">\n<p>one</p>\n<p>two</p>\n</BODY></html>'
    assert extract_body(html) == "\n<p>one</p>\n<p>two</p>\n"


def test_extract_body_falls_back_to_document() -> None:
    html = "<div>fragment</div>"
    assert extract_body(html) == html


def test_strip_html_suffix() -> None:
    assert strip_html_suffix("app.ts.html") == "app.ts"
    assert strip_html_suffix("index.html") == "index"
    assert strip_html_suffix("README") == "README"


def test_extract_title_decodes_character_references() -> None:
    assert extract_title("<title>Tom &amp; Jerry &lt;3</title>") == "Tom & Jerry <3"
