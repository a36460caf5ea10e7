from coverage_single_html.ids import compute_page_id


def test_compute_page_id_replaces_non_alphanumerics() -> None:
    assert compute_page_id("src/utils/index.html") == "src_utils_index_html"
    assert compute_page_id("a-b/c d.ts.html") == "a_b_c_d_ts_html"


def test_compute_page_id_is_stable() -> None:
    assert compute_page_id("index.html") == compute_page_id("index.html") == "index_html"
