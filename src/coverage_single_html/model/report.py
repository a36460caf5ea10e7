"""Data structures for a collected coverage report and its bundled output."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from coverage_single_html.ids import compute_page_id

DEFAULT_TITLE = "Coverage Report"
INDEX_PAGE = "index.html"


@dataclass(frozen=True, slots=True)
class Page:
    path: str  # relative to the report root, "/" separated
    content: str

    @property
    def page_id(self) -> str:
        return compute_page_id(self.path)

    @property
    def is_index(self) -> bool:
        return self.path == INDEX_PAGE


@dataclass(frozen=True, slots=True)
class ReportAssets:
    """Shared files found at the report root.

    Text assets hold the raw file content (empty when the file is absent).
    Image assets hold a ``data:`` URI or ``None``.
    """

    base_css: str = ""
    prettify_css: str = ""
    prettify_js: str = ""
    sorter_js: str = ""
    block_navigation_js: str = ""
    favicon: str | None = None
    sort_arrow_sprite: str | None = None


class PathIndex(Mapping[str, str]):
    """Read-only mapping of page path -> page id."""

    __slots__ = ("_ids",)

    def __init__(self, paths: list[str] | tuple[str, ...]) -> None:
        self._ids = MappingProxyType({p: compute_page_id(p) for p in paths})

    @classmethod
    def from_pages(cls, pages: list[Page]) -> PathIndex:
        return cls([p.path for p in pages])

    def __getitem__(self, path: str) -> str:
        return self._ids[path]

    def __iter__(self) -> Iterator[str]:
        return iter(self._ids)

    def __len__(self) -> int:
        return len(self._ids)

    def to_dict(self) -> dict[str, str]:
        return dict(self._ids)


@dataclass(slots=True)
class TreeLeaf:
    name: str
    path: str


@dataclass(slots=True)
class TreeFolder:
    name: str
    children: dict[str, TreeFolder | TreeLeaf] = field(default_factory=dict)


FileTreeNode = TreeFolder | TreeLeaf


@dataclass(frozen=True)
class BundleOptions:
    input_dir: Path
    title: str | None = None


@dataclass(frozen=True)
class BundleResult:
    html: str
    file_count: int
    total_size: int  # UTF-8 encoded length of html
