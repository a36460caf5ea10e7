from __future__ import annotations

from collections.abc import Iterable

from coverage_single_html.model.report import FileTreeNode, TreeFolder, TreeLeaf


def build_file_tree(paths: Iterable[str]) -> TreeFolder:
    """Build the sidebar hierarchy from ``/``-separated page paths.

    Intermediate segments become folders, the last segment a leaf bound to
    the full path. A segment that is already a leaf cannot also be a folder
    (and vice versa); such input raises ``ValueError``.
    """

    root = TreeFolder(name="")
    for path in paths:
        *dirs, leaf_name = path.split("/")
        current = root
        for segment in dirs:
            node = current.children.setdefault(segment, TreeFolder(name=segment))
            if not isinstance(node, TreeFolder):
                raise ValueError(f"Path {path!r} uses page {node.path!r} as a folder")
            current = node
        existing = current.children.get(leaf_name)
        if isinstance(existing, TreeFolder):
            raise ValueError(f"Page {path!r} collides with a folder of the same name")
        if existing is None:
            current.children[leaf_name] = TreeLeaf(name=leaf_name, path=path)
    return root


def sorted_children(folder: TreeFolder) -> list[FileTreeNode]:
    """Folders first, then pages; each group ordered by name (case-sensitive)."""

    return sorted(
        folder.children.values(),
        key=lambda n: (not isinstance(n, TreeFolder), n.name),
    )


__all__ = ["build_file_tree", "sorted_children"]
