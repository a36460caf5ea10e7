from __future__ import annotations

import contextlib
import os
from pathlib import Path
from tempfile import NamedTemporaryFile


def write_report(path: Path, html: str, *, encoding: str = "utf-8") -> None:
    """Write the bundled document to ``path``, creating parent directories.

    The text is staged in a temporary file next to ``path`` and moved into
    place; on any failure the temporary file is removed and an existing
    report at ``path`` is left untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with NamedTemporaryFile(
        "w",
        encoding=encoding,
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
        delete=False,
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(html)
            tmp.flush()
            os.fsync(tmp.fileno())
        except BaseException:
            tmp.close()
            with contextlib.suppress(OSError):
                tmp_path.unlink()
            raise
    try:
        os.replace(tmp_path, path)
    except BaseException:
        with contextlib.suppress(OSError):
            tmp_path.unlink()
        raise


def format_size(num_bytes: int) -> str:
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{num_bytes / 1024:.1f} KB"
    return f"{num_bytes / (1024 * 1024):.1f} MB"


__all__ = ["format_size", "write_report"]
