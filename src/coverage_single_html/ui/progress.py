"""Rich progress display driven by bundler progress events."""

from __future__ import annotations

from types import TracebackType

from rich.console import Console
from rich.progress import BarColumn, Progress, SpinnerColumn, TaskID, TextColumn


class ProgressReporter:
    """Translate ``(event, payload)`` callbacks into rich progress tasks.

    Known events:
    - ``collect:start`` / ``collect:finalized``: scanning the report directory
    - ``render:start`` / ``page:rendered`` / ``render:finalized``: building output
    """

    def __init__(self, console: Console | None = None) -> None:
        self.progress = Progress(
            SpinnerColumn(),
            TextColumn("{task.description}"),
            BarColumn(),
            TextColumn("{task.completed}/{task.total}"),
            console=console,
            transient=True,
        )
        self._tasks: dict[str, TaskID] = {}
        self._totals: dict[str, int] = {}

    def __enter__(self) -> ProgressReporter:
        self.progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.progress.stop()

    def add_step(self, description: str, total: int | None = None) -> TaskID:
        return self.progress.add_task(description, total=total)

    def finish_task(self, task_id: TaskID) -> None:
        task = self.progress.tasks[self.progress.task_ids.index(task_id)]
        if task.total is not None:
            self.progress.update(task_id, completed=task.total)
        self.progress.remove_task(task_id)

    def _finish(self, key: str) -> None:
        task_id = self._tasks.pop(key, None)
        if task_id is not None:
            self.finish_task(task_id)

    def emit(self, event: str, payload: dict[str, int | str]) -> None:
        if event == "collect:start":
            self._tasks["collect"] = self.add_step(f"Scanning {payload.get('input_dir', '')}")
        elif event == "collect:finalized":
            self._finish("collect")
        elif event == "render:start":
            total = int(payload.get("pages", 0))
            self._totals["pages"] = total
            self._tasks["pages"] = self.add_step("Bundling pages", total=total)
        elif event == "page:rendered":
            task_id = self._tasks.get("pages")
            if task_id is not None:
                self.progress.advance(task_id)
        elif event == "render:finalized":
            self._finish("pages")


__all__ = ["ProgressReporter"]
