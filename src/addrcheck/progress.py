"""Terminal progress display for a run, built on rich.progress."""
from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)


DONE_MESSAGE = "✔ Vérification terminée !"


class ProgressReporter:
    """Elapsed time, bar, current/total rows and ETA against the row limit.

    `enabled=False` turns the display off; counting still happens.
    """

    def __init__(self, total: int, console: Console | None = None, enabled: bool = True):
        self.total = total
        self.completed = 0
        self.enabled = enabled
        self.console = console or Console(stderr=True)
        self._progress = Progress(
            TimeElapsedColumn(),
            BarColumn(bar_width=40, style="blue", complete_style="cyan"),
            MofNCompleteColumn(),
            TextColumn("lignes"),
            TimeRemainingColumn(),
            console=self.console,
            disable=not enabled,
        )
        self._task = self._progress.add_task("check", total=total)
        self._running = False

    def __enter__(self):
        if self.enabled:
            self._progress.start()
            self._running = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self._stop()
        return False

    def advance(self) -> None:
        self.completed += 1
        self._progress.advance(self._task)

    def finish(self) -> None:
        self._stop()
        if self.enabled:
            self.console.print(DONE_MESSAGE)

    def _stop(self) -> None:
        if self._running:
            self._progress.stop()
            self._running = False
