"""Status bar component showing fetch status and keyboard hints."""

from datetime import datetime

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Static


def refreshed_text(last_refresh: datetime, now: datetime) -> str:
    """Relative age of the last completed search."""
    minutes = int((now - last_refresh).total_seconds() // 60)
    if minutes <= 0:
        return "Updated just now"
    elif minutes == 1:
        return "Updated 1 min ago"
    return f"Updated {minutes} mins ago"


class StatusBar(Horizontal):
    """Bottom status bar with time, last update and keyboard hints."""

    DEFAULT_CSS = """
    StatusBar {
        height: 1;
        background: $surface-darken-1;
        color: $text-muted;
        padding: 0 1;
        width: 100%;
    }

    StatusBar #status-time {
        width: auto;
    }

    StatusBar #status-refresh {
        width: auto;
        padding-left: 2;
    }

    StatusBar #status-activity {
        width: auto;
        padding-left: 2;
        color: $warning;
    }

    StatusBar #status-spacer {
        width: 1fr;
    }

    StatusBar #status-hints {
        width: auto;
        text-align: right;
    }
    """

    def __init__(self) -> None:
        super().__init__()
        self._last_refresh: datetime | None = None
        self.activity = ""

    def compose(self) -> ComposeResult:
        yield Static("", id="status-time")
        yield Static("", id="status-refresh")
        yield Static("", id="status-activity")
        yield Static("", id="status-spacer")
        yield Static(
            "[dim]enter[/dim] Search  [dim]r[/dim] Refresh  [dim]q[/dim] Quit",
            id="status-hints",
        )

    def on_mount(self) -> None:
        """Start clock update timer."""
        self.set_interval(1, self._update_time)

    def _update_time(self) -> None:
        now = datetime.now()
        self.query_one("#status-time", Static).update(f"[bold]{now.strftime('%H:%M:%S')}[/bold]")
        if self._last_refresh:
            self.query_one("#status-refresh", Static).update(
                f"[dim]{refreshed_text(self._last_refresh, now)}[/dim]"
            )

    def set_last_refresh(self, time: datetime | None = None) -> None:
        """Update the last refresh timestamp."""
        self._last_refresh = time or datetime.now()
        self._update_time()

    def set_activity(self, activity: str) -> None:
        """Set current activity message (e.g., 'Searching...')."""
        self.activity = activity
        self.query_one("#status-activity", Static).update(
            f"[yellow]{activity}[/yellow]" if activity else ""
        )

    def clear_activity(self) -> None:
        self.set_activity("")
