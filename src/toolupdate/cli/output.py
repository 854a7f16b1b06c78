"""Output utilities for CLI commands with clear intent.

user_output and machine_output live in toolupdate.core.output so integrations
can use them too; this module adds the end-of-run summary rendering.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from toolupdate.core.orchestrator import UpdateSummary
from toolupdate.core.output import machine_output, user_output
from toolupdate.core.updater import UpdateOutcome

__all__ = ["format_update_summary", "machine_output", "print_update_summary", "user_output"]

_OUTCOME_STYLES = {
    UpdateOutcome.UPDATED: ("✓", "green"),
    UpdateOutcome.UP_TO_DATE: ("=", "dim"),
    UpdateOutcome.SKIPPED: ("~", "cyan"),
    UpdateOutcome.FAILED: ("✗", "red"),
}


def format_update_summary(summary: UpdateSummary, *, dry_run: bool) -> Panel:
    """Format the final summary box: one line per project plus totals.

    Example:
        >>> panel = format_update_summary(summary, dry_run=False)
        >>> Console(stderr=True).print(panel)
    """
    lines: list[Text] = []

    for result in summary.results:
        marker, style = _OUTCOME_STYLES[result.outcome]
        remote = result.remote_version or "?"
        line = Text(f"{marker} {result.name}: ", style=style)
        line.append(f"{result.local_version} → {remote} ({result.outcome.value})")
        if result.outcome == UpdateOutcome.FAILED and result.message:
            line.append(f"\n    {result.message.splitlines()[0]}", style="red")
        lines.append(line)

    lines.append(Text(""))
    totals = (
        f"Updated: {summary.updated_count}  "
        f"Up to date: {summary.up_to_date_count}  "
        f"Failed: {summary.failed_count}"
    )
    if dry_run:
        totals += f"  Would update: {summary.skipped_count}"
    lines.append(Text(totals, style="bold"))

    content = Text("\n").join(lines)

    if summary.has_failures:
        title, border = "Update Failed", "red"
    elif dry_run:
        title, border = "Dry-run Complete", "cyan"
    else:
        title, border = "Update Complete", "green"
    return Panel(content, title=title, border_style=border, padding=(1, 2))


def print_update_summary(
    summary: UpdateSummary, *, dry_run: bool, console: Console | None = None
) -> None:
    if console is None:
        console = Console(stderr=True)
    console.print(format_update_summary(summary, dry_run=dry_run))
