"""Rich terminal display for diskcull."""

from rich.console import Console
from rich.status import Status
from rich.table import Table

from diskcull.config import SUMMARY_TOP_N
from diskcull.models import (
    CandidateEntry,
    DeletionFailure,
    DeletionReport,
    ScanResult,
    WorkflowOutcome,
    WorkflowReport,
)
from diskcull.units import format_size

console = Console()


def type_label(entry: CandidateEntry) -> str:
    """Get styled label for an entry type."""
    if entry.is_directory:
        return "[blue]Directory[/blue]"
    return "File"


def show_candidate_summary(candidates: list[CandidateEntry], top_n: int = SUMMARY_TOP_N) -> None:
    """Display the largest candidates and the total size."""
    ranked = sorted(candidates, key=lambda c: c.size_bytes, reverse=True)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Size", justify="right", width=12)
    table.add_column("Path", overflow="fold")
    table.add_column("Type", width=10)

    for entry in ranked[:top_n]:
        table.add_row(format_size(entry.size_bytes), entry.path, type_label(entry))

    console.print(f"\n[bold]Top {min(top_n, len(ranked))} largest items:[/bold]")
    console.print(table)
    total = sum(c.size_bytes for c in ranked)
    console.print(f"\n[bold]Total size: {format_size(total)}[/bold]")


def show_candidate_list(candidates: list[CandidateEntry], title: str = "Candidates") -> None:
    """Display all candidates, numbered for selection."""
    table = Table(title=title, show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Size", justify="right", style="green")
    table.add_column("Path", style="yellow", overflow="fold")
    table.add_column("Type")

    for i, entry in enumerate(candidates, 1):
        table.add_row(str(i), format_size(entry.size_bytes), entry.path, type_label(entry))

    console.print(table)


def show_scan_result(result: ScanResult) -> None:
    """Display a scan result without offering deletion."""
    if not result.ok:
        show_scan_error(result)
        return

    if not result.entries:
        console.print(
            f"[yellow]No items larger than {format_size(result.size_threshold)} found.[/yellow]"
        )
        return

    show_candidate_list(
        result.sorted_by_size(),
        title=f"Items larger than {format_size(result.size_threshold)}",
    )
    console.print(
        f"\n[bold]{len(result.entries)} items, {format_size(result.total_bytes)} total[/bold]"
    )
    if result.truncated:
        console.print("[dim]Result limit reached - scan stopped early.[/dim]")


def show_scan_error(result: ScanResult) -> None:
    """Display a scan-level failure."""
    console.print(f"[red]Error scanning {result.root}: {result.error}[/red]")


def show_scan_found(result: ScanResult, label: str = "items") -> None:
    """Display the one-line scan outcome."""
    console.print(
        f"[green]✓[/green] Found {len(result.entries)} {label} "
        f"larger than {format_size(result.size_threshold)}"
    )


def show_deletion_failure(failure: DeletionFailure) -> None:
    """Display a single failed deletion."""
    console.print(f"  [red]✗[/red] Error deleting {failure.path}: {failure.error}")


def show_deletion_summary(report: DeletionReport) -> None:
    """Display the tally of a deletion run."""
    for failure in report.failures:
        show_deletion_failure(failure)

    if report.dry_run:
        console.print(
            f"[yellow]DRY RUN - would delete {report.deleted_count} items "
            f"({format_size(report.bytes_freed)}).[/yellow]"
        )
        return

    color = "green" if report.failed_count == 0 else "yellow"
    console.print(
        f"[{color}]Deleted {report.deleted_count} items. "
        f"Failed to delete {report.failed_count} items.[/{color}]"
    )
    if report.bytes_freed:
        console.print(f"Space freed: [bold]{format_size(report.bytes_freed)}[/bold]")


def show_workflow_outcome(report: WorkflowReport) -> None:
    """Display how a selection and deletion round ended."""
    if report.outcome == WorkflowOutcome.NOTHING_FOUND:
        console.print("[yellow]No files found matching the criteria.[/yellow]")
    elif report.outcome == WorkflowOutcome.NOTHING_SELECTED:
        console.print("[yellow]No files selected for deletion.[/yellow]")
    elif report.outcome == WorkflowOutcome.CANCELLED:
        console.print("[yellow]Operation cancelled.[/yellow]")
    elif report.deletion is not None:
        show_deletion_summary(report.deletion)


def show_cache_roots(roots: list[tuple[str, list[str]]]) -> None:
    """Display cache root patterns and what they resolve to."""
    table = Table(title="Cache Locations", show_header=True, header_style="bold")
    table.add_column("Pattern")
    table.add_column("Resolved")

    for pattern, resolved in roots:
        if resolved:
            table.add_row(pattern, "\n".join(resolved))
        else:
            table.add_row(pattern, "[dim]not present[/dim]")

    console.print(table)


def scanning_status(message: str) -> Status:
    """Create a spinner shown while a scan runs."""
    return console.status(f"[bold blue]{message}[/bold blue]", spinner="dots")


def parse_selection(text: str, count: int) -> list[int]:
    """
    Parse a selection of numbered items.

    Accepts comma or space separated numbers and ranges (``1,3 5-7``),
    ``all``, or ``none``/empty for no selection. Numbers are 1-based.

    Args:
        text: Operator input
        count: Number of items on offer

    Returns:
        Zero-based indices in the order given, without duplicates

    Raises:
        ValueError: If a token is not a number or range within 1..count
    """
    stripped = text.strip().lower()
    if stripped in ("", "none", "n"):
        return []
    if stripped in ("all", "a", "*"):
        return list(range(count))

    indices: list[int] = []
    for token in stripped.replace(",", " ").split():
        if "-" in token:
            start_text, _, end_text = token.partition("-")
            if not (start_text.isdigit() and end_text.isdigit()):
                raise ValueError(f"Invalid range: {token}")
            start, end = int(start_text), int(end_text)
            if start > end:
                start, end = end, start
            numbers = range(start, end + 1)
        elif token.isdigit():
            numbers = range(int(token), int(token) + 1)
        else:
            raise ValueError(f"Not a number: {token}")

        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"Out of range: {number} (1-{count})")
            if number - 1 not in indices:
                indices.append(number - 1)

    return indices


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask for confirmation."""
    from rich.prompt import Confirm

    return Confirm.ask(message, default=default, console=console)
