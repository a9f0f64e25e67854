"""Menu-driven interactive interface."""

from dataclasses import dataclass
from enum import Enum, auto

from rich.console import Console
from rich.panel import Panel

from diskcull import display
from diskcull.caches import scan_caches
from diskcull.config import (
    DEFAULT_CACHE_ROOTS,
    DEFAULT_CACHE_THRESHOLD,
    DEFAULT_LIST_LIMIT,
    DEFAULT_SCAN_ROOT,
    DEFAULT_SIZE_THRESHOLD,
)
from diskcull.models import CacheRoot, CandidateEntry, ScanResult, WorkflowReport
from diskcull.scanner import find_large_items
from diskcull.units import format_size
from diskcull.workflow import review_and_delete


class MenuState(Enum):
    """States for the menu state machine."""

    MAIN = auto()
    LARGE_FILES = auto()


@dataclass
class ConsolePrompts:
    """Selection and confirmation prompts on a rich console."""

    console: Console
    dry_run: bool = False

    def select(self, candidates: list[CandidateEntry]) -> list[str]:
        """Show the candidates and ask which to delete."""
        display.show_candidate_summary(candidates)
        self.console.print()
        display.show_candidate_list(candidates, title="Select files/folders to delete")

        while True:
            user_input = self.console.input(
                "\n[bold cyan]Delete which?[/bold cyan] "
                "[dim](e.g. 1,3,5-7 or 'all'; Enter for none)[/dim] "
            )
            try:
                indices = display.parse_selection(user_input, len(candidates))
            except ValueError as e:
                self.console.print(f"[yellow]{e}[/yellow]")
                continue
            return [candidates[i].path for i in indices]

    def confirm(self, count: int, message: str) -> bool:
        """Ask for confirmation."""
        if self.dry_run:
            self.console.print(f"[yellow]DRY RUN: {message}[/yellow]")
            return True

        return display.confirm_action(message, default=False)


@dataclass
class MenuSession:
    """Interactive scan, select and delete loop."""

    console: Console
    dry_run: bool = False
    size_threshold: int = DEFAULT_SIZE_THRESHOLD
    cache_threshold: int = DEFAULT_CACHE_THRESHOLD
    list_limit: int = DEFAULT_LIST_LIMIT
    cache_roots: tuple[CacheRoot, ...] = DEFAULT_CACHE_ROOTS
    state: MenuState = MenuState.MAIN

    def run(self) -> None:
        """Main menu loop."""
        self._show_welcome()

        while True:
            try:
                if not self._handle_state():
                    break
            except KeyboardInterrupt:
                self.console.print("\n[dim]Goodbye![/dim]")
                break

    def _show_welcome(self) -> None:
        """Display welcome message."""
        self.console.print(
            Panel(
                "[bold green]diskcull[/bold green]\n"
                "[dim]Large file and cache cleanup[/dim]",
                expand=False,
            )
        )
        if self.dry_run:
            self.console.print("[yellow]Dry-run mode: No files will be deleted[/yellow]\n")

    def _handle_state(self) -> bool:
        """Handle current state, return False to exit."""
        if self.state == MenuState.MAIN:
            return self._main_menu()
        elif self.state == MenuState.LARGE_FILES:
            return self._large_files_menu()
        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Main Menu
    # ─────────────────────────────────────────────────────────────────────────

    def _main_menu(self) -> bool:
        """Display and handle main menu."""
        self.console.print("[bold]What would you like to do?[/bold]\n")
        self.console.print(f"1. Scan for cache files (>{format_size(self.cache_threshold)})")
        self.console.print(f"2. Scan for large files (>{format_size(self.size_threshold)})")
        self.console.print("0. Exit")

        choice = self._get_choice(2)

        if choice == 0:
            self.console.print("\n[green]Thank you for using diskcull![/green]")
            return False
        elif choice == 1:
            self._do_cache_scan()
        elif choice == 2:
            self.state = MenuState.LARGE_FILES

        return True

    # ─────────────────────────────────────────────────────────────────────────
    # Scans
    # ─────────────────────────────────────────────────────────────────────────

    def _do_cache_scan(self) -> None:
        """Scan the cache locations and offer the results for deletion."""
        with display.scanning_status("Scanning for cache files..."):
            result = scan_caches(self.cache_threshold, self.cache_roots)

        display.show_scan_found(result, label="cache items")
        self._review(result)

    def _large_files_menu(self) -> bool:
        """Ask for a directory, scan it, and offer the results for deletion."""
        directory = self._get_directory_input(DEFAULT_SCAN_ROOT)

        with display.scanning_status(f"Scanning {directory} for large files..."):
            result = find_large_items(
                directory,
                size_threshold=self.size_threshold,
                list_limit=self.list_limit,
            )

        if result.ok:
            display.show_scan_found(result)
            self._review(result)
        else:
            display.show_scan_error(result)

        self.state = MenuState.MAIN
        return True

    def _review(self, result: ScanResult) -> WorkflowReport:
        """Run the selection and deletion workflow on a scan result."""
        prompts = ConsolePrompts(console=self.console, dry_run=self.dry_run)
        report = review_and_delete(
            result,
            prompts,
            dry_run=self.dry_run,
            progress_callback=self._show_deleting,
        )
        display.show_workflow_outcome(report)
        self.console.print()
        return report

    def _show_deleting(self, path: str, current: int, total: int) -> None:
        self.console.print(f"[dim]Deleting ({current}/{total}) {path}[/dim]")

    # ─────────────────────────────────────────────────────────────────────────
    # Input Helpers
    # ─────────────────────────────────────────────────────────────────────────

    def _get_choice(self, max_choice: int) -> int:
        """Get menu choice from user."""
        while True:
            try:
                choice = self.console.input("\n[bold cyan]Select:[/bold cyan] ").strip()
                if not choice:
                    continue
                num = int(choice)
                if 0 <= num <= max_choice:
                    return num
                self.console.print(f"[yellow]Please enter 0-{max_choice}[/yellow]")
            except ValueError:
                self.console.print("[yellow]Please enter a number[/yellow]")

    def _get_directory_input(self, default: str) -> str:
        """Get the directory to scan, falling back to the default."""
        user_input = self.console.input(
            f"\n[bold cyan]Enter directory to scan[/bold cyan] [dim](default: {default})[/dim] "
        ).strip()
        return user_input or default


def start_menu(
    console: Console | None = None,
    dry_run: bool = False,
    size_threshold: int = DEFAULT_SIZE_THRESHOLD,
    cache_threshold: int = DEFAULT_CACHE_THRESHOLD,
    list_limit: int = DEFAULT_LIST_LIMIT,
) -> None:
    """Start the menu-driven interface.

    Args:
        console: Rich console for output
        dry_run: If True, simulate deletions without deleting
        size_threshold: Threshold for the large-file scan
        cache_threshold: Threshold for the cache scan
        list_limit: Result cap for the large-file scan
    """
    if console is None:
        console = display.console

    session = MenuSession(
        console=console,
        dry_run=dry_run,
        size_threshold=size_threshold,
        cache_threshold=cache_threshold,
        list_limit=list_limit,
    )
    session.run()
