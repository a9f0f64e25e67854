"""Selection, confirmation and deletion of scan candidates."""

import logging
import os
from typing import Callable, Protocol

from diskcull.cleaner import delete_paths
from diskcull.models import CandidateEntry, ScanResult, WorkflowOutcome, WorkflowReport

log = logging.getLogger(__name__)


class CleanupPrompts(Protocol):
    """Operator interaction needed by the workflow."""

    def select(self, candidates: list[CandidateEntry]) -> list[str]:
        """Show the candidates and return the paths chosen for deletion."""
        ...

    def confirm(self, count: int, message: str) -> bool:
        """Ask for a yes/no confirmation before deleting ``count`` items."""
        ...


def confirmation_message(count: int) -> str:
    """Prompt text for confirming a deletion."""
    noun = "item" if count == 1 else "items"
    return f"Are you sure you want to delete {count} selected {noun}?"


def normalize_selection(selected: list[str], candidates: list[CandidateEntry]) -> list[str]:
    """
    Restrict a selection to known candidate paths.

    Unknown paths are dropped and duplicates collapsed, keeping the
    order in which paths were selected.
    """
    known = {c.path for c in candidates}
    seen: set[str] = set()
    result = []
    for path in selected:
        if path in known and path not in seen:
            seen.add(path)
            result.append(path)
    return result


def review_and_delete(
    result: ScanResult,
    prompts: CleanupPrompts,
    dry_run: bool = False,
    progress_callback: Callable[[str, int, int], None] | None = None,
) -> WorkflowReport:
    """
    Let the operator pick candidates and delete them after confirmation.

    Steps: present the candidates largest first, collect a selection,
    confirm, delete each selected path independently. An empty result
    stops before anything is shown; an empty selection or a declined
    confirmation stops before anything is deleted.

    Args:
        result: Scan result to review
        prompts: Operator interaction
        dry_run: If True, report what would be deleted without deleting
        progress_callback: Optional callback(path, current, total) during deletion

    Returns:
        WorkflowReport with the outcome and, if deletion ran, its report
    """
    if not result.entries:
        return WorkflowReport(outcome=WorkflowOutcome.NOTHING_FOUND)

    candidates = result.sorted_by_size()
    selected = normalize_selection(prompts.select(candidates), candidates)

    if not selected:
        return WorkflowReport(outcome=WorkflowOutcome.NOTHING_SELECTED)

    if not prompts.confirm(len(selected), confirmation_message(len(selected))):
        log.info("Deletion of %d items cancelled", len(selected))
        return WorkflowReport(outcome=WorkflowOutcome.CANCELLED, selected=selected)

    # Removing a symlink only removes the link, never what it points at
    links = {path for path in selected if os.path.islink(path)}

    deletion = delete_paths(selected, dry_run=dry_run, progress_callback=progress_callback)

    sizes = {c.path: c.size_bytes for c in candidates}
    deletion.bytes_freed = sum(sizes[path] for path in deletion.deleted if path not in links)

    return WorkflowReport(
        outcome=WorkflowOutcome.COMPLETED,
        selected=selected,
        deletion=deletion,
    )
