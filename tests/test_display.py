"""Tests for display module."""

from unittest.mock import patch

import pytest

from diskcull.display import (
    confirm_action,
    parse_selection,
    show_cache_roots,
    show_candidate_list,
    show_candidate_summary,
    show_deletion_summary,
    show_scan_error,
    show_scan_found,
    show_scan_result,
    show_workflow_outcome,
    type_label,
)
from diskcull.models import (
    CandidateEntry,
    DeletionFailure,
    DeletionReport,
    ScanResult,
    WorkflowOutcome,
    WorkflowReport,
)
from diskcull.units import GIB


def _printed(mock_console) -> str:
    return "\n".join(str(c.args[0]) for c in mock_console.print.call_args_list if c.args)


def _entries():
    return [
        CandidateEntry(path="/data/a.iso", size_bytes=2 * GIB),
        CandidateEntry(path="/data/cache", size_bytes=3 * GIB, is_directory=True),
    ]


class TestTypeLabel:
    def test_directory(self):
        label = type_label(CandidateEntry(path="/d", size_bytes=1, is_directory=True))
        assert "Directory" in label
        assert "blue" in label

    def test_file(self):
        assert type_label(CandidateEntry(path="/f", size_bytes=1)) == "File"


class TestShowCandidates:
    @patch("diskcull.display.console")
    def test_summary(self, mock_console):
        show_candidate_summary(_entries())
        output = _printed(mock_console)
        assert "Top 2 largest items" in output
        assert "Total size: 5.0 GB" in output

    @patch("diskcull.display.console")
    def test_summary_caps_top_n(self, mock_console):
        show_candidate_summary(_entries(), top_n=1)
        assert "Top 1 largest items" in _printed(mock_console)

    @patch("diskcull.display.console")
    def test_list(self, mock_console):
        show_candidate_list(_entries())
        mock_console.print.assert_called_once()


class TestShowScanResult:
    @patch("diskcull.display.console")
    def test_empty(self, mock_console):
        show_scan_result(ScanResult(root="/r", size_threshold=GIB))
        assert "No items larger than 1.0 GB found." in _printed(mock_console)

    @patch("diskcull.display.console")
    def test_with_entries(self, mock_console):
        show_scan_result(ScanResult(root="/r", size_threshold=GIB, entries=_entries()))
        output = _printed(mock_console)
        assert "2 items, 5.0 GB total" in output
        assert "Result limit reached" not in output

    @patch("diskcull.display.console")
    def test_truncated(self, mock_console):
        show_scan_result(
            ScanResult(root="/r", size_threshold=GIB, entries=_entries(), truncated=True)
        )
        assert "Result limit reached" in _printed(mock_console)

    @patch("diskcull.display.console")
    def test_error(self, mock_console):
        show_scan_result(ScanResult(root="/r", size_threshold=GIB, error="Not a directory: /r"))
        assert "Error scanning /r: Not a directory: /r" in _printed(mock_console)

    @patch("diskcull.display.console")
    def test_scan_error(self, mock_console):
        show_scan_error(ScanResult(root="/x", size_threshold=1, error="boom"))
        assert "Error scanning /x: boom" in _printed(mock_console)

    @patch("diskcull.display.console")
    def test_found_line(self, mock_console):
        show_scan_found(ScanResult(root="/r", size_threshold=GIB, entries=_entries()), "cache items")
        assert "Found 2 cache items larger than 1.0 GB" in _printed(mock_console)


class TestShowDeletionSummary:
    @patch("diskcull.display.console")
    def test_counts_and_space(self, mock_console):
        report = DeletionReport(
            deleted=["/a"],
            failures=[DeletionFailure(path="/b", error="Permission denied")],
            bytes_freed=GIB,
        )
        show_deletion_summary(report)
        output = _printed(mock_console)
        assert "Error deleting /b: Permission denied" in output
        assert "Deleted 1 items. Failed to delete 1 items." in output
        assert "1.0 GB" in output

    @patch("diskcull.display.console")
    def test_dry_run(self, mock_console):
        show_deletion_summary(DeletionReport(deleted=["/a"], bytes_freed=GIB, dry_run=True))
        output = _printed(mock_console)
        assert "DRY RUN" in output
        assert "Deleted" not in output


class TestShowWorkflowOutcome:
    @pytest.mark.parametrize(
        "outcome,message",
        [
            (WorkflowOutcome.NOTHING_FOUND, "No files found matching the criteria."),
            (WorkflowOutcome.NOTHING_SELECTED, "No files selected for deletion."),
            (WorkflowOutcome.CANCELLED, "Operation cancelled."),
        ],
    )
    @patch("diskcull.display.console")
    def test_messages(self, mock_console, outcome, message):
        show_workflow_outcome(WorkflowReport(outcome=outcome))
        assert message in _printed(mock_console)

    @patch("diskcull.display.console")
    def test_completed(self, mock_console):
        report = WorkflowReport(
            outcome=WorkflowOutcome.COMPLETED,
            selected=["/a"],
            deletion=DeletionReport(deleted=["/a"], bytes_freed=10),
        )
        show_workflow_outcome(report)
        assert "Deleted 1 items" in _printed(mock_console)


class TestShowCacheRoots:
    @patch("diskcull.display.console")
    def test_prints_table(self, mock_console):
        show_cache_roots([("~/Library/Caches", ["/Users/me/Library/Caches"]), ("/none", [])])
        mock_console.print.assert_called_once()


class TestParseSelection:
    def test_single(self):
        assert parse_selection("2", 3) == [1]

    def test_list_and_range(self):
        assert parse_selection("1, 3 5-6", 6) == [0, 2, 4, 5]

    def test_reversed_range(self):
        assert parse_selection("3-1", 3) == [0, 1, 2]

    def test_duplicates_removed(self):
        assert parse_selection("2,2,1-2", 3) == [1, 0]

    @pytest.mark.parametrize("text", ["", "  ", "none", "N"])
    def test_nothing(self, text):
        assert parse_selection(text, 3) == []

    @pytest.mark.parametrize("text", ["all", "A", "*"])
    def test_all(self, text):
        assert parse_selection(text, 3) == [0, 1, 2]

    def test_out_of_range(self):
        with pytest.raises(ValueError, match="Out of range"):
            parse_selection("4", 3)

    def test_zero_out_of_range(self):
        with pytest.raises(ValueError, match="Out of range"):
            parse_selection("0", 3)

    def test_not_a_number(self):
        with pytest.raises(ValueError, match="Not a number"):
            parse_selection("x", 3)

    def test_invalid_range(self):
        with pytest.raises(ValueError, match="Invalid range"):
            parse_selection("1-", 3)


class TestConfirmAction:
    @patch("rich.prompt.Confirm.ask", return_value=True)
    def test_confirm_yes(self, mock_ask):
        assert confirm_action("Delete?") is True
        assert mock_ask.call_args.kwargs["default"] is False

    @patch("rich.prompt.Confirm.ask", return_value=False)
    def test_confirm_no(self, mock_ask):
        assert confirm_action("Delete?") is False
