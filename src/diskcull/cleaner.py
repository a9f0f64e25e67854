"""Deletion of selected paths with per-item error isolation."""

import logging
import os
import shutil
import stat
from collections.abc import Iterable
from pathlib import Path
from typing import Callable, Optional

from diskcull.config import PROTECTED_PATHS
from diskcull.models import DeletionFailure, DeletionReport
from diskcull.scanner import expand_path

log = logging.getLogger(__name__)


def is_path_safe(path: Path) -> bool:
    """
    Check if a path may be deleted.

    Only the protected locations themselves are refused; anything inside
    them is allowed.

    Args:
        path: Path to check

    Returns:
        True if safe to delete, False otherwise
    """
    path_str = os.path.normpath(os.path.abspath(path))

    for protected in PROTECTED_PATHS:
        if path_str == os.path.normpath(str(expand_path(protected))):
            return False

    return path_str != os.path.normpath(str(Path.home()))


def delete_path(path: str, dry_run: bool = False) -> Optional[str]:
    """
    Delete a file or directory tree.

    The path is re-checked right before deletion. Symlinks are removed
    as links and never followed.

    Args:
        path: Path to delete
        dry_run: If True, check the path but don't delete it

    Returns:
        None on success, otherwise the error message
    """
    if not is_path_safe(Path(path)):
        return "Refusing to delete protected path"

    try:
        st = os.lstat(path)

        if dry_run:
            return None

        if stat.S_ISDIR(st.st_mode):
            shutil.rmtree(path)
        else:
            os.unlink(path)

        return None

    except FileNotFoundError:
        return "No such file or directory"
    except PermissionError as e:
        return f"Permission denied: {e}"
    except OSError as e:
        return f"OS error: {e}"


def delete_paths(
    paths: Iterable[str],
    dry_run: bool = False,
    progress_callback: Callable[[str, int, int], None] | None = None,
) -> DeletionReport:
    """
    Delete each path independently.

    A failure on one path is recorded and the remaining paths are still
    processed. Nothing is retried.

    Args:
        paths: Paths to delete
        dry_run: If True, don't actually delete
        progress_callback: Optional callback(path, current, total)

    Returns:
        DeletionReport listing deleted paths and failures
    """
    paths = list(paths)
    report = DeletionReport(dry_run=dry_run)
    total = len(paths)

    for i, path in enumerate(paths):
        if progress_callback:
            progress_callback(path, i + 1, total)

        error = delete_path(path, dry_run=dry_run)
        if error:
            log.warning("Failed to delete %s: %s", path, error)
            report.failures.append(DeletionFailure(path=path, error=error))
        else:
            report.deleted.append(path)

    log.info("Deleted %d items, %d failed", report.deleted_count, report.failed_count)
    return report
