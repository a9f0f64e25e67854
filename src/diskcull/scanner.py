"""Threshold scanning for large files and directories."""

import logging
import os
import stat
from collections.abc import Iterator
from pathlib import Path

from result import Err, Ok, Result

from diskcull.config import DEFAULT_LIST_LIMIT, DEFAULT_SIZE_THRESHOLD
from diskcull.models import CandidateEntry, ScanConfig, ScanResult
from diskcull.sizing import compute_size, list_children, stat_node
from diskcull.units import format_size

log = logging.getLogger(__name__)


def expand_path(path: str) -> Path:
    """Expand a leading ~ to the operator's home directory."""
    return Path(os.path.expanduser(path))


def open_root(root: Path) -> Result[list[str], str]:
    """
    Validate a scan root and list its children.

    Args:
        root: Expanded root directory

    Returns:
        Ok(child paths), or Err(message) if the root cannot be walked
    """
    stat_result = stat_node(root)
    if isinstance(stat_result, Err):
        skipped = stat_result.err_value
        return Err(f"Cannot access {root}: {skipped.detail}")

    if not stat.S_ISDIR(stat_result.ok_value.st_mode):
        return Err(f"Not a directory: {root}")

    children = list_children(root)
    if isinstance(children, Err):
        return Err(f"Cannot read {root}: {children.err_value.detail}")

    return Ok(children.ok_value)


def find_large_items(
    root_directory: str,
    size_threshold: int = DEFAULT_SIZE_THRESHOLD,
    list_limit: int = DEFAULT_LIST_LIMIT,
) -> ScanResult:
    """
    Find files and directories at or above a size threshold.

    A directory whose aggregate size meets the threshold is reported as
    a single entry and not descended into. A smaller directory is walked
    so that oversized items further down are still found. The walk stops
    as soon as ``list_limit`` entries have been collected.

    Entries that cannot be read are skipped. A root that cannot be read
    yields an empty result with ``error`` set.

    Args:
        root_directory: Directory to scan (supports ~ expansion)
        size_threshold: Minimum size in bytes (inclusive)
        list_limit: Maximum number of entries to collect

    Returns:
        ScanResult sorted by size descending

    Raises:
        ValueError: If list_limit is less than 1
    """
    if list_limit < 1:
        raise ValueError(f"list_limit must be at least 1, got {list_limit}")

    root = Path(os.path.abspath(expand_path(root_directory)))
    result = ScanResult(root=str(root), size_threshold=size_threshold)

    children = open_root(root)
    if isinstance(children, Err):
        log.warning("Scan of %s failed: %s", root, children.err_value)
        result.error = children.err_value
        return result

    # One iterator per open directory, so siblings resume after a descent
    # in the same order a recursive walk would visit them.
    stack: list[Iterator[str]] = [iter(children.ok_value)]

    while stack:
        path = next(stack[-1], None)
        if path is None:
            stack.pop()
            continue

        stat_result = stat_node(path)
        if isinstance(stat_result, Err):
            continue
        st = stat_result.ok_value

        if stat.S_ISDIR(st.st_mode):
            size = compute_size(path)
            if size < size_threshold:
                grandchildren = list_children(path)
                if isinstance(grandchildren, Ok):
                    stack.append(iter(grandchildren.ok_value))
                continue
            result.entries.append(CandidateEntry(path=path, size_bytes=size, is_directory=True))
        elif st.st_size >= size_threshold:
            result.entries.append(CandidateEntry(path=path, size_bytes=st.st_size))
        else:
            continue

        if len(result.entries) >= list_limit:
            result.truncated = True
            break

    result.entries.sort(key=lambda e: e.size_bytes, reverse=True)
    log.info(
        "Found %d items larger than %s under %s",
        len(result.entries),
        format_size(size_threshold),
        root,
    )
    return result


def scan(config: ScanConfig) -> ScanResult:
    """Run a threshold scan described by a ScanConfig."""
    return find_large_items(
        config.root_directory,
        size_threshold=config.size_threshold,
        list_limit=config.list_limit,
    )
