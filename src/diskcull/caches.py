"""Discovery of oversized entries in well-known cache directories."""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from result import Err, Ok

from diskcull.config import DEFAULT_CACHE_ROOTS, DEFAULT_CACHE_THRESHOLD
from diskcull.models import CacheRoot, CandidateEntry, ScanResult
from diskcull.scanner import expand_path
from diskcull.sizing import PathLike, list_children, measure_entry, stat_node
from diskcull.units import format_size

log = logging.getLogger(__name__)


def _exists(path: PathLike) -> bool:
    """Whether a path can be statted; unreadable paths count as absent."""
    return isinstance(stat_node(path), Ok)


def resolve_cache_root(cache_root: CacheRoot) -> list[Path]:
    """
    Resolve a cache root pattern to existing directories.

    A literal path resolves to itself if it exists. A wildcard pattern
    resolves to every ``<base>/<child>/<remainder>`` that exists, where
    ``<child>`` ranges over the direct children of ``<base>``.

    Args:
        cache_root: Cache root pattern

    Returns:
        Concrete paths, possibly empty
    """
    if not cache_root.has_wildcard:
        path = expand_path(cache_root.pattern)
        return [path] if _exists(path) else []

    base, remainder = cache_root.split()
    base_path = expand_path(base)
    if not _exists(base_path):
        return []

    children = list_children(base_path)
    if isinstance(children, Err):
        return []

    resolved = []
    for child in children.ok_value:
        candidate = Path(child) / remainder if remainder else Path(child)
        if _exists(candidate):
            resolved.append(candidate)
    return resolved


def scan_cache_dir(directory: Path, size_threshold: int) -> list[CandidateEntry]:
    """
    Shallow scan of one cache directory.

    Only the direct children are evaluated; a child directory is sized
    as a whole and never split into its own children.

    Args:
        directory: Resolved cache directory
        size_threshold: Minimum size in bytes (inclusive)

    Returns:
        Entries for the children at or above the threshold
    """
    children = list_children(directory)
    if isinstance(children, Err):
        log.debug("Cannot read cache directory %s", directory)
        return []

    found = []
    for child in children.ok_value:
        measured = measure_entry(child)
        if isinstance(measured, Err):
            continue
        size, is_directory = measured.ok_value
        if size >= size_threshold:
            found.append(CandidateEntry(path=child, size_bytes=size, is_directory=is_directory))
    return found


def scan_caches(
    size_threshold: int = DEFAULT_CACHE_THRESHOLD,
    cache_roots: Iterable[CacheRoot] = DEFAULT_CACHE_ROOTS,
) -> ScanResult:
    """
    Find oversized entries directly inside the known cache directories.

    Missing roots are skipped silently; a root or child that cannot be
    read is skipped without affecting the others. There is no result cap.

    Args:
        size_threshold: Minimum size in bytes (inclusive)
        cache_roots: Cache root patterns to search

    Returns:
        ScanResult sorted by size descending
    """
    cache_roots = tuple(cache_roots)
    result = ScanResult(
        root=", ".join(str(r) for r in cache_roots),
        size_threshold=size_threshold,
    )

    for cache_root in cache_roots:
        for directory in resolve_cache_root(cache_root):
            result.entries.extend(scan_cache_dir(directory, size_threshold))

    result.entries.sort(key=lambda e: e.size_bytes, reverse=True)
    log.info(
        "Found %d cache items larger than %s in %d cache roots",
        len(result.entries),
        format_size(size_threshold),
        len(cache_roots),
    )
    return result


def describe_cache_roots(
    cache_roots: Iterable[CacheRoot] = DEFAULT_CACHE_ROOTS,
) -> list[tuple[str, list[str]]]:
    """
    Pair each cache root pattern with what it currently resolves to.

    Returns:
        List of (pattern, [resolved paths])
    """
    return [
        (cache_root.pattern, [os.fspath(p) for p in resolve_cache_root(cache_root)])
        for cache_root in cache_roots
    ]
