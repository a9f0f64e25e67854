"""Aggregate size of filesystem subtrees, tolerating unreadable nodes.

Every node read yields a ``Result``: ``Ok`` with the value, or ``Err``
with a :class:`SkippedNode` describing why it was unreadable. Callers of
:func:`compute_size` only ever see the total; unreadable nodes count as
zero and never abort the sum for their siblings.
"""

import errno
import logging
import os
import stat
from dataclasses import dataclass, field
from typing import Union

from result import Err, Ok, Result

from diskcull.models import SkippedNode, SkipReason

log = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


@dataclass
class SizeTally:
    """Outcome of measuring one subtree."""

    total_bytes: int = 0
    file_count: int = 0
    dir_count: int = 0
    skipped: list[SkippedNode] = field(default_factory=list)


def skip_reason(exc: OSError) -> SkipReason:
    """Map an OS error to the reason a node was skipped."""
    if isinstance(exc, FileNotFoundError):
        return SkipReason.NOT_FOUND
    if isinstance(exc, PermissionError):
        return SkipReason.PERMISSION_DENIED
    if isinstance(exc, NotADirectoryError):
        return SkipReason.NOT_A_DIRECTORY
    if exc.errno == errno.ELOOP:
        return SkipReason.SYMLINK_LOOP
    return SkipReason.OS_ERROR


def _skipped(path: str, exc: OSError) -> SkippedNode:
    node = SkippedNode(path=path, reason=skip_reason(exc), detail=exc.strerror or str(exc))
    log.debug("Skipping %s (%s)", path, node.reason.value)
    return node


def stat_node(path: PathLike) -> Result[os.stat_result, SkippedNode]:
    """Stat a path, following symlinks."""
    path = os.fspath(path)
    try:
        return Ok(os.stat(path))
    except OSError as e:
        return Err(_skipped(path, e))


def list_children(path: PathLike) -> Result[list[str], SkippedNode]:
    """List the full paths of a directory's direct children."""
    path = os.fspath(path)
    try:
        with os.scandir(path) as entries:
            return Ok([entry.path for entry in entries])
    except OSError as e:
        return Err(_skipped(path, e))


def measure_tree(path: PathLike) -> SizeTally:
    """
    Measure the total size of everything reachable from a path.

    Symlinks are followed. There is no cycle detection: a symlink loop
    ends when the OS refuses to resolve the path any further, which
    counts as an unreadable node. The walk uses an explicit stack, so
    tree depth is not limited by the interpreter's recursion limit.

    Args:
        path: File or directory to measure

    Returns:
        SizeTally with the total of all readable file sizes and every
        node that had to be skipped
    """
    tally = SizeTally()
    pending = [os.fspath(path)]

    while pending:
        current = pending.pop()

        stat_result = stat_node(current)
        if isinstance(stat_result, Err):
            tally.skipped.append(stat_result.err_value)
            continue

        st = stat_result.ok_value
        if not stat.S_ISDIR(st.st_mode):
            tally.total_bytes += st.st_size
            tally.file_count += 1
            continue

        children = list_children(current)
        if isinstance(children, Err):
            tally.skipped.append(children.err_value)
            continue

        tally.dir_count += 1
        pending.extend(children.ok_value)

    return tally


def compute_size(path: PathLike) -> int:
    """
    Total byte size of a file or directory subtree.

    Never raises. A path that cannot be statted is 0, a directory that
    cannot be listed is 0, and unreadable descendants add nothing.
    """
    return measure_tree(path).total_bytes


def measure_entry(path: PathLike) -> Result[tuple[int, bool], SkippedNode]:
    """
    Size a single scan entry.

    Args:
        path: Entry to size

    Returns:
        Ok((size_bytes, is_directory)), where directories carry their
        aggregate size, or Err if the entry itself cannot be statted
    """
    stat_result = stat_node(path)
    if isinstance(stat_result, Err):
        return stat_result

    st = stat_result.ok_value
    if stat.S_ISDIR(st.st_mode):
        return Ok((compute_size(path), True))
    return Ok((st.st_size, False))
