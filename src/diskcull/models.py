"""Data models for diskcull."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from diskcull.units import format_size


class SkipReason(str, Enum):
    """Why a filesystem node contributed nothing to a scan."""

    NOT_FOUND = "not_found"  # Vanished, or a dangling symlink
    PERMISSION_DENIED = "permission_denied"
    SYMLINK_LOOP = "symlink_loop"
    NOT_A_DIRECTORY = "not_a_directory"
    OS_ERROR = "os_error"


class SkippedNode(BaseModel):
    """A node that could not be read during a walk."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path that could not be read")
    reason: SkipReason = Field(..., description="Why it was skipped")
    detail: str = Field("", description="Underlying error message")


class CandidateEntry(BaseModel):
    """A file or directory at or above the active size threshold."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute filesystem path")
    size_bytes: int = Field(..., ge=0, description="Own size, or aggregate size for directories")
    is_directory: bool = Field(False, description="Whether size_bytes is an aggregate")

    @property
    def size_human(self) -> str:
        """Human-readable size string."""
        return format_size(self.size_bytes)

    @property
    def kind(self) -> str:
        """Display label for the entry type."""
        return "Directory" if self.is_directory else "File"


class ScanResult(BaseModel):
    """Candidates produced by one scan pass."""

    root: str = Field(..., description="What was scanned (directory or cache root set)")
    size_threshold: int = Field(..., ge=0, description="Minimum size that was reported")
    entries: list[CandidateEntry] = Field(default_factory=list)
    truncated: bool = Field(False, description="Whether the result cap stopped the walk early")
    error: Optional[str] = Field(None, description="Scan-level failure message")

    @property
    def ok(self) -> bool:
        """Whether the scan root could be walked at all."""
        return self.error is None

    @property
    def total_bytes(self) -> int:
        """Total size of all candidates."""
        return sum(e.size_bytes for e in self.entries)

    @property
    def paths(self) -> list[str]:
        """Candidate paths in result order."""
        return [e.path for e in self.entries]

    def sorted_by_size(self) -> list[CandidateEntry]:
        """Entries ordered largest first."""
        return sorted(self.entries, key=lambda e: e.size_bytes, reverse=True)

    def top(self, count: int) -> list[CandidateEntry]:
        """The ``count`` largest entries."""
        return self.sorted_by_size()[:count]


class ScanConfig(BaseModel):
    """Parameters of a threshold scan."""

    model_config = ConfigDict(frozen=True)

    root_directory: str = Field(..., description="Directory to scan (supports ~ expansion)")
    size_threshold: int = Field(..., ge=0, description="Minimum size in bytes (inclusive)")
    list_limit: int = Field(..., ge=1, description="Maximum number of candidates to collect")

    @field_validator("root_directory")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("root_directory must not be empty")
        return value.strip()


class CacheRoot(BaseModel):
    """
    A well-known cache location.

    Either a literal path or a pattern in which exactly one whole path
    segment is ``*``, standing for any immediate child of the part before
    it (``~/Library/Application Support/*/Caches``).
    """

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., description="Literal path or single-wildcard pattern")

    @field_validator("pattern")
    @classmethod
    def _single_wildcard_segment(cls, value: str) -> str:
        if not value:
            raise ValueError("cache root must not be empty")
        wildcards = value.count("*")
        if wildcards > 1:
            raise ValueError(f"Only one wildcard is supported: {value!r}")
        if wildcards == 1 and "*" not in value.split("/"):
            raise ValueError(f"Wildcard must be a whole path segment: {value!r}")
        return value

    @property
    def has_wildcard(self) -> bool:
        """Whether the pattern needs expanding."""
        return "*" in self.pattern

    def split(self) -> tuple[str, str]:
        """
        Split a wildcard pattern around its ``*`` segment.

        Returns:
            Tuple of (base directory, remainder after the wildcard). The
            remainder is empty when the wildcard is the last segment.
        """
        segments = self.pattern.split("/")
        index = segments.index("*")
        base = "/".join(segments[:index]) or "/"
        remainder = "/".join(segments[index + 1 :])
        return base, remainder

    def __str__(self) -> str:
        return self.pattern


class DeletionFailure(BaseModel):
    """A selected path that could not be deleted."""

    path: str = Field(..., description="Path that failed")
    error: str = Field(..., description="Underlying cause")


class DeletionReport(BaseModel):
    """Per-item outcome of deleting a selection."""

    deleted: list[str] = Field(default_factory=list)
    failures: list[DeletionFailure] = Field(default_factory=list)
    bytes_freed: int = Field(0, description="Size of what was deleted, as measured beforehand")
    dry_run: bool = Field(False, description="Whether this was a dry run")

    @property
    def deleted_count(self) -> int:
        """Number of paths deleted."""
        return len(self.deleted)

    @property
    def failed_count(self) -> int:
        """Number of paths that could not be deleted."""
        return len(self.failures)


class WorkflowOutcome(str, Enum):
    """How a selection and deletion round ended."""

    NOTHING_FOUND = "nothing_found"
    NOTHING_SELECTED = "nothing_selected"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class WorkflowReport(BaseModel):
    """Result of one selection and deletion round."""

    outcome: WorkflowOutcome
    selected: list[str] = Field(default_factory=list)
    deletion: Optional[DeletionReport] = None
