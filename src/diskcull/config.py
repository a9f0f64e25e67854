"""Defaults for scans, cache locations and deletion safety."""

from diskcull.models import CacheRoot
from diskcull.units import GIB

# Large-item scan
DEFAULT_SCAN_ROOT = "~/Documents"
DEFAULT_SIZE_THRESHOLD = GIB
DEFAULT_LIST_LIMIT = 1000

# Cache scan
DEFAULT_CACHE_THRESHOLD = GIB // 2

DEFAULT_CACHE_ROOTS: tuple[CacheRoot, ...] = (
    CacheRoot(pattern="~/Library/Caches"),
    CacheRoot(pattern="~/Library/Logs"),
    CacheRoot(pattern="~/Library/Application Support/*/Caches"),
    CacheRoot(pattern="/Library/Caches"),
    CacheRoot(pattern="~/.cache"),  # XDG cache home
)

# Number of largest candidates shown in the summary table
SUMMARY_TOP_N = 5

# Paths that are never deleted, even when selected (exact match only)
PROTECTED_PATHS = (
    "/",
    "~",
    "~/Documents",
    "~/Desktop",
    "~/Downloads",
    "~/Pictures",
    "~/Music",
    "~/Movies",
    "~/Library",
    "/System",
    "/Library",
    "/Applications",
    "/usr",
    "/bin",
    "/sbin",
    "/var",
    "/private",
    "/Users",
    "/home",
)
