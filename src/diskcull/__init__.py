"""diskcull - find and delete oversized files, folders and caches."""

__version__ = "0.3.0"
