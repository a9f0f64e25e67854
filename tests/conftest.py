"""Shared fixtures for diskcull tests."""

import os
from pathlib import Path

import pytest


def write_sparse(path: Path, size: int) -> Path:
    """Create a file of the given apparent size without using the disk."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "wb") as f:
        f.truncate(size)
    return path


@pytest.fixture
def sparse_file():
    """Factory for sparse files: sparse_file(path, size)."""
    return write_sparse


@pytest.fixture
def fail_on(monkeypatch):
    """
    Make os.stat or os.scandir fail for specific paths.

    Usage: fail_on("stat", path, PermissionError)
    """
    real = {"stat": os.stat, "scandir": os.scandir}
    failing: dict[str, dict[str, type[OSError]]] = {"stat": {}, "scandir": {}}

    def fake_stat(path, *args, **kwargs):
        exc = failing["stat"].get(os.fspath(path))
        if exc:
            raise exc(13, "Injected failure", os.fspath(path))
        return real["stat"](path, *args, **kwargs)

    def fake_scandir(path="."):
        exc = failing["scandir"].get(os.fspath(path))
        if exc:
            raise exc(13, "Injected failure", os.fspath(path))
        return real["scandir"](path)

    monkeypatch.setattr(os, "stat", fake_stat)
    monkeypatch.setattr(os, "scandir", fake_scandir)

    def _fail(call: str, path, exc: type[OSError] = PermissionError) -> None:
        failing[call][os.fspath(path)] = exc

    return _fail
