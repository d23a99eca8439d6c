"""Per-suite and per-case temporary directories for test runs."""

from __future__ import annotations

import os
import shutil
from pathlib import Path

__all__ = ["suite_tmp_dir", "TestWithTmp"]


def suite_tmp_dir(suite_name: str) -> str:
    """Return the directory for a suite: ``$TMPDIR/<suite>-<pid>``.

    ``/tmp`` is used when ``TMPDIR`` is not set.
    """
    base = os.environ.get("TMPDIR")
    if base is None:
        base = "/tmp"
    return f"{base}/{suite_name}-{os.getpid()}"


def _remove_all(path: str) -> None:
    target = Path(path)
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()


class TestWithTmp:
    """A temporary directory for one test case, inside its suite's directory.

    The suite directory must be made first with :meth:`set_up_suite`. The case
    directory is created on construction and removed by :meth:`close`.
    """

    __test__ = False

    def __init__(self, suite_name: str, case_name: str) -> None:
        self._casedir = f"{suite_tmp_dir(suite_name)}/{case_name}"
        Path(self._casedir).mkdir(exist_ok=True)

    @classmethod
    def set_up_suite(cls, suite_name: str) -> None:
        """Create the suite's directory."""
        Path(suite_tmp_dir(suite_name)).mkdir(exist_ok=True)

    @classmethod
    def tear_down_suite(cls, suite_name: str) -> None:
        """Remove the suite's directory and everything in it."""
        _remove_all(suite_tmp_dir(suite_name))

    def case_tmp_dir(self) -> str:
        return self._casedir

    def close(self) -> None:
        """Remove the case directory and everything in it."""
        _remove_all(self._casedir)

    def __enter__(self) -> "TestWithTmp":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()