"""Git subprocess operations."""

import logging
import subprocess
from pathlib import Path
from typing import Sequence

from gch.models import GitResult

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"


def _decode(data: bytes | None) -> str:
    return (data or b"").decode("utf-8", errors="replace")


class GitGateway:
    """Issues git commands against one working directory.

    Every call returns a GitResult; a failing command, a missing git
    executable and an expired timeout are all reported as ``ok=False``.
    """

    def __init__(self, cwd: Path | None = None, timeout: float | None = None) -> None:
        self.cwd = cwd
        self.timeout = timeout

    def run(self, args: Sequence[str]) -> GitResult:
        """Run a git command and capture its output."""
        try:
            completed = subprocess.run(
                ["git", *args],
                cwd=self.cwd,
                check=False,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.debug("git %s timed out after %ss", " ".join(args), self.timeout)
            return GitResult(False, "", f"git {args[0]} timed out after {self.timeout}s")
        except OSError as exc:
            logger.debug("git %s could not start: %s", " ".join(args), exc)
            return GitResult(False, "", str(exc))

        logger.debug("git %s -> %d", " ".join(args), completed.returncode)
        return GitResult(
            ok=completed.returncode == 0,
            stdout=_decode(completed.stdout),
            stderr=_decode(completed.stderr),
        )

    def repo_root(self) -> Path | None:
        """Get the top-level directory of the work tree, if inside one."""
        result = self.run(["rev-parse", "--show-toplevel"])
        if not result.ok or not result.stdout.strip():
            return None
        return Path(result.stdout.strip())

    def current_branch(self) -> GitResult:
        """Query the checked-out branch name."""
        return self.run(["branch", "--show-current"])

    def ahead_behind(self) -> GitResult:
        """Count commits ahead/behind the upstream tracking branch."""
        return self.run(["rev-list", "--left-right", "--count", "HEAD...@{u}"])

    def status(self) -> GitResult:
        """Get porcelain file status."""
        return self.run(["status", "--porcelain"])

    def stage(self, path: str) -> GitResult:
        return self.run(["add", path])

    def unstage(self, path: str) -> GitResult:
        return self.run(["reset", "HEAD", path])

    def diff(self, path: str, staged: bool) -> GitResult:
        """Diff a path against the index, or the index against HEAD when staged."""
        args = ["diff", "--staged", path] if staged else ["diff", path]
        return self.run(args)

    def commit(self, message: str) -> GitResult:
        return self.run(["commit", "-m", message])

    def push(self, branch: str, remote: str = DEFAULT_REMOTE) -> GitResult:
        """Push a branch to a remote."""
        return self.run(["push", remote, branch])
