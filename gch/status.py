"""Parsing of git status output into a repository snapshot."""

from typing import Protocol

from gch.models import (
    UNKNOWN_BRANCH,
    AheadBehind,
    FileEntry,
    FileStatus,
    GitResult,
    RepositorySnapshot,
)


class StatusSource(Protocol):
    def current_branch(self) -> GitResult: ...

    def ahead_behind(self) -> GitResult: ...

    def status(self) -> GitResult: ...


def parse_branch(result: GitResult) -> str:
    """Return the branch name, or the unknown sentinel if the query failed."""
    if not result.ok:
        return UNKNOWN_BRANCH
    return result.stdout.strip() or UNKNOWN_BRANCH


def _count(text: str) -> int:
    try:
        value = int(text.strip())
    except ValueError:
        return 0
    return max(value, 0)


def parse_ahead_behind(text: str) -> AheadBehind:
    """Parse ``<ahead>\\t<behind>``; unparseable fields count as 0."""
    parts = text.strip().split("\t")
    if len(parts) != 2:
        return AheadBehind(0, 0)
    return AheadBehind(ahead=_count(parts[0]), behind=_count(parts[1]))


def classify(index: str, worktree: str) -> FileStatus:
    """Classify a porcelain status code pair."""
    if index == "A":
        return FileStatus.ADDED
    if index == "M":
        return FileStatus.STAGED
    if index == "D":
        return FileStatus.DELETED
    if index == "R":
        return FileStatus.RENAMED
    if index == "?" and worktree == "?":
        return FileStatus.UNTRACKED
    if worktree == "M":
        return FileStatus.MODIFIED
    if worktree == "D":
        return FileStatus.DELETED
    return FileStatus.MODIFIED


def parse_status_line(line: str) -> FileEntry | None:
    """Parse one ``XY path`` porcelain line; short lines yield None."""
    if len(line) < 3:
        return None
    index, worktree = line[0], line[1]
    return FileEntry(
        path=line[3:],
        status=classify(index, worktree),
        staged=index not in (" ", "?"),
    )


def parse_porcelain(text: str) -> list[FileEntry]:
    """Parse the output of git status --porcelain."""
    entries: list[FileEntry] = []
    seen: set[str] = set()
    for line in text.splitlines():
        entry = parse_status_line(line)
        if entry is None or entry.path in seen:
            continue
        seen.add(entry.path)
        entries.append(entry)
    return entries


def build_snapshot(
    branch: GitResult, ahead_behind: GitResult, status: GitResult
) -> RepositorySnapshot:
    """Combine the three status queries into a snapshot."""
    counts = parse_ahead_behind(ahead_behind.stdout) if ahead_behind.ok else AheadBehind(0, 0)
    files = parse_porcelain(status.stdout) if status.ok else []
    return RepositorySnapshot(
        current_branch=parse_branch(branch),
        ahead=counts.ahead,
        behind=counts.behind,
        files=tuple(files),
    )


def load_snapshot(source: StatusSource) -> RepositorySnapshot:
    """Query the repository and build a fresh snapshot."""
    return build_snapshot(source.current_branch(), source.ahead_behind(), source.status())
