from __future__ import annotations

import pytest

from gch.models import FileEntry, FileStatus, GitResult
from gch.status import (
    build_snapshot,
    classify,
    load_snapshot,
    parse_ahead_behind,
    parse_branch,
    parse_porcelain,
    parse_status_line,
)

from conftest import FakeGateway


@pytest.mark.parametrize(
    ("code", "status", "staged"),
    [
        ("A ", FileStatus.ADDED, True),
        ("AM", FileStatus.ADDED, True),
        ("M ", FileStatus.STAGED, True),
        ("MM", FileStatus.STAGED, True),
        ("D ", FileStatus.DELETED, True),
        ("R ", FileStatus.RENAMED, True),
        ("??", FileStatus.UNTRACKED, False),
        (" M", FileStatus.MODIFIED, False),
        (" D", FileStatus.DELETED, False),
        ("UU", FileStatus.MODIFIED, True),
        ("C ", FileStatus.MODIFIED, True),
        ("!!", FileStatus.MODIFIED, True),
    ],
)
def test_status_line_classification(code: str, status: FileStatus, staged: bool) -> None:
    entry = parse_status_line(f"{code} some/path.txt")
    assert entry == FileEntry("some/path.txt", status, staged)


def test_classify_index_code_takes_priority() -> None:
    assert classify("A", "D") is FileStatus.ADDED
    assert classify("M", "D") is FileStatus.STAGED
    assert classify("?", "M") is FileStatus.MODIFIED


def test_short_lines_are_dropped() -> None:
    assert parse_status_line("") is None
    assert parse_status_line("M ") is None
    assert parse_porcelain("??\nM  kept.txt\nx\n") == [
        FileEntry("kept.txt", FileStatus.STAGED, True)
    ]


def test_porcelain_scenario() -> None:
    assert parse_porcelain("M  src/a.rs\n?? src/b.rs\n") == [
        FileEntry("src/a.rs", FileStatus.STAGED, True),
        FileEntry("src/b.rs", FileStatus.UNTRACKED, False),
    ]


def test_porcelain_keeps_first_of_duplicate_paths() -> None:
    entries = parse_porcelain("M  a.txt\n?? a.txt\n")
    assert entries == [FileEntry("a.txt", FileStatus.STAGED, True)]


def test_renamed_path_is_kept_verbatim() -> None:
    (entry,) = parse_porcelain("R  old.txt -> new.txt\n")
    assert entry.path == "old.txt -> new.txt"
    assert entry.status is FileStatus.RENAMED


@pytest.mark.parametrize(
    ("text", "ahead", "behind"),
    [
        ("2\t0\n", 2, 0),
        ("0\t5", 0, 5),
        ("3\tx\n", 3, 0),
        ("x\t4\n", 0, 4),
        ("2 0\n", 0, 0),
        ("", 0, 0),
        ("1\t2\t3", 0, 0),
        ("-1\t2", 0, 2),
    ],
)
def test_parse_ahead_behind(text: str, ahead: int, behind: int) -> None:
    counts = parse_ahead_behind(text)
    assert (counts.ahead, counts.behind) == (ahead, behind)


def test_parse_branch() -> None:
    assert parse_branch(GitResult(True, "feature/x\n", "")) == "feature/x"
    assert parse_branch(GitResult(True, "  \n", "")) == "unknown"
    assert parse_branch(GitResult(False, "main\n", "fatal")) == "unknown"


def test_build_snapshot_defaults_failed_queries() -> None:
    failed = GitResult(False, "", "fatal: no upstream")
    snapshot = build_snapshot(failed, failed, failed)
    assert snapshot.current_branch == "unknown"
    assert (snapshot.ahead, snapshot.behind) == (0, 0)
    assert snapshot.files == ()


def test_build_snapshot_ignores_stdout_of_failed_ahead_behind() -> None:
    snapshot = build_snapshot(
        GitResult(True, "main\n", ""),
        GitResult(False, "7\t1\n", "error"),
        GitResult(True, "?? n.txt\n", ""),
    )
    assert (snapshot.ahead, snapshot.behind) == (0, 0)
    assert [entry.path for entry in snapshot.files] == ["n.txt"]


def test_snapshot_queries_use_expected_arguments() -> None:
    gateway = FakeGateway(porcelain="A  new.py\n", branch="dev", counts="1\t2\n")
    snapshot = load_snapshot(gateway)
    assert gateway.calls == [
        ["branch", "--show-current"],
        ["rev-list", "--left-right", "--count", "HEAD...@{u}"],
        ["status", "--porcelain"],
    ]
    assert snapshot.current_branch == "dev"
    assert (snapshot.ahead, snapshot.behind) == (1, 2)
    assert snapshot.files == (FileEntry("new.py", FileStatus.ADDED, True),)
