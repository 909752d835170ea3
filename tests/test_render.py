from __future__ import annotations

from gch import render
from gch.models import FileEntry, FileStatus, Mode
from gch.state import AppState

from conftest import FakeClock, FakeGateway


def test_header_shows_branch_and_counts(clock: FakeClock) -> None:
    app_state = AppState(FakeGateway(porcelain="?? a\n", counts="2\t1\n"), clock=clock)
    app_state.refresh()
    assert render.render_header(app_state).plain == (
        "Git Commit Helper - Branch: main (↑2 ↓1) - Files: 1"
    )


def test_header_hides_zero_counts(state: AppState) -> None:
    assert render.render_header(state).plain == "Git Commit Helper - Branch: main - Files: 3"


def test_file_rows(state: AppState) -> None:
    lines = render.render_file_list(state).plain.splitlines()
    assert lines == [
        "▶ ● M src/a.rs",
        "  ○ ? src/b.rs",
        "  ○ M src/c.rs",
    ]


def test_file_row_marks_deleted() -> None:
    row = render.format_file_row(FileEntry("gone.txt", FileStatus.DELETED, False), False)
    assert row.plain == "  ○ D gone.txt"


def test_body_follows_mode(state: AppState) -> None:
    state.request_help()
    assert "Keyboard Shortcuts" in render.render_body(state).plain
    assert render.render_status_bar(state).plain.startswith("Mode: HELP |")
    state.back()

    state.request_diff()
    assert state.mode is Mode.DIFF_VIEW
    assert "+added" in render.render_body(state).plain


def test_draft_view_counts_characters(state: AppState) -> None:
    state.request_commit()
    for char in "feat: x":
        state.draft.insert(char)
    body = render.render_body(state).plain
    assert "Commit Message (7)" in body
    assert body.endswith("feat: x ")


def test_notification_text(state: AppState) -> None:
    assert render.render_notification(state).plain == ""
    state.notify("Push successful")
    assert render.render_notification(state).plain == "Push successful"


def test_plain_listing(state: AppState) -> None:
    assert render.render_plain(state) == [
        "Branch: main",
        "+ M src/a.rs",
        "- ? src/b.rs",
        "- M src/c.rs",
    ]
