"""Text rendering of the application state."""

from typing import assert_never

from rich.text import Text

from gch.models import CommitDraft, FileEntry, Mode
from gch.state import AppState

TITLE = "Git Commit Helper"
SUBJECT_WIDTH = 50

MODE_LABELS = {
    Mode.FILE_LIST: "FILE LIST",
    Mode.DIFF_VIEW: "DIFF VIEW",
    Mode.COMMIT_COMPOSE: "COMMIT MESSAGE",
    Mode.HELP: "HELP",
}

HELP_LINES = [
    f"{TITLE} - Keyboard Shortcuts",
    "",
    "File List Mode:",
    "  ↑/k, ↓/j     - Navigate files",
    "  Space        - Stage/unstage file",
    "  d            - View diff of selected file",
    "  c            - Start commit (if files are staged)",
    "  p            - Push to remote",
    "  r            - Refresh git status",
    "  h/F1         - Show this help",
    "  q            - Quit",
    "",
    "Commit Message Mode:",
    "  Tab          - Cycle through commit prefixes (empty message only)",
    "  ←/→ Home/End - Move cursor",
    "  Enter        - Commit changes",
    "  Esc          - Cancel commit",
    "",
    "Diff View Mode:",
    "  PgUp/PgDn    - Scroll the diff",
    "  Esc/q        - Return to file list",
    "",
    "Press Esc or q to close this help",
]


def format_ahead_behind(ahead: int, behind: int) -> str:
    if ahead == 0 and behind == 0:
        return ""
    return f" (↑{ahead} ↓{behind})"


def render_header(state: AppState) -> Text:
    snapshot = state.snapshot
    counts = format_ahead_behind(snapshot.ahead, snapshot.behind)
    return Text(
        f"{TITLE} - Branch: {snapshot.current_branch}{counts} - Files: {len(state.files)}",
        style="bold yellow",
    )


def format_file_row(entry: FileEntry, selected: bool) -> Text:
    """Render one file as ``<marker> <code> <path>``."""
    marker = "●" if entry.staged else "○"
    color = "green" if entry.staged else "red"
    row = Text("▶ " if selected else "  ")
    row.append(f"{marker} {entry.status.code} ", style=color)
    row.append(entry.path)
    if selected:
        row.stylize("reverse")
    return row


def render_file_list(state: AppState) -> Text:
    if not state.files:
        return Text("Working tree clean", style="dim")
    rows = [
        format_file_row(entry, idx == state.selected_file)
        for idx, entry in enumerate(state.files)
    ]
    return Text("\n").join(rows)


def _diff_style(line: str) -> str:
    if line.startswith(("+++", "---")):
        return "bold"
    if line.startswith("+"):
        return "green"
    if line.startswith("-"):
        return "red"
    if line.startswith("@@"):
        return "cyan"
    return ""


def render_diff(content: str) -> Text:
    if not content.strip():
        return Text("No differences", style="dim")
    return Text("\n").join(Text(line, style=_diff_style(line)) for line in content.splitlines())


def render_draft(draft: CommitDraft) -> Text:
    """Render the prefix catalog and the message with its cursor."""
    text = Text("Prefixes (Tab to cycle): ", style="dim")
    for idx, prefix in enumerate(draft.prefixes):
        style = "bold yellow" if idx == draft.selected_prefix else ""
        text.append(prefix.strip(), style=style)
        text.append(" ")

    length = len(draft.message)
    text.append(f"\n\nCommit Message ({length})\n", style="bold")
    color = "red" if length > SUBJECT_WIDTH else ""
    before = draft.message[: draft.cursor]
    at_cursor = draft.message[draft.cursor : draft.cursor + 1] or " "
    after = draft.message[draft.cursor + 1 :]
    text.append(before, style=color)
    text.append(at_cursor, style=f"{color} reverse".strip())
    text.append(after, style=color)
    return text


def render_help() -> Text:
    return Text("\n".join(HELP_LINES))


def render_body(state: AppState) -> Text:
    mode = state.mode
    if mode is Mode.FILE_LIST:
        return render_file_list(state)
    if mode is Mode.DIFF_VIEW:
        return render_diff(state.diff_content)
    if mode is Mode.COMMIT_COMPOSE:
        return render_draft(state.draft)
    if mode is Mode.HELP:
        return render_help()
    assert_never(mode)


def render_status_bar(state: AppState) -> Text:
    return Text(f"Mode: {MODE_LABELS[state.mode]} | Press 'h' for help | 'q' to quit")


def render_notification(state: AppState) -> Text:
    if state.notification is None:
        return Text("")
    return Text(state.notification.message)


def render_plain(state: AppState) -> list[str]:
    """Render the snapshot for non-interactive output."""
    snapshot = state.snapshot
    counts = format_ahead_behind(snapshot.ahead, snapshot.behind)
    lines = [f"Branch: {snapshot.current_branch}{counts}"]
    for entry in state.files:
        marker = "+" if entry.staged else "-"
        lines.append(f"{marker} {entry.status.code} {entry.path}")
    return lines
