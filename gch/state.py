"""Application state and the transitions driven by user actions."""

import logging
import time
from collections.abc import Callable, Sequence

from gch.config import Settings
from gch.git_ops import GitGateway
from gch.models import (
    CommitDraft,
    FileEntry,
    GitResult,
    Mode,
    Notification,
    RepositorySnapshot,
)
from gch.status import load_snapshot

logger = logging.getLogger(__name__)

NO_STAGED_FILES = "No staged files to commit"
EMPTY_COMMIT_MESSAGE = "Commit message cannot be empty"
COMMIT_SUCCESSFUL = "Commit successful"
PUSH_SUCCESSFUL = "Push successful"


def _failure_text(prefix: str, result: GitResult) -> str:
    return f"{prefix}: {result.stderr.strip()}"


class AppState:
    """Everything the UI shows, and the only place it changes.

    Each mutating operation runs its git commands synchronously and then
    resynchronises with the repository, so ``files`` always reflects what
    git reported last.
    """

    def __init__(
        self,
        gateway: GitGateway,
        settings: Settings | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.gateway = gateway
        self.settings = settings or Settings()
        self.clock = clock

        self.mode = Mode.FILE_LIST
        self.snapshot = RepositorySnapshot.empty()
        self.files: list[FileEntry] = []
        self.selected_file: int | None = None
        self.draft = self._new_draft()
        self.diff_content = ""
        self.notification: Notification | None = None
        self.should_quit = False

    def _new_draft(self) -> CommitDraft:
        return CommitDraft(prefixes=self.settings.commit_prefixes)

    # Selection

    def _set_files(self, files: Sequence[FileEntry]) -> None:
        self.files = list(files)
        if not self.files:
            self.selected_file = None
        elif self.selected_file is None:
            self.selected_file = 0
        else:
            self.selected_file = min(self.selected_file, len(self.files) - 1)

    def selected_entry(self) -> FileEntry | None:
        if self.selected_file is None:
            return None
        return self.files[self.selected_file]

    def move_down(self) -> None:
        if not self.files or self.selected_file is None:
            return
        self.selected_file = (self.selected_file + 1) % len(self.files)

    def move_up(self) -> None:
        if not self.files or self.selected_file is None:
            return
        if self.selected_file == 0:
            self.selected_file = len(self.files) - 1
        else:
            self.selected_file -= 1

    def has_staged_files(self) -> bool:
        return any(entry.staged for entry in self.files)

    # Notifications

    def notify(self, message: str) -> None:
        self.notification = Notification(message, self.clock())

    def tick(self) -> None:
        """Drop the notification once it has been shown long enough."""
        if self.notification is not None and self.notification.is_expired(self.clock()):
            self.notification = None

    # Mode transitions

    def request_help(self) -> None:
        if self.mode is Mode.FILE_LIST:
            self.mode = Mode.HELP

    def request_quit(self) -> None:
        self.should_quit = True

    def request_diff(self) -> None:
        if self.mode is Mode.FILE_LIST:
            self.show_diff()

    def request_commit(self) -> None:
        if self.mode is not Mode.FILE_LIST:
            return
        if not self.has_staged_files():
            self.notify(NO_STAGED_FILES)
            return
        if not self.draft.message:
            self.draft = self._new_draft()
        self.mode = Mode.COMMIT_COMPOSE

    def back(self) -> None:
        """Leave a secondary view and return to the file list."""
        if self.mode is Mode.DIFF_VIEW:
            self.diff_content = ""
        elif self.mode is Mode.COMMIT_COMPOSE:
            self.draft = self._new_draft()
        self.mode = Mode.FILE_LIST

    def submit_commit(self) -> None:
        if self.mode is not Mode.COMMIT_COMPOSE:
            return
        if self.draft.is_blank():
            self.notify(EMPTY_COMMIT_MESSAGE)
            return
        self.mode = Mode.FILE_LIST
        self.commit()

    # Repository operations

    def refresh(self) -> None:
        """Resynchronise the file list with the repository."""
        self.snapshot = load_snapshot(self.gateway)
        self._set_files(self.snapshot.files)
        logger.debug(
            "refreshed: branch=%s ahead=%d behind=%d files=%d",
            self.snapshot.current_branch,
            self.snapshot.ahead,
            self.snapshot.behind,
            len(self.files),
        )

    def toggle_stage(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        # Best effort: the refresh below shows whether it took effect.
        if entry.staged:
            self.gateway.unstage(entry.path)
        else:
            self.gateway.stage(entry.path)
        self.refresh()

    def show_diff(self) -> None:
        entry = self.selected_entry()
        if entry is None:
            return
        result = self.gateway.diff(entry.path, entry.staged)
        if not result.ok:
            self.notify(_failure_text("Diff failed", result))
            return
        self.diff_content = result.stdout
        self.mode = Mode.DIFF_VIEW

    def commit(self) -> None:
        result = self.gateway.commit(self.draft.message)
        if not result.ok:
            self.notify(_failure_text("Commit failed", result))
            return
        self.notify(COMMIT_SUCCESSFUL)
        self.draft.clear()
        self.refresh()

    def push(self) -> None:
        result = self.gateway.push(self.snapshot.current_branch, self.settings.remote)
        if not result.ok:
            self.notify(_failure_text("Push failed", result))
            return
        self.notify(PUSH_SUCCESSFUL)
        self.refresh()
