"""Data models for gch."""

from dataclasses import dataclass
from enum import Enum

UNKNOWN_BRANCH = "unknown"
NOTIFICATION_SECONDS = 3.0
DEFAULT_COMMIT_PREFIXES = (
    "feat: ",
    "fix: ",
    "docs: ",
    "style: ",
    "refactor: ",
    "test: ",
    "chore: ",
)


class FileStatus(Enum):
    """Classification of a changed path."""

    UNTRACKED = "untracked"
    MODIFIED = "modified"
    STAGED = "staged"
    ADDED = "added"
    DELETED = "deleted"
    RENAMED = "renamed"

    @property
    def code(self) -> str:
        """One-letter code shown in the file list."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    FileStatus.UNTRACKED: "?",
    FileStatus.MODIFIED: "M",
    FileStatus.STAGED: "M",
    FileStatus.ADDED: "A",
    FileStatus.DELETED: "D",
    FileStatus.RENAMED: "R",
}


class Mode(Enum):
    """UI mode; exactly one is active."""

    FILE_LIST = "file_list"
    DIFF_VIEW = "diff_view"
    COMMIT_COMPOSE = "commit_compose"
    HELP = "help"


@dataclass(frozen=True)
class FileEntry:
    """A changed path known to the repository."""

    path: str
    status: FileStatus
    staged: bool

    def __post_init__(self) -> None:
        if self.status is FileStatus.UNTRACKED and self.staged:
            raise ValueError(f"untracked path cannot be staged: {self.path}")


@dataclass(frozen=True)
class AheadBehind:
    """Commit counts ahead/behind the upstream branch."""

    ahead: int
    behind: int


@dataclass(frozen=True)
class RepositorySnapshot:
    """Result of one synchronisation with the repository."""

    current_branch: str
    ahead: int
    behind: int
    files: tuple[FileEntry, ...]

    @classmethod
    def empty(cls) -> "RepositorySnapshot":
        return cls(current_branch="", ahead=0, behind=0, files=())


@dataclass(frozen=True)
class GitResult:
    """Outcome of one git invocation."""

    ok: bool
    stdout: str
    stderr: str


@dataclass(frozen=True)
class Notification:
    """A transient message shown to the user."""

    message: str
    created_at: float

    def is_expired(self, now: float, duration: float = NOTIFICATION_SECONDS) -> bool:
        return now - self.created_at > duration


@dataclass
class CommitDraft:
    """Commit message buffer with a cursor and a prefix catalog."""

    prefixes: tuple[str, ...] = DEFAULT_COMMIT_PREFIXES
    message: str = ""
    cursor: int = 0
    selected_prefix: int = 0

    def is_blank(self) -> bool:
        return not self.message.strip()

    def insert(self, char: str) -> None:
        self.message = self.message[: self.cursor] + char + self.message[self.cursor :]
        self.cursor += len(char)

    def backspace(self) -> None:
        if self.cursor > 0:
            self.message = self.message[: self.cursor - 1] + self.message[self.cursor :]
            self.cursor -= 1

    def delete(self) -> None:
        if self.cursor < len(self.message):
            self.message = self.message[: self.cursor] + self.message[self.cursor + 1 :]

    def move_left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def move_right(self) -> None:
        if self.cursor < len(self.message):
            self.cursor += 1

    def move_home(self) -> None:
        self.cursor = 0

    def move_end(self) -> None:
        self.cursor = len(self.message)

    def cycle_prefix(self) -> bool:
        """Advance to the next prefix and load it; only allowed while empty."""
        if self.message or not self.prefixes:
            return False
        self.selected_prefix = (self.selected_prefix + 1) % len(self.prefixes)
        self.message = self.prefixes[self.selected_prefix]
        self.cursor = len(self.message)
        return True

    def clear(self) -> None:
        self.message = ""
        self.cursor = 0
        self.selected_prefix = 0
