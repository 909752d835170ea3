from __future__ import annotations

from collections.abc import Sequence

import pytest

from gch.git_ops import GitGateway
from gch.models import GitResult
from gch.state import AppState


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeGateway(GitGateway):
    """Records git invocations and answers them from canned output."""

    def __init__(
        self,
        porcelain: str = "",
        branch: str = "main",
        counts: str = "0\t0\n",
    ) -> None:
        super().__init__()
        self.porcelain = porcelain
        self.branch = branch
        self.counts = counts
        self.diff_output = "diff --git a/x b/x\n+added\n"
        self.overrides: dict[str, GitResult] = {}
        self.calls: list[list[str]] = []

    def fail(self, command: str, stderr: str = "") -> None:
        self.overrides[command] = GitResult(False, "", stderr)

    def run(self, args: Sequence[str]) -> GitResult:
        self.calls.append(list(args))
        command = args[0]
        if command in self.overrides:
            return self.overrides[command]
        if command == "branch":
            return GitResult(True, f"{self.branch}\n", "")
        if command == "rev-list":
            return GitResult(True, self.counts, "")
        if command == "status":
            return GitResult(True, self.porcelain, "")
        if command == "diff":
            return GitResult(True, self.diff_output, "")
        return GitResult(True, "", "")

    def commands(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway(porcelain="M  src/a.rs\n?? src/b.rs\n M src/c.rs\n")


@pytest.fixture
def state(gateway: FakeGateway, clock: FakeClock) -> AppState:
    app_state = AppState(gateway, clock=clock)
    app_state.refresh()
    gateway.calls.clear()
    return app_state
