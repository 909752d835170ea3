"""Mode-aware mapping of key presses to state actions."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import assert_never

from gch.models import Mode
from gch.state import AppState


@dataclass(frozen=True)
class Key:
    """A key press, independent of the terminal backend."""

    name: str
    char: str | None = None


class Action(Enum):
    NEXT_FILE = auto()
    PREVIOUS_FILE = auto()
    TOGGLE_STAGE = auto()
    SHOW_DIFF = auto()
    START_COMMIT = auto()
    PUSH = auto()
    REFRESH = auto()
    HELP = auto()
    QUIT = auto()
    BACK = auto()
    SUBMIT = auto()
    INSERT_CHAR = auto()
    BACKSPACE = auto()
    DELETE = auto()
    CURSOR_LEFT = auto()
    CURSOR_RIGHT = auto()
    CURSOR_HOME = auto()
    CURSOR_END = auto()
    CYCLE_PREFIX = auto()


FILE_LIST_KEYS = {
    "down": Action.NEXT_FILE,
    "j": Action.NEXT_FILE,
    "up": Action.PREVIOUS_FILE,
    "k": Action.PREVIOUS_FILE,
    "space": Action.TOGGLE_STAGE,
    "d": Action.SHOW_DIFF,
    "c": Action.START_COMMIT,
    "p": Action.PUSH,
    "r": Action.REFRESH,
    "h": Action.HELP,
    "f1": Action.HELP,
    "q": Action.QUIT,
}
DIFF_VIEW_KEYS = {
    "escape": Action.BACK,
    "q": Action.BACK,
}
HELP_KEYS = {
    "escape": Action.BACK,
    "q": Action.BACK,
    "h": Action.BACK,
}
COMMIT_COMPOSE_KEYS = {
    "escape": Action.BACK,
    "enter": Action.SUBMIT,
    "tab": Action.CYCLE_PREFIX,
    "backspace": Action.BACKSPACE,
    "delete": Action.DELETE,
    "left": Action.CURSOR_LEFT,
    "right": Action.CURSOR_RIGHT,
    "home": Action.CURSOR_HOME,
    "end": Action.CURSOR_END,
}


def _is_text(char: str | None) -> bool:
    return char is not None and len(char) == 1 and char.isprintable()


def resolve(mode: Mode, key: Key) -> Action | None:
    """Look up the action bound to a key in the given mode."""
    if mode is Mode.FILE_LIST:
        return FILE_LIST_KEYS.get(key.name)
    elif mode is Mode.DIFF_VIEW:
        return DIFF_VIEW_KEYS.get(key.name)
    elif mode is Mode.COMMIT_COMPOSE:
        action = COMMIT_COMPOSE_KEYS.get(key.name)
        if action is None and _is_text(key.char):
            return Action.INSERT_CHAR
        return action
    elif mode is Mode.HELP:
        return HELP_KEYS.get(key.name)
    else:
        assert_never(mode)


def apply(state: AppState, action: Action, key: Key) -> None:
    """Perform an action against the application state."""
    draft = state.draft
    if action is Action.NEXT_FILE:
        state.move_down()
    elif action is Action.PREVIOUS_FILE:
        state.move_up()
    elif action is Action.TOGGLE_STAGE:
        state.toggle_stage()
    elif action is Action.SHOW_DIFF:
        state.request_diff()
    elif action is Action.START_COMMIT:
        state.request_commit()
    elif action is Action.PUSH:
        state.push()
    elif action is Action.REFRESH:
        state.refresh()
    elif action is Action.HELP:
        state.request_help()
    elif action is Action.QUIT:
        state.request_quit()
    elif action is Action.BACK:
        state.back()
    elif action is Action.SUBMIT:
        state.submit_commit()
    elif action is Action.INSERT_CHAR:
        if key.char is not None:
            draft.insert(key.char)
    elif action is Action.BACKSPACE:
        draft.backspace()
    elif action is Action.DELETE:
        draft.delete()
    elif action is Action.CURSOR_LEFT:
        draft.move_left()
    elif action is Action.CURSOR_RIGHT:
        draft.move_right()
    elif action is Action.CURSOR_HOME:
        draft.move_home()
    elif action is Action.CURSOR_END:
        draft.move_end()
    elif action is Action.CYCLE_PREFIX:
        draft.cycle_prefix()
    else:
        assert_never(action)


def dispatch(state: AppState, key: Key) -> Action | None:
    """Handle one key press; unbound keys do nothing."""
    action = resolve(state.mode, key)
    if action is not None:
        apply(state, action, key)
    return action
