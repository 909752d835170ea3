"""Command-line entry point for gch."""

import logging
import os
import sys
from pathlib import Path

import click

from gch.config import ConfigError, load_settings
from gch.git_ops import GitGateway
from gch.render import render_plain
from gch.state import AppState
from gch.tui import run_tui

logger = logging.getLogger(__name__)

DEFAULT_LOG_FILE = "gch-debug.log"


def _configure_logging() -> None:
    # The TUI owns the terminal, so debug output goes to a file.
    if not os.environ.get("GCH_DEBUG"):
        return
    logging.basicConfig(
        filename=os.environ.get("GCH_LOG_FILE", DEFAULT_LOG_FILE),
        level=logging.DEBUG,
        format="[DEBUG %(name)s:%(lineno)d] %(message)s",
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """gch: stage, diff, commit and push from the terminal."""
    _configure_logging()

    repo_root = GitGateway(Path.cwd()).repo_root()
    if repo_root is None:
        click.echo("gch: not inside a git repository", err=True)
        raise SystemExit(1)

    try:
        settings = load_settings(repo_root)
    except ConfigError as exc:
        click.echo(f"gch: {exc}", err=True)
        raise SystemExit(1)

    logger.debug("repo_root=%s settings=%s", repo_root, settings)
    gateway = GitGateway(Path.cwd(), timeout=settings.git_timeout)
    state = AppState(gateway, settings)

    if not sys.stdin.isatty() or not sys.stdout.isatty():
        state.refresh()
        for line in render_plain(state):
            click.echo(line)
        return

    try:
        run_tui(state)
    except OSError as exc:
        click.echo(f"gch: {exc}", err=True)
        raise SystemExit(1)


if __name__ == "__main__":
    main()
