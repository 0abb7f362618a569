"""Repo command - show the repository references resolve against."""

from utz.cli import opt

from .util import get_repo


def repo(repo: str | None) -> None:
    """Print the resolved repository as owner/repo."""
    print(get_repo(repo))


def register(cli):
    """Register command with CLI."""
    cli.command()(
        opt('-r', '--repo', help='Repository (owner/repo or URL, default: auto-detect)')(
            repo
        )
    )
