"""Helpers shared by commands."""

import sys

from utz import err

from ..config import RepositoryError, resolve_repository
from ..links import Repo


def get_repo(repo: str | None) -> Repo:
    """Resolve the repository option, exiting with a message if it can't be determined."""
    try:
        return resolve_repository(repo)
    except RepositoryError as e:
        err(f"Error: {e}")
        err("Specify with: -r owner/repo")
        sys.exit(1)


def read_input(path: str | None) -> str:
    """Read a file, or stdin when `path` is missing or `-`."""
    if not path or path == '-':
        return sys.stdin.read()
    with open(path, 'r') as f:
        return f.read()
