"""Resolve the repository that bare and user-qualified references link against."""

import json
from collections.abc import Mapping
from os import environ
from pathlib import Path

from utz import proc, err, cd

from .links import Repo
from .patterns import parse_repository

REPOSITORY_ENV = 'GHREFS_REPOSITORY'


class RepositoryError(ValueError):
    """No repository could be determined; references can't be resolved."""


def parse_repo(repository) -> Repo | None:
    """Convert an explicit repository option into a `Repo`.

    Accepts a `Repo`, a `(user, project)` pair, a mapping with `user` and
    `project`, a mapping or object with a `url`, or a URL / `user/project` string.
    """
    if isinstance(repository, Repo):
        return repository
    if isinstance(repository, tuple) and len(repository) == 2:
        return Repo(*repository)

    if isinstance(repository, Mapping):
        if repository.get('user') and repository.get('project'):
            return Repo(repository['user'], repository['project'])
        url = repository.get('url')
    elif isinstance(repository, str):
        url = repository
    else:
        url = getattr(repository, 'url', None)

    user, project = parse_repository(url if isinstance(url, str) else None)
    if user and project:
        return Repo(user, project)
    return None


def get_package_repository(path: Path) -> str | None:
    """Read the `repository` field of `package.json` in `path`."""
    pkg_file = path / 'package.json'
    if not pkg_file.exists():
        return None

    try:
        with open(pkg_file, 'r') as f:
            pkg = json.load(f)
    except (OSError, ValueError) as e:
        err(f"Warning: Could not read {pkg_file}: {e}")
        return None

    repository = pkg.get('repository') if isinstance(pkg, dict) else None
    if isinstance(repository, dict):
        repository = repository.get('url')
    return repository if isinstance(repository, str) else None


def get_remote_repo(path: Path) -> Repo | None:
    """Find a GitHub repository among the git remotes of `path`."""
    with cd(path):
        remotes = proc.lines('git', 'remote', err_ok=True, log=None) or []

        for remote in ['origin', 'upstream'] + remotes:
            if not remote:
                continue
            try:
                url = proc.line('git', 'remote', 'get-url', remote, err_ok=True, log=None) or ''
            except Exception as e:
                # Log but continue checking other remotes
                err(f"Warning: Could not get URL for remote {remote}: {e}")
                continue

            if 'github.com' not in url:
                continue

            # SSH remotes separate host and path with `:` (git@github.com:owner/repo.git)
            user, project = parse_repository(url.replace('github.com:', 'github.com/'))
            if user and project:
                return Repo(user, project)

    return None


def resolve_repository(repository=None, cwd: str | Path | None = None) -> Repo:
    """Determine the repository references resolve against.

    Sources, in order: the explicit `repository` option, the
    `GHREFS_REPOSITORY` environment variable, the `repository` field of
    `package.json`, then the git remotes of `cwd`.

    Raises:
        RepositoryError: if no source yields a repository
    """
    if repository:
        repo = parse_repo(repository)
        if not repo:
            raise RepositoryError(f"Could not parse repository: {repository!r}")
        return repo

    env_repository = environ.get(REPOSITORY_ENV)
    if env_repository:
        repo = parse_repo(env_repository)
        if not repo:
            raise RepositoryError(f"Could not parse ${REPOSITORY_ENV}: {env_repository!r}")
        return repo

    path = Path(cwd) if cwd else Path.cwd()

    url = get_package_repository(path)
    if url:
        repo = parse_repo(url)
        if repo:
            return repo
        err(f"Warning: Could not parse repository from package.json: {url}")

    repo = get_remote_repo(path)
    if repo:
        err(f"Using repository {repo} from git remotes")
        return repo

    raise RepositoryError(
        "Missing repository: pass one explicitly (owner/repo or URL), "
        f"set ${REPOSITORY_ENV}, or run from a directory with a GitHub remote"
    )
