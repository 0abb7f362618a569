"""GitHub URL construction, SHA filtering, and mention overwrites."""

from typing import NamedTuple

GITHUB_URL = 'https://github.com/'

# Hex strings that are also dictionary words. GitHub accepts SHAs abbreviated
# to 7 characters, so these are left as text; use a longer SHA to link them.
# Generated with: egrep -i "^[a-f0-9]{7,}$" /usr/share/dict/words
BLACKLIST = frozenset([
    'deedeed',
    'fabaceae',
])

# `@mention` links to the blog post that introduced mentions
OVERWRITES = {
    'mention': 'blog/821',
    'mentions': 'blog/821',
}


class Repo(NamedTuple):
    """The repository that bare and user-qualified references resolve against."""
    user: str
    project: str

    def __str__(self) -> str:
        return f'{self.user}/{self.project}'


class Link(NamedTuple):
    kind: str
    href: str
    text: str


def is_sha(sha: str) -> bool:
    """Check whether a hex string should be linked as a commit."""
    return sha.lower() not in BLACKLIST


def abbr(sha: str) -> str:
    """Abbreviate a SHA to GitHub's 7-character display form."""
    return sha[:7]


def gh(repo: Repo | None = None) -> str:
    """Return a GitHub URL, relative to an optional `repo`."""
    base = GITHUB_URL

    if repo:
        base += f'{repo.user}/{repo.project}/'

    return base


def commit_url(repo: Repo | None, sha: str) -> str:
    return gh(repo) + f'commit/{sha}'


def issue_url(repo: Repo | None, number: str) -> str:
    # Pull requests redirect from `issues/<n>`, so both share this form
    return gh(repo) + f'issues/{number}'


def mention_url(name: str) -> str:
    """Profile URL for a user, org, or team; never repo-relative."""
    return gh() + OVERWRITES.get(name, name)
