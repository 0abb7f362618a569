"""Scan plain inline text for GitHub references.

The scanner walks a run of text left to right. At each position it tries the
reference grammars in priority order; the first one that matches (and, for
SHAs, isn't blacklisted) becomes a link. When none match, a run of plain text
is consumed up to the next place a reference could start.
"""

import re
from typing import Callable, NamedTuple

from .links import Link, Repo, abbr, commit_url, is_sha, issue_url, mention_url
from .patterns import (
    ISSUE_PATTERN,
    MENTION_PATTERN,
    REPO_ISSUE_PATTERN,
    REPO_SHA_PATTERN,
    SHA_PATTERN,
    TEXT_PATTERN,
    USER_ISSUE_PATTERN,
    USER_SHA_PATTERN,
)

REPO_SHA = 'repo_sha'
USER_SHA = 'user_sha'
SHA = 'sha'
REPO_ISSUE = 'repo_issue'
USER_ISSUE = 'user_issue'
ISSUE = 'issue'
MENTION = 'mention'
TEXT = 'text'


class Token(NamedTuple):
    """A committed span of the input: a link, or plain text when `link` is None."""
    value: str
    offset: int
    link: Link | None = None

    @property
    def kind(self) -> str:
        return self.link.kind if self.link else TEXT


Handler = Callable[[str, tuple[str, ...], Repo], Link | None]


def repo_sha(value: str, groups: tuple[str, ...], repo: Repo) -> Link | None:
    user, project, sha = groups
    if is_sha(sha):
        return Link(REPO_SHA, commit_url(Repo(user, project), sha), f'{user}/{project}@{abbr(sha)}')
    return None


def user_sha(value: str, groups: tuple[str, ...], repo: Repo) -> Link | None:
    user, sha = groups
    if is_sha(sha):
        return Link(USER_SHA, commit_url(Repo(user, repo.project), sha), f'{user}@{abbr(sha)}')
    return None


def sha(value: str, groups: tuple[str, ...], repo: Repo) -> Link | None:
    (digits,) = groups
    if is_sha(digits):
        return Link(SHA, commit_url(repo, digits), abbr(value))
    return None


def repo_issue(value: str, groups: tuple[str, ...], repo: Repo) -> Link:
    user, project, number = groups
    return Link(REPO_ISSUE, issue_url(Repo(user, project), number), value)


def user_issue(value: str, groups: tuple[str, ...], repo: Repo) -> Link:
    user, number = groups
    return Link(USER_ISSUE, issue_url(Repo(user, repo.project), number), value)


def issue(value: str, groups: tuple[str, ...], repo: Repo) -> Link:
    (number,) = groups
    return Link(ISSUE, issue_url(repo, number), value)


def mention(value: str, groups: tuple[str, ...], repo: Repo) -> Link:
    (name,) = groups
    return Link(MENTION, mention_url(name), value)


# Order matters: `user/project@sha` must win over `project@sha`, etc.
GRAMMARS: tuple[tuple[str, re.Pattern, Handler], ...] = (
    (REPO_SHA, REPO_SHA_PATTERN, repo_sha),
    (USER_SHA, USER_SHA_PATTERN, user_sha),
    (SHA, SHA_PATTERN, sha),
    (REPO_ISSUE, REPO_ISSUE_PATTERN, repo_issue),
    (USER_ISSUE, USER_ISSUE_PATTERN, user_issue),
    (ISSUE, ISSUE_PATTERN, issue),
    (MENTION, MENTION_PATTERN, mention),
)


def match_reference(value: str, pos: int, repo: Repo) -> tuple[str, Link] | None:
    """Return the highest-priority reference starting at `pos`, if any."""
    for _, pattern, handler in GRAMMARS:
        match = pattern.match(value, pos)
        if not match:
            continue
        link = handler(match.group(0), match.groups(), repo)
        if link:
            return match.group(0), link
    return None


def tokenize(value: str, repo: Repo, start: int = 0, in_link: bool = False) -> list[Token]:
    """Split a run of plain text into links and plain-text spans.

    Args:
        value: Plain inline text handed over by the host parser
        repo: Repository that bare and user-qualified references resolve against
        start: Offset of `value` within the enclosing document
        in_link: Text already inside a link; no references are recognized

    Returns:
        Tokens covering `value` exactly, in order
    """
    tokens = []
    pos = 0

    while pos < len(value):
        found = None if in_link else match_reference(value, pos, repo)
        if found:
            subvalue, link = found
        else:
            subvalue, link = TEXT_PATTERN.match(value, pos).group(0), None
        tokens.append(Token(subvalue, start + pos, link))
        pos += len(subvalue)

    return merge_text(tokens)


def merge_text(tokens: list[Token]) -> list[Token]:
    """Join adjacent plain-text tokens."""
    merged = []
    run = []
    for token in tokens:
        if token.link is None:
            run.append(token)
            continue
        if run:
            merged.append(Token(''.join(t.value for t in run), run[0].offset))
            run = []
        merged.append(token)
    if run:
        merged.append(Token(''.join(t.value for t in run), run[0].offset))
    return merged


def match(value: str, repo: Repo) -> list[tuple[tuple[int, int], Link | str]]:
    """Return `((start, end), Link | text)` pairs covering `value`."""
    return [
        ((token.offset, token.offset + len(token.value)), token.link or token.value)
        for token in tokenize(value, repo)
    ]
