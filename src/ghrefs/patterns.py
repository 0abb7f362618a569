"""Regular expression patterns for GitHub references in plain text."""

import re

FLAGS = re.IGNORECASE | re.ASCII

# Usernames are alphanumerics or single hyphens, and can't begin or end with a hyphen.
NAME = r'(?:[a-z0-9]{1,2}|[a-z0-9][a-z0-9-]{1,37}[a-z0-9])'
USER = f'({NAME})'
# A user, an org, or a team (`org/team`)
PERSON = f'({NAME}(?:/{NAME})?)'
HASH = r'([a-f0-9]{7,40})'
NUMBER = r'([0-9]+)'
# A trailing `.git` is never part of the project name
PROJECT = r'((?:[a-z0-9-]|\.git[a-z0-9-]|\.(?!git))+)'
REPO = f'{USER}/{PROJECT}'

# Compiled regex patterns, applied with `.match(value, pos)` at the scan position
REPO_SHA_PATTERN = re.compile(rf'{REPO}@{HASH}\b', FLAGS)  # user/project@sha
USER_SHA_PATTERN = re.compile(rf'{USER}@{HASH}\b', FLAGS)  # user@sha
SHA_PATTERN = re.compile(rf'{HASH}\b', FLAGS)  # sha
REPO_ISSUE_PATTERN = re.compile(rf'{REPO}#{NUMBER}\b', FLAGS)  # user/project#123
USER_ISSUE_PATTERN = re.compile(rf'{USER}#{NUMBER}\b', FLAGS)  # user#123
ISSUE_PATTERN = re.compile(rf'(?:GH-|#){NUMBER}\b', FLAGS)  # #123, GH-123
MENTION_PATTERN = re.compile(rf'@{PERSON}\b(?!-)', FLAGS)  # @user, @org/team

# Anything up to the next place a reference could start: a name, `@` or `#`
# right after a separator
TEXT_PATTERN = re.compile(r'[\s\S]+?(?:(?<![/.@#_a-zA-Z0-9-])(?=[@#_a-zA-Z0-9-])|\Z)')

# user/project inside a git or GitHub URL
REPOSITORY_PATTERN = re.compile(rf'(?:^|/(?:repos/)?){REPO}(?=\.git|[/#@]|$)', FLAGS)


def parse_repository(url: str | None) -> tuple[str | None, str | None]:
    """Parse the user and project out of a repository URL.

    Args:
        url: Can be:
            - Full URL: https://github.com/owner/repo, git://github.com/owner/repo.git
            - API path: https://api.github.com/repos/owner/repo
            - Short format: owner/repo

    Returns:
        Tuple of (user, project), or (None, None) if nothing matched
    """
    if not url:
        return None, None

    match = REPOSITORY_PATTERN.search(url)
    if match:
        return match.group(1), match.group(2)

    return None, None
