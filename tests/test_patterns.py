"""Tests for reference grammars and repository URL parsing."""

import pytest

from ghrefs.patterns import (
    ISSUE_PATTERN,
    MENTION_PATTERN,
    REPO_SHA_PATTERN,
    SHA_PATTERN,
    TEXT_PATTERN,
    USER_ISSUE_PATTERN,
    parse_repository,
)


class TestParseRepository:
    """Test extracting user/project from repository URLs."""

    @pytest.mark.parametrize('url', [
        'foo/bar',
        'git://github.com/foo/bar.git',
        'git+https://github.com/foo/bar.git',
        'https://github.com/foo/bar',
        'https://github.com/foo/bar/',
        'https://github.com/foo/bar#readme',
        'https://api.github.com/repos/foo/bar',
    ])
    def test_github_urls(self, url):
        """Test URL forms that all resolve to foo/bar."""
        assert parse_repository(url) == ('foo', 'bar')

    def test_project_with_dots(self):
        """Test that dots inside a project name are kept."""
        assert parse_repository('https://github.com/foo/bar.js') == ('foo', 'bar.js')
        assert parse_repository('https://github.com/foo/bar.js.git') == ('foo', 'bar.js')

    def test_git_prefix_inside_project(self):
        """Test that `.git` followed by more name characters stays in the project."""
        assert parse_repository('foo/bar.github') == ('foo', 'bar.github')

    @pytest.mark.parametrize('url', ['', None, 'not a url', 'foo'])
    def test_no_repository(self, url):
        """Test that unparseable input returns None values."""
        assert parse_repository(url) == (None, None)


class TestShaPattern:
    """Test bare SHA matching."""

    def test_minimum_length(self):
        assert SHA_PATTERN.match('1234567').group(1) == '1234567'
        assert SHA_PATTERN.match('123456') is None

    def test_maximum_length(self):
        assert SHA_PATTERN.match('a' * 40)
        assert SHA_PATTERN.match('a' * 41) is None

    def test_word_boundary(self):
        """Test that a hex prefix of a longer word doesn't match."""
        assert SHA_PATTERN.match('abc1234x') is None
        assert SHA_PATTERN.match('abc1234.').group(0) == 'abc1234'

    def test_case_insensitive(self):
        assert SHA_PATTERN.match('ABCDEF1').group(0) == 'ABCDEF1'


class TestRepoShaPattern:
    def test_groups(self):
        match = REPO_SHA_PATTERN.match('foo/bar@1234567 rest')
        assert match.groups() == ('foo', 'bar', '1234567')

    def test_user_may_not_start_with_hyphen(self):
        assert REPO_SHA_PATTERN.match('-foo/bar@1234567') is None


class TestIssuePatterns:
    def test_hash_issue(self):
        assert ISSUE_PATTERN.match('#42').group(1) == '42'

    def test_gh_issue(self):
        assert ISSUE_PATTERN.match('GH-42').group(1) == '42'
        assert ISSUE_PATTERN.match('gh-42').group(1) == '42'

    def test_issue_followed_by_letters(self):
        assert ISSUE_PATTERN.match('#42abc') is None

    def test_user_issue(self):
        assert USER_ISSUE_PATTERN.match('alice#7').groups() == ('alice', '7')


class TestMentionPattern:
    """Test @mention matching."""

    def test_user(self):
        assert MENTION_PATTERN.match('@octocat').group(1) == 'octocat'

    def test_hyphenated_user(self):
        assert MENTION_PATTERN.match('@foo-bar').group(1) == 'foo-bar'

    def test_team(self):
        assert MENTION_PATTERN.match('@org/team').group(1) == 'org/team'

    def test_trailing_hyphen(self):
        assert MENTION_PATTERN.match('@foo-') is None

    def test_leading_hyphen(self):
        assert MENTION_PATTERN.match('@-foo') is None

    def test_name_length(self):
        assert MENTION_PATTERN.match('@' + 'a' * 39)
        assert MENTION_PATTERN.match('@' + 'a' * 40) is None


class TestTextPattern:
    """Test the plain-text fallback."""

    def test_stops_before_reference_start(self):
        assert TEXT_PATTERN.match('hello world').group(0) == 'hello '
        assert TEXT_PATTERN.match('see #1').group(0) == 'see '

    def test_consumes_to_end(self):
        assert TEXT_PATTERN.match('hello').group(0) == 'hello'
        assert TEXT_PATTERN.match('hello\n').group(0) == 'hello\n'

    def test_keeps_urls_and_emails_whole(self):
        assert TEXT_PATTERN.match('foo@example.com').group(0) == 'foo@example.com'
        assert TEXT_PATTERN.match('https://github.com/a/b').group(0) == 'https://github.com/a/b'

    def test_always_consumes(self):
        assert TEXT_PATTERN.match('-').group(0) == '-'
        assert TEXT_PATTERN.match('@').group(0) == '@'

    def test_leaves_reference_after_single_separator(self):
        assert TEXT_PATTERN.match(' #2').group(0) == ' '
        assert TEXT_PATTERN.match('(@bob)').group(0) == '('
