"""Linkify command - replace GitHub references in a file with markdown links."""

from utz import err
from utz.cli import arg, opt

from ..render import linkify as linkify_text
from .util import get_repo, read_input


def linkify(path: str | None, output: str | None, repo: str | None) -> None:
    """Convert SHAs, issue numbers and @mentions in PATH (default: stdin) to links."""
    resolved = get_repo(repo)
    text = read_input(path)
    result = linkify_text(text, resolved)

    if output:
        with open(output, 'w') as f:
            f.write(result)
        err(f"Wrote {output}")
    else:
        print(result, end='')


def register(cli):
    """Register command with CLI."""
    cli.command()(
        arg('path', required=False)(
            opt('-o', '--output', help='Output file (default: stdout)')(
                opt('-r', '--repo', help='Repository (owner/repo or URL, default: auto-detect)')(
                    linkify
                )
            )
        )
    )
