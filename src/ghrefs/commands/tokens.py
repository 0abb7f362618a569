"""Tokens command - show how text is split into references."""

import json

from utz.cli import arg, flag, opt

from ..tokenize import tokenize
from .util import get_repo, read_input


def tokens(text: tuple[str, ...], json_out: bool, repo: str | None) -> None:
    """Print the references and plain-text spans found in TEXT (default: stdin)."""
    resolved = get_repo(repo)
    value = ' '.join(text) if text else read_input(None)

    results = tokenize(value, resolved)
    if json_out:
        print(json.dumps([
            {
                'kind': token.kind,
                'start': token.offset,
                'end': token.offset + len(token.value),
                'value': token.value,
                'href': token.link.href if token.link else None,
                'text': token.link.text if token.link else None,
            }
            for token in results
        ], indent=2))
        return

    for token in results:
        end = token.offset + len(token.value)
        href = token.link.href if token.link else ''
        print(f"{token.kind}\t{token.offset}-{end}\t{token.value!r}\t{href}".rstrip('\t'))


def register(cli):
    """Register command with CLI."""
    cli.command()(
        arg('text', nargs=-1)(
            flag('-j', '--json', 'json_out', help='Output JSON')(
                opt('-r', '--repo', help='Repository (owner/repo or URL, default: auto-detect)')(
                    tokens
                )
            )
        )
    )
