"""CLI commands for ghrefs."""

from click import group


@group()
def cli():
    """Link GitHub references (SHAs, issues, @mentions) in plain text."""
    pass


# Register modular commands
from .commands import linkify as linkify_cmd
from .commands import repo as repo_cmd
from .commands import tokens as tokens_cmd

linkify_cmd.register(cli)
repo_cmd.register(cli)
tokens_cmd.register(cli)


if __name__ == '__main__':
    cli()
