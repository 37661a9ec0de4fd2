"""Allow running as ``python -m dockercmd``."""

from .cli.main import cli

if __name__ == '__main__':
    cli()
