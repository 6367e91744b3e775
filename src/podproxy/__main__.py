"""Entry point for ``python -m podproxy``."""

from .cli.main import cli

if __name__ == "__main__":
    cli()
