"""Allow ``python -m hellosrv``."""

from hellosrv.cli import cli

if __name__ == "__main__":
    cli()
