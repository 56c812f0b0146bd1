"""Root CLI command: parse the port, bind, serve until interrupted."""

from __future__ import annotations

import click

from hellosrv import __version__
from hellosrv.commands._base import HelloCommand
from hellosrv.config.logging import configure_logging
from hellosrv.config.models import DEFAULT_HOST, DEFAULT_PORT
from hellosrv.config.settings import HelloSettings
from hellosrv.server import HelloServer


@click.command(
    cls=HelloCommand,
    examples=f"""\
  # Listen on the default port ({DEFAULT_PORT})
  hellosrv

  # Listen on port 8080
  hellosrv -p 8080

  # Lifecycle events as JSON lines on stderr
  hellosrv -p 8080 -v --log-json""",
)
@click.version_option(version=__version__, prog_name="hellosrv")
@click.option(
    "-p",
    "--port",
    default=None,
    metavar="PORT",
    help=f"TCP port to listen on, 1-65535 (default: {DEFAULT_PORT}).",
)
@click.option("-v", "--verbose", is_flag=True, help="Log lifecycle events to stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def cli(port: str | None, verbose: bool, log_json: bool) -> None:
    """Answer every HTTP request with 'Hello, World!'."""
    configure_logging(verbose=verbose, log_json=log_json)
    settings = HelloSettings.from_cli(port=port, verbose=verbose, log_json=log_json)

    server = HelloServer(port=settings.port, host=DEFAULT_HOST)
    server.start()
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        server.stop()
