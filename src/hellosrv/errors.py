"""Startup failures.

Both errors are fatal: Click prints ``Error: <message>`` to stderr and the
process exits with status 1.  Nothing is retried.
"""

from __future__ import annotations

import click


class HelloServerError(click.ClickException):
    """Base class for errors that abort server startup."""

    exit_code = 1


class ConfigurationError(HelloServerError):
    """The port argument is not an integer in the valid TCP range."""

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class BindError(HelloServerError):
    """The listener could not be bound to the requested address."""

    def __init__(self, host: str, port: int, reason: str) -> None:
        display_host = host or "0.0.0.0"
        super().__init__(f"cannot listen on {display_host}:{port}: {reason}")
        self.host = host
        self.port = port
        self.reason = reason
