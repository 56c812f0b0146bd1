"""Request handler that answers everything with the fixed response.

Method, path, headers and body never influence the answer.  Malformed
requests get it too, after which the connection is closed.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from http.server import BaseHTTPRequestHandler
from typing import Any

from hellosrv import __version__
from hellosrv.config.models import HELLO_RESPONSE, FixedResponse

logger = logging.getLogger(__name__)

_DRAIN_CHUNK = 65536


class HelloHandler(BaseHTTPRequestHandler):
    """One instance per connection; keep-alive requests reuse it."""

    protocol_version = "HTTP/1.1"
    server_version = f"hellosrv/{__version__}"
    response: FixedResponse = HELLO_RESPONSE

    def __getattr__(self, name: str) -> Callable[[], None]:
        # BaseHTTPRequestHandler dispatches to ``do_<METHOD>``; every method
        # name resolves to the same answer, including non-standard ones.
        if name.startswith("do_"):
            return self._answer
        raise AttributeError(name)

    def _answer(self) -> None:
        self._discard_body()
        self._write_response(include_body=self.command != "HEAD")

    def send_error(self, code: int, message: str | None = None, explain: str | None = None) -> None:
        """Answer unparseable input with the fixed response and hang up."""
        logger.debug("Malformed request (%d %s), answering anyway", code, message or "")
        self.close_connection = True
        self._write_response(include_body=True)

    def _discard_body(self) -> None:
        """Read and drop a declared body so the next request on the connection parses."""
        if self.headers.get("Transfer-Encoding") is not None:
            self.close_connection = True
            return
        declared = self.headers.get("Content-Length")
        if declared is None:
            return
        try:
            remaining = int(declared)
        except ValueError:
            self.close_connection = True
            return
        if remaining < 0:
            self.close_connection = True
            return
        while remaining > 0:
            chunk = self.rfile.read(min(remaining, _DRAIN_CHUNK))
            if not chunk:
                self.close_connection = True
                return
            remaining -= len(chunk)

    def _write_response(self, *, include_body: bool) -> None:
        # A bare HTTP/0.9 request line would otherwise suppress the status line.
        if self.request_version in ("HTTP/0.9", ""):
            self.request_version = self.protocol_version
        body = self.response.body
        self.send_response(self.response.status)
        self.send_header("Content-Type", self.response.content_type)
        self.send_header("Content-Length", str(len(body)))
        if self.close_connection:
            self.send_header("Connection", "close")
        self.end_headers()
        if include_body:
            self.wfile.write(body)

    def log_request(self, code: int | str = "-", size: int | str = "-") -> None:
        """Requests are not logged."""

    def log_message(self, format: str, *args: Any) -> None:
        logger.debug(format, *args)
