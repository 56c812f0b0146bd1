"""HelloServer: binds the listener and serves the fixed response.

Thread per connection (``ThreadingHTTPServer`` with daemon threads).
Requests share no mutable state, so nothing here is locked except the
lifecycle bookkeeping in :meth:`HelloServer.stop`.
"""

from __future__ import annotations

import logging
import socketserver
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from types import TracebackType
from typing import Any

from hellosrv.config.models import DEFAULT_HOST, DEFAULT_PORT
from hellosrv.errors import BindError
from hellosrv.server.handler import HelloHandler
from hellosrv.server.lifecycle import ServerState, is_final, is_valid_transition

logger = logging.getLogger(__name__)


class _Listener(ThreadingHTTPServer):
    daemon_threads = True
    allow_reuse_port = False

    def server_bind(self) -> None:
        # Skip HTTPServer's reverse DNS lookup of the bind address.
        socketserver.TCPServer.server_bind(self)
        host, port = self.server_address[:2]
        self.server_name = str(host)
        self.server_port = port

    def handle_error(self, request: Any, client_address: Any) -> None:
        logger.debug("Connection from %s dropped", client_address, exc_info=True)


class HelloServer:
    """A listener that answers every request with ``Hello, World!``.

    Typical use from the CLI::

        server = HelloServer(port=10005)
        server.start()
        server.serve_forever()

    Embedding callers (tests included) can serve on a background thread::

        with HelloServer(host="127.0.0.1", port=0) as server:
            ...  # server.port is the bound ephemeral port

    Attributes:
        host: Requested bind address; ``0.0.0.0`` means all interfaces.
        state: Current :class:`ServerState`.
    """

    def __init__(
        self,
        port: int = DEFAULT_PORT,
        host: str = DEFAULT_HOST,
        handler_class: type[BaseHTTPRequestHandler] = HelloHandler,
    ) -> None:
        self.host = host
        self._requested_port = port
        self._handler_class = handler_class
        self._httpd: _Listener | None = None
        self._thread: threading.Thread | None = None
        self._serving = False
        self._lock = threading.Lock()
        self._state = ServerState.STARTING

    @property
    def state(self) -> ServerState:
        return self._state

    @property
    def address(self) -> tuple[str, int]:
        """The bound ``(host, port)``, or the requested one before binding."""
        if self._httpd is None:
            return self.host, self._requested_port
        host, port = self._httpd.server_address[:2]
        return str(host), int(port)

    @property
    def port(self) -> int:
        return self.address[1]

    def _transition(self, target: ServerState) -> None:
        if not is_valid_transition(self._state, target):
            msg = f"Invalid server state transition: {self._state} -> {target}"
            raise RuntimeError(msg)
        self._state = target

    def start(self) -> HelloServer:
        """Bind and listen.  Returns once connections are accepted.

        Raises:
            BindError: The address is in use, privileged, or unavailable.
            RuntimeError: The server already stopped or failed.
        """
        if self._state == ServerState.LISTENING:
            return self
        if self._state != ServerState.STARTING:
            msg = f"Cannot start a server that is {self._state}"
            raise RuntimeError(msg)
        try:
            self._httpd = _Listener((self.host, self._requested_port), self._handler_class)
        except OSError as exc:
            self._transition(ServerState.FAILED)
            reason = exc.strerror or str(exc)
            logger.error("Bind failed on %s:%d: %s", self.host, self._requested_port, reason)
            raise BindError(self.host, self._requested_port, reason) from exc
        self._transition(ServerState.LISTENING)
        logger.info("Listening on %s:%d", *self.address)
        return self

    def serve_forever(self, poll_interval: float = 0.5) -> None:
        """Serve until :meth:`stop` is called from another thread, or an interrupt."""
        self.start()
        assert self._httpd is not None
        self._serving = True
        self._httpd.serve_forever(poll_interval=poll_interval)

    def serve_in_background(self) -> HelloServer:
        """Start serving on a daemon thread and return immediately."""
        self.start()
        assert self._httpd is not None
        self._serving = True
        self._thread = threading.Thread(
            target=self._httpd.serve_forever,
            name=f"hellosrv-{self.port}",
            daemon=True,
        )
        self._thread.start()
        return self

    def stop(self) -> None:
        """Close the listener.  No-op unless the server is listening."""
        with self._lock:
            if self._state != ServerState.LISTENING:
                return
            assert self._httpd is not None
            if self._serving:
                self._httpd.shutdown()
            self._httpd.server_close()
            if self._thread is not None:
                self._thread.join()
                self._thread = None
            self._transition(ServerState.TERMINATED)
        logger.info("Stopped listening on %s:%d", *self.address)

    @property
    def finished(self) -> bool:
        return is_final(self._state)

    def __enter__(self) -> HelloServer:
        return self.serve_in_background()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()
