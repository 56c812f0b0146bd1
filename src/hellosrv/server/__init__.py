"""The HTTP listener and its fixed-response handler."""

from hellosrv.server.lifecycle import ServerState
from hellosrv.server.listener import HelloServer

__all__ = ["HelloServer", "ServerState"]
