"""hellosrv: answers every HTTP request with ``Hello, World!``."""

__version__ = "0.1.0"
