"""Client for the ClamAV daemon over TCP or Unix sockets, with a checking command."""

__version__ = "0.1.0"
__all__ = ["client", "connection", "result", "cli"]