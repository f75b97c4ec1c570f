"""Socket connection speaking the daemon's newline-delimited protocol."""

from __future__ import annotations

import socket
import struct
from collections.abc import Iterator
from types import TracebackType

from clamdclient.result import ScanResult, parse_result

__all__ = [
    "CHUNK_SIZE",
    "TCP_TIMEOUT",
    "ClamdConnection",
    "connect_tcp",
    "connect_unix",
]

CHUNK_SIZE = 1024
"""Size of the pieces a stream is sent in."""

TCP_TIMEOUT = 2.0
"""Seconds allowed for establishing a TCP connection."""

_EOF_MARKER = b"\x00\x00\x00\x00"


class ClamdConnection:
    """An open socket to the daemon."""

    def __init__(self, sock: socket.socket) -> None:
        self.sock = sock

    def send_command(self, command: str) -> None:
        """Send a command in the newline-terminated form."""
        self.sock.sendall(f"n{command}\n".encode())

    def send_chunk(self, data: bytes) -> None:
        """Send one stream chunk prefixed with its big-endian 32-bit length."""
        self.sock.sendall(struct.pack(">I", len(data)) + bytes(data))

    def send_eof(self) -> None:
        """Send the zero-length chunk that ends a stream."""
        self.sock.sendall(_EOF_MARKER)

    def read_results(self) -> Iterator[ScanResult]:
        """Yield a parsed result for each complete reply line until the peer closes.

        A trailing line without a newline and read errors end the iteration.
        """
        with self.sock.makefile("rb") as reader:
            while True:
                try:
                    line = reader.readline()
                except OSError:
                    return
                if not line.endswith(b"\n"):
                    return
                text = line.decode("utf-8", errors="replace").rstrip(" \t\r\n")
                yield parse_result(text)

    def close(self) -> None:
        self.sock.close()

    def __enter__(self) -> ClamdConnection:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


def _split_host_port(address: str) -> tuple[str, int]:
    host, sep, port = address.rpartition(":")
    if not sep or not host:
        raise ValueError(f"missing port in address {address!r}")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        return host, int(port)
    except ValueError:
        raise ValueError(f"invalid port in address {address!r}") from None


def connect_tcp(address: str, timeout: float = TCP_TIMEOUT) -> ClamdConnection:
    """Connect to ``host:port``; the timeout applies to connecting only."""
    host, port = _split_host_port(address)
    sock = socket.create_connection((host, port), timeout=timeout)
    sock.settimeout(None)
    return ClamdConnection(sock)


def connect_unix(path: str) -> ClamdConnection:
    """Connect to a Unix domain socket at ``path``."""
    sock = socket.socket(socket.AF_UNIX, socket.SOCK_STREAM)
    try:
        sock.connect(path)
    except OSError:
        sock.close()
        raise
    return ClamdConnection(sock)