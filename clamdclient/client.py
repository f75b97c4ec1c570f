"""High-level client for the virus-scanning daemon."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from dataclasses import dataclass
from functools import partial
from typing import BinaryIO
from urllib.parse import urlsplit

from clamdclient.connection import (
    CHUNK_SIZE,
    ClamdConnection,
    connect_tcp,
    connect_unix,
)
from clamdclient.result import ScanResult

__all__ = ["EICAR", "ClamdError", "Stats", "Clamd"]

EICAR = rb"X5O!P%@AP[4\PZX54(P^)7CC)7}$EICAR-STANDARD-ANTIVIRUS-TEST-FILE!$H+H*"
"""The standard anti-virus test file; harmless, but detected as a signature."""


class ClamdError(Exception):
    """The daemon answered with something other than what was expected."""


@dataclass
class Stats:
    """Statistics reported by the ``STATS`` command."""

    pools: str = ""
    state: str = ""
    threads: str = ""
    memstats: str = ""
    queue: str = ""


class Clamd:
    """Client for a daemon reachable at ``tcp://host:port``, ``unix:///path`` or a socket path."""

    def __init__(self, address: str) -> None:
        self.address = address

    def connect(self) -> ClamdConnection:
        """Open a new connection to the daemon's address."""
        parsed = urlsplit(self.address)
        if parsed.scheme == "tcp":
            return connect_tcp(parsed.netloc.rpartition("@")[2])
        if parsed.scheme == "unix":
            return connect_unix(parsed.path)
        return connect_unix(self.address)

    @staticmethod
    def _results(
        conn: ClamdConnection, abort: threading.Event | None = None
    ) -> Iterator[ScanResult]:
        with conn:
            for result in conn.read_results():
                yield result
                if abort is not None and abort.is_set():
                    return

    def _command(self, command: str) -> Iterator[ScanResult]:
        conn = self.connect()
        try:
            conn.send_command(command)
        except BaseException:
            conn.close()
            raise
        return self._results(conn)

    def _expect(self, command: str, expected: str) -> None:
        results = self._command(command)
        try:
            first = next(results, None)
        finally:
            results.close()
        if first is None:
            raise ClamdError(f"No response to {command}.")
        if first.raw != expected:
            raise ClamdError(f"Invalid response, got {first.raw}.")

    def ping(self) -> None:
        """Check that the daemon answers ``PONG``; raise ClamdError otherwise."""
        self._expect("PING", "PONG")

    def version(self) -> Iterator[ScanResult]:
        """Program and database versions, one result per reply line."""
        return self._command("VERSION")

    def stats(self) -> Stats:
        """Queue, thread and memory statistics of the daemon."""
        stats = Stats()
        for result in self._command("STATS"):
            raw = result.raw
            if raw.startswith("POOLS"):
                stats.pools = raw[6:].strip(" ")
            elif raw.startswith("STATE"):
                stats.state = raw
            elif raw.startswith("THREADS"):
                stats.threads = raw
            elif raw.startswith("QUEUE"):
                stats.queue = raw
            elif raw.startswith("MEMSTATS"):
                stats.memstats = raw
        return stats

    def reload(self) -> None:
        """Reload the signature databases; raise ClamdError unless ``RELOADING``."""
        self._expect("RELOAD", "RELOADING")

    def shutdown(self) -> None:
        """Ask the daemon to shut down."""
        with self.connect() as conn:
            conn.send_command("SHUTDOWN")

    def scan_file(self, path: str) -> Iterator[ScanResult]:
        """Scan a file or directory recursively with archive support."""
        return self._command(f"SCAN {path}")

    def raw_scan_file(self, path: str) -> Iterator[ScanResult]:
        """Scan with archive and special file support disabled."""
        return self._command(f"RAWSCAN {path}")

    def multi_scan_file(self, path: str) -> Iterator[ScanResult]:
        """Scan a directory using several daemon threads."""
        return self._command(f"MULTISCAN {path}")

    def cont_scan_file(self, path: str) -> Iterator[ScanResult]:
        """Scan without stopping at the first signature found."""
        return self._command(f"CONTSCAN {path}")

    def all_match_scan_file(self, path: str) -> Iterator[ScanResult]:
        """Scan without stopping, reporting every match."""
        return self._command(f"ALLMATCHSCAN {path}")

    def scan_stream(
        self, stream: BinaryIO, abort: threading.Event | None = None
    ) -> Iterator[ScanResult]:
        """Send the contents of ``stream`` in chunks and scan them.

        Setting ``abort`` stops sending (raising ClamdError) or stops
        reading further results.
        """
        conn = self.connect()
        try:
            conn.send_command("INSTREAM")
            for chunk in iter(partial(stream.read, CHUNK_SIZE), b""):
                if abort is not None and abort.is_set():
                    raise ClamdError("Stream scan aborted.")
                conn.send_chunk(chunk)
            if abort is not None and abort.is_set():
                raise ClamdError("Stream scan aborted.")
            conn.send_eof()
        except BaseException:
            conn.close()
            raise
        return self._results(conn, abort)