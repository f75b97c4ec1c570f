"""Scan results reported by the daemon and the parser for its reply lines."""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass

__all__ = ["ScanStatus", "ScanResult", "parse_result"]


class ScanStatus(str, enum.Enum):
    """Outcome of a scan as reported on a reply line."""

    OK = "OK"
    FOUND = "FOUND"
    ERROR = "ERROR"
    PARSE_ERROR = "PARSE ERROR"

    def __str__(self) -> str:
        return self.value


_RESULT_PATTERN = re.compile(
    r"(?P<path>[^:]+): "
    r"((?P<desc>[^:]+)(\((?P<virhash>([^:]+)):(?P<virsize>\d+)\))? )?"
    r"(?P<status>FOUND|ERROR|OK)",
    re.ASCII,
)


@dataclass(frozen=True)
class ScanResult:
    """One reply line from the daemon, split into its parts."""

    raw: str
    status: ScanStatus
    path: str = ""
    description: str = ""
    hash: str = ""
    size: int = 0

    @property
    def infected(self) -> bool:
        """True when the daemon reported a signature match."""
        return self.status is ScanStatus.FOUND


def parse_result(line: str) -> ScanResult:
    """Parse a reply line such as ``stream: Eicar-Signature FOUND``.

    Lines that do not have the form of a scan result come back with
    status ``PARSE_ERROR`` and the raw text kept.
    """
    match = _RESULT_PATTERN.fullmatch(line)
    if match is None:
        return ScanResult(
            raw=line,
            status=ScanStatus.PARSE_ERROR,
            description="Regex had no matches",
        )

    size_text = match["virsize"]
    return ScanResult(
        raw=line,
        status=ScanStatus(match["status"]),
        path=match["path"] or "",
        description=match["desc"] or "",
        hash=match["virhash"] or "",
        size=int(size_text) if size_text else 0,
    )