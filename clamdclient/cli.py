"""Command that checks a daemon: ping, statistics and database reload."""

from __future__ import annotations

import argparse

from clamdclient.client import Clamd, ClamdError

__all__ = ["main"]

DEFAULT_ADDRESS = "/tmp/clamd.socket"


def main(argv: list[str] | None = None) -> int:
    """Run the checks against a daemon and print each outcome."""
    parser = argparse.ArgumentParser(
        prog="clamdclient",
        description="Ping a scanning daemon, show its statistics and reload its databases.",
    )
    parser.add_argument(
        "address",
        nargs="?",
        default=DEFAULT_ADDRESS,
        help="tcp://host:port, unix:///path or a socket path",
    )
    args = parser.parse_args(argv)

    client = Clamd(args.address)
    failed = False
    for label, action in (
        ("Ping", client.ping),
        ("Stats", client.stats),
        ("Reload", client.reload),
    ):
        try:
            value = action()
        except (ClamdError, OSError) as exc:
            print(f"{label}: {exc}")
            failed = True
        else:
            print(f"{label}: {'OK' if value is None else value}")
    return 1 if failed else 0


if __name__ == "__main__":
    raise SystemExit(main())