# clamdclient

A small client for the ClamAV daemon (`clamd`). It speaks the clamd protocol
over a TCP socket (`tcp://host:port`) or a Unix domain socket (a plain path or
`unix:///path/to/socket`). It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Library usage

```python
import threading

from clamdclient.client import EICAR, Clamd, ClamdError
from clamdclient.result import ScanStatus

clamd = Clamd("tcp://127.0.0.1:3310")

clamd.ping()                      # raises ClamdError unless the daemon answers PONG

for result in clamd.version():
    print(result.raw)

stats = clamd.stats()
print(stats.pools, stats.state, stats.threads, stats.queue, stats.memstats)

for result in clamd.scan_file("/var/tmp/upload"):
    if result.status == ScanStatus.FOUND:
        print(f"{result.path}: {result.description}")

abort = threading.Event()
with open("document.pdf", "rb") as fh:
    for result in clamd.scan_stream(fh, abort):
        print(result.status, result.description, result.infected)

clamd.reload()                    # raises ClamdError unless the daemon answers RELOADING
```

### Commands

`Clamd` opens a new connection for every command:

- `ping()` and `reload()` return nothing and raise `ClamdError` when the
  reply is missing or not the expected one.
- `stats()` returns a `Stats` with `pools`, `state`, `threads`, `memstats`
  and `queue`.
- `shutdown()` asks the daemon to shut down.
- `version()`, `scan_file`, `raw_scan_file`, `multi_scan_file`,
  `cont_scan_file` and `all_match_scan_file` return an iterator of
  `ScanResult`, one per reply line; the connection is closed once the
  iterator is exhausted or closed.
- `scan_stream(stream, abort=None)` sends the contents of a binary file
  object with `INSTREAM` in 1024-byte chunks, then the zero-length end
  marker. If the optional `threading.Event` is set while sending, a
  `ClamdError` is raised; if it is set while reading, no further results
  are read. Keep the total under the daemon's `StreamMaxLength`, or clamd
  will close the connection.

Connection failures surface as `OSError`. TCP connections time out after two
seconds while connecting.

`EICAR` holds the standard anti-virus test string, handy for checking that
the daemon detects it.

### Results

A `ScanResult` carries `raw` (the reply line), `status` (a `ScanStatus`:
`OK`, `FOUND`, `ERROR` or `PARSE ERROR`), `path`, `description`, `hash`,
`size` and the `infected` property. Lines that do not have the form
`<path>: [<description>] <status>` come back with status `PARSE ERROR`.

`parse_result` from `clamdclient.result` turns a single reply line into a
`ScanResult`. `clamdclient.connection` offers the low-level
`ClamdConnection` (`send_command`, `send_chunk`, `send_eof`, `read_results`,
usable as a context manager) together with `connect_tcp` and `connect_unix`.

## Command line

```
clamdclient [ADDRESS]
```

Pings the daemon, prints its statistics and asks it to reload its databases,
printing one line per step. `ADDRESS` defaults to `/tmp/clamd.socket`. The
exit status is 1 if any step failed, 0 otherwise. Run `clamdclient --help`
for usage.