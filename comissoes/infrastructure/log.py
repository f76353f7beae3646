# comissoes/infrastructure/log.py
#
# Shared logger with elapsed time since process start.
#
# Design decisions:
#   - Single log() function used by the repository, the API lifespan and the
#     dashboard panel.
#   - Plain stdout with flush, no logging framework.
#   - The prefix names the emitting component so API and panel lines can be
#     told apart when both run in the same process (tests, scripts).
from __future__ import annotations

import sys
import time

_start = time.monotonic()


def log(message: str, *, origem: str = "comissoes") -> None:
    """Write a timestamped log line to stdout."""
    elapsed = time.monotonic() - _start
    minutes, seconds = divmod(int(elapsed), 60)
    sys.stdout.write(f"[{origem} {minutes:02d}:{seconds:02d}] {message}\n")
    sys.stdout.flush()
