# remanejamento/log.py
#
# Shared engine logger.
#
# Design decisions:
#   - Single log() function used by every layer instead of per-module helpers.
#   - Each line carries a UTC timestamp and a level so best-effort failures
#     (audit, observation, team lookup) are easy to grep in server output.
#   - Plain stdout with flush for immediate visibility under uvicorn.
#   - Thread-safe: sys.stdout.write of a single string is atomic in CPython.
from __future__ import annotations

import sys
from datetime import UTC, datetime


def log(message: str, level: str = "INFO") -> None:
    """Write a timestamped log line to stdout."""
    agora = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")
    sys.stdout.write(f"[remanejamento {agora} {level}] {message}\n")
    sys.stdout.flush()
