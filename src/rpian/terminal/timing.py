"""Blocking waits. Negative durations are treated as zero."""

from __future__ import annotations

import time


def wait_for_seconds(seconds: float) -> None:
    time.sleep(max(seconds, 0))


def wait_for_millis(millis: float) -> None:
    wait_for_seconds(millis / 1_000)


def wait_for_micros(micros: float) -> None:
    wait_for_seconds(micros / 1_000_000)
