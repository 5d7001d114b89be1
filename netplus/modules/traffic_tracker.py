"""
Traffic Rate Tracker

Turns two successive byte-counter samples into upload/download rates.
The tracker owns the only mutable state in the collector (previous rx,
previous tx, previous timestamp) and serialises every read-then-write
behind a lock so concurrent snapshot requests cannot lose an update.
"""

import threading
import time
from typing import Callable

from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandRunner
from netplus.core.schemas import TrafficSample, TrafficTotals
from netplus.parsers.interfaces import parse_interface_stats, sum_traffic_bytes
from netplus.utils.logger import Logger


class TrafficTracker:
    """Rate/delta state for one process lifetime.

    A rate is produced only when both previous counters are non-zero and
    time has advanced; the stored sample is overwritten on every call.
    The first call therefore always reports a rate of 0.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self._lock = threading.Lock()
        self.previous_rx = 0
        self.previous_tx = 0
        self.previous_timestamp = clock()

    def sample(self, rx_bytes: int, tx_bytes: int) -> TrafficSample:
        with self._lock:
            now = self._clock()
            elapsed = now - self.previous_timestamp

            upload = download = 0.0
            if self.previous_rx > 0 and self.previous_tx > 0 and elapsed > 0:
                # Counter resets show up as negative deltas; report them as idle.
                upload = max(tx_bytes - self.previous_tx, 0) / elapsed
                download = max(rx_bytes - self.previous_rx, 0) / elapsed

            self.previous_rx = rx_bytes
            self.previous_tx = tx_bytes
            self.previous_timestamp = now

        return TrafficSample(
            upload=upload,
            download=download,
            total=TrafficTotals(upload=tx_bytes, download=rx_bytes),
        )


class TrafficMonitor:
    """Samples `netstat -ib` totals and feeds them to the tracker."""

    def __init__(self, runner: CommandRunner, tracker: TrafficTracker):
        self.runner = runner
        self.tracker = tracker
        self.logger = Logger()

    def sample(self) -> ProbeResult[TrafficSample]:
        result = self.runner.run(["netstat", "-ib"])
        if not result.ok:
            self.logger.warning(f"TrafficMonitor: counters unavailable ({result.describe()})")
            return ProbeResult.fallback(TrafficSample(), result.describe())

        rx, tx = sum_traffic_bytes(parse_interface_stats(result.stdout))
        return ProbeResult.ok(self.tracker.sample(rx, tx))
