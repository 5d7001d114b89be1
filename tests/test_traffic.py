# tests/test_traffic.py
import threading
import time

import pytest

import samples
from fakes import FakeRunner
from netplus.modules.traffic_tracker import TrafficMonitor, TrafficTracker


def make_clock(*ticks):
    values = iter(ticks)
    return lambda: next(values)


def test_first_sample_has_no_rate():
    tracker = TrafficTracker(clock=make_clock(0.0, 10.0))
    sample = tracker.sample(rx_bytes=5_000_000, tx_bytes=2_000_000)

    assert sample.upload == 0
    assert sample.download == 0
    assert sample.total.download == 5_000_000
    assert sample.total.upload == 2_000_000


def test_rate_between_samples():
    tracker = TrafficTracker(clock=make_clock(0.0, 10.0, 12.0))
    tracker.sample(rx_bytes=1000, tx_bytes=500)
    sample = tracker.sample(rx_bytes=5000, tx_bytes=1500)

    assert sample.download == pytest.approx(2000.0)
    assert sample.upload == pytest.approx(500.0)


def test_counter_reset_is_clamped():
    tracker = TrafficTracker(clock=make_clock(0.0, 1.0, 2.0))
    tracker.sample(rx_bytes=9000, tx_bytes=9000)
    sample = tracker.sample(rx_bytes=100, tx_bytes=100)

    assert sample.download == 0
    assert sample.upload == 0
    assert tracker.previous_rx == 100


def test_no_time_elapsed_gives_zero():
    tracker = TrafficTracker(clock=make_clock(0.0, 5.0, 5.0))
    tracker.sample(rx_bytes=1000, tx_bytes=1000)
    sample = tracker.sample(rx_bytes=2000, tx_bytes=2000)
    assert sample.download == 0


class RecordingClock:
    """Monotonic ticks that remember which thread read each one."""

    def __init__(self):
        self._guard = threading.Lock()
        self._next = 0.0
        self.ticks = {}
        self.active = 0
        self.max_active = 0

    def __call__(self):
        with self._guard:
            self.active += 1
            self.max_active = max(self.max_active, self.active)
            self._next += 1.0
            tick = self._next
            self.ticks[tick] = threading.current_thread().name
        # widen the window between reading the clock and storing the sample
        time.sleep(0.002)
        with self._guard:
            self.active -= 1
        return tick


def test_concurrent_samples_store_one_consistent_triple():
    """The stored counters and timestamp always come from the same call."""
    clock = RecordingClock()
    tracker = TrafficTracker(clock=clock)
    counters = {f"sampler-{i}": (1000 * (i + 1), 500 * (i + 1)) for i in range(8)}
    barrier = threading.Barrier(len(counters))

    def run(rx, tx):
        barrier.wait()
        tracker.sample(rx, tx)

    threads = [
        threading.Thread(target=run, args=counters[name], name=name)
        for name in counters
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert clock.max_active == 1
    owner = clock.ticks[tracker.previous_timestamp]
    assert owner in counters
    assert (tracker.previous_rx, tracker.previous_tx) == counters[owner]
    assert tracker.previous_timestamp == max(clock.ticks)


def test_monitor_sums_netstat_counters():
    runner = FakeRunner({("netstat", "-ib"): samples.NETSTAT_IB})
    monitor = TrafficMonitor(runner, TrafficTracker(clock=make_clock(0.0, 1.0)))

    result = monitor.sample()

    assert not result.degraded
    assert result.value.total.download == 7000000
    assert result.value.total.upload == 1000000


def test_monitor_without_netstat():
    monitor = TrafficMonitor(FakeRunner(), TrafficTracker())
    result = monitor.sample()

    assert result.degraded
    assert result.value.upload == 0
    assert result.value.total.download == 0
