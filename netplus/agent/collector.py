"""
NetPlus Snapshot Collector

Fan-out/fan-in aggregator over the probe strategies. One collect() call
submits every operation its categories need to a shared thread pool, waits
for them with an overall deadline, and composes an immutable Snapshot.

Category -> operations:
- interfaces:  interfaces, traffic
- security:    security
- routes:      routes, ping
- performance: performance, mac_info
- all:         all seven

Traceroute, when requested, runs as its own operation next to "routes" so a
slow trace never costs the routing table; its hops are merged into
routes.traceroute after the join.

Failure handling:
- Probe degradations (tool missing, timeout, parse miss) are recorded in
  Snapshot.degraded and counted in degradation_counts.
- An operation that raises, or does not finish before the deadline, is
  replaced by its category default.
- Anything escaping the per-operation guards becomes a CollectorError.
"""

import threading
from collections import Counter
from concurrent.futures import Future, ThreadPoolExecutor, wait
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from netplus.core.config import Config
from netplus.core.errors import CollectorError, PipelineFailure
from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandRunner
from netplus.core.schemas import (
    HostInfo,
    PerformanceSample,
    PingResult,
    RouteSummary,
    SecurityPosture,
    Snapshot,
    TrafficSample,
)
from netplus.modules.firewall_monitor import FirewallMonitor
from netplus.modules.host_info import HostInfoProbe
from netplus.modules.interface_monitor import InterfaceMonitor
from netplus.modules.performance_monitor import PerformanceMonitor
from netplus.modules.route_monitor import RouteMonitor
from netplus.modules.security_monitor import SecurityMonitor
from netplus.modules.traffic_tracker import TrafficMonitor, TrafficTracker
from netplus.utils.logger import Logger

CATEGORY_OPERATIONS: Dict[str, tuple] = {
    "interfaces": ("interfaces", "traffic"),
    "security": ("security",),
    "routes": ("routes", "ping"),
    "performance": ("performance", "mac_info"),
}
CATEGORIES = tuple(CATEGORY_OPERATIONS) + ("all",)

OPERATION_DEFAULTS: Dict[str, Callable[[], Any]] = {
    "interfaces": list,
    "traffic": TrafficSample,
    "security": SecurityPosture,
    "routes": RouteSummary,
    "ping": PingResult,
    "performance": PerformanceSample,
    "mac_info": HostInfo,
    "traceroute": list,
}


def resolve_operations(categories: Union[str, Iterable[str], None]) -> List[str]:
    """Expands category names into the ordered list of operations to run.

    Args:
        categories: A category name, an iterable of names, or None for "all".

    Returns:
        List of operation names (Snapshot field names), without duplicates.

    Raises:
        ValueError: If a name is not one of CATEGORIES.
    """
    if categories is None:
        names = ["all"]
    elif isinstance(categories, str):
        names = [categories]
    else:
        names = list(categories) or ["all"]

    unknown = [n for n in names if n not in CATEGORIES]
    if unknown:
        raise ValueError(f"Unknown categories: {unknown}. Expected any of {list(CATEGORIES)}")

    if "all" in names:
        names = list(CATEGORY_OPERATIONS)

    operations: List[str] = []
    for name in names:
        for op in CATEGORY_OPERATIONS[name]:
            if op not in operations:
                operations.append(op)
    return operations


class SnapshotCollector:
    """Builds Snapshots from concurrently executed probes.

    The collector owns the TrafficTracker, so rate state lives exactly as
    long as the collector and is shared by every request it serves.
    """

    def __init__(self, config: Optional[Config] = None, runner: Optional[CommandRunner] = None,
                 tracker: Optional[TrafficTracker] = None, max_workers: int = 8):
        self.config = config or Config()
        self.runner = runner or CommandRunner(default_timeout=self.config.command_timeout)
        self.tracker = tracker or TrafficTracker()
        self.logger = Logger()

        self.interface_monitor = InterfaceMonitor(self.runner)
        self.traffic_monitor = TrafficMonitor(self.runner, self.tracker)
        self.security_monitor = SecurityMonitor(
            self.runner,
            FirewallMonitor(self.runner),
            port_limit=self.config.port_limit,
            suspicious_limit=self.config.suspicious_limit,
        )
        self.route_monitor = RouteMonitor(
            self.runner,
            ping_target=self.config.ping_target,
            ping_count=self.config.ping_count,
            ping_timeout_ms=self.config.ping_timeout_ms,
            route_limit=self.config.route_limit,
            traceroute_timeout=min(self.config.traceroute_timeout, max(self.config.collect_timeout - 1.0, 1.0)),
            traceroute_max_hops=self.config.traceroute_max_hops,
        )
        self.performance_monitor = PerformanceMonitor(
            self.runner,
            ping_target=self.config.ping_target,
            jitter_probes=self.config.jitter_probes,
        )
        self.host_info = HostInfoProbe(self.runner)

        self.degradation_counts: Counter = Counter()
        self._counts_lock = threading.Lock()
        self.executor = ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="Probe")

    def _operations(self) -> Dict[str, Callable[[], ProbeResult]]:
        return {
            "interfaces": self.interface_monitor.get_interfaces,
            "traffic": self.traffic_monitor.sample,
            "security": self.security_monitor.collect,
            "routes": self.route_monitor.get_routes,
            "traceroute": self.route_monitor.traceroute,
            "ping": self.route_monitor.ping,
            "performance": self.performance_monitor.collect,
            "mac_info": self.host_info.collect,
        }

    def _record_degraded(self, degraded: Dict[str, str], name: str, reason: str) -> None:
        degraded[name] = reason
        self.logger.degraded(name, reason)
        with self._counts_lock:
            self.degradation_counts[name] += 1

    def collect(self, categories: Union[str, Iterable[str], None] = "all",
                include_traceroute: Optional[bool] = None,
                timeout: Optional[float] = None) -> Snapshot:
        """Collect one snapshot.

        Args:
            categories: "interfaces", "security", "routes", "performance",
                "all", or an iterable of those.
            include_traceroute: Run the (slow) traceroute with the routes
                category. Defaults to the configured value.
            timeout: Overall deadline in seconds; operations still running
                afterwards are replaced by their defaults.

        Returns:
            Snapshot with the requested categories and an ISO-8601 timestamp.

        Raises:
            ValueError: Unknown category name.
            CollectorError: Unexpected failure outside every probe.
        """
        operations = resolve_operations(categories)
        if include_traceroute is None:
            include_traceroute = self.config.traceroute_enabled
        if include_traceroute and "routes" in operations:
            operations.append("traceroute")
        deadline = self.config.collect_timeout if timeout is None else timeout

        try:
            table = self._operations()
            futures: Dict[Future, str] = {
                self.executor.submit(table[name]): name for name in operations
            }
            _, not_done = wait(futures, timeout=deadline)

            values: Dict[str, Any] = {}
            degraded: Dict[str, str] = {}
            for future, name in futures.items():
                if future in not_done:
                    future.cancel()
                    self.logger.warning(f"Collector: '{name}' did not finish within {deadline}s")
                    values[name] = OPERATION_DEFAULTS[name]()
                    self._record_degraded(degraded, name, f"timed out after {deadline}s")
                    continue

                try:
                    result: ProbeResult = future.result()
                except Exception as e:
                    failure = PipelineFailure(name, e)
                    self.logger.error(f"Collector: {failure}")
                    values[name] = OPERATION_DEFAULTS[name]()
                    self._record_degraded(degraded, name, f"pipeline failure: {e}")
                    continue

                values[name] = result.value
                if result.degraded:
                    self._record_degraded(degraded, name, result.reason)

            hops = values.pop("traceroute", None)
            if hops is not None:
                values["routes"] = values["routes"].model_copy(update={"traceroute": tuple(hops)})

            snapshot = Snapshot(
                **values,
                degraded=degraded,
                timestamp=datetime.now(timezone.utc).isoformat(),
            )
        except Exception as e:
            self.logger.error(f"Collector: snapshot failed: {e}")
            raise CollectorError(str(e)) from e

        self.logger.success(f"Collector: snapshot ready ({', '.join(operations)})")
        return snapshot

    def close(self) -> None:
        self.executor.shutdown(wait=False, cancel_futures=True)

    def __enter__(self) -> "SnapshotCollector":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
