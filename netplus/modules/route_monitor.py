"""
Route Diagnostics Module

Routing table, default-gateway reachability, internet ping and optional
traceroute. A gateway that does not answer its ping is reported with the
sentinels latency=999, loss=100, hostname="Unknown".
"""

from typing import Dict, List, Tuple

from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandRunner
from netplus.core.schemas import HopRecord, PingResult, RouteRecord, RouteSummary
from netplus.parsers.ping import parse_ping
from netplus.parsers.routes import is_default_route, parse_route_table, parse_traceroute
from netplus.utils.logger import Logger

UNREACHABLE = {"latency": 999.0, "loss": 100.0, "hostname": "Unknown"}


class RouteMonitor:
    """Routing table inspection with bounded reachability probes."""

    def __init__(self, runner: CommandRunner, ping_target: str = "8.8.8.8",
                 ping_count: int = 3, ping_timeout_ms: int = 3000,
                 route_limit: int = 15, traceroute_timeout: float = 20.0,
                 traceroute_max_hops: int = 20):
        self.runner = runner
        self.ping_target = ping_target
        self.ping_count = ping_count
        self.ping_timeout_ms = ping_timeout_ms
        self.route_limit = route_limit
        self.traceroute_timeout = traceroute_timeout
        self.traceroute_max_hops = traceroute_max_hops
        self.logger = Logger()

    def ping_host(self, host: str) -> ProbeResult[PingResult]:
        """
        `ping -c <count> -W <ms>`. Replies are parsed even on a non-zero
        exit, since ping exits 2 when some but not all probes were lost.
        """
        bound = self.ping_count * self.ping_timeout_ms / 1000 + 2
        result = self.runner.run(
            ["ping", "-c", str(self.ping_count), "-W", str(self.ping_timeout_ms), host],
            timeout=bound,
        )
        parsed = parse_ping(result.stdout)
        if parsed is None:
            reason = result.describe() if not result.ok else f"no replies from {host}"
            return ProbeResult.fallback(PingResult(), reason)
        return ProbeResult.ok(parsed)

    def reverse_dns(self, address: str) -> str:
        """PTR name via dig, or the address itself when there is none."""
        result = self.runner.run(["dig", "+short", "-x", address], timeout=5)
        if result.ok:
            lines = result.stdout.strip().splitlines()
            if lines:
                return lines[0].rstrip(".")
        return address

    def ping(self) -> ProbeResult[PingResult]:
        return self.ping_host(self.ping_target)

    def traceroute(self) -> ProbeResult[List[HopRecord]]:
        """One probe per hop, 1s wait, at most traceroute_max_hops hops."""
        result = self.runner.run(
            ["traceroute", "-q", "1", "-w", "1", "-m", str(self.traceroute_max_hops), self.ping_target],
            timeout=self.traceroute_timeout,
        )
        if not result.ok:
            return ProbeResult.fallback([], result.describe())
        return ProbeResult.ok(parse_traceroute(result.stdout))

    def _probe_gateway(self, route: RouteRecord) -> Tuple[RouteRecord, ProbeResult[PingResult]]:
        reach = self.ping_host(route.gateway)
        if reach.degraded:
            self.logger.warning(f"RouteMonitor: gateway {route.gateway} unreachable ({reach.reason})")
            return route.model_copy(update=UNREACHABLE), reach
        return route.model_copy(update={
            "latency": reach.value.latency,
            "loss": reach.value.loss,
            "hostname": self.reverse_dns(route.gateway),
        }), reach

    def get_routes(self, include_traceroute: bool = False) -> ProbeResult[RouteSummary]:
        table = self.runner.run(["netstat", "-rn"])
        if not table.ok:
            self.logger.warning(f"RouteMonitor: routing table unavailable ({table.describe()})")
            return ProbeResult.fallback(RouteSummary(), table.describe())

        parts: Dict[str, ProbeResult] = {}
        routes: List[RouteRecord] = []
        gateways: List[RouteRecord] = []
        for route in parse_route_table(table.stdout):
            if is_default_route(route):
                key = f"gateway {route.gateway}"
                route, parts[key] = self._probe_gateway(route)
                gateways.append(route)
            routes.append(route)

        hops: List[HopRecord] = []
        if include_traceroute:
            trace = self.traceroute()
            hops = trace.value
            parts["traceroute"] = trace

        summary = RouteSummary(
            default_gateways=gateways,
            routes=routes[:self.route_limit],
            traceroute=hops,
        )
        return ProbeResult.combine(summary, parts)
