# netplus/modules/interface_monitor.py
from typing import List

from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandRunner
from netplus.core.schemas import InterfaceRecord, PacketCounters
from netplus.parsers.interfaces import parse_ifconfig, parse_interface_stats
from netplus.utils.logger import Logger


class InterfaceMonitor:
    """
    Network interface inventory.
    Lists interfaces with `ifconfig` and attaches per-interface counters
    from a single `netstat -ib` run.
    """
    def __init__(self, runner: CommandRunner):
        self.runner = runner
        self.logger = Logger()

    def get_interfaces(self) -> ProbeResult[List[InterfaceRecord]]:
        listing = self.runner.run(["ifconfig"])
        if not listing.ok:
            self.logger.warning(f"InterfaceMonitor: ifconfig unavailable ({listing.describe()})")
            return ProbeResult.fallback([], listing.describe())

        interfaces = parse_ifconfig(listing.stdout)

        counters = self.runner.run(["netstat", "-ib"])
        if counters.ok:
            stats = parse_interface_stats(counters.stdout)
        else:
            self.logger.warning(f"InterfaceMonitor: counters unavailable ({counters.describe()})")
            stats = {}

        return ProbeResult.ok([
            iface.model_copy(update={"packets": stats.get(iface.name, PacketCounters())})
            for iface in interfaces
        ])
