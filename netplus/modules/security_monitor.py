# netplus/modules/security_monitor.py
import re
from concurrent.futures import ThreadPoolExecutor
from typing import List

from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandRunner
from netplus.core.schemas import PortRecord, SecurityPosture, SuspiciousConnection
from netplus.modules.firewall_monitor import FirewallMonitor
from netplus.parsers.interfaces import interface_names
from netplus.parsers.ports import (
    parse_established,
    parse_lsof_listeners,
    parse_netstat_listeners,
)
from netplus.utils.logger import Logger

VPN_INTERFACE_RE = re.compile(r"^(utun|tun|ppp)")


class SecurityMonitor:
    """
    Security posture: firewall, VPN presence, exposed listeners and
    established connections to non-private hosts.
    """
    def __init__(self, runner: CommandRunner, firewall: FirewallMonitor,
                 port_limit: int = 10, suspicious_limit: int = 5):
        self.runner = runner
        self.firewall = firewall
        self.port_limit = port_limit
        self.suspicious_limit = suspicious_limit
        self.logger = Logger()

    def check_vpn(self) -> ProbeResult[bool]:
        listing = self.runner.run(["ifconfig"])
        if not listing.ok:
            return ProbeResult.fallback(False, listing.describe())
        names = interface_names(listing.stdout)
        return ProbeResult.ok(any(VPN_INTERFACE_RE.match(n) for n in names))

    def get_open_ports(self) -> ProbeResult[List[PortRecord]]:
        """
        lsof first. lsof exits non-zero on partial permission errors, so its
        stdout is used whatever the exit code; netstat takes over only when
        lsof produced no listener lines at all.
        """
        lsof = self.runner.run(["lsof", "-i", "-P", "-n"])
        listeners = "\n".join(line for line in lsof.stdout.splitlines() if "LISTEN" in line)
        if listeners.strip():
            return ProbeResult.ok(parse_lsof_listeners(listeners, self.port_limit))

        self.logger.info("SecurityMonitor: no lsof listeners, trying netstat.")
        netstat = self.runner.run(["netstat", "-an"])
        if not netstat.ok:
            self.logger.warning(f"SecurityMonitor: port listing unavailable ({netstat.describe()})")
            return ProbeResult.fallback([], f"{lsof.describe()}; {netstat.describe()}")
        return ProbeResult.ok(parse_netstat_listeners(netstat.stdout, self.port_limit))

    def get_suspicious_connections(self) -> ProbeResult[List[SuspiciousConnection]]:
        netstat = self.runner.run(["netstat", "-an"])
        if not netstat.ok:
            return ProbeResult.fallback([], netstat.describe())
        return ProbeResult.ok(parse_established(netstat.stdout, self.suspicious_limit))

    def collect(self) -> ProbeResult[SecurityPosture]:
        with ThreadPoolExecutor(max_workers=5, thread_name_prefix="Security") as pool:
            enabled_f = pool.submit(self.firewall.check_enabled)
            details_f = pool.submit(self.firewall.get_details)
            vpn_f = pool.submit(self.check_vpn)
            ports_f = pool.submit(self.get_open_ports)
            suspicious_f = pool.submit(self.get_suspicious_connections)
            parts = {
                "firewall": enabled_f.result(),
                "firewall_details": details_f.result(),
                "vpn": vpn_f.result(),
                "ports": ports_f.result(),
                "connections": suspicious_f.result(),
            }

        ports = parts["ports"].value
        suspicious = parts["connections"].value
        high_risk = sum(1 for p in ports if p.risk == "high")

        posture = SecurityPosture(
            firewall=parts["firewall_details"].value.model_copy(
                update={"enabled": parts["firewall"].value}
            ),
            vpn=parts["vpn"].value,
            threats=high_risk + len(suspicious),
            ports=ports,
            suspicious_connections=suspicious,
        )
        self.logger.info(
            f"SecurityMonitor: {len(ports)} listeners, {posture.threats} threats, vpn={posture.vpn}"
        )
        return ProbeResult.combine(posture, parts)
