"""
Routing parsers for `netstat -rn` and `traceroute` output.
"""
import re
from typing import List

from netplus.core.schemas import HopRecord, RouteRecord

HOP_RE = re.compile(
    r"^\s*(\d+)\s+"
    r"(?:(\S+)\s+\(([^)]+)\)|(\*)|(\S+))"
    r"(?:\s+(\d+\.?\d*)\s*ms)?"
)

DEFAULT_DESTINATION = "default"


def parse_route_table(output: str) -> List[RouteRecord]:
    """
    Two-section state machine. A header line containing "Destination" opens a
    section: "Gateway6" means IPv6, "Gateway" means IPv4 unless the preceding
    "Internet6:" title already announced the IPv6 table.
    """
    routes: List[RouteRecord] = []
    section = ""
    family = "ipv4"

    for line in (output or "").splitlines():
        stripped = line.strip()
        if stripped.startswith("Internet6"):
            family, section = "ipv6", ""
            continue
        if stripped.startswith("Internet"):
            family, section = "ipv4", ""
            continue
        if "Destination" in line:
            if "Gateway6" in line:
                section = "ipv6"
            elif "Gateway" in line:
                section = family
            continue

        if not section or not stripped:
            continue

        parts = stripped.split()
        if len(parts) < 4:
            continue
        routes.append(RouteRecord(
            destination=parts[0],
            gateway=parts[1],
            flags=parts[2],
            interface=parts[-1],
            type=section,
        ))

    return routes


def is_default_route(route: RouteRecord) -> bool:
    return route.destination == DEFAULT_DESTINATION


def parse_traceroute(output: str) -> List[HopRecord]:
    """One HopRecord per numbered hop line; the banner line is skipped."""
    hops = []
    for line in (output or "").splitlines()[1:]:
        match = HOP_RE.match(line)
        if not match:
            continue
        number, host, ip, star, bare, latency = match.groups()
        if star:
            hostname, address = "*", "*"
        elif bare:
            hostname, address = bare, bare
        else:
            hostname, address = host, ip
        hops.append(HopRecord(
            number=int(number),
            hostname=hostname,
            ip=address,
            latency=float(latency) if latency else None,
        ))
    return hops
