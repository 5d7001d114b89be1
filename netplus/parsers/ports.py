"""
Listener and connection parsers for `lsof -i -P -n` and `netstat -an`,
plus the static port intelligence tables.
"""
import re
from typing import List, Optional

from netplus.core.schemas import PortRecord, SuspiciousConnection

SERVICE_NAMES = {
    22: "SSH",
    23: "Telnet",
    25: "SMTP",
    53: "DNS",
    80: "HTTP",
    110: "POP3",
    143: "IMAP",
    443: "HTTPS",
    993: "IMAPS",
    995: "POP3S",
    3000: "Node.js Dev",
    3306: "MySQL",
    5432: "PostgreSQL",
    6379: "Redis",
    8080: "HTTP-Alt",
    8443: "HTTPS-Alt",
    9090: "Prometheus",
}

HIGH_RISK_PORTS = frozenset({22, 23, 3389, 5900})
MEDIUM_RISK_PORTS = frozenset({21, 25, 53, 110, 143, 993, 995})

LSOF_PATTERNS = (
    re.compile(r"(\w+)\s+(\d+)\s+(\w+)\s+.*?:(\d+)\s+.*LISTEN"),
    re.compile(r"(\w+)\s+(\d+)\s+(\w+)\s+.*?\.(\d+)\s+.*LISTEN"),
)
NETSTAT_LISTEN_RE = re.compile(r".*?[.:](\d+)\s+.*LISTEN")

PRIVATE_PREFIXES = ("127.", "192.168.", "10.")


def service_name(port: int) -> str:
    return SERVICE_NAMES.get(port, "Unknown")


def port_risk(port: int) -> str:
    if port in HIGH_RISK_PORTS:
        return "high"
    if port in MEDIUM_RISK_PORTS:
        return "medium"
    return "low"


def _valid_port(raw: str) -> Optional[int]:
    try:
        port = int(raw)
    except ValueError:
        return None
    return port if 1 <= port <= 65535 else None


def parse_lsof_listeners(output: str, limit: int = 10) -> List[PortRecord]:
    """Listening sockets from lsof, deduplicated by port (first wins)."""
    ports: List[PortRecord] = []
    seen = set()

    for line in (output or "").splitlines():
        if not line.strip():
            continue
        match = None
        for pattern in LSOF_PATTERNS:
            match = pattern.search(line)
            if match:
                break
        if not match:
            continue

        process, pid, user, raw_port = match.groups()
        port = _valid_port(raw_port)
        if port is None or port in seen:
            continue
        seen.add(port)
        ports.append(PortRecord(
            port=port,
            service=service_name(port),
            process=process,
            pid=int(pid),
            user=user,
            risk=port_risk(port),
        ))

    return ports[:limit]


def parse_netstat_listeners(output: str, limit: int = 10) -> List[PortRecord]:
    """Fallback listener source; netstat carries no process ownership."""
    ports: List[PortRecord] = []
    seen = set()

    for line in (output or "").splitlines():
        match = NETSTAT_LISTEN_RE.match(line)
        if not match:
            continue
        port = _valid_port(match.group(1))
        if port is None or port in seen:
            continue
        seen.add(port)
        ports.append(PortRecord(
            port=port,
            service=service_name(port),
            risk=port_risk(port),
        ))

    return ports[:limit]


def parse_established(output: str, limit: int = 5) -> List[SuspiciousConnection]:
    """Established connections whose foreign end is outside loopback/private ranges."""
    connections = []
    for line in (output or "").splitlines():
        if "ESTABLISHED" not in line:
            continue
        parts = line.split()
        if len(parts) < 5:
            continue
        foreign = parts[4]
        if foreign.startswith(PRIVATE_PREFIXES):
            continue
        connections.append(SuspiciousConnection(
            local=parts[3],
            foreign=foreign,
            state=parts[5] if len(parts) > 5 else "ESTABLISHED",
        ))
    return connections[:limit]
