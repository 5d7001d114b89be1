"""
Interface parsers for `ifconfig` and `netstat -ib` output.
"""
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from netplus.core.schemas import InterfaceRecord, PacketCounters

IPV4_RE = re.compile(r"inet (\d+\.\d+\.\d+\.\d+)")
MAC_RE = re.compile(r"ether ([a-f0-9:]{17})")
STATUS_RE = re.compile(r"status: (\w+)")
NAME_RE = re.compile(r"^(\w+):")
BLOCK_SPLIT_RE = re.compile(r"\n(?=\w)")

KNOWN_STATUSES = ("active", "inactive", "connecting")


@dataclass(frozen=True)
class Classification:
    type: str
    description: str
    purpose: str


Rule = Tuple[Callable[[str, str], bool], Classification]


def _en_wifi(name: str, block: str) -> bool:
    return name.startswith("en") and ("802.11" in block or "AirPort" in block)


def _en_wired(name: str, block: str) -> bool:
    return name.startswith("en") and ("1000baseT" in block or "100baseTX" in block)


def _prefix(*prefixes: str) -> Callable[[str, str], bool]:
    return lambda name, _block: name.startswith(prefixes)


# Evaluated top to bottom, first match wins.
CLASSIFICATION_TABLE: List[Rule] = [
    (lambda name, _b: name == "lo0",
     Classification("loopback", "Loopback interface for internal system communication", "System Internal")),
    (_en_wifi,
     Classification("wifi", "Wireless network adapter for WiFi connectivity", "WiFi Connection")),
    (_en_wired,
     Classification("ethernet", "Wired Ethernet adapter for stable network connection", "Wired Network")),
    (lambda name, _b: name == "en0",
     Classification("wifi", "Primary network interface (usually WiFi on MacBook)", "Primary WiFi")),
    (_prefix("en"),
     Classification("ethernet", "Secondary network interface (USB/Thunderbolt adapter)", "USB/TB Ethernet")),
    (_prefix("bridge"),
     Classification("bridge", "Virtual bridge for VM or container networking", "Virtual Bridge")),
    (_prefix("utun", "tun"),
     Classification("vpn", "VPN tunnel interface for secure remote connection", "VPN Tunnel")),
    (_prefix("awdl"),
     Classification("p2p", "Apple Wireless Direct Link for AirDrop/Handoff", "AirDrop/Handoff")),
    (_prefix("llw"),
     Classification("lowlatency", "Low Latency WLAN interface for real-time apps", "Low Latency WiFi")),
    (_prefix("gif"),
     Classification("tunnel", "Generic tunnel interface", "IP Tunnel")),
    (_prefix("stf"),
     Classification("tunnel", "6to4 tunnel interface", "IPv6 Tunnel")),
    (_prefix("ap"),
     Classification("virtual", "Access point virtual interface", "Virtual AP")),
]


def classify_interface(name: str, block: str = "") -> Classification:
    for predicate, classification in CLASSIFICATION_TABLE:
        if predicate(name, block):
            return classification
    return Classification("unknown", f"Network interface {name} - purpose unknown", "Unknown")


def interface_speed(block: str) -> str:
    if "1000baseT" in block:
        return "1 Gbps"
    if "100baseTX" in block:
        return "100 Mbps"
    if "10baseT" in block:
        return "10 Mbps"
    if "802.11" in block:
        if re.search(r"802\.11\s*ac", block):
            return "866 Mbps (802.11ac)"
        if re.search(r"802\.11\s*n", block):
            return "300 Mbps (802.11n)"
        return "WiFi"
    return "N/A"


def parse_ifconfig(output: str) -> List[InterfaceRecord]:
    """One InterfaceRecord per ifconfig block, packet counters zeroed."""
    records = []
    for block in BLOCK_SPLIT_RE.split(output or ""):
        name_match = NAME_RE.match(block)
        if not name_match:
            continue
        name = name_match.group(1)
        ip_match = IPV4_RE.search(block)
        mac_match = MAC_RE.search(block)
        status_match = STATUS_RE.search(block)

        status = status_match.group(1).lower() if status_match else ""
        if status not in KNOWN_STATUSES:
            status = "active" if ip_match else "inactive"

        info = classify_interface(name, block)
        records.append(InterfaceRecord(
            name=name,
            type=info.type,
            status=status,
            ip=ip_match.group(1) if ip_match else "N/A",
            mac=mac_match.group(1) if mac_match else "N/A",
            speed=interface_speed(block),
            description=info.description,
            purpose=info.purpose,
        ))
    return records


def interface_names(output: str) -> List[str]:
    return [r.name for r in parse_ifconfig(output)]


def _to_int(token: str) -> int:
    try:
        return int(token)
    except ValueError:
        return 0


def parse_interface_stats(output: str) -> Dict[str, PacketCounters]:
    """
    Maps interface name to its counters from `netstat -ib`.
    Columns end with Ipkts Ierrs Ibytes Opkts Oerrs Obytes Coll; the
    Address column is sometimes blank, so counters are read from the right.
    Only the first (link-level) row of each interface is used.
    """
    stats: Dict[str, PacketCounters] = {}
    for line in (output or "").splitlines()[1:]:
        parts = line.split()
        if len(parts) < 10:
            continue
        name = parts[0].rstrip("*")
        if name in stats:
            continue
        stats[name] = PacketCounters(
            rx=_to_int(parts[-7]),
            rx_bytes=_to_int(parts[-5]),
            tx=_to_int(parts[-4]),
            tx_bytes=_to_int(parts[-2]),
        )
    return stats


def sum_traffic_bytes(stats: Dict[str, PacketCounters]) -> Tuple[int, int]:
    """Total (rx_bytes, tx_bytes) over non-loopback interfaces."""
    rx = tx = 0
    for name, counters in stats.items():
        if name.startswith("lo"):
            continue
        rx += counters.rx_bytes
        tx += counters.tx_bytes
    return rx, tx
