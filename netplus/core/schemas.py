"""
NetPlus Data Contracts
Defines the structure of every record a snapshot can carry.
Field names serialise to camelCase for the dashboard.
"""
from typing import Dict, Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

InterfaceType = Literal[
    "wifi", "ethernet", "loopback", "bridge", "vpn",
    "p2p", "lowlatency", "tunnel", "virtual", "unknown",
]
InterfaceStatus = Literal["active", "inactive", "connecting"]
RiskLevel = Literal["low", "medium", "high"]


class CamelModel(BaseModel):
    """Read-only base: every record is frozen and sequences are tuples."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


# --- Interfaces & traffic ---

class PacketCounters(CamelModel):
    rx: int = 0
    tx: int = 0
    rx_bytes: int = 0
    tx_bytes: int = 0


class InterfaceRecord(CamelModel):
    name: str
    type: InterfaceType = "unknown"
    status: InterfaceStatus = "inactive"
    ip: str = "N/A"
    mac: str = "N/A"
    speed: str = "N/A"
    description: str = ""
    purpose: str = "Unknown"
    packets: PacketCounters = Field(default_factory=PacketCounters)


class TrafficTotals(CamelModel):
    """Cumulative bytes across non-loopback interfaces."""
    upload: int = 0
    download: int = 0


class TrafficSample(CamelModel):
    """Rates in bytes/sec."""
    upload: float = 0.0
    download: float = 0.0
    total: TrafficTotals = Field(default_factory=TrafficTotals)


# --- Routes ---

class RouteRecord(CamelModel):
    destination: str
    gateway: str
    flags: str = ""
    interface: str = ""
    type: Literal["ipv4", "ipv6"] = "ipv4"
    latency: Optional[float] = None
    loss: Optional[float] = None
    hostname: Optional[str] = None


class HopRecord(CamelModel):
    number: int
    hostname: str = "*"
    ip: str = "*"
    latency: Optional[float] = None


class RouteSummary(CamelModel):
    default_gateways: Tuple[RouteRecord, ...] = Field(default_factory=tuple)
    routes: Tuple[RouteRecord, ...] = Field(default_factory=tuple)
    traceroute: Tuple[HopRecord, ...] = Field(default_factory=tuple)


class PingResult(CamelModel):
    latency: float = 999.0
    loss: float = 100.0


# --- Security ---

class PortRecord(CamelModel):
    port: int = Field(ge=1, le=65535)
    service: str = "Unknown"
    status: str = "open"
    process: str = "unknown"
    pid: Optional[int] = None
    user: str = "unknown"
    risk: RiskLevel = "low"


class SuspiciousConnection(CamelModel):
    local: str
    foreign: str
    state: str = "ESTABLISHED"


class FirewallPosture(CamelModel):
    enabled: bool = True
    stealth_mode: bool = False
    block_all: bool = False
    rules: int = Field(default=0, ge=0)


class SecurityPosture(CamelModel):
    firewall: FirewallPosture = Field(default_factory=FirewallPosture)
    vpn: bool = False
    threats: int = 0
    ports: Tuple[PortRecord, ...] = Field(default_factory=tuple)
    suspicious_connections: Tuple[SuspiciousConnection, ...] = Field(default_factory=tuple)


# --- Performance & host ---

class MemoryDetails(CamelModel):
    """Page counts as reported by vm_stat."""
    active: int = 0
    inactive: int = 0
    wired: int = 0
    compressed: int = 0
    free: int = 0


class MemoryBreakdown(CamelModel):
    percentage: float = 0.0
    used: float = 0.0
    total: float = 0.0
    details: MemoryDetails = Field(default_factory=MemoryDetails)


class PerformanceSample(CamelModel):
    cpu: float = 0.0
    memory: MemoryBreakdown = Field(default_factory=MemoryBreakdown)
    jitter: Tuple[float, ...] = Field(default_factory=tuple)


class BatteryInfo(CamelModel):
    percentage: int = 0
    charging: bool = False
    time_remaining: int = 0


class HostInfo(CamelModel):
    os_version: str = "Unknown"
    chip_info: str = "Unknown"
    battery: BatteryInfo = Field(default_factory=BatteryInfo)
    hostname: str = "Unknown"
    uptime: str = "Unknown"


# --- Aggregate ---

class Snapshot(CamelModel):
    """One immutable collect() result. Absent categories stay None."""

    interfaces: Optional[Tuple[InterfaceRecord, ...]] = None
    traffic: Optional[TrafficSample] = None
    security: Optional[SecurityPosture] = None
    routes: Optional[RouteSummary] = None
    performance: Optional[PerformanceSample] = None
    ping: Optional[PingResult] = None
    mac_info: Optional[HostInfo] = None
    degraded: Dict[str, str] = Field(default_factory=dict)
    timestamp: str

    def to_dict(self) -> dict:
        data = self.model_dump(by_alias=True, mode="json")
        return {k: v for k, v in data.items() if v is not None}
