"""
Host Information Probe
OS version, chip, battery, hostname and uptime. Every field degrades on
its own, so a missing `pmset` (desktop Macs) never hides the OS version.
"""
from typing import Dict

from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandRunner
from netplus.core.schemas import BatteryInfo, HostInfo
from netplus.parsers.system import parse_battery, parse_chip, parse_uptime
from netplus.utils.logger import Logger


class HostInfoProbe:
    def __init__(self, runner: CommandRunner):
        self.runner = runner
        self.logger = Logger()

    def _text(self, args) -> ProbeResult[str]:
        result = self.runner.run(args)
        if not result.ok or not result.stdout.strip():
            return ProbeResult.fallback("Unknown", result.describe() if not result.ok else "empty output")
        return ProbeResult.ok(result.stdout.strip())

    def get_chip(self) -> ProbeResult[str]:
        """sysctl brand string, else the Chip line of system_profiler."""
        brand = self.runner.run(["sysctl", "-n", "machdep.cpu.brand_string"])
        if brand.ok and brand.stdout.strip():
            return ProbeResult.ok(parse_chip(brand.stdout))

        profile = self.runner.run(["system_profiler", "SPHardwareDataType"], timeout=30)
        chip_lines = [line for line in profile.stdout.splitlines() if "Chip" in line]
        if profile.ok and chip_lines:
            return ProbeResult.ok(parse_chip("\n".join(chip_lines)))
        return ProbeResult.fallback("Unknown", f"{brand.describe()}; {profile.describe()}")

    def get_battery(self) -> ProbeResult[BatteryInfo]:
        result = self.runner.run(["pmset", "-g", "batt"])
        if not result.ok:
            return ProbeResult.fallback(BatteryInfo(), result.describe())
        return ProbeResult.ok(parse_battery(result.stdout))

    def get_uptime(self) -> ProbeResult[str]:
        result = self.runner.run(["uptime"])
        if not result.ok:
            return ProbeResult.fallback("Unknown", result.describe())
        return ProbeResult.ok(parse_uptime(result.stdout))

    def collect(self) -> ProbeResult[HostInfo]:
        parts: Dict[str, ProbeResult] = {
            "os_version": self._text(["sw_vers", "-productVersion"]),
            "chip": self.get_chip(),
            "battery": self.get_battery(),
            "hostname": self._text(["hostname"]),
            "uptime": self.get_uptime(),
        }
        info = HostInfo(
            os_version=parts["os_version"].value,
            chip_info=parts["chip"].value,
            battery=parts["battery"].value,
            hostname=parts["hostname"].value,
            uptime=parts["uptime"].value,
        )
        result = ProbeResult.combine(info, parts)
        if result.degraded:
            self.logger.warning(f"HostInfoProbe: partial host info ({result.reason})")
        return result
