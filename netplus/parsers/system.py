"""
Host metric parsers: pmset, sysctl/system_profiler, uptime, top, vm_stat.
"""
import re

from netplus.core.schemas import BatteryInfo, MemoryBreakdown, MemoryDetails

PERCENT_RE = re.compile(r"(\d+)%")
TIME_LEFT_RE = re.compile(r"(\d+):(\d+)")
APPLE_CHIP_RE = re.compile(r"Apple (M\d+(?:\s+\w+)?)")
UPTIME_RE = re.compile(r"up\s+(.*?),\s+\d+\s+user")
CPU_USER_RE = re.compile(r"(\d+\.?\d*)% user")
PAGE_SIZE_RE = re.compile(r"page size of (\d+) bytes")

VM_STAT_FIELDS = {
    "free": re.compile(r"Pages free:\s+(\d+)\."),
    "active": re.compile(r"Pages active:\s+(\d+)\."),
    "inactive": re.compile(r"Pages inactive:\s+(\d+)\."),
    "wired": re.compile(r"Pages wired down:\s+(\d+)\."),
    "compressed": re.compile(r"Pages occupied by compressor:\s+(\d+)\."),
}

DEFAULT_PAGE_SIZE = 4096
GB = 1024 ** 3


def parse_battery(output: str) -> BatteryInfo:
    output = output or ""
    percent = PERCENT_RE.search(output)
    remaining = TIME_LEFT_RE.search(output)
    return BatteryInfo(
        percentage=int(percent.group(1)) if percent else 0,
        charging="AC Power" in output,
        time_remaining=int(remaining.group(1)) * 60 + int(remaining.group(2)) if remaining else 0,
    )


def parse_chip(output: str) -> str:
    output = (output or "").strip()
    if "Apple M" in output:
        match = APPLE_CHIP_RE.search(output)
        return match.group(1) if match else "Apple Silicon"
    if "Intel" in output:
        return output.splitlines()[0].strip()
    return output or "Unknown"


def parse_uptime(output: str) -> str:
    match = UPTIME_RE.search(output or "")
    return match.group(1).strip() if match else "Unknown"


def parse_cpu_usage(output: str) -> float:
    match = CPU_USER_RE.search(output or "")
    if not match:
        return 0.0
    return min(max(float(match.group(1)), 0.0), 100.0)


def parse_vm_stat(output: str) -> MemoryBreakdown:
    """
    Usage = (active + wired + compressed) / (all five page classes).
    Page counts are converted to GB with the page size vm_stat reports.
    """
    output = output or ""
    page_match = PAGE_SIZE_RE.search(output)
    page_size = int(page_match.group(1)) if page_match else DEFAULT_PAGE_SIZE

    pages = {}
    for key, pattern in VM_STAT_FIELDS.items():
        match = pattern.search(output)
        pages[key] = int(match.group(1)) if match else 0

    total_pages = sum(pages.values())
    used_pages = pages["active"] + pages["wired"] + pages["compressed"]
    percentage = (used_pages / total_pages) * 100 if total_pages else 0.0

    return MemoryBreakdown(
        percentage=percentage,
        used=round(used_pages * page_size / GB, 2),
        total=round(total_pages * page_size / GB, 2),
        details=MemoryDetails(**pages),
    )
