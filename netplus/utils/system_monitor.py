# netplus/utils/system_monitor.py
import platform
import socket
import time
from typing import Any, Dict

import psutil


def get_system_info() -> Dict[str, Any]:
    """
    Static facts about the host serving the collector.
    Returns: hostname, platform, arch, uptime (seconds), cpu count and memory bytes.
    """
    try:
        memory = psutil.virtual_memory()
        return {
            "hostname": socket.gethostname(),
            "platform": platform.system().lower(),
            "arch": platform.machine(),
            "uptime": int(time.time() - psutil.boot_time()),
            "cpus": psutil.cpu_count(logical=True) or 0,
            "memory": {"total": memory.total, "free": memory.available},
        }
    except Exception:
        return {
            "hostname": socket.gethostname(),
            "platform": platform.system().lower(),
            "arch": platform.machine(),
            "uptime": 0,
            "cpus": 0,
            "memory": {"total": 0, "free": 0},
        }
