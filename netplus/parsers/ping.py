"""
Ping output parsers.
"""
import re
from typing import List, Optional

from netplus.core.schemas import PingResult

TIME_RE = re.compile(r"time=(\d+\.?\d*)")
LOSS_RE = re.compile(r"(\d+\.?\d*)% packet loss")


def latency_samples(output: str) -> List[float]:
    return [float(t) for t in TIME_RE.findall(output or "")]


def parse_ping(output: str) -> Optional[PingResult]:
    """Average latency and loss, or None when no reply was recorded."""
    samples = latency_samples(output)
    if not samples:
        return None
    loss_match = LOSS_RE.search(output)
    return PingResult(
        latency=sum(samples) / len(samples),
        loss=float(loss_match.group(1)) if loss_match else 0.0,
    )


def parse_jitter(output: str) -> List[float]:
    samples = latency_samples(output)
    return [abs(b - a) for a, b in zip(samples, samples[1:])]
