"""
Fail-soft probe results.
A probe either produced its value or fell back to a documented default.
"""
from dataclasses import dataclass
from typing import Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ProbeResult(Generic[T]):
    value: T
    reason: Optional[str] = None

    @property
    def degraded(self) -> bool:
        return self.reason is not None

    @classmethod
    def ok(cls, value: T) -> "ProbeResult[T]":
        return cls(value)

    @classmethod
    def fallback(cls, default: T, reason: str) -> "ProbeResult[T]":
        return cls(default, reason or "unknown")

    @classmethod
    def combine(cls, value: T, parts: Dict[str, "ProbeResult"]) -> "ProbeResult[T]":
        return cls(value, merge_reasons(parts))


def merge_reasons(results: Dict[str, "ProbeResult"]) -> Optional[str]:
    """Joins the reasons of degraded sub-probes, None when all succeeded."""
    reasons = [f"{name}: {r.reason}" for name, r in results.items() if r.degraded]
    return "; ".join(reasons) if reasons else None
