# netplus/modules/performance_monitor.py
from concurrent.futures import ThreadPoolExecutor
from typing import List

from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandRunner
from netplus.core.schemas import MemoryBreakdown, PerformanceSample
from netplus.parsers.ping import parse_jitter
from netplus.parsers.system import parse_cpu_usage, parse_vm_stat
from netplus.utils.logger import Logger


class PerformanceMonitor:
    """CPU load, memory pressure and network jitter."""

    def __init__(self, runner: CommandRunner, ping_target: str = "8.8.8.8", jitter_probes: int = 5):
        self.runner = runner
        self.ping_target = ping_target
        self.jitter_probes = jitter_probes
        self.logger = Logger()

    def get_cpu_usage(self) -> ProbeResult[float]:
        result = self.runner.run(["top", "-l", "1", "-n", "0"])
        if not result.ok:
            return ProbeResult.fallback(0.0, result.describe())
        return ProbeResult.ok(parse_cpu_usage(result.stdout))

    def get_memory_usage(self) -> ProbeResult[MemoryBreakdown]:
        result = self.runner.run(["vm_stat"])
        if not result.ok:
            return ProbeResult.fallback(MemoryBreakdown(), result.describe())
        return ProbeResult.ok(parse_vm_stat(result.stdout))

    def get_jitter(self) -> ProbeResult[List[float]]:
        """Latency deltas from a short ping burst (0.2s apart)."""
        result = self.runner.run(
            ["ping", "-c", str(self.jitter_probes), "-i", "0.2", self.ping_target],
            timeout=self.jitter_probes * 0.2 + 10,
        )
        jitter = parse_jitter(result.stdout)
        if not jitter and not result.ok:
            return ProbeResult.fallback([], result.describe())
        return ProbeResult.ok(jitter)

    def collect(self) -> ProbeResult[PerformanceSample]:
        with ThreadPoolExecutor(max_workers=3, thread_name_prefix="Perf") as pool:
            cpu_f = pool.submit(self.get_cpu_usage)
            mem_f = pool.submit(self.get_memory_usage)
            jitter_f = pool.submit(self.get_jitter)
            parts = {"cpu": cpu_f.result(), "memory": mem_f.result(), "jitter": jitter_f.result()}

        sample = PerformanceSample(
            cpu=parts["cpu"].value,
            memory=parts["memory"].value,
            jitter=parts["jitter"].value,
        )
        result = ProbeResult.combine(sample, parts)
        if result.degraded:
            self.logger.warning(f"PerformanceMonitor: degraded metrics ({result.reason})")
        return result
