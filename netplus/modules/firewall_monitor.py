"""
Firewall Posture Module

Reads the macOS Application Firewall through socketfilterfw (privileged,
run with `sudo -n` so it fails instead of prompting) and falls back to
the generic pf packet filter. When neither answers, the posture is the
safe default: enabled, no stealth, no block-all, zero rules.
"""

import re
from concurrent.futures import ThreadPoolExecutor
from typing import Dict

from netplus.core.probe import ProbeResult
from netplus.core.runner import CommandResult, CommandRunner
from netplus.core.schemas import FirewallPosture
from netplus.utils.logger import Logger

SOCKETFILTERFW = "/usr/libexec/ApplicationFirewall/socketfilterfw"

APP_TOTAL_RE = re.compile(r"total number of apps\s*=\s*(\d+)")
APP_ENTRY_RE = re.compile(r"^\s*\d+\s*:", re.MULTILINE)


def _is_on(text: str) -> bool:
    lowered = text.lower()
    if "disabled" in lowered or "is off" in lowered:
        return False
    return "enabled" in lowered or "is on" in lowered


def _count_rules(listing: str) -> int:
    total = APP_TOTAL_RE.search(listing)
    if total:
        return int(total.group(1))
    entries = APP_ENTRY_RE.findall(listing)
    if entries:
        return len(entries)
    return sum(1 for line in listing.splitlines() if "ALF:" in line)


class FirewallMonitor:
    """Application Firewall / pf inspection with a per-field fallback."""

    def __init__(self, runner: CommandRunner):
        self.runner = runner
        self.logger = Logger()

    def _alf(self, flag: str) -> CommandResult:
        return self.runner.run(["sudo", "-n", SOCKETFILTERFW, flag])

    def _pf(self, what: str) -> CommandResult:
        return self.runner.run(["pfctl", "-s", what])

    def check_enabled(self) -> ProbeResult[bool]:
        """Global on/off: socketfilterfw, then pfctl, then assume enabled."""
        state = self._alf("--getglobalstate")
        if state.ok:
            return ProbeResult.ok("disabled" not in state.stdout.lower())

        info = self._pf("info")
        if info.ok:
            return ProbeResult.ok("disabled" not in info.stdout.lower())

        self.logger.warning("FirewallMonitor: no firewall query succeeded, assuming enabled.")
        return ProbeResult.fallback(True, f"{state.describe()}; {info.describe()}")

    def get_details(self) -> ProbeResult[FirewallPosture]:
        """
        Issues the four socketfilterfw sub-queries concurrently.
        A failed sub-query only resets its own field to the safe default.
        If all four fail, the pf packet filter is consulted instead.
        """
        queries = {
            "global": "--getglobalstate",
            "stealth": "--getstealthmode",
            "block_all": "--getblockall",
            "rules": "--listapps",
        }
        with ThreadPoolExecutor(max_workers=len(queries), thread_name_prefix="ALF") as pool:
            futures = {key: pool.submit(self._alf, flag) for key, flag in queries.items()}
            results: Dict[str, CommandResult] = {key: f.result() for key, f in futures.items()}

        failed = [key for key, r in results.items() if not r.ok]
        if len(failed) == len(results):
            return self._pf_details()

        posture = FirewallPosture(
            enabled="disabled" not in results["global"].stdout.lower() if results["global"].ok else True,
            stealth_mode=_is_on(results["stealth"].stdout) if results["stealth"].ok else False,
            block_all=_is_on(results["block_all"].stdout) if results["block_all"].ok else False,
            rules=_count_rules(results["rules"].stdout) if results["rules"].ok else 0,
        )
        if failed:
            self.logger.warning(f"FirewallMonitor: partial details, defaulted {failed}")
            return ProbeResult.fallback(posture, f"defaulted fields: {', '.join(failed)}")
        return ProbeResult.ok(posture)

    def _pf_details(self) -> ProbeResult[FirewallPosture]:
        info = self._pf("info")
        if not info.ok:
            self.logger.warning("FirewallMonitor: pf unavailable, using safe default posture.")
            return ProbeResult.fallback(FirewallPosture(), info.describe())

        rules = self._pf("rules")
        rule_lines = [
            line for line in rules.stdout.splitlines()
            if line.strip() and "@" not in line
        ] if rules.ok else []
        ruleset = "\n".join(rule_lines)

        posture = FirewallPosture(
            enabled="disabled" not in info.stdout.lower(),
            stealth_mode="block drop all" in ruleset,
            block_all="block all" in ruleset,
            rules=len(rule_lines),
        )
        if not rules.ok:
            return ProbeResult.fallback(posture, f"defaulted fields: rules ({rules.describe()})")
        return ProbeResult.ok(posture)
