# tests/test_runner.py
import subprocess
from unittest.mock import patch

from netplus.core.errors import ToolFailure
from netplus.core.probe import ProbeResult, merge_reasons
from netplus.core.runner import CommandRunner


def test_successful_command():
    """stdout is returned untouched when the tool exits 0"""
    completed = subprocess.CompletedProcess(["ifconfig"], 0, stdout="lo0: flags\n", stderr="")
    with patch("netplus.core.runner.subprocess.run", return_value=completed) as mock_run:
        result = CommandRunner(default_timeout=4).run(["ifconfig"])

    assert result.ok
    assert result.stdout == "lo0: flags\n"
    assert result.returncode == 0
    assert mock_run.call_args.kwargs["timeout"] == 4


def test_missing_tool():
    with patch("netplus.core.runner.subprocess.run", side_effect=FileNotFoundError("no lsof")):
        result = CommandRunner().run(["lsof", "-i"])

    assert not result.ok
    assert result.failure is ToolFailure.NOT_FOUND
    assert result.stdout == ""
    assert "not_found" in result.describe()


def test_permission_denied_counts_as_missing():
    with patch("netplus.core.runner.subprocess.run", side_effect=PermissionError("denied")):
        result = CommandRunner().run(["pfctl", "-s", "info"])

    assert result.failure is ToolFailure.NOT_FOUND


def test_timeout():
    expired = subprocess.TimeoutExpired(cmd=["traceroute"], timeout=1)
    with patch("netplus.core.runner.subprocess.run", side_effect=expired):
        result = CommandRunner().run(["traceroute", "8.8.8.8"], timeout=1)

    assert result.failure is ToolFailure.TIMEOUT
    assert "after 1s" in result.describe()


def test_non_zero_exit_keeps_stdout():
    """ping exits 2 on partial loss but its replies are still usable"""
    completed = subprocess.CompletedProcess(["ping"], 2, stdout="time=1.0 ms", stderr="loss\n")
    with patch("netplus.core.runner.subprocess.run", return_value=completed):
        result = CommandRunner().run(["ping", "-c", "3", "8.8.8.8"])

    assert result.failure is ToolFailure.NON_ZERO_EXIT
    assert result.returncode == 2
    assert result.stdout == "time=1.0 ms"
    assert result.detail == "loss"


def test_real_missing_binary():
    result = CommandRunner(default_timeout=5).run(["netplus-no-such-tool-4f2a"])
    assert result.failure is ToolFailure.NOT_FOUND


def test_probe_result_helpers():
    good = ProbeResult.ok(3)
    bad = ProbeResult.fallback(0, "vm_stat: not_found")

    assert not good.degraded
    assert bad.degraded
    assert bad.value == 0
    assert merge_reasons({"cpu": good}) is None
    assert merge_reasons({"cpu": good, "memory": bad}) == "memory: vm_stat: not_found"
    assert ProbeResult.combine("x", {"memory": bad}).reason == "memory: vm_stat: not_found"
