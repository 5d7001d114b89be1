"""
Command Runner - External Diagnostic Tool Execution

Runs one diagnostic command per call in a subprocess with a timeout and
reports the outcome as a CommandResult. Tool problems never raise: probes
decide what to fall back to.
"""

import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence

from netplus.core.errors import ToolFailure
from netplus.utils.logger import Logger


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single command invocation."""
    args: List[str]
    stdout: str = ""
    failure: Optional[ToolFailure] = None
    returncode: Optional[int] = None
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.failure is None

    def describe(self) -> str:
        cmd = " ".join(self.args)
        if self.ok:
            return f"{cmd}: ok"
        return f"{cmd}: {self.failure.value} {self.detail}".rstrip()


class CommandRunner:
    """Subprocess wrapper with a default timeout.

    No retries happen here. A non-zero exit still carries whatever stdout
    the tool produced, since some tools (lsof, grep-like filters) exit 1 on
    "nothing found".
    """

    def __init__(self, default_timeout: float = 10.0):
        self.default_timeout = default_timeout
        self.logger = Logger()

    def run(self, args: Sequence[str], timeout: Optional[float] = None) -> CommandResult:
        argv = [str(a) for a in args]
        limit = self.default_timeout if timeout is None else timeout
        try:
            proc = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=limit,
            )
        except (FileNotFoundError, PermissionError) as e:
            result = CommandResult(argv, failure=ToolFailure.NOT_FOUND, detail=str(e))
        except subprocess.TimeoutExpired:
            result = CommandResult(argv, failure=ToolFailure.TIMEOUT, detail=f"after {limit}s")
        except OSError as e:
            result = CommandResult(argv, failure=ToolFailure.NOT_FOUND, detail=str(e))
        else:
            if proc.returncode != 0:
                result = CommandResult(
                    argv,
                    stdout=proc.stdout or "",
                    failure=ToolFailure.NON_ZERO_EXIT,
                    returncode=proc.returncode,
                    detail=(proc.stderr or "").strip()[:200],
                )
            else:
                return CommandResult(argv, stdout=proc.stdout or "", returncode=0)

        self.logger.debug(f"Command failed -> {result.describe()}")
        return result
