"""
NetPlus Logging System
Process-wide logger shared by the collector, the probes and the command runner.

Console output always goes to stdout. The audit file is optional: it is
skipped when the path cannot be opened (read-only checkout, sandboxed run).
Environment:
    NETPLUS_LOG_LEVEL  DEBUG shows every failed command (default INFO)
    NETPLUS_LOG_FILE   audit file path (default netplus_audit.log)
"""
import logging
import os
import sys
from typing import List

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_handlers(log_file: str) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    try:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    except OSError:
        pass
    return handlers


class Logger:
    """Singleton wrapper around the 'netplus' logger."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(Logger, cls).__new__(cls)
            cls._instance._initialize_logger()
        return cls._instance

    def _initialize_logger(self) -> None:
        self.logger = logging.getLogger("netplus")
        level_name = os.getenv("NETPLUS_LOG_LEVEL", "INFO").upper()
        self.logger.setLevel(getattr(logging, level_name, logging.INFO))
        self.logger.propagate = False

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        for handler in _build_handlers(os.getenv("NETPLUS_LOG_FILE", "netplus_audit.log")):
            handler.setFormatter(formatter)
            self.logger.addHandler(handler)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def success(self, msg: str) -> None:
        self.logger.info(f"[SUCCESS] {msg}")

    def degraded(self, probe: str, reason: str) -> None:
        """One line per probe that fell back to its default."""
        self.logger.warning(f"[DEGRADED] {probe}: {reason}")
