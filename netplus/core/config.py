# netplus/core/config.py
from typing import Any, Dict, List
import yaml
import os
from dotenv import load_dotenv


class Config:
    """
    Loads configuration from environment variables (Priority 1) and 'config.yaml' (Priority 2).
    Includes path detection for .env files in different execution contexts.
    """
    def __init__(self, config_path: str = "config.yaml") -> None:
        current_dir = os.path.dirname(os.path.abspath(__file__))
        project_root = os.path.abspath(os.path.join(current_dir, '..', '..'))
        env_path = os.path.join(project_root, '.env')

        if os.path.exists(env_path):
            load_dotenv(dotenv_path=env_path, override=False)
        else:
            load_dotenv(override=False)

        self.config_path = config_path
        self.data = self._load_yaml()

    def _load_yaml(self) -> Dict[str, Any]:
        if not os.path.exists(self.config_path):
            return {}
        try:
            with open(self.config_path, "r") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError:
            return {}

    def _section(self, name: str) -> Dict[str, Any]:
        section = self.data.get(name, {})
        return section if isinstance(section, dict) else {}

    def _number(self, env_name: str, section: str, key: str, default: float) -> float:
        raw = os.getenv(env_name)
        if raw is None:
            raw = self._section(section).get(key, default)
        try:
            return float(raw)
        except (TypeError, ValueError):
            return default

    # --- COLLECTOR ---
    @property
    def command_timeout(self) -> float:
        return self._number("NETPLUS_COMMAND_TIMEOUT", "collector", "command_timeout", 10.0)

    @property
    def collect_timeout(self) -> float:
        return self._number("NETPLUS_COLLECT_TIMEOUT", "collector", "collect_timeout", 30.0)

    @property
    def port_limit(self) -> int:
        return int(self._number("NETPLUS_PORT_LIMIT", "collector", "port_limit", 10))

    @property
    def route_limit(self) -> int:
        return int(self._number("NETPLUS_ROUTE_LIMIT", "collector", "route_limit", 15))

    @property
    def suspicious_limit(self) -> int:
        return int(self._number("NETPLUS_SUSPICIOUS_LIMIT", "collector", "suspicious_limit", 5))

    # --- REACHABILITY ---
    @property
    def ping_target(self) -> str:
        return os.getenv("NETPLUS_PING_TARGET", self._section("ping").get("target", "8.8.8.8"))

    @property
    def ping_count(self) -> int:
        return int(self._number("NETPLUS_PING_COUNT", "ping", "count", 3))

    @property
    def ping_timeout_ms(self) -> int:
        return int(self._number("NETPLUS_PING_TIMEOUT_MS", "ping", "timeout_ms", 3000))

    @property
    def jitter_probes(self) -> int:
        return int(self._number("NETPLUS_JITTER_PROBES", "ping", "jitter_probes", 5))

    @property
    def traceroute_enabled(self) -> bool:
        raw = os.getenv("NETPLUS_TRACEROUTE")
        if raw is None:
            return bool(self._section("routes").get("traceroute", False))
        return raw.strip().lower() in ("1", "true", "yes", "on")

    @property
    def traceroute_timeout(self) -> float:
        return self._number("NETPLUS_TRACEROUTE_TIMEOUT", "routes", "traceroute_timeout", 20.0)

    @property
    def traceroute_max_hops(self) -> int:
        return int(self._number("NETPLUS_TRACEROUTE_MAX_HOPS", "routes", "traceroute_max_hops", 20))

    # --- SERVER ---
    @property
    def server_host(self) -> str:
        return os.getenv("NETPLUS_HOST", self._section("server").get("host", "127.0.0.1"))

    @property
    def server_port(self) -> int:
        return int(self._number("NETPLUS_PORT", "server", "port", 8080))

    @property
    def cors_origins(self) -> List[str]:
        raw = os.getenv("NETPLUS_CORS_ORIGINS")
        if raw:
            return [o.strip() for o in raw.split(",") if o.strip()]
        return self._section("server").get("cors_origins", ["http://localhost:3000"])
