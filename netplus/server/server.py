"""
NetPlus API Server
Thin HTTP transport over the snapshot collector for the dashboard.
"""
import os
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from netplus import __version__
from netplus.agent.collector import CATEGORIES, SnapshotCollector
from netplus.core.config import Config
from netplus.core.errors import CollectorError
from netplus.utils.system_monitor import get_system_info

SERVER_DIR = os.path.dirname(os.path.abspath(__file__))
PROJECT_ROOT = os.path.abspath(os.path.join(SERVER_DIR, '..', '..'))

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(message)s",
    datefmt="%H:%M:%S"
)
logger = logging.getLogger("NetPlusAPI")

CONFIG = Config(config_path=os.path.join(PROJECT_ROOT, 'config.yaml'))
_collector: Optional[SnapshotCollector] = None


def get_collector() -> SnapshotCollector:
    """Process-wide collector, so traffic rates span requests."""
    global _collector
    if _collector is None:
        _collector = SnapshotCollector(CONFIG)
    return _collector


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    yield
    if _collector is not None:
        _collector.close()


app = FastAPI(
    lifespan=lifespan,
    title="NetPlus",
    version=__version__,
    description="Host network and security telemetry collector",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@app.get("/api/network-status")
def network_status(type: Optional[str] = None, traceroute: Optional[bool] = None,
                   collector: SnapshotCollector = Depends(get_collector)):
    """Snapshot for one category; a missing or unrecognised type means 'all'."""
    category = type if type in CATEGORIES else "all"
    try:
        snapshot = collector.collect(category, include_traceroute=traceroute)
    except CollectorError as e:
        logger.error(f"🚨 [ERROR] Snapshot failed: {e.message}")
        return JSONResponse(status_code=500, content=e.to_dict())

    if snapshot.degraded:
        logger.info(f"⚠️ [{category}] degraded: {', '.join(sorted(snapshot.degraded))}")
    return JSONResponse(content=snapshot.to_dict())


@app.get("/api/health")
def health():
    return {"status": "ok", "timestamp": utc_now()}


@app.get("/api/system-info")
def system_info():
    return get_system_info()


if __name__ == "__main__":
    print(f"🚀 Starting NetPlus API v{__version__}...")
    uvicorn.run(app, host=CONFIG.server_host, port=CONFIG.server_port, log_level="info")
