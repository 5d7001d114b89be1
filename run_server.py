import os
import sys

import uvicorn

sys.path.insert(0, os.getcwd())

from netplus.core.config import Config

if __name__ == "__main__":
    print("🚀 Starting NetPlus API Server...")

    config = Config()
    uvicorn.run("netplus.server.server:app", host=config.server_host, port=config.server_port, reload=True)
