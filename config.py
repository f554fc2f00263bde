# config.py — environment settings for the dispute root monitor
#
# env (or .env):
#   ROLLUP_RPC_URL=http://127.0.0.1:9545     trusted rollup node (optimism_* namespace)
#   ROLLUP_RPC_TIMEOUT=10                    seconds per RPC call
#   LOG_LEVEL=INFO
#   HOST=127.0.0.1  PORT=7300                app.py listen address

import os
import logging
from dotenv import load_dotenv

load_dotenv()
ROLLUP_RPC_URL     = os.getenv("ROLLUP_RPC_URL", "http://127.0.0.1:9545")
ROLLUP_RPC_TIMEOUT = float(os.getenv("ROLLUP_RPC_TIMEOUT", "10"))
LOG_LEVEL          = os.getenv("LOG_LEVEL", "INFO").upper()
HOST               = os.getenv("HOST", "127.0.0.1")
PORT               = int(os.getenv("PORT", "7300"))

def setup_logging(level=None):
    logging.basicConfig(
        level=level or LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
