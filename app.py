# app.py — root agreement service: Flask + rollup node + Prometheus
# Run:
#   export ROLLUP_RPC_URL="http://127.0.0.1:9545"
#   python app.py
#
# API base: http://127.0.0.1:7300/api/v1
#   GET /api/v1/health
#   GET /api/v1/agreement/<block_number>?claim=0x...
#   GET /metrics

import json
import logging

import requests
from flask import Flask, request, Response

import config
from metrics import Metrics, CONTENT_TYPE_LATEST
from rollup_client import RollupClient, RollupClientError
from root_agreement import AgreementResult, RootAgreementChecker
from utils import to_root, root_hex

log = logging.getLogger(__name__)

# --------------- JSON helper ---------------
def j(data, status=200):
    return Response(json.dumps(data, default=str), status=status, mimetype="application/json")

def j_err(msg, code=400):
    return j({"error": msg}, code)

def outcome(result: AgreementResult) -> str:
    if not result.found:
        return "unknown_height"
    return "agree" if result.agree else "mismatch"

def create_app(rollup=None, metrics=None) -> Flask:
    metrics = metrics or Metrics()
    checker = RootAgreementChecker(metrics, rollup or RollupClient())
    app = Flask(__name__)

    @app.get("/api/v1/health")
    def health():
        return j({"ok": True})

    @app.get("/api/v1/agreement/<int:block_number>")
    def agreement(block_number: int):
        raw_claim = request.args.get("claim")
        if not raw_claim:
            return j_err("claim query parameter required")
        try:
            claim = to_root(raw_claim)
        except ValueError as e:
            return j_err(f"invalid claim: {e}")

        try:
            result = checker.check_root_agreement(block_number, claim)
        except (RollupClientError, requests.RequestException) as e:
            log.warning("output fetch at block %d failed: %s", block_number, e)
            return j_err(f"output fetch failed: {e}", 502)

        return j({
            "block_number": block_number,
            "root_claim": root_hex(claim),
            "fetched_root": root_hex(result.fetched_root),
            "agree": result.agree,
            "status": outcome(result),
        })

    @app.get("/metrics")
    def prometheus_metrics():
        return Response(metrics.exposition(), content_type=CONTENT_TYPE_LATEST)

    return app

if __name__ == "__main__":
    config.setup_logging()
    create_app().run(host=config.HOST, port=config.PORT)
