# rollup_client.py
# Reads output roots from a trusted rollup node over JSON-RPC.
#
# The node answers optimism_outputAtBlock(<hex block number>) with
#   {"version": "0x..", "outputRoot": "0x..", "blockRef": {...}, ...}
# and, for a height it has not produced/synced yet, an error like
#   "failed to get L2 block ref with sync status: failed to determine
#    L2BlockRef of height 42984924, could not get payload: not found"

import re
import logging
from typing import Optional

from web3 import Web3

import config
from utils import to_root

log = logging.getLogger(__name__)

OUTPUT_AT_BLOCK = "optimism_outputAtBlock"

# lowercase "not found" must be the whole message or its last wrapped segment
NOT_FOUND_RE = re.compile(r"(?:^|:)\s*not found\s*$")


class RollupClientError(Exception):
    """The rollup node answered with an error or an unusable payload."""


class OutputNotFoundError(RollupClientError):
    """The rollup node has not produced the requested height yet."""


def is_not_found_message(msg) -> bool:
    return bool(NOT_FOUND_RE.search(str(msg or "")))


class RollupClient:
    def __init__(self, rpc_url: Optional[str] = None, timeout: Optional[float] = None, provider=None):
        if provider is None:
            provider = Web3.HTTPProvider(
                rpc_url or config.ROLLUP_RPC_URL,
                request_kwargs={"timeout": timeout or config.ROLLUP_RPC_TIMEOUT},
            )
        self.provider = provider

    def output_at_block(self, block_number: int) -> bytes:
        if block_number < 0:
            raise ValueError(f"block number must be non-negative, got {block_number}")
        resp = self.provider.make_request(OUTPUT_AT_BLOCK, [hex(block_number)])

        err = resp.get("error")
        if err:
            msg = err.get("message", "") if isinstance(err, dict) else str(err)
            cls = OutputNotFoundError if is_not_found_message(msg) else RollupClientError
            raise cls(f"failed to fetch output at block {block_number}: {msg}")

        result = resp.get("result")
        if not isinstance(result, dict) or "outputRoot" not in result:
            raise RollupClientError(f"failed to fetch output at block {block_number}: no outputRoot in response")
        try:
            root = to_root(result["outputRoot"])
        except ValueError as e:
            raise RollupClientError(f"failed to fetch output at block {block_number}: {e}") from e
        log.debug("output root at block %d: 0x%s", block_number, root.hex())
        return root
