# root_agreement.py
# Checks a dispute game's root claim against the rollup node's output root.
#
# Outcomes for check_root_agreement(block_number, root_claim):
#   agree          -> (True,  fetched_root, found=True)    one fetch-time observation
#   mismatch       -> (False, fetched_root, found=True)    one fetch-time observation
#   unknown height -> (False, ZERO_ROOT,    found=False)   node has not produced the block yet
#   fetch failure  -> original exception raised, nothing recorded

import time
import logging
from typing import NamedTuple

from rollup_client import OutputNotFoundError, is_not_found_message
from utils import ZERO_ROOT, to_root

log = logging.getLogger(__name__)


class AgreementResult(NamedTuple):
    agree: bool
    fetched_root: bytes
    found: bool = True


def is_output_not_found(err) -> bool:
    """True if err, or anything it was raised from, means the height isn't produced yet."""
    seen = set()
    while err is not None and id(err) not in seen:
        if isinstance(err, OutputNotFoundError) or is_not_found_message(err):
            return True
        seen.add(id(err))
        err = err.__cause__
    return False


class RootAgreementChecker:
    """
    metrics: anything with record_output_fetch_time(seconds)
    rollup:  anything with output_at_block(block_number) -> 32-byte root

    Holds no state of its own; safe to share across threads if the
    collaborators are.
    """

    def __init__(self, metrics, rollup):
        self.metrics = metrics
        self.rollup = rollup

    def check_root_agreement(self, block_number: int, root_claim) -> AgreementResult:
        if block_number < 0:
            raise ValueError(f"block number must be non-negative, got {block_number}")
        claim = to_root(root_claim)
        start = time.perf_counter()
        try:
            fetched = self.rollup.output_at_block(block_number)
        except Exception as e:
            if is_output_not_found(e):
                log.debug("output at block %d not available yet: %s", block_number, e)
                return AgreementResult(False, ZERO_ROOT, found=False)
            log.debug("output fetch at block %d failed: %s", block_number, e)
            raise
        elapsed = time.perf_counter() - start
        fetched = to_root(fetched)
        self.metrics.record_output_fetch_time(elapsed)

        agree = fetched == claim
        if not agree:
            log.debug("root claim 0x%s disagrees with output 0x%s at block %d",
                      claim.hex(), fetched.hex(), block_number)
        return AgreementResult(agree, fetched)
