# check_root.py
# One-shot root agreement check against a trusted rollup node.
#
# Usage:
#   python check_root.py <block_number> <root_claim_hex> [--rpc http://127.0.0.1:9545] [--timeout 10]
#
# Exit codes:
#   0 = root claim agrees with the node's output root
#   1 = RPC / HTTP error while fetching the output root
#   2 = bad input
#   3 = root claim disagrees
#   4 = node has not produced this block yet (re-check later)

import sys
import argparse
import requests

import config
from metrics import NoopMetrics
from rollup_client import RollupClient, RollupClientError
from root_agreement import RootAgreementChecker
from utils import to_root, root_hex

def main(argv=None):
    ap = argparse.ArgumentParser(description="Check a dispute game root claim against the rollup node")
    ap.add_argument("block_number", type=int, help="L2 block number the claim is for")
    ap.add_argument("root_claim", help="Claimed output root (hex, 0x optional)")
    ap.add_argument("--rpc", default=config.ROLLUP_RPC_URL, help="Rollup node RPC URL")
    ap.add_argument("--timeout", type=float, default=config.ROLLUP_RPC_TIMEOUT, help="RPC timeout in seconds")
    args = ap.parse_args(argv)
    config.setup_logging()

    try:
        claim = to_root(args.root_claim)
    except ValueError as e:
        print("Bad root claim:", e)
        return 2
    if args.block_number < 0:
        print("Bad block number:", args.block_number)
        return 2

    checker = RootAgreementChecker(NoopMetrics(), RollupClient(args.rpc, timeout=args.timeout))
    try:
        agree, fetched, found = checker.check_root_agreement(args.block_number, claim)
    except requests.RequestException as e:
        print("HTTP error:", e)
        return 1
    except RollupClientError as e:
        print("RPC error:", e)
        return 1

    print("block        :", args.block_number)
    print("root claim   :", root_hex(claim))
    if not found:
        print("output root  : (not produced yet)")
        return 4
    print("output root  :", root_hex(fetched))
    print("match?       :", agree)
    return 0 if agree else 3

if __name__ == "__main__":
    sys.exit(main())
