from web3 import Web3

ZERO_ROOT = b"\x00" * 32

def _norm0x(h: str) -> str:
    h = (h or "").strip().lower()
    if h.startswith("0x"): h = h[2:]
    return h.zfill(64)

def to_root(value) -> bytes:
    """Coerce a 32-byte root given as bytes/HexBytes or hex string into plain bytes."""
    if isinstance(value, (bytes, bytearray)):
        if len(value) != 32:
            raise ValueError(f"root must be 32 bytes, got {len(value)}")
        return bytes(value)
    if isinstance(value, str):
        h = _norm0x(value)
        if len(h) != 64:
            raise ValueError("root must be 32 bytes (64 hex chars)")
        try:
            return Web3.to_bytes(hexstr=h)
        except ValueError:
            raise ValueError(f"invalid root hex: {value!r}")
    raise ValueError(f"unsupported root type: {type(value).__name__}")

def root_hex(root: bytes) -> str:
    return "0x" + bytes(root).hex()
