import pytest
import requests

from rollup_client import (
    OUTPUT_AT_BLOCK,
    OutputNotFoundError,
    RollupClient,
    RollupClientError,
    is_not_found_message,
)

ROOT_HEX = "0x" + "ab" * 32


class StubProvider:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def make_request(self, method, params):
        self.calls.append((method, params))
        if self.exc is not None:
            raise self.exc
        return self.response


def test_output_at_block_returns_root():
    provider = StubProvider({"jsonrpc": "2.0", "id": 1, "result": {"version": "0x" + "00" * 32, "outputRoot": ROOT_HEX}})
    client = RollupClient(provider=provider)
    assert client.output_at_block(255) == bytes.fromhex("ab" * 32)
    assert provider.calls == [(OUTPUT_AT_BLOCK, ["0xff"])]


def test_not_produced_height_raises_output_not_found():
    provider = StubProvider({"jsonrpc": "2.0", "id": 1, "error": {
        "code": -32000,
        "message": "failed to get L2 block ref with sync status: failed to determine L2BlockRef "
                   "of height 42984924, could not get payload: not found",
    }})
    with pytest.raises(OutputNotFoundError) as exc_info:
        RollupClient(provider=provider).output_at_block(42984924)
    assert "failed to fetch output at block 42984924" in str(exc_info.value)
    assert str(exc_info.value).endswith("not found")


def test_other_rpc_error_raises_client_error():
    provider = StubProvider({"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "Method not found"}})
    with pytest.raises(RollupClientError) as exc_info:
        RollupClient(provider=provider).output_at_block(1)
    assert not isinstance(exc_info.value, OutputNotFoundError)


def test_missing_output_root_is_an_error():
    provider = StubProvider({"jsonrpc": "2.0", "id": 1, "result": None})
    with pytest.raises(RollupClientError):
        RollupClient(provider=provider).output_at_block(1)


def test_malformed_output_root_is_an_error():
    provider = StubProvider({"jsonrpc": "2.0", "id": 1, "result": {"outputRoot": "0x" + "ab" * 33}})
    with pytest.raises(RollupClientError):
        RollupClient(provider=provider).output_at_block(1)


def test_transport_errors_propagate():
    provider = StubProvider(exc=requests.ConnectionError("connection refused"))
    with pytest.raises(requests.ConnectionError):
        RollupClient(provider=provider).output_at_block(1)


def test_negative_block_number():
    provider = StubProvider({"result": {"outputRoot": ROOT_HEX}})
    with pytest.raises(ValueError):
        RollupClient(provider=provider).output_at_block(-5)
    assert provider.calls == []


def test_default_provider_uses_rpc_url():
    client = RollupClient("http://rollup.example:9545", timeout=3)
    assert client.provider.endpoint_uri == "http://rollup.example:9545"


@pytest.mark.parametrize("msg,expected", [
    ("not found", True),
    ("Not Found", False),
    ("proxy error: Not Found", False),
    ("could not get payload: not found", True),
    ("a: b: not found  ", True),
    ("Method not found", False),
    ("404 Client Error: Not Found for url: http://x/", False),
    ("boom", False),
    ("", False),
    (None, False),
])
def test_is_not_found_message(msg, expected):
    assert is_not_found_message(msg) is expected
