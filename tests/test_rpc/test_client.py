"""
Tests for JsonRpcClient.

Tests cover:
- JSON-RPC envelope and method names
- Request encoding for call / estimateFee / addInvokeTransaction
- Result decoding
- NotFound on empty results
- Transport, HTTP and JSON-RPC error mapping
"""

import json
from typing import Any, Callable, Dict, List

import httpx
import pytest

from starkcall.account import Account
from starkcall.config import Network
from starkcall.errors import DeadlineExceededError, NotFoundError, RemoteCallError
from starkcall.rpc import JsonRpcClient
from starkcall.types import Call, FeeEstimate, InvokeResult, InvokeTransaction

from ..conftest import ACCOUNT_ADDRESS, TEST_PRIVATE_KEY

RPC_URL = "https://rpc.example.com"


# =============================================================================
# Helper Functions
# =============================================================================


def make_client(handler: Callable[[Dict[str, Any]], Any], seen: List[Dict[str, Any]] = None) -> JsonRpcClient:
    """Create a client whose transport answers with ``handler(request_body)``.

    ``handler`` returns either a JSON-serialisable body or an ``httpx.Response``.
    """

    def transport(request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        if seen is not None:
            seen.append(body)
        answer = handler(body)
        if isinstance(answer, httpx.Response):
            return answer
        return httpx.Response(200, json=answer)

    http = httpx.AsyncClient(transport=httpx.MockTransport(transport))
    return JsonRpcClient(RPC_URL, http_client=http)


def result(value: Any) -> Callable[[Dict[str, Any]], Dict[str, Any]]:
    return lambda body: {"jsonrpc": "2.0", "id": body["id"], "result": value}


def sample_invoke() -> InvokeTransaction:
    return InvokeTransaction(
        contract_address="0x1",
        entry_point_selector="0x15d40a3d6ca2ac30f4031e42be28da9b056fef9bb7357ac5e85627ee876e5ad",
        calldata=["0x0", "0x0", "0x1"],
        signature=["1", "2"],
        max_fee="0x200000000",
        version="0x0",
        nonce="0x1",
    )


# =============================================================================
# Envelope Tests
# =============================================================================


class TestRequest:
    """Tests for the raw JSON-RPC round trip."""

    @pytest.mark.asyncio
    async def test_envelope(self) -> None:
        seen: List[Dict[str, Any]] = []
        client = make_client(result("SN_GOERLI"), seen)

        await client.request("starknet_chainId", [])
        await client.request("starknet_chainId", [])

        assert seen[0]["jsonrpc"] == "2.0"
        assert seen[0]["method"] == "starknet_chainId"
        assert seen[0]["params"] == []
        assert seen[1]["id"] != seen[0]["id"]

    @pytest.mark.asyncio
    async def test_null_result_is_not_found(self) -> None:
        client = make_client(result(None))

        with pytest.raises(NotFoundError) as exc_info:
            await client.request("starknet_chainId", [])

        assert exc_info.value.code == "NOT_FOUND"
        assert exc_info.value.method == "starknet_chainId"

    @pytest.mark.asyncio
    async def test_missing_result_is_not_found(self) -> None:
        client = make_client(lambda body: {"jsonrpc": "2.0", "id": body["id"]})

        with pytest.raises(NotFoundError):
            await client.request("starknet_chainId", [])

    @pytest.mark.asyncio
    async def test_jsonrpc_error(self) -> None:
        client = make_client(
            lambda body: {
                "jsonrpc": "2.0",
                "id": body["id"],
                "error": {"code": 20, "message": "Contract not found"},
            }
        )

        with pytest.raises(RemoteCallError) as exc_info:
            await client.request("starknet_call", [])

        assert exc_info.value.rpc_code == 20
        assert "Contract not found" in exc_info.value.message

    @pytest.mark.asyncio
    async def test_http_error(self) -> None:
        client = make_client(lambda body: httpx.Response(503, text="unavailable"))

        with pytest.raises(RemoteCallError) as exc_info:
            await client.request("starknet_chainId", [])

        assert exc_info.value.details["status_code"] == 503

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        client = make_client(lambda body: httpx.Response(200, text="<html>"))

        with pytest.raises(RemoteCallError, match="invalid JSON"):
            await client.request("starknet_chainId", [])

    @pytest.mark.asyncio
    async def test_transport_error(self) -> None:
        def handler(body: Dict[str, Any]) -> Any:
            raise httpx.ConnectError("connection refused")

        client = make_client(handler)

        with pytest.raises(RemoteCallError) as exc_info:
            await client.request("starknet_chainId", [])

        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(body: Dict[str, Any]) -> Any:
            raise httpx.ReadTimeout("timed out")

        client = make_client(handler)

        with pytest.raises(DeadlineExceededError):
            await client.request("starknet_chainId", [])


# =============================================================================
# Method Tests
# =============================================================================


class TestMethods:
    """Tests for the typed node methods."""

    @pytest.mark.asyncio
    async def test_call_request(self) -> None:
        seen: List[Dict[str, Any]] = []
        client = make_client(result(["0x5"]), seen)

        out = await client.call(Call(contract_address="0x00AB", entry_point="get_nonce"))

        assert out == ["0x5"]
        request, block_id = seen[0]["params"]
        assert seen[0]["method"] == "starknet_call"
        assert request["contract_address"] == "0xab"
        assert request["entry_point_selector"].startswith("0x")
        assert request["calldata"] == []
        assert block_id == "latest"

    @pytest.mark.asyncio
    async def test_call_calldata_hex(self) -> None:
        seen: List[Dict[str, Any]] = []
        client = make_client(result([]), seen)

        out = await client.call(Call(contract_address="0x1", entry_point="balance_of", calldata=["16", "0x10"]))

        assert out == []
        assert seen[0]["params"][0]["calldata"] == ["0x10", "0x10"]

    @pytest.mark.asyncio
    async def test_call_non_list_result(self) -> None:
        client = make_client(result({"unexpected": True}))

        with pytest.raises(RemoteCallError):
            await client.call(Call(contract_address="0x1", entry_point="get_nonce"))

    @pytest.mark.asyncio
    async def test_chain_id(self) -> None:
        client = make_client(result("0x534e5f474f45524c49"))

        assert await client.chain_id() == "0x534e5f474f45524c49"

    @pytest.mark.asyncio
    async def test_estimate_fee(self) -> None:
        seen: List[Dict[str, Any]] = []
        client = make_client(
            result({"gas_consumed": "0x10", "gas_price": "0x6", "overall_fee": "0x64"}), seen
        )

        estimate = await client.estimate_fee(sample_invoke())

        assert isinstance(estimate, FeeEstimate)
        assert estimate.overall_fee_int() == 100
        assert seen[0]["method"] == "starknet_estimateFee"
        assert seen[0]["params"] == [sample_invoke().to_rpc(), "latest"]

    @pytest.mark.asyncio
    async def test_estimate_fee_list_result(self) -> None:
        client = make_client(result([{"overall_fee": "0x64", "unit": "WEI"}]))

        estimate = await client.estimate_fee(sample_invoke())

        assert estimate.overall_fee_int() == 100

    @pytest.mark.asyncio
    async def test_estimate_fee_empty_list(self) -> None:
        client = make_client(result([]))

        with pytest.raises(NotFoundError):
            await client.estimate_fee(sample_invoke())

    @pytest.mark.asyncio
    async def test_add_invoke_transaction(self) -> None:
        seen: List[Dict[str, Any]] = []
        client = make_client(result({"transaction_hash": "0xabc"}), seen)

        response = await client.add_invoke_transaction(sample_invoke())

        assert isinstance(response, InvokeResult)
        assert response.transaction_hash == "0xabc"
        assert seen[0]["method"] == "starknet_addInvokeTransaction"
        payload = seen[0]["params"][0]
        assert payload == {
            "type": "INVOKE",
            "contract_address": "0x1",
            "entry_point_selector": "0x15d40a3d6ca2ac30f4031e42be28da9b056fef9bb7357ac5e85627ee876e5ad",
            "calldata": ["0x0", "0x0", "0x1"],
            "signature": ["1", "2"],
            "max_fee": "0x200000000",
            "version": "0x0",
            "nonce": "0x1",
        }

    @pytest.mark.asyncio
    async def test_add_invoke_malformed(self) -> None:
        client = make_client(result({"status": "RECEIVED"}))

        with pytest.raises(RemoteCallError, match="malformed"):
            await client.add_invoke_transaction(sample_invoke())


# =============================================================================
# Construction Tests
# =============================================================================


class TestClientConstruction:
    """Tests for factories and lifecycle."""

    def test_from_network(self) -> None:
        client = JsonRpcClient.from_network(Network.MAINNET)

        assert client.rpc_url == "https://starknet-mainnet.public.blastapi.io"

    def test_from_network_override(self) -> None:
        client = JsonRpcClient.from_network(Network.GOERLI, rpc_url=RPC_URL)

        assert client.rpc_url == RPC_URL

    def test_account_factory(self) -> None:
        client = JsonRpcClient(RPC_URL)
        account = client.account(TEST_PRIVATE_KEY, ACCOUNT_ADDRESS)

        assert isinstance(account, Account)
        assert account.provider is client

    @pytest.mark.asyncio
    async def test_context_manager_closes_owned_client(self) -> None:
        async with JsonRpcClient(RPC_URL) as client:
            http = client._http

        assert http.is_closed

    @pytest.mark.asyncio
    async def test_external_client_left_open(self) -> None:
        http = httpx.AsyncClient()
        async with JsonRpcClient(RPC_URL, http_client=http):
            pass

        assert not http.is_closed
        await http.aclose()


# =============================================================================
# End-to-end over the mock transport
# =============================================================================


class TestAccountOverHttp:
    """Tests for the full execute pipeline against a mocked node."""

    @pytest.mark.asyncio
    async def test_execute_round_trips(self) -> None:
        answers = {
            "starknet_call": ["0x3"],
            "starknet_chainId": "SN_GOERLI",
            "starknet_estimateFee": {"overall_fee": "0x64"},
            "starknet_addInvokeTransaction": {"transaction_hash": "0xfeed"},
        }
        seen: List[Dict[str, Any]] = []
        client = make_client(lambda body: result(answers[body["method"]])(body), seen)
        account = client.account(TEST_PRIVATE_KEY, ACCOUNT_ADDRESS)

        response = await account.execute([Call(contract_address="0x1", entry_point="increment")])

        assert response.transaction_hash == "0xfeed"
        assert [body["method"] for body in seen] == [
            "starknet_call",
            "starknet_chainId",
            "starknet_estimateFee",
            "starknet_chainId",
            "starknet_addInvokeTransaction",
        ]
        submitted = seen[-1]["params"][0]
        assert submitted["max_fee"] == "0xc8"
        assert submitted["nonce"] == "0x3"
        assert submitted["calldata"] == ["0x1", "0x1", submitted["calldata"][2], "0x0", "0x0", "0x0", "0x3"]
