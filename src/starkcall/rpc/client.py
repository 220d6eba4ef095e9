"""
JSON-RPC client for a Starknet node.

Async httpx client exposing the four node methods the account pipeline
needs: ``starknet_call``, ``starknet_chainId``, ``starknet_estimateFee`` and
``starknet_addInvokeTransaction``. Every failure surfaces as a
:class:`~starkcall.errors.RemoteCallError`; a successful response with no
result surfaces as :class:`~starkcall.errors.NotFoundError`.
"""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError

from starkcall.config import DEFAULT_CONSTANTS, Network, TransactionConstants, get_network_config
from starkcall.constants import (
    BLOCK_TAG_LATEST,
    JSONRPC_VERSION,
    METHOD_ADD_INVOKE_TRANSACTION,
    METHOD_CALL,
    METHOD_CHAIN_ID,
    METHOD_ESTIMATE_FEE,
    RPC_TIMEOUT_SECONDS,
)
from starkcall.errors import DeadlineExceededError, NotFoundError, RemoteCallError
from starkcall.types import Call, FeeEstimate, InvokeResult, InvokeTransaction
from starkcall.utils.felt import parse_felt, selector_from_name, to_hex
from starkcall.utils.logging import get_logger

if TYPE_CHECKING:
    from starkcall.account import Account

_logger = get_logger(__name__)


class JsonRpcClient:
    """
    Minimal Starknet JSON-RPC client.

    Example:
        ```python
        async with JsonRpcClient("https://starknet-testnet.public.blastapi.io") as rpc:
            chain_id = await rpc.chain_id()
            account = rpc.account(private_key, address)
            nonce = await account.nonce()
        ```
    """

    def __init__(
        self,
        rpc_url: str,
        *,
        timeout: float = RPC_TIMEOUT_SECONDS,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """
        Initialize the client.

        Args:
            rpc_url: Node JSON-RPC endpoint
            timeout: Per-request transport timeout in seconds
            http_client: Pre-built httpx client (owned by the caller)
        """
        self._rpc_url = rpc_url
        self._timeout = timeout
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=httpx.Timeout(timeout))
        self._ids = itertools.count(1)

    @classmethod
    def from_network(
        cls,
        network: Network,
        rpc_url: Optional[str] = None,
        **kwargs: Any,
    ) -> "JsonRpcClient":
        """Create a client for a preset network."""
        return cls(get_network_config(network, rpc_url).rpc_url, **kwargs)

    @property
    def rpc_url(self) -> str:
        return self._rpc_url

    async def __aenter__(self) -> "JsonRpcClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    def account(
        self,
        private_key: Union[str, int],
        address: str,
        constants: TransactionConstants = DEFAULT_CONSTANTS,
    ) -> "Account":
        """Create an :class:`~starkcall.account.Account` bound to this client."""
        from starkcall.account import Account

        return Account(self, address, private_key, constants=constants)

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def request(self, method: str, params: Union[List[Any], Dict[str, Any]]) -> Any:
        """
        Perform one JSON-RPC round trip.

        Args:
            method: JSON-RPC method name
            params: Positional or named parameters

        Returns:
            The ``result`` member of the response

        Raises:
            DeadlineExceededError: If the transport timed out
            NotFoundError: If the response carries no result
            RemoteCallError: On transport, HTTP, decoding or JSON-RPC errors
        """
        request_id = next(self._ids)
        payload = {"jsonrpc": JSONRPC_VERSION, "id": request_id, "method": method, "params": params}
        _logger.debug("RPC request", extra={"method": method, "request_id": request_id})

        try:
            response = await self._http.post(self._rpc_url, json=payload)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise DeadlineExceededError(self._timeout, operation=method) from e
        except httpx.HTTPStatusError as e:
            raise RemoteCallError(
                f"{method}: HTTP {e.response.status_code}",
                method=method,
                details={"status_code": e.response.status_code},
            ) from e
        except httpx.HTTPError as e:
            raise RemoteCallError(f"{method}: {e}", method=method) from e

        try:
            body = response.json()
        except ValueError as e:
            raise RemoteCallError(f"{method}: invalid JSON response", method=method) from e

        if not isinstance(body, dict):
            raise RemoteCallError(f"{method}: malformed JSON-RPC response", method=method)

        error = body.get("error")
        if error:
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            _logger.debug("RPC error", extra={"method": method, "rpc_code": code})
            raise RemoteCallError(
                f"{method}: {message}",
                method=method,
                rpc_code=code,
                details={"data": error.get("data")} if isinstance(error, dict) and "data" in error else None,
            )

        result = body.get("result")
        if result is None:
            raise NotFoundError(method)
        return result

    # ------------------------------------------------------------------
    # Node methods
    # ------------------------------------------------------------------

    async def call(self, call: Call, block_id: str = BLOCK_TAG_LATEST) -> List[str]:
        """Run a read-only contract call; returns the raw result felts."""
        request = {
            "contract_address": to_hex(parse_felt(call.contract_address, "contract_address")),
            "entry_point_selector": to_hex(selector_from_name(call.entry_point)),
            "calldata": [to_hex(parse_felt(item, "calldata")) for item in call.calldata],
        }
        result = await self.request(METHOD_CALL, [request, block_id])
        if not isinstance(result, list):
            raise RemoteCallError(f"{METHOD_CALL}: expected a list result", method=METHOD_CALL)
        return [str(item) for item in result]

    async def chain_id(self) -> str:
        result = await self.request(METHOD_CHAIN_ID, [])
        return str(result)

    async def estimate_fee(
        self,
        invoke: InvokeTransaction,
        block_id: str = BLOCK_TAG_LATEST,
    ) -> FeeEstimate:
        result = await self.request(METHOD_ESTIMATE_FEE, [invoke.to_rpc(), block_id])
        # Newer nodes answer with one estimate per request.
        if isinstance(result, list):
            if not result:
                raise NotFoundError(METHOD_ESTIMATE_FEE)
            result = result[0]
        if not isinstance(result, dict):
            raise RemoteCallError(f"{METHOD_ESTIMATE_FEE}: expected an object result", method=METHOD_ESTIMATE_FEE)
        try:
            return FeeEstimate.model_validate(result)
        except ValidationError as e:
            raise RemoteCallError(f"{METHOD_ESTIMATE_FEE}: malformed fee estimate", method=METHOD_ESTIMATE_FEE) from e

    async def add_invoke_transaction(self, invoke: InvokeTransaction) -> InvokeResult:
        result = await self.request(METHOD_ADD_INVOKE_TRANSACTION, [invoke.to_rpc()])
        if not isinstance(result, dict):
            raise RemoteCallError(
                f"{METHOD_ADD_INVOKE_TRANSACTION}: expected an object result",
                method=METHOD_ADD_INVOKE_TRANSACTION,
            )
        try:
            return InvokeResult.model_validate(result)
        except ValidationError as e:
            raise RemoteCallError(
                f"{METHOD_ADD_INVOKE_TRANSACTION}: malformed response",
                method=METHOD_ADD_INVOKE_TRANSACTION,
            ) from e
