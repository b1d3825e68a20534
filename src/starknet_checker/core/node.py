"""
StarknetNode: JSON-RPC client for a Starknet full node or RPC provider.

Docs: https://github.com/starkware-libs/starknet-specs (v0.7 read API)
"""

from __future__ import annotations

import itertools
import logging
from typing import Any

import httpx

from starknet_checker.core.address import AddressError, format_felt
from starknet_checker.core.models import DEFAULT_RPC_URL, CodeInfo, ContractClass, EndpointConfig

logger = logging.getLogger("starknet_checker.node")

# Error codes from the Starknet JSON-RPC API
CONTRACT_NOT_FOUND = 20

BLOCK_LATEST = "latest"


class StarknetNodeError(Exception):
    """Raised when a Starknet node cannot answer a request."""
    pass


class NodeTransportError(StarknetNodeError):
    """Connection failure, timeout or malformed endpoint URL."""
    pass


class NodeProtocolError(StarknetNodeError):
    """The node answered, but not with a usable JSON-RPC response."""
    pass


class NodeRpcError(StarknetNodeError):
    """The node returned a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.message = message
        self.data = data
        detail = f"RPC error {code}: {message}"
        if data is not None:
            detail += f" ({data})"
        super().__init__(detail)


class StarknetNode:
    """
    Synchronous client for the Starknet JSON-RPC API.
    Uses a public Sepolia endpoint by default.

    Usage:
        node = StarknetNode()  # public Sepolia endpoint
        node = StarknetNode(rpc_url="http://localhost:9545/rpc/v0_7", retries=2)
    """

    def __init__(
        self,
        rpc_url: str = DEFAULT_RPC_URL,
        timeout: float = 15.0,
        retries: int = 0,
    ) -> None:
        self.rpc_url = _check_endpoint(rpc_url)
        self._ids = itertools.count(1)
        self._client = httpx.Client(
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=httpx.HTTPTransport(retries=retries),
        )

    @classmethod
    def from_config(cls, options: EndpointConfig) -> StarknetNode:
        return cls(rpc_url=options.resolved_url, timeout=options.timeout, retries=options.retries)

    # ------------------------------------------------------------------
    # Contracts & classes
    # ------------------------------------------------------------------

    def get_class_hash_at(self, address: str, block_id: str = BLOCK_LATEST) -> str:
        """
        Return the class hash deployed at ``address``.

        Raises:
            NodeRpcError: code 20 (CONTRACT_NOT_FOUND) if nothing is deployed
        """
        result = self._call(
            "starknet_getClassHashAt",
            {"block_id": block_id, "contract_address": address},
        )
        try:
            return format_felt(int(result, 16))
        except (AddressError, TypeError, ValueError) as e:
            raise NodeProtocolError(f"Malformed class hash in response: {result!r}") from e

    def get_code_at(self, address: str) -> CodeInfo | None:
        """
        Return the code deployed at ``address``, or None if there is none.

        A zero class hash and the node's CONTRACT_NOT_FOUND error both mean
        nothing is deployed. Every other failure propagates.
        """
        try:
            class_hash = self.get_class_hash_at(address)
        except NodeRpcError as e:
            if e.code == CONTRACT_NOT_FOUND:
                return None
            raise
        if int(class_hash, 16) == 0:
            return None
        return CodeInfo(class_hash=class_hash)

    def get_class(self, class_hash: str, block_id: str = BLOCK_LATEST) -> ContractClass:
        """Return the contract class registered under ``class_hash``."""
        result = self._call(
            "starknet_getClass",
            {"block_id": block_id, "class_hash": class_hash},
        )
        return _parse_class(result)

    def get_class_at(self, address: str, block_id: str = BLOCK_LATEST) -> ContractClass:
        """Return the contract class deployed at ``address``."""
        result = self._call(
            "starknet_getClassAt",
            {"block_id": block_id, "contract_address": address},
        )
        return _parse_class(result)

    # ------------------------------------------------------------------
    # Chain info
    # ------------------------------------------------------------------

    def get_chain_id(self) -> str:
        """Return the chain id as hex, e.g. 0x534e5f5345504f4c4941 (SN_SEPOLIA)."""
        return str(self._call("starknet_chainId", []))

    def get_block_number(self) -> int:
        """Return the latest accepted block number."""
        result = self._call("starknet_blockNumber", [])
        try:
            return int(result)
        except (TypeError, ValueError) as e:
            raise NodeProtocolError(f"Malformed block number in response: {result!r}") from e

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _call(self, method: str, params: dict[str, Any] | list[Any]) -> Any:
        payload = {
            "jsonrpc": "2.0",
            "id": next(self._ids),
            "method": method,
            "params": params,
        }
        logger.debug(f"{method} -> {self.rpc_url}")
        try:
            response = self._client.post(self.rpc_url, json=payload)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NodeTransportError(f"Request to {self.rpc_url} failed: {e}") from e

        if not response.is_success:
            raise NodeProtocolError(
                f"HTTP {response.status_code} from {self.rpc_url}: {response.text[:200]}"
            )
        try:
            body = response.json()
        except ValueError as e:
            raise NodeProtocolError(f"Non-JSON response from {self.rpc_url}") from e

        if not isinstance(body, dict):
            raise NodeProtocolError(f"Malformed JSON-RPC response: {body!r}")
        if "error" in body:
            error = body["error"] if isinstance(body["error"], dict) else {"message": body["error"]}
            try:
                code = int(error.get("code", 0))
            except (TypeError, ValueError) as e:
                raise NodeProtocolError(f"Malformed JSON-RPC error: {error!r}") from e
            raise NodeRpcError(
                code=code,
                message=str(error.get("message", "unknown error")),
                data=error.get("data"),
            )
        if "result" not in body:
            raise NodeProtocolError(f"JSON-RPC response has no result: {body!r}")
        return body["result"]

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def __enter__(self) -> StarknetNode:
        return self

    def __exit__(self, *_: Any) -> None:
        self.close()


def _parse_class(result: Any) -> ContractClass:
    try:
        return ContractClass.from_rpc(result)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise NodeProtocolError(f"Malformed contract class in response: {e}") from e


def _check_endpoint(rpc_url: str) -> str:
    try:
        url = httpx.URL(rpc_url)
    except (httpx.InvalidURL, TypeError) as e:
        raise NodeTransportError(f"Malformed endpoint URL {rpc_url!r}: {e}") from e
    if url.scheme not in ("http", "https") or not url.host:
        raise NodeTransportError(f"Malformed endpoint URL {rpc_url!r}: expected http(s)://host")
    return rpc_url
