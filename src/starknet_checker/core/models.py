"""
Core data models for Starknet address checks.
Felts are kept as canonical 0x-prefixed, 64 digit hex strings.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

# Public Sepolia testnet endpoint, used when no rpc_url is configured
DEFAULT_RPC_URL = "https://free-rpc.nethermind.io/sepolia-juno"


class EndpointConfig(BaseModel):
    """Where and how to reach a Starknet JSON-RPC node."""
    rpc_url: str | None = None
    timeout: float = 15.0
    retries: int = Field(default=0, ge=0)  # connection-level retries only

    @property
    def resolved_url(self) -> str:
        return self.rpc_url or DEFAULT_RPC_URL


class CodeInfo(BaseModel):
    """Code deployed at an address."""
    class_hash: str


class ContractClass(BaseModel):
    """A contract class as returned by starknet_getClass."""
    kind: Literal["sierra", "legacy"]
    external_selectors: list[int] = Field(default_factory=list)
    abi: Any | None = None

    @classmethod
    def from_rpc(cls, data: dict[str, Any]) -> ContractClass:
        """
        Build from a raw RPC class object.

        Sierra classes carry ``sierra_program``; legacy (Cairo 0) classes
        carry a base64 ``program``. Both list entry points under
        ``entry_points_by_type.EXTERNAL``.
        """
        kind = "sierra" if "sierra_program" in data else "legacy"
        entry_points = data.get("entry_points_by_type", {}).get("EXTERNAL", [])
        return cls(
            kind=kind,
            external_selectors=[int(ep["selector"], 16) for ep in entry_points],
            abi=data.get("abi"),
        )

    def has_entry_points(self, selectors: set[int]) -> bool:
        """True if every selector in ``selectors`` is an external entry point."""
        return selectors.issubset(self.external_selectors)


class ContractQueryResult(BaseModel):
    """Outcome of a single contract-presence probe."""
    is_smart_contract: bool
    address: str
    class_hash: str | None = None


class AddressInspection(BaseModel):
    """Full classification of an address: validity, wallet, contract."""
    is_valid_address: bool = False
    is_smart_wallet: bool = False
    is_smart_contract: bool = False
    address: str
    class_hash: str | None = None
    message: str = ""
