"""
Entry point selectors.

Starknet identifies an entry point by sn_keccak(name): the Keccak-256 digest
of the ASCII name, truncated to its low 250 bits.
"""

from __future__ import annotations

from web3 import Web3

MASK_250 = 2**250 - 1

# Entry points every account contract must expose
ACCOUNT_ENTRY_POINTS = ("__execute__", "__validate__")


def starknet_keccak(data: bytes) -> int:
    """Keccak-256 of ``data`` masked to 250 bits."""
    return int.from_bytes(Web3.keccak(data), "big") & MASK_250


def get_selector_from_name(name: str) -> int:
    """Return the selector of an entry point, e.g. ``"__execute__"``."""
    return starknet_keccak(name.encode("ascii"))


def account_selectors() -> set[int]:
    return {get_selector_from_name(name) for name in ACCOUNT_ENTRY_POINTS}
