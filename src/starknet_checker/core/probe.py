"""
On-chain checks: is there a contract at this address, and is it an account?

check_address() is a single get_code_at() round trip. inspect_address()
additionally fetches the deployed class and looks for the account entry
points (__execute__ and __validate__) to tell smart wallets apart from
other contracts.
"""

from __future__ import annotations

import logging
from typing import Protocol

from starknet_checker.core.address import InvalidAddress, parse_address
from starknet_checker.core.models import (
    AddressInspection,
    CodeInfo,
    ContractClass,
    ContractQueryResult,
    EndpointConfig,
)
from starknet_checker.core.node import StarknetNode
from starknet_checker.core.selectors import account_selectors

logger = logging.getLogger("starknet_checker.probe")

MSG_INVALID = "Invalid address format"
MSG_NOT_DEPLOYED = "No contract at this address"
MSG_WALLET = "Is Smart Wallet: Yes\nYou are interacting with a smart-wallet"
MSG_CONTRACT = (
    "Is Smart Wallet: No\nIs Smart Contract: Yes\n"
    "You are interacting with a smart-contract"
)


class CodeProvider(Protocol):
    """Anything that can tell whether code is deployed at an address."""

    def get_code_at(self, address: str) -> CodeInfo | None: ...


class ClassProvider(CodeProvider, Protocol):
    def get_class(self, class_hash: str) -> ContractClass: ...


def check_address(
    address: str,
    options: EndpointConfig | None = None,
    provider: CodeProvider | None = None,
) -> ContractQueryResult:
    """
    Check whether a smart contract is deployed at ``address``.

    The address is sent as given; run it through is_valid_address() first.

    Args:
        address: Starknet address, ideally already normalized
        options: endpoint configuration; the public Sepolia endpoint is used
                 when ``options.rpc_url`` is absent
        provider: code lookup to use instead of a StarknetNode built
                  from ``options``

    Returns:
        ContractQueryResult

    Raises:
        StarknetNodeError: on transport, protocol or RPC failure
    """
    if provider is not None:
        code = provider.get_code_at(address)
    else:
        with StarknetNode.from_config(options or EndpointConfig()) as node:
            code = node.get_code_at(address)

    return ContractQueryResult(
        is_smart_contract=code is not None,
        address=address,
        class_hash=code.class_hash if code else None,
    )


def inspect_address(
    address: str,
    options: EndpointConfig | None = None,
    provider: ClassProvider | None = None,
) -> AddressInspection:
    """
    Validate ``address`` and classify what is deployed there.

    Invalid input never reaches the network. A deployed class exposing both
    __execute__ and __validate__ is a smart wallet; any other deployed class
    is a plain smart contract.

    Raises:
        StarknetNodeError: on transport, protocol or RPC failure
    """
    parsed = parse_address(address)
    if isinstance(parsed, InvalidAddress):
        return AddressInspection(address=address, message=MSG_INVALID)

    if provider is not None:
        return _classify(parsed.address, provider)
    with StarknetNode.from_config(options or EndpointConfig()) as node:
        return _classify(parsed.address, node)


def is_smart_wallet(
    address: str,
    options: EndpointConfig | None = None,
    provider: ClassProvider | None = None,
) -> bool:
    """True if an account contract (__execute__ and __validate__) is deployed at ``address``."""
    return inspect_address(address, options, provider).is_smart_wallet


def is_smart_contract(
    address: str,
    options: EndpointConfig | None = None,
    provider: ClassProvider | None = None,
) -> bool:
    """True if any class is deployed at ``address``, account contracts included."""
    return inspect_address(address, options, provider).is_smart_contract


def _classify(address: str, provider: ClassProvider) -> AddressInspection:
    code = provider.get_code_at(address)
    if code is None:
        logger.info(f"{address}: no contract deployed")
        return AddressInspection(address=address, message=MSG_NOT_DEPLOYED)

    contract_class = provider.get_class(code.class_hash)
    is_wallet = contract_class.has_entry_points(account_selectors())
    if not is_wallet:
        logger.debug(f"{address}: no account entry points, not a wallet")
    logger.info(f"{address}: {'smart wallet' if is_wallet else 'smart contract'} ({contract_class.kind})")

    return AddressInspection(
        is_valid_address=True,
        is_smart_wallet=is_wallet,
        is_smart_contract=True,
        address=address,
        class_hash=code.class_hash,
        message=MSG_WALLET if is_wallet else MSG_CONTRACT,
    )
