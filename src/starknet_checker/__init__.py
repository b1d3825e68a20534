"""
starknet-address-checker: validate Starknet addresses and probe them on-chain.

Usage:
    from starknet_checker import is_valid_address, check_address, EndpointConfig
"""

from starknet_checker.core.address import is_valid_address, parse_address
from starknet_checker.core.models import ContractQueryResult, EndpointConfig
from starknet_checker.core.node import StarknetNode, StarknetNodeError
from starknet_checker.core.probe import check_address, inspect_address

__version__ = "0.1.0"
__all__ = [
    "ContractQueryResult",
    "EndpointConfig",
    "StarknetNode",
    "StarknetNodeError",
    "check_address",
    "inspect_address",
    "is_valid_address",
    "parse_address",
]
