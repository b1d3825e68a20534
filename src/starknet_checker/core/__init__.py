"""core module init"""
from starknet_checker.core.address import (
    FIELD_PRIME,
    AddressError,
    AddressResult,
    InvalidAddress,
    ValidAddress,
    address_to_int,
    format_felt,
    is_valid_address,
    normalize_address,
    parse_address,
    validate_address,
)
from starknet_checker.core.models import (
    DEFAULT_RPC_URL,
    AddressInspection,
    CodeInfo,
    ContractClass,
    ContractQueryResult,
    EndpointConfig,
)
from starknet_checker.core.node import (
    NodeProtocolError,
    NodeRpcError,
    NodeTransportError,
    StarknetNode,
    StarknetNodeError,
)
from starknet_checker.core.probe import (
    CodeProvider,
    check_address,
    inspect_address,
    is_smart_contract,
    is_smart_wallet,
)
from starknet_checker.core.selectors import get_selector_from_name

__all__ = [
    "AddressError",
    "AddressInspection",
    "AddressResult",
    "CodeInfo",
    "CodeProvider",
    "ContractClass",
    "ContractQueryResult",
    "DEFAULT_RPC_URL",
    "EndpointConfig",
    "FIELD_PRIME",
    "InvalidAddress",
    "NodeProtocolError",
    "NodeRpcError",
    "NodeTransportError",
    "StarknetNode",
    "StarknetNodeError",
    "ValidAddress",
    "address_to_int",
    "check_address",
    "format_felt",
    "get_selector_from_name",
    "inspect_address",
    "is_smart_contract",
    "is_smart_wallet",
    "is_valid_address",
    "normalize_address",
    "parse_address",
    "validate_address",
]
