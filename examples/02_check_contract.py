#!/usr/bin/env python3
"""
Example 02: Check whether an address holds a smart contract.

Connects to a Starknet JSON-RPC endpoint (public Sepolia by default)
and classifies the address as smart wallet, smart contract, or neither.

Usage:
    python examples/02_check_contract.py
    python examples/02_check_contract.py 0x04e49f15... https://my-node/rpc/v0_7
"""

import logging
import sys

from starknet_checker import EndpointConfig, StarknetNodeError, check_address, inspect_address, is_valid_address

logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

DEFAULT_ADDRESS = "0x04e49f15aba463e014216cfa37049d0dd5c4bcb6c5743a60b4854c30a35cce0e"
address = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ADDRESS
options = EndpointConfig(rpc_url=sys.argv[2] if len(sys.argv) > 2 else None)

valid, normalized = is_valid_address(address)
if not valid:
    print(f"Invalid Starknet address: {address}")
    sys.exit(1)

try:
    result = check_address(normalized, options)
    print(f"Address:        {normalized}")
    print(f"Smart contract: {result.is_smart_contract}")

    inspection = inspect_address(normalized, options)
    print(inspection.message)
except StarknetNodeError as e:
    print(f"Failed to check address: {e}")
    sys.exit(2)
