#!/usr/bin/env python3
"""
Example 01: Address validation and normalization.

Validates Starknet addresses and prints their canonical 64 digit form.
No network access required.

Usage:
    python examples/01_validate_address.py
    python examples/01_validate_address.py 0x6a06ca686c6193a3...
"""

import sys

from starknet_checker.core.address import InvalidAddress, parse_address

# Test addresses
addresses = [
    "0x6a06ca686c6193a3420333405fe6bfb065197d670c645bdc0722a36d88982f",  # short, gets padded
    "0x006a06ca686c6193a3420333405fe6bfb065197d670c645bdc0722a36d88982f",  # canonical
    "0x06eC96291A904b8B62B446FB32fC9903b5f82D73D7CA319E03ba45D50788Ec30",  # mixed case
    "not-an-address",
    "0x" + "f" * 64,  # above the field prime
]

if len(sys.argv) > 1:
    addresses = sys.argv[1:]

for addr in addresses:
    print(f"Address: {addr[:30]}{'...' if len(addr) > 30 else ''}")
    result = parse_address(addr)
    if isinstance(result, InvalidAddress):
        print(f"  Valid:     False ({result.reason})")
    else:
        print("  Valid:     True")
        print(f"  Canonical: {result.address}")
    print()
