"""
Starknet address utilities: validation, normalization, felt formatting.

A Starknet address is a field element (felt) of the Stark prime field,
written as 0x-prefixed hex. The canonical form is "0x" followed by exactly
64 lowercase hex digits, zero-padded on the left.

    P = 2**251 + 17 * 2**192 + 1

Reference: https://docs.starknet.io/architecture-and-concepts/cryptography/
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterator, Literal, Union

logger = logging.getLogger("starknet_checker.address")

FIELD_PRIME = 2**251 + 17 * 2**192 + 1
ADDRESS_HEX_LENGTH = 64
ADDRESS_PREFIX = "0x"

_HEX_PAYLOAD = re.compile(r"[0-9a-fA-F]+")


class AddressError(Exception):
    """Raised for invalid Starknet addresses."""

    pass


@dataclass(frozen=True)
class ValidAddress:
    """A structurally valid address, already in canonical form."""

    address: str
    is_valid: Literal[True] = True

    def __iter__(self) -> Iterator[object]:
        return iter((self.is_valid, self.address))


@dataclass(frozen=True)
class InvalidAddress:
    """A rejected input. ``original`` is the input exactly as given."""

    original: str
    reason: str
    is_valid: Literal[False] = False

    def __iter__(self) -> Iterator[object]:
        return iter((self.is_valid, self.original))


AddressResult = Union[ValidAddress, InvalidAddress]


def parse_address(address: str) -> AddressResult:
    """
    Parse and normalize a Starknet address.

    Never raises. Short payloads are left-padded to 64 digits; the decoded
    value must be below the field prime.

    Args:
        address: raw address string, e.g. "0x6a06ca...982f"

    Returns:
        ValidAddress with the canonical address, or InvalidAddress echoing
        the input unchanged.
    """
    if not isinstance(address, str):
        return InvalidAddress(original=address, reason="address is not a string")

    if not address.startswith(ADDRESS_PREFIX):
        return _reject(address, "missing 0x prefix")

    payload = address[len(ADDRESS_PREFIX):]
    if not payload:
        return _reject(address, "empty payload")
    if not _HEX_PAYLOAD.fullmatch(payload):
        return _reject(address, "non-hex characters in payload")
    if len(payload) > ADDRESS_HEX_LENGTH:
        return _reject(
            address, f"payload too long: {len(payload)} digits (max {ADDRESS_HEX_LENGTH})"
        )

    padded = payload.lower().rjust(ADDRESS_HEX_LENGTH, "0")
    if int(padded, 16) >= FIELD_PRIME:
        return _reject(address, "value exceeds the field prime")

    return ValidAddress(address=ADDRESS_PREFIX + padded)


def is_valid_address(address: str) -> tuple[bool, str]:
    """
    Check a Starknet address without raising.

    Returns:
        (True, canonical_address) if valid, (False, address) otherwise
    """
    result = parse_address(address)
    if isinstance(result, ValidAddress):
        return True, result.address
    return False, result.original


def validate_address(address: str) -> str:
    """
    Validate a Starknet address and return its canonical form.

    Raises:
        AddressError: if the address is malformed or out of range
    """
    result = parse_address(address)
    if isinstance(result, InvalidAddress):
        raise AddressError(f"Invalid Starknet address {address!r}: {result.reason}")
    return result.address


def normalize_address(address: str) -> str | None:
    """Return the canonical address, or None if invalid."""
    result = parse_address(address)
    return result.address if isinstance(result, ValidAddress) else None


def address_to_int(address: str) -> int:
    """Decode a valid address to its felt value."""
    return int(validate_address(address), 16)


def format_felt(value: int) -> str:
    """Format a felt as a canonical 0x + 64 digit string."""
    if not 0 <= value < FIELD_PRIME:
        raise AddressError(f"Felt out of range: {value}")
    return f"{ADDRESS_PREFIX}{value:064x}"


def _reject(address: str, reason: str) -> InvalidAddress:
    logger.debug(f"Rejected address {address!r}: {reason}")
    return InvalidAddress(original=address, reason=reason)
