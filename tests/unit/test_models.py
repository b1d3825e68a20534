"""
Unit tests for core data models.
"""

import pytest
from pydantic import ValidationError

from starknet_checker.core.models import (
    DEFAULT_RPC_URL,
    AddressInspection,
    ContractClass,
    ContractQueryResult,
    EndpointConfig,
)


def test_endpoint_config_defaults_to_public_sepolia():
    options = EndpointConfig()
    assert options.rpc_url is None
    assert options.resolved_url == DEFAULT_RPC_URL


def test_endpoint_config_explicit_url():
    options = EndpointConfig(rpc_url="http://localhost:5050/rpc")
    assert options.resolved_url == "http://localhost:5050/rpc"


def test_endpoint_config_rejects_negative_retries():
    with pytest.raises(ValidationError):
        EndpointConfig(retries=-1)


def test_sierra_class_from_rpc():
    contract_class = ContractClass.from_rpc({
        "sierra_program": ["0x1", "0x2"],
        "contract_class_version": "0.1.0",
        "entry_points_by_type": {
            "EXTERNAL": [
                {"selector": "0x15d40a3d6ca2ac30f4031e42be28da9b056fef9bb7357ac5e85627ee876e5ad", "function_idx": 0},
                {"selector": "0x2", "function_idx": 1},
            ],
            "L1_HANDLER": [],
            "CONSTRUCTOR": [{"selector": "0x3", "function_idx": 2}],
        },
        "abi": "[]",
    })
    assert contract_class.kind == "sierra"
    assert contract_class.external_selectors == [
        0x15D40A3D6CA2AC30F4031E42BE28DA9B056FEF9BB7357AC5E85627EE876E5AD,
        2,
    ]
    assert contract_class.abi == "[]"


def test_legacy_class_from_rpc():
    contract_class = ContractClass.from_rpc({
        "program": "H4sIAAAAAAAA...",
        "entry_points_by_type": {
            "EXTERNAL": [{"selector": "0xa", "offset": "0x3a"}],
            "L1_HANDLER": [],
            "CONSTRUCTOR": [],
        },
        "abi": [{"type": "function", "name": "foo"}],
    })
    assert contract_class.kind == "legacy"
    assert contract_class.external_selectors == [10]


def test_class_without_entry_points():
    contract_class = ContractClass.from_rpc({"sierra_program": []})
    assert contract_class.external_selectors == []
    assert not contract_class.has_entry_points({1})


def test_has_entry_points_requires_all():
    contract_class = ContractClass(kind="sierra", external_selectors=[1, 2, 3])
    assert contract_class.has_entry_points({1, 3})
    assert not contract_class.has_entry_points({1, 4})


def test_query_result_serializes():
    result = ContractQueryResult(is_smart_contract=True, address="0x1", class_hash="0x2")
    assert result.model_dump() == {"is_smart_contract": True, "address": "0x1", "class_hash": "0x2"}


def test_inspection_defaults():
    inspection = AddressInspection(address="0x1")
    assert inspection.is_valid_address is False
    assert inspection.is_smart_wallet is False
    assert inspection.is_smart_contract is False
    assert inspection.class_hash is None
