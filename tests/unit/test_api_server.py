from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from starknet_checker.api.server import app
from starknet_checker.core.models import CodeInfo, ContractClass
from starknet_checker.core.node import NodeProtocolError, NodeTransportError
from starknet_checker.core.selectors import account_selectors

SHORT = "0x6a06ca686c6193a3420333405fe6bfb065197d670c645bdc0722a36d88982f"
CANONICAL = "0x006a06ca686c6193a3420333405fe6bfb065197d670c645bdc0722a36d88982f"
CLASS_HASH = "0x" + "0" * 63 + "7"


class MockNode:
    def __init__(self, code=None, contract_class=None, error=None):
        self.code = code
        self.contract_class = contract_class
        self.error = error
        self.lookups = []

    def get_code_at(self, address):
        self.lookups.append(address)
        if self.error:
            raise self.error
        return self.code

    def get_class(self, class_hash):
        return self.contract_class


@pytest.fixture
def client():
    with TestClient(app) as c:
        real_node = app.state.node
        yield c
        app.state.node = real_node


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_validate_pads_short_address(client):
    response = client.get(f"/address/{SHORT}/validate")
    assert response.status_code == 200
    assert response.json() == {"is_valid": True, "address": CANONICAL}


def test_validate_invalid_address(client):
    response = client.get("/address/not-an-address/validate")
    assert response.status_code == 200
    assert response.json() == {"is_valid": False, "address": "not-an-address"}


def test_contract_rejects_invalid_address(client):
    app.state.node = MockNode()
    response = client.get("/address/0xnothex/contract")
    assert response.status_code == 400
    assert "Invalid Starknet address" in response.text
    assert app.state.node.lookups == []


def test_contract_uses_normalized_address(client):
    app.state.node = MockNode(code=CodeInfo(class_hash=CLASS_HASH))
    response = client.get(f"/address/{SHORT}/contract")
    assert response.status_code == 200
    assert response.json() == {
        "is_smart_contract": True,
        "address": CANONICAL,
        "class_hash": CLASS_HASH,
    }
    assert app.state.node.lookups == [CANONICAL]


def test_contract_node_failure_is_502(client):
    app.state.node = MockNode(error=NodeTransportError("Connection refused"))
    response = client.get(f"/address/{CANONICAL}/contract")
    assert response.status_code == 502
    assert "Connection refused" in response.json()["detail"]


def test_inspect_wallet(client):
    wallet_class = ContractClass(kind="sierra", external_selectors=sorted(account_selectors()))
    app.state.node = MockNode(code=CodeInfo(class_hash=CLASS_HASH), contract_class=wallet_class)
    response = client.get(f"/address/{CANONICAL}/inspect")
    assert response.status_code == 200
    body = response.json()
    assert body["is_smart_wallet"] is True
    assert body["is_smart_contract"] is True
    assert body["is_valid_address"] is True


def test_inspect_invalid_address(client):
    app.state.node = MockNode()
    response = client.get("/address/0x/inspect")
    assert response.status_code == 200
    assert response.json()["is_valid_address"] is False
    assert response.json()["message"] == "Invalid address format"


def test_inspect_malformed_class_is_502(client):
    node = MockNode(code=CodeInfo(class_hash=CLASS_HASH))
    node.get_class = MagicMock(side_effect=NodeProtocolError("Malformed contract class in response"))
    app.state.node = node
    response = client.get(f"/address/{CANONICAL}/inspect")
    assert response.status_code == 502
    assert "Malformed contract class" in response.json()["detail"]
