import logging

from fastapi import APIRouter, HTTPException, Request

from starknet_checker.api.models import ErrorResponse, ValidateResponse
from starknet_checker.core.address import is_valid_address
from starknet_checker.core.models import AddressInspection, ContractQueryResult
from starknet_checker.core.node import StarknetNodeError
from starknet_checker.core.probe import check_address, inspect_address

logger = logging.getLogger("starknet_checker.api")

router = APIRouter(prefix="/address", tags=["Address"])

_NODE_ERRORS = {502: {"model": ErrorResponse}}


def get_node(request: Request):
    """Dependency to retrieve the initialized StarknetNode from app state."""
    node = getattr(request.app.state, "node", None)
    if not node:
        raise HTTPException(status_code=500, detail="starknet node not initialized")
    return node


@router.get("/{address}/validate", response_model=ValidateResponse)
def validate(address: str):
    """
    Validate and normalize an address. Always 200; check `is_valid`.
    """
    valid, normalized = is_valid_address(address)
    return ValidateResponse(is_valid=valid, address=normalized)


@router.get(
    "/{address}/contract",
    response_model=ContractQueryResult,
    responses={400: {"model": ErrorResponse}, **_NODE_ERRORS},
)
def contract(request: Request, address: str):
    """
    Report whether a smart contract is deployed at the address.
    The address is normalized first; invalid input is rejected with 400.
    """
    valid, normalized = is_valid_address(address)
    if not valid:
        raise HTTPException(status_code=400, detail=f"Invalid Starknet address: {address}")

    node = get_node(request)
    try:
        return check_address(normalized, provider=node)
    except StarknetNodeError as e:
        logger.warning(f"Contract check failed for {normalized}: {e}")
        raise HTTPException(status_code=502, detail=str(e)) from e


@router.get("/{address}/inspect", response_model=AddressInspection, responses=_NODE_ERRORS)
def inspect(request: Request, address: str):
    """
    Classify the address as smart wallet, smart contract, or neither.
    """
    node = get_node(request)
    try:
        return inspect_address(address, provider=node)
    except StarknetNodeError as e:
        logger.warning(f"Inspection failed for {address}: {e}")
        raise HTTPException(status_code=502, detail=str(e)) from e
