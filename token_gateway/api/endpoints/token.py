"""
Token endpoints - read-only views of the ERC-20 contract.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ...core.errors import GatewayError, ValidationError
from ...schemas.token import (
    BalanceResponse,
    DecimalsResponse,
    TokenDetailsResponse,
    TotalSupplyResponse,
)
from ...services.gateway import TokenGateway
from ..deps import get_gateway

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(what: str, e: GatewayError) -> HTTPException:
    logger.error(f"Error fetching {what}: {e}")
    return HTTPException(status_code=e.status_code, detail=f"Error fetching {what}: {e}")


@router.get("/details", response_model=TokenDetailsResponse)
def get_token_details(gateway: TokenGateway = Depends(get_gateway)):
    """
    Get the token name and symbol.
    Both are fetched; if either call fails no partial result is returned.
    """
    try:
        details = gateway.get_token_details()
    except GatewayError as e:
        raise _server_error(f"token {e.function or 'details'}", e)

    return TokenDetailsResponse(name=details.name, symbol=details.symbol)


@router.get("/totalSupply", response_model=TotalSupplyResponse)
def get_total_supply(gateway: TokenGateway = Depends(get_gateway)):
    """Get the total token supply as a decimal string."""
    try:
        total_supply = gateway.get_total_supply()
    except GatewayError as e:
        raise _server_error("total supply", e)

    return TotalSupplyResponse(total_supply=str(total_supply))


@router.get("/balance", response_model=BalanceResponse)
def get_token_balance(
    address: Optional[str] = Query(None, description="Account address to look up"),
    gateway: TokenGateway = Depends(get_gateway),
):
    """Get the token balance of an address as a decimal string."""
    try:
        balance = gateway.get_balance(address)
    except ValidationError as e:
        raise HTTPException(status_code=e.status_code, detail=str(e))
    except GatewayError as e:
        raise _server_error("token balance", e)

    return BalanceResponse(balance=str(balance))


@router.get("/decimals", response_model=DecimalsResponse)
def get_decimals(gateway: TokenGateway = Depends(get_gateway)):
    """Get the number of decimals the token uses."""
    try:
        decimals = gateway.get_decimals()
    except GatewayError as e:
        raise _server_error("token decimals", e)

    return DecimalsResponse(decimals=decimals)
