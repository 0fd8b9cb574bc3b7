"""
Token-related Pydantic schemas.
"""
from pydantic import BaseModel


class TokenDetailsResponse(BaseModel):
    name: str
    symbol: str


class TotalSupplyResponse(BaseModel):
    # Decimal string, uint256 values overflow JSON numbers
    total_supply: str


class BalanceResponse(BaseModel):
    balance: str


class DecimalsResponse(BaseModel):
    decimals: int
