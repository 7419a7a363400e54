"""
Options-related models: contracts, chains and snapshots.
"""

from enum import Enum
from typing import List, Optional

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from .base import SchemaModel


class OptionType(str, Enum):
    """Option type enumeration."""
    CALL = "call"
    PUT = "put"


class OptionGreeks(SchemaModel):
    """Option sensitivities as reported by the pricing source."""
    delta: StrictFloat = Field(..., description="Price sensitivity to underlying price")
    gamma: StrictFloat = Field(..., description="Rate of change of delta")
    theta: StrictFloat = Field(..., description="Time decay per day")
    vega: StrictFloat = Field(..., description="Sensitivity to implied volatility")
    rho: StrictFloat = Field(..., description="Sensitivity to interest rates")


class OptionContract(SchemaModel):
    """Single listed option contract with its quote."""
    contract_id: str = Field(..., description="Unique contract identifier (OCC format)")
    symbol: str = Field(..., description="Underlying ticker symbol")
    option_type: OptionType = Field(..., alias="type", description="Call or put")
    strike: StrictFloat = Field(..., description="Strike price")
    expiration: str = Field(..., description="Expiration date (ISO format)")

    # Quote
    bid: StrictFloat = Field(..., description="Bid price")
    ask: StrictFloat = Field(..., description="Ask price")
    last: StrictFloat = Field(..., description="Last traded price")
    volume: StrictInt = Field(..., description="Trading volume")
    open_interest: StrictInt = Field(..., description="Open interest")

    implied_volatility: StrictFloat = Field(..., description="Implied volatility (decimal)")
    greeks: Optional[OptionGreeks] = Field(None, description="Option Greeks")
    in_the_money: Optional[StrictBool] = Field(None, description="In the money flag")


class ExpirationChain(SchemaModel):
    """Calls and puts sharing one expiration date."""
    expiration: str = Field(..., description="Expiration date")
    days_to_expiration: StrictInt = Field(..., description="Days to expiration")
    calls: List[OptionContract] = Field(..., description="Call options")
    puts: List[OptionContract] = Field(..., description="Put options")


class OptionsChain(SchemaModel):
    """Full option surface of an underlying, grouped by expiration."""
    symbol: str = Field(..., description="Underlying ticker symbol")
    underlying_price: StrictFloat = Field(..., description="Current underlying price")
    expirations: List[str] = Field(..., description="Available expiration dates")
    chains: List[ExpirationChain] = Field(..., description="Options chains by expiration")


class OptionsSnapshot(SchemaModel):
    """Point-in-time capture of a symbol's option set."""
    id: str = Field(..., description="Unique snapshot ID")
    symbol: str = Field(..., description="Underlying ticker symbol")
    timestamp: str = Field(..., description="Snapshot timestamp")
    underlying_price: StrictFloat = Field(..., description="Underlying price at snapshot time")
    implied_volatility: StrictFloat = Field(..., description="Average implied volatility")
    options: List[OptionContract] = Field(..., description="All option contracts in snapshot")
