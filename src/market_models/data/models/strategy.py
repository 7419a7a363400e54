"""
Strategy models: user-owned multi-leg positions, their analysis projection
and the request shapes used to create and update them.
"""

import math
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import Field, GetCoreSchemaHandler, GetJsonSchemaHandler, StrictFloat, field_validator
from pydantic_core import core_schema

from .base import SchemaModel, PartialUpdateModel

UNLIMITED = "unlimited"


class StrategyType(str, Enum):
    """Strategy classification."""
    SINGLE = "single"
    SPREAD = "spread"
    STRADDLE = "straddle"
    STRANGLE = "strangle"
    IRON_CONDOR = "iron_condor"
    BUTTERFLY = "butterfly"
    COVERED_CALL = "covered_call"
    PROTECTIVE_PUT = "protective_put"
    CUSTOM = "custom"


class LegType(str, Enum):
    """Instrument traded by a leg."""
    CALL = "call"
    PUT = "put"
    STOCK = "stock"


class LegAction(str, Enum):
    """Leg direction."""
    BUY = "buy"
    SELL = "sell"


class RiskLimit:
    """
    Maximum profit or loss of a strategy: either a bounded amount or unbounded.

    On the wire a bounded limit is a plain finite number and an unbounded one
    is the string ``"unlimited"``. Infinity is rejected so that no number ever
    stands in for the unbounded case.
    """

    __slots__ = ("_value",)

    def __init__(self, value: Optional[Union[int, float]] = None):
        self._value = None if value is None else self._check_number(value)

    @classmethod
    def bounded(cls, value: Union[int, float]) -> "RiskLimit":
        return cls(cls._check_number(value))

    @classmethod
    def unbounded(cls) -> "RiskLimit":
        return cls(None)

    @staticmethod
    def _check_number(value: Any) -> Union[int, float]:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError(f"expected a number or '{UNLIMITED}', got {value!r}")
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"non-finite amount {value!r}; use '{UNLIMITED}' for an unbounded limit")
        return value

    @classmethod
    def parse(cls, raw: Any) -> "RiskLimit":
        """Build a limit from its wire form."""
        if isinstance(raw, RiskLimit):
            return raw
        if isinstance(raw, str):
            if raw == UNLIMITED:
                return cls.unbounded()
            raise ValueError(f"expected a number or '{UNLIMITED}', got {raw!r}")
        return cls.bounded(raw)

    @property
    def is_unbounded(self) -> bool:
        return self._value is None

    @property
    def kind(self) -> str:
        return "unbounded" if self._value is None else "bounded"

    @property
    def value(self) -> Optional[Union[int, float]]:
        """Bounded amount, or None when unbounded."""
        return self._value

    def to_wire(self) -> Union[int, float, str]:
        return UNLIMITED if self._value is None else self._value

    def __eq__(self, other):
        if not isinstance(other, RiskLimit):
            return NotImplemented
        return self._value == other._value

    def __hash__(self):
        return hash((RiskLimit, self._value))

    def __repr__(self):
        if self._value is None:
            return "RiskLimit.unbounded()"
        return f"RiskLimit.bounded({self._value!r})"

    @classmethod
    def __get_pydantic_core_schema__(cls, source: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls.parse,
            serialization=core_schema.plain_serializer_function_ser_schema(lambda v: v.to_wire()),
        )

    @classmethod
    def __get_pydantic_json_schema__(cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler) -> Dict[str, Any]:
        return {
            "anyOf": [
                {"type": "number"},
                {"type": "string", "const": UNLIMITED},
            ]
        }


class StrategyLegInput(SchemaModel):
    """Leg as submitted by a client; the contract link is assigned later."""
    leg_type: LegType = Field(..., alias="type", description="Type of instrument")
    action: LegAction = Field(..., description="Buy or sell")
    strike: Optional[StrictFloat] = Field(None, description="Strike price (options only)")
    expiration: Optional[str] = Field(None, description="Expiration date (options only)")
    quantity: StrictFloat = Field(..., description="Number of contracts or shares")
    price: Optional[StrictFloat] = Field(None, description="Entry price")


class StrategyLeg(StrategyLegInput):
    """One component position of a strategy."""
    contract_id: Optional[str] = Field(None, description="Contract ID for tracking")


class Strategy(SchemaModel):
    """User-owned composite position made of ordered legs."""
    id: str = Field(..., description="Unique identifier")
    user_id: str = Field(..., description="Owner user ID")
    name: str = Field(..., description="User-defined name")
    symbol: str = Field(..., description="Underlying ticker symbol")
    strategy_type: StrategyType = Field(..., alias="type", description="Strategy type classification")
    legs: List[StrategyLeg] = Field(..., description="Individual legs of the strategy")
    notes: Optional[str] = Field(None, description="User notes")
    created_at: str = Field(..., description="Creation timestamp")
    updated_at: str = Field(..., description="Last update timestamp")


class StrategyAnalysis(SchemaModel):
    """Risk metrics derived for a strategy by an external analysis engine."""
    max_profit: RiskLimit = Field(..., description="Maximum possible profit")
    max_loss: RiskLimit = Field(..., description="Maximum possible loss")
    breakeven: List[StrictFloat] = Field(..., description="Break-even price(s)")
    net_premium: StrictFloat = Field(..., description="Net debit or credit")
    probability_of_profit: Optional[StrictFloat] = Field(None, description="Probability of profit (if calculable)")


class CreateStrategyRequest(SchemaModel):
    """Payload for creating a strategy."""
    name: str
    symbol: str
    strategy_type: StrategyType = Field(..., alias="type")
    legs: List[StrategyLegInput]
    notes: Optional[str] = None


class UpdateStrategyRequest(PartialUpdateModel):
    """Partial update of a strategy. An explicit null ``notes`` clears the note."""
    name: Optional[str] = None
    legs: Optional[List[StrategyLegInput]] = None
    notes: Optional[str] = None

    @field_validator("name", "legs")
    @classmethod
    def reject_null(cls, v, info):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null; omit it to leave it unchanged")
        return v
