"""TradeIntent and ExecutionReceipt data models."""

from datetime import datetime
from typing import Literal
from pydantic import BaseModel, Field

Direction = Literal["buy", "sell"]


class TradeIntent(BaseModel):
    """A validated trade ready to hand to an executor."""

    coin_id: str = Field(..., min_length=1, description="Coin identifier")
    direction: Direction = Field(..., description="Trade direction")
    amount: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Requested amount"
    )
    fee: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Fee charged on the amount"
    )
    net: float = Field(
        ...,
        ge=0,
        allow_inf_nan=False,
        description="Amount paid (buy) or received (sell) after fee",
    )
    fee_rate: float = Field(..., ge=0, lt=1, description="Fee rate applied")

    model_config = {"frozen": True}


class ExecutionReceipt(BaseModel):
    """Represents the result of forwarding a trade intent to an executor."""

    order_id: str = Field(..., description="Unique order identifier")
    coin_id: str = Field(..., description="Coin identifier")
    direction: Direction = Field(..., description="Trade direction")
    amount: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Requested amount"
    )
    fee: float = Field(..., ge=0, allow_inf_nan=False, description="Fee charged")
    net: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Net amount paid or received"
    )
    status: str = Field(..., description="Execution status")
    message: str = Field(default="", description="Status message")
    timestamp: datetime = Field(..., description="Execution timestamp")

    model_config = {"frozen": True}
