"""RawOrderSubmission — a signed order as received from a client."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .order import OrderType


class RawOrderSubmission(BaseModel):
    """Immutable submission body.

    Accepts the camelCase wire names (``encodedOrder``, ``chainId``, ...)
    as well as the snake_case field names.  ``order_type`` left unset marks
    a legacy submission, which may only resolve to a Dutch V1 or Limit order.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    encoded_order: str = Field(..., alias="encodedOrder", min_length=2)
    signature: str = Field(..., min_length=2)
    chain_id: int = Field(..., alias="chainId", gt=0)
    order_type: Optional[OrderType] = Field(default=None, alias="orderType")
    quote_id: Optional[str] = Field(default=None, alias="quoteId")
    request_id: Optional[str] = Field(default=None, alias="requestId")
