"""CanonicalOrder — tagged union of the four decoded order variants.

The ``order_type`` literal is the discriminator and each variant pins the
type of its ``order`` payload, so a value can never carry one variant's
tag with another variant's structure.
"""

from __future__ import annotations

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from .order import CosignedV2DutchOrder, DutchOrder, OrderType, RelayOrderData


class _CanonicalBase(BaseModel):
    model_config = ConfigDict(frozen=True)

    signature: str
    chain_id: int
    quote_id: Optional[str] = None
    request_id: Optional[str] = None

    @property
    def reactor(self) -> str:
        return self.order.info.reactor  # type: ignore[attr-defined]

    @property
    def swapper(self) -> str:
        return self.order.info.swapper  # type: ignore[attr-defined]

    @property
    def nonce(self) -> int:
        return self.order.info.nonce  # type: ignore[attr-defined]

    @property
    def deadline(self) -> int:
        return self.order.info.deadline  # type: ignore[attr-defined]


class DutchV1Order(_CanonicalBase):
    order_type: Literal[OrderType.DUTCH] = OrderType.DUTCH
    order: DutchOrder


class LimitOrder(_CanonicalBase):
    order_type: Literal[OrderType.LIMIT] = OrderType.LIMIT
    order: DutchOrder

    @model_validator(mode="after")
    def fixed_price(self) -> LimitOrder:
        if self.order.has_price_decay():
            raise ValueError("limit order must not decay in price")
        return self


class DutchV2Order(_CanonicalBase):
    order_type: Literal[OrderType.DUTCH_V2] = OrderType.DUTCH_V2
    order: CosignedV2DutchOrder

    @property
    def cosigner(self) -> str:
        return self.order.cosigner


class RelayOrder(_CanonicalBase):
    order_type: Literal[OrderType.RELAY] = OrderType.RELAY
    order: RelayOrderData


CanonicalOrder = Annotated[
    Union[DutchV1Order, LimitOrder, DutchV2Order, RelayOrder],
    Field(discriminator="order_type"),
]

canonical_order_adapter: TypeAdapter[CanonicalOrder] = TypeAdapter(CanonicalOrder)
