"""UniswapX order intake — models package."""

from .canonical import (
    CanonicalOrder,
    DutchV1Order,
    DutchV2Order,
    LimitOrder,
    RelayOrder,
    canonical_order_adapter,
)
from .order import (
    CosignedV2DutchOrder,
    CosignerData,
    DutchInput,
    DutchOrder,
    DutchOutput,
    OrderInfo,
    OrderType,
    RelayFee,
    RelayInput,
    RelayOrderData,
    RelayOrderInfo,
)
from .submission import RawOrderSubmission

__all__ = [
    "CanonicalOrder",
    "CosignedV2DutchOrder",
    "CosignerData",
    "DutchInput",
    "DutchOrder",
    "DutchOutput",
    "DutchV1Order",
    "DutchV2Order",
    "LimitOrder",
    "OrderInfo",
    "OrderType",
    "RawOrderSubmission",
    "RelayFee",
    "RelayInput",
    "RelayOrder",
    "RelayOrderData",
    "RelayOrderInfo",
    "canonical_order_adapter",
]
