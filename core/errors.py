"""Order parse errors — the failure kinds surfaced to callers.

Each error exposes a stable ``kind`` string.  Callers map it into a
response with :meth:`OrderParseError.to_payload`; the encoded order and
signature never leave the process through these errors, only through
diagnostic logs.
"""

from __future__ import annotations

from typing import Any, ClassVar

from models.order import OrderType


class OrderParseError(Exception):
    """Base class for every failure raised while decoding a submission."""

    kind: ClassVar[str] = "OrderParseError"

    def to_payload(
        self,
        chain_id: int | None = None,
        order_type: OrderType | None = None,
    ) -> dict[str, Any]:
        """Caller-safe representation: kind, message, chain and declared type."""
        payload: dict[str, Any] = {
            "kind": self.kind,
            "message": str(self),
            "chainId": chain_id,
        }
        if order_type is not None:
            payload["orderType"] = order_type.value
        return payload


class UnexpectedOrderTypeError(OrderParseError):
    """Decoded structurally, but the inferred variant is not the expected one."""

    kind = "UnexpectedOrderType"

    def __init__(self, actual: OrderType | None) -> None:
        label = actual.value if actual is not None else "unknown"
        super().__init__(f"Unexpected order type: {label}")
        self.actual = actual


class OrderDecodeError(OrderParseError):
    """Byte-level decode failed: bad hex, bad ABI layout or malformed shape."""

    kind = "DecodeFailure"

    def __init__(
        self,
        variant: OrderType,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(f"Unable to decode {variant.value} order: {message}")
        self.variant = variant
        self.cause = cause


class FallbackConfigurationMissingError(OrderParseError):
    """Legacy fallback reached without a configured reactor allow-list."""

    kind = "FallbackConfigurationMissing"

    def __init__(self) -> None:
        super().__init__("CUSTOM_REACTOR_ADDRESS is not set")


class FallbackReactorMismatchError(OrderParseError):
    """Decoded reactor is not on the legacy reactor allow-list."""

    kind = "FallbackReactorMismatch"

    def __init__(self, reactor: str, allowed: tuple[str, ...]) -> None:
        super().__init__(f"Invalid reactor address: {reactor}")
        self.reactor = reactor
        self.allowed = allowed
