"""OrderBodyParser — classify and decode a raw order submission.

Routing by declared ``order_type``:

- ``Relay``    → relay decoder only.
- ``Dutch_V2`` → cosigned V2 decoder only.
- ``Dutch``    → legacy decoder; must infer Dutch.
- ``Limit``    → legacy decoder; must infer Limit.
- unset        → legacy decoder, then the custom-reactor fallback.

Every failure is logged here, where it is produced, and raised unchanged.
"""

from __future__ import annotations

from typing import Any, Callable, Union

import structlog

from codec.dutch import parse_legacy_order
from codec.dutch_v2 import parse_cosigned_v2_dutch_order
from codec.relay import get_order_type, parse_relay_order
from config.settings import Settings
from core.errors import (
    FallbackReactorMismatchError,
    OrderDecodeError,
    OrderParseError,
    UnexpectedOrderTypeError,
)
from models.canonical import CanonicalOrder, DutchV1Order, DutchV2Order, LimitOrder, RelayOrder
from models.order import OrderType
from models.submission import RawOrderSubmission

from .allow_list import ReactorAllowList
from .fallback import CustomReactorFallback
from .result import DecodeResult, Failed, attempt

logger = structlog.get_logger("intake.parser")

LegacyOrder = Union[DutchV1Order, LimitOrder]


def _context(submission: RawOrderSubmission) -> dict[str, Any]:
    return {
        "signature": submission.signature,
        "chain_id": submission.chain_id,
        "quote_id": submission.quote_id,
        "request_id": submission.request_id,
    }


def _log_failure(
    event: str,
    submission: RawOrderSubmission,
    error: OrderParseError,
    level: str = "error",
    **extra: Any,
) -> None:
    getattr(logger, level)(
        event,
        error_kind=error.kind,
        error=str(error),
        encoded_order=submission.encoded_order,
        chain_id=submission.chain_id,
        signature=submission.signature,
        **extra,
    )


class OrderBodyParser:
    """Dispatch a :class:`RawOrderSubmission` to the right decoder(s).

    Parameters
    ----------
    allow_list:
        Reactor allow-list for the legacy fallback.  Injected once; its
        emptiness only matters if the fallback is reached.

    Usage::

        parser = OrderBodyParser.from_settings(settings)
        order = parser.parse(submission)  # CanonicalOrder or raises
    """

    def __init__(self, allow_list: ReactorAllowList) -> None:
        self._fallback = CustomReactorFallback(allow_list)
        self._routes: dict[OrderType, Callable[[RawOrderSubmission], DecodeResult[Any]]] = {
            OrderType.RELAY: self._decode_relay,
            OrderType.DUTCH_V2: self._decode_dutch_v2,
            OrderType.DUTCH: self._decode_dutch_v1,
            OrderType.LIMIT: self._decode_limit,
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> OrderBodyParser:
        return cls(ReactorAllowList.from_settings(settings))

    def parse(self, submission: RawOrderSubmission) -> CanonicalOrder:
        """Decode *submission* into its canonical order.

        Raises
        ------
        OrderParseError
            One of ``UnexpectedOrderTypeError``, ``OrderDecodeError``,
            ``FallbackConfigurationMissingError`` or
            ``FallbackReactorMismatchError``.
        """
        if submission.order_type is None:
            return self._decode_untyped(submission).unwrap()
        route = self._routes[submission.order_type]
        return route(submission).unwrap()

    # ── Declared types ──────────────────────────────────────────

    def _decode_relay(self, submission: RawOrderSubmission) -> DecodeResult[RelayOrder]:
        def run() -> RelayOrder:
            order = parse_relay_order(submission.encoded_order)
            order_type = get_order_type(order, submission.chain_id)
            if order_type is not OrderType.RELAY:
                raise UnexpectedOrderTypeError(order_type)
            return RelayOrder(order=order, **_context(submission))

        result = attempt(run)
        if not result.ok:
            _log_failure("order_parser.relay_decode_failed", submission, result.error)
        return result

    def _decode_dutch_v2(self, submission: RawOrderSubmission) -> DecodeResult[DutchV2Order]:
        result = attempt(
            lambda: DutchV2Order(
                order=parse_cosigned_v2_dutch_order(submission.encoded_order),
                **_context(submission),
            )
        )
        if not result.ok:
            _log_failure("order_parser.dutch_v2_decode_failed", submission, result.error)
        return result

    def _decode_dutch_v1(self, submission: RawOrderSubmission) -> DecodeResult[LegacyOrder]:
        return self._decode_expected(submission, OrderType.DUTCH, "order_parser.dutch_v1_decode_failed")

    def _decode_limit(self, submission: RawOrderSubmission) -> DecodeResult[LegacyOrder]:
        return self._decode_expected(submission, OrderType.LIMIT, "order_parser.limit_decode_failed")

    def _decode_expected(
        self,
        submission: RawOrderSubmission,
        expected: OrderType,
        event: str,
    ) -> DecodeResult[LegacyOrder]:
        result = self._decode_legacy(submission)
        if result.ok and result.value.order_type is not expected:
            result = Failed(UnexpectedOrderTypeError(result.value.order_type))
        if not result.ok:
            _log_failure(event, submission, result.error)
        return result

    # ── Untyped (legacy) submissions ────────────────────────────

    def _decode_untyped(self, submission: RawOrderSubmission) -> DecodeResult[LegacyOrder]:
        primary = self._decode_legacy(submission)
        if primary.ok:
            return primary

        _log_failure(
            "order_parser.legacy_decode_failed_trying_custom_reactor",
            submission,
            primary.error,
            level="warning",
        )
        fallback = self._fallback.decode(submission)
        if fallback.ok:
            return fallback

        # The fallback's re-decode failing means the payload is not a V1
        # order at all: report why the primary decode rejected it.
        if isinstance(fallback.error, OrderDecodeError):
            _log_failure(
                "order_parser.legacy_decode_failed",
                submission,
                primary.error,
                fallback_error=str(fallback.error),
            )
            return primary

        extra: dict[str, Any] = {}
        if isinstance(fallback.error, FallbackReactorMismatchError):
            extra = {
                "order_reactor": fallback.error.reactor,
                "allowed_reactors": fallback.error.allowed,
            }
        _log_failure("order_parser.custom_reactor_rejected", submission, fallback.error, **extra)
        return fallback

    def _decode_legacy(self, submission: RawOrderSubmission) -> DecodeResult[LegacyOrder]:
        def run() -> LegacyOrder:
            order, order_type = parse_legacy_order(submission.encoded_order, submission.chain_id)
            if order_type is OrderType.LIMIT:
                return LimitOrder(order=order, **_context(submission))
            return DutchV1Order(order=order, **_context(submission))

        return attempt(run)
