"""CustomReactorFallback — second chance for legacy orders on custom reactors.

Some historical clients sign Dutch V1 orders against a reactor that is
not in the protocol's reactor registry, so the primary legacy decode
rejects them.  Such orders are accepted only when their reactor is on the
configured allow-list.
"""

from __future__ import annotations

import structlog

from codec.dutch import parse_dutch_order
from core.errors import FallbackConfigurationMissingError, FallbackReactorMismatchError
from models.canonical import DutchV1Order
from models.submission import RawOrderSubmission

from .allow_list import ReactorAllowList
from .result import DecodeResult, attempt

logger = structlog.get_logger("intake.fallback")


class CustomReactorFallback:
    """Decode a legacy order with the reactor-agnostic Dutch V1 schema.

    Parameters
    ----------
    allow_list:
        Reactors accepted by the fallback.  Checked only when the fallback
        actually runs, so an empty list is harmless until then.
    """

    def __init__(self, allow_list: ReactorAllowList) -> None:
        self._allow_list = allow_list

    def decode(self, submission: RawOrderSubmission) -> DecodeResult[DutchV1Order]:
        return attempt(lambda: self._decode(submission))

    def _decode(self, submission: RawOrderSubmission) -> DutchV1Order:
        order = parse_dutch_order(submission.encoded_order)

        if self._allow_list.is_empty:
            raise FallbackConfigurationMissingError()

        if not self._allow_list.allows(order.info.reactor):
            raise FallbackReactorMismatchError(order.info.reactor, self._allow_list.as_tuple())

        logger.info(
            "fallback.custom_reactor_accepted",
            order_reactor=order.info.reactor,
            chain_id=submission.chain_id,
        )
        return DutchV1Order(
            order=order,
            signature=submission.signature,
            chain_id=submission.chain_id,
            quote_id=submission.quote_id,
            request_id=submission.request_id,
        )
