"""OrderIntake — parse a submission body and hand the order to persistence.

The caller gets back a :class:`SubmissionResult`: the accepted canonical
order, or an :class:`ErrorPayload` safe to return to an untrusted client
(kind, message, chain id, declared type; never the payload or signature).
"""

from __future__ import annotations

from typing import Any, Optional, Protocol

import structlog
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from config.settings import Settings, settings as default_settings
from core.errors import OrderParseError
from core.logger import setup_logging
from models.canonical import CanonicalOrder
from models.order import OrderType
from models.submission import RawOrderSubmission

from .parser import OrderBodyParser

logger = structlog.get_logger("intake.service")


class OrderRepository(Protocol):
    """Persistence port for decoded orders."""

    async def put_order(self, order: CanonicalOrder) -> bool:
        """Store *order*; return False if it was not persisted."""
        ...


class ErrorPayload(BaseModel):
    """Structured failure returned to the submitting client."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    kind: str
    message: str
    chain_id: Optional[int] = Field(default=None, alias="chainId")
    order_type: Optional[OrderType] = Field(default=None, alias="orderType")


class SubmissionResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    order: Optional[CanonicalOrder] = None
    error: Optional[ErrorPayload] = None

    @property
    def accepted(self) -> bool:
        return self.error is None


class OrderIntake:
    """Validate, decode and persist order submissions.

    Parameters
    ----------
    parser:
        Dispatcher that turns a submission into a canonical order.
    repository:
        Where accepted orders go.
    """

    def __init__(self, parser: OrderBodyParser, repository: OrderRepository) -> None:
        self._parser = parser
        self._repository = repository

    async def submit(self, body: RawOrderSubmission | dict[str, Any]) -> SubmissionResult:
        if isinstance(body, RawOrderSubmission):
            submission = body
        else:
            try:
                submission = RawOrderSubmission.model_validate(body)
            except ValidationError as exc:
                logger.info("order_intake.invalid_submission", errors=exc.error_count())
                chain_id = body.get("chainId") if isinstance(body, dict) else None
                return SubmissionResult(
                    error=ErrorPayload(
                        kind="InvalidSubmission",
                        message=f"submission failed validation ({exc.error_count()} errors)",
                        chain_id=chain_id if isinstance(chain_id, int) else None,
                    )
                )

        try:
            order = self._parser.parse(submission)
        except OrderParseError as exc:
            return SubmissionResult(
                error=ErrorPayload.model_validate(
                    exc.to_payload(submission.chain_id, submission.order_type)
                )
            )

        if not await self._repository.put_order(order):
            logger.error(
                "order_intake.persist_failed",
                order_type=order.order_type.value,
                chain_id=order.chain_id,
                swapper=order.swapper,
                nonce=order.nonce,
            )
            return SubmissionResult(
                error=ErrorPayload(
                    kind="OrderNotPersisted",
                    message="order could not be stored",
                    chain_id=submission.chain_id,
                    order_type=submission.order_type,
                )
            )

        logger.info(
            "order_intake.accepted",
            order_type=order.order_type.value,
            chain_id=order.chain_id,
            swapper=order.swapper,
            nonce=order.nonce,
            quote_id=order.quote_id,
            request_id=order.request_id,
        )
        return SubmissionResult(order=order)


def build_intake(
    repository: OrderRepository,
    settings: Settings | None = None,
) -> OrderIntake:
    """Wire logging and an :class:`OrderIntake` from settings at process start."""
    settings = settings or default_settings
    setup_logging(settings)
    return OrderIntake(OrderBodyParser.from_settings(settings), repository)
