"""Dutch V1 / Limit codec — the shared base schema for legacy orders."""

from __future__ import annotations

from eth_abi import encode
from web3 import Web3

from core.errors import UnexpectedOrderTypeError
from models.order import DutchInput, DutchOrder, DutchOutput, OrderType

from .abi import (
    DUTCH_OUTPUTS_ABI,
    ORDER_INFO_ABI,
    build_order_info,
    decode_payload,
    order_info_values,
    peek_reactor,
)
from .reactors import order_type_for_reactor

DUTCH_ORDER_ABI = (
    f"({ORDER_INFO_ABI},uint256,uint256,address,uint256,address,uint256,uint256,{DUTCH_OUTPUTS_ABI})"
)


def _build(raw: tuple) -> DutchOrder:
    (
        info,
        decay_start_time,
        decay_end_time,
        exclusive_filler,
        exclusivity_override_bps,
        input_token,
        input_start_amount,
        input_end_amount,
        outputs,
    ) = raw
    return DutchOrder(
        info=build_order_info(info),
        decay_start_time=decay_start_time,
        decay_end_time=decay_end_time,
        exclusive_filler=exclusive_filler,
        exclusivity_override_bps=exclusivity_override_bps,
        input=DutchInput(
            token=input_token,
            start_amount=input_start_amount,
            end_amount=input_end_amount,
        ),
        outputs=tuple(
            DutchOutput(
                token=token,
                start_amount=start_amount,
                end_amount=end_amount,
                recipient=recipient,
            )
            for token, start_amount, end_amount, recipient in outputs
        ),
    )


def parse_dutch_order(encoded: str) -> DutchOrder:
    """Decode against the base V1 schema without looking at the reactor."""
    return decode_payload(encoded, DUTCH_ORDER_ABI, OrderType.DUTCH, _build)


def infer_order_type(order: DutchOrder) -> OrderType:
    """Limit when the price never moves, Dutch otherwise."""
    return OrderType.DUTCH if order.has_price_decay() else OrderType.LIMIT


def parse_legacy_order(encoded: str, chain_id: int) -> tuple[DutchOrder, OrderType]:
    """Decode a Dutch V1 / Limit order settled by the chain's Dutch reactor.

    Returns the decoded order and its inferred type (``DUTCH`` or ``LIMIT``).

    Raises
    ------
    OrderDecodeError
        Malformed payload, unsupported chain or unregistered reactor.
    UnexpectedOrderTypeError
        The reactor settles another order family (Dutch V2, Relay).
    """
    reactor = peek_reactor(encoded, OrderType.DUTCH)
    family = order_type_for_reactor(chain_id, reactor, OrderType.DUTCH)
    if family is not OrderType.DUTCH:
        raise UnexpectedOrderTypeError(family)

    order = parse_dutch_order(encoded)
    return order, infer_order_type(order)


def encode_dutch_order(order: DutchOrder) -> str:
    """ABI-encode *order* into the hex payload ``parse_dutch_order`` reads."""
    values = (
        order_info_values(order.info),
        order.decay_start_time,
        order.decay_end_time,
        order.exclusive_filler,
        order.exclusivity_override_bps,
        order.input.token,
        order.input.start_amount,
        order.input.end_amount,
        [
            (o.token, o.start_amount, o.end_amount, o.recipient)
            for o in order.outputs
        ],
    )
    return Web3.to_hex(encode([DUTCH_ORDER_ABI], [values]))
