"""Relay codec — orders settled through the relay reactor.

The relay info tuple is static (no validation fields), so unlike the
Dutch schemas the reactor sits inline at the head of the order tuple.
"""

from __future__ import annotations

from eth_abi import encode
from web3 import Web3

from models.order import (
    OrderType,
    RelayFee,
    RelayInput,
    RelayOrderData,
    RelayOrderInfo,
)

from .abi import decode_payload
from .reactors import order_type_for_reactor

RELAY_ORDER_ABI = (
    "((address,address,uint256,uint256),"
    "(address,uint256,address),"
    "(address,uint256,uint256,uint256,uint256,address),"
    "bytes)"
)


def _build(raw: tuple) -> RelayOrderData:
    (reactor, swapper, nonce, deadline), (token, amount, recipient), fee, calldata = raw
    fee_token, fee_start, fee_end, fee_start_time, fee_end_time, fee_recipient = fee
    return RelayOrderData(
        info=RelayOrderInfo(
            reactor=reactor,
            swapper=swapper,
            nonce=nonce,
            deadline=deadline,
        ),
        input=RelayInput(token=token, amount=amount, recipient=recipient),
        fee=RelayFee(
            token=fee_token,
            start_amount=fee_start,
            end_amount=fee_end,
            start_time=fee_start_time,
            end_time=fee_end_time,
            recipient=fee_recipient,
        ),
        universal_router_calldata=Web3.to_hex(calldata),
    )


def parse_relay_order(encoded: str) -> RelayOrderData:
    return decode_payload(encoded, RELAY_ORDER_ABI, OrderType.RELAY, _build)


def get_order_type(order: RelayOrderData, chain_id: int) -> OrderType:
    """Order family of the reactor the decoded order names."""
    return order_type_for_reactor(chain_id, order.info.reactor, OrderType.RELAY)


def encode_relay_order(order: RelayOrderData) -> str:
    info, fee = order.info, order.fee
    values = (
        (info.reactor, info.swapper, info.nonce, info.deadline),
        (order.input.token, order.input.amount, order.input.recipient),
        (
            fee.token,
            fee.start_amount,
            fee.end_amount,
            fee.start_time,
            fee.end_time,
            fee.recipient,
        ),
        Web3.to_bytes(hexstr=order.universal_router_calldata),
    )
    return Web3.to_hex(encode([RELAY_ORDER_ABI], [values]))
