"""ABI helpers shared by the per-variant codecs."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

from eth_abi import decode
from eth_abi.exceptions import DecodingError
from pydantic import ValidationError
from web3 import Web3

from core.errors import OrderDecodeError
from models.order import OrderInfo, OrderType

T = TypeVar("T")

WORD = 32

ORDER_INFO_ABI = "(address,address,uint256,uint256,address,bytes)"
DUTCH_INPUT_ABI = "(address,uint256,uint256)"
DUTCH_OUTPUTS_ABI = "(address,uint256,uint256,address)[]"


def hex_to_bytes(value: str, variant: OrderType) -> bytes:
    """Decode a ``0x``-prefixed hex string."""
    if not isinstance(value, str) or not value.startswith(("0x", "0X")):
        raise OrderDecodeError(variant, "payload must be a 0x-prefixed hex string")
    try:
        return bytes.fromhex(value[2:])
    except ValueError as exc:
        raise OrderDecodeError(variant, "payload is not valid hex", exc) from exc


def decode_payload(
    encoded: str,
    abi_type: str,
    variant: OrderType,
    build: Callable[[Any], T],
) -> T:
    """Decode *encoded* as a single ABI tuple and build a model from it.

    Any ABI or model validation error is re-raised as
    :class:`OrderDecodeError` for *variant*, with the original as cause.
    """
    data = hex_to_bytes(encoded, variant)
    try:
        (decoded,) = decode([abi_type], data)
    except (DecodingError, ValueError, OverflowError) as exc:
        raise OrderDecodeError(variant, "malformed encoding", exc) from exc
    try:
        return build(decoded)
    except ValidationError as exc:
        raise OrderDecodeError(
            variant, f"malformed order shape ({exc.error_count()} errors)", exc
        ) from exc


def peek_reactor(encoded: str, variant: OrderType) -> str:
    """Read the reactor address from an order whose info tuple is dynamic.

    Layout: word 0 points at the order tuple, whose first head word points
    at the info tuple, whose first word is the reactor.
    """
    data = hex_to_bytes(encoded, variant)
    order_offset = int.from_bytes(data[0:WORD], "big")
    info_offset = order_offset + int.from_bytes(data[order_offset:order_offset + WORD], "big")
    word = data[info_offset:info_offset + WORD]
    if len(word) != WORD or any(word[:12]):
        raise OrderDecodeError(variant, "unable to locate reactor address")
    return Web3.to_checksum_address("0x" + word[12:].hex())


def build_order_info(raw: tuple) -> OrderInfo:
    reactor, swapper, nonce, deadline, validation_contract, validation_data = raw
    return OrderInfo(
        reactor=reactor,
        swapper=swapper,
        nonce=nonce,
        deadline=deadline,
        additional_validation_contract=validation_contract,
        additional_validation_data=Web3.to_hex(validation_data),
    )


def order_info_values(info: OrderInfo) -> tuple:
    return (
        info.reactor,
        info.swapper,
        info.nonce,
        info.deadline,
        info.additional_validation_contract,
        Web3.to_bytes(hexstr=info.additional_validation_data),
    )
