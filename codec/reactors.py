"""Reactor registry — which reactor contract settles which order type, per chain.

Addresses are stored lower-cased; every lookup is case-insensitive.
Limit orders settle through the Dutch reactor, so the registry only
distinguishes order *families*.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Mapping

from core.errors import OrderDecodeError
from models.order import OrderType


class ChainId(IntEnum):
    MAINNET = 1
    POLYGON = 137
    ARBITRUM_ONE = 42161


REACTOR_ADDRESS_MAPPING: Mapping[int, Mapping[OrderType, str]] = MappingProxyType(
    {
        ChainId.MAINNET: MappingProxyType(
            {
                OrderType.DUTCH: "0x6000da47483062a0d734ba3dc7576ce6a0b645c4",
                OrderType.DUTCH_V2: "0x00000011f84b9aa48e5f8aa8b9897600006289be",
                OrderType.RELAY: "0x0000000000a4e21e2597dcac987455c48b12edbf",
            }
        ),
        ChainId.POLYGON: MappingProxyType(
            {
                OrderType.DUTCH: "0x6000da47483062a0d734ba3dc7576ce6a0b645c4",
                OrderType.RELAY: "0x0000000000a4e21e2597dcac987455c48b12edbf",
            }
        ),
        ChainId.ARBITRUM_ONE: MappingProxyType(
            {
                OrderType.DUTCH_V2: "0x1bd1aadc9e230626c44a139d7e70d842749351eb",
                OrderType.RELAY: "0x0000000000a4e21e2597dcac987455c48b12edbf",
            }
        ),
    }
)


def _chain_reactors(chain_id: int, variant: OrderType) -> Mapping[OrderType, str]:
    reactors = REACTOR_ADDRESS_MAPPING.get(chain_id)
    if reactors is None:
        raise OrderDecodeError(variant, f"unsupported chain {chain_id}")
    return reactors


def reactor_for(chain_id: int, order_type: OrderType) -> str:
    """Reactor address that settles *order_type* on *chain_id*.

    Raises
    ------
    OrderDecodeError
        If the chain is unsupported or has no reactor for the order type.
    """
    family = OrderType.DUTCH if order_type is OrderType.LIMIT else order_type
    reactor = _chain_reactors(chain_id, order_type).get(family)
    if reactor is None:
        raise OrderDecodeError(
            order_type, f"no {order_type.value} reactor on chain {chain_id}"
        )
    return reactor


def order_type_for_reactor(chain_id: int, reactor: str, variant: OrderType) -> OrderType:
    """Order family settled by *reactor* on *chain_id*.

    *variant* is the decoder asking, used to label the failure when the
    reactor or the chain is not registered.
    """
    wanted = reactor.lower()
    for order_type, address in _chain_reactors(chain_id, variant).items():
        if address == wanted:
            return order_type
    raise OrderDecodeError(
        variant, f"unknown reactor {reactor} on chain {chain_id}"
    )
