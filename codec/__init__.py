"""UniswapX order intake — codec package.

Pure ABI decoders (and their encoders) for each order schema, plus the
per-chain reactor registry used to classify payloads.
"""

from .dutch import encode_dutch_order, infer_order_type, parse_dutch_order, parse_legacy_order
from .dutch_v2 import encode_cosigned_v2_dutch_order, parse_cosigned_v2_dutch_order
from .reactors import REACTOR_ADDRESS_MAPPING, ChainId, order_type_for_reactor, reactor_for
from .relay import encode_relay_order, get_order_type, parse_relay_order

__all__ = [
    "REACTOR_ADDRESS_MAPPING",
    "ChainId",
    "encode_cosigned_v2_dutch_order",
    "encode_dutch_order",
    "encode_relay_order",
    "get_order_type",
    "infer_order_type",
    "order_type_for_reactor",
    "parse_cosigned_v2_dutch_order",
    "parse_dutch_order",
    "parse_legacy_order",
    "parse_relay_order",
    "reactor_for",
]
