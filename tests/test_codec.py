"""Tests for the codec package — includes property-based tests via hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from codec import (
    ChainId,
    encode_dutch_order,
    get_order_type,
    infer_order_type,
    order_type_for_reactor,
    parse_cosigned_v2_dutch_order,
    parse_dutch_order,
    parse_legacy_order,
    parse_relay_order,
    reactor_for,
)
from codec.abi import hex_to_bytes, peek_reactor
from core.errors import OrderDecodeError, UnexpectedOrderTypeError
from models import OrderType
from tests.factories import (
    CUSTOM_REACTOR,
    DECAY_START,
    dutch_order,
    dutch_v2_order,
    encoded_custom_reactor_dutch,
    encoded_dutch,
    encoded_dutch_v2,
    encoded_limit,
    encoded_relay,
    limit_order,
    order_info,
    relay_order,
)

# ── Strategy helpers ─────────────────────────────────────────────────

uint256 = st.integers(min_value=0, max_value=2**256 - 1)
timestamps = st.integers(min_value=0, max_value=2**40)


# ── Reactor registry ─────────────────────────────────────────────────


class TestReactorRegistry:

    def test_limit_settles_through_dutch_reactor(self):
        assert reactor_for(ChainId.MAINNET, OrderType.LIMIT) == reactor_for(ChainId.MAINNET, OrderType.DUTCH)

    def test_lookup_is_case_insensitive(self):
        reactor = reactor_for(ChainId.MAINNET, OrderType.DUTCH_V2).upper().replace("0X", "0x")
        assert order_type_for_reactor(ChainId.MAINNET, reactor, OrderType.DUTCH) is OrderType.DUTCH_V2

    def test_unknown_reactor(self):
        with pytest.raises(OrderDecodeError, match="unknown reactor"):
            order_type_for_reactor(ChainId.MAINNET, CUSTOM_REACTOR, OrderType.DUTCH)

    def test_unsupported_chain(self):
        with pytest.raises(OrderDecodeError, match="unsupported chain 5"):
            reactor_for(5, OrderType.DUTCH)

    def test_missing_reactor_on_chain(self):
        with pytest.raises(OrderDecodeError, match="no Dutch reactor"):
            reactor_for(ChainId.ARBITRUM_ONE, OrderType.DUTCH)


# ── ABI helpers ──────────────────────────────────────────────────────


class TestAbiHelpers:

    def test_hex_requires_prefix(self):
        with pytest.raises(OrderDecodeError, match="0x-prefixed"):
            hex_to_bytes("abcd", OrderType.DUTCH)

    def test_invalid_hex(self):
        with pytest.raises(OrderDecodeError, match="not valid hex") as exc_info:
            hex_to_bytes("0xzz", OrderType.DUTCH)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_peek_reactor_dutch(self):
        assert peek_reactor(encoded_dutch(), OrderType.DUTCH) == order_info().reactor

    def test_peek_reactor_dutch_v2(self):
        assert peek_reactor(encoded_dutch_v2(), OrderType.DUTCH) == dutch_v2_order().info.reactor

    def test_peek_reactor_truncated(self):
        with pytest.raises(OrderDecodeError, match="reactor"):
            peek_reactor("0x" + "00" * 31 + "20", OrderType.DUTCH)


# ── Dutch V1 / Limit ─────────────────────────────────────────────────


class TestDutchCodec:

    def test_round_trip(self):
        order = dutch_order()
        assert parse_dutch_order(encode_dutch_order(order)) == order

    def test_round_trip_with_validation_data(self):
        order = dutch_order(info=order_info(additional_validation_data="0xdeadbeef"))
        decoded = parse_dutch_order(encode_dutch_order(order))
        assert decoded.info.additional_validation_data == "0xdeadbeef"

    def test_infer_dutch(self):
        assert infer_order_type(dutch_order()) is OrderType.DUTCH

    def test_infer_limit(self):
        assert infer_order_type(limit_order()) is OrderType.LIMIT

    def test_infer_dutch_with_empty_decay_window(self):
        order = dutch_order(decay_start_time=DECAY_START, decay_end_time=DECAY_START)
        assert infer_order_type(order) is OrderType.DUTCH

    def test_legacy_dutch(self):
        order, order_type = parse_legacy_order(encoded_dutch(), ChainId.MAINNET)
        assert order_type is OrderType.DUTCH
        assert order == dutch_order()

    def test_legacy_limit(self):
        _, order_type = parse_legacy_order(encoded_limit(), ChainId.MAINNET)
        assert order_type is OrderType.LIMIT

    def test_legacy_rejects_v2_reactor(self):
        with pytest.raises(UnexpectedOrderTypeError) as exc_info:
            parse_legacy_order(encoded_dutch_v2(), ChainId.MAINNET)
        assert exc_info.value.actual is OrderType.DUTCH_V2

    def test_legacy_rejects_custom_reactor(self):
        with pytest.raises(OrderDecodeError, match="unknown reactor"):
            parse_legacy_order(encoded_custom_reactor_dutch(), ChainId.MAINNET)

    def test_base_schema_ignores_reactor(self):
        order = parse_dutch_order(encoded_custom_reactor_dutch())
        assert order.info.reactor.lower() == CUSTOM_REACTOR

    def test_legacy_rejects_unsupported_chain(self):
        with pytest.raises(OrderDecodeError, match="unsupported chain"):
            parse_legacy_order(encoded_dutch(), 10)

    def test_truncated_payload(self):
        payload = encoded_dutch()
        with pytest.raises(OrderDecodeError, match="malformed encoding") as exc_info:
            parse_dutch_order(payload[: 2 + 64 * 5])
        assert exc_info.value.variant is OrderType.DUTCH
        assert exc_info.value.__cause__ is exc_info.value.cause

    def test_inverted_decay_window_is_malformed_shape(self):
        order = dutch_order()
        payload = encode_dutch_order(
            order.model_construct(
                **{**dict(order), "decay_start_time": DECAY_START + 100, "decay_end_time": DECAY_START}
            )
        )
        with pytest.raises(OrderDecodeError, match="malformed order shape"):
            parse_dutch_order(payload)

    @given(
        nonce=uint256,
        deadline=uint256,
        start=timestamps,
        window=st.integers(min_value=1, max_value=2**20),
        input_amount=uint256,
        output_start=st.integers(min_value=1, max_value=2**255),
        output_drop=st.integers(min_value=1, max_value=2**20),
    )
    @settings(max_examples=50, deadline=None)
    def test_property_decaying_order_round_trips_as_dutch(
        self, nonce, deadline, start, window, input_amount, output_start, output_drop
    ) -> None:
        order = dutch_order(
            info=order_info(nonce=nonce, deadline=deadline),
            decay_start_time=start,
            decay_end_time=start + window,
            input_start=input_amount,
            input_end=input_amount,
            output_start=output_start,
            output_end=max(output_start - output_drop, 0),
        )
        decoded, order_type = parse_legacy_order(encode_dutch_order(order), ChainId.MAINNET)
        assert decoded == order
        assert decoded.decay_start_time <= decoded.decay_end_time
        assert order_type is OrderType.DUTCH

    @given(
        start=timestamps,
        window=st.integers(min_value=0, max_value=2**20),
        amount=uint256,
    )
    @settings(max_examples=50, deadline=None)
    def test_property_flat_order_is_always_limit(self, start, window, amount) -> None:
        order = dutch_order(
            decay_start_time=start,
            decay_end_time=start + window,
            output_start=amount,
            output_end=amount,
        )
        _, order_type = parse_legacy_order(encode_dutch_order(order), ChainId.MAINNET)
        assert order_type is OrderType.LIMIT


# ── Dutch V2 ─────────────────────────────────────────────────────────


class TestDutchV2Codec:

    def test_round_trip(self):
        payload = encoded_dutch_v2()
        assert parse_cosigned_v2_dutch_order(payload) == dutch_v2_order()

    def test_cosigner_fields(self):
        order = parse_cosigned_v2_dutch_order(encoded_dutch_v2())
        assert order.cosignature == "0x" + "cd" * 65
        assert order.cosigner_data.output_overrides == (10**18,)
        assert order.cosigner_data.input_override == 1_000_000
        assert order.info.additional_validation_data.endswith("01")

    def test_v1_payload_fails(self):
        with pytest.raises(OrderDecodeError) as exc_info:
            parse_cosigned_v2_dutch_order(encoded_dutch())
        assert exc_info.value.variant is OrderType.DUTCH_V2

    def test_v2_payload_fails_v1_schema(self):
        with pytest.raises(OrderDecodeError):
            parse_dutch_order(encoded_dutch_v2())


# ── Relay ────────────────────────────────────────────────────────────


class TestRelayCodec:

    def test_round_trip(self):
        assert parse_relay_order(encoded_relay()) == relay_order()

    def test_order_type_from_reactor(self):
        order = parse_relay_order(encoded_relay())
        assert get_order_type(order, ChainId.MAINNET) is OrderType.RELAY

    def test_order_type_follows_reactor_not_schema(self):
        reactor = reactor_for(ChainId.MAINNET, OrderType.DUTCH)
        order = parse_relay_order(encoded_relay(reactor=reactor))
        assert get_order_type(order, ChainId.MAINNET) is OrderType.DUTCH

    def test_relay_on_arbitrum(self):
        order = parse_relay_order(encoded_relay(chain_id=ChainId.ARBITRUM_ONE))
        assert get_order_type(order, ChainId.ARBITRUM_ONE) is OrderType.RELAY

    def test_garbage(self):
        with pytest.raises(OrderDecodeError) as exc_info:
            parse_relay_order("0x1234")
        assert exc_info.value.variant is OrderType.RELAY


# ── Determinism ──────────────────────────────────────────────────────


@given(nonce=uint256, chain_id=st.sampled_from([1, 137, 42161, 10]))
@settings(max_examples=30, deadline=None)
def test_property_decode_is_deterministic(nonce, chain_id) -> None:
    payload = encode_dutch_order(dutch_order(info=order_info(nonce=nonce)))

    def outcome():
        try:
            return parse_legacy_order(payload, chain_id)
        except (OrderDecodeError, UnexpectedOrderTypeError) as exc:
            return type(exc), str(exc)

    assert outcome() == outcome()
