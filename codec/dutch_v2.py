"""Dutch V2 codec — cosigned Dutch orders."""

from __future__ import annotations

from eth_abi import encode
from web3 import Web3

from models.order import (
    CosignedV2DutchOrder,
    CosignerData,
    DutchInput,
    DutchOutput,
    OrderType,
)

from .abi import (
    DUTCH_INPUT_ABI,
    DUTCH_OUTPUTS_ABI,
    ORDER_INFO_ABI,
    build_order_info,
    decode_payload,
    order_info_values,
)

COSIGNER_DATA_ABI = "(uint256,uint256,address,uint256,uint256,uint256[])"

COSIGNED_V2_DUTCH_ORDER_ABI = (
    f"({ORDER_INFO_ABI},address,{DUTCH_INPUT_ABI},{DUTCH_OUTPUTS_ABI},{COSIGNER_DATA_ABI},bytes)"
)


def _build(raw: tuple) -> CosignedV2DutchOrder:
    info, cosigner, base_input, base_outputs, cosigner_data, cosignature = raw
    input_token, input_start, input_end = base_input
    (
        decay_start_time,
        decay_end_time,
        exclusive_filler,
        exclusivity_override_bps,
        input_override,
        output_overrides,
    ) = cosigner_data
    return CosignedV2DutchOrder(
        info=build_order_info(info),
        cosigner=cosigner,
        input=DutchInput(
            token=input_token,
            start_amount=input_start,
            end_amount=input_end,
        ),
        outputs=tuple(
            DutchOutput(
                token=token,
                start_amount=start_amount,
                end_amount=end_amount,
                recipient=recipient,
            )
            for token, start_amount, end_amount, recipient in base_outputs
        ),
        cosigner_data=CosignerData(
            decay_start_time=decay_start_time,
            decay_end_time=decay_end_time,
            exclusive_filler=exclusive_filler,
            exclusivity_override_bps=exclusivity_override_bps,
            input_override=input_override,
            output_overrides=tuple(output_overrides),
        ),
        cosignature=Web3.to_hex(cosignature),
    )


def parse_cosigned_v2_dutch_order(encoded: str) -> CosignedV2DutchOrder:
    """Decode a cosigned Dutch V2 order.  No reactor or fallback checks."""
    return decode_payload(encoded, COSIGNED_V2_DUTCH_ORDER_ABI, OrderType.DUTCH_V2, _build)


def encode_cosigned_v2_dutch_order(order: CosignedV2DutchOrder) -> str:
    data = order.cosigner_data
    values = (
        order_info_values(order.info),
        order.cosigner,
        (order.input.token, order.input.start_amount, order.input.end_amount),
        [
            (o.token, o.start_amount, o.end_amount, o.recipient)
            for o in order.outputs
        ],
        (
            data.decay_start_time,
            data.decay_end_time,
            data.exclusive_filler,
            data.exclusivity_override_bps,
            data.input_override,
            list(data.output_overrides),
        ),
        Web3.to_bytes(hexstr=order.cosignature),
    )
    return Web3.to_hex(encode([COSIGNED_V2_DUTCH_ORDER_ABI], [values]))
