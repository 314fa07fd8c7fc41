"""Decoded order structures — one model per on-chain order schema.

These mirror the ABI tuples the reactors consume.  They carry no notion
of the submission that produced them; see ``models.canonical`` for the
tagged, submission-aware representation.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from web3 import Web3

# EIP-55 checksummed; lower-case input is accepted and normalised.
Address = Annotated[str, AfterValidator(Web3.to_checksum_address)]


class OrderType(str, Enum):
    """Order formats accepted by the intake service (wire values)."""

    DUTCH = "Dutch"
    DUTCH_V2 = "Dutch_V2"
    LIMIT = "Limit"
    RELAY = "Relay"


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


# ── Shared order info ───────────────────────────────────────────────


class OrderInfo(_Frozen):
    """Generic order header shared by Dutch V1 / Limit / Dutch V2."""

    reactor: Address
    swapper: Address
    nonce: int = Field(..., ge=0)
    deadline: int = Field(..., ge=0)
    additional_validation_contract: Address
    additional_validation_data: str = Field(default="0x", description="Hex-encoded bytes")


# ── Dutch V1 / Limit ────────────────────────────────────────────────


class DutchInput(_Frozen):
    token: Address
    start_amount: int = Field(..., ge=0)
    end_amount: int = Field(..., ge=0)


class DutchOutput(_Frozen):
    token: Address
    start_amount: int = Field(..., ge=0)
    end_amount: int = Field(..., ge=0)
    recipient: Address


class DutchOrder(_Frozen):
    """Dutch V1 schema, also used by Limit orders."""

    info: OrderInfo
    decay_start_time: int = Field(..., ge=0)
    decay_end_time: int = Field(..., ge=0)
    exclusive_filler: Address
    exclusivity_override_bps: int = Field(..., ge=0)
    input: DutchInput
    outputs: tuple[DutchOutput, ...]

    @model_validator(mode="after")
    def decay_window_ordered(self) -> DutchOrder:
        """decay_end_time must not precede decay_start_time."""
        if self.decay_end_time < self.decay_start_time:
            raise ValueError("decay_end_time must be >= decay_start_time")
        return self

    def has_price_decay(self) -> bool:
        """True when any amount moves between its start and end value.

        Only the amounts decide: a zero-length decay window with decaying
        amounts is still a Dutch order, flat amounts make it a Limit order.
        """
        if self.input.start_amount != self.input.end_amount:
            return True
        return any(o.start_amount != o.end_amount for o in self.outputs)


# ── Dutch V2 ────────────────────────────────────────────────────────


class CosignerData(_Frozen):
    """Cosigner-provided overrides layered over the swapper's order."""

    decay_start_time: int = Field(..., ge=0)
    decay_end_time: int = Field(..., ge=0)
    exclusive_filler: Address
    exclusivity_override_bps: int = Field(..., ge=0)
    input_override: int = Field(..., ge=0)
    output_overrides: tuple[int, ...] = ()


class CosignedV2DutchOrder(_Frozen):
    info: OrderInfo
    cosigner: Address
    input: DutchInput
    outputs: tuple[DutchOutput, ...]
    cosigner_data: CosignerData
    cosignature: str = Field(default="0x", description="Hex-encoded cosigner signature")

    @model_validator(mode="after")
    def overrides_match_outputs(self) -> CosignedV2DutchOrder:
        """Output overrides, when present, must cover every output."""
        overrides = self.cosigner_data.output_overrides
        if overrides and len(overrides) != len(self.outputs):
            raise ValueError(
                f"expected {len(self.outputs)} output overrides, got {len(overrides)}"
            )
        return self


# ── Relay ───────────────────────────────────────────────────────────


class RelayOrderInfo(_Frozen):
    reactor: Address
    swapper: Address
    nonce: int = Field(..., ge=0)
    deadline: int = Field(..., ge=0)


class RelayInput(_Frozen):
    token: Address
    amount: int = Field(..., ge=0)
    recipient: Address


class RelayFee(_Frozen):
    """Fee paid to the relayer, escalating linearly between start and end time."""

    token: Address
    start_amount: int = Field(..., ge=0)
    end_amount: int = Field(..., ge=0)
    start_time: int = Field(..., ge=0)
    end_time: int = Field(..., ge=0)
    recipient: Address


class RelayOrderData(_Frozen):
    info: RelayOrderInfo
    input: RelayInput
    fee: RelayFee
    universal_router_calldata: str = "0x"
