"""UniswapX order intake — submission classification, decoding and hand-off."""

from .allow_list import ReactorAllowList
from .fallback import CustomReactorFallback
from .parser import OrderBodyParser
from .result import Decoded, DecodeResult, Failed
from .service import ErrorPayload, OrderIntake, OrderRepository, SubmissionResult, build_intake

__all__ = [
    "CustomReactorFallback",
    "DecodeResult",
    "Decoded",
    "ErrorPayload",
    "Failed",
    "OrderBodyParser",
    "OrderIntake",
    "OrderRepository",
    "ReactorAllowList",
    "SubmissionResult",
    "build_intake",
]
