"""
Core minting algorithms
"""

from .accounting import LovelaceTally, build_handle_outputs, correct_lovelace, min_lovelace
from .errors import (
    AccountingInconsistencyError,
    EmptyBatchError,
    InvalidAssetNameError,
    InvalidOrderInputError,
    MintError,
    UpstreamFetchError,
)
from .identity import derive_token_identity
from .mint import MintConfig, MintParams, MintResult, mint, mint_or_raise
from .order_normal_form import (
    NormalizedOrders,
    OrderNormalFormError,
    canonical_input_key,
    is_in_normal_form,
    normalize_orders,
    require_normal_form,
)
from .settlement import build_settlement_output, compute_required_payment

__all__ = [
    "LovelaceTally",
    "build_handle_outputs",
    "correct_lovelace",
    "min_lovelace",
    "AccountingInconsistencyError",
    "EmptyBatchError",
    "InvalidAssetNameError",
    "InvalidOrderInputError",
    "MintError",
    "UpstreamFetchError",
    "derive_token_identity",
    "MintConfig",
    "MintParams",
    "MintResult",
    "mint",
    "mint_or_raise",
    "NormalizedOrders",
    "OrderNormalFormError",
    "canonical_input_key",
    "is_in_normal_form",
    "normalize_orders",
    "require_normal_form",
    "build_settlement_output",
    "compute_required_payment",
]
