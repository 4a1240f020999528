"""`handle_minter`: assemble the batch minting transaction for handle orders.

Public API:
- `mint(params) -> MintResult` (async)
- `mint_or_raise(params) -> TransactionBuilder` (async, raises `MintError`)
"""

from .core import MintConfig, MintError, MintParams, MintResult, mint, mint_or_raise
from .state import Order

__version__ = "0.1.0"

__all__ = [
    "MintConfig",
    "MintError",
    "MintParams",
    "MintResult",
    "Order",
    "mint",
    "mint_or_raise",
]
