"""
Order and handle data models
"""

from .orders import (
    DecodedOrder,
    MintingHandle,
    Order,
    OrderedAsset,
    TokenIdentity,
    format_input_ref,
)
from .params import NetworkParameters

__all__ = [
    "DecodedOrder",
    "MintingHandle",
    "NetworkParameters",
    "Order",
    "OrderedAsset",
    "TokenIdentity",
    "format_input_ref",
]
