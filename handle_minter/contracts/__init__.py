"""
On-chain data shapes (datums and redeemers) used by the minting transaction.
"""

from .datums import OrderDatum, decode_order_datum_cbor, make_void_data
from .redeemers import (
    OrdersMintExecuteOrders,
    OrdersSpendExecuteOrders,
    build_orders_mint_execute_orders_redeemer,
    build_orders_spend_execute_orders_redeemer,
    build_void_redeemer,
)

__all__ = [
    "OrderDatum",
    "decode_order_datum_cbor",
    "make_void_data",
    "OrdersMintExecuteOrders",
    "OrdersSpendExecuteOrders",
    "build_orders_mint_execute_orders_redeemer",
    "build_orders_spend_execute_orders_redeemer",
    "build_void_redeemer",
]
