"""
Settlement output for a minting batch.

The batch collects the handle prices from the spent orders. What remains
after paying for the handle outputs' minimum balances and reserving the
maximum fee goes to the protocol payment address:

    required_payment = total_price - total_min_lovelace - reserved_fee

so that `sum(handle outputs) + settlement + reserved_fee == total_price`.
"""

from __future__ import annotations

from pycardano import Address, TransactionOutput, Value

from ..contracts.datums import make_void_data
from ..state.orders import Lovelace
from .errors import AccountingInconsistencyError


def compute_required_payment(
    total_price: Lovelace,
    total_min_lovelace: Lovelace,
    reserved_fee: Lovelace,
) -> Lovelace:
    """
    Raises:
        AccountingInconsistencyError: If the result is negative (never clamped)
        TypeError: If any amount is not an int
    """
    for name, value in (
        ("total_price", total_price),
        ("total_min_lovelace", total_min_lovelace),
        ("reserved_fee", reserved_fee),
    ):
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    required = total_price - total_min_lovelace - reserved_fee
    if required < 0:
        raise AccountingInconsistencyError(total_price, total_min_lovelace, reserved_fee)
    return required


def build_settlement_output(payment_address: Address, required_payment: Lovelace) -> TransactionOutput:
    """Payment output with an inline void datum marking it as a settlement."""
    if required_payment < 0:
        raise ValueError(f"required_payment must be non-negative: {required_payment}")
    return TransactionOutput(
        payment_address,
        Value(required_payment),
        datum=make_void_data(),
    )
