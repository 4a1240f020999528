"""
Order normal form (canonical batch ordering).

The ledger sorts a transaction's spent inputs by (transaction id bytes,
output index). Handles are minted and delivered in the same order the order
inputs will be spent, so downstream consumers can line outputs up with
inputs by position.

The index is compared as an integer: comparing `"<txid>#<index>"` strings
would put `#10` ahead of `#2`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from pycardano import TransactionInput

from ..state.orders import Order
from .errors import EmptyBatchError


class OrderNormalFormError(ValueError):
    pass


def canonical_input_key(tx_input: TransactionInput) -> Tuple[bytes, int]:
    """Ledger ordering key for a transaction input."""
    index = tx_input.index
    if not isinstance(index, int) or isinstance(index, bool) or index < 0:
        raise OrderNormalFormError(f"input index must be a non-negative int, got {index!r}")
    return (bytes(tx_input.transaction_id.payload), index)


@dataclass(frozen=True)
class NormalizedOrders:
    orders: List[Order]

    @property
    def input_refs(self) -> List[str]:
        return [o.input_ref for o in self.orders]

    def __len__(self) -> int:
        return len(self.orders)


def normalize_orders(orders: Sequence[Order]) -> NormalizedOrders:
    """
    Return `orders` in ascending canonical input order.

    Raises:
        EmptyBatchError: If `orders` is empty
        OrderNormalFormError: If two orders spend the same input
    """
    if not orders:
        raise EmptyBatchError()

    ordered = sorted(orders, key=lambda o: canonical_input_key(o.tx_input))
    for prev, cur in zip(ordered, ordered[1:]):
        if canonical_input_key(prev.tx_input) == canonical_input_key(cur.tx_input):
            raise OrderNormalFormError(f"order input listed twice: {cur.input_ref}")
    return NormalizedOrders(orders=ordered)


def is_in_normal_form(orders: Sequence[Order]) -> bool:
    keys = [canonical_input_key(o.tx_input) for o in orders]
    return all(a < b for a, b in zip(keys, keys[1:]))


def require_normal_form(orders: Sequence[Order]) -> None:
    if not is_in_normal_form(orders):
        raise OrderNormalFormError("orders not in canonical input order")
