from __future__ import annotations

import random

import hypothesis.strategies as st
import pytest
from hypothesis import given, settings
from pycardano import TransactionId, TransactionInput

from handle_minter.core.errors import EmptyBatchError
from handle_minter.core.order_normal_form import (
    OrderNormalFormError,
    canonical_input_key,
    is_in_normal_form,
    normalize_orders,
    require_normal_form,
)
from handle_minter.state.orders import Order

from helpers import HandleMetadata


class _StubUTxO:
    # Ordering only looks at `.input`.
    def __init__(self, tx_input: TransactionInput) -> None:
        self.input = tx_input


def _order(tx_id: bytes, index: int) -> Order:
    tx_input = TransactionInput(TransactionId(tx_id), index)
    return Order(utxo=_StubUTxO(tx_input), asset_utf8_name="x", asset_datum=HandleMetadata(name=b"x"))


def _keys(orders):
    return [canonical_input_key(o.tx_input) for o in orders]


def test_sorts_ascending_by_tx_id_then_index() -> None:
    a = _order(b"\x01" * 32, 1)
    b = _order(b"\x01" * 32, 0)
    c = _order(b"\x00" + b"\xff" * 31, 7)
    normalized = normalize_orders([a, b, c]).orders
    assert normalized == [c, b, a]


def test_index_compared_numerically() -> None:
    tx_id = b"\xab" * 32
    ten = _order(tx_id, 10)
    two = _order(tx_id, 2)
    # "#10" < "#2" as strings; the ledger puts 2 first.
    assert normalize_orders([ten, two]).orders == [two, ten]


def test_first_order_is_smallest_input() -> None:
    # Guard against a reversed (descending) ordering.
    orders = [_order(bytes([n]) * 32, 0) for n in (9, 3, 5)]
    normalized = normalize_orders(orders).orders
    assert canonical_input_key(normalized[0].tx_input) == (bytes([3]) * 32, 0)
    assert canonical_input_key(normalized[-1].tx_input) == (bytes([9]) * 32, 0)


def test_empty_batch() -> None:
    with pytest.raises(EmptyBatchError):
        normalize_orders([])


def test_duplicate_input_rejected() -> None:
    a = _order(b"\x01" * 32, 0)
    b = _order(b"\x01" * 32, 0)
    with pytest.raises(OrderNormalFormError):
        normalize_orders([a, b])


def test_normal_form_is_idempotent_and_detectable() -> None:
    orders = [_order(bytes([n]) * 32, n % 3) for n in (4, 1, 8, 2)]
    assert not is_in_normal_form(orders)
    with pytest.raises(OrderNormalFormError):
        require_normal_form(orders)

    once = normalize_orders(orders).orders
    twice = normalize_orders(once).orders
    assert once == twice
    assert is_in_normal_form(once)
    require_normal_form(once)


_inputs = st.lists(
    st.tuples(st.binary(min_size=32, max_size=32), st.integers(min_value=0, max_value=2**16)),
    min_size=1,
    max_size=20,
    unique=True,
)


@settings(max_examples=200, deadline=None)
@given(_inputs, st.randoms(use_true_random=False))
def test_matches_ledger_input_order_for_any_permutation(pairs, rnd: random.Random) -> None:
    orders = [_order(tx_id, index) for tx_id, index in pairs]
    shuffled = list(orders)
    rnd.shuffle(shuffled)

    normalized = normalize_orders(shuffled)

    assert _keys(normalized.orders) == sorted(pairs)
    assert normalized.input_refs == normalize_orders(orders).input_refs
    assert len(normalized) == len(pairs)
