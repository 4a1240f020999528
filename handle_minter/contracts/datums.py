"""
Datum types.

`OrderDatum` is the datum locked with every order at the orders-spend script:
the requester, the handle they asked for, where the user token goes and the
price they paid.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pycardano import PlutusData, RawPlutusData, Unit


@dataclass
class OrderDatum(PlutusData):
    CONSTR_ID = 0
    owner_key_hash: bytes
    requested_handle: bytes
    destination_address: bytes  # raw Shelley address bytes
    price: int


def decode_order_datum_cbor(datum: Union[OrderDatum, PlutusData, RawPlutusData, bytes]) -> OrderDatum:
    """Coerce an inline datum (already typed, raw, or CBOR bytes) into an `OrderDatum`."""
    if isinstance(datum, OrderDatum):
        return datum
    if isinstance(datum, (bytes, bytearray)):
        return OrderDatum.from_cbor(bytes(datum))
    if isinstance(datum, (PlutusData, RawPlutusData)):
        return OrderDatum.from_cbor(datum.to_cbor())
    raise TypeError(f"unsupported datum type: {type(datum).__name__}")


def make_void_data() -> Unit:
    """Constr 0 [] ("void"), used as the empty-datum marker and the void redeemer."""
    return Unit()
