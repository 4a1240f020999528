"""
Order datum decoding.
"""

from __future__ import annotations

from pycardano import Address, Network

from ..contracts.datums import decode_order_datum_cbor
from ..state.orders import DecodedOrder


class OrderDatumError(ValueError):
    pass


class OrderDatumDecoder:
    """Interface: datum + network -> destination address and price."""

    def decode(self, datum, network: Network) -> DecodedOrder:
        raise NotImplementedError


class PlutusOrderDatumDecoder(OrderDatumDecoder):
    """Decode the on-chain `OrderDatum` (inline Plutus data)."""

    def decode(self, datum, network: Network) -> DecodedOrder:
        if datum is None:
            raise OrderDatumError("order has no inline datum")
        try:
            order_datum = decode_order_datum_cbor(datum)
        except Exception as exc:
            raise OrderDatumError(f"malformed order datum: {exc}") from exc

        price = order_datum.price
        if not isinstance(price, int) or isinstance(price, bool) or price < 0:
            raise OrderDatumError(f"order price must be a non-negative int, got {price!r}")

        try:
            destination = Address.from_primitive(bytes(order_datum.destination_address))
        except Exception as exc:
            raise OrderDatumError(f"malformed destination address: {exc}") from exc
        if destination.network != network:
            raise OrderDatumError(
                f"destination address is on {destination.network.name}, expected {network.name}"
            )
        return DecodedOrder(destination_address=destination, price=price)
