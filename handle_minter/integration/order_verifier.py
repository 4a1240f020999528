"""
Order input authenticity checks (imperative shell).

An order input may only be consumed if it genuinely came out of the orders
flow: it sits at the orders-spend script address, its datum decodes, and it
carries the single order-proof token minted when the order was placed.
Fail-closed: any doubt rejects the order.
"""

from __future__ import annotations

from typing import Optional, Tuple

from pycardano import AssetName, Network, ScriptHash, UTxO, Value, script_hash

from ..constants import ORDER_ASSET_HEX_NAME
from .deployed_scripts import ScriptDetails
from .order_decoder import OrderDatumDecoder, OrderDatumError

ORDER_ASSET_NAME = AssetName(bytes.fromhex(ORDER_ASSET_HEX_NAME))


class OrderVerifier:
    """Interface for verifying an order input."""

    async def verify(
        self,
        network: Network,
        order_utxo: UTxO,
        orders_spend_script: ScriptDetails,
    ) -> Tuple[bool, Optional[str]]:
        raise NotImplementedError


def count_order_tokens(utxo: UTxO, orders_mint_policy_id: ScriptHash) -> int:
    amount = utxo.output.amount
    if not isinstance(amount, Value) or not amount.multi_asset:
        return 0
    if orders_mint_policy_id not in amount.multi_asset:
        return 0
    assets = amount.multi_asset[orders_mint_policy_id]
    if ORDER_ASSET_NAME not in assets:
        return 0
    return int(assets[ORDER_ASSET_NAME])


class ScriptOrderVerifier(OrderVerifier):
    def __init__(self, *, decoder: OrderDatumDecoder, orders_mint_policy_id: ScriptHash) -> None:
        self._decoder = decoder
        self._orders_mint_policy_id = orders_mint_policy_id

    async def verify(
        self,
        network: Network,
        order_utxo: UTxO,
        orders_spend_script: ScriptDetails,
    ) -> Tuple[bool, Optional[str]]:
        address = order_utxo.output.address
        if address.payment_part != orders_spend_script.script_hash:
            return False, "input is not locked at the orders spend script"
        if address.network != network:
            return False, f"input address is on {address.network.name}, expected {network.name}"
        attached = order_utxo.output.script
        if attached is not None and script_hash(attached) != orders_spend_script.script_hash:
            return False, "input carries a script other than the orders spend script"

        datum = order_utxo.output.datum
        if datum is None:
            return False, "input has no inline datum"
        try:
            self._decoder.decode(datum, network)
        except OrderDatumError as exc:
            return False, str(exc)

        tokens = count_order_tokens(order_utxo, self._orders_mint_policy_id)
        if tokens != 1:
            return False, f"input must hold exactly one order token, found {tokens}"
        return True, None
