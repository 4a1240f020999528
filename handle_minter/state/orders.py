"""
Order data models for the handle minter.

Orders are user-locked UTxOs at the orders-spend script, each asking for one
handle. A batch of orders is fulfilled by a single minting transaction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pycardano import Address, AssetName, PlutusData, RawPlutusData, ScriptHash, TransactionInput, TransactionOutput, UTxO

AssetDatum = Union[PlutusData, RawPlutusData]
Lovelace = int  # non-negative integer (arbitrary precision)


def format_input_ref(tx_input: TransactionInput) -> str:
    """Render an input as `<tx hash hex>#<index>`."""
    return f"{tx_input.transaction_id.payload.hex()}#{tx_input.index}"


@dataclass(frozen=True)
class Order:
    """
    A caller-supplied order.

    Attributes:
        utxo: The locked order UTxO (input reference + resolved output)
        asset_utf8_name: Handle name requested, human readable
        asset_datum: Datum attached to the newly minted reference token
    """
    utxo: UTxO
    asset_utf8_name: str
    asset_datum: AssetDatum

    @property
    def tx_input(self) -> TransactionInput:
        return self.utxo.input

    @property
    def input_ref(self) -> str:
        return format_input_ref(self.utxo.input)


@dataclass(frozen=True)
class DecodedOrder:
    """Fields read out of an order's datum."""
    destination_address: Address
    price: Lovelace


@dataclass(frozen=True)
class OrderedAsset:
    """Per-order summary handed to the transaction preparer."""
    utf8_name: str
    hex_name: str
    destination_address: Address
    price: Lovelace


@dataclass(frozen=True)
class TokenIdentity:
    """Reference (100) and user (222) asset names under one minting policy."""
    policy_id: ScriptHash
    reference_name: AssetName
    user_name: AssetName


@dataclass(frozen=True)
class MintingHandle:
    """
    Everything needed to mint and deliver one handle.

    Built once per order before the transaction is touched; consumed exactly
    once by the assembler.
    """
    order_utxo: UTxO
    destination_address: Address
    asset_datum: AssetDatum
    reference_output: TransactionOutput
    user_output: TransactionOutput
    identity: TokenIdentity

    @property
    def committed_lovelace(self) -> Lovelace:
        return self.reference_output.amount.coin + self.user_output.amount.coin
