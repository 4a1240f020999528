from __future__ import annotations

from typing import Optional

import pytest
from pycardano import Address, Asset, MultiAsset, PlutusV2Script, ScriptHash, TransactionOutput, UTxO, Value

from handle_minter.contracts.datums import OrderDatum
from handle_minter.integration.deployed_scripts import DeployedScripts, ProtocolSettings, ScriptDetails
from handle_minter.integration.network_params import StaticParametersProvider
from handle_minter.integration.order_verifier import ORDER_ASSET_NAME
from handle_minter.state.orders import Order

from helpers import NETWORK, PARAMS, HandleMetadata, key_address, tx_input


@pytest.fixture
def deployment() -> DeployedScripts:
    return DeployedScripts(
        network=NETWORK,
        mint_proxy=ScriptDetails(script=PlutusV2Script(b"mint_proxy")),
        orders_spend=ScriptDetails(script=PlutusV2Script(b"orders_spend")),
        orders_mint=ScriptDetails(script=PlutusV2Script(b"orders_mint")),
        settings=ProtocolSettings(
            reference_address=Address(payment_part=ScriptHash(b"\x22" * 28), network=NETWORK),
            payment_address=key_address(0x33),
        ),
    )


@pytest.fixture
def params_provider() -> StaticParametersProvider:
    return StaticParametersProvider({NETWORK: PARAMS})


@pytest.fixture
def make_order(deployment):
    def _make(
        tx_byte: int,
        name: str,
        price: int,
        *,
        index: int = 0,
        destination: Optional[Address] = None,
        order_tokens: int = 1,
        datum=None,
    ) -> Order:
        destination = destination or key_address(0x40 + (tx_byte % 16))
        if datum is None:
            datum = OrderDatum(
                owner_key_hash=b"\x01" * 28,
                requested_handle=name.encode("utf-8"),
                destination_address=destination.to_primitive(),
                price=price,
            )
        multi_asset = MultiAsset()
        if order_tokens:
            multi_asset = MultiAsset({
                deployment.orders_mint.policy_id: Asset({ORDER_ASSET_NAME: order_tokens}),
            })
        output = TransactionOutput(
            deployment.orders_spend.address(NETWORK),
            Value(price + 2_000_000, multi_asset),
            datum=datum,
        )
        return Order(
            utxo=UTxO(tx_input(tx_byte, index), output),
            asset_utf8_name=name,
            asset_datum=HandleMetadata(name=name.encode("utf-8")),
        )

    return _make
