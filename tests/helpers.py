"""Fakes and builders shared by the test suite."""

from __future__ import annotations

from dataclasses import dataclass
from types import SimpleNamespace
from typing import List, Optional, Sequence, Set, Tuple

from pycardano import (
    Address,
    ChainContext,
    Network,
    PlutusData,
    TransactionBuilder,
    TransactionId,
    TransactionInput,
    TransactionOutput,
    Value,
    VerificationKeyHash,
)

from handle_minter.integration.network_params import NetworkParametersProvider
from handle_minter.integration.order_verifier import OrderVerifier
from handle_minter.integration.prepare import MintPreparer, PreparedMint
from handle_minter.state.orders import OrderedAsset
from handle_minter.state.params import NetworkParameters

NETWORK = Network.TESTNET
PARAMS = NetworkParameters(coins_per_utxo_byte=4310)


@dataclass
class HandleMetadata(PlutusData):
    CONSTR_ID = 0
    name: bytes


class FakeChainContext(ChainContext):
    def __init__(self, network: Network = NETWORK, coins_per_utxo_byte: Optional[int] = 4310) -> None:
        self._network = network
        self._coins_per_utxo_byte = coins_per_utxo_byte

    @property
    def network(self) -> Network:
        return self._network

    @property
    def protocol_param(self):
        return SimpleNamespace(coins_per_utxo_byte=self._coins_per_utxo_byte)


def key_address(tag: int) -> Address:
    return Address(payment_part=VerificationKeyHash(bytes([tag]) * 28), network=NETWORK)


def tx_input(tx_byte: int, index: int = 0) -> TransactionInput:
    return TransactionInput(TransactionId(bytes([tx_byte]) * 32), index)


class FakePreparer(MintPreparer):
    """Seeds one wallet output and sums the decoded prices."""

    def __init__(self, *, seeded_outputs: int = 1, fail: Optional[Exception] = None) -> None:
        self.seeded_outputs = seeded_outputs
        self.fail = fail
        self.calls: List[Tuple[Network, Tuple[OrderedAsset, ...]]] = []
        self.builder: Optional[TransactionBuilder] = None

    async def prepare(self, network: Network, ordered_assets: Sequence[OrderedAsset]) -> PreparedMint:
        self.calls.append((network, tuple(ordered_assets)))
        if self.fail is not None:
            raise self.fail
        builder = TransactionBuilder(FakeChainContext())
        for i in range(self.seeded_outputs):
            builder.add_output(TransactionOutput(key_address(0x70 + i), Value(2_000_000)))
        self.builder = builder
        return PreparedMint(builder=builder, total_price=sum(a.price for a in ordered_assets))


class FakeVerifier(OrderVerifier):
    def __init__(self, rejected: Optional[Set[str]] = None, *, fail: Optional[Exception] = None) -> None:
        self.rejected = rejected or set()
        self.fail = fail
        self.calls: List[str] = []

    async def verify(self, network, order_utxo, orders_spend_script):
        ref = f"{order_utxo.input.transaction_id.payload.hex()}#{order_utxo.input.index}"
        self.calls.append(ref)
        if self.fail is not None:
            raise self.fail
        if ref in self.rejected:
            return False, "order datum tampered"
        return True, None


class FailingParamsProvider(NetworkParametersProvider):
    async def fetch(self, network: Network) -> NetworkParameters:
        raise ConnectionError("blockfrost unavailable")


