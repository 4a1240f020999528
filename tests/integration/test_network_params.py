from __future__ import annotations

import asyncio

import pytest
from pycardano import Network

from handle_minter.integration.network_params import (
    ChainContextParametersProvider,
    NetworkParametersError,
    StaticParametersProvider,
)
from handle_minter.state.params import NetworkParameters

from helpers import NETWORK, PARAMS, FakeChainContext


def test_static_provider() -> None:
    provider = StaticParametersProvider({NETWORK: PARAMS})
    assert asyncio.run(provider.fetch(NETWORK)) == PARAMS
    with pytest.raises(NetworkParametersError):
        asyncio.run(provider.fetch(Network.MAINNET))


def test_chain_context_provider() -> None:
    provider = ChainContextParametersProvider(FakeChainContext(coins_per_utxo_byte=4310))
    params = asyncio.run(provider.fetch(NETWORK))
    assert params == NetworkParameters(coins_per_utxo_byte=4310)


def test_chain_context_provider_network_mismatch() -> None:
    provider = ChainContextParametersProvider(FakeChainContext(network=Network.MAINNET))
    with pytest.raises(NetworkParametersError):
        asyncio.run(provider.fetch(NETWORK))


def test_chain_context_provider_missing_parameter() -> None:
    provider = ChainContextParametersProvider(FakeChainContext(coins_per_utxo_byte=None))
    with pytest.raises(NetworkParametersError):
        asyncio.run(provider.fetch(NETWORK))


@pytest.mark.parametrize("bad", [-1, 1.5, True])
def test_parameters_validation(bad) -> None:
    with pytest.raises((TypeError, ValueError)):
        NetworkParameters(coins_per_utxo_byte=bad)
