"""
Network parameter providers.

The assembler only needs the minimum-balance inputs (`NetworkParameters`).
Providers raise `NetworkParametersError` on failure; the assembler turns any
failure into an `UpstreamFetchError`.
"""

from __future__ import annotations

import asyncio
from typing import Mapping

from pycardano import ChainContext, Network

from ..state.params import NetworkParameters


class NetworkParametersError(RuntimeError):
    pass


class NetworkParametersProvider:
    """Interface for fetching network parameters."""

    async def fetch(self, network: Network) -> NetworkParameters:
        raise NotImplementedError


class StaticParametersProvider(NetworkParametersProvider):
    """Fixed parameters per network (tests, offline tooling)."""

    def __init__(self, params: Mapping[Network, NetworkParameters]) -> None:
        self._params = dict(params)

    async def fetch(self, network: Network) -> NetworkParameters:
        try:
            return self._params[network]
        except KeyError:
            raise NetworkParametersError(f"no parameters configured for {network.name}") from None


class ChainContextParametersProvider(NetworkParametersProvider):
    """
    Read parameters from a pycardano `ChainContext` (Blockfrost, Ogmios, ...).

    `ChainContext.protocol_param` may block on HTTP, so it is read in a worker
    thread.
    """

    def __init__(self, context: ChainContext) -> None:
        self._context = context

    async def fetch(self, network: Network) -> NetworkParameters:
        if self._context.network != network:
            raise NetworkParametersError(
                f"chain context is on {self._context.network.name}, requested {network.name}"
            )
        protocol_param = await asyncio.to_thread(lambda: self._context.protocol_param)
        coins_per_utxo_byte = getattr(protocol_param, "coins_per_utxo_byte", None)
        if coins_per_utxo_byte is None:
            raise NetworkParametersError("protocol parameters do not define coins_per_utxo_byte")
        return NetworkParameters(coins_per_utxo_byte=int(coins_per_utxo_byte))
