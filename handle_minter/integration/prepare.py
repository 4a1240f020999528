"""
Upstream transaction preparation.

The preparer owns everything the assembler does not: wallet inputs, change,
the name-state output and collateral. It returns a builder seeded with that
work plus the total price collected from the batch. The assembler only
appends to the builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from pycardano import Network, TransactionBuilder

from ..state.orders import Lovelace, OrderedAsset


@dataclass(frozen=True)
class PreparedMint:
    builder: TransactionBuilder
    total_price: Lovelace


class MintPreparer:
    """Interface for seeding the minting transaction."""

    async def prepare(self, network: Network, ordered_assets: Sequence[OrderedAsset]) -> PreparedMint:
        raise NotImplementedError
