"""
Minimum-balance accounting for handle outputs.

The ledger minimum for an output is pycardano's post-Alonzo rule: a fixed
entry overhead plus the serialized size, priced per byte. Raising an
output's lovelace can grow its CBOR encoding, so the correction is repeated
until the amount covers its own size.

Integer-only: a float anywhere in here would break the settlement
conservation law.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Tuple

from pycardano import (
    Address,
    Asset,
    AssetName,
    ChainContext,
    MultiAsset,
    ScriptHash,
    TransactionOutput,
    Value,
    min_lovelace_post_alonzo,
)

from ..state.orders import AssetDatum, Lovelace, TokenIdentity
from ..state.params import NetworkParameters

# Base lovelace placed in a handle output before correction.
BASE_HANDLE_LOVELACE = 1


def _require_int(value: object, *, name: str) -> int:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    return value


def _as_value(amount) -> Value:
    if isinstance(amount, Value):
        return amount
    return Value(_require_int(amount, name="output amount"))


class _ParameterContext(ChainContext):
    """Serves `NetworkParameters` where pycardano reads protocol parameters."""

    def __init__(self, params: NetworkParameters) -> None:
        self._params = params

    @property
    def protocol_param(self) -> NetworkParameters:
        return self._params


def min_lovelace(output: TransactionOutput, params: NetworkParameters) -> Lovelace:
    """Minimum lovelace the ledger accepts for `output` as currently encoded."""
    value = _as_value(output.amount)
    # pycardano rewrites a zero coin in place; it only ever sees a copy
    candidate = replace(output, amount=Value(value.coin, value.multi_asset))
    return min_lovelace_post_alonzo(candidate, _ParameterContext(params))


def correct_lovelace(output: TransactionOutput, params: NetworkParameters) -> TransactionOutput:
    """
    Return a copy of `output` whose lovelace is at least `min_lovelace`.

    Amounts already above the minimum are kept as they are; the input output
    is never mutated.
    """
    value = _as_value(output.amount)
    coin = _require_int(value.coin, name="output coin")
    while True:
        candidate = replace(output, amount=Value(coin, value.multi_asset))
        required = min_lovelace(candidate, params)
        if coin >= required:
            return candidate
        coin = required


def single_token_value(policy_id: ScriptHash, asset_name: AssetName, *, lovelace: Lovelace = BASE_HANDLE_LOVELACE) -> Value:
    return Value(
        _require_int(lovelace, name="lovelace"),
        MultiAsset({policy_id: Asset({asset_name: 1})}),
    )


def build_handle_outputs(
    identity: TokenIdentity,
    *,
    reference_address: Address,
    destination_address: Address,
    asset_datum: AssetDatum,
    params: NetworkParameters,
) -> Tuple[TransactionOutput, TransactionOutput]:
    """
    Build the corrected (reference, user) output pair for one handle.

    The reference token goes to the protocol's reference-storage address with
    the handle datum inline; the user token goes to the requester without a
    datum.
    """
    reference_output = TransactionOutput(
        reference_address,
        single_token_value(identity.policy_id, identity.reference_name),
        datum=asset_datum,
    )
    user_output = TransactionOutput(
        destination_address,
        single_token_value(identity.policy_id, identity.user_name),
    )
    return correct_lovelace(reference_output, params), correct_lovelace(user_output, params)


class LovelaceTally:
    """Running total of lovelace committed to corrected outputs in a batch."""

    def __init__(self) -> None:
        self._total: Lovelace = 0
        self._outputs = 0

    def add(self, output: TransactionOutput) -> Lovelace:
        """Add an output's lovelace; returns the new total."""
        coin = _require_int(_as_value(output.amount).coin, name="output coin")
        if coin < 0:
            raise ValueError(f"output lovelace cannot be negative: {coin}")
        self._total += coin
        self._outputs += 1
        return self._total

    @property
    def total(self) -> Lovelace:
        return self._total

    @property
    def output_count(self) -> int:
        return self._outputs

    def __repr__(self) -> str:
        return f"LovelaceTally({self._total} over {self._outputs} outputs)"
