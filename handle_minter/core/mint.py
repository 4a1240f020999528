"""
Handle minting transaction assembly.

``mint(params)`` turns a batch of orders into one unsigned transaction that:

1. mints a (100) reference and a (222) user token per order under the mint
   proxy policy (void redeemer),
2. burns one order token per order under the orders policy
   (``ExecuteOrders``),
3. spends every order input (``ExecuteOrders``) and sends the reference
   token to the reference-storage address and the user token to the
   requester,
4. pays the remaining collected price to the payment address as output #1.

All fallible work (ordering, decoding, parameter fetch, preparation,
verification, accounting) happens in a planning phase. The builder is only
touched once the plan is complete, so a failed call leaves it exactly as the
preparer produced it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from pycardano import Asset, MultiAsset, Network, TransactionBuilder, TransactionOutput, script_hash

from ..constants import MAX_TRANSACTION_FEE
from ..contracts.redeemers import (
    build_orders_mint_execute_orders_redeemer,
    build_orders_spend_execute_orders_redeemer,
    build_void_redeemer,
)
from ..integration.deployed_scripts import DeployedScripts
from ..integration.network_params import NetworkParametersProvider
from ..integration.order_decoder import OrderDatumDecoder
from ..integration.order_verifier import ORDER_ASSET_NAME, OrderVerifier
from ..integration.prepare import MintPreparer, PreparedMint
from ..state.orders import DecodedOrder, Lovelace, MintingHandle, Order, OrderedAsset
from ..state.params import NetworkParameters
from .accounting import LovelaceTally, build_handle_outputs
from .errors import (
    InvalidAssetNameError,
    InvalidOrderInputError,
    MintError,
    UpstreamFetchError,
)
from .identity import asset_name_hex, derive_token_identity
from .order_normal_form import OrderNormalFormError, normalize_orders, require_normal_form
from .settlement import build_settlement_output, compute_required_payment

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MintConfig:
    reserved_fee: Lovelace = MAX_TRANSACTION_FEE
    # Position of the settlement output; the preparer's outputs come first.
    settlement_output_index: int = 1

    def __post_init__(self):
        if not isinstance(self.reserved_fee, int) or isinstance(self.reserved_fee, bool):
            raise TypeError("reserved_fee must be an int")
        if self.reserved_fee < 0:
            raise ValueError(f"reserved_fee must be non-negative: {self.reserved_fee}")
        if self.settlement_output_index < 0:
            raise ValueError("settlement_output_index must be non-negative")


@dataclass(frozen=True)
class MintParams:
    network: Network
    orders: Sequence[Order]
    deployed_scripts: DeployedScripts
    params_provider: NetworkParametersProvider
    decoder: OrderDatumDecoder
    verifier: OrderVerifier
    preparer: MintPreparer
    config: MintConfig = MintConfig()


@dataclass(frozen=True)
class MintResult:
    ok: bool
    builder: Optional[TransactionBuilder] = None
    handles: Tuple[MintingHandle, ...] = ()
    settlement_lovelace: Optional[Lovelace] = None
    error: Optional[MintError] = None


@dataclass
class _MintPlan:
    builder: TransactionBuilder
    handles: List[MintingHandle] = field(default_factory=list)
    settlement_output: Optional[TransactionOutput] = None
    settlement_lovelace: Lovelace = 0


def _decode_orders(orders: Sequence[Order], network: Network, decoder: OrderDatumDecoder) -> List[DecodedOrder]:
    decoded: List[DecodedOrder] = []
    for order in orders:
        try:
            decoded.append(decoder.decode(order.utxo.output.datum, network))
        except Exception as exc:
            raise InvalidOrderInputError(order.input_ref, str(exc) or type(exc).__name__, stage="decode") from exc
    return decoded


def _ordered_assets(orders: Sequence[Order], decoded: Sequence[DecodedOrder]) -> List[OrderedAsset]:
    out: List[OrderedAsset] = []
    seen = {}
    for order, details in zip(orders, decoded):
        try:
            hex_name = asset_name_hex(order.asset_utf8_name)
        except InvalidAssetNameError as exc:
            raise InvalidOrderInputError(order.input_ref, str(exc), stage="identity") from exc
        if hex_name in seen:
            raise InvalidOrderInputError(
                order.input_ref,
                f"handle {order.asset_utf8_name!r} already requested by {seen[hex_name]}",
                stage="identity",
            )
        seen[hex_name] = order.input_ref
        out.append(
            OrderedAsset(
                utf8_name=order.asset_utf8_name,
                hex_name=hex_name,
                destination_address=details.destination_address,
                price=details.price,
            )
        )
    return out


async def _fetch_network_parameters(params: MintParams) -> NetworkParameters:
    try:
        return await params.params_provider.fetch(params.network)
    except Exception as exc:
        raise UpstreamFetchError(
            f"Failed to fetch Network Params: {exc}", stage="network_parameters", cause=exc
        ) from exc


async def _prepare(params: MintParams, ordered_assets: Sequence[OrderedAsset]) -> PreparedMint:
    try:
        prepared = await params.preparer.prepare(params.network, ordered_assets)
    except Exception as exc:
        raise UpstreamFetchError(
            f"Failed to prepare New Mint Transaction: {exc}", stage="prepare", cause=exc
        ) from exc

    seeded = len(prepared.builder.outputs)
    if seeded != params.config.settlement_output_index:
        raise UpstreamFetchError(
            f"prepared transaction has {seeded} outputs, "
            f"expected {params.config.settlement_output_index} before the settlement output",
            stage="prepare",
        )
    return prepared


async def _verify_order(params: MintParams, order: Order) -> None:
    orders_spend = params.deployed_scripts.orders_spend
    if order.utxo.output.address.payment_part != orders_spend.script_hash:
        raise InvalidOrderInputError(order.input_ref, "input is not locked at the orders spend script")
    # add_script_input prefers a script carried by the input itself
    attached = order.utxo.output.script
    if attached is not None and script_hash(attached) != orders_spend.script_hash:
        raise InvalidOrderInputError(order.input_ref, "input carries a script other than the orders spend script")
    try:
        ok, reason = await params.verifier.verify(params.network, order.utxo, orders_spend)
    except Exception as exc:
        raise UpstreamFetchError(
            f"order verification failed for {order.input_ref}: {exc}", stage="verify", cause=exc
        ) from exc
    if not ok:
        raise InvalidOrderInputError(order.input_ref, reason or "rejected")


async def _plan(params: MintParams) -> _MintPlan:
    try:
        orders = normalize_orders(params.orders).orders
        require_normal_form(orders)
    except OrderNormalFormError as exc:
        raise MintError(str(exc), stage="normalize") from exc
    logger.info("%d Orders are picked", len(orders))

    decoded = _decode_orders(orders, params.network, params.decoder)
    ordered_assets = _ordered_assets(orders, decoded)

    network_params = await _fetch_network_parameters(params)
    prepared = await _prepare(params, ordered_assets)

    scripts = params.deployed_scripts
    handle_policy_id = scripts.mint_proxy.policy_id
    plan = _MintPlan(builder=prepared.builder)
    tally = LovelaceTally()

    for order, details in zip(orders, decoded):
        try:
            identity = derive_token_identity(order.asset_utf8_name, handle_policy_id)
        except InvalidAssetNameError as exc:
            raise InvalidOrderInputError(order.input_ref, str(exc), stage="identity") from exc

        await _verify_order(params, order)

        reference_output, user_output = build_handle_outputs(
            identity,
            reference_address=scripts.settings.reference_address,
            destination_address=details.destination_address,
            asset_datum=order.asset_datum,
            params=network_params,
        )
        tally.add(reference_output)
        tally.add(user_output)
        handle = MintingHandle(
            order_utxo=order.utxo,
            destination_address=details.destination_address,
            asset_datum=order.asset_datum,
            reference_output=reference_output,
            user_output=user_output,
            identity=identity,
        )
        plan.handles.append(handle)
        logger.debug("%s commits %d lovelace", order.input_ref, handle.committed_lovelace)

    plan.settlement_lovelace = compute_required_payment(
        prepared.total_price, tally.total, params.config.reserved_fee
    )
    plan.settlement_output = build_settlement_output(
        scripts.settings.payment_address, plan.settlement_lovelace
    )
    logger.debug(
        "settlement %d = %d - %d (%d outputs) - %d",
        plan.settlement_lovelace,
        prepared.total_price,
        tally.total,
        tally.output_count,
        params.config.reserved_fee,
    )
    return plan


def _mint_value(plan: _MintPlan, scripts: DeployedScripts) -> MultiAsset:
    handle_assets = {}
    for handle in plan.handles:
        handle_assets[handle.identity.reference_name] = 1
        handle_assets[handle.identity.user_name] = 1
    return MultiAsset({
        scripts.mint_proxy.policy_id: Asset(handle_assets),
        scripts.orders_mint.policy_id: Asset({ORDER_ASSET_NAME: -len(plan.handles)}),
    })


def _apply(plan: _MintPlan, scripts: DeployedScripts) -> TransactionBuilder:
    builder = plan.builder

    # mint handles, burn order tokens
    builder.add_minting_script(scripts.mint_proxy.script, redeemer=build_void_redeemer())
    builder.add_minting_script(scripts.orders_mint.script, redeemer=build_orders_mint_execute_orders_redeemer())
    minted = _mint_value(plan, scripts)
    builder.mint = minted if builder.mint is None else builder.mint + minted

    for handle in plan.handles:
        builder.add_script_input(
            handle.order_utxo,
            script=scripts.orders_spend.script,
            redeemer=build_orders_spend_execute_orders_redeemer(),
        )

    builder.add_output(plan.settlement_output)
    for handle in plan.handles:
        builder.add_output(handle.reference_output)
        builder.add_output(handle.user_output)
    return builder


async def mint(params: MintParams) -> MintResult:
    """
    Assemble the minting transaction for a batch of orders.

    Returns ``MintResult`` with ``ok=True`` and the (unsigned) builder on
    success, or ``ok=False`` with the ``MintError`` describing the failed
    stage. The builder is never partially mutated.
    """
    try:
        plan = await _plan(params)
    except MintError as exc:
        logger.warning("mint aborted %s", exc.describe())
        return MintResult(ok=False, error=exc)

    builder = _apply(plan, params.deployed_scripts)
    return MintResult(
        ok=True,
        builder=builder,
        handles=tuple(plan.handles),
        settlement_lovelace=plan.settlement_lovelace,
    )


async def mint_or_raise(params: MintParams) -> TransactionBuilder:
    """Like ``mint()`` but raises the ``MintError`` on failure."""
    result = await mint(params)
    if not result.ok:
        raise result.error
    return result.builder
