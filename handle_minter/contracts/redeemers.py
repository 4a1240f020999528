"""
Redeemer builders.

Each call returns a fresh `Redeemer`: the transaction builder stamps tag and
index onto the object it is given, so redeemers must not be shared between
script purposes.
"""

from __future__ import annotations

from dataclasses import dataclass

from pycardano import PlutusData, Redeemer

from .datums import make_void_data


@dataclass
class OrdersMintExecuteOrders(PlutusData):
    # orders_mint redeemer: MintOrders = 0, ExecuteOrders = 1
    CONSTR_ID = 1


@dataclass
class OrdersSpendExecuteOrders(PlutusData):
    # orders_spend redeemer: ExecuteOrders = 0, CancelOrder = 1
    CONSTR_ID = 0


def build_orders_mint_execute_orders_redeemer() -> Redeemer:
    return Redeemer(OrdersMintExecuteOrders())


def build_orders_spend_execute_orders_redeemer() -> Redeemer:
    return Redeemer(OrdersSpendExecuteOrders())


def build_void_redeemer() -> Redeemer:
    return Redeemer(make_void_data())
