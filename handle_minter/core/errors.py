"""Error types for the minting pipeline.

``mint()`` in ``mint.py`` returns these as values inside ``MintResult``;
``mint_or_raise()`` raises them for callers that prefer exceptions.
"""

from __future__ import annotations

from typing import Optional


class MintError(Exception):
    """Base class. ``stage`` names the pipeline step that failed."""

    stage: str = "mint"

    def __init__(self, message: str, *, stage: Optional[str] = None) -> None:
        if stage is not None:
            self.stage = stage
        super().__init__(message)

    def describe(self) -> str:
        return f"[{self.stage}] {self}"


class EmptyBatchError(MintError):
    """Raised when no order was supplied."""

    stage = "normalize"

    def __init__(self) -> None:
        super().__init__("No Order requested")


class UpstreamFetchError(MintError):
    """Network parameter fetch or transaction preparation failed."""

    def __init__(self, message: str, *, stage: str, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__(message, stage=stage)


class InvalidOrderInputError(MintError):
    """A specific order input was rejected (decode, identity or verification)."""

    def __init__(self, order_input: str, reason: str, *, stage: str = "verify") -> None:
        self.order_input = order_input
        self.reason = reason
        super().__init__(f"Order Input is invalid: {order_input}: {reason}", stage=stage)


class AccountingInconsistencyError(MintError):
    """The settlement amount came out negative; an upstream invariant is broken."""

    stage = "settlement"

    def __init__(self, total_price: int, total_min_lovelace: int, reserved_fee: int) -> None:
        self.total_price = total_price
        self.total_min_lovelace = total_min_lovelace
        self.reserved_fee = reserved_fee
        self.required_payment = total_price - total_min_lovelace - reserved_fee
        super().__init__(
            "settlement amount is negative: "
            f"{total_price} - {total_min_lovelace} - {reserved_fee} = {self.required_payment}"
        )


class InvalidAssetNameError(ValueError):
    """Asset name cannot be turned into a ledger asset name."""
