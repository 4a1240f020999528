"""
Network parameters consumed by the value accountant.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NetworkParameters:
    """
    Subset of protocol parameters the minter needs.

    Attributes:
        coins_per_utxo_byte: Lovelace charged per serialized output byte
    """
    coins_per_utxo_byte: int

    def __post_init__(self):
        value = self.coins_per_utxo_byte
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"coins_per_utxo_byte must be an int, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"coins_per_utxo_byte must be non-negative: {value}")
