"""
Protocol constants shared by the minting pipeline.
"""

# CIP-68 asset name labels: (100) reference token, (222) user token.
PREFIX_100 = "000643b0"
PREFIX_222 = "000de140"

# Asset name of the order-proof token minted by the orders policy ("ORDER").
ORDER_ASSET_HEX_NAME = "4f52444552"

# Upper bound reserved for the transaction fee (lovelace). The real fee is
# computed later by the caller's fee pass.
MAX_TRANSACTION_FEE = 2_000_000

# Ledger limit on asset name length (bytes).
MAX_ASSET_NAME_BYTES = 32
