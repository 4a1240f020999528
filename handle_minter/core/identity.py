"""
Token identity derivation.

For a handle name `n` minted under policy `p`:
    reference token = p . (PREFIX_100 ++ hex(utf8(n)))
    user token      = p . (PREFIX_222 ++ hex(utf8(n)))

Pure and deterministic: the same (policy, name) always yields the same pair.
Other components rely on this to locate a handle's reference token later.
"""

from __future__ import annotations

from pycardano import AssetName, ScriptHash

from ..constants import MAX_ASSET_NAME_BYTES, PREFIX_100, PREFIX_222
from ..state.orders import TokenIdentity
from .errors import InvalidAssetNameError


def asset_name_hex(asset_utf8_name: str) -> str:
    """Hex encoding of the UTF-8 bytes of a handle name."""
    if not isinstance(asset_utf8_name, str) or not asset_utf8_name:
        raise InvalidAssetNameError("asset name must be a non-empty string")
    try:
        raw = asset_utf8_name.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidAssetNameError(f"asset name is not valid UTF-8: {asset_utf8_name!r}") from exc
    return raw.hex()


def _prefixed_asset_name(prefix: str, hex_name: str) -> AssetName:
    raw = bytes.fromhex(prefix + hex_name)
    if len(raw) > MAX_ASSET_NAME_BYTES:
        raise InvalidAssetNameError(
            f"asset name too long: {len(raw)} bytes > {MAX_ASSET_NAME_BYTES}"
        )
    return AssetName(raw)


def derive_token_identity(asset_utf8_name: str, policy_id: ScriptHash) -> TokenIdentity:
    """
    Derive the reference/user asset names for a handle.

    Raises:
        InvalidAssetNameError: If the name is empty, not encodable, or too long
    """
    hex_name = asset_name_hex(asset_utf8_name)
    return TokenIdentity(
        policy_id=policy_id,
        reference_name=_prefixed_asset_name(PREFIX_100, hex_name),
        user_name=_prefixed_asset_name(PREFIX_222, hex_name),
    )
