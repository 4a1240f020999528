"""
Deployed script registry.

Static configuration for one assembly call: the three Plutus scripts the
minting transaction touches, plus the protocol's addresses.

YAML layout (`load_deployed_scripts`):

    network: testnet            # or mainnet
    scripts:
      mint_proxy:   {version: 2, cbor_hex: "..."}
      orders_spend: {version: 2, cbor_hex: "..."}
      orders_mint:  {version: 2, cbor_hex: "..."}
    settings:
      reference_address: addr_test1...   # where reference tokens are locked
      payment_address: addr_test1...     # where the settlement is paid
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Union

import yaml
from pycardano import (
    Address,
    Network,
    PlutusV1Script,
    PlutusV2Script,
    PlutusV3Script,
    ScriptHash,
    plutus_script_hash,
)

PlutusScript = Union[PlutusV1Script, PlutusV2Script, PlutusV3Script]

_SCRIPT_TYPES: Dict[int, type] = {
    1: PlutusV1Script,
    2: PlutusV2Script,
    3: PlutusV3Script,
}

_NETWORKS: Dict[str, Network] = {
    "mainnet": Network.MAINNET,
    "testnet": Network.TESTNET,
}


class DeploymentConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ScriptDetails:
    """A deployed Plutus script; its hash doubles as validator hash and policy id."""
    script: PlutusScript

    @property
    def script_hash(self) -> ScriptHash:
        return plutus_script_hash(self.script)

    @property
    def policy_id(self) -> ScriptHash:
        return self.script_hash

    def address(self, network: Network) -> Address:
        return Address(payment_part=self.script_hash, network=network)


@dataclass(frozen=True)
class ProtocolSettings:
    reference_address: Address
    payment_address: Address


@dataclass(frozen=True)
class DeployedScripts:
    network: Network
    mint_proxy: ScriptDetails
    orders_spend: ScriptDetails
    orders_mint: ScriptDetails
    settings: ProtocolSettings


def _require_mapping(value: Any, *, name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DeploymentConfigError(f"{name} must be a mapping")
    return value


def _parse_script(value: Any, *, name: str) -> ScriptDetails:
    entry = _require_mapping(value, name=name)
    version = entry.get("version", 2)
    script_type = _SCRIPT_TYPES.get(version) if isinstance(version, int) else None
    if script_type is None:
        raise DeploymentConfigError(f"{name}.version must be one of {sorted(_SCRIPT_TYPES)}")
    cbor_hex = entry.get("cbor_hex")
    if not isinstance(cbor_hex, str) or not cbor_hex:
        raise DeploymentConfigError(f"{name}.cbor_hex must be a non-empty hex string")
    try:
        raw = bytes.fromhex(cbor_hex)
    except ValueError as exc:
        raise DeploymentConfigError(f"{name}.cbor_hex must be valid hex") from exc
    return ScriptDetails(script=script_type(raw))


def _parse_address(value: Any, *, name: str, network: Network) -> Address:
    if not isinstance(value, str) or not value:
        raise DeploymentConfigError(f"{name} must be a bech32 address string")
    try:
        address = Address.from_primitive(value)
    except Exception as exc:
        raise DeploymentConfigError(f"{name} is not a valid address: {exc}") from exc
    if address.network != network:
        raise DeploymentConfigError(f"{name} is on {address.network.name}, expected {network.name}")
    return address


def deployed_scripts_from_dict(data: Mapping[str, Any]) -> DeployedScripts:
    data = _require_mapping(data, name="deployment")
    network_name = data.get("network")
    network = _NETWORKS.get(network_name) if isinstance(network_name, str) else None
    if network is None:
        raise DeploymentConfigError(f"network must be one of {sorted(_NETWORKS)}")

    scripts = _require_mapping(data.get("scripts"), name="scripts")
    settings = _require_mapping(data.get("settings"), name="settings")
    return DeployedScripts(
        network=network,
        mint_proxy=_parse_script(scripts.get("mint_proxy"), name="scripts.mint_proxy"),
        orders_spend=_parse_script(scripts.get("orders_spend"), name="scripts.orders_spend"),
        orders_mint=_parse_script(scripts.get("orders_mint"), name="scripts.orders_mint"),
        settings=ProtocolSettings(
            reference_address=_parse_address(
                settings.get("reference_address"), name="settings.reference_address", network=network
            ),
            payment_address=_parse_address(
                settings.get("payment_address"), name="settings.payment_address", network=network
            ),
        ),
    )


def load_deployed_scripts(path: Union[str, Path]) -> DeployedScripts:
    """Load a deployment description from YAML."""
    path = Path(path)
    try:
        obj = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise DeploymentConfigError(f"invalid YAML in {path}: {exc}") from exc
    return deployed_scripts_from_dict(obj)
