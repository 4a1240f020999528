"""
Collaborators of the minting pipeline: parameters, datums, verification,
script registry and transaction preparation.
"""

from .deployed_scripts import (
    DeployedScripts,
    DeploymentConfigError,
    ProtocolSettings,
    ScriptDetails,
    deployed_scripts_from_dict,
    load_deployed_scripts,
)
from .network_params import (
    ChainContextParametersProvider,
    NetworkParametersError,
    NetworkParametersProvider,
    StaticParametersProvider,
)
from .order_decoder import OrderDatumDecoder, OrderDatumError, PlutusOrderDatumDecoder
from .order_verifier import OrderVerifier, ScriptOrderVerifier
from .prepare import MintPreparer, PreparedMint

__all__ = [
    "DeployedScripts",
    "DeploymentConfigError",
    "ProtocolSettings",
    "ScriptDetails",
    "deployed_scripts_from_dict",
    "load_deployed_scripts",
    "ChainContextParametersProvider",
    "NetworkParametersError",
    "NetworkParametersProvider",
    "StaticParametersProvider",
    "OrderDatumDecoder",
    "OrderDatumError",
    "PlutusOrderDatumDecoder",
    "OrderVerifier",
    "ScriptOrderVerifier",
    "MintPreparer",
    "PreparedMint",
]
