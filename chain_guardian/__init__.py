"""Chain Guardian.

Detects when a transaction's destination address belongs to a different
network than the EVM chain the user is sending on (a Bitcoin or Solana
address pasted into an Ethereum transfer, for example) and returns a
structured verdict with bridge suggestions.

Usage:
    from chain_guardian import evaluate, render_verdict

    verdict = evaluate("eip155:1", "7xKXtg2CW87d97TXJSDpbD5jBkheTqA83TZRuJosgAsU")
    if verdict is not None and verdict.is_blocking:
        print(render_verdict(verdict))
"""

from .chains import EVM_CHAIN_NAMES, get_chain_name, normalize_chain_id
from .classifier import classify, evaluate
from .exceptions import ChainGuardianError, InvalidParamsError, MethodNotFoundError
from .handlers import on_rpc_request, on_transaction, preview_warning
from .models import (
    Bridge,
    ChainMatch,
    CompatibleVerdict,
    IncompatibleVerdict,
    PreviewWarningParams,
    TransactionRequest,
    UnrecognizedVerdict,
    Verdict,
)
from .networks import (
    NETWORKS,
    NetworkFamily,
    NetworkProfile,
    detect_network,
    is_bitcoin_address,
    is_cardano_address,
    is_cosmos_address,
    is_evm_address,
    is_litecoin_address,
    is_polkadot_address,
    is_solana_address,
    is_stellar_address,
    is_tron_address,
    is_xrp_address,
)
from .render import render_verdict

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Classification
    "classify",
    "evaluate",
    # Chain ids
    "EVM_CHAIN_NAMES",
    "get_chain_name",
    "normalize_chain_id",
    # Handlers
    "on_transaction",
    "on_rpc_request",
    "preview_warning",
    # Exceptions
    "ChainGuardianError",
    "MethodNotFoundError",
    "InvalidParamsError",
    # Models
    "Bridge",
    "ChainMatch",
    "CompatibleVerdict",
    "IncompatibleVerdict",
    "UnrecognizedVerdict",
    "Verdict",
    "TransactionRequest",
    "PreviewWarningParams",
    # Network utilities
    "NETWORKS",
    "NetworkFamily",
    "NetworkProfile",
    "detect_network",
    "is_evm_address",
    "is_bitcoin_address",
    "is_tron_address",
    "is_xrp_address",
    "is_litecoin_address",
    "is_cardano_address",
    "is_cosmos_address",
    "is_polkadot_address",
    "is_stellar_address",
    "is_solana_address",
    # Presentation
    "render_verdict",
]
