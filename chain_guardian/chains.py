"""EVM chain id normalization and display names."""

import logging
import re
from types import MappingProxyType

logger = logging.getLogger(__name__)

CAIP2_EVM_PREFIX = "eip155:"
DEFAULT_CHAIN_ID = "eip155:1"

EVM_CHAIN_NAMES = MappingProxyType(
    {
        "0x1": "Ethereum Mainnet",
        "0xaa36a7": "Sepolia Testnet",
        "0x89": "Polygon",
        "0x38": "BNB Smart Chain",
        "0xa86a": "Avalanche",
        "0xa": "Optimism",
        "0xa4b1": "Arbitrum",
        "0x2105": "Base",
        "0xe708": "Linea",
        "0xfa": "Fantom",
        "0x19": "Cronos",
    }
)

# Leading decimal reference, e.g. "137" or " 137abc"
_DECIMAL_PREFIX = re.compile(r"\s*([+-]?[0-9]+)")


def normalize_chain_id(chain_id: str) -> str:
    """Normalize a chain id to EVM hex form.

    ``eip155:137`` becomes ``0x89``. Ids already in hex, or in any other
    namespace, are returned unchanged, as are ``eip155:`` ids with no
    decimal reference.
    """
    if not chain_id.startswith(CAIP2_EVM_PREFIX):
        return chain_id
    match = _DECIMAL_PREFIX.match(chain_id[len(CAIP2_EVM_PREFIX):])
    if match is None:
        return chain_id
    try:
        number = int(match.group(1))
    except ValueError:
        # Past the int string conversion limit, no known chain
        return chain_id
    return f"0x{number:x}"


def get_chain_name(chain_id: str) -> str:
    """Get the human-readable name of a chain.

    Args:
        chain_id: CAIP-2 (``eip155:1``) or hex (``0x1``) chain id

    Returns:
        Display name, or ``Unknown Chain (<chain_id>)`` for unmapped ids
    """
    name = EVM_CHAIN_NAMES.get(normalize_chain_id(chain_id))
    if name is None:
        logger.debug("No display name for chain id %r", chain_id)
        return f"Unknown Chain ({chain_id})"
    return name
