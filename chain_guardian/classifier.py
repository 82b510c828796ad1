"""Address classification and compatibility verdicts."""

import logging

from .chains import get_chain_name
from .models import (
    Bridge,
    ChainMatch,
    CompatibleVerdict,
    IncompatibleVerdict,
    UnrecognizedVerdict,
    Verdict,
)
from .networks import find_profile

logger = logging.getLogger(__name__)


def classify(address: str) -> ChainMatch | None:
    """Classify an address by network format.

    Matchers run in the fixed order of ``networks.NETWORKS`` and the first
    match wins, even when a later grammar would also accept the address.

    Args:
        address: Destination address, used as-is

    Returns:
        A new ChainMatch, or None if no format matches
    """
    profile = find_profile(address)
    if profile is None:
        logger.debug("Address %r matched no known format", address)
        return None

    logger.debug("Address %r classified as %s", address, profile.family.value)
    return ChainMatch(
        network=profile.family,
        name=profile.name,
        is_evm=profile.is_evm,
        bridges=tuple(Bridge(name=name, url=url) for name, url in profile.bridges),
        warning=profile.warning,
    )


def evaluate(current_chain_id: str, to_address: str | None) -> Verdict | None:
    """Decide whether sending to ``to_address`` is safe on the current chain.

    Args:
        current_chain_id: Chain the user is on (``eip155:N`` or ``0x..``)
        to_address: Destination address; None or empty yields no verdict

    Returns:
        CompatibleVerdict, IncompatibleVerdict or UnrecognizedVerdict,
        or None when there is no destination address
    """
    if not to_address:
        return None

    chain_name = get_chain_name(current_chain_id)
    match = classify(to_address)

    if match is None:
        return UnrecognizedVerdict(chain_name=chain_name, address=to_address)

    if match.is_evm:
        return CompatibleVerdict(chain_name=chain_name, address=to_address)

    return IncompatibleVerdict(
        chain_name=chain_name,
        address=to_address,
        network=match.network,
        network_name=match.name,
        warning=match.warning,
        bridges=match.bridges,
    )
