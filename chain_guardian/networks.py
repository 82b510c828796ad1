"""Address format detection for supported network families.

Matchers are evaluated in the order of ``NETWORKS``. Several grammars overlap
(Solana's base58 range covers most Bitcoin, Litecoin, XRP and Tron strings),
so the first match wins and Solana must stay last among non-EVM networks.
"""

import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

import base58

# Bitcoin base58 alphabet: no 0, O, I or l
BASE58_ALPHABET = base58.BITCOIN_ALPHABET.decode("ascii")
_B58 = f"[{BASE58_ALPHABET}]"

_EVM = re.compile(r"0x[0-9a-fA-F]{40}")
_BITCOIN = (
    re.compile(rf"1{_B58}{{25,34}}"),
    re.compile(rf"3{_B58}{{25,34}}"),
    re.compile(r"bc1[a-z0-9]{39,59}"),
)
_TRON = re.compile(r"T[a-zA-Z0-9]{33}")
_XRP = re.compile(rf"r{_B58}{{24,34}}")
_LITECOIN = (
    re.compile(rf"L{_B58}{{26,33}}"),
    re.compile(rf"M{_B58}{{26,33}}"),
    re.compile(r"ltc1[a-z0-9]{39,59}"),
)
_CARDANO = (
    re.compile(r"addr1[a-z0-9]{50,100}"),
    re.compile(rf"Ae2{_B58}{{55,60}}"),
)
_COSMOS = re.compile(r"cosmos1[a-z0-9]{38}")
_POLKADOT = re.compile(rf"1{_B58}{{47}}")
_STELLAR = re.compile(r"G[A-Z0-9]{55}")
_SOLANA = re.compile(rf"{_B58}{{32,44}}")


class NetworkFamily(Enum):
    """Network families recognized from address format."""

    EVM = "evm"
    BITCOIN = "bitcoin"
    TRON = "tron"
    XRP = "xrp"
    LITECOIN = "litecoin"
    CARDANO = "cardano"
    COSMOS = "cosmos"
    POLKADOT = "polkadot"
    STELLAR = "stellar"
    SOLANA = "solana"
    UNRECOGNIZED = "unrecognized"


def _matches(address: str, *patterns: re.Pattern[str]) -> bool:
    if not isinstance(address, str):
        return False
    return any(p.fullmatch(address) for p in patterns)


def is_evm_address(address: str) -> bool:
    """Check if address is EVM format (0x-prefixed, 40 hex digits)."""
    return _matches(address, _EVM)


def is_bitcoin_address(address: str) -> bool:
    """Check if address is Bitcoin format (legacy, P2SH or bech32)."""
    return _matches(address, *_BITCOIN)


def is_tron_address(address: str) -> bool:
    """Check if address is Tron format (T-prefixed, 34 chars)."""
    return _matches(address, _TRON)


def is_xrp_address(address: str) -> bool:
    """Check if address is XRP Ledger format (r-prefixed, 25-35 chars)."""
    return _matches(address, _XRP)


def is_litecoin_address(address: str) -> bool:
    """Check if address is Litecoin format (L/M base58 or ltc1 bech32)."""
    return _matches(address, *_LITECOIN)


def is_cardano_address(address: str) -> bool:
    """Check if address is Cardano format (Shelley addr1 or Byron Ae2)."""
    return _matches(address, *_CARDANO)


def is_cosmos_address(address: str) -> bool:
    """Check if address is Cosmos Hub format (cosmos1 + 38 chars)."""
    return _matches(address, _COSMOS)


def is_polkadot_address(address: str) -> bool:
    """Check if address is Polkadot SS58 format (1-prefixed, 48 chars)."""
    return _matches(address, _POLKADOT)


def is_stellar_address(address: str) -> bool:
    """Check if address is Stellar format (G-prefixed, 56 chars)."""
    return _matches(address, _STELLAR)


def is_solana_address(address: str) -> bool:
    """Check if address is Solana format (Base58, 32-44 chars)."""
    return _matches(address, _SOLANA)


@dataclass(frozen=True)
class NetworkProfile:
    """A network family, its address matcher and the advice shown for it."""

    family: NetworkFamily
    name: str
    matcher: Callable[[str], bool]
    is_evm: bool = False
    bridges: tuple[tuple[str, str], ...] = ()
    warning: str = ""


def _not_evm(network: str, article: str = "a", label: str | None = None) -> str:
    return (
        f"This looks like {article} {label or network} address. "
        f"{network} is not compatible with EVM chains."
    )


# Evaluation order. First match wins.
NETWORKS: tuple[NetworkProfile, ...] = (
    NetworkProfile(
        NetworkFamily.EVM,
        "EVM (Ethereum / Polygon / BSC / etc.)",
        is_evm_address,
        is_evm=True,
    ),
    NetworkProfile(
        NetworkFamily.BITCOIN,
        "Bitcoin",
        is_bitcoin_address,
        bridges=(("Thorchain", "thorchain.org"), ("RenBridge", "renproject.io")),
        warning=_not_evm("Bitcoin"),
    ),
    NetworkProfile(
        NetworkFamily.TRON,
        "Tron",
        is_tron_address,
        bridges=(("Sun.io", "sun.io"), ("Swft Bridge", "swft.pro")),
        warning=_not_evm("Tron"),
    ),
    NetworkProfile(
        NetworkFamily.XRP,
        "XRP (Ripple)",
        is_xrp_address,
        bridges=(("Thorchain", "thorchain.org"), ("Bitrue", "bitrue.com")),
        warning=_not_evm("XRP", article="an", label="XRP Ledger"),
    ),
    NetworkProfile(
        NetworkFamily.LITECOIN,
        "Litecoin",
        is_litecoin_address,
        bridges=(("Thorchain", "thorchain.org"),),
        warning=_not_evm("Litecoin"),
    ),
    NetworkProfile(
        NetworkFamily.CARDANO,
        "Cardano",
        is_cardano_address,
        bridges=(("Milkomeda", "milkomeda.com"), ("Axelar", "axelar.network")),
        warning=_not_evm("Cardano"),
    ),
    NetworkProfile(
        NetworkFamily.COSMOS,
        "Cosmos",
        is_cosmos_address,
        bridges=(("Gravity Bridge", "gravitybridge.net"), ("Axelar", "axelar.network")),
        warning=_not_evm("Cosmos"),
    ),
    NetworkProfile(
        NetworkFamily.POLKADOT,
        "Polkadot",
        is_polkadot_address,
        bridges=(("Snowbridge", "snowbridge.network"), ("Wormhole", "wormhole.com")),
        warning=_not_evm("Polkadot"),
    ),
    NetworkProfile(
        NetworkFamily.STELLAR,
        "Stellar",
        is_stellar_address,
        bridges=(("Allbridge", "allbridge.io"), ("StellarTerm", "stellarterm.com")),
        warning=_not_evm("Stellar"),
    ),
    # Broadest grammar, keep last
    NetworkProfile(
        NetworkFamily.SOLANA,
        "Solana",
        is_solana_address,
        bridges=(("Wormhole", "wormhole.com"), ("Allbridge", "allbridge.io")),
        warning=(
            "This looks like a Solana address. "
            "Solana uses a completely different network than EVM chains."
        ),
    ),
)


def find_profile(address: str) -> NetworkProfile | None:
    """Return the first profile whose matcher accepts the address."""
    for profile in NETWORKS:
        if profile.matcher(address):
            return profile
    return None


def detect_network(address: str) -> NetworkFamily:
    """Detect blockchain network family from address format.

    Args:
        address: Address string, used as-is (no trimming or case folding)

    Returns:
        The matching NetworkFamily, or NetworkFamily.UNRECOGNIZED
    """
    profile = find_profile(address)
    if profile is None:
        return NetworkFamily.UNRECOGNIZED
    return profile.family
