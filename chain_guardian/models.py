"""Pydantic models for Chain Guardian."""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from .networks import NetworkFamily


class Bridge(BaseModel):
    """A cross-chain bridge service suggested for a non-EVM destination."""

    model_config = ConfigDict(frozen=True)

    name: str
    url: str

    def __str__(self) -> str:
        return f"{self.name} ({self.url})"


class ChainMatch(BaseModel):
    model_config = ConfigDict(frozen=True)

    network: NetworkFamily
    name: str
    is_evm: bool
    bridges: tuple[Bridge, ...] = ()
    warning: str = ""


# Verdict models
class CompatibleVerdict(BaseModel):
    """Destination address format is usable on the current EVM chain."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["compatible"] = "compatible"
    chain_name: str
    address: str

    @property
    def is_blocking(self) -> bool:
        return False


class IncompatibleVerdict(BaseModel):
    """Destination belongs to a non-EVM network; funds would be lost."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["incompatible"] = "incompatible"
    chain_name: str
    address: str
    network: NetworkFamily
    network_name: str
    warning: str
    bridges: tuple[Bridge, ...] = ()

    @property
    def is_blocking(self) -> bool:
        return True


class UnrecognizedVerdict(BaseModel):
    """Destination format is unknown. Advisory only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unrecognized"] = "unrecognized"
    chain_name: str
    address: str

    @property
    def is_blocking(self) -> bool:
        return False


Verdict = Annotated[
    Union[CompatibleVerdict, IncompatibleVerdict, UnrecognizedVerdict],
    Field(discriminator="kind"),
]


# Request models
class TransactionRequest(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    from_address: str | None = Field(default=None, alias="from")
    to: str | None = None
    value: str | None = None
    data: str | None = None


class PreviewWarningParams(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    address: str
    chain_id: str = Field(alias="chainId")
