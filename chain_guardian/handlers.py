"""Host entry points: transaction insight and preview requests."""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .classifier import evaluate
from .exceptions import InvalidParamsError, MethodNotFoundError
from .models import IncompatibleVerdict, PreviewWarningParams, TransactionRequest, Verdict

logger = logging.getLogger(__name__)

PREVIEW_WARNING = "previewWarning"


def on_transaction(
    transaction: TransactionRequest | Mapping[str, Any],
    chain_id: str,
) -> Verdict | None:
    """Evaluate an outgoing transaction before the user confirms it.

    Args:
        transaction: Transaction fields (``to`` is the only one read)
        chain_id: Chain the transaction is being sent on

    Returns:
        Verdict to display, or None if the transaction has no destination
    """
    if isinstance(transaction, TransactionRequest):
        to_address = transaction.to
    else:
        to_address = transaction.get("to")

    verdict = evaluate(chain_id, to_address)
    if verdict is not None and verdict.is_blocking:
        logger.warning(
            "Transaction on %s targets a %s address: %s",
            verdict.chain_name,
            verdict.network_name,
            verdict.address,
        )
    return verdict


def preview_warning(params: PreviewWarningParams | Mapping[str, Any]) -> IncompatibleVerdict | None:
    """Return the warning that would be shown for an address, if any."""
    if not isinstance(params, PreviewWarningParams):
        try:
            params = PreviewWarningParams.model_validate(params)
        except ValidationError as e:
            raise InvalidParamsError(
                f"Invalid params for {PREVIEW_WARNING}",
                errors=e.errors(include_url=False),
            ) from e

    verdict = evaluate(params.chain_id, params.address)
    if isinstance(verdict, IncompatibleVerdict):
        return verdict
    return None


def on_rpc_request(method: str, params: Mapping[str, Any] | None = None) -> Verdict | None:
    """Dispatch a host RPC request.

    Raises:
        MethodNotFoundError: If the method is not supported
        InvalidParamsError: If params do not validate
    """
    logger.debug("RPC request %r", method)
    if method == PREVIEW_WARNING:
        return preview_warning(params or {})
    raise MethodNotFoundError(method)
