"""Custom exceptions for Chain Guardian."""

from typing import Any


class ChainGuardianError(Exception):
    """Base exception for Chain Guardian errors."""

    def __init__(self, message: str, code: int | None = None, data: Any = None):
        super().__init__(message)
        self.code = code
        self.data = data


class MethodNotFoundError(ChainGuardianError):
    """Request method is not supported (-32601)."""

    def __init__(self, method: str, message: str = "Method not found."):
        super().__init__(message, code=-32601, data={"method": method})
        self.method = method


class InvalidParamsError(ChainGuardianError):
    """Request params failed validation (-32602)."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(message, code=-32602, data=errors)
        self.errors = errors or []
