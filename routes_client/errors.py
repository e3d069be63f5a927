#Purpose: Typed failures for calls to the routing service.
#Every RPC failure (network, deadline, auth, bad request) arrives as a grpc.RpcError.
#This module turns it into one exception per failure family so callers can
#decide what to do (retry on transient errors, stop on auth errors, ...).

from __future__ import annotations

from typing import Dict, Optional, Type

import grpc


class RoutesError(Exception):
    """Base error for a failed call to the routing service."""

    retryable = False

    def __init__(self, code: Optional[grpc.StatusCode], details: str = "", method: str = ""):
        self.code = code
        self.details = details or ""
        self.method = method
        super().__init__(self.status)

    @property
    def status(self) -> str:
        code_name = self.code.name if self.code is not None else "UNKNOWN"
        return f"Status{{code={code_name}, description={self.details}}}"


class DeadlineExceededError(RoutesError):
    """The call did not finish before its deadline."""


class AuthenticationError(RoutesError):
    """The API key is missing, invalid or not allowed to call this method."""


class InvalidArgumentError(RoutesError):
    """The service rejected the request as malformed."""


class UnavailableError(RoutesError):
    """Transient failure; the same request may succeed later."""

    retryable = True


_ERRORS_BY_CODE: Dict[grpc.StatusCode, Type[RoutesError]] = {
    grpc.StatusCode.DEADLINE_EXCEEDED: DeadlineExceededError,
    grpc.StatusCode.UNAUTHENTICATED: AuthenticationError,
    grpc.StatusCode.PERMISSION_DENIED: AuthenticationError,
    grpc.StatusCode.INVALID_ARGUMENT: InvalidArgumentError,
    grpc.StatusCode.UNAVAILABLE: UnavailableError,
    grpc.StatusCode.RESOURCE_EXHAUSTED: UnavailableError,
    grpc.StatusCode.ABORTED: UnavailableError,
}


def from_rpc_error(error: grpc.RpcError, method: str = "") -> RoutesError:
    """
    Map a grpc.RpcError onto the matching RoutesError subclass.

    Errors raised by grpc for a failed call also implement grpc.Call, so
    code() and details() are normally available. Anything else falls back
    to a plain RoutesError with code UNKNOWN.
    """
    code = error.code() if hasattr(error, "code") else grpc.StatusCode.UNKNOWN
    details = error.details() if hasattr(error, "details") else str(error)
    error_cls = _ERRORS_BY_CODE.get(code, RoutesError)
    return error_cls(code, details, method)
