#Purpose: The stub invoker.
#Sole responsibility: send a built request over the authenticated channel with a
#per-call deadline and hand back the response (or the stream of matrix elements).
#Failures come out as typed RoutesError subclasses; deciding what to do with them
#(log and drop, retry, ...) is up to the caller.

from __future__ import annotations

import logging

import grpc

from routes_client import messages
from routes_client.config import DEFAULT_DEADLINE_MS
from routes_client.errors import from_rpc_error
from routes_client.stubs import (
    COMPUTE_CUSTOM_ROUTES,
    COMPUTE_ROUTE_MATRIX,
    COMPUTE_ROUTES,
    RoutesAlphaStub,
    RoutesStub,
)

logger = logging.getLogger(__name__)


class _DeadlineBoundClient:

    def __init__(self, deadline_ms: int = DEFAULT_DEADLINE_MS):
        self.deadline_ms = deadline_ms

    @property
    def timeout(self) -> float:
        """Per-call deadline in seconds, counted from when the call is issued."""
        return self.deadline_ms / 1000.0


class RoutesClient(_DeadlineBoundClient):
    """
    Blocking client for the Routes service.

    Usage:
        with open_channel(settings) as channel:
            client = RoutesClient(channel)
            response = client.compute_routes(request)
    """

    def __init__(self, channel: grpc.Channel, deadline_ms: int = DEFAULT_DEADLINE_MS):
        super().__init__(deadline_ms)
        self._stub = RoutesStub(channel)

    def compute_routes(self, request: messages.ComputeRoutesRequest) -> messages.ComputeRoutesResponse:
        try:
            return self._stub.ComputeRoutes(request, timeout=self.timeout)
        except grpc.RpcError as error:
            raise from_rpc_error(error, COMPUTE_ROUTES) from error

    def compute_route_matrix(
            self, request: messages.ComputeRouteMatrixRequest
    ) -> MatrixStream:
        """
        Issues the call right away and returns a MatrixStream over the elements,
        in the order the service streams them. A failure part way through the
        stream is raised (as a RoutesError) on the next read.

        A reader that stops early should close() the stream (or use it in a
        with block); otherwise the RPC stays open until it hits its deadline
        or the call object is garbage-collected.
        """
        try:
            call = self._stub.ComputeRouteMatrix(request, timeout=self.timeout)
        except grpc.RpcError as error:
            raise from_rpc_error(error, COMPUTE_ROUTE_MATRIX) from error
        return MatrixStream(call, COMPUTE_ROUTE_MATRIX)


class CustomRoutesClient(_DeadlineBoundClient):
    """Blocking client for the RoutesAlpha service."""

    def __init__(self, channel: grpc.Channel, deadline_ms: int = DEFAULT_DEADLINE_MS):
        super().__init__(deadline_ms)
        self._stub = RoutesAlphaStub(channel)

    def compute_custom_routes(
            self, request: messages.ComputeCustomRoutesRequest
    ) -> messages.ComputeCustomRoutesResponse:
        try:
            return self._stub.ComputeCustomRoutes(request, timeout=self.timeout)
        except grpc.RpcError as error:
            raise from_rpc_error(error, COMPUTE_CUSTOM_ROUTES) from error


class MatrixStream:
    """
    Forward-only iterator over a server-streaming call.
    close() cancels the call; it is a no-op once the stream has finished.
    """

    def __init__(self, call, method: str):
        self._call = call
        self.method = method
        self.count = 0

    def __iter__(self) -> MatrixStream:
        return self

    def __next__(self) -> messages.RouteMatrixElement:
        try:
            element = next(self._call)
        except StopIteration:
            logger.debug("%s: read %d stream element(s)", self.method, self.count)
            raise
        except grpc.RpcError as error:
            raise from_rpc_error(error, self.method) from error
        self.count += 1
        return element

    def close(self) -> None:
        self._call.cancel()

    def __enter__(self) -> MatrixStream:
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


__all__ = ["RoutesClient", "CustomRoutesClient", "MatrixStream"]
