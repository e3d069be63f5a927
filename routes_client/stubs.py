"""
Blocking client stubs for the routing services.

Same shape as protoc's *_pb2_grpc.py output, but the messages are proto-plus
classes, so (de)serialization goes through their serialize/deserialize
class methods.

Provides:
  - RoutesStub: ComputeRoutes (unary), ComputeRouteMatrix (server streaming)
  - RoutesAlphaStub: ComputeCustomRoutes (unary)
"""

import grpc

from routes_client import messages

ROUTES_SERVICE = "google.maps.routing.v2.Routes"
ROUTES_ALPHA_SERVICE = "google.maps.routes.v1alpha.RoutesAlpha"

COMPUTE_ROUTES = f"/{ROUTES_SERVICE}/ComputeRoutes"
COMPUTE_ROUTE_MATRIX = f"/{ROUTES_SERVICE}/ComputeRouteMatrix"
COMPUTE_CUSTOM_ROUTES = f"/{ROUTES_ALPHA_SERVICE}/ComputeCustomRoutes"


class RoutesStub:
    """Client stub for the Routes service."""

    def __init__(self, channel: grpc.Channel) -> None:
        self.ComputeRoutes = channel.unary_unary(
            COMPUTE_ROUTES,
            request_serializer=messages.ComputeRoutesRequest.serialize,
            response_deserializer=messages.ComputeRoutesResponse.deserialize,
        )
        self.ComputeRouteMatrix = channel.unary_stream(
            COMPUTE_ROUTE_MATRIX,
            request_serializer=messages.ComputeRouteMatrixRequest.serialize,
            response_deserializer=messages.RouteMatrixElement.deserialize,
        )


class RoutesAlphaStub:
    """Client stub for the RoutesAlpha service (custom routes)."""

    def __init__(self, channel: grpc.Channel) -> None:
        self.ComputeCustomRoutes = channel.unary_unary(
            COMPUTE_CUSTOM_ROUTES,
            request_serializer=messages.ComputeCustomRoutesRequest.serialize,
            response_deserializer=messages.ComputeCustomRoutesResponse.deserialize,
        )
