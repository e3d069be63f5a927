"""
Purpose: Request/response schema used by the sample clients.

ComputeRoutes and ComputeRouteMatrix use the published Routes API messages
from google-maps-routing (google.maps.routing_v2).

ComputeCustomRoutes only exists on the RoutesAlpha service, which has no
published Python package, so its messages are declared here with proto-plus.
Waypoints, modifiers, enums and routes reuse the routing_v2 types; their
field numbers match the alpha schema on the wire.
"""

from __future__ import annotations

import proto
from google.maps import routing_v2
from google.type import latlng_pb2

# re-exported so the rest of the package has one place to import the schema from
LatLng = latlng_pb2.LatLng
Location = routing_v2.Location
Waypoint = routing_v2.Waypoint
RouteModifiers = routing_v2.RouteModifiers
RouteTravelMode = routing_v2.RouteTravelMode
RoutingPreference = routing_v2.RoutingPreference
Units = routing_v2.Units
PolylineQuality = routing_v2.PolylineQuality
ComputeRoutesRequest = routing_v2.ComputeRoutesRequest
ComputeRoutesResponse = routing_v2.ComputeRoutesResponse
ComputeRouteMatrixRequest = routing_v2.ComputeRouteMatrixRequest
RouteMatrixOrigin = routing_v2.RouteMatrixOrigin
RouteMatrixDestination = routing_v2.RouteMatrixDestination
RouteMatrixElement = routing_v2.RouteMatrixElement
Route = routing_v2.Route
FallbackInfo = routing_v2.FallbackInfo


__protobuf__ = proto.module(
    package="google.maps.routes.v1",
    manifest={
        "RouteObjective",
        "ComputeCustomRoutesRequest",
        "CustomRoute",
        "ComputeCustomRoutesResponse",
    },
)


class RouteObjective(proto.Message):
    """What the service should optimize a custom route for."""

    class RateCard(proto.Message):
        """Cost model: the route with the lowest total cost wins."""

        class MonetaryCost(proto.Message):
            value = proto.Field(proto.DOUBLE, number=1)

        cost_per_minute = proto.Field(proto.MESSAGE, number=2, message=MonetaryCost)
        cost_per_km = proto.Field(proto.MESSAGE, number=3, message=MonetaryCost)
        include_tolls = proto.Field(proto.BOOL, number=4)

    rate_card = proto.Field(proto.MESSAGE, number=1, oneof="objective", message=RateCard)


class ComputeCustomRoutesRequest(proto.Message):
    origin = proto.Field(proto.MESSAGE, number=1, message=routing_v2.Waypoint)
    destination = proto.Field(proto.MESSAGE, number=2, message=routing_v2.Waypoint)
    intermediates = proto.RepeatedField(proto.MESSAGE, number=3, message=routing_v2.Waypoint)
    travel_mode = proto.Field(proto.ENUM, number=4, enum=routing_v2.RouteTravelMode)
    routing_preference = proto.Field(proto.ENUM, number=5, enum=routing_v2.RoutingPreference)
    polyline_quality = proto.Field(proto.ENUM, number=6, enum=routing_v2.PolylineQuality)
    language_code = proto.Field(proto.STRING, number=9)
    units = proto.Field(proto.ENUM, number=10, enum=routing_v2.Units)
    route_modifiers = proto.Field(proto.MESSAGE, number=11, message=routing_v2.RouteModifiers)
    route_objective = proto.Field(proto.MESSAGE, number=12, message=RouteObjective)


class CustomRoute(proto.Message):
    route = proto.Field(proto.MESSAGE, number=11, message=routing_v2.Route)
    # opaque; can be handed to the Navigation SDK to rebuild the route
    token = proto.Field(proto.STRING, number=12)


class ComputeCustomRoutesResponse(proto.Message):
    fastest_route = proto.Field(proto.MESSAGE, number=5, message=CustomRoute)
    shortest_route = proto.Field(proto.MESSAGE, number=6, message=CustomRoute)
    routes = proto.RepeatedField(proto.MESSAGE, number=7, message=CustomRoute)
    fallback_info = proto.Field(proto.MESSAGE, number=8, message=routing_v2.FallbackInfo)


__all__ = tuple(sorted(__protobuf__.manifest)) + (
    "LatLng",
    "Location",
    "Waypoint",
    "RouteModifiers",
    "RouteTravelMode",
    "RoutingPreference",
    "Units",
    "PolylineQuality",
    "ComputeRoutesRequest",
    "ComputeRoutesResponse",
    "ComputeRouteMatrixRequest",
    "RouteMatrixOrigin",
    "RouteMatrixDestination",
    "RouteMatrixElement",
    "Route",
    "FallbackInfo",
)
