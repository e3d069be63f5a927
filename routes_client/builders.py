"""
Purpose: Request builders.
What it does:

Turns plain coordinates and options into the request messages the routing
service expects. Pure data construction, no I/O.

Nothing is validated here (an out-of-range latitude goes out as-is);
the service answers malformed input with INVALID_ARGUMENT.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from routes_client import messages

# Internal coordinate type: (lat, lng)
LatLngPair = Tuple[float, float]

# (waypoint, per-origin modifiers or None)
MatrixOrigin = Tuple[messages.Waypoint, Optional[messages.RouteModifiers]]

# Sample coordinates (Mountain View, CA)
SAMPLE_ORIGIN: LatLngPair = (37.420761, -122.081356)
SAMPLE_DESTINATION: LatLngPair = (37.420999, -122.086894)
SAMPLE_SECOND_ORIGIN: LatLngPair = (37.403184, -122.097371)
SAMPLE_SECOND_DESTINATION: LatLngPair = (37.383047, -122.044651)
SAMPLE_COST_PER_MINUTE = 1.1


def waypoint_for_lat_lng(lat: float, lng: float) -> messages.Waypoint:
    return messages.Waypoint(
        location=messages.Location(
            lat_lng=messages.LatLng(latitude=lat, longitude=lng),
        )
    )


def route_modifiers(avoid_tolls: bool = False,
                    avoid_highways: bool = False,
                    avoid_ferries: bool = False) -> messages.RouteModifiers:
    return messages.RouteModifiers(
        avoid_tolls=avoid_tolls,
        avoid_highways=avoid_highways,
        avoid_ferries=avoid_ferries,
    )


def compute_routes_request(
        origin: messages.Waypoint,
        destination: messages.Waypoint,
        *,
        travel_mode: messages.RouteTravelMode = messages.RouteTravelMode.DRIVE,
        routing_preference: messages.RoutingPreference = messages.RoutingPreference.TRAFFIC_AWARE,
        compute_alternative_routes: bool = False,
        units: messages.Units = messages.Units.METRIC,
        language_code: str = "en-us",
        modifiers: Optional[messages.RouteModifiers] = None,
        polyline_quality: messages.PolylineQuality = messages.PolylineQuality.OVERVIEW,
) -> messages.ComputeRoutesRequest:
    request = messages.ComputeRoutesRequest(
        origin=origin,
        destination=destination,
        travel_mode=travel_mode,
        routing_preference=routing_preference,
        compute_alternative_routes=compute_alternative_routes,
        units=units,
        language_code=language_code,
        polyline_quality=polyline_quality,
    )
    if modifiers is not None:
        request.route_modifiers = modifiers
    return request


def compute_route_matrix_request(
        origins: Sequence[MatrixOrigin],
        destinations: Sequence[messages.Waypoint],
        *,
        travel_mode: messages.RouteTravelMode = messages.RouteTravelMode.DRIVE,
        routing_preference: messages.RoutingPreference = messages.RoutingPreference.TRAFFIC_AWARE,
) -> messages.ComputeRouteMatrixRequest:
    """
    Builds an origins x destinations matrix request.

    The service streams one element per (origin, destination) pair, so the
    number of results is len(origins) * len(destinations).
    """
    matrix_origins = []
    for waypoint, modifiers in origins:
        origin = messages.RouteMatrixOrigin(waypoint=waypoint)
        if modifiers is not None:
            origin.route_modifiers = modifiers
        matrix_origins.append(origin)

    return messages.ComputeRouteMatrixRequest(
        origins=matrix_origins,
        destinations=[messages.RouteMatrixDestination(waypoint=waypoint) for waypoint in destinations],
        travel_mode=travel_mode,
        routing_preference=routing_preference,
    )


def rate_card(cost_per_minute: float,
              cost_per_km: Optional[float] = None,
              include_tolls: bool = False) -> messages.RouteObjective:
    MonetaryCost = messages.RouteObjective.RateCard.MonetaryCost
    card = messages.RouteObjective.RateCard(
        cost_per_minute=MonetaryCost(value=cost_per_minute),
        include_tolls=include_tolls,
    )
    if cost_per_km is not None:
        card.cost_per_km = MonetaryCost(value=cost_per_km)
    return messages.RouteObjective(rate_card=card)


def compute_custom_routes_request(
        origin: messages.Waypoint,
        destination: messages.Waypoint,
        *,
        route_objective: messages.RouteObjective,
        travel_mode: messages.RouteTravelMode = messages.RouteTravelMode.DRIVE,
        routing_preference: messages.RoutingPreference = messages.RoutingPreference.TRAFFIC_AWARE,
        units: messages.Units = messages.Units.METRIC,
        language_code: str = "en-us",
        modifiers: Optional[messages.RouteModifiers] = None,
        polyline_quality: messages.PolylineQuality = messages.PolylineQuality.OVERVIEW,
) -> messages.ComputeCustomRoutesRequest:
    request = messages.ComputeCustomRoutesRequest(
        origin=origin,
        destination=destination,
        route_objective=route_objective,
        travel_mode=travel_mode,
        routing_preference=routing_preference,
        units=units,
        language_code=language_code,
        polyline_quality=polyline_quality,
    )
    if modifiers is not None:
        request.route_modifiers = modifiers
    return request


#----------------
# Hardcoded sample requests
#----------------

def _sample_modifiers() -> messages.RouteModifiers:
    return route_modifiers(avoid_tolls=False, avoid_highways=True, avoid_ferries=True)


def sample_compute_routes_request() -> messages.ComputeRoutesRequest:
    return compute_routes_request(
        waypoint_for_lat_lng(*SAMPLE_ORIGIN),
        waypoint_for_lat_lng(*SAMPLE_DESTINATION),
        travel_mode=messages.RouteTravelMode.DRIVE,
        routing_preference=messages.RoutingPreference.TRAFFIC_AWARE,
        compute_alternative_routes=True,
        units=messages.Units.METRIC,
        language_code="en-us",
        modifiers=_sample_modifiers(),
        polyline_quality=messages.PolylineQuality.OVERVIEW,
    )


def sample_compute_route_matrix_request() -> messages.ComputeRouteMatrixRequest:
    # 2 origins x 2 destinations -> 4 streamed elements
    return compute_route_matrix_request(
        origins=[
            (waypoint_for_lat_lng(*SAMPLE_ORIGIN), _sample_modifiers()),
            (waypoint_for_lat_lng(*SAMPLE_SECOND_ORIGIN), None),
        ],
        destinations=[
            waypoint_for_lat_lng(*SAMPLE_DESTINATION),
            waypoint_for_lat_lng(*SAMPLE_SECOND_DESTINATION),
        ],
        travel_mode=messages.RouteTravelMode.DRIVE,
        routing_preference=messages.RoutingPreference.TRAFFIC_AWARE,
    )


def sample_compute_custom_routes_request() -> messages.ComputeCustomRoutesRequest:
    return compute_custom_routes_request(
        waypoint_for_lat_lng(*SAMPLE_ORIGIN),
        waypoint_for_lat_lng(*SAMPLE_DESTINATION),
        route_objective=rate_card(cost_per_minute=SAMPLE_COST_PER_MINUTE),
        travel_mode=messages.RouteTravelMode.DRIVE,
        routing_preference=messages.RoutingPreference.TRAFFIC_AWARE,
        units=messages.Units.METRIC,
        language_code="en-us",
        modifiers=_sample_modifiers(),
        polyline_quality=messages.PolylineQuality.OVERVIEW,
    )
