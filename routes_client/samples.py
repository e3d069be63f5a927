"""
Purpose: The two sample programs.
What it does:

Each sample opens one authenticated channel, sends a fixed sequence of
hardcoded requests and logs what comes back.

Failure policy here is "log and drop": a failed call logs a warning with
the RPC status and returns None instead of raising. That is fine for a
demo; real callers should use RoutesClient / CustomRoutesClient directly
and handle the typed RoutesError subclasses.

Hosts: the routes sample talks to the current Routes service
(google.maps.routing.v2.Routes on routes.googleapis.com). Custom routes only
exist on the older RoutesAlpha service, so that sample goes to
routespreferred.googleapis.com.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from routes_client import builders, messages, reporter
from routes_client.channel import open_channel
from routes_client.client import CustomRoutesClient, RoutesClient
from routes_client.config import ROUTES_HOST, ROUTES_PREFERRED_HOST, ClientSettings
from routes_client.errors import RoutesError

logger = logging.getLogger(__name__)


def run_compute_routes(client: RoutesClient) -> Optional[messages.ComputeRoutesResponse]:
    request = builders.sample_compute_routes_request()
    try:
        reporter.log_request(request)
        response = client.compute_routes(request)
    except RoutesError as error:
        reporter.log_failure(error)
        return None
    reporter.log_response(response)
    return response


def run_compute_route_matrix(client: RoutesClient) -> Optional[List[messages.RouteMatrixElement]]:
    request = builders.sample_compute_route_matrix_request()
    elements: List[messages.RouteMatrixElement] = []
    try:
        reporter.log_request(request)
        with client.compute_route_matrix(request) as stream:
            for element in stream:
                reporter.log_element(element)
                elements.append(element)
    except RoutesError as error:
        # elements already received were logged above; the rest are dropped
        reporter.log_failure(error)
        return None
    return elements


def run_compute_custom_routes(client: CustomRoutesClient) -> Optional[messages.ComputeCustomRoutesResponse]:
    request = builders.sample_compute_custom_routes_request()
    try:
        reporter.log_request(request)
        response = client.compute_custom_routes(request)
    except RoutesError as error:
        reporter.log_failure(error)
        return None
    reporter.log_response(response)
    return response


def main_routes(settings: Optional[ClientSettings] = None) -> None:
    """ComputeRoutes then ComputeRouteMatrix against the Routes service."""
    settings = settings or ClientSettings.from_env(host=ROUTES_HOST)
    logger.info("Running routes sample against %s", settings.target)
    with open_channel(settings) as channel:
        client = RoutesClient(channel, deadline_ms=settings.deadline_ms)
        run_compute_routes(client)
        run_compute_route_matrix(client)


def main_custom_routes(settings: Optional[ClientSettings] = None) -> None:
    """ComputeCustomRoutes against the RoutesAlpha service."""
    settings = settings or ClientSettings.from_env(host=ROUTES_PREFERRED_HOST)
    logger.info("Running custom routes sample against %s", settings.target)
    with open_channel(settings) as channel:
        client = CustomRoutesClient(channel, deadline_ms=settings.deadline_ms)
        run_compute_custom_routes(client)


def routes_entry_point() -> None:
    reporter.configure_logging()
    main_routes()


def custom_routes_entry_point() -> None:
    reporter.configure_logging()
    main_custom_routes()
