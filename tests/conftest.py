import threading
from concurrent import futures

import grpc
import pytest

from routes_client import messages
from routes_client.channel import open_channel
from routes_client.config import ClientSettings
from routes_client.stubs import ROUTES_ALPHA_SERVICE, ROUTES_SERVICE


class FakeRoutesService:
    """
    In-process stand-in for the routing service.
    Records every request and its metadata; can be told to stall, reject or
    break the matrix stream part way through.
    """

    def __init__(self):
        self.requests = []
        self.metadata = []
        self.delay_s = 0.0
        self.abort_code = None
        self.abort_details = ""
        self.elements = []
        self.fail_after = None
        self.release = threading.Event()
        self.element_interval_s = 0.0
        self.sent = 0
        self.stream_done = threading.Event()
        self.matrix_context = None

    def _record(self, request, context):
        self.requests.append(request)
        self.metadata.append([(md.key, md.value) for md in context.invocation_metadata()])
        if self.delay_s:
            self.release.wait(self.delay_s)
        if self.abort_code is not None:
            context.abort(self.abort_code, self.abort_details)

    def ComputeRoutes(self, request, context):
        self._record(request, context)
        return messages.ComputeRoutesResponse(routes=[messages.Route(distance_meters=1000)])

    def ComputeRouteMatrix(self, request, context):
        self.matrix_context = context
        context.add_callback(self.stream_done.set)
        self._record(request, context)
        for index, element in enumerate(self.elements):
            if self.element_interval_s:
                self.release.wait(self.element_interval_s)
            if not context.is_active():
                return
            if self.fail_after is not None and index == self.fail_after:
                context.abort(grpc.StatusCode.UNAVAILABLE, "backend went away")
            self.sent += 1
            yield element

    def ComputeCustomRoutes(self, request, context):
        self._record(request, context)
        return messages.ComputeCustomRoutesResponse(
            routes=[messages.CustomRoute(route=messages.Route(distance_meters=900), token="token-1")]
        )


def matrix_elements(origins: int = 2, destinations: int = 2):
    return [
        messages.RouteMatrixElement(
            origin_index=i,
            destination_index=j,
            distance_meters=1000 * i + 10 * j + 1,
        )
        for i in range(origins)
        for j in range(destinations)
    ]


@pytest.fixture
def make_elements():
    return matrix_elements


@pytest.fixture
def fake_service():
    service = FakeRoutesService()
    service.elements = matrix_elements()
    return service


@pytest.fixture
def routes_server(fake_service):
    server = grpc.server(futures.ThreadPoolExecutor(max_workers=4))
    routes_handlers = {
        "ComputeRoutes": grpc.unary_unary_rpc_method_handler(
            fake_service.ComputeRoutes,
            request_deserializer=messages.ComputeRoutesRequest.deserialize,
            response_serializer=messages.ComputeRoutesResponse.serialize,
        ),
        "ComputeRouteMatrix": grpc.unary_stream_rpc_method_handler(
            fake_service.ComputeRouteMatrix,
            request_deserializer=messages.ComputeRouteMatrixRequest.deserialize,
            response_serializer=messages.RouteMatrixElement.serialize,
        ),
    }
    alpha_handlers = {
        "ComputeCustomRoutes": grpc.unary_unary_rpc_method_handler(
            fake_service.ComputeCustomRoutes,
            request_deserializer=messages.ComputeCustomRoutesRequest.deserialize,
            response_serializer=messages.ComputeCustomRoutesResponse.serialize,
        ),
    }
    server.add_generic_rpc_handlers((
        grpc.method_handlers_generic_handler(ROUTES_SERVICE, routes_handlers),
        grpc.method_handlers_generic_handler(ROUTES_ALPHA_SERVICE, alpha_handlers),
    ))
    port = server.add_insecure_port("127.0.0.1:0")
    server.start()
    yield port
    fake_service.release.set()
    server.stop(None)


@pytest.fixture
def settings(routes_server):
    return ClientSettings(
        api_key="test-key",
        host="127.0.0.1",
        port=routes_server,
        field_mask="routes.duration,routes.distanceMeters",
        deadline_ms=2000,
        use_tls=False,
    )


@pytest.fixture
def channel(settings):
    with open_channel(settings) as channel:
        yield channel
