import logging

import grpc

from routes_client import samples
from routes_client.client import CustomRoutesClient, RoutesClient
from routes_client.interceptor import API_KEY_HEADER


def test_compute_routes_sample_logs_request_and_response(channel, caplog):
    caplog.set_level(logging.INFO)

    response = samples.run_compute_routes(RoutesClient(channel))

    assert response is not None
    assert "About to send request:" in caplog.text
    assert "Response:" in caplog.text


def test_auth_rejection_is_logged_and_dropped(channel, fake_service, caplog):
    fake_service.abort_code = grpc.StatusCode.UNAUTHENTICATED
    fake_service.abort_details = "API key not valid."
    caplog.set_level(logging.INFO)

    # must not raise
    result = samples.run_compute_routes(RoutesClient(channel))

    assert result is None
    warnings = [
        record for record in caplog.records
        if record.levelno == logging.WARNING and record.name.startswith("routes_client")
    ]
    assert len(warnings) == 1
    assert "RPC failed: Status{code=UNAUTHENTICATED" in warnings[0].getMessage()


def test_matrix_sample_logs_every_element(channel, caplog):
    caplog.set_level(logging.INFO)

    elements = samples.run_compute_route_matrix(RoutesClient(channel))

    assert len(elements) == 4
    assert caplog.text.count("Element response:") == 4


def test_matrix_sample_drops_a_broken_stream(channel, fake_service, caplog):
    fake_service.fail_after = 1
    caplog.set_level(logging.INFO)

    assert samples.run_compute_route_matrix(RoutesClient(channel)) is None
    assert caplog.text.count("Element response:") == 1
    assert "RPC failed: Status{code=UNAVAILABLE" in caplog.text


def test_custom_routes_sample_deadline_is_logged_and_dropped(channel, fake_service, caplog):
    fake_service.delay_s = 2.0
    caplog.set_level(logging.INFO)

    result = samples.run_compute_custom_routes(CustomRoutesClient(channel, deadline_ms=100))

    assert result is None
    assert "RPC failed: Status{code=DEADLINE_EXCEEDED" in caplog.text


def test_main_routes_runs_both_calls_on_one_channel(settings, fake_service):
    samples.main_routes(settings)

    assert len(fake_service.requests) == 2
    for metadata in fake_service.metadata:
        assert (API_KEY_HEADER, "test-key") in metadata


def test_main_custom_routes(settings, fake_service):
    samples.main_custom_routes(settings)

    assert len(fake_service.requests) == 1
    assert fake_service.requests[0].language_code == "en-us"
