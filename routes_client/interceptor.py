"""
Purpose: Attach the API key and response field mask to every outgoing call.

The routing service reads two system parameters from request metadata:
- x-goog-api-key: the caller's API key
- x-goog-fieldmask: which response fields to populate ("*" = all of them)

See https://cloud.google.com/apis/docs/system-parameters

AuthHeaderInterceptor covers all four call shapes so nothing sent on the
wrapped channel goes out without them. The request message itself is
never touched.
"""

from __future__ import annotations

import collections
import logging
from typing import List, Optional, Tuple

import grpc

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-goog-api-key"
FIELD_MASK_HEADER = "x-goog-fieldmask"


class _ClientCallDetails(
        collections.namedtuple(
            "_ClientCallDetails",
            ("method", "timeout", "metadata", "credentials", "wait_for_ready", "compression"),
        ),
        grpc.ClientCallDetails,
):
    pass


class AuthHeaderInterceptor(
        grpc.UnaryUnaryClientInterceptor,
        grpc.UnaryStreamClientInterceptor,
        grpc.StreamUnaryClientInterceptor,
        grpc.StreamStreamClientInterceptor,
):

    def __init__(self, api_key: str, field_mask: str = "*"):
        self.api_key = api_key
        self.field_mask = field_mask

    def headers(self) -> List[Tuple[str, str]]:
        return [(API_KEY_HEADER, self.api_key), (FIELD_MASK_HEADER, self.field_mask)]

    def _with_headers(self, client_call_details: grpc.ClientCallDetails) -> _ClientCallDetails:
        logger.info("Intercepted %s", client_call_details.method)

        # drop any earlier value for our two keys, keep everything else in order
        metadata: List[Tuple[str, str]] = [
            (key, value)
            for key, value in (client_call_details.metadata or ())
            if key.lower() not in (API_KEY_HEADER, FIELD_MASK_HEADER)
        ]
        metadata.extend(self.headers())

        return _ClientCallDetails(
            client_call_details.method,
            client_call_details.timeout,
            metadata,
            client_call_details.credentials,
            getattr(client_call_details, "wait_for_ready", None),
            getattr(client_call_details, "compression", None),
        )

    def intercept_unary_unary(self, continuation, client_call_details, request):
        return continuation(self._with_headers(client_call_details), request)

    def intercept_unary_stream(self, continuation, client_call_details, request):
        return continuation(self._with_headers(client_call_details), request)

    def intercept_stream_unary(self, continuation, client_call_details, request_iterator):
        return continuation(self._with_headers(client_call_details), request_iterator)

    def intercept_stream_stream(self, continuation, client_call_details, request_iterator):
        return continuation(self._with_headers(client_call_details), request_iterator)


def intercept_channel(channel: grpc.Channel, api_key: str, field_mask: Optional[str] = "*") -> grpc.Channel:
    """Wrap a channel so every call on it carries the auth headers. Reusable for any number of calls."""
    return grpc.intercept_channel(channel, AuthHeaderInterceptor(api_key, field_mask or "*"))
