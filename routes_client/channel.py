#Purpose: Channel factory.
#Opens the gRPC channel to the routing host and wraps it with the auth interceptor.
#One channel per process; every call the sample makes reuses it.

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Optional

import grpc

from routes_client.config import ClientSettings
from routes_client.interceptor import intercept_channel

logger = logging.getLogger(__name__)


def _raw_channel(settings: ClientSettings,
                 credentials: Optional[grpc.ChannelCredentials] = None) -> grpc.Channel:
    if not settings.use_tls:
        # local fakes / emulators only
        return grpc.insecure_channel(settings.target)
    return grpc.secure_channel(settings.target, credentials or grpc.ssl_channel_credentials())


@contextmanager
def open_channel(settings: ClientSettings,
                 credentials: Optional[grpc.ChannelCredentials] = None) -> Iterator[grpc.Channel]:
    """
    Yields the authenticated channel for settings.target and closes it on exit.

    Usage:
        with open_channel(ClientSettings.from_env()) as channel:
            client = RoutesClient(channel)
    """
    channel = _raw_channel(settings, credentials)
    logger.info("Opened channel to %s", settings.target)
    try:
        yield intercept_channel(channel, settings.api_key, settings.field_mask)
    finally:
        channel.close()
        logger.info("Closed channel to %s", settings.target)
