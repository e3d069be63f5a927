#Marks routes_client as a package.
#Re-exports the public API so callers can do:
#from routes_client import RoutesClient, open_channel, ClientSettings
#No business logic.

from .config import ClientSettings
from .channel import open_channel
from .interceptor import AuthHeaderInterceptor, intercept_channel, API_KEY_HEADER, FIELD_MASK_HEADER
from .client import RoutesClient, CustomRoutesClient
from .errors import (
    RoutesError,
    DeadlineExceededError,
    AuthenticationError,
    InvalidArgumentError,
    UnavailableError,
)

__all__ = [
    "ClientSettings",
    "open_channel",
    "AuthHeaderInterceptor",
    "intercept_channel",
    "API_KEY_HEADER",
    "FIELD_MASK_HEADER",
    "RoutesClient",
    "CustomRoutesClient",
    "RoutesError",
    "DeadlineExceededError",
    "AuthenticationError",
    "InvalidArgumentError",
    "UnavailableError",
]
