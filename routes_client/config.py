"""
Purpose: Runtime configuration for the Routes sample clients.
What it does:

Loads a local .env file (if any) and reads the API key, field mask and
per-call deadline from the environment. The key is passed through as-is;
the service is the one that rejects a missing or bad key.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Example in .env:
# GOOGLE_MAPS_API_KEY=AIza...
# ROUTES_FIELD_MASK=routes.distanceMeters,routes.duration
load_dotenv()

API_KEY_ENV = "GOOGLE_MAPS_API_KEY"
FIELD_MASK_ENV = "ROUTES_FIELD_MASK"
DEADLINE_ENV = "ROUTES_DEADLINE_MS"

ROUTES_HOST = "routes.googleapis.com"
ROUTES_PREFERRED_HOST = "routespreferred.googleapis.com"

# The standard TLS port is 443
TLS_PORT = 443

DEFAULT_DEADLINE_MS = 2000

# "*" is fine for trying things out but returns every field.
# Narrow it in production, e.g. for ComputeRoutes:
# "routes.distanceMeters,routes.duration,routes.polyline.encodedPolyline"
DEFAULT_FIELD_MASK = "*"


@dataclass(frozen=True)
class ClientSettings:
    """
    Everything needed to open an authenticated channel to one routing host.
    """
    api_key: str
    host: str = ROUTES_HOST
    port: int = TLS_PORT
    field_mask: str = DEFAULT_FIELD_MASK
    deadline_ms: int = DEFAULT_DEADLINE_MS
    use_tls: bool = True

    @property
    def target(self) -> str:
        return f"{self.host}:{self.port}"

    @classmethod
    def from_env(cls, host: str = ROUTES_HOST, port: int = TLS_PORT) -> ClientSettings:
        # a bad deadline should stop the program before any call is made
        deadline_ms = int(os.getenv(DEADLINE_ENV, str(DEFAULT_DEADLINE_MS)))
        return cls(
            api_key=os.getenv(API_KEY_ENV, ""),
            host=host,
            port=port,
            field_mask=os.getenv(FIELD_MASK_ENV) or DEFAULT_FIELD_MASK,
            deadline_ms=deadline_ms,
        )
