# Sample 1: ComputeRoutes + ComputeRouteMatrix.
# Needs GOOGLE_MAPS_API_KEY in the environment (or in .env).

from routes_client.samples import routes_entry_point

if __name__ == "__main__":
    routes_entry_point()
