# Sample 2: ComputeCustomRoutes with a rate-card objective.
# Needs GOOGLE_MAPS_API_KEY in the environment (or in .env).

from routes_client.samples import custom_routes_entry_point

if __name__ == "__main__":
    custom_routes_entry_point()
