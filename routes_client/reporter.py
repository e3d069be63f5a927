#Purpose: Reporter.
#Leveled logging of what the samples send and receive. Purely observational:
#nothing in the call path depends on what gets logged here.

import logging

from routes_client.errors import RoutesError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    """Entry points only; library code never touches the root logger."""
    logging.basicConfig(level=level, format=LOG_FORMAT)


def log_request(request) -> None:
    logger.info("About to send request: %s", request)


def log_response(response) -> None:
    logger.info("Response: %s", response)


def log_element(element) -> None:
    logger.info("Element response: %s", element)


def log_failure(error: RoutesError) -> None:
    logger.warning("RPC failed: %s", error.status)
