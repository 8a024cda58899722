# calc_client.py
import logging
from enum import Enum

import requests

from config import BACKEND_API_URL, REQUEST_TIMEOUT
from errors import CalculationError, ConnectionFailure, MissingResponseField, ResponseFormatError

logger = logging.getLogger(__name__)


class DiagramKind(Enum):
    """PH diagrams the plotting service can render from a full result set."""

    PRIMARY = ("/plot", "ph_diagram", "_PH_Graph_Diagram.jpg", "PH-Graph")
    ECONOMIZER = ("/plot_economizer", "ph_diagram_economizer", "_PH_Graph_Economizer.jpg",
                  "PH-Graph Economizer")

    def __init__(self, endpoint, response_field, filename_suffix, title):
        self.endpoint = endpoint
        self.response_field = response_field
        self.filename_suffix = filename_suffix
        self.title = title


class RemoteCalculationClient:
    """Request/response wrapper around the calculation and plotting service."""

    def __init__(self, base_url: str = BACKEND_API_URL, timeout: float = REQUEST_TIMEOUT,
                 session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def submit(self, form_input):
        """POST the input parameters; returns the service's result set."""
        return self._post("/process", dict(form_input))

    def render_diagram(self, result_set, kind: DiagramKind):
        """POST a full result set to a diagram endpoint; returns the raw response body."""
        body = self._post(kind.endpoint, dict(result_set))
        if not body.get(kind.response_field):
            raise MissingResponseField(kind.response_field)
        return body

    def _post(self, endpoint, payload):
        url = f"{self.base_url}{endpoint}"
        logger.info("POST %s", url)
        try:
            response = self.session.post(url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            raise ConnectionFailure(f"{url}: {e}") from e

        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict) and body.get("error"):
            logger.warning("%s reported: %s", url, body["error"])
            raise CalculationError(str(body["error"]))

        if not response.ok:
            raise ConnectionFailure(f"{url} answered HTTP {response.status_code}")

        if not isinstance(body, dict):
            raise ResponseFormatError(f"{url} did not return a JSON object")

        logger.debug("%s returned %d fields", url, len(body))
        return body
