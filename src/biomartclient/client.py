import logging

import requests

from . import metadata
from ._version import __version__
from .errors import NetworkError, ParseError, ServiceError
from .query import REQUEST_ID, Query
from .response import Response

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://www.ensembl.org/biomart/martservice"

# messages a martservice returns with a 200 status instead of data, always on the first line
ERROR_MARKERS = [
    "Query ERROR",
    "Problem retrieving",
    "NOT FOUND",
    "Mart name conflict",
    "Service unavailable",
    "temporarily unavailable",
]

# maintenance messages, which come as an html page
UNAVAILABLE_MARKERS = [
    "Service unavailable",
    "temporarily unavailable",
]


def _is_error_message(text):
    stripped = text.lstrip()
    first_line = stripped.split("\n", 1)[0]
    # error messages are plain text, a first line with tabs is a table row
    if "\t" not in first_line and any(marker in first_line for marker in ERROR_MARKERS):
        return True
    return stripped.startswith("<") and any(marker in stripped for marker in UNAVAILABLE_MARKERS)


class MartClient:
    """
    Blocking client for a BioMart martservice endpoint

    Parameters:
        url:
            the martservice url, e.g. http://www.ensembl.org/biomart/martservice
        session:
            the requests session used for all calls, a new one is created if not given
        timeout:
            passed to requests, None leaves the transport default
    """

    def __init__(self, url: str = DEFAULT_URL, session: requests.Session = None, timeout=None):
        self.url = url.rstrip("?")
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": f"biomartclient/{__version__}"})
        self.session = session
        self.timeout = timeout

    def __repr__(self):
        return f"MartClient({self.url!r})"

    def _request(self, method, **kwargs) -> str:
        logger.debug("%s %s %s", method, self.url, kwargs.get("params", ""))
        try:
            if method == "POST":
                response = self.session.post(self.url, timeout=self.timeout, **kwargs)
            else:
                response = self.session.get(self.url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.warning("Request to %s failed: %s", self.url, e)
            raise NetworkError(f"Request to {self.url} failed: {e}") from e

        text = response.text
        if not 200 <= response.status_code < 300:
            kind = "Server error" if response.status_code >= 500 else "Error"
            logger.warning("%s from %s, status code %s", kind, self.url, response.status_code)
            raise ServiceError(
                f"{kind}, status code: {response.status_code}", status_code=response.status_code, body=text
            )
        if _is_error_message(text):
            logger.warning("Error message from %s: %s", self.url, text[:200])
            raise ServiceError(text.strip(), status_code=response.status_code, body=text)
        return text

    def marts(self):
        """
        List the marts registered on the server
        """
        text = self._request("GET", params={"type": "registry", "requestid": REQUEST_ID})
        return metadata.parse_registry(text)

    def datasets(self, mart: str):
        """
        List the datasets of a mart
        """
        text = self._request("GET", params={"type": "datasets", "mart": mart, "requestid": REQUEST_ID})
        return metadata.parse_datasets(text)

    def filters(self, mart: str, dataset: str):
        """
        List the filters available in a dataset
        """
        text = self._request(
            "GET", params={"type": "filters", "mart": mart, "dataset": dataset, "requestid": REQUEST_ID}
        )
        return metadata.parse_filters(text)

    def attributes(self, mart: str, dataset: str):
        """
        List the attributes available in a dataset
        """
        text = self._request(
            "GET", params={"type": "attributes", "mart": mart, "dataset": dataset, "requestid": REQUEST_ID}
        )
        return metadata.parse_attributes(text)

    def query(self, query: Query) -> Response:
        """
        Run a query and return its (unparsed) result
        """
        if not isinstance(query, Query):
            raise TypeError(f"Expected a Query, got {type(query).__name__}")
        text = self._request("POST", data={"query": query.xml})
        if text.lstrip().startswith("<"):
            raise ParseError("Query returned markup instead of a table: " + text[:100])
        return Response(text, header=query.header)
