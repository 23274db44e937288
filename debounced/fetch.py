import json
import logging
from urllib.parse import quote
from urllib.request import Request, urlopen

from .constants import DEFAULT_WAIT_MS
from .debounce import debounce
from .utils import check_operation

logger = logging.getLogger("debounced")

FETCH_TIMEOUT = 10


def get_json(url, timeout=FETCH_TIMEOUT):
    request = Request(url, headers={"Accept": "application/json"})
    with urlopen(request, timeout=timeout) as response:
        return json.load(response)


class DetailsFetcher:
    """Look up details for the last query of a burst.

    ``url`` may contain a ``{query}`` placeholder, filled with the quoted
    query when the lookup fires. The decoded payload goes to ``on_results``.
    """

    def __init__(self, url, on_results, wait=DEFAULT_WAIT_MS, fetch=get_json):
        self.url = url
        self.on_results = check_operation(on_results, "on_results")
        self.fetch = check_operation(fetch, "fetch")
        self._lookup = debounce(self.get_details, wait)

    @property
    def wait(self):
        return self._lookup.wait

    @property
    def pending(self) -> bool:
        return self._lookup.pending

    def __call__(self, query=""):
        self._lookup(query)

    def build_url(self, query: str) -> str:
        return self.url.replace("{query}", quote(query, safe=""))

    def get_details(self, query=""):
        url = self.build_url(query)
        logger.info("fetching %s", url)
        try:
            payload = self.fetch(url)
        except Exception:
            logger.exception("failed to fetch %s", url)
            raise
        self.on_results(payload)
        return payload

    def cancel(self):
        self._lookup.cancel()

    def flush(self):
        return self._lookup.flush()

    def join(self, timeout=None) -> bool:
        return self._lookup.join(timeout)
