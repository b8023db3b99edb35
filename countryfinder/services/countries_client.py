import logging
import urllib.parse
from typing import List

import requests

from countryfinder.config import API_BASE_URL, API_VERSION, API_FIELDS, REQUEST_TIMEOUT
from countryfinder.models import Country

log = logging.getLogger("countryfinder.api")

class CountriesClient:
    """Read-only client for the REST Countries API.

    ``get_countries`` propagates ``requests`` errors (``HTTPError`` for 4xx/5xx)
    and ``ValueError`` for a body that is not JSON; callers classify them.
    """

    def __init__(self, base_url: str = API_BASE_URL, timeout: float = REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def all_countries_url(self) -> str:
        return f"{self.base_url}/{API_VERSION}/all?fields={API_FIELDS}"

    def search_url(self, query: str) -> str:
        name = urllib.parse.quote(query, safe="")
        return f"{self.base_url}/{API_VERSION}/name/{name}?fields={API_FIELDS}"

    def url_for_query(self, query: str) -> str:
        return self.search_url(query) if query else self.all_countries_url()

    def get_countries(self, url: str) -> List[Country]:
        log.info("GET %s", url)
        resp = requests.get(url, timeout=self.timeout)
        resp.raise_for_status()
        data = resp.json()
        if not isinstance(data, list):
            raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
        return [Country.from_json(item) for item in data]
