"""Search/fetch state machine behind the country list.

State moves Idle -> Loading -> Loaded | Empty/Errored -> Loading ... for the
life of a page session. Every fetch takes a sequence number; only the most
recently started fetch may write its outcome, so a slow response to an older
query never overwrites a newer one.
"""
import enum
import logging
import threading
from typing import Callable, Optional

import requests

from countryfinder.config import SEARCH_DEBOUNCE_MS
from countryfinder.models import ControllerState
from countryfinder.services.countries_client import CountriesClient
from countryfinder.utils.common import Debouncer

log = logging.getLogger("countryfinder.controller")

NO_RESULTS_MESSAGE = "No countries found"
NOT_FOUND_MESSAGE = "No countries found."
SERVER_ERROR_MESSAGE = "Something went wrong, please try latter"
GENERIC_ERROR_MESSAGE = "An error occurred while fetching countries."


class ErrorKind(enum.Enum):
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNCLASSIFIED = "unclassified"


ERROR_MESSAGES = {
    ErrorKind.NOT_FOUND: NOT_FOUND_MESSAGE,
    ErrorKind.SERVER_ERROR: SERVER_ERROR_MESSAGE,
    ErrorKind.UNCLASSIFIED: GENERIC_ERROR_MESSAGE,
}


def classify_error(exc: BaseException) -> ErrorKind:
    response = getattr(exc, "response", None)
    status = getattr(response, "status_code", None)
    if status == 404:
        return ErrorKind.NOT_FOUND
    if status == 500:
        return ErrorKind.SERVER_ERROR
    return ErrorKind.UNCLASSIFIED


class CountrySearchController:
    def __init__(
        self,
        client: Optional[CountriesClient] = None,
        on_change: Optional[Callable[[ControllerState], None]] = None,
        debounce_ms: int = SEARCH_DEBOUNCE_MS,
    ):
        self.client = client or CountriesClient()
        self.on_change = on_change
        self._state = ControllerState()
        self.query = ""
        self._lock = threading.Lock()
        self._seq = 0
        self._closed = False
        self._search = Debouncer(debounce_ms, self._search_now)

    @property
    def state(self) -> ControllerState:
        with self._lock:
            return self._state

    def start(self) -> threading.Thread:
        """Kick off the initial full-list fetch on a worker thread."""
        t = threading.Thread(
            target=self.fetch_countries,
            args=(self.client.all_countries_url(),),
            daemon=True,
        )
        t.start()
        return t

    def on_query_change(self, raw_input: str):
        query = (raw_input or "").strip()
        self.query = query
        self._search.call(query)

    def refresh(self) -> threading.Thread:
        """Run the latest typed query now, skipping the debounce window."""
        self._search.cancel()
        t = threading.Thread(target=self._search_now, args=(self.query,), daemon=True)
        t.start()
        return t

    def _search_now(self, query: str):
        self.fetch_countries(self.client.url_for_query(query))

    def fetch_countries(self, url: str):
        with self._lock:
            if self._closed:
                return
            self._seq += 1
            seq = self._seq
            self._state = ControllerState(self._state.countries, loading=True, error="")
        self._notify()

        try:
            countries = tuple(self.client.get_countries(url))
        except (requests.RequestException, ValueError) as e:
            kind = classify_error(e)
            log.warning("Fetch #%d failed (%s): %s", seq, kind.value, e)
            self._settle(seq, ControllerState((), loading=False, error=ERROR_MESSAGES[kind]))
            return
        except Exception:
            log.exception("Fetch #%d failed unexpectedly", seq)
            self._settle(seq, ControllerState((), loading=False, error=GENERIC_ERROR_MESSAGE))
            return

        error = "" if countries else NO_RESULTS_MESSAGE
        log.info("Fetch #%d returned %d countries", seq, len(countries))
        self._settle(seq, ControllerState(countries, loading=False, error=error))

    def _settle(self, seq: int, new_state: ControllerState):
        with self._lock:
            if self._closed or seq != self._seq:
                log.debug("Discarding stale response #%d (latest is #%d)", seq, self._seq)
                return
            self._state = new_state
        self._notify()

    def _notify(self):
        if self.on_change:
            self.on_change(self.state)

    def close(self):
        with self._lock:
            self._closed = True
        self._search.cancel()
        log.info("Search controller closed")
