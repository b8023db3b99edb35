"""Shared fixtures: a controllable threading.Timer and a scripted API client."""
import pytest
import requests
from typing import Any, Callable, Dict, List, Optional
from unittest.mock import patch

from countryfinder.models import Country
from countryfinder.services.countries_client import CountriesClient


class FakeTimer:
    """Stands in for threading.Timer; fires only when a test says so."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False
        self.fired = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def is_alive(self):
        return self.started and not self.cancelled and not self.fired

    def fire(self):
        if self.cancelled:
            return
        self.fired = True
        self.function(*self.args, **self.kwargs)


@pytest.fixture
def fake_timers():
    created: List[FakeTimer] = []

    def factory(*args, **kwargs):
        t = FakeTimer(*args, **kwargs)
        created.append(t)
        return t

    with patch("countryfinder.utils.common.threading.Timer", side_effect=factory):
        yield created


def http_error(status: int) -> requests.HTTPError:
    resp = requests.Response()
    resp.status_code = status
    return requests.HTTPError(f"{status} Error", response=resp)


def make_country(name: str, population: int = 1000, alt: Optional[str] = None) -> Country:
    return Country(name=name, flag_png=f"https://flagcdn.com/w320/{name[:2].lower()}.png",
                   population=population, flag_alt=alt)


class ScriptedClient(CountriesClient):
    """Answers get_countries from a queue of results or exceptions.

    An entry may also be a callable, run at request time, for tests that need
    something to happen while a request is in flight.
    """

    def __init__(self, *responses: Any):
        super().__init__(base_url="https://api.test")
        self.responses = list(responses)
        self.calls: List[str] = []

    def get_countries(self, url: str) -> List[Country]:
        self.calls.append(url)
        result = self.responses.pop(0)
        if callable(result):
            result = result()
        if isinstance(result, BaseException):
            raise result
        return list(result)


@pytest.fixture
def countries() -> List[Country]:
    return [make_country("France", 68_000_000), make_country("Germany", 83_000_000)]
