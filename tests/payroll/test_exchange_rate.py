from __future__ import annotations

import pytest
import requests

from src.pharmacy_payroll.pharmacy_payroll.payroll.exchange_rate import DolarApiRateClient


class FakeResponse:
    def __init__(self, payload=None, *, status_code=200, bad_json=False):
        self._payload = payload
        self.status_code = status_code
        self._bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._bad_json:
            raise ValueError("not json")
        return self._payload


class FakeSession:
    def __init__(self, response=None, error=None):
        self._response = response
        self._error = error
        self.calls = []

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self._error:
            raise self._error
        return self._response


def _client(session, **kwargs):
    return DolarApiRateClient("http://rates.test/oficial", timeout=3, session=session, **kwargs)


def test_reads_promedio():
    session = FakeSession(FakeResponse({"promedio": 52.3, "price": 50}))

    assert _client(session).fetch_rate(fallback=40) == pytest.approx(52.3)
    assert session.calls == [("http://rates.test/oficial", 3)]


def test_falls_back_to_price():
    session = FakeSession(FakeResponse({"promedio": None, "price": "51.1"}))

    assert _client(session).fetch_rate(fallback=40) == pytest.approx(51.1)


@pytest.mark.parametrize(
    "session",
    [
        FakeSession(error=requests.ConnectionError("down")),
        FakeSession(error=requests.Timeout("slow")),
        FakeSession(FakeResponse({}, status_code=503)),
        FakeSession(FakeResponse(bad_json=True)),
        FakeSession(FakeResponse(["unexpected"])),
        FakeSession(FakeResponse({"promedio": 0})),
        FakeSession(FakeResponse({"promedio": "n/a"})),
    ],
)
def test_failures_return_fallback(session):
    assert _client(session).fetch_rate(fallback=40) == 40


def test_default_fallback_when_none_given():
    session = FakeSession(error=requests.ConnectionError("down"))

    assert _client(session, default_fallback=36.5).fetch_rate() == 36.5
