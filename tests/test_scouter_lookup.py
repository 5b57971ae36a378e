"""
Unit tests for the scouter lookup call
"""

import json

import httpx
import pytest

from config.settings import get_settings
from sheets.tools import build_scouter_lookup_tool
from sheets.tools import scouter_lookup
from sheets.tools.scouter_lookup import (
    FORM_CONTENT_TYPE,
    LookupTransportError,
    lookup,
)


class RecordingTransport(httpx.MockTransport):
    def __init__(self, text="Alice, Bob", status_code=200):
        self.requests = []

        def handler(request):
            self.requests.append(request)
            return httpx.Response(status_code, text=text)

        super().__init__(handler)


def test_successful_lookup_returns_body_verbatim():
    transport = RecordingTransport(text="  Alice, Bob\n")
    assert lookup(5, "blue", 2, transport=transport) == "  Alice, Bob\n"


def test_request_shape():
    transport = RecordingTransport()
    lookup(5, "blue", 2, transport=transport)

    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "GET"
    assert str(request.url) == get_settings().scouter_lookup_url
    assert request.headers["content-type"] == FORM_CONTENT_TYPE
    assert json.loads(request.content) == {"Match": 5, "isBlue": True, "DriverStation": 2}


def test_red_request_payload():
    transport = RecordingTransport()
    lookup(3, "RED", 1, transport=transport)
    assert json.loads(transport.requests[0].content) == {
        "Match": 3,
        "isBlue": False,
        "DriverStation": 1,
    }


def test_error_status_is_not_branched_on():
    transport = RecordingTransport(text="Err in searching!", status_code=500)
    assert lookup(1, "red", 1, transport=transport) == "Err in searching!"


def test_validation_failure_makes_no_request():
    transport = RecordingTransport()
    assert lookup(0, "red", 1, transport=transport) == "Please enter a valid match"
    assert lookup(1, "purple", 1, transport=transport) == "Please enter a valid color"
    assert lookup(1, "red", 4, transport=transport) == "Please enter a valid Driverstation"
    assert transport.requests == []


def test_transport_failure_propagates():
    def handler(request):
        raise httpx.ConnectError("unreachable", request=request)

    with pytest.raises(LookupTransportError) as exc_info:
        lookup(2, "blue", 3, transport=httpx.MockTransport(handler))
    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


def test_missing_endpoint(monkeypatch):
    monkeypatch.setattr(get_settings(), "scouter_lookup_url", "")
    with pytest.raises(RuntimeError, match="SCOUTER_LOOKUP_URL"):
        lookup(2, "blue", 3, transport=RecordingTransport())


def test_tool_invokes_lookup(monkeypatch):
    calls = []

    def fake_lookup(match, color, driver_station):
        calls.append((match, color, driver_station))
        return "Carol"

    monkeypatch.setattr(scouter_lookup, "lookup", fake_lookup)
    tool = build_scouter_lookup_tool()

    assert tool.name == "GETSCOUTER"
    assert tool.invoke({"match": 7, "color": "Red", "driver_station": 1}) == "Carol"
    assert calls == [(7, "Red", 1)]


def test_tool_returns_validation_message():
    tool = build_scouter_lookup_tool()
    assert tool.invoke({"match": -3, "color": "Red", "driver_station": 1}) == "Please enter a valid match"
