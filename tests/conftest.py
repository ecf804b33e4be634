"""Shared fixtures: a fake Calendar v3 service that never touches the network."""
from typing import Any, Dict, List, Optional
from unittest.mock import Mock

import pytest
from googleapiclient.errors import HttpError


def http_error(status: int) -> HttpError:
    resp = Mock(status=status, reason="error")
    return HttpError(resp, b"error")


def make_event(n: int, **overrides) -> Dict[str, Any]:
    event = {
        "kind": "calendar#event",
        "id": f"evt{n}",
        "status": "confirmed",
        "htmlLink": f"https://www.google.com/calendar/event?eid=evt{n}",
        "created": "2026-10-01T08:00:00.000Z",
        "updated": "2026-10-02T09:15:30.000Z",
        "summary": f"Event {n}",
        "creator": {"email": "me@example.com", "self": True},
        "organizer": {"email": "me@example.com", "self": True},
        "start": {"dateTime": f"2026-11-{n:02d}T09:30:00+01:00", "timeZone": "Europe/Paris"},
        "end": {"dateTime": f"2026-11-{n:02d}T10:30:00+01:00", "timeZone": "Europe/Paris"},
    }
    event.update(overrides)
    return event


class _Request:
    def __init__(self, service: "FakeService", kwargs: Dict[str, Any]):
        self._service = service
        self._kwargs = kwargs

    def execute(self) -> Dict[str, Any]:
        return self._service._page(self._kwargs)


class FakeService:
    """
    Mimics ``service.events().list(**kw).execute()``.

    Page tokens are string offsets into ``events``. ``server_page_max`` caps
    the page size the way the real endpoint may return fewer items than asked;
    ``ignore_max_results`` makes the fake return a whole server page regardless
    of ``maxResults``.
    """

    def __init__(self, events: List[Dict[str, Any]], server_page_max: Optional[int] = None,
                 ignore_max_results: bool = False, error: Optional[Exception] = None):
        self.events_data = events
        self.server_page_max = server_page_max
        self.ignore_max_results = ignore_max_results
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def events(self):
        return self

    def list(self, **kwargs):
        self.calls.append(kwargs)
        return _Request(self, kwargs)

    def _page(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        if self.error is not None:
            raise self.error
        offset = int(kwargs.get("pageToken") or 0)
        size = kwargs["maxResults"]
        if self.ignore_max_results:
            size = self.server_page_max or len(self.events_data)
        elif self.server_page_max is not None:
            size = min(size, self.server_page_max)
        items = self.events_data[offset:offset + size]
        resp: Dict[str, Any] = {"kind": "calendar#events", "items": items}
        if offset + size < len(self.events_data):
            resp["nextPageToken"] = str(offset + size)
        return resp


@pytest.fixture
def events():
    return [make_event(n) for n in range(1, 6)]


@pytest.fixture
def service(events):
    return FakeService(events, server_page_max=2)
