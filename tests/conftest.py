"""Shared test fixtures and helpers."""

from types import SimpleNamespace
from typing import Any, Optional, Union

import pytest

from autoservice.api.client import ApiClient
from autoservice.schemas.booking_schema import BookingRecord
from autoservice.state import AppState
from autoservice.storage import LocalStorage

BASE_URL = "http://backend.test"

# Index -> status for the standard 12-booking fixture (3 Completed).
STATUS_CYCLE = ["Pending", "Confirmed", "In Progress", "Cancelled"]
COMPLETED_INDEXES = (2, 5, 9)


class FakeResponse:
    """Stand-in for ``requests.Response`` with just what ApiClient reads."""

    def __init__(
        self,
        status_code: int = 200,
        payload: Any = None,
        reason: str = "OK",
        invalid_json: bool = False,
    ) -> None:
        self.status_code = status_code
        self.payload = payload
        self.reason = reason
        self.invalid_json = invalid_json

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self.invalid_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """
    Stand-in for ``requests.Session``.

    Routes map ``(method, path)`` to a FakeResponse or an exception to
    raise. Unrouted requests get a 404. Every call is recorded.
    """

    def __init__(self, routes: Optional[dict] = None) -> None:
        self.routes: dict[tuple[str, str], Union[FakeResponse, Exception]] = dict(routes or {})
        self.calls: list[SimpleNamespace] = []

    def add(self, method: str, path: str, outcome: Union[FakeResponse, Exception]) -> None:
        self.routes[(method, path)] = outcome

    def request(self, method, url, json=None, headers=None, timeout=None):
        self.calls.append(
            SimpleNamespace(method=method, url=url, json=json, headers=headers, timeout=timeout)
        )
        path = url[len(BASE_URL):] if url.startswith(BASE_URL) else url
        outcome = self.routes.get((method, path))
        if outcome is None:
            return FakeResponse(404, {"message": "Not found"}, reason="Not Found")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def make_booking_payload(index: int = 0, **overrides: Any) -> dict[str, Any]:
    """One booking as the backend serializes it (camelCase, Mongo ``_id``)."""
    if index in COMPLETED_INDEXES:
        status = "Completed"
    else:
        status = STATUS_CYCLE[index % len(STATUS_CYCLE)]
    payload = {
        "_id": f"b{index:03d}",
        "customerName": f"Customer {index}",
        "contact": f"+1 (555) 000-{index:04d}",
        "service": "Oil Change" if index % 2 == 0 else "Brake Inspection",
        "date": f"2024-03-{index + 1:02d}T09:30:00.000Z",
        "status": status,
        "vehicleInfo": f"Vehicle {index}",
    }
    payload.update(overrides)
    return payload


def make_bookings_payload(count: int = 12) -> list[dict[str, Any]]:
    return [make_booking_payload(i) for i in range(count)]


def make_record(index: int = 0, **overrides: Any) -> BookingRecord:
    """Helper to create a BookingRecord with sensible defaults."""
    return BookingRecord.model_validate(make_booking_payload(index, **overrides))


def make_records(count: int = 12) -> list[BookingRecord]:
    return [make_record(i) for i in range(count)]


@pytest.fixture
def records():
    return make_records()


@pytest.fixture
def fake_session():
    return FakeSession()


@pytest.fixture
def client(fake_session):
    return ApiClient(BASE_URL, timeout=2.0, session=fake_session)


@pytest.fixture
def app_state():
    return AppState(storage=LocalStorage())


@pytest.fixture
def signed_in_state():
    state = AppState(storage=LocalStorage())
    state.sign_in("user-42")
    return state
