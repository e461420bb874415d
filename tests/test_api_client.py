"""Tests for the HTTP client, booking reads/writes and auth endpoints."""

import pytest
import requests

from autoservice.api.auth import sign_in, sign_up
from autoservice.api.booking import (
    create_booking,
    fetch_all_bookings,
    fetch_user_bookings,
)
from autoservice.errors import FetchError, HttpError, NetworkError
from autoservice.schemas.booking_schema import BookingCreate
from autoservice.schemas.user_schema import SignInRequest, SignUpRequest
from tests.conftest import BASE_URL, FakeResponse, make_booking_payload, make_bookings_payload


class TestApiClient:
    def test_url_joining(self, client):
        assert client.url_for("/api/booking") == f"{BASE_URL}/api/booking"
        assert client.url_for("api/booking") == f"{BASE_URL}/api/booking"

    def test_sends_json_headers_and_timeout(self, client, fake_session):
        fake_session.add("GET", "/api/booking", FakeResponse(200, []))
        client.get_json("/api/booking")
        call = fake_session.calls[0]
        assert call.headers["Accept"] == "application/json"
        assert call.timeout == 2.0

    def test_connection_error_becomes_network_error(self, client, fake_session):
        fake_session.add("GET", "/api/booking", requests.ConnectionError("refused"))
        with pytest.raises(NetworkError):
            client.get_json("/api/booking")

    def test_timeout_becomes_network_error(self, client, fake_session):
        fake_session.add("GET", "/api/booking", requests.Timeout())
        with pytest.raises(NetworkError, match="timed out"):
            client.get_json("/api/booking")

    def test_http_error_carries_backend_message(self, client, fake_session):
        fake_session.add(
            "POST", "/api/auth",
            FakeResponse(401, {"message": "Invalid credentials"}, reason="Unauthorized"),
        )
        with pytest.raises(HttpError) as exc_info:
            client.post_json("/api/auth", {})
        assert exc_info.value.status_code == 401
        assert exc_info.value.backend_message == "Invalid credentials"

    def test_http_error_without_body_falls_back_to_reason(self, client, fake_session):
        fake_session.add(
            "GET", "/api/booking",
            FakeResponse(500, reason="Internal Server Error", invalid_json=True),
        )
        with pytest.raises(HttpError) as exc_info:
            client.get_json("/api/booking")
        assert exc_info.value.message == "Internal Server Error"
        assert exc_info.value.backend_message is None

    def test_malformed_json_is_fetch_error(self, client, fake_session):
        fake_session.add("GET", "/api/booking", FakeResponse(200, invalid_json=True))
        with pytest.raises(FetchError, match="Malformed JSON"):
            client.get_json("/api/booking")


class TestFetchBookings:
    def test_success_parses_records(self, client, fake_session):
        fake_session.add("GET", "/api/booking", FakeResponse(200, make_bookings_payload(12)))
        result = fetch_all_bookings(client)
        assert result.ok
        assert len(result.items) == 12
        assert result.items[0].id == "b000"
        assert result.items[0].customer_name == "Customer 0"

    def test_http_500_is_failure_result(self, client, fake_session):
        fake_session.add("GET", "/api/booking", FakeResponse(500, {}, reason="Server Error"))
        result = fetch_all_bookings(client)
        assert not result.ok
        assert result.error_kind == "HttpError"
        assert result.status_code == 500
        assert result.items == []

    def test_network_failure_is_failure_result(self, client, fake_session):
        fake_session.add("GET", "/api/booking", requests.ConnectionError("refused"))
        result = fetch_all_bookings(client)
        assert result.status == "FAILURE"
        assert result.error_kind == "NetworkError"

    def test_non_list_payload_is_failure(self, client, fake_session):
        fake_session.add("GET", "/api/booking", FakeResponse(200, {"bookings": []}))
        result = fetch_all_bookings(client)
        assert not result.ok
        assert "Expected a list" in result.error

    def test_one_bad_record_fails_whole_fetch(self, client, fake_session):
        payload = make_bookings_payload(3)
        payload[1]["date"] = "someday"
        fake_session.add("GET", "/api/booking", FakeResponse(200, payload))
        result = fetch_all_bookings(client)
        assert not result.ok
        assert result.items == []

    def test_user_bookings_endpoint(self, client, fake_session):
        fake_session.add("GET", "/api/booking/user/user-42", FakeResponse(200, []))
        result = fetch_user_bookings(client, "user-42")
        assert result.ok
        assert fake_session.calls[0].url == f"{BASE_URL}/api/booking/user/user-42"


class TestCreateBooking:
    def test_posts_camel_case_body(self, client, fake_session):
        fake_session.add("POST", "/api/booking", FakeResponse(201, make_booking_payload(0)))
        booking = BookingCreate(
            customer_name="Customer 0",
            contact="+1 (555) 123-4567",
            service="Oil Change",
            vehicle_info="2019 Civic",
        )
        record = create_booking(client, booking)
        assert record.id == "b000"
        assert fake_session.calls[0].json == {
            "customerName": "Customer 0",
            "contact": "+1 (555) 123-4567",
            "service": "Oil Change",
            "vehicleInfo": "2019 Civic",
        }

    def test_http_error_propagates(self, client, fake_session):
        fake_session.add("POST", "/api/booking", FakeResponse(400, {"message": "Bad"}))
        booking = BookingCreate(customer_name="A", contact="1", service="S", vehicle_info="V")
        with pytest.raises(HttpError):
            create_booking(client, booking)


class TestAuthEndpoints:
    def test_sign_in_posts_credentials(self, client, fake_session):
        fake_session.add("POST", "/api/auth", FakeResponse(200, {"userId": "u1", "message": "Welcome"}))
        response = sign_in(client, SignInRequest(email="a@b.co", password="secret1"))
        assert response.user_id == "u1"
        assert fake_session.calls[0].json == {"email": "a@b.co", "password": "secret1"}

    def test_numeric_user_id_is_read_as_string(self, client, fake_session):
        fake_session.add("POST", "/api/auth", FakeResponse(200, {"userId": 42, "message": "Welcome"}))
        response = sign_in(client, SignInRequest(email="a@b.co", password="secret1"))
        assert response.user_id == "42"

    def test_sign_up_posts_camel_case_names(self, client, fake_session):
        fake_session.add("POST", "/api/users", FakeResponse(201, {"userId": "u2"}))
        request = SignUpRequest(
            email="a@b.co", password="secret1", first_name="Ada", last_name="Lovelace",
        )
        response = sign_up(client, request)
        assert response.user_id == "u2"
        assert fake_session.calls[0].json["firstName"] == "Ada"
        assert fake_session.calls[0].json["lastName"] == "Lovelace"

    def test_malformed_auth_reply_is_fetch_error(self, client, fake_session):
        fake_session.add("POST", "/api/auth", FakeResponse(200, ["not", "an", "object"]))
        with pytest.raises(FetchError, match="Malformed authentication"):
            sign_in(client, SignInRequest(email="a@b.co", password="secret1"))
