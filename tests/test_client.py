"""Tests for the diagnostics HTTP client."""

import json
from unittest.mock import MagicMock

import pytest
import requests

import payment_service_client
from payment_service_client import PaymentServiceClient


def make_response(status_code: int, body: bytes, url: str = "http://svc/api") -> requests.Response:
    response = requests.Response()
    response.status_code = status_code
    response._content = body
    response.url = url
    response.encoding = "utf-8"
    return response


@pytest.fixture
def session() -> MagicMock:
    return MagicMock(spec=requests.Session)


@pytest.fixture
def client(session) -> PaymentServiceClient:
    return PaymentServiceClient(base_url="http://svc:9090/", api_key="secret", session=session)


def test_get_environment(client, session):
    session.request.return_value = make_response(200, b'{"PATH": "/usr/bin"}')

    data, error = client.get_environment()

    assert error is None
    assert data == {"PATH": "/usr/bin"}
    session.request.assert_called_once_with(
        method="GET",
        url="http://svc:9090/api/v1/payments/config/env",
        headers={"Authorization": "Bearer secret"},
        timeout=15,
    )


def test_get_config_map(client, session):
    session.request.return_value = make_response(200, b'{"service_name": "Payments"}')

    data, error = client.get_config_map()

    assert error is None
    assert data["service_name"] == "Payments"


def test_check_log_levels_returns_text(client, session):
    session.request.return_value = make_response(200, b"HealthService|See the log for details")

    message, error = client.check_log_levels()

    assert error is None
    assert message == "HealthService|See the log for details"


def test_http_error_uses_detail(client, session):
    session.request.return_value = make_response(404, b'{"detail": "Service Env is not ready."}')

    data, error = client.get_environment()

    assert data == {}
    assert error == {"status_code": 404, "message": "Service Env is not ready."}


def test_network_error(client, session):
    session.request.side_effect = requests.ConnectionError("connection refused")

    data, error = client.get_config_map()

    assert data == {}
    assert error["status_code"] is None
    assert "connection refused" in error["message"]


def test_no_auth_header_without_key(session):
    session.request.return_value = make_response(200, b"{}")
    client = PaymentServiceClient(base_url="http://svc", session=session)

    client.get_environment()

    assert session.request.call_args.kwargs["headers"] == {}


def test_cli_prints_json(monkeypatch, capsys):
    fake = MagicMock()
    fake.get_config_map.return_value = ({"service_name": "Payments"}, None)
    monkeypatch.setattr(payment_service_client, "PaymentServiceClient", MagicMock(return_value=fake))

    code = payment_service_client.main(["map", "--base-url", "http://svc"])

    assert code == 0
    assert json.loads(capsys.readouterr().out) == {"service_name": "Payments"}


def test_cli_reports_error(monkeypatch, capsys):
    fake = MagicMock()
    fake.check_log_levels.return_value = (None, {"status_code": 500, "message": "boom"})
    monkeypatch.setattr(payment_service_client, "PaymentServiceClient", MagicMock(return_value=fake))

    code = payment_service_client.main(["log"])

    assert code == 1
    assert "boom" in capsys.readouterr().err
