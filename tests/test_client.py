"""Tests for the requests-based API client."""

import requests

from account_service_api import AccountServiceAPI


class StubResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload
        self.content = b"{}" if payload is not None else b""
        self.text = str(payload)

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error", response=self)


class StubSession:
    def __init__(self, response=None, exc=None):
        self.response = response
        self.exc = exc
        self.calls = []

    def request(self, **kwargs):
        self.calls.append(kwargs)
        if self.exc:
            raise self.exc
        return self.response


def make_client(session):
    return AccountServiceAPI(base_url="http://svc/", session=session)


def test_get_account_success():
    envelope = {"returnCode": 200, "name": "Acme", "accountNumber": "A100"}
    session = StubSession(StubResponse(200, envelope))
    data, error = make_client(session).get_account("A100")
    assert data == envelope
    assert error is None
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["url"] == "http://svc/api/v1/accounts/get-account"
    assert call["json"] == {"accountNumber": "A100"}


def test_get_account_business_failure():
    envelope = {"returnCode": 404, "message": "Account not found: ZZZ"}
    data, error = make_client(StubSession(StubResponse(200, envelope))).get_account("ZZZ")
    assert data == envelope
    assert error == {"status_code": 404, "message": "Account not found: ZZZ"}


def test_get_account_http_error():
    session = StubSession(StubResponse(503, {"detail": "unavailable"}))
    data, error = make_client(session).get_account("A100")
    assert data is None
    assert error == {"status_code": 503, "message": "unavailable"}


def test_get_account_connection_error():
    session = StubSession(exc=requests.ConnectionError("refused"))
    data, error = make_client(session).get_account("A100")
    assert data is None
    assert error["status_code"] is None
    assert "refused" in error["message"]


def test_health():
    session = StubSession(StubResponse(200, {"status": "ok", "version": "1.0.0"}))
    data, error = make_client(session).health()
    assert error is None
    assert data["status"] == "ok"
    assert session.calls[0]["url"] == "http://svc/api/v1/health"
