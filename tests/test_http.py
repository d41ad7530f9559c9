import pytest
import requests
import responses

from pktray.http import HttpClient, HttpError, HttpResponse

USER_AGENT = "pk system tray/0.1.0.0"


def _client(server="api.pluralkit.me", port=0):
    client = HttpClient(USER_AGENT)
    client.connect(server, port)
    return client


def test_get_returns_status_and_body():
    client = _client()
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            "https://api.pluralkit.me/v2/systems/abc",
            json={"id": "abc"},
            status=200,
        )
        response = client.get("/v2/systems/abc")
        sent = rsps.calls[0].request
    assert response.status == 200
    assert response.json() == {"id": "abc"}
    assert sent.headers["User-Agent"] == USER_AGENT


def test_get_passes_headers():
    client = _client()
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "https://api.pluralkit.me/x", body="{}", status=401)
        response = client.get("/x", {"Authorization": "token"})
        sent = rsps.calls[0].request
    assert response.status == 401
    assert sent.headers["Authorization"] == "token"


def test_post_appends_line_ending():
    client = _client()
    payload = '{"members": ["abcde"]}'
    with responses.RequestsMock() as rsps:
        rsps.add(responses.POST, "https://api.pluralkit.me/switches", body="{}", status=200)
        response = client.post("/switches", {"Content-Type": "application/json"}, payload)
        sent = rsps.calls[0].request
    assert response.status == 200
    assert response.json() == {}
    assert sent.body == (payload + "\r\n").encode("utf-8")
    assert sent.headers["Content-Type"] == "application/json"


def test_explicit_port_uses_plain_http():
    client = _client("localhost", 8080)
    with responses.RequestsMock() as rsps:
        rsps.add(responses.GET, "http://localhost:8080/ping", body="pong")
        response = client.get("/ping")
    assert response.text == "pong"


def test_request_before_connect_fails():
    client = HttpClient(USER_AGENT)
    with pytest.raises(HttpError):
        client.get("/anything")


def test_connect_requires_server():
    client = HttpClient(USER_AGENT)
    with pytest.raises(HttpError):
        client.connect("", 0)


def test_transport_failure_raises_http_error():
    client = _client()
    with responses.RequestsMock() as rsps:
        rsps.add(
            responses.GET,
            "https://api.pluralkit.me/down",
            body=requests.ConnectionError("refused"),
        )
        with pytest.raises(HttpError):
            client.get("/down")


def test_invalid_json_body_raises():
    with pytest.raises(HttpError):
        HttpResponse(status=200, text="not json").json()
    with pytest.raises(HttpError):
        HttpResponse(status=200, text="").json()