import json

import pytest
import responses

from pktray.api import ApiError, PluralKit
from pktray.config import Config
from pktray.models import System

BASE = "https://api.example.com/v2"


@pytest.fixture
def mocked():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


def make_api(auth_token="token"):
    return PluralKit(Config(hostname="api.example.com", auth_token=auth_token))


def member_json(member_id, name):
    return {"id": member_id, "uuid": f"uuid-{member_id}", "name": name}


def test_get_system_parses_body_and_sends_token(mocked):
    mocked.get(f"{BASE}/systems/abcde", json={"id": "abcde", "uuid": "u1", "name": "Sys"})
    system = make_api().get_system("abcde")
    assert system.id == "abcde"
    assert system.name == "Sys"
    assert mocked.calls[0].request.headers["Authorization"] == "token"


def test_get_system_non_200_returns_none(mocked):
    mocked.get(f"{BASE}/systems/abcde", json={"code": 20001}, status=404)
    assert make_api().get_system("abcde") is None


def test_get_system_empty_body_returns_none(mocked):
    mocked.get(f"{BASE}/systems/abcde", body="", status=200)
    assert make_api().get_system("abcde") is None


def test_no_token_sends_no_authorization(mocked):
    mocked.get(f"{BASE}/systems/abcde", json={"id": "abcde", "uuid": "u1"})
    system = make_api(auth_token="").get_system("abcde")
    assert (system.id, system.uuid) == ("abcde", "u1")
    assert "Authorization" not in mocked.calls[0].request.headers


def test_get_member(mocked):
    mocked.get(f"{BASE}/members/mmmmm", json=member_json("mmmmm", "Alex"))
    member = make_api().get_member("mmmmm")
    assert (member.id, member.name) == ("mmmmm", "Alex")


def test_get_members_accepts_system_object(mocked):
    mocked.get(
        f"{BASE}/systems/abcde/members",
        json=[member_json("aaaaa", "Alex"), member_json("bbbbb", "Sam")],
    )
    members = make_api().get_members(System(id="abcde", uuid="u1"))
    assert [m.name for m in members] == ["Alex", "Sam"]


def test_get_members_failure_returns_empty(mocked):
    mocked.get(f"{BASE}/systems/abcde/members", json={"code": 0}, status=401)
    assert make_api().get_members("abcde") == []


def test_get_fronters_returns_switch_members(mocked):
    mocked.get(
        f"{BASE}/systems/abcde/fronters",
        json={"id": "s1", "timestamp": "t", "members": [member_json("aaaaa", "Alex")]},
    )
    fronters = make_api().get_fronters("abcde")
    assert [m.id for m in fronters] == ["aaaaa"]


def test_get_fronters_without_switch_returns_empty(mocked):
    mocked.get(f"{BASE}/systems/abcde/fronters", body="", status=204)
    assert make_api().get_fronters("abcde") == []


def test_set_fronters_posts_members(mocked):
    mocked.post(f"{BASE}/systems/@me/switches", json={"id": "s1"}, status=200)
    result = make_api().set_fronters(["aaaaa"])
    assert result is None
    assert len(mocked.calls) == 1
    request = mocked.calls[0].request
    assert json.loads(request.body) == {"members": ["aaaaa"]}
    assert request.headers["Authorization"] == "token"
    assert request.headers["Content-Type"] == "application/json"


def test_set_fronters_without_token_does_nothing(mocked):
    result = make_api(auth_token="").set_fronters(["aaaaa"])
    assert result is None
    assert len(mocked.calls) == 0


def test_set_fronters_already_fronting_is_ignored(mocked):
    mocked.post(f"{BASE}/systems/@me/switches", json={"code": 40004}, status=400)
    result = make_api().set_fronters(["aaaaa"])
    assert result is None
    assert len(mocked.calls) == 1
    assert json.loads(mocked.calls[0].request.body) == {"members": ["aaaaa"]}


def test_set_fronters_other_error_raises(mocked):
    mocked.post(f"{BASE}/systems/@me/switches", json={"code": 0}, status=400)
    with pytest.raises(ApiError):
        make_api().set_fronters(["aaaaa"])