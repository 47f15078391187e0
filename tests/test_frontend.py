# tests/test_frontend.py
"""
Frontend Helper Tests
User session state and the API client used by the Streamlit app
"""

import pytest
import requests

from pulse.frontend.client import UNREACHABLE_MESSAGE, PulseClient
from pulse.frontend.session import ANONYMOUS, SESSION_KEY, UserSession, display_author


# ======================
# TEST 1: USER SESSION
# ======================

def test_session_lifecycle():
    user = UserSession()
    assert user.is_active is False

    user.start("Jordan", " Student@Spelman.edu ")
    assert user.is_active is True
    assert user.name == "Jordan"
    assert user.email == "student@spelman.edu"

    user.end()
    assert user.is_active is False
    assert user.email is None


def test_session_default_name():
    user = UserSession()
    user.start("", "student@spelman.edu")
    assert user.name == "User"


def test_session_requires_email():
    with pytest.raises(ValueError):
        UserSession().start("Jordan", "  ")


def test_session_save_and_load():
    store = {}
    user = UserSession()
    user.start("Jordan", "student@spelman.edu")
    user.save(store)

    restored = UserSession.load(store)
    assert restored == user

    restored.end()
    restored.save(store)
    assert SESSION_KEY not in store
    assert UserSession.load(store).is_active is False


def test_like_button_rules():
    user = UserSession()
    other_review = {"studentEmail": "other@morehouse.edu", "likedByCurrentUser": False}
    own_review = {"studentEmail": "student@spelman.edu"}
    liked_review = {"studentEmail": "other@morehouse.edu", "likedByCurrentUser": True}

    assert user.can_like(other_review) is False

    user.start("Jordan", "student@spelman.edu")
    assert user.can_like(other_review) is True
    assert user.can_like(own_review) is False
    assert user.can_like(liked_review) is False
    assert user.can_like({"ownedByCurrentUser": True}) is False


def test_display_author_hides_email():
    assert display_author({"studentName": "Jordan", "studentEmail": "s@spelman.edu"}) == "Jordan"
    assert display_author({"studentName": "  ", "studentEmail": "s@spelman.edu"}) == ANONYMOUS
    assert display_author({}) == ANONYMOUS


# ======================
# TEST 2: API CLIENT
# ======================

class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    @property
    def ok(self):
        return self.status_code < 400

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def request(self, method, url, params=None, json=None, timeout=None):
        self.calls.append({"method": method, "url": url, "params": params, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _client(response=None, error=None):
    session = FakeSession(response=response, error=error)
    return PulseClient(base_url="http://api.test/", timeout=2, session=session), session


def test_client_success():
    client, session = _client(FakeResponse(200, {"success": True, "message": "Login successful", "name": "Jordan"}))

    result = client.login("student@spelman.edu", "secret123")

    assert result.success is True
    assert result.message == "Login successful"
    assert result.data["name"] == "Jordan"
    assert session.calls[0]["method"] == "POST"
    assert session.calls[0]["url"] == "http://api.test/login"
    assert session.calls[0]["timeout"] == 2


def test_client_failure_envelope():
    client, _ = _client(FakeResponse(400, {"success": False, "message": "You have already liked this review"}))

    result = client.like(7, "student@spelman.edu")

    assert result.success is False
    assert result.message == "You have already liked this review"
    assert result.status_code == 400


def test_client_non_json_error():
    client, _ = _client(FakeResponse(502, None))

    result = client.summarize(["Great class"])

    assert result.success is False
    assert result.message == "Request failed (502)"


def test_client_unreachable():
    client, _ = _client(error=requests.ConnectionError("refused"))

    result = client.latest_reviews()

    assert result.success is False
    assert result.message == UNREACHABLE_MESSAGE


def test_client_request_shapes():
    client, session = _client(FakeResponse(200, {"success": True}))

    client.latest_reviews(viewer="student@spelman.edu", limit=5)
    client.search("professor", "smith")
    client.user_reviews("student+cs@spelman.edu")
    client.verify("student@spelman.edu", "123456")

    assert session.calls[0]["params"] == {"viewer": "student@spelman.edu", "limit": 5}
    assert session.calls[1]["params"] == {"type": "professor", "query": "smith"}
    assert session.calls[2]["url"] == "http://api.test/api/reviews/user/student%2Bcs%40spelman.edu"
    assert session.calls[3]["json"] == {"email": "student@spelman.edu", "verificationCode": "123456"}
