# tests/test_review_api.py
"""
Review API Tests
HTTP surface for latest, submit, search, like, user reviews and summaries
"""


def _submit(client, payload, **overrides):
    body = dict(payload)
    body.update(overrides)
    return client.post("/api/reviews/submit", json=body)


# ======================
# TEST 1: HEALTH & ROUTING
# ======================

def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unknown_route_uses_failure_envelope(client):
    response = client.get("/api/nowhere")

    assert response.status_code == 404
    assert response.json()["success"] is False


# ======================
# TEST 2: SUBMIT & LATEST
# ======================

def test_latest_empty(client):
    response = client.get("/api/reviews/latest")

    assert response.status_code == 200
    assert response.json() == {"success": True, "reviews": []}


def test_submit_then_latest(client, review_payload):
    """Example: submitted review appears first in latest with zero likes"""

    response = _submit(client, review_payload)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Review submitted successfully"
    review_id = body["reviewId"]

    latest = client.get("/api/reviews/latest").json()["reviews"]
    assert latest[0]["id"] == review_id
    assert latest[0]["professorName"] == "Dr. Smith"
    assert latest[0]["courseName"] == "CS101"
    assert latest[0]["department"] == "Computer Science"
    assert latest[0]["reviewText"] == "Great class"
    assert latest[0]["ratings"] == {
        "teaching": 5,
        "difficulty": 3,
        "organization": 4,
        "helpfulness": 5,
        "overall": 5,
    }
    assert latest[0]["studentName"] == "Jordan"
    assert latest[0]["likes"] == 0
    assert latest[0]["createdAt"]


def test_latest_newest_first_and_limit(client, review_payload):
    ids = [_submit(client, review_payload, professorName=f"Dr. {n}").json()["reviewId"] for n in range(3)]

    response = client.get("/api/reviews/latest", params={"limit": 2})

    assert [r["id"] for r in response.json()["reviews"]] == [ids[2], ids[1]]


def test_latest_invalid_limit(client):
    response = client.get("/api/reviews/latest", params={"limit": 0})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_submit_missing_fields(client, review_payload):
    response = _submit(client, review_payload, professorName="")

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Missing required review fields"}
    assert client.get("/api/reviews/latest").json()["reviews"] == []


def test_submit_missing_overall_rating(client, review_payload):
    response = _submit(client, review_payload, ratings={"teaching": 4})

    assert response.status_code == 400
    assert response.json()["message"] == "Missing required review fields"


def test_submit_wrong_type_is_400(client, review_payload):
    response = _submit(client, review_payload, ratings={"overall": "excellent"})

    assert response.status_code == 400
    assert response.json()["success"] is False


# ======================
# TEST 3: SEARCH
# ======================

def test_search_by_professor(client, review_payload):
    _submit(client, review_payload)
    _submit(client, review_payload, professorName="Dr. Jones")

    response = client.get("/api/search", params={"type": "professor", "query": "smith"})

    assert response.status_code == 200
    results = response.json()["results"]
    assert len(results) == 1
    assert results[0]["professorName"] == "Dr. Smith"


def test_search_missing_query(client):
    response = client.get("/api/search", params={"type": "professor"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "Search type and query are required"}


def test_search_unknown_type(client):
    response = client.get("/api/search", params={"type": "building", "query": "x"})

    assert response.status_code == 400


# ======================
# TEST 4: LIKES
# ======================

def test_like_review(client, review_payload):
    review_id = _submit(client, review_payload).json()["reviewId"]

    response = client.post(f"/api/reviews/{review_id}/like", json={"email": "fan@morehouse.edu"})

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Review liked successfully", "likes": 1}


def test_like_twice_rejected(client, review_payload):
    review_id = _submit(client, review_payload).json()["reviewId"]
    client.post(f"/api/reviews/{review_id}/like", json={"email": "fan@morehouse.edu"})

    response = client.post(f"/api/reviews/{review_id}/like", json={"email": "fan@morehouse.edu"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "message": "You have already liked this review"}
    latest = client.get("/api/reviews/latest").json()["reviews"]
    assert latest[0]["likes"] == 1


def test_like_unknown_review(client):
    response = client.post("/api/reviews/4242/like", json={"email": "fan@morehouse.edu"})

    assert response.status_code == 404
    assert response.json()["message"] == "Review not found"


def test_like_without_email(client, review_payload):
    review_id = _submit(client, review_payload).json()["reviewId"]

    response = client.post(f"/api/reviews/{review_id}/like", json={})

    assert response.status_code == 400


def test_viewer_flags(client, review_payload):
    review_id = _submit(client, review_payload).json()["reviewId"]
    client.post(f"/api/reviews/{review_id}/like", json={"email": "fan@morehouse.edu"})

    as_fan = client.get("/api/reviews/latest", params={"viewer": "fan@morehouse.edu"}).json()["reviews"][0]
    as_author = client.get(
        "/api/search", params={"type": "course", "query": "cs1", "viewer": "student@spelman.edu"}
    ).json()["results"][0]
    anonymous = client.get("/api/reviews/latest").json()["reviews"][0]

    assert as_fan["likedByCurrentUser"] is True
    assert as_fan["ownedByCurrentUser"] is False
    assert as_author["likedByCurrentUser"] is False
    assert as_author["ownedByCurrentUser"] is True
    assert anonymous["likedByCurrentUser"] is False
    assert anonymous["ownedByCurrentUser"] is False


# ======================
# TEST 5: USER REVIEWS
# ======================

def test_user_reviews(client, review_payload):
    _submit(client, review_payload)
    _submit(client, review_payload, studentEmail="other@morehouse.edu")

    response = client.get("/api/reviews/user/student@spelman.edu")

    assert response.status_code == 200
    reviews = response.json()["reviews"]
    assert len(reviews) == 1
    assert reviews[0]["ownedByCurrentUser"] is True


def test_user_reviews_none(client):
    response = client.get("/api/reviews/user/nobody@spelman.edu")

    assert response.status_code == 200
    assert response.json() == {"success": True, "reviews": []}


# ======================
# TEST 6: SUMMARIES
# ======================

def test_summarize_reviews(client, fake_summarizer):
    response = client.post("/api/summarize-reviews", json={"reviewTexts": ["Great class", "Tough exams"]})

    assert response.status_code == 200
    assert response.json() == {"success": True, "summary": fake_summarizer.summary}
    assert fake_summarizer.calls == [["Great class", "Tough exams"]]


def test_summarize_requires_texts(client):
    response = client.post("/api/summarize-reviews", json={"reviewTexts": []})

    assert response.status_code == 400
    assert response.json()["success"] is False


def test_summarize_failure_envelope(client, failing_summarizer):
    """Example: adapter failure is reported as {success: false, message}"""

    from pulse.main import app
    from pulse.services.summarizer import get_summarizer

    app.dependency_overrides[get_summarizer] = lambda: failing_summarizer

    response = client.post("/api/summarize-reviews", json={"reviewTexts": ["Great class"]})

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Summary service is down"}


# ======================
# TEST 7: STORE FAILURES
# ======================

def test_store_outage_returns_503_envelope(client, monkeypatch):
    from sqlalchemy.exc import OperationalError

    from pulse.crud import review as review_crud

    def connection_lost(*args, **kwargs):
        raise OperationalError("SELECT reviews", {}, Exception("could not connect to server"))

    monkeypatch.setattr(review_crud, "get_latest_reviews", connection_lost)

    response = client.get("/api/reviews/latest")

    assert response.status_code == 503
    assert response.json() == {
        "success": False,
        "message": "Service temporarily unavailable, please try again",
    }


def test_like_review_id_zero_is_404(client):
    response = client.post("/api/reviews/0/like", json={"email": "fan@morehouse.edu"})

    assert response.status_code == 404
    assert response.json() == {"success": False, "message": "Review not found"}
