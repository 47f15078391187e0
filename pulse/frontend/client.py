"""HTTP client used by the Streamlit app to talk to the PULSE API."""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from urllib.parse import quote

import requests

from pulse.config import settings

logger = logging.getLogger(__name__)

UNREACHABLE_MESSAGE = "Could not reach the PULSE server. Please try again."


@dataclass
class ApiResult:
    success: bool
    message: str = ""
    data: Dict[str, Any] = field(default_factory=dict)
    status_code: Optional[int] = None


class PulseClient:
    def __init__(self, base_url: Optional[str] = None, timeout: float = 10, session: Optional[requests.Session] = None):
        self.base_url = (base_url or settings.PULSE_API_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def _request(self, method: str, path: str, *, params=None, json=None) -> ApiResult:
        url = f"{self.base_url}{path}"
        try:
            response = self.session.request(method, url, params=params, json=json, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.warning("Request to %s failed: %s", url, exc)
            return ApiResult(False, UNREACHABLE_MESSAGE)

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        success = bool(body.get("success", response.ok)) and response.ok
        message = body.get("message") or ("" if success else f"Request failed ({response.status_code})")
        return ApiResult(success, message, body, response.status_code)

    # ---- auth ----

    def register(self, name: str, email: str, password: str) -> ApiResult:
        return self._request("POST", "/register", json={"name": name, "email": email, "password": password})

    def login(self, email: str, password: str) -> ApiResult:
        return self._request("POST", "/login", json={"email": email, "password": password})

    def verify(self, email: str, code: str) -> ApiResult:
        return self._request("POST", "/verify", json={"email": email, "verificationCode": code})

    def resend_verification(self, email: str) -> ApiResult:
        return self._request("POST", "/resend-verification", json={"email": email})

    # ---- reviews ----

    def latest_reviews(self, viewer: Optional[str] = None, limit: Optional[int] = None) -> ApiResult:
        params = {}
        if viewer:
            params["viewer"] = viewer
        if limit:
            params["limit"] = limit
        return self._request("GET", "/api/reviews/latest", params=params)

    def search(self, kind: str, query: str, viewer: Optional[str] = None) -> ApiResult:
        params = {"type": kind, "query": query}
        if viewer:
            params["viewer"] = viewer
        return self._request("GET", "/api/search", params=params)

    def submit_review(self, draft: Dict[str, Any]) -> ApiResult:
        return self._request("POST", "/api/reviews/submit", json=draft)

    def like(self, review_id: int, email: str) -> ApiResult:
        return self._request("POST", f"/api/reviews/{review_id}/like", json={"email": email})

    def user_reviews(self, email: str) -> ApiResult:
        return self._request("GET", f"/api/reviews/user/{quote(email, safe='')}")

    def summarize(self, review_texts: List[str]) -> ApiResult:
        return self._request("POST", "/api/summarize-reviews", json={"reviewTexts": review_texts})
