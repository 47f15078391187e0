# tests/test_summarizer.py
"""
Summarizer Adapter Tests
Chat-completions request shape and failure mapping, no network access
"""

import pytest
import requests

from pulse.exceptions import SummarizationError, SummarizationTimeoutError, TransientError
from pulse.services.summarizer import LLMSummarizer


class FakeResponse:
    def __init__(self, status_code=200, body=None):
        self.status_code = status_code
        self._body = body

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self):
        if self._body is None:
            raise ValueError("No JSON body")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def post(self, url, headers=None, json=None, timeout=None):
        self.calls.append({"url": url, "headers": headers, "json": json, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response


def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _summarizer(session, api_key="test-key"):
    return LLMSummarizer(
        api_url="https://llm.example.org/v1/chat/completions",
        api_key=api_key,
        model="test-model",
        timeout=7,
        session=session,
    )


def test_summarize_success():
    session = FakeSession(FakeResponse(200, _completion("  Engaging lectures, tough exams.  ")))

    summary = _summarizer(session).summarize(["Great lectures", "Exams were hard"])

    assert summary == "Engaging lectures, tough exams."
    call = session.calls[0]
    assert call["url"] == "https://llm.example.org/v1/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer test-key"
    assert call["timeout"] == 7
    assert call["json"]["model"] == "test-model"
    user_message = call["json"]["messages"][-1]["content"]
    assert "1. Great lectures" in user_message
    assert "2. Exams were hard" in user_message


def test_summarize_without_api_key():
    session = FakeSession(FakeResponse(200, _completion("unused")))

    with pytest.raises(SummarizationError, match="not configured"):
        _summarizer(session, api_key="").summarize(["Great lectures"])
    assert session.calls == []


@pytest.mark.parametrize("error", [requests.Timeout("slow"), requests.ConnectionError("down")])
def test_summarize_unreachable_is_retryable(error):
    with pytest.raises(SummarizationTimeoutError) as exc_info:
        _summarizer(FakeSession(error=error)).summarize(["Great lectures"])

    assert isinstance(exc_info.value, TransientError)
    assert exc_info.value.status_code == 503


def test_summarize_http_error():
    with pytest.raises(SummarizationError) as exc_info:
        _summarizer(FakeSession(FakeResponse(500, {"error": "boom"}))).summarize(["Great lectures"])

    assert not isinstance(exc_info.value, TransientError)
    assert exc_info.value.status_code == 500


def test_summarize_invalid_json():
    with pytest.raises(SummarizationError):
        _summarizer(FakeSession(FakeResponse(200, None))).summarize(["Great lectures"])


@pytest.mark.parametrize("body", [{}, {"choices": []}, _completion(""), _completion(None)])
def test_summarize_empty_content(body):
    with pytest.raises(SummarizationError):
        _summarizer(FakeSession(FakeResponse(200, body))).summarize(["Great lectures"])
