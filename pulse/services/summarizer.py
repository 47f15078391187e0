"""
Review summarization adapter.

Sends a batch of review texts to an OpenAI-compatible chat completions endpoint
(OpenRouter by default) and returns a short synthesis. One attempt per call;
timeouts and connection failures are reported as retryable.
"""

import logging
from typing import List, Optional, Protocol

import requests

from pulse.config import settings
from pulse.exceptions import SummarizationError, SummarizationTimeoutError

logger = logging.getLogger(__name__)


class Summarizer(Protocol):
    def summarize(self, review_texts: List[str]) -> str:
        ...


class LLMSummarizer:
    """
    Summarizer backed by a chat completions API.

    USAGE:
        summarizer = LLMSummarizer()
        text = summarizer.summarize(["Great lectures", "Hard exams"])
    """

    SYSTEM_PROMPT = (
        "You summarize student reviews of university professors and courses. "
        "Write 3-5 neutral sentences covering teaching quality, difficulty, "
        "organization and overall sentiment. Do not invent details."
    )

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self._api_url = api_url or settings.SUMMARY_API_URL
        self._api_key = api_key if api_key is not None else settings.SUMMARY_API_KEY
        self._model = model or settings.SUMMARY_MODEL
        self._timeout = timeout or settings.SUMMARY_TIMEOUT_SECONDS
        self._session = session or requests.Session()

    def build_prompt(self, review_texts: List[str]) -> str:
        numbered = "\n".join(
            f"{index}. {text}" for index, text in enumerate(review_texts, start=1)
        )
        return f"Summarize these {len(review_texts)} student reviews:\n\n{numbered}"

    def summarize(self, review_texts: List[str]) -> str:
        if not self._api_key:
            raise SummarizationError("Review summaries are not configured")

        headers = {
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self._model,
            "messages": [
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {"role": "user", "content": self.build_prompt(review_texts)},
            ],
            "temperature": settings.SUMMARY_TEMPERATURE,
            "max_tokens": settings.SUMMARY_MAX_TOKENS,
        }

        try:
            response = self._session.post(
                self._api_url,
                headers=headers,
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            data = response.json()
        except (requests.Timeout, requests.ConnectionError) as exc:
            logger.warning("Summarization API unreachable: %s", exc)
            raise SummarizationTimeoutError() from exc
        except requests.RequestException as exc:
            logger.exception("Summarization API error")
            raise SummarizationError() from exc
        except ValueError as exc:
            logger.exception("Summarization API returned invalid JSON")
            raise SummarizationError() from exc

        content = self._extract_response_content(data)
        if not content:
            logger.warning("Summarization API returned no content: %s", data)
            raise SummarizationError("The summarizer returned an empty summary")

        logger.debug("Summarized %d reviews", len(review_texts))
        return content

    def _extract_response_content(self, data) -> str:
        """Extract text content from API response."""
        try:
            choices = data.get("choices", [])
            if choices:
                message = choices[0].get("message", {})
                return (message.get("content") or "").strip()
        except (AttributeError, KeyError, IndexError, TypeError):
            pass
        return ""


def get_summarizer() -> Summarizer:
    """FastAPI dependency returning the configured summarizer."""
    return LLMSummarizer()
