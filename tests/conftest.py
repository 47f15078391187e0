"""Pytest bootstrap for project imports and shared fixtures."""

import os
import sys
from pathlib import Path

# Ensure project root is on sys.path so `import pulse` works
PROJECT_ROOT = Path(__file__).resolve().parents[1]
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

# Settings are read at import time; keep tests off any real database or SMTP server.
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["CREDENTIAL_BACKEND"] = "local"
os.environ["EMAIL_NOTIFICATIONS_ENABLED"] = "false"
os.environ["APP_ENV"] = "test"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pulse import models  # noqa: F401 - register tables on Base.metadata
from pulse.database import Base, get_db
from pulse.exceptions import SummarizationError
from pulse.services.summarizer import get_summarizer


class FakeSummarizer:
    """Records batches and returns a canned summary, or raises a given error."""

    def __init__(self, summary="Students found the course well organized.", error=None):
        self.summary = summary
        self.error = error
        self.calls = []

    def summarize(self, review_texts):
        self.calls.append(list(review_texts))
        if self.error is not None:
            raise self.error
        return self.summary


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db_session(engine):
    """Create test database session"""
    SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = SessionLocal()

    yield session

    session.close()


@pytest.fixture
def fake_summarizer():
    return FakeSummarizer()


@pytest.fixture
def failing_summarizer():
    return FakeSummarizer(error=SummarizationError("Summary service is down"))


@pytest.fixture
def client(db_session, fake_summarizer):
    from pulse.main import app

    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_summarizer] = lambda: fake_summarizer
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def review_payload():
    return {
        "professorName": "Dr. Smith",
        "courseName": "CS101",
        "semester": "Fall 2024",
        "department": "Computer Science",
        "reviewText": "Great class",
        "ratings": {
            "teaching": 5,
            "difficulty": 3,
            "organization": 4,
            "helpfulness": 5,
            "overall": 5,
        },
        "studentEmail": "student@spelman.edu",
        "studentName": "Jordan",
    }
