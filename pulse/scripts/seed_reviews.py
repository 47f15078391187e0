"""
Insert sample reviews into a development database.

Usage:
  ENABLE_REVIEW_SEED=true python -m pulse.scripts.seed_reviews
"""

import os
import sys

from pulse import models  # noqa: F401 - register tables on Base.metadata
from pulse.config import settings
from pulse.database import Base, SessionLocal, engine
from pulse.services import review_service

SAMPLE_REVIEWS = [
    {
        "professor_name": "Dr. Smith",
        "course_name": "CS101",
        "department": "Computer Science",
        "semester": "Fall 2024",
        "review_text": "Great class. Clear lectures and fair exams.",
        "ratings": {"teaching": 5, "difficulty": 3, "organization": 4, "helpfulness": 5, "overall": 5},
        "student_name": "Jordan",
        "student_email": "jordan@spelman.edu",
    },
    {
        "professor_name": "Dr. Johnson",
        "course_name": "MATH 211 Linear Algebra",
        "department": "Mathematics",
        "semester": "Spring 2024",
        "review_text": "Challenging problem sets, but office hours helped a lot.",
        "ratings": {"teaching": 4, "difficulty": 5, "organization": 3, "helpfulness": 4, "overall": 4},
        "student_name": "",
        "student_email": "taylor@morehouse.edu",
    },
    {
        "professor_name": "Dr. Okafor",
        "course_name": "BIO 115",
        "department": "Biology",
        "semester": "Fall 2023",
        "review_text": "Lab sessions were well organized and the readings were interesting.",
        "ratings": {"teaching": 4, "difficulty": 2, "organization": 5, "helpfulness": 4, "overall": 4},
        "student_name": "Casey",
        "student_email": "casey@spelman.edu",
    },
]


def seed_reviews() -> int:
    if (os.getenv("ENABLE_REVIEW_SEED") or "").strip().lower() not in {"1", "true", "yes", "on"}:
        print("Seeding disabled. Set ENABLE_REVIEW_SEED=true to run.", file=sys.stderr)
        return 1
    if settings.APP_ENV != "development":
        print("Seeding is only allowed when APP_ENV=development.", file=sys.stderr)
        return 1

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        for sample in SAMPLE_REVIEWS:
            review = review_service.submit_review(db=db, **sample)
            print(f"Created review {review['id']} for {review['professorName']}")
        return 0
    except Exception as exc:
        print(f"Seeding failed: {exc}", file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    raise SystemExit(seed_reviews())
