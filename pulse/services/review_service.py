# pulse/services/review_service.py
"""
Review Service Layer
Business logic for review submission, search, likes and summaries
"""

import logging
from typing import Optional, Dict, Any, List, Iterable, Tuple

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session

from pulse.config import settings
from pulse.crud import review as review_crud
from pulse.exceptions import (
    AlreadyLikedError,
    InvalidQueryError,
    ReviewNotFoundError,
    SummarizationError,
    TransientError,
    UpstreamError,
    ValidationError,
)
from pulse.models.review import Review, RATING_FIELDS
from pulse.schemas.review import SearchKind
from pulse.services.summarizer import Summarizer

logger = logging.getLogger(__name__)

MIN_RATING = 0
MAX_RATING = 5

SEARCH_COLUMNS = {
    SearchKind.PROFESSOR: Review.professor_name,
    SearchKind.COURSE: Review.course_name,
    SearchKind.DEPARTMENT: Review.department,
}


# ======================
# HELPERS
# ======================

def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


def normalize_email(email: Optional[str]) -> str:
    return _clean(email).lower()


def clamp_rating(value: Any) -> int:
    """Coerce a rating to int and clamp it to 0-5. Missing values become 0."""
    if value is None or value == "":
        return MIN_RATING
    try:
        rating = int(value)
    except (TypeError, ValueError):
        raise ValidationError("Ratings must be whole numbers between 0 and 5")
    return max(MIN_RATING, min(MAX_RATING, rating))


def _store_failure(action: str, exc: SQLAlchemyError) -> UpstreamError:
    logger.exception("Review store failure while %s", action)
    if isinstance(exc, OperationalError):
        return TransientError()
    return UpstreamError(f"Error {action}")


def format_review(
    review: Review,
    like_count: int,
    liked_by_current_user: bool = False,
    owned_by_current_user: bool = False
) -> Dict[str, Any]:
    """Convert a stored review into the canonical API shape."""
    return {
        "id": review.id,
        "professorName": review.professor_name,
        "courseName": review.course_name,
        "department": review.department,
        "semester": review.semester,
        "reviewText": review.review_text,
        "ratings": {
            "teaching": review.teaching_rating or 0,
            "difficulty": review.difficulty_rating or 0,
            "organization": review.organization_rating or 0,
            "helpfulness": review.helpfulness_rating or 0,
            "overall": review.overall_rating or 0,
        },
        "studentName": review.student_name,
        "studentEmail": review.student_email,
        "createdAt": review.created_at,
        "likes": int(like_count or 0),
        "likedByCurrentUser": liked_by_current_user,
        "ownedByCurrentUser": owned_by_current_user,
    }


def _format_for_viewer(
    db: Session,
    rows: List[Tuple[Review, int]],
    viewer: Optional[str]
) -> List[Dict[str, Any]]:
    viewer_email = normalize_email(viewer)
    if not viewer_email:
        return [format_review(review, count) for review, count in rows]

    liked_ids = review_crud.get_liked_review_ids(
        db, viewer_email, (review.id for review, _ in rows)
    )
    return [
        format_review(
            review,
            count,
            liked_by_current_user=review.id in liked_ids,
            owned_by_current_user=review.student_email == viewer_email,
        )
        for review, count in rows
    ]


# ======================
# REVIEW SUBMISSION
# ======================

def submit_review(
    db: Session,
    professor_name: Optional[str],
    course_name: Optional[str],
    semester: Optional[str],
    review_text: Optional[str],
    ratings: Optional[Dict[str, Any]],
    department: Optional[str] = None,
    student_email: Optional[str] = None,
    student_name: Optional[str] = None
) -> Dict[str, Any]:
    """
    Validate and persist a new review.

    Args:
        db: Database session
        professor_name: Professor being reviewed (required)
        course_name: Course name or code (required)
        semester: One of the configured semester labels (required)
        review_text: Review body (required)
        ratings: Mapping with teaching, difficulty, organization, helpfulness
            and overall keys; overall is required and must be at least 1
        department: Optional department
        student_email: Author email, used for the "my reviews" view
        student_name: Author display name, may be empty

    Returns:
        The stored review in canonical form

    Raises:
        ValidationError: If a required field is missing or invalid
        UpstreamError: If the store rejects the write
    """
    professor_name = _clean(professor_name)
    course_name = _clean(course_name)
    semester = _clean(semester)
    review_text = _clean(review_text)
    ratings = dict(ratings or {})

    if not professor_name or not course_name or not semester or not review_text or not ratings.get("overall"):
        raise ValidationError("Missing required review fields")

    if semester not in settings.semesters:
        raise ValidationError(
            "Semester must be one of: " + ", ".join(settings.semesters)
        )

    if len(review_text) > settings.REVIEW_TEXT_MAX_LENGTH:
        raise ValidationError(
            f"Review text must be {settings.REVIEW_TEXT_MAX_LENGTH} characters or less"
        )

    clamped = {field: clamp_rating(ratings.get(field)) for field in RATING_FIELDS}
    if clamped["overall"] < 1:
        raise ValidationError("Overall rating must be between 1 and 5")

    try:
        review = review_crud.create_review(
            db=db,
            professor_name=professor_name,
            course_name=course_name,
            department=_clean(department) or None,
            semester=semester,
            review_text=review_text,
            teaching_rating=clamped["teaching"],
            difficulty_rating=clamped["difficulty"],
            organization_rating=clamped["organization"],
            helpfulness_rating=clamped["helpfulness"],
            overall_rating=clamped["overall"],
            student_email=normalize_email(student_email) or None,
            student_name=_clean(student_name) or None
        )
        db.commit()
        db.refresh(review)
    except SQLAlchemyError as exc:
        db.rollback()
        raise _store_failure("submitting review", exc) from exc

    logger.info("Review %s submitted for %s / %s", review.id, review.professor_name, review.course_name)
    email = review.student_email
    return format_review(review, 0, owned_by_current_user=bool(email))


# ======================
# REVIEW RETRIEVAL
# ======================

def get_latest_reviews(
    db: Session,
    limit: Optional[int] = None,
    viewer: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Get the most recent reviews, newest first.

    Args:
        db: Database session
        limit: Maximum reviews to return (defaults to LATEST_REVIEWS_DEFAULT_LIMIT)
        viewer: Optional email used to compute like/ownership flags

    Returns:
        List of canonical review dictionaries, possibly empty
    """
    if limit is None:
        limit = settings.LATEST_REVIEWS_DEFAULT_LIMIT
    if limit < 1 or limit > settings.LATEST_REVIEWS_MAX_LIMIT:
        raise ValidationError(
            f"Limit must be between 1 and {settings.LATEST_REVIEWS_MAX_LIMIT}"
        )

    try:
        rows = review_crud.get_latest_reviews(db, limit)
        return _format_for_viewer(db, rows, viewer)
    except SQLAlchemyError as exc:
        raise _store_failure("fetching reviews", exc) from exc


def search_reviews(
    db: Session,
    kind: Optional[str],
    query: Optional[str],
    viewer: Optional[str] = None
) -> List[Dict[str, Any]]:
    """
    Search reviews by professor, course or department.

    Matching is a case-insensitive substring match on the chosen field.

    Raises:
        InvalidQueryError: If kind is missing/unknown or query is blank
    """
    query = _clean(query)
    if not kind or not query:
        raise InvalidQueryError()

    try:
        search_kind = SearchKind(str(kind).strip().lower())
    except ValueError:
        raise InvalidQueryError(
            "Search type must be one of: " + ", ".join(k.value for k in SearchKind)
        )

    try:
        rows = review_crud.search_reviews(db, SEARCH_COLUMNS[search_kind], query)
        return _format_for_viewer(db, rows, viewer)
    except SQLAlchemyError as exc:
        raise _store_failure("searching reviews", exc) from exc


def get_user_reviews(db: Session, email: Optional[str]) -> List[Dict[str, Any]]:
    """
    Get every review authored by the given email, newest first.

    Results are flagged as owned by (and so not likeable for) the caller.
    """
    email = normalize_email(email)
    if not email:
        raise ValidationError("User email is required")

    try:
        rows = review_crud.get_reviews_by_email(db, email)
    except SQLAlchemyError as exc:
        raise _store_failure("fetching user reviews", exc) from exc

    return [
        format_review(review, count, liked_by_current_user=True, owned_by_current_user=True)
        for review, count in rows
    ]


# ======================
# LIKES
# ======================

def like_review(db: Session, review_id: int, user_email: Optional[str]) -> int:
    """
    Record a like for a review.

    At most one like exists per (review, user). The existence check is a fast
    path; the unique constraint on review_likes decides concurrent calls.

    Args:
        db: Database session
        review_id: Review identifier
        user_email: Email of the user liking the review

    Returns:
        The review's like count after the like

    Raises:
        ValidationError: If user_email is blank
        ReviewNotFoundError: If the review does not exist
        AlreadyLikedError: If the user already liked the review
    """
    user_email = normalize_email(user_email)
    if not user_email:
        raise ValidationError("User email is required")

    try:
        if review_crud.get_review_by_id(db, review_id) is None:
            raise ReviewNotFoundError()

        if review_crud.get_like(db, review_id, user_email) is not None:
            raise AlreadyLikedError()

        review_crud.create_like(db, review_id, user_email)
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Duplicate like rejected by store for review %s by %s", review_id, user_email)
        raise AlreadyLikedError() from exc
    except SQLAlchemyError as exc:
        db.rollback()
        raise _store_failure("liking review", exc) from exc

    logger.info("Review %s liked by %s", review_id, user_email)
    try:
        return review_crud.count_likes(db, review_id)
    except SQLAlchemyError as exc:
        raise _store_failure("counting likes", exc) from exc


# ======================
# SUMMARIES
# ======================

def prepare_summary_batch(review_texts: Iterable[str]) -> List[str]:
    """Drop blank texts and cap the batch size and per-text length."""
    batch = []
    for text in review_texts or []:
        cleaned = _clean(text)
        if not cleaned:
            continue
        batch.append(cleaned[:settings.SUMMARY_MAX_CHARS_PER_REVIEW])
        if len(batch) >= settings.SUMMARY_MAX_REVIEWS:
            break
    return batch


def summarize_reviews(review_texts: Iterable[str], summarizer: Summarizer) -> str:
    """
    Summarize a batch of review texts with the configured summarizer.

    Raises:
        ValidationError: If no non-blank review text was given
        SummarizationError: If the summarizer fails or returns nothing
    """
    batch = prepare_summary_batch(review_texts)
    if not batch:
        raise ValidationError("At least one review text is required")

    summary = summarizer.summarize(batch)
    if not summary or not summary.strip():
        raise SummarizationError("The summarizer returned an empty summary")
    return summary.strip()
