# pulse/crud/review.py
"""
Review CRUD Operations
Store-level reads and writes for reviews and like relations
"""

from sqlalchemy.orm import Session
from sqlalchemy import func
from typing import Optional, List, Tuple, Set, Iterable

from pulse.models.review import Review, ReviewLike

LIKE_ESCAPE = "\\"


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return (
        value.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


# ======================
# REVIEW CRUD
# ======================

def create_review(
    db: Session,
    professor_name: str,
    course_name: str,
    semester: str,
    review_text: str,
    overall_rating: int,
    teaching_rating: int = 0,
    difficulty_rating: int = 0,
    organization_rating: int = 0,
    helpfulness_rating: int = 0,
    department: Optional[str] = None,
    student_email: Optional[str] = None,
    student_name: Optional[str] = None
) -> Review:
    """
    Insert a new review row.

    Args:
        db: Database session
        professor_name: Professor being reviewed
        course_name: Course name or code
        semester: Semester label
        review_text: Review body
        overall_rating: Overall rating (1-5)
        teaching_rating, difficulty_rating, organization_rating,
        helpfulness_rating: Sub-ratings (0-5)
        department: Optional department
        student_email: Author email used for ownership lookups
        student_name: Author display name

    Returns:
        Created Review object (flushed, not committed)
    """
    review = Review(
        professor_name=professor_name,
        course_name=course_name,
        department=department,
        semester=semester,
        review_text=review_text,
        teaching_rating=teaching_rating,
        difficulty_rating=difficulty_rating,
        organization_rating=organization_rating,
        helpfulness_rating=helpfulness_rating,
        overall_rating=overall_rating,
        student_email=student_email,
        student_name=student_name
    )

    db.add(review)
    db.flush()
    return review


def get_review_by_id(db: Session, review_id: int) -> Optional[Review]:
    return db.query(Review).filter(Review.id == review_id).first()


def _like_counts_subquery(db: Session):
    return (
        db.query(
            ReviewLike.review_id.label("review_id"),
            func.count(ReviewLike.id).label("like_count")
        )
        .group_by(ReviewLike.review_id)
        .subquery()
    )


def _reviews_with_like_counts(db: Session):
    """Base query yielding (Review, like_count) rows, newest first."""
    like_counts = _like_counts_subquery(db)
    return (
        db.query(Review, func.coalesce(like_counts.c.like_count, 0))
        .outerjoin(like_counts, Review.id == like_counts.c.review_id)
        .order_by(Review.created_at.desc(), Review.id.desc())
    )


def get_latest_reviews(db: Session, limit: int = 10) -> List[Tuple[Review, int]]:
    """
    Get the most recent reviews with their like counts.

    Args:
        db: Database session
        limit: Maximum reviews to return

    Returns:
        List of (Review, like_count) tuples ordered newest first
    """
    return _reviews_with_like_counts(db).limit(limit).all()


def search_reviews(db: Session, column, query: str) -> List[Tuple[Review, int]]:
    """
    Case-insensitive substring search on one review column.

    Args:
        db: Database session
        column: Review column to match (e.g. Review.professor_name)
        query: Raw search text, matched literally

    Returns:
        List of (Review, like_count) tuples ordered newest first
    """
    pattern = f"%{escape_like(query)}%"
    return (
        _reviews_with_like_counts(db)
        .filter(column.ilike(pattern, escape=LIKE_ESCAPE))
        .all()
    )


def get_reviews_by_email(db: Session, email: str) -> List[Tuple[Review, int]]:
    return (
        _reviews_with_like_counts(db)
        .filter(Review.student_email == email)
        .all()
    )


# ======================
# LIKE CRUD
# ======================

def get_like(db: Session, review_id: int, user_email: str) -> Optional[ReviewLike]:
    return db.query(ReviewLike).filter(
        ReviewLike.review_id == review_id,
        ReviewLike.user_email == user_email
    ).first()


def create_like(db: Session, review_id: int, user_email: str) -> ReviewLike:
    """
    Insert a like row.

    Raises:
        sqlalchemy.exc.IntegrityError: If the (review_id, user_email) pair exists
    """
    like = ReviewLike(review_id=review_id, user_email=user_email)
    db.add(like)
    db.flush()
    return like


def count_likes(db: Session, review_id: int) -> int:
    return db.query(ReviewLike).filter(ReviewLike.review_id == review_id).count()


def get_liked_review_ids(
    db: Session,
    user_email: str,
    review_ids: Iterable[int]
) -> Set[int]:
    """Return the subset of review_ids the user has liked."""
    review_ids = list(review_ids)
    if not review_ids:
        return set()
    rows = db.query(ReviewLike.review_id).filter(
        ReviewLike.user_email == user_email,
        ReviewLike.review_id.in_(review_ids)
    ).all()
    return {row[0] for row in rows}
