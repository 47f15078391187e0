# pulse/api/review.py
"""
Review API Router

Endpoints:
- GET /api/reviews/latest - Most recent reviews
- POST /api/reviews/submit - Submit a review
- POST /api/reviews/{review_id}/like - Like a review
- GET /api/reviews/user/{email} - Reviews written by a user
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pulse.database import get_db
from pulse.schemas.review import (
    LikeRequest,
    LikeResponse,
    ReviewDraft,
    ReviewListResponse,
    ReviewSubmitResponse,
)
from pulse.services import review_service

router = APIRouter(prefix="/api/reviews", tags=["reviews"])


# ======================
# LATEST REVIEWS
# ======================
@router.get("/latest", response_model=ReviewListResponse)
def get_latest_reviews(
    limit: Optional[int] = Query(None, description="Maximum reviews to return"),
    viewer: Optional[str] = Query(None, description="Email used for like/ownership flags"),
    db: Session = Depends(get_db)
):
    """
    Get the most recent reviews, newest first.

    Returns an empty list when no reviews exist.
    """
    reviews = review_service.get_latest_reviews(db, limit=limit, viewer=viewer)
    return {"success": True, "reviews": reviews}


# ======================
# SUBMIT REVIEW
# ======================
@router.post("/submit", response_model=ReviewSubmitResponse)
def submit_review(
    draft: ReviewDraft,
    db: Session = Depends(get_db)
):
    """
    Submit a new review.

    Requirements:
    - professorName, courseName, semester, reviewText are required
    - ratings.overall is required (1-5); other ratings default to 0
    """
    ratings = draft.ratings.model_dump() if draft.ratings else {}
    review = review_service.submit_review(
        db=db,
        professor_name=draft.professor_name,
        course_name=draft.course_name,
        semester=draft.semester,
        department=draft.department,
        review_text=draft.review_text,
        ratings=ratings,
        student_email=draft.student_email,
        student_name=draft.student_name
    )
    return {
        "success": True,
        "message": "Review submitted successfully",
        "reviewId": review["id"],
    }


# ======================
# LIKE REVIEW
# ======================
@router.post("/{review_id}/like", response_model=LikeResponse)
def like_review(
    review_id: int,
    payload: LikeRequest,
    db: Session = Depends(get_db)
):
    """Like a review. A user can like a given review once."""
    likes = review_service.like_review(db, review_id, payload.email)
    return {"success": True, "message": "Review liked successfully", "likes": likes}


# ======================
# USER REVIEWS
# ======================
@router.get("/user/{email}", response_model=ReviewListResponse)
def get_user_reviews(email: str, db: Session = Depends(get_db)):
    reviews = review_service.get_user_reviews(db, email)
    return {"success": True, "reviews": reviews}
