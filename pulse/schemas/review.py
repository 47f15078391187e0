# pulse/schemas/review.py
"""
Review Pydantic Schemas

Field names are snake_case in Python and camelCase on the wire, matching the
payloads the web client already sends and reads.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchKind(str, Enum):
    PROFESSOR = "professor"
    COURSE = "course"
    DEPARTMENT = "department"


# ======================
# REQUEST SCHEMAS
# ======================

class ReviewRatings(CamelModel):
    """Sub-ratings; missing values default to 0 in the service layer."""
    teaching: Optional[int] = None
    difficulty: Optional[int] = None
    organization: Optional[int] = None
    helpfulness: Optional[int] = None
    overall: Optional[int] = None


class ReviewDraft(CamelModel):
    """
    Review submission payload.

    Required fields are checked by the review service so that a missing field
    produces the same "Missing required review fields" error as an empty one.
    """
    professor_name: Optional[str] = None
    course_name: Optional[str] = None
    semester: Optional[str] = None
    department: Optional[str] = None
    review_text: Optional[str] = None
    ratings: Optional[ReviewRatings] = None
    student_email: Optional[str] = None
    student_name: Optional[str] = None


class LikeRequest(BaseModel):
    email: Optional[str] = None


class SummarizeRequest(CamelModel):
    review_texts: List[str] = Field(default_factory=list)


# ======================
# RESPONSE SCHEMAS
# ======================

class RatingsOut(CamelModel):
    teaching: int = 0
    difficulty: int = 0
    organization: int = 0
    helpfulness: int = 0
    overall: int = 0


class ReviewOut(CamelModel):
    """Canonical review shape returned by every listing endpoint"""
    id: int
    professor_name: str
    course_name: str
    department: Optional[str] = None
    semester: str
    review_text: str
    ratings: RatingsOut
    student_name: Optional[str] = None
    student_email: Optional[str] = None
    created_at: Optional[datetime] = None
    likes: int = Field(0, ge=0, description="Derived count of like records")
    liked_by_current_user: bool = False
    owned_by_current_user: bool = False


class ReviewListResponse(BaseModel):
    success: bool = True
    reviews: List[ReviewOut]


class SearchResponse(BaseModel):
    success: bool = True
    results: List[ReviewOut]


class ReviewSubmitResponse(CamelModel):
    success: bool = True
    message: str
    review_id: int


class LikeResponse(BaseModel):
    success: bool = True
    message: str
    likes: int


class SummaryResponse(BaseModel):
    success: bool = True
    summary: str
