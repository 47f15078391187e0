# pulse/schemas/__init__.py

# Review schemas
from .review import (
    SearchKind,
    ReviewRatings,
    ReviewDraft,
    LikeRequest,
    SummarizeRequest,
    ReviewOut,
    ReviewListResponse,
    SearchResponse,
    ReviewSubmitResponse,
    LikeResponse,
    SummaryResponse,
)

# Auth schemas
from .auth import (
    RegisterRequest,
    LoginRequest,
    VerifyRequest,
    ResendRequest,
    MessageResponse,
    LoginResponse,
)

__all__ = [
    "SearchKind",
    "ReviewRatings",
    "ReviewDraft",
    "LikeRequest",
    "SummarizeRequest",
    "ReviewOut",
    "ReviewListResponse",
    "SearchResponse",
    "ReviewSubmitResponse",
    "LikeResponse",
    "SummaryResponse",
    "RegisterRequest",
    "LoginRequest",
    "VerifyRequest",
    "ResendRequest",
    "MessageResponse",
    "LoginResponse",
]
