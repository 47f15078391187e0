from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from pulse.database import get_db
from pulse.schemas.review import SearchResponse
from pulse.services import review_service

router = APIRouter(prefix="/api", tags=["Search"])


@router.get("/search", response_model=SearchResponse)
def search_reviews(
    type: Optional[str] = Query(None, description="professor, course or department"),
    query: Optional[str] = Query(None, description="Text to match (case-insensitive)"),
    viewer: Optional[str] = Query(None, description="Email used for like/ownership flags"),
    db: Session = Depends(get_db)
):
    """Search reviews by professor, course or department, newest first."""
    results = review_service.search_reviews(db, type, query, viewer=viewer)
    return {"success": True, "results": results}
