from fastapi import APIRouter, Depends

from pulse.schemas.review import SummarizeRequest, SummaryResponse
from pulse.services import review_service
from pulse.services.summarizer import Summarizer, get_summarizer

router = APIRouter(prefix="/api", tags=["Summaries"])


@router.post("/summarize-reviews", response_model=SummaryResponse)
def summarize_reviews(
    payload: SummarizeRequest,
    summarizer: Summarizer = Depends(get_summarizer),
):
    """
    Summarize a set of review texts.

    Summarizer failures come back through the error handlers as
    {success: false, message} so the client shows the message in place of the
    summary.
    """
    summary = review_service.summarize_reviews(payload.review_texts, summarizer)
    return {"success": True, "summary": summary}
