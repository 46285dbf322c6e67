from fastapi import APIRouter, Depends, Query
from typing import Optional

from evalserver.business_logic.comment_analyzer import CommentAnalyzer
from evalserver.dependencies import get_store
from evalserver.repositories import EvaluationStore
from evalserver.schemas import AnalyzeCommentsRequest, AnalyzeCommentsResponse, CommentAnalysisList

router = APIRouter()


@router.post("/analyze", response_model=AnalyzeCommentsResponse)
async def analyze_comments(
    request: AnalyzeCommentsRequest,
    store: EvaluationStore = Depends(get_store)
):
    """
    Classify the comments of an evaluation.
    
    Stores one analysis per non-empty comment and reports how many comments
    were analyzed and how many of them were flagged.
    """
    analyzer = CommentAnalyzer(store)
    return await analyzer.analyze(request.evaluation_id, request.comments)


@router.get("/flagged", response_model=CommentAnalysisList)
async def list_flagged_comments(
    evaluation_id: Optional[str] = Query(None, description="Filter by evaluation ID"),
    store: EvaluationStore = Depends(get_store)
):
    """List the comments the classifier flagged."""
    evaluation_ids = [evaluation_id] if evaluation_id else None
    results = await store.query_comment_analysis(evaluation_ids=evaluation_ids, flagged=True)
    return CommentAnalysisList(results=results, total=len(results))
