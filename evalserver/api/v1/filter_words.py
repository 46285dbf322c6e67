from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from evalserver.business_logic.keyword_filter import KeywordFilter
from evalserver.dependencies import get_store
from evalserver.repositories import EvaluationStore
from evalserver.schemas import (
    FilterWordCreate, FilterWordResult, FilterWordList,
    RedactRequest, RedactResponse, HiddenCommentList
)

router = APIRouter()


@router.get("/", response_model=FilterWordList)
async def list_filter_words(store: EvaluationStore = Depends(get_store)):
    """List the filter words."""
    words = await KeywordFilter(store).words()
    return FilterWordList(words=words, total=len(words))


@router.post("/", response_model=FilterWordResult, status_code=status.HTTP_201_CREATED)
async def add_filter_word(
    request: FilterWordCreate,
    store: EvaluationStore = Depends(get_store)
):
    """
    Add a filter word.
    
    Empty and duplicate words are rejected with a 400 carrying the reason.
    """
    result = await KeywordFilter(store).add(request.word)
    if not result.success:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=result.model_dump())
    return result


@router.delete("/{word}", response_model=FilterWordResult)
async def remove_filter_word(
    word: str,
    store: EvaluationStore = Depends(get_store)
):
    """Remove a filter word."""
    return await KeywordFilter(store).remove(word)


@router.get("/hidden-comments", response_model=HiddenCommentList)
async def list_hidden_comments(store: EvaluationStore = Depends(get_store)):
    """List the evaluations whose feedback contains a filter word."""
    results = await KeywordFilter(store).hidden_comments()
    return HiddenCommentList(results=results, total=len(results))


@router.post("/redact", response_model=RedactResponse)
async def redact_text(
    request: RedactRequest,
    store: EvaluationStore = Depends(get_store)
):
    """Mask the filter words in a text with asterisks."""
    return RedactResponse(text=await KeywordFilter(store).redact(request.text))
