import logging
from fastapi import APIRouter, Depends, HTTPException, Query, status
from typing import Optional

from evalserver.business_logic.settings import current_settings
from evalserver.dependencies import get_store
from evalserver.repositories import EvaluationStore, DuplicateEvaluationError
from evalserver.schemas import EvaluationCreate, EvaluationRead, EvaluationList, ResetResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/", response_model=EvaluationRead, status_code=status.HTTP_201_CREATED)
async def submit_evaluation(
    evaluation: EvaluationCreate,
    store: EvaluationStore = Depends(get_store)
):
    """
    Submit a student's evaluation of a teacher.
    
    The evaluation is stored under the current evaluation period. A student
    can evaluate each teacher once per period.
    """
    settings = await current_settings(store)
    if not settings.is_evaluation_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Evaluations are closed for the current period"
        )

    teacher = await store.get_teacher(evaluation.teacher_id)
    if teacher is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teacher with ID {evaluation.teacher_id} not found"
        )

    question_ids = {q.id for q in await store.list_questions()}
    unknown = sorted(set(evaluation.answers) - question_ids)
    if unknown:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown question IDs in answers: {', '.join(unknown)}"
        )

    try:
        record = await store.insert_evaluation(evaluation, settings.evaluation_period)
    except DuplicateEvaluationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    logger.info(f"Stored evaluation {record.id} for teacher {teacher.name}")
    return record


@router.get("/", response_model=EvaluationList)
async def list_evaluations(
    teacher_id: Optional[str] = Query(None, description="Filter by teacher ID"),
    store: EvaluationStore = Depends(get_store)
):
    """List evaluations in submission order."""
    evaluations = await store.query_evaluations(teacher_id=teacher_id)
    return EvaluationList(evaluations=evaluations, total=len(evaluations))


@router.get("/{evaluation_id}", response_model=EvaluationRead)
async def get_evaluation(
    evaluation_id: str,
    store: EvaluationStore = Depends(get_store)
):
    """Get a single evaluation."""
    evaluation = await store.get_evaluation(evaluation_id)
    if evaluation is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Evaluation with ID {evaluation_id} not found"
        )
    return evaluation


@router.delete("/", response_model=ResetResponse)
async def reset_evaluations(store: EvaluationStore = Depends(get_store)):
    """
    Delete all evaluations and their comment analyses.
    
    Stored results are kept until the next compute run.
    """
    deleted = await store.reset_evaluations()
    logger.warning(f"Evaluation data reset: {deleted} evaluations deleted")
    return ResetResponse(deleted_evaluations=deleted)
