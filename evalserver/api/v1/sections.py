import logging
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from typing import Optional

from evalserver.business_logic.sections import section_counts
from evalserver.dependencies import get_store
from evalserver.repositories import EvaluationStore, DuplicateAssignmentError
from evalserver.schemas import (
    TeacherAssignmentCreate, TeacherAssignmentRead, TeacherAssignmentList, SectionCountList
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/assignments", response_model=TeacherAssignmentList)
async def list_assignments(
    teacher_id: Optional[str] = Query(None, description="Filter by teacher ID"),
    strand_course: Optional[str] = Query(None, description="Filter by strand or course"),
    section: Optional[str] = Query(None, description="Filter by section"),
    store: EvaluationStore = Depends(get_store)
):
    """List teacher assignments, for example the teachers a section evaluates."""
    assignments = await store.list_assignments(
        teacher_id=teacher_id, strand_course=strand_course, section=section
    )
    return TeacherAssignmentList(assignments=assignments, total=len(assignments))


@router.post("/assignments", response_model=TeacherAssignmentRead, status_code=status.HTTP_201_CREATED)
async def create_assignment(
    assignment: TeacherAssignmentCreate,
    store: EvaluationStore = Depends(get_store)
):
    """
    Assign a teacher to a subject in a section.

    A subject can only have one teacher per section.
    """
    if await store.get_teacher(assignment.teacher_id) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Teacher with ID {assignment.teacher_id} not found"
        )

    try:
        record = await store.add_assignment(assignment)
    except DuplicateAssignmentError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

    logger.info(f"Assigned teacher {record.teacher_id} to {record.strand_course} {record.section} {record.subject}")
    return record


@router.delete("/assignments/{assignment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_assignment(
    assignment_id: str,
    store: EvaluationStore = Depends(get_store)
):
    """Remove a teacher assignment."""
    if not await store.delete_assignment(assignment_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Assignment with ID {assignment_id} not found"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/counts", response_model=SectionCountList)
async def get_section_counts(
    period: Optional[str] = Query(None, description="Evaluation period, all periods when omitted"),
    store: EvaluationStore = Depends(get_store)
):
    """Count the evaluations submitted by each section."""
    return await section_counts(store, evaluation_period=period)
