from fastapi import APIRouter, Depends, Query, status
from typing import List

from evalserver.dependencies import get_store
from evalserver.repositories import EvaluationStore
from evalserver.schemas import TeacherCreate, TeacherRead, QuestionCreate, QuestionRead

router = APIRouter()
questions_router = APIRouter()


@router.get("/", response_model=List[TeacherRead])
async def list_teachers(
    active_only: bool = Query(False, description="Only return teachers open for evaluation"),
    store: EvaluationStore = Depends(get_store)
):
    """List the registered teachers."""
    return await store.list_teachers(active_only=active_only)


@router.post("/", response_model=TeacherRead, status_code=status.HTTP_201_CREATED)
async def create_teacher(
    teacher: TeacherCreate,
    store: EvaluationStore = Depends(get_store)
):
    """Register a teacher."""
    return await store.add_teacher(teacher)


@questions_router.get("/", response_model=List[QuestionRead])
async def list_questions(
    active_only: bool = Query(False, description="Only return questions shown to students"),
    store: EvaluationStore = Depends(get_store)
):
    """List the questionnaire in display order."""
    return await store.list_questions(active_only=active_only)


@questions_router.post("/", response_model=QuestionRead, status_code=status.HTTP_201_CREATED)
async def create_question(
    question: QuestionCreate,
    store: EvaluationStore = Depends(get_store)
):
    """Add a questionnaire item."""
    return await store.add_question(question)
