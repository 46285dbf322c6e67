"""
API v1 package for the Teacher Evaluation Server.
"""

from fastapi import APIRouter

from evalserver.api.v1 import teachers, evaluations, comments, results, filter_words, settings, sections

# Create the main v1 API router
router = APIRouter()

router.include_router(teachers.router, prefix="/teachers", tags=["Teachers"])
router.include_router(teachers.questions_router, prefix="/questions", tags=["Questionnaire"])
router.include_router(evaluations.router, prefix="/evaluations", tags=["Evaluations"])
router.include_router(comments.router, prefix="/comments", tags=["Comment Analysis"])
router.include_router(results.router, prefix="/results", tags=["Results"])
router.include_router(filter_words.router, prefix="/filter-words", tags=["Filter Words"])
router.include_router(settings.router, prefix="/settings", tags=["Settings"])
router.include_router(sections.router, prefix="/sections", tags=["Sections"])

# Export the API router
__all__ = ["router"]
