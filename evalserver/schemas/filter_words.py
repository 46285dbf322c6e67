"""
Filter word schemas.
"""

from typing import List, Optional
from pydantic import BaseModel, Field


class FilterWordCreate(BaseModel):
    word: str = Field(..., description="The word to filter")


class FilterWordResult(BaseModel):
    """Outcome of adding or removing a filter word.
    
    Rejections are reported here rather than raised.
    """
    
    success: bool
    word: str
    message: str


class FilterWordList(BaseModel):
    words: List[str]
    total: int


class RedactRequest(BaseModel):
    text: str


class RedactResponse(BaseModel):
    text: str


class HiddenComment(BaseModel):
    """An evaluation whose feedback contains at least one filter word."""
    
    evaluation_id: str
    teacher_id: str
    positive_feedback: Optional[str] = None
    negative_feedback: Optional[str] = None
    suggestions: Optional[str] = None


class HiddenCommentList(BaseModel):
    results: List[HiddenComment]
    total: int
