"""
Comment analysis schemas.

This module defines the Pydantic schemas for comment classification records
and the analyze-comments operation.
"""

from typing import Optional, List
from datetime import datetime
from pydantic import BaseModel, Field


class CommentAnalysisCreate(BaseModel):
    """Schema for a new comment analysis record."""
    
    evaluation_id: str = Field(..., description="The evaluation the comment belongs to")
    comment_text: str = Field(..., description="The analyzed comment")
    comment_type: str = Field(..., description="positive, negative or suggestion")
    is_flagged: bool = Field(False, description="Whether the comment was flagged")
    flag_reason: Optional[str] = Field(None, description="offensive, spam or unrelated")
    language_detected: Optional[str] = Field(None, description="english, tagalog or taglish")
    
    class Config:
        from_attributes = True


class CommentAnalysisRead(CommentAnalysisCreate):
    """Schema for reading a comment analysis record."""
    
    id: str = Field(..., description="The unique ID of the analysis")
    created_at: Optional[datetime] = Field(None, description="When the analysis was stored")
    
    class Config:
        from_attributes = True


class EvaluationComments(BaseModel):
    """The free-text fields of one evaluation."""
    
    positive: Optional[str] = None
    negative: Optional[str] = None
    suggestions: Optional[str] = None


class AnalyzeCommentsRequest(BaseModel):
    """Request body for the analyze-comments operation."""
    
    evaluation_id: str = Field(..., min_length=1, description="The evaluation the comments belong to")
    comments: EvaluationComments = Field(default_factory=EvaluationComments)


class AnalyzeCommentsResponse(BaseModel):
    """Response for the analyze-comments operation."""
    
    success: bool = True
    analysis_count: int = Field(..., description="Number of comments analyzed")
    flagged_count: int = Field(..., description="Number of analyzed comments that were flagged")


class CommentAnalysisList(BaseModel):
    """Schema for a list of comment analyses."""
    
    results: List[CommentAnalysisRead]
    total: int
