"""
Aggregated result schemas.

This module defines the Pydantic schemas for per-teacher evaluation results,
their rankings, and the evaluation settings that determine the period key.
"""

from typing import Dict, List
from pydantic import BaseModel, Field, computed_field


class TeacherEvaluationResultRecord(BaseModel):
    """Aggregated results of one teacher for one evaluation period."""
    
    teacher_id: str
    evaluation_period: str
    overall_rating: float = Field(..., description="Mean overall rating as a percentage")
    total_evaluations: int = Field(..., description="Number of evaluations aggregated")
    average_scores: Dict[str, float] = Field(..., description="Category name to percentage")
    positive_comments: List[str] = Field(default_factory=list)
    negative_comments: List[str] = Field(default_factory=list)
    suggestions: List[str] = Field(default_factory=list)
    flagged_comments: List[str] = Field(default_factory=list)
    
    class Config:
        from_attributes = True


class RankedTeacherResult(TeacherEvaluationResultRecord):
    """A teacher's results together with their standing in the period."""
    
    overall_rank: int
    category_ranks: Dict[str, int] = Field(..., description="'<category>_rank' to rank")


class RankedResultList(BaseModel):
    """Schema for the results of one period."""
    
    evaluation_period: str
    results: List[RankedTeacherResult]
    total: int


class ComputeResultsResponse(BaseModel):
    """Response for the compute-results trigger."""
    
    success: bool
    message: str


class EvaluationSettingsData(BaseModel):
    """The current evaluation period and whether submissions are open."""
    
    current_semester: str = Field(..., min_length=1)
    school_year: str = Field(..., min_length=1)
    is_evaluation_active: bool = True
    
    @computed_field  # type: ignore[misc]
    @property
    def evaluation_period(self) -> str:
        return f"{self.current_semester} {self.school_year}"
    
    class Config:
        from_attributes = True
