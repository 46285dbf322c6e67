"""
Evaluation schemas.

This module defines the Pydantic schemas for student evaluation submissions.
Ratings use a 1-5 scale.
"""

from typing import Optional, Dict, List
from datetime import datetime
from pydantic import BaseModel, Field, field_validator

MIN_RATING = 1
MAX_RATING = 5


class EvaluationCreate(BaseModel):
    """Schema for submitting an evaluation."""
    
    student_id: str = Field(..., min_length=1, description="The ID of the student submitting the evaluation")
    teacher_id: str = Field(..., min_length=1, description="The ID of the evaluated teacher")
    overall_rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Overall rating")
    teaching_effectiveness: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Teaching effectiveness rating")
    classroom_management: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Classroom management rating")
    course_content: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Course content rating")
    responsiveness: int = Field(..., ge=MIN_RATING, le=MAX_RATING, description="Responsiveness rating")
    positive_feedback: Optional[str] = Field(None, description="What the teacher does well")
    negative_feedback: Optional[str] = Field(None, description="What the teacher could improve")
    suggestions: Optional[str] = Field(None, description="Suggestions for the teacher")
    level: Optional[str] = Field(None, description="SHS or College level of the student")
    strand_course: Optional[str] = Field(None, description="Strand or course of the student")
    section: Optional[str] = Field(None, description="Section of the student")
    answers: Dict[str, int] = Field(default_factory=dict, description="Question ID to rating mapping")
    
    @field_validator("answers")
    @classmethod
    def _check_answer_ratings(cls, v):
        for question_id, rating in v.items():
            if not MIN_RATING <= rating <= MAX_RATING:
                raise ValueError(
                    f"Rating for question {question_id} must be between {MIN_RATING} and {MAX_RATING}"
                )
        return v
    
    class Config:
        from_attributes = True


class EvaluationRead(EvaluationCreate):
    """Schema for reading an evaluation."""
    
    id: str = Field(..., description="The unique ID of the evaluation")
    evaluation_period: str = Field(..., description="Semester and school year the evaluation belongs to")
    submitted_at: datetime = Field(..., description="When the evaluation was submitted")
    
    @field_validator("answers", mode="before")
    @classmethod
    def _default_answers(cls, v):
        return v or {}
    
    class Config:
        from_attributes = True


class EvaluationList(BaseModel):
    """Schema for a list of evaluations."""
    
    evaluations: List[EvaluationRead] = Field(..., description="List of evaluations")
    total: int = Field(..., description="Total number of evaluations")


class ResetResponse(BaseModel):
    """Schema for the result of a bulk evaluation reset."""
    
    success: bool = True
    deleted_evaluations: int = Field(..., description="Number of evaluations removed")
