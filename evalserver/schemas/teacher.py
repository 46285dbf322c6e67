"""
Teacher and questionnaire schemas.

This module defines the Pydantic schemas for teachers and evaluation questions.
"""

from typing import Optional
from pydantic import BaseModel, Field


class TeacherCreate(BaseModel):
    """Schema for registering a teacher."""
    
    name: str = Field(..., min_length=1, description="The teacher's full name")
    department: Optional[str] = Field(None, description="Department the teacher belongs to")
    is_active: bool = Field(True, description="Whether students can currently evaluate this teacher")
    
    class Config:
        from_attributes = True


class TeacherRead(TeacherCreate):
    """Schema for reading a teacher."""
    
    id: str = Field(..., description="The unique ID of the teacher")
    
    class Config:
        from_attributes = True


class QuestionCreate(BaseModel):
    """Schema for adding a questionnaire item."""
    
    question_text: str = Field(..., min_length=1, description="The question shown to students")
    question_order: int = Field(0, ge=0, description="Position of the question in the questionnaire")
    is_active: bool = Field(True, description="Whether the question is shown to students")
    
    class Config:
        from_attributes = True


class QuestionRead(QuestionCreate):
    """Schema for reading a questionnaire item."""
    
    id: str = Field(..., description="The unique ID of the question")
    
    class Config:
        from_attributes = True
