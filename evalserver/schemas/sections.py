"""
Section schemas.

Students belong to a section of a strand (SHS) or course (college). Teachers
are assigned to sections per subject, and administrators follow how many
evaluations each section has submitted.
"""

from typing import List
from pydantic import BaseModel, Field


class TeacherAssignmentCreate(BaseModel):
    """Schema for assigning a teacher to teach a subject in a section."""

    teacher_id: str = Field(..., min_length=1, description="The assigned teacher")
    level: str = Field(..., min_length=1, description="SHS or College", examples=["SHS"])
    strand_course: str = Field(..., min_length=1, description="Strand or course", examples=["HUMSS"])
    section: str = Field(..., min_length=1, examples=["9-1"])
    subject: str = Field(..., min_length=1, examples=["Oral Communication"])

    class Config:
        from_attributes = True


class TeacherAssignmentRead(TeacherAssignmentCreate):

    id: str = Field(..., description="The unique ID of the assignment")

    class Config:
        from_attributes = True


class TeacherAssignmentList(BaseModel):
    assignments: List[TeacherAssignmentRead]
    total: int


class SectionCount(BaseModel):
    """Submissions received from one section."""

    level: str
    strand_course: str
    section: str
    evaluation_count: int = Field(..., description="Evaluations submitted by the section")
    student_count: int = Field(..., description="Distinct students who submitted")


class SectionCountList(BaseModel):
    sections: List[SectionCount]
    total_evaluations: int
