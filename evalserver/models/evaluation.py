from datetime import datetime
from sqlalchemy import Column, String, DateTime, Integer, ForeignKey, JSON, Text, UniqueConstraint, CheckConstraint
from sqlalchemy.orm import relationship

from evalserver.models.base import Base, generate_id

RATING_FIELDS = (
    "overall_rating",
    "teaching_effectiveness",
    "classroom_management",
    "course_content",
    "responsiveness",
)


class Evaluation(Base):
    """Model for one student's evaluation of one teacher in one period."""
    
    __tablename__ = "evaluations"
    __table_args__ = (
        UniqueConstraint("student_id", "teacher_id", "evaluation_period",
                         name="uq_evaluation_student_teacher_period"),
        *(CheckConstraint(f"{field} BETWEEN 1 AND 5", name=f"ck_evaluation_{field}")
          for field in RATING_FIELDS),
    )
    
    id = Column(String(36), primary_key=True, default=generate_id)
    student_id = Column(String, nullable=False, index=True)
    teacher_id = Column(String(36), ForeignKey("teachers.id"), nullable=False, index=True)
    evaluation_period = Column(String, nullable=False, index=True)
    
    overall_rating = Column(Integer, nullable=False)
    teaching_effectiveness = Column(Integer, nullable=False)
    classroom_management = Column(Integer, nullable=False)
    course_content = Column(Integer, nullable=False)
    responsiveness = Column(Integer, nullable=False)
    
    positive_feedback = Column(Text, nullable=True)
    negative_feedback = Column(Text, nullable=True)
    suggestions = Column(Text, nullable=True)
    
    level = Column(String, nullable=True)
    strand_course = Column(String, nullable=True)
    section = Column(String, nullable=True, index=True)
    answers = Column(JSON, nullable=True)
    
    submitted_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    teacher = relationship("Teacher", back_populates="evaluations")
    comment_analysis = relationship("CommentAnalysis", back_populates="evaluation",
                                    cascade="all, delete-orphan")
    
    def __repr__(self):
        return f"<Evaluation {self.id} teacher_id={self.teacher_id} period={self.evaluation_period}>"
