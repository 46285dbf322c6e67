from sqlalchemy import Column, String, Integer, Float, ForeignKey, JSON, UniqueConstraint

from evalserver.models.base import Base

class TeacherEvaluationResult(Base):
    """Model for the aggregated evaluation results of a teacher in one period.
    
    Rows are rewritten wholesale by every aggregation run.
    """
    
    __tablename__ = "teacher_evaluation_results"
    __table_args__ = (
        UniqueConstraint("teacher_id", "evaluation_period", name="uq_result_teacher_period"),
    )
    
    id = Column(Integer, primary_key=True)
    teacher_id = Column(String(36), ForeignKey("teachers.id"), nullable=False, index=True)
    evaluation_period = Column(String, nullable=False, index=True)
    overall_rating = Column(Float, nullable=False)
    total_evaluations = Column(Integer, nullable=False)
    average_scores = Column(JSON, nullable=False)
    positive_comments = Column(JSON, nullable=False)
    negative_comments = Column(JSON, nullable=False)
    suggestions = Column(JSON, nullable=False)
    flagged_comments = Column(JSON, nullable=False)
    
    def __repr__(self):
        return f"<TeacherEvaluationResult teacher_id={self.teacher_id} period={self.evaluation_period} overall={self.overall_rating}>"
