from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, Boolean, Text
from sqlalchemy.orm import relationship

from evalserver.models.base import Base, generate_id

class CommentAnalysis(Base):
    """Model for the classification of one feedback comment."""
    
    __tablename__ = "comment_analysis"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    evaluation_id = Column(String(36), ForeignKey("evaluations.id"), nullable=False, index=True)
    comment_text = Column(Text, nullable=False)
    comment_type = Column(String, nullable=False, index=True)
    is_flagged = Column(Boolean, default=False, nullable=False, index=True)
    flag_reason = Column(String, nullable=True)
    language_detected = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    evaluation = relationship("Evaluation", back_populates="comment_analysis")
    
    def __repr__(self):
        return f"<CommentAnalysis evaluation_id={self.evaluation_id} type={self.comment_type} flagged={self.is_flagged}>"
