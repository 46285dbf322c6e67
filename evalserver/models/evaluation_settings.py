from datetime import datetime
from sqlalchemy import Column, String, Integer, Boolean, DateTime

from evalserver.models.base import Base

class EvaluationSettings(Base):
    """Model for the single row holding the current evaluation period."""
    
    __tablename__ = "evaluation_settings"
    
    id = Column(Integer, primary_key=True)
    current_semester = Column(String, nullable=False)
    school_year = Column(String, nullable=False)
    is_evaluation_active = Column(Boolean, default=True, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    def __repr__(self):
        return f"<EvaluationSettings {self.current_semester} {self.school_year}>"
