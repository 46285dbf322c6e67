from datetime import datetime
from sqlalchemy import Column, String, DateTime, Boolean
from sqlalchemy.orm import relationship

from evalserver.models.base import Base, generate_id

class Teacher(Base):
    """Model for teachers that students can evaluate."""
    
    __tablename__ = "teachers"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    name = Column(String, nullable=False, index=True)
    department = Column(String, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    evaluations = relationship("Evaluation", back_populates="teacher")
    assignments = relationship("TeacherAssignment", back_populates="teacher")
    
    def __repr__(self):
        return f"<Teacher {self.name}>"
