from datetime import datetime
from sqlalchemy import Column, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from evalserver.models.base import Base, generate_id


class TeacherAssignment(Base):
    """Model for a teacher teaching one subject in one section.
    
    A subject has a single teacher per section.
    """
    
    __tablename__ = "teacher_assignments"
    __table_args__ = (
        UniqueConstraint("level", "strand_course", "section", "subject",
                         name="uq_assignment_section_subject"),
    )
    
    id = Column(String(36), primary_key=True, default=generate_id)
    teacher_id = Column(String(36), ForeignKey("teachers.id"), nullable=False, index=True)
    level = Column(String, nullable=False)
    strand_course = Column(String, nullable=False, index=True)
    section = Column(String, nullable=False, index=True)
    subject = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    
    # Relationships
    teacher = relationship("Teacher", back_populates="assignments")
    
    def __repr__(self):
        return f"<TeacherAssignment {self.strand_course} {self.section} {self.subject} teacher_id={self.teacher_id}>"
