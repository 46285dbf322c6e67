from sqlalchemy import Column, String, Integer, Boolean, Text

from evalserver.models.base import Base, generate_id

class Question(Base):
    """Model for a questionnaire item rated by students."""
    
    __tablename__ = "questions"
    
    id = Column(String(36), primary_key=True, default=generate_id)
    question_text = Column(Text, nullable=False)
    question_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, default=True, nullable=False)
    
    def __repr__(self):
        return f"<Question {self.question_order}: {self.question_text[:30]}>"
