from sqlalchemy import Column, String, Integer

from evalserver.models.base import Base

class FilterWord(Base):
    """Model for an administrator-curated filter word."""
    
    __tablename__ = "filter_words"
    
    id = Column(Integer, primary_key=True)
    word = Column(String, nullable=False, unique=True, index=True)
    
    def __repr__(self):
        return f"<FilterWord {self.word}>"
