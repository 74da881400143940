"""
Language Database Model
"""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from .base import Base

class Language(Base):
    __tablename__ = "languages"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True)

    movies = relationship("Movie", back_populates="language")

    def __repr__(self):
        return f"<Language(id={self.id}, name='{self.name}')>"
