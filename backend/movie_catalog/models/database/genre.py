"""
Genre Database Model
"""

from sqlalchemy import Column, Integer, String, Index, func
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin

class Genre(Base, TimestampMixin):
    __tablename__ = "genres"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)

    movies = relationship("Movie", back_populates="genre")

    def __repr__(self):
        return f"<Genre(id={self.id}, name='{self.name}')>"


Index("uq_genres_name_lower", func.lower(Genre.name), unique=True)
