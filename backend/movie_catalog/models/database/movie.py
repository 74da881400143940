"""
Movie Database Model
"""

from sqlalchemy import Column, Integer, String, Date, ForeignKey, Index, func
from sqlalchemy.orm import relationship

from .base import Base, TimestampMixin

class Movie(Base, TimestampMixin):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(500), nullable=False)
    genre_id = Column(Integer, ForeignKey("genres.id"), nullable=False, index=True)
    language_id = Column(Integer, ForeignKey("languages.id"), nullable=False, index=True)
    oscar_count = Column(Integer)
    release_date = Column(Date, nullable=False)

    # Relationships
    genre = relationship("Genre", back_populates="movies")
    language = relationship("Language", back_populates="movies")

    def __repr__(self):
        return f"<Movie(id={self.id}, title='{self.title}')>"


# Titles are unique regardless of case
Index("uq_movies_title_lower", func.lower(Movie.title), unique=True)
