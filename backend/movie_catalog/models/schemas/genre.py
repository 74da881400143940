"""
Genre Pydantic Schemas
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict

class GenreWrite(BaseModel):
    """Create/update genre body; presence of name is checked by the service"""
    name: Optional[str] = None

class Genre(BaseModel):
    """Genre response schema"""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
