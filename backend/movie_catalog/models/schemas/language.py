"""
Language Pydantic Schemas
"""

from pydantic import BaseModel, ConfigDict

class Language(BaseModel):
    """Language response schema"""
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)
