"""
Common Pydantic Schemas
"""

from typing import Optional
from pydantic import BaseModel

class MessageResponse(BaseModel):
    """Confirmation or error body"""
    message: str

class ErrorResponse(MessageResponse):
    """Error body, optionally carrying the underlying cause"""
    error: Optional[str] = None

class HealthResponse(BaseModel):
    status: str
    version: str
    environment: str
    database: str
