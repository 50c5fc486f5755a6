"""
Response models for CLI and HTTP responses
"""

from typing import Optional
from pydantic import BaseModel


class ResultResponse(BaseModel):
    """Result of a mutating HTTP request"""
    result: str


class ErrorResponse(BaseModel):
    """Error response model"""
    message: str
    error_code: Optional[str] = None
    details: Optional[dict] = None
