"""
Shared schema primitives used across the API.
"""
from typing import Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error envelope returned for 4xx/5xx responses."""
    error: str
    message: Optional[str] = None
    path: Optional[str] = None
