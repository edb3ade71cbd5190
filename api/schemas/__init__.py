"""
Pydantic schemas for API responses.
"""

from api.schemas.info import ServiceInfoResponse

__all__ = ["ServiceInfoResponse"]
