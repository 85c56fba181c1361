"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel


class SuccessResponse(BaseModel):
    """Plain success acknowledgement."""

    success: bool = True

