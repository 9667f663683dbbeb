"""
API response models shared across routes.
"""

from .errors import ErrorResponse

__all__ = ["ErrorResponse"]
