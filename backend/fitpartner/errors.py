"""
Error taxonomy shared by services and routers.

Every error is an HTTPException so FastAPI renders it as
``{"detail": "..."}`` with the matching status code.
"""
from typing import Optional

from fastapi import HTTPException, status


class NotAuthenticated(HTTPException):
    def __init__(self, detail: str = "Not authenticated"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class NotFound(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class NotAuthorized(HTTPException):
    def __init__(self, detail: str = "Not allowed"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class BackendError(HTTPException):
    """Storage failure that is not one of the expected cases above."""

    def __init__(self, detail: str = "Database error", *, cause: Optional[Exception] = None):
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)
        self.cause = cause


class ProfileCreationError(BackendError):
    def __init__(self, *, cause: Optional[Exception] = None):
        super().__init__("Failed to create user profile", cause=cause)
