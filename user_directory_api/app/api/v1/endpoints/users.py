"""
User endpoints for API v1.

Expose listing, lookup by id or priority, save (create or overwrite)
and deletion of users.  There is no authentication and no pagination.
Path and query parameters are coerced by FastAPI; non-numeric or
out-of-range values are rejected with its default 422 response.

Handlers are plain functions: FastAPI runs them in its threadpool, so
the blocking sqlite3 calls underneath never hold up the event loop.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Response, status
from fastapi.responses import PlainTextResponse

from user_directory_api.app.api.deps import get_user_service
from user_directory_api.app.schemas.user import (
    ID_MAX,
    ID_MIN,
    PRIORITY_MAX,
    PRIORITY_MIN,
    UserRead,
    UserWrite,
)
from user_directory_api.app.services.user_service import DeleteOutcome, UserService


router = APIRouter()


@router.get("", response_model=List[UserRead])
def get_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all users, or an empty list when there are none."""
    return service.get_users()


# Declared before ``/{user_id}`` so that ``query`` is not taken for an id.
@router.get("/query", response_model=List[UserRead])
def get_users_by_priority(
    priority: int = Query(..., ge=PRIORITY_MIN, le=PRIORITY_MAX),
    service: UserService = Depends(get_user_service),
) -> List[UserRead]:
    """Return the users whose priority equals ``priority``."""
    return service.get_users_by_priority(priority)


@router.get("/{user_id}", response_model=UserRead)
def get_user_by_id(
    user_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Retrieve a single user by id.

    Returns HTTP 404 if the user does not exist.
    """
    user = service.get_user_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def post_user(
    user_in: UserWrite,
    response: Response,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a user, or overwrite the user whose ``id`` is in the body.

    Responds with 201 when a new user was created and 200 when an
    existing one was replaced.
    """
    result = service.post_user(user_in)
    if not result.created:
        response.status_code = status.HTTP_200_OK
    return result.user


@router.delete("/{user_id}", response_class=PlainTextResponse)
def delete_user(
    user_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: UserService = Depends(get_user_service),
) -> PlainTextResponse:
    """Delete a user by id and describe the outcome in plain text.

    Deleting a user that does not exist is not an error.  A storage
    failure yields 503.
    """
    result = service.delete_user(user_id)
    if result.outcome is DeleteOutcome.DELETED:
        return PlainTextResponse(f"User by id: {user_id} was deleted")
    if result.outcome is DeleteOutcome.NOT_FOUND:
        return PlainTextResponse(f"User by id: {user_id} was not found")
    return PlainTextResponse(
        f"User by id: {user_id} request to delete failed",
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )
