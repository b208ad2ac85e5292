"""
Pydantic models for user data.

``UserWrite`` is the body accepted by the save endpoint; ``UserRead`` is
what every endpoint returns.  Besides their types, ids and priorities
are only checked against the integer ranges the ``users`` columns can
hold, so out-of-range values are rejected with 422 before any SQL runs.
E‑mail format and priority values are otherwise accepted as given.
"""

from typing import Optional

from pydantic import BaseModel, Field


# ``id`` is a 64-bit SQLite INTEGER; ``priority`` keeps to a 32-bit int.
ID_MIN, ID_MAX = -(2**63), 2**63 - 1
PRIORITY_MIN, PRIORITY_MAX = -(2**31), 2**31 - 1


class UserBase(BaseModel):
    name: Optional[str] = Field(None, examples=["Ada Lovelace"])
    email: Optional[str] = Field(None, examples=["ada@example.com"])
    priority: Optional[int] = Field(None, ge=PRIORITY_MIN, le=PRIORITY_MAX, examples=[1])


class UserWrite(UserBase):
    """Schema for creating or overwriting a user.

    When ``id`` is omitted a new user is created and the database assigns
    its id.  When ``id`` refers to an existing user, that record is
    replaced as a whole: attributes missing from the body are stored as
    ``null``.
    """

    id: Optional[int] = Field(
        None, ge=ID_MIN, le=ID_MAX, description="Id of the user to overwrite; omit to create"
    )


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: int

    model_config = {
        "from_attributes": True,
    }
