"""User Schemas — registration input and the public user shape.

Invariants:
    - UserCreate omits id (generated by storage)
    - UserResponse never carries the password
"""

from pydantic import ConfigDict, Field

from batcave.schemas.base import WireModel


class UserCreate(WireModel):
    """Registration payload."""
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class UserResponse(WireModel):
    """Public user data."""
    model_config = ConfigDict(from_attributes=True)

    id: str
    username: str


InsertUser = UserCreate
