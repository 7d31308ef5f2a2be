"""
Pydantic schemas for LMS request validation.

These schemas check structure only: types, required fields and unknown
keys. Whether a value makes sense to Moodle (an existing role, a
searchable field, the password policy) is left to Moodle.
"""

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

NonEmptyStr = Annotated[str, Field(min_length=1)]
MoodleId = Annotated[int, Field(ge=1)]


class _RequestModel(BaseModel):
    """Base for request bodies: unknown keys are rejected."""

    model_config = ConfigDict(extra="forbid")


class CreateUserRequest(_RequestModel):
    """Request schema for creating a user.

    Attributes:
        username: Login name.
        password: Initial password.
        firstname: Given name.
        lastname: Family name.
        email: Contact address.
        auth: Authentication plugin, "manual" by default.
        idnumber: Optional external identifier.
        city: Optional city.
        country: Optional two-letter country code.
    """

    username: NonEmptyStr
    password: NonEmptyStr
    firstname: NonEmptyStr
    lastname: NonEmptyStr
    email: NonEmptyStr
    auth: NonEmptyStr = "manual"
    idnumber: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = Field(default=None, min_length=2, max_length=2)


class GetUserByFieldRequest(_RequestModel):
    """Request schema for looking users up by a field."""

    field: NonEmptyStr = Field(..., description="Moodle field, e.g. email or username")
    value: NonEmptyStr


class UpdateUserRequest(_RequestModel):
    """One record of a bulk update. Only ``id`` is required."""

    id: MoodleId
    username: Optional[NonEmptyStr] = None
    password: Optional[NonEmptyStr] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    auth: Optional[NonEmptyStr] = None
    idnumber: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = Field(default=None, min_length=2, max_length=2)
    suspended: Optional[int] = Field(default=None, ge=0, le=1)


UpdateUsersRequest = Annotated[list[UpdateUserRequest], Field(min_length=1)]


class UserSyncRequest(_RequestModel):
    """Request schema for synchronizing a user keyed by username."""

    username: NonEmptyStr
    firstname: NonEmptyStr
    lastname: NonEmptyStr
    email: NonEmptyStr
    password: Optional[NonEmptyStr] = None
    auth: Optional[NonEmptyStr] = None
    idnumber: Optional[str] = None


class RoleAssignRequest(_RequestModel):
    """Request schema for assigning a role within a context."""

    roleid: MoodleId
    userid: MoodleId
    contextid: MoodleId
