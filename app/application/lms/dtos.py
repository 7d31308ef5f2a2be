"""
Data Transfer Objects for the LMS application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a single Moodle user.

    Attributes:
        username: Login name, unique in Moodle.
        password: Initial password, subject to the site password policy.
        firstname: Given name.
        lastname: Family name.
        email: Contact address.
        auth: Authentication plugin (manual, ldap, oauth2...).
        idnumber: Optional external identifier.
        city: Optional city.
        country: Optional ISO 3166 country code.
    """

    username: str
    password: str
    firstname: str
    lastname: str
    email: str
    auth: str = "manual"
    idnumber: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class GetUserByFieldQuery:
    """Input DTO for looking users up by a single field.

    Attributes:
        field: Moodle field name (id, idnumber, username, email).
        value: Value to match.
    """

    field: str
    value: str


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for one record of a bulk update."""

    id: int
    username: Optional[str] = None
    password: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    auth: Optional[str] = None
    idnumber: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    suspended: Optional[int] = None


@dataclass(frozen=True)
class UpdateUsersCommand:
    """Input DTO for a bulk update. Records keep their request order."""

    users: tuple[UpdateUserCommand, ...]


@dataclass(frozen=True)
class UserSyncCommand:
    """Input DTO for synchronizing one user, keyed by username.

    Attributes:
        username: Key used to find the existing Moodle user.
        firstname: Given name.
        lastname: Family name.
        email: Contact address.
        password: Required only when the user does not exist yet.
        auth: Authentication plugin. Left unchanged on update when omitted;
            new users fall back to "manual".
        idnumber: Optional external identifier.
    """

    username: str
    firstname: str
    lastname: str
    email: str
    password: Optional[str] = None
    auth: Optional[str] = None
    idnumber: Optional[str] = None


@dataclass(frozen=True)
class AssignRoleCommand:
    """Input DTO for granting a role to a user within a context."""

    roleid: int
    userid: int
    contextid: int


@dataclass(frozen=True)
class SiteStatusResult:
    """Output DTO for the status check."""

    sitename: str
    siteurl: str
    release: str
    version: str
    username: str


@dataclass(frozen=True)
class CreatedUserResult:
    """Output DTO for a created user."""

    id: int
    username: str


@dataclass(frozen=True)
class UserResult:
    """Output DTO for a user found by a lookup."""

    id: int
    username: str
    firstname: str
    lastname: str
    fullname: str
    email: str
    auth: str
    suspended: bool
    idnumber: str


@dataclass(frozen=True)
class UserSyncResult:
    """Output DTO for a sync.

    Attributes:
        user_id: Moodle id of the synced user.
        action: "created" or "updated".
    """

    user_id: int
    action: str
