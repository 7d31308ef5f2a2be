"""
Domain entities for the LMS bounded context.

Entities mirror the records exchanged with Moodle's user web services.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class SyncAction(Enum):
    """What a user sync did downstream."""

    CREATED = "created"
    UPDATED = "updated"


@dataclass(frozen=True)
class SiteStatus:
    """Connectivity snapshot returned by the Moodle site-info call."""

    sitename: str
    siteurl: str
    release: str
    version: str
    username: str


@dataclass(frozen=True)
class NewUser:
    """A user record to be created in Moodle."""

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
class UserChanges:
    """A partial update for an existing Moodle user, keyed by id.

    Fields left as None are not sent downstream.
    """

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
class CreatedUser:
    """Identity of a user freshly created in Moodle."""

    id: int
    username: str


@dataclass(frozen=True)
class MoodleUser:
    """A Moodle user as returned by a lookup."""

    id: int
    username: str
    firstname: str = ""
    lastname: str = ""
    fullname: str = ""
    email: str = ""
    auth: str = "manual"
    suspended: bool = False
    idnumber: str = ""


@dataclass(frozen=True)
class RoleAssignment:
    """A role granted to a user within a Moodle context."""

    roleid: int
    userid: int
    contextid: int
