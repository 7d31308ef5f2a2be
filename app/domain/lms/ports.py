"""
Port interfaces (ABCs) for the LMS bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.lms.entities import (
    CreatedUser,
    MoodleUser,
    NewUser,
    RoleAssignment,
    SiteStatus,
    UserChanges,
)


class MoodleUserPort(ABC):
    """Port for Moodle's user-management web services.

    Implementations raise only LmsDomainError variants. They never raise
    UserNotFoundError: an empty lookup is a plain empty list.
    """

    @abstractmethod
    def check_status(self) -> SiteStatus:
        """Return site information proving the web service is reachable."""
        raise NotImplementedError

    @abstractmethod
    def create_users(self, users: list[NewUser]) -> list[CreatedUser]:
        """Create users and return their new identities, in input order."""
        raise NotImplementedError

    @abstractmethod
    def get_users_by_field(self, field: str, values: list[str]) -> list[MoodleUser]:
        """Return users whose ``field`` matches any of ``values``."""
        raise NotImplementedError

    @abstractmethod
    def update_users(self, users: list[UserChanges]) -> None:
        """Apply a batch of updates in a single downstream call.

        Raises:
            MoodleServiceError: If Moodle rejects the call or any record.
        """
        raise NotImplementedError

    @abstractmethod
    def assign_roles(self, assignments: list[RoleAssignment]) -> None:
        """Grant roles to users within their contexts."""
        raise NotImplementedError
