"""
Use case: Look Moodle users up by a single field.

Input: GetUserByFieldQuery (field, value)
Output: list[UserResult]
Side effects: None.
Failure cases: UserNotFoundError when nothing matches,
MoodleServiceError, DownstreamUnavailableError.
"""

import logging
from typing import Optional

from app.application.lms.dtos import GetUserByFieldQuery, UserResult
from app.domain.lms.errors import UserNotFoundError
from app.domain.lms.ports import MoodleUserPort


class GetUserByFieldUseCase:
    """Orchestrates a by-field lookup and turns an empty match into not-found."""

    def __init__(
        self, moodle_port: MoodleUserPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._moodle_port = moodle_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, query: GetUserByFieldQuery) -> list[UserResult]:
        """Run the lookup.

        Args:
            query: Field name and the value to match.

        Returns:
            Every matching user, in Moodle's order. Never empty.

        Raises:
            UserNotFoundError: If no user matches.
        """
        self._logger.info("Looking up Moodle users by field=%s", query.field)

        users = self._moodle_port.get_users_by_field(query.field, [query.value])
        if not users:
            raise UserNotFoundError(query.field, query.value)

        return [
            UserResult(
                id=u.id,
                username=u.username,
                firstname=u.firstname,
                lastname=u.lastname,
                fullname=u.fullname,
                email=u.email,
                auth=u.auth,
                suspended=u.suspended,
                idnumber=u.idnumber,
            )
            for u in users
        ]
