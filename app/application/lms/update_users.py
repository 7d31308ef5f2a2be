"""
Use case: Update a batch of Moodle users.

Input: UpdateUsersCommand (ordered records)
Output: None
Side effects: User records changed in Moodle.
Failure cases: MoodleServiceError (including per-record warnings),
DownstreamUnavailableError.

The batch is all-or-nothing from the caller's point of view: it is sent
as one downstream call and succeeds only if Moodle accepts every record.
"""

import logging
from typing import Optional

from app.application.lms.dtos import UpdateUsersCommand
from app.domain.lms.entities import UserChanges
from app.domain.lms.ports import MoodleUserPort


class UpdateUsersUseCase:
    """Submits an ordered batch of user updates as a single port call."""

    def __init__(
        self, moodle_port: MoodleUserPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._moodle_port = moodle_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: UpdateUsersCommand) -> None:
        """Run the bulk update.

        Args:
            command: The records to update, in request order.
        """
        self._logger.info("Updating %d Moodle user(s)", len(command.users))

        self._moodle_port.update_users(
            [
                UserChanges(
                    id=u.id,
                    username=u.username,
                    password=u.password,
                    firstname=u.firstname,
                    lastname=u.lastname,
                    email=u.email,
                    auth=u.auth,
                    idnumber=u.idnumber,
                    city=u.city,
                    country=u.country,
                    suspended=u.suspended,
                )
                for u in command.users
            ]
        )
