"""
Use case: Create a single Moodle user.

Input: CreateUserCommand
Output: CreatedUserResult
Side effects: A new user exists in Moodle.
Failure cases: MoodleServiceError (usernameexists, invalidparameter...),
DownstreamUnavailableError.
"""

import logging
from typing import Optional

from app.application.lms.dtos import CreatedUserResult, CreateUserCommand
from app.domain.lms.entities import NewUser
from app.domain.lms.errors import MoodleServiceError
from app.domain.lms.ports import MoodleUserPort


class CreateUserUseCase:
    """Creates one user through the Moodle port.

    The port call is batch-shaped; this use case always sends exactly
    one record and expects exactly one identity back.
    """

    def __init__(
        self, moodle_port: MoodleUserPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._moodle_port = moodle_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: CreateUserCommand) -> CreatedUserResult:
        """Run the create-user use case.

        Args:
            command: The user record to create.

        Returns:
            The Moodle id and username of the new user.

        Raises:
            MoodleServiceError: If Moodle rejects the record or answers
                with no created user.
        """
        self._logger.info("Creating Moodle user username=%s", command.username)

        created = self._moodle_port.create_users(
            [
                NewUser(
                    username=command.username,
                    password=command.password,
                    firstname=command.firstname,
                    lastname=command.lastname,
                    email=command.email,
                    auth=command.auth,
                    idnumber=command.idnumber,
                    city=command.city,
                    country=command.country,
                )
            ]
        )
        if not created:
            raise MoodleServiceError(
                "emptyresponse", "Moodle did not return the created user"
            )

        user = created[0]
        self._logger.info("Created Moodle user id=%d", user.id)
        return CreatedUserResult(id=user.id, username=user.username)
