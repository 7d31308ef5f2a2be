"""
Use case: Synchronize a user into Moodle, keyed by username.

Input: UserSyncCommand
Output: UserSyncResult
Side effects: The user is created in Moodle, or its profile is updated.
Failure cases: UserSyncFailedError, wrapping whatever went wrong.

Every failure, whatever its kind, is reported under the single
USER_SYNC_FAILED code so callers have one failure to handle.
"""

import logging
from typing import Optional

from app.application.lms.dtos import UserSyncCommand, UserSyncResult
from app.domain.lms.entities import NewUser, SyncAction, UserChanges
from app.domain.lms.errors import MoodleServiceError, UserSyncFailedError
from app.domain.lms.ports import MoodleUserPort

SYNC_KEY_FIELD = "username"
DEFAULT_AUTH = "manual"


class UserSyncUseCase:
    """Creates the user when the username is unknown, updates it otherwise.

    Repeating a sync with the same input creates the user once and
    updates it on every later call.
    """

    def __init__(
        self, moodle_port: MoodleUserPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._moodle_port = moodle_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: UserSyncCommand) -> UserSyncResult:
        """Run the sync.

        Raises:
            UserSyncFailedError: On any failure of the lookup, create or update.
        """
        try:
            return self._sync(command)
        except Exception as exc:
            self._logger.warning(
                "User sync failed for username=%s: %s", command.username, exc
            )
            raise UserSyncFailedError(str(exc)) from exc

    def _sync(self, command: UserSyncCommand) -> UserSyncResult:
        existing = self._moodle_port.get_users_by_field(
            SYNC_KEY_FIELD, [command.username]
        )

        if not existing:
            if not command.password:
                raise MoodleServiceError(
                    "missingpassword",
                    f"A password is required to create user {command.username}",
                )
            created = self._moodle_port.create_users(
                [
                    NewUser(
                        username=command.username,
                        password=command.password,
                        firstname=command.firstname,
                        lastname=command.lastname,
                        email=command.email,
                        auth=command.auth or DEFAULT_AUTH,
                        idnumber=command.idnumber,
                    )
                ]
            )
            if not created:
                raise MoodleServiceError(
                    "emptyresponse", "Moodle did not return the created user"
                )
            self._logger.info(
                "Synced username=%s: created id=%d", command.username, created[0].id
            )
            return UserSyncResult(
                user_id=created[0].id, action=SyncAction.CREATED.value
            )

        user_id = existing[0].id
        self._moodle_port.update_users(
            [
                UserChanges(
                    id=user_id,
                    password=command.password,
                    firstname=command.firstname,
                    lastname=command.lastname,
                    email=command.email,
                    auth=command.auth,
                    idnumber=command.idnumber,
                )
            ]
        )
        self._logger.info("Synced username=%s: updated id=%d", command.username, user_id)
        return UserSyncResult(user_id=user_id, action=SyncAction.UPDATED.value)
