"""
Use case: Assign a Moodle role to a user within a context.

Input: AssignRoleCommand
Output: None
Side effects: A role assignment exists in Moodle.
Failure cases: RoleAssignFailedError, wrapping whatever went wrong.
"""

import logging
from typing import Optional

from app.application.lms.dtos import AssignRoleCommand
from app.domain.lms.entities import RoleAssignment
from app.domain.lms.errors import RoleAssignFailedError
from app.domain.lms.ports import MoodleUserPort


class AssignRoleUseCase:
    """Grants one role; every failure becomes a RoleAssignFailedError."""

    def __init__(
        self, moodle_port: MoodleUserPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._moodle_port = moodle_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, command: AssignRoleCommand) -> None:
        """Run the role assignment.

        Raises:
            RoleAssignFailedError: On any downstream failure.
        """
        self._logger.info(
            "Assigning roleid=%d to userid=%d in contextid=%d",
            command.roleid,
            command.userid,
            command.contextid,
        )
        try:
            self._moodle_port.assign_roles(
                [
                    RoleAssignment(
                        roleid=command.roleid,
                        userid=command.userid,
                        contextid=command.contextid,
                    )
                ]
            )
        except Exception as exc:
            self._logger.warning("Role assignment failed: %s", exc)
            raise RoleAssignFailedError(str(exc)) from exc
