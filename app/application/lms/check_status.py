"""
Use case: Check that the Moodle web service is reachable.

Input: none
Output: SiteStatusResult
Side effects: None.
Failure cases: MoodleServiceError, DownstreamUnavailableError.
"""

import logging
from typing import Optional

from app.application.lms.dtos import SiteStatusResult
from app.domain.lms.ports import MoodleUserPort


class CheckStatusUseCase:
    """Asks Moodle for its site information and maps it to a DTO."""

    def __init__(
        self, moodle_port: MoodleUserPort, logger: Optional[logging.Logger] = None
    ) -> None:
        self._moodle_port = moodle_port
        self._logger = logger or logging.getLogger(__name__)

    def execute(self) -> SiteStatusResult:
        """Run the status check.

        Returns:
            Site name, URL, release and the web-service user.
        """
        status = self._moodle_port.check_status()
        self._logger.info(
            "Moodle reachable: site=%s release=%s", status.sitename, status.release
        )
        return SiteStatusResult(
            sitename=status.sitename,
            siteurl=status.siteurl,
            release=status.release,
            version=status.version,
            username=status.username,
        )
