"""
Adapter: Moodle REST web services.

Implements MoodleUserPort.
Every call is a form-encoded POST to the site's REST server with the
web-service token, the function name and the JSON response format.
Failures are translated into LMS domain errors; nothing is retried.
"""

import logging
from dataclasses import asdict
from typing import Any, Optional

import httpx

from app.domain.lms.entities import (
    CreatedUser,
    MoodleUser,
    NewUser,
    RoleAssignment,
    SiteStatus,
    UserChanges,
)
from app.domain.lms.errors import DownstreamUnavailableError, MoodleServiceError
from app.domain.lms.ports import MoodleUserPort
from app.infrastructure.moodle.encoding import encode_params

logger = logging.getLogger(__name__)

DEFAULT_REST_PATH = "/webservice/rest/server.php"
REST_FORMAT = "json"

FN_SITE_INFO = "core_webservice_get_site_info"
FN_CREATE_USERS = "core_user_create_users"
FN_GET_USERS_BY_FIELD = "core_user_get_users_by_field"
FN_UPDATE_USERS = "core_user_update_users"
FN_ASSIGN_ROLES = "core_role_assign_roles"


def _record(entity: Any) -> dict[str, Any]:
    """Turn an entity into Moodle arguments, omitting unset fields."""
    return {k: v for k, v in asdict(entity).items() if v is not None}


class MoodleRestAdapter(MoodleUserPort):
    """Concrete adapter for Moodle's REST web-service protocol.

    Args:
        base_url: Site root, e.g. ``https://lms.example.edu``.
        token: Web-service token of the integration user.
        rest_path: Path of the REST server script.
        timeout_seconds: Per-request timeout applied to the HTTP client.
    """

    def __init__(
        self,
        base_url: str,
        token: str,
        rest_path: str = DEFAULT_REST_PATH,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._endpoint = base_url.rstrip("/") + rest_path
        self._token = token
        self._timeout = timeout_seconds

    def check_status(self) -> SiteStatus:
        """Read site identity through core_webservice_get_site_info."""
        payload = self._call(FN_SITE_INFO)
        if not isinstance(payload, dict):
            raise DownstreamUnavailableError("unexpected site info payload")
        return SiteStatus(
            sitename=payload.get("sitename", ""),
            siteurl=payload.get("siteurl", ""),
            release=payload.get("release", ""),
            version=str(payload.get("version", "")),
            username=payload.get("username", ""),
        )

    def create_users(self, users: list[NewUser]) -> list[CreatedUser]:
        """Create users through core_user_create_users."""
        payload = self._call(FN_CREATE_USERS, {"users": [_record(u) for u in users]})
        return [
            CreatedUser(id=int(item["id"]), username=item["username"])
            for item in payload or []
        ]

    def get_users_by_field(self, field: str, values: list[str]) -> list[MoodleUser]:
        """Look users up through core_user_get_users_by_field."""
        payload = self._call(FN_GET_USERS_BY_FIELD, {"field": field, "values": values})
        return [
            MoodleUser(
                id=int(item["id"]),
                username=item.get("username", ""),
                firstname=item.get("firstname", ""),
                lastname=item.get("lastname", ""),
                fullname=item.get("fullname", ""),
                email=item.get("email", ""),
                auth=item.get("auth", "manual"),
                suspended=bool(item.get("suspended", False)),
                idnumber=item.get("idnumber", ""),
            )
            for item in payload or []
        ]

    def update_users(self, users: list[UserChanges]) -> None:
        """Apply profile changes through core_user_update_users.

        Raises:
            MoodleServiceError: If Moodle rejects any record with a warning.
        """
        payload = self._call(FN_UPDATE_USERS, {"users": [_record(u) for u in users]})

        # Newer Moodle releases report per-record rejections as warnings
        # instead of failing the call.
        warnings = payload.get("warnings") if isinstance(payload, dict) else None
        if warnings:
            item_ids = ", ".join(str(w.get("itemid", "?")) for w in warnings)
            first = warnings[0]
            raise MoodleServiceError(
                first.get("warningcode", ""),
                f"Update rejected for user id(s) {item_ids}: {first.get('message', '')}",
            )

    def assign_roles(self, assignments: list[RoleAssignment]) -> None:
        """Grant roles through core_role_assign_roles."""
        self._call(FN_ASSIGN_ROLES, {"assignments": [_record(a) for a in assignments]})

    def _call(self, function: str, arguments: Optional[dict[str, Any]] = None) -> Any:
        """Invoke one web-service function and return its decoded JSON.

        Raises:
            MoodleServiceError: If Moodle answers with an exception object.
            DownstreamUnavailableError: On transport, HTTP status or JSON errors.
        """
        form = {
            "wstoken": self._token,
            "wsfunction": function,
            "moodlewsrestformat": REST_FORMAT,
        }
        form.update(encode_params(arguments or {}))

        logger.debug("Calling Moodle function %s", function)
        try:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.post(self._endpoint, data=form)
                response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("Moodle function %s unreachable: %s", function, exc)
            raise DownstreamUnavailableError(str(exc)) from exc

        try:
            payload = response.json()
        except ValueError as exc:
            raise DownstreamUnavailableError(
                f"{function} returned a non-JSON response"
            ) from exc

        if isinstance(payload, dict) and "exception" in payload:
            logger.warning(
                "Moodle function %s raised %s: %s",
                function,
                payload.get("errorcode"),
                payload.get("message"),
            )
            raise MoodleServiceError(
                payload.get("errorcode", ""), payload.get("message", "")
            )

        return payload
