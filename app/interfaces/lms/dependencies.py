"""
Dependency injection for the LMS bounded context.

Provides FastAPI dependency functions that wire the Moodle adapter
into use cases via constructor injection. Tests override
``get_moodle_port`` to run the routes against a fake.
"""

from fastapi import Depends, Request

from app.application.lms.assign_role import AssignRoleUseCase
from app.application.lms.check_status import CheckStatusUseCase
from app.application.lms.create_user import CreateUserUseCase
from app.application.lms.get_user_by_field import GetUserByFieldUseCase
from app.application.lms.sync_user import UserSyncUseCase
from app.application.lms.update_users import UpdateUsersUseCase
from app.core.config import Settings
from app.domain.lms.ports import MoodleUserPort
from app.infrastructure.moodle.rest_adapter import MoodleRestAdapter


def get_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return request.app.state.settings


def get_moodle_port(settings: Settings = Depends(get_settings)) -> MoodleUserPort:
    """Build the Moodle REST adapter from application settings."""
    return MoodleRestAdapter(
        base_url=settings.moodle_base_url,
        token=settings.moodle_token.get_secret_value(),
        rest_path=settings.moodle_rest_path,
        timeout_seconds=settings.moodle_timeout_seconds,
    )


def get_check_status_use_case(
    port: MoodleUserPort = Depends(get_moodle_port),
) -> CheckStatusUseCase:
    """Build CheckStatusUseCase with its infrastructure dependencies."""
    return CheckStatusUseCase(moodle_port=port)


def get_create_user_use_case(
    port: MoodleUserPort = Depends(get_moodle_port),
) -> CreateUserUseCase:
    """Build CreateUserUseCase with its infrastructure dependencies."""
    return CreateUserUseCase(moodle_port=port)


def get_user_by_field_use_case(
    port: MoodleUserPort = Depends(get_moodle_port),
) -> GetUserByFieldUseCase:
    """Build GetUserByFieldUseCase with its infrastructure dependencies."""
    return GetUserByFieldUseCase(moodle_port=port)


def get_update_users_use_case(
    port: MoodleUserPort = Depends(get_moodle_port),
) -> UpdateUsersUseCase:
    """Build UpdateUsersUseCase with its infrastructure dependencies."""
    return UpdateUsersUseCase(moodle_port=port)


def get_user_sync_use_case(
    port: MoodleUserPort = Depends(get_moodle_port),
) -> UserSyncUseCase:
    """Build UserSyncUseCase with its infrastructure dependencies."""
    return UserSyncUseCase(moodle_port=port)


def get_assign_role_use_case(
    port: MoodleUserPort = Depends(get_moodle_port),
) -> AssignRoleUseCase:
    """Build AssignRoleUseCase with its infrastructure dependencies."""
    return AssignRoleUseCase(moodle_port=port)
