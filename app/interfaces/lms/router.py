"""
FastAPI router for the LMS bounded context.

All routes delegate to use cases. No business logic here.
Bodies are bound by ``bind_body`` before the route runs.
Failures leave the route as exceptions and are written once, as
envelopes, by the centralized error handlers.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.application.lms.assign_role import AssignRoleUseCase
from app.application.lms.check_status import CheckStatusUseCase
from app.application.lms.create_user import CreateUserUseCase
from app.application.lms.dtos import (
    AssignRoleCommand,
    CreateUserCommand,
    GetUserByFieldQuery,
    UpdateUserCommand,
    UpdateUsersCommand,
    UserSyncCommand,
)
from app.application.lms.get_user_by_field import GetUserByFieldUseCase
from app.application.lms.sync_user import UserSyncUseCase
from app.application.lms.update_users import UpdateUsersUseCase
from app.interfaces.lms.binding import (
    BODY_POLICY,
    PARAMS_POLICY,
    REQUEST_POLICY,
    bind_body,
)
from app.interfaces.lms.dependencies import (
    get_assign_role_use_case,
    get_check_status_use_case,
    get_create_user_use_case,
    get_update_users_use_case,
    get_user_by_field_use_case,
    get_user_sync_use_case,
)
from app.interfaces.lms.schemas import (
    CreateUserRequest,
    GetUserByFieldRequest,
    RoleAssignRequest,
    UpdateUserRequest,
    UpdateUsersRequest,
    UserSyncRequest,
)
from app.shared.envelope import ApiResponse, envelope_response, success

HTTP_200 = 200

ERROR_RESPONSES = {
    400: {"model": ApiResponse},
    500: {"model": ApiResponse},
}

router = APIRouter(tags=["lms"])


@router.post(
    "/status",
    response_model=ApiResponse,
    responses=ERROR_RESPONSES,
    summary="Check Moodle status",
    description="Call the Moodle site-info function to prove the web service is reachable.",
)
def check_status(
    use_case: CheckStatusUseCase = Depends(get_check_status_use_case),
) -> JSONResponse:
    """Return Moodle site information."""
    result = use_case.execute()
    return envelope_response(HTTP_200, success(result))


@router.post(
    "/users",
    response_model=ApiResponse,
    responses=ERROR_RESPONSES,
    summary="Create a user",
)
def create_user(
    request: CreateUserRequest = Depends(bind_body(CreateUserRequest, PARAMS_POLICY)),
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
) -> JSONResponse:
    """Create one Moodle user and return its id and username."""
    command = CreateUserCommand(**request.model_dump())
    result = use_case.execute(command)
    return envelope_response(HTTP_200, success(result))


@router.post(
    "/users/search",
    response_model=ApiResponse,
    responses={**ERROR_RESPONSES, 404: {"model": ApiResponse}},
    summary="Find users by field",
)
def get_user_by_field(
    request: GetUserByFieldRequest = Depends(
        bind_body(GetUserByFieldRequest, BODY_POLICY)
    ),
    use_case: GetUserByFieldUseCase = Depends(get_user_by_field_use_case),
) -> JSONResponse:
    """Return every user whose field matches the value."""
    query = GetUserByFieldQuery(field=request.field, value=request.value)
    results = use_case.execute(query)
    return envelope_response(HTTP_200, success(results))


@router.put(
    "/users",
    response_model=ApiResponse,
    responses=ERROR_RESPONSES,
    summary="Update users",
    description="Apply an ordered batch of updates in one Moodle call. All or nothing.",
)
def update_users(
    request: list[UpdateUserRequest] = Depends(
        bind_body(UpdateUsersRequest, PARAMS_POLICY)
    ),
    use_case: UpdateUsersUseCase = Depends(get_update_users_use_case),
) -> JSONResponse:
    """Update a batch of users."""
    command = UpdateUsersCommand(
        users=tuple(UpdateUserCommand(**item.model_dump()) for item in request)
    )
    use_case.execute(command)
    return envelope_response(HTTP_200, success(message="Users updated successfully"))


@router.post(
    "/users/sync",
    response_model=ApiResponse,
    responses=ERROR_RESPONSES,
    summary="Synchronize a user",
    description="Create the user if the username is unknown, update it otherwise.",
)
def sync_user(
    request: UserSyncRequest = Depends(bind_body(UserSyncRequest, REQUEST_POLICY)),
    use_case: UserSyncUseCase = Depends(get_user_sync_use_case),
) -> JSONResponse:
    """Synchronize one user keyed by username."""
    command = UserSyncCommand(**request.model_dump())
    use_case.execute(command)
    return envelope_response(HTTP_200, success(message="User synced successfully"))


@router.post(
    "/roles/assign",
    response_model=ApiResponse,
    responses=ERROR_RESPONSES,
    summary="Assign a role",
)
def assign_role(
    request: RoleAssignRequest = Depends(bind_body(RoleAssignRequest, REQUEST_POLICY)),
    use_case: AssignRoleUseCase = Depends(get_assign_role_use_case),
) -> JSONResponse:
    """Grant a role to a user within a context."""
    command = AssignRoleCommand(
        roleid=request.roleid,
        userid=request.userid,
        contextid=request.contextid,
    )
    use_case.execute(command)
    return envelope_response(HTTP_200, success(message="User assigned successfully"))
