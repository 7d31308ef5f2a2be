"""
Shared fixtures.

Routes run against an in-memory Moodle port so no Moodle site is needed.
"""

from dataclasses import asdict, fields, replace

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.domain.lms.entities import (
    CreatedUser,
    MoodleUser,
    NewUser,
    RoleAssignment,
    SiteStatus,
    UserChanges,
)
from app.domain.lms.ports import MoodleUserPort
from app.interfaces.lms.dependencies import get_moodle_port
from app.main import create_app

_USER_FIELDS = {f.name for f in fields(MoodleUser)}


class FakeMoodlePort(MoodleUserPort):
    """In-memory Moodle. Set ``failures[method] = exc`` to make a call fail."""

    def __init__(self) -> None:
        self.users: dict[int, MoodleUser] = {}
        self.assignments: list[RoleAssignment] = []
        self.update_batches: list[list[UserChanges]] = []
        self.failures: dict[str, Exception] = {}
        self.calls: list[str] = []
        self._next_id = 100

    def _enter(self, method: str) -> None:
        self.calls.append(method)
        if method in self.failures:
            raise self.failures[method]

    def check_status(self) -> SiteStatus:
        self._enter("check_status")
        return SiteStatus(
            sitename="Campus",
            siteurl="https://lms.example.edu",
            release="4.3 (Build: 20231009)",
            version="2023100900",
            username="ws-gateway",
        )

    def create_users(self, users: list[NewUser]) -> list[CreatedUser]:
        self._enter("create_users")
        created = []
        for user in users:
            user_id = self._next_id
            self._next_id += 1
            self.users[user_id] = MoodleUser(
                id=user_id,
                username=user.username,
                firstname=user.firstname,
                lastname=user.lastname,
                fullname=f"{user.firstname} {user.lastname}",
                email=user.email,
                auth=user.auth,
                idnumber=user.idnumber or "",
            )
            created.append(CreatedUser(id=user_id, username=user.username))
        return created

    def get_users_by_field(self, field: str, values: list[str]) -> list[MoodleUser]:
        self._enter("get_users_by_field")
        return [
            u for u in self.users.values() if str(getattr(u, field, None)) in values
        ]

    def update_users(self, users: list[UserChanges]) -> None:
        self._enter("update_users")
        self.update_batches.append(list(users))
        for change in users:
            existing = self.users.get(change.id)
            if existing is None:
                continue
            changed = {
                k: v
                for k, v in asdict(change).items()
                if v is not None and k in _USER_FIELDS and k != "id"
            }
            self.users[change.id] = replace(existing, **changed)

    def assign_roles(self, assignments: list[RoleAssignment]) -> None:
        self._enter("assign_roles")
        self.assignments.extend(assignments)


@pytest.fixture
def moodle() -> FakeMoodlePort:
    return FakeMoodlePort()


@pytest.fixture
def make_client(moodle):
    """Build a test client for an app created with the given settings."""

    def _make(**overrides) -> TestClient:
        overrides.setdefault("rate_limit_enabled", False)
        app = create_app(Settings(**overrides))
        app.dependency_overrides[get_moodle_port] = lambda: moodle
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client()
