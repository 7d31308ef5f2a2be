"""
Tests for the Moodle REST adapter and its form encoding.

The httpx client is patched; no Moodle site is contacted.
"""

from unittest.mock import MagicMock, patch

import httpx
import pytest

from app.domain.lms.entities import NewUser, RoleAssignment, UserChanges
from app.domain.lms.errors import DownstreamUnavailableError, MoodleServiceError
from app.infrastructure.moodle.encoding import encode_params
from app.infrastructure.moodle.rest_adapter import MoodleRestAdapter

ENDPOINT = "https://lms.example.edu/webservice/rest/server.php"


@pytest.fixture
def adapter() -> MoodleRestAdapter:
    return MoodleRestAdapter(base_url="https://lms.example.edu/", token="t0ken")


@pytest.fixture
def http():
    """Patch httpx.Client and expose the client used inside ``with``."""
    with patch("app.infrastructure.moodle.rest_adapter.httpx.Client") as MockClient:
        client = MagicMock()
        MockClient.return_value.__enter__.return_value = client
        yield client


def _answer(http, payload) -> None:
    response = MagicMock()
    response.json.return_value = payload
    http.post.return_value = response


def _form(http) -> dict:
    return http.post.call_args.kwargs["data"]


class TestEncodeParams:
    """Tests for bracket-notation encoding."""

    def test_nested_lists_and_dicts(self) -> None:
        fields = encode_params(
            {"users": [{"username": "a", "id": 1}, {"username": "b"}]}
        )
        assert fields == {
            "users[0][username]": "a",
            "users[0][id]": "1",
            "users[1][username]": "b",
        }

    def test_none_dropped_and_bools_as_digits(self) -> None:
        fields = encode_params({"a": None, "b": True, "c": False})
        assert fields == {"b": "1", "c": "0"}


class TestMoodleRestAdapter:
    """Tests for calls, mapping and error translation."""

    def test_check_status(self, adapter, http) -> None:
        _answer(
            http,
            {
                "sitename": "Campus",
                "siteurl": "https://lms.example.edu",
                "release": "4.3",
                "version": 2023100900,
                "username": "ws-gateway",
            },
        )

        status = adapter.check_status()

        assert status.version == "2023100900"
        assert http.post.call_args.args[0] == ENDPOINT
        assert _form(http)["wsfunction"] == "core_webservice_get_site_info"
        assert _form(http)["wstoken"] == "t0ken"
        assert _form(http)["moodlewsrestformat"] == "json"

    def test_create_users_omits_unset_fields(self, adapter, http) -> None:
        _answer(http, [{"id": 42, "username": "jdoe"}])

        created = adapter.create_users(
            [NewUser("jdoe", "pw", "Jane", "Doe", "jane.doe@example.edu")]
        )

        assert created[0].id == 42
        form = _form(http)
        assert form["users[0][username]"] == "jdoe"
        assert form["users[0][auth]"] == "manual"
        assert "users[0][idnumber]" not in form

    def test_get_users_by_field(self, adapter, http) -> None:
        _answer(http, [{"id": "4", "username": "jdoe", "suspended": 1}])

        users = adapter.get_users_by_field("email", ["jane.doe@example.edu"])

        assert users[0].id == 4
        assert users[0].suspended is True
        assert _form(http)["values[0]"] == "jane.doe@example.edu"

    def test_empty_lookup_is_an_empty_list(self, adapter, http) -> None:
        _answer(http, [])
        assert adapter.get_users_by_field("email", ["x@y.z"]) == []

    def test_update_users_accepts_null_answer(self, adapter, http) -> None:
        _answer(http, None)
        adapter.update_users([UserChanges(id=3, suspended=1)])
        assert _form(http)["users[0][suspended]"] == "1"

    def test_update_warnings_fail_the_batch(self, adapter, http) -> None:
        _answer(
            http,
            {
                "warnings": [
                    {"item": "user", "itemid": 2, "warningcode": "invaliduserid",
                     "message": "Invalid user ID"},
                    {"item": "user", "itemid": 9, "warningcode": "invaliduserid",
                     "message": "Invalid user ID"},
                ]
            },
        )

        with pytest.raises(MoodleServiceError) as excinfo:
            adapter.update_users([UserChanges(id=2), UserChanges(id=9)])

        assert excinfo.value.error_code == "invaliduserid"
        assert "2, 9" in excinfo.value.message

    def test_assign_roles(self, adapter, http) -> None:
        _answer(http, None)
        adapter.assign_roles([RoleAssignment(roleid=5, userid=12, contextid=1)])
        form = _form(http)
        assert form["wsfunction"] == "core_role_assign_roles"
        assert form["assignments[0][roleid]"] == "5"

    def test_moodle_exception_becomes_service_error(self, adapter, http) -> None:
        _answer(
            http,
            {
                "exception": "invalid_parameter_exception",
                "errorcode": "invalidparameter",
                "message": "Invalid parameter value detected",
            },
        )

        with pytest.raises(MoodleServiceError) as excinfo:
            adapter.get_users_by_field("nickname", ["x"])

        assert excinfo.value.error_code == "invalidparameter"
        assert excinfo.value.message == "Invalid parameter value detected"

    def test_transport_error_is_unavailable(self, adapter, http) -> None:
        http.post.side_effect = httpx.ConnectError("connection refused")

        with pytest.raises(DownstreamUnavailableError) as excinfo:
            adapter.check_status()

        assert "connection refused" in excinfo.value.message

    def test_non_json_answer_is_unavailable(self, adapter, http) -> None:
        response = MagicMock()
        response.json.side_effect = ValueError("Expecting value")
        http.post.return_value = response

        with pytest.raises(DownstreamUnavailableError):
            adapter.check_status()
