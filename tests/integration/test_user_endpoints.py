"""
Integration tests for user, group, myself and preference endpoints.
"""
import pytest

from jira_connector import JiraError
from jira_connector.core.domain import AnonymizationValidation, UserInput
from jira_connector.core.options import GroupMemberOptions, PickGroupsOptions, UserSearchOptions


class TestUsers:
    """Test /user operations."""

    async def test_get_by_username(self, jira, fake_jira):
        fake_jira.route("GET", "/user", 200, {"name": "alice", "displayName": "Alice", "active": True})

        user = await jira.users.get_by_username("alice", include_deleted=True)

        assert user.display_name == "Alice"
        assert fake_jira.last.url.params["username"] == "alice"
        assert fake_jira.last.url.params["includeDeleted"] == "true"

    async def test_create_sends_record_wire_form(self, jira, fake_jira):
        fake_jira.route("POST", "/user", 201, {"name": "carol"})

        await jira.users.create(UserInput(name="carol", email_address="carol@example.com"))

        assert fake_jira.last_json() == {"name": "carol", "emailAddress": "carol@example.com"}

    async def test_search_goes_to_search_resource(self, jira, fake_jira):
        fake_jira.route("GET", "/user/search", 200, [{"name": "alice"}, {"name": "alfred"}])

        users = await jira.users.search(UserSearchOptions(username="al", include_inactive=True))

        assert [u.name for u in users] == ["alice", "alfred"]
        assert fake_jira.last.url.params["includeInactive"] == "true"

    async def test_change_password_without_old_password(self, jira, fake_jira):
        await jira.users.change_password_by_key("JIRAUSER1", None, "n3w")

        assert fake_jira.last_path() == "/user/password"
        assert fake_jira.last.url.params["key"] == "JIRAUSER1"
        assert fake_jira.last_json() == {"password": "n3w"}

    async def test_application_remove_uses_delete(self, jira, fake_jira):
        await jira.users.applications("alice").remove("jira-software")

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_path() == "/user/application"
        assert fake_jira.last.url.params["applicationKey"] == "jira-software"
        assert fake_jira.last.url.params["username"] == "alice"

    async def test_user_property_set_and_delete(self, jira, fake_jira):
        properties = jira.users.properties()

        await properties.set_by_username("alice", "theme", {"dark": True})
        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_path() == "/user/properties/theme"
        assert fake_jira.last_json() == {"dark": True}

        await properties.delete_by_user_key("JIRAUSER1", "theme")
        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last.url.params["userKey"] == "JIRAUSER1"

    async def test_avatars_scoped_by_username(self, jira, fake_jira):
        fake_jira.route("GET", "/user/avatars", 200, {"system": [{"id": "1"}], "custom": []})

        avatars = await jira.users.avatars("alice").list()

        assert avatars["system"][0].id == "1"
        assert avatars["custom"] == []
        assert fake_jira.last.url.params["username"] == "alice"


class TestAnonymization:
    """Test the anonymization validation contract."""

    async def test_validation_findings_are_returned(self, jira, fake_jira):
        fake_jira.route("GET", "/user/anonymization", 400, {
            "errors": {"USER_NOT_DELETED": {"message": "Delete the user first"}},
            "userKey": "JIRAUSER1",
            "success": False,
        })

        result = await jira.users.anonymization("JIRAUSER1").validate(expand="affectedEntities")

        assert isinstance(result, AnonymizationValidation)
        assert result.success is False
        assert "USER_NOT_DELETED" in result.errors
        assert fake_jira.last.url.params["userKey"] == "JIRAUSER1"

    async def test_other_failures_still_raise(self, jira, fake_jira):
        fake_jira.route("GET", "/user/anonymization", 403, {"errorMessages": ["Forbidden"]})

        with pytest.raises(JiraError) as excinfo:
            await jira.users.anonymization("JIRAUSER1").validate()

        assert excinfo.value.status_code == 403

    async def test_schedule_posts(self, jira, fake_jira):
        fake_jira.route("POST", "/user/anonymization", 202, {"status": "IN_PROGRESS"})

        await jira.users.anonymization("JIRAUSER1").schedule(new_owner_key="admin")

        assert fake_jira.last.method == "POST"
        assert fake_jira.last.url.params["newOwnerKey"] == "admin"


class TestGroups:
    """Test /group, /groups/picker and /groupuserpicker."""

    async def test_members_page_follows_server_link(self, jira, fake_jira):
        fake_jira.route("GET", "/group/member", 200, {
            "startAt": 0, "maxResults": 1, "isLast": False,
            "nextPage": "https://jira.example.com/rest/api/latest/group/member?startAt=1",
            "values": [{"name": "alice"}],
        })

        page = await jira.groups.members("devs").list(GroupMemberOptions(max_results=1))

        assert page.items[0].name == "alice"
        assert page.is_last is False
        assert page.next_page.endswith("startAt=1")
        assert page.next_page_start is None
        assert fake_jira.last.url.params["groupname"] == "devs"

    async def test_add_member(self, jira, fake_jira):
        fake_jira.route("POST", "/group/user", 201, {"name": "devs"})

        group = await jira.groups.members("devs").add("alice")

        assert group.name == "devs"
        assert fake_jira.last_json() == {"name": "alice"}

    async def test_delete_with_swap_group(self, jira, fake_jira):
        await jira.groups.delete("old", swap_group="new")

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_path() == "/group"
        assert fake_jira.last.url.params["swapGroup"] == "new"

    async def test_picker_is_get(self, jira, fake_jira):
        fake_jira.route("GET", "/groups/picker", 200, {"total": 1, "groups": [{"name": "devs"}]})

        result = await jira.groups.pick(PickGroupsOptions(query="de"))

        assert result.groups[0].name == "devs"
        assert fake_jira.last.method == "GET"


class TestMyself:
    """Test /myself, /mypreferences and /password."""

    async def test_update_sends_connector_password(self, jira, fake_jira):
        fake_jira.route("PUT", "/myself", 200, {"name": "bob", "displayName": "Bob B"})

        await jira.myself.update(display_name="Bob B")

        assert fake_jira.last_json() == {"displayName": "Bob B", "password": "secret"}

    async def test_change_password(self, jira, fake_jira):
        await jira.myself.change_password("secret", "better")

        assert fake_jira.last_path() == "/myself/password"
        assert fake_jira.last_json() == {"password": "better", "currentPassword": "secret"}

    async def test_preference_set_sends_raw_text(self, jira, fake_jira):
        await jira.my_preferences.set("jira.user.locale", "de_DE")

        assert fake_jira.last.method == "PUT"
        assert fake_jira.last.url.params["key"] == "jira.user.locale"
        assert fake_jira.last.content == b"de_DE"
        assert fake_jira.last.headers["content-type"] == "text/plain"

    async def test_password_policy(self, jira, fake_jira):
        fake_jira.route("GET", "/password/policy", 200, ["At least 8 characters"])

        rules = await jira.password.policy().get(has_old_password=True)

        assert rules == ["At least 8 characters"]
        assert fake_jira.last.url.params["hasOldPassword"] == "true"
