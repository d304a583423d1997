"""
Integration tests for fields, filters, dashboards, screens, workflows,
schemes, lookups and instance administration endpoints.
"""
import io
import zipfile

from jira_connector import PageOptions
from jira_connector.core.domain import (
    ApplicationRole, EntityProperty, Filter, IssueTypeMapping, PermissionGrantInput,
    PermissionHolder, ShareScope, WorkflowPropertyInput,
)
from jira_connector.core.options import ListFieldOptions, ReindexOptions, StatusOptions


class TestFields:
    """Test /field, /customFields and /customFieldOption."""

    async def test_list_fields(self, jira, fake_jira):
        fake_jira.route("GET", "/field", 200, [{"id": "summary", "name": "Summary", "custom": False}])

        fields = await jira.fields.list()

        assert fields[0].name == "Summary"

    async def test_custom_fields_page_with_filters(self, jira, fake_jira):
        fake_jira.route("GET", "/customFields", 200, {
            "startAt": 0, "maxResults": 1, "total": 3, "values": [{"id": "customfield_10000"}],
        })

        page = await jira.custom_fields.list(ListFieldOptions(
            search="Story", types=["select"], page_options=PageOptions(max_results=1)
        ))

        assert page.items[0].id == "customfield_10000"
        assert page.next_page_start == 1
        params = fake_jira.last.url.params
        assert params["search"] == "Story"
        assert params["types"] == "select"
        assert params["maxResults"] == "1"
        assert "pageOptions" not in params

    async def test_delete_custom_fields(self, jira, fake_jira):
        fake_jira.route("DELETE", "/customFields", 200, {
            "message": "done", "deletedCustomFields": ["customfield_1"], "notDeletedCustomFields": [],
        })

        result = await jira.custom_fields.delete_bulk(["customfield_1", "customfield_2"])

        assert result.deleted_custom_fields == ["customfield_1"]
        assert fake_jira.last.url.params["ids"] == "customfield_1,customfield_2"

    async def test_custom_field_option(self, jira, fake_jira):
        fake_jira.route("GET", "/customFieldOption/10100", 200, {"value": "High"})

        option = await jira.custom_fields.get("10100")

        assert option.value == "High"


class TestScreens:
    """Test /screens and its tabs."""

    async def test_list_page(self, jira, fake_jira):
        fake_jira.route("GET", "/screens", 200, {
            "startAt": 0, "maxResults": 25, "total": 1, "screens": [{"id": 1, "name": "Default"}],
        })

        page = await jira.screens.list(search="Def")

        assert page.items[0].name == "Default"
        assert fake_jira.last.url.params["search"] == "Def"

    async def test_add_to_default_posts(self, jira, fake_jira):
        await jira.screens.add_to_default("customfield_10000")

        assert fake_jira.last.method == "POST"
        assert fake_jira.last_path() == "/screens/addToDefault/customfield_10000"

    async def test_tab_field_move(self, jira, fake_jira):
        await jira.screens.tabs(1).fields(10000).move("summary", position="First")

        assert fake_jira.last_path() == "/screens/1/tabs/10000/fields/summary/move"
        assert fake_jira.last_json() == {"position": "First"}

    async def test_tab_move(self, jira, fake_jira):
        await jira.screens.tabs(1).move(10000, 0)

        assert fake_jira.last.method == "POST"
        assert fake_jira.last_path() == "/screens/1/tabs/10000/move/0"


class TestFilters:
    """Test /filter and its children."""

    async def test_create(self, jira, fake_jira):
        fake_jira.route("POST", "/filter", 200, {"id": "10000", "name": "Mine", "jql": "assignee = currentUser()"})

        created = await jira.filters.create(Filter(name="Mine", jql="assignee = currentUser()"), expand="sharedUsers")

        assert created.id == "10000"
        assert fake_jira.last_json() == {"name": "Mine", "jql": "assignee = currentUser()"}
        assert fake_jira.last.url.params["expand"] == "sharedUsers"

    async def test_default_share_scope(self, jira, fake_jira):
        fake_jira.route("PUT", "/filter/defaultShareScope", 200, {"scope": "PRIVATE"})

        scope = await jira.filters.default_share_scope().set(ShareScope(scope="PRIVATE"))

        assert scope.scope == "PRIVATE"
        assert fake_jira.last_json() == {"scope": "PRIVATE"}

    async def test_columns_reset(self, jira, fake_jira):
        await jira.filters.columns("10000").reset()

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_path() == "/filter/10000/columns"

    async def test_favourites(self, jira, fake_jira):
        fake_jira.route("GET", "/filter/favourite", 200, [{"id": "10000"}])

        favourites = await jira.filters.favourites().list()

        assert favourites[0].id == "10000"


class TestDashboards:
    """Test /dashboard."""

    async def test_list_passes_each_given_parameter(self, jira, fake_jira):
        fake_jira.route("GET", "/dashboard", 200, {
            "startAt": 0, "maxResults": 20, "total": 40, "dashboards": [{"id": "1"}],
            "next": "https://jira.example.com/rest/api/latest/dashboard?startAt=20",
        })

        page = await jira.dashboards.list(filter_name="favourite", max_results=20)

        assert page.items[0].id == "1"
        assert page.next_page.endswith("startAt=20")
        assert page.next_page_start is None
        params = fake_jira.last.url.params
        assert params["filter"] == "favourite"
        assert params["maxResults"] == "20"
        assert "startAt" not in params

    async def test_item_property_set(self, jira, fake_jira):
        await jira.dashboards.items("10000").properties("20000").set(EntityProperty(key="color", value={"hex": "#fff"}))

        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_path() == "/dashboard/10000/items/20000/properties/color"
        assert fake_jira.last_json() == {"hex": "#fff"}


class TestWorkflows:
    """Test /workflow and /workflowscheme."""

    async def test_list_single_workflow(self, jira, fake_jira):
        fake_jira.route("GET", "/workflow", 200, {"name": "jira", "steps": 5})

        workflows = await jira.workflows.list(workflow_name="jira")

        assert len(workflows) == 1
        assert workflows[0].steps == 5

    async def test_transition_property_create(self, jira, fake_jira):
        fake_jira.route("POST", "/workflow/transitions/11/properties", 200, {"key": "jira.i18n", "value": "x"})

        prop = await jira.workflows.properties(11).create(
            WorkflowPropertyInput(key="jira.i18n", value="x", workflow_name="classic")
        )

        assert prop.key == "jira.i18n"
        params = fake_jira.last.url.params
        assert params["key"] == "jira.i18n"
        assert params["workflowName"] == "classic"
        assert "workflowMode" not in params
        assert fake_jira.last_json() == {"value": "x"}

    async def test_scheme_children_are_scoped_by_id(self, jira, fake_jira):
        await jira.workflow_schemes.default(10100).get(return_draft_if_exists=True)

        assert fake_jira.last_path() == "/workflowscheme/10100/default"
        assert fake_jira.last.url.params["returnDraftIfExists"] == "true"

    async def test_draft_issue_type_mapping(self, jira, fake_jira):
        fake_jira.route("PUT", "/workflowscheme/10100/draft/issuetype/3", 200, {"id": 10101, "name": "Draft"})

        scheme = await jira.workflow_schemes.draft(10100).issue_type().set(
            IssueTypeMapping(issue_type="3", workflow="jira")
        )

        assert scheme.name == "Draft"
        assert fake_jira.last_json() == {"issueType": "3", "workflow": "jira"}

    async def test_draft_workflow_mapping_path(self, jira, fake_jira):
        await jira.workflow_schemes.draft(10100).workflow().delete("jira")

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_path() == "/workflowscheme/10100/draft/workflow"
        assert fake_jira.last.url.params["workflowName"] == "jira"

    async def test_create_draft_posts(self, jira, fake_jira):
        fake_jira.route("POST", "/workflowscheme/10100/createdraft", 201, {"id": 10101})

        draft = await jira.workflow_schemes.create_draft(10100)

        assert draft.id == 10101


class TestSchemes:
    """Test permission, notification and security schemes."""

    async def test_permission_grants_list(self, jira, fake_jira):
        fake_jira.route("GET", "/permissionscheme/0/permission", 200, {
            "permissions": [{"id": 10000, "permission": "BROWSE_PROJECTS"}],
        })

        grants = await jira.permission_schemes.permissions("0").list()

        assert grants[0].permission == "BROWSE_PROJECTS"

    async def test_permission_grant_create(self, jira, fake_jira):
        fake_jira.route("POST", "/permissionscheme/0/permission", 201, {"id": 10001})

        await jira.permission_schemes.permissions("0").create(PermissionGrantInput(
            holder=PermissionHolder(type="group", parameter="devs"), permission="EDIT_ISSUES"
        ))

        assert fake_jira.last_json() == {
            "holder": {"type": "group", "parameter": "devs"},
            "permission": "EDIT_ISSUES",
        }

    async def test_notification_schemes_page(self, jira, fake_jira):
        fake_jira.route("GET", "/notificationscheme", 200, {
            "startAt": 0, "maxResults": 50, "total": 1, "values": [{"id": 10000, "name": "Default"}],
        })

        page = await jira.notification_schemes.list()

        assert page.items[0].name == "Default"
        assert page.is_last is True


class TestLookups:
    """Test priorities, resolutions and statuses."""

    async def test_resolutions_page(self, jira, fake_jira):
        fake_jira.route("GET", "/resolution/page", 200, {
            "startAt": 0, "maxResults": 50, "total": 1, "isLast": True, "values": [{"id": "1", "name": "Done"}],
        })

        page = await jira.resolutions.list(query="Do")

        assert page.items[0].name == "Done"
        assert fake_jira.last.url.params["query"] == "Do"

    async def test_statuses_with_options(self, jira, fake_jira):
        fake_jira.route("GET", "/status/page", 200, {"startAt": 0, "maxResults": 50, "total": 0, "values": []})

        page = await jira.statuses.list(StatusOptions(project_ids=["10000"], search_by="name"))

        assert page.items == []
        assert fake_jira.last.url.params["projectIds"] == "10000"
        assert fake_jira.last.url.params["searchBy"] == "name"

    async def test_priorities(self, jira, fake_jira):
        fake_jira.route("GET", "/priority", 200, [{"id": "1", "name": "Blocker"}])

        priorities = await jira.priorities.list()

        assert priorities[0].name == "Blocker"


class TestAdministration:
    """Test instance level endpoints."""

    async def test_server_info(self, jira, fake_jira):
        fake_jira.route("GET", "/serverInfo", 200, {"version": "9.12.0", "versionNumbers": [9, 12, 0]})

        info = await jira.server_info.get(do_health_check=True)

        assert info.version_numbers == [9, 12, 0]
        assert fake_jira.last.url.params["doHealthCheck"] == "true"

    async def test_application_role_update_sends_if_match(self, jira, fake_jira):
        fake_jira.route("PUT", "/applicationrole/jira-software", 200, {"key": "jira-software"})

        role_update = ApplicationRole(key="jira-software", groups=["jira-software-users"])

        role = await jira.application_roles.update("jira-software", role_update, if_match="abc123")

        assert role.key == "jira-software"
        assert fake_jira.last.headers["if-match"] == "abc123"

    async def test_base_url_is_raw_text(self, jira, fake_jira):
        await jira.settings.update_base_url("https://jira.example.org")

        assert fake_jira.last.content == b"https://jira.example.org"

    async def test_reindex_progress_bulk_repeats_request_id(self, jira, fake_jira):
        fake_jira.route("GET", "/reindex/request/bulk", 200, [{"id": 1}, {"id": 2}])

        requests = await jira.reindex.request().progress_bulk([1, 2])

        assert [r.id for r in requests] == [1, 2]
        assert fake_jira.last.url.params.get_list("requestId") == ["1", "2"]

    async def test_reindex_kick_off(self, jira, fake_jira):
        fake_jira.route("POST", "/reindex", 202, {"currentProgress": 0, "type": "BACKGROUND"})

        await jira.reindex.kick_off(ReindexOptions(type="BACKGROUND", index_comments=True))

        assert fake_jira.last.url.params["indexComments"] == "true"

    async def test_upgrade_result_without_content(self, jira, fake_jira):
        result = await jira.upgrade.result()

        assert result is None

    async def test_email_templates_download_keeps_bytes(self, jira, fake_jira):
        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w") as archive:
            archive.writestr("templates/issuecreated.vm", b"\x95\xcc created")
        fake_jira.route("GET", "/email-templates", 200, content=buffer.getvalue(), content_type="application/zip")

        data = await jira.email_templates.download()

        assert data == buffer.getvalue()
        assert zipfile.ZipFile(io.BytesIO(data)).namelist() == ["templates/issuecreated.vm"]

    async def test_system_avatars_width_header(self, jira, fake_jira):
        fake_jira.route("GET", "/avatar/project/system", 200, {"system": [{"id": "10011"}]})

        avatars = await jira.avatar.list("project", width="48")

        assert avatars.system[0].id == "10011"
        assert fake_jira.last.headers["x-requested-with"] == "48"

    async def test_attachment_meta(self, jira, fake_jira):
        fake_jira.route("GET", "/attachment/meta", 200, {"enabled": True, "uploadLimit": 10485760})

        meta = await jira.attachments.get_meta()

        assert meta.upload_limit == 10485760
