"""
Integration tests for project, component, version and role endpoints.
"""
from jira_connector import PageOptions
from jira_connector.core.domain import ActorInput, ComponentInput, VersionInput
from jira_connector.core.options import ComponentOptions, ProjectOptions


class TestProjects:
    """Test /project and its per-project children."""

    async def test_list_with_options(self, jira, fake_jira):
        fake_jira.route("GET", "/project", 200, [{"key": "PRJ"}, {"key": "OPS"}])

        projects = await jira.projects.list(ProjectOptions(recent=5, include_archived=False))

        assert [p.key for p in projects] == ["PRJ", "OPS"]
        assert fake_jira.last.url.params["recent"] == "5"
        assert fake_jira.last.url.params["includeArchived"] == "false"

    async def test_pick_uses_projects_picker(self, jira, fake_jira):
        fake_jira.route("GET", "/projects/picker", 200, {"total": 1, "projects": [{"key": "PRJ"}]})

        result = await jira.projects.pick("PR", max_results=5)

        assert result.projects[0].key == "PRJ"
        assert fake_jira.last.url.params["query"] == "PR"

    async def test_validate_key_returns_error_collection(self, jira, fake_jira):
        fake_jira.route("GET", "/projectvalidate/key", 200, {
            "errorMessages": [], "errors": {"projectKey": "Project key already in use"},
        })

        result = await jira.projects.validate_key("PRJ")

        assert result.errors == {"projectKey": "Project key already in use"}
        assert fake_jira.last.url.params["key"] == "PRJ"

    async def test_children_are_scoped_by_project(self, jira, fake_jira):
        await jira.projects.components("PRJ").list()
        assert fake_jira.last_path() == "/project/PRJ/components"

        await jira.projects.statuses("PRJ").list()
        assert fake_jira.last_path() == "/project/PRJ/statuses"

        await jira.projects.workflow_scheme("PRJ").get()
        assert fake_jira.last_path() == "/project/PRJ/workflowscheme"

    async def test_type_update(self, jira, fake_jira):
        fake_jira.route("PUT", "/project/PRJ/type/software", 200, {"key": "PRJ", "projectTypeKey": "software"})

        project = await jira.projects.type("PRJ").update("software")

        assert project.project_type_key == "software"

    async def test_versions_page(self, jira, fake_jira):
        fake_jira.route("GET", "/project/PRJ/version", 200, {
            "startAt": 0, "maxResults": 2, "total": 5, "values": [{"name": "1.0"}, {"name": "1.1"}],
        })

        page = await jira.projects.versions("PRJ").list(PageOptions(max_results=2))

        assert [v.name for v in page.items] == ["1.0", "1.1"]
        assert page.next_page_start == 2
        assert page.total == 5

    async def test_role_actor_removal_by_group(self, jira, fake_jira):
        await jira.projects.roles("PRJ").delete_actor("10002", "devs", is_group=True)

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_path() == "/project/PRJ/role/10002"
        assert fake_jira.last.url.params["group"] == "devs"
        assert "user" not in fake_jira.last.url.params

    async def test_permission_scheme_assign(self, jira, fake_jira):
        fake_jira.route("PUT", "/project/PRJ/permissionscheme", 200, {"id": 10000, "name": "Default"})

        scheme = await jira.projects.permission_scheme("PRJ").assign(10000)

        assert scheme.name == "Default"
        assert fake_jira.last_json() == {"id": 10000}

    async def test_avatar_upload(self, jira, fake_jira, tmp_path):
        path = tmp_path / "logo.png"
        path.write_bytes(b"\x89PNG....")
        fake_jira.route("POST", "/project/PRJ/avatar/temporary", 201, {"cropperWidth": 48, "needsCropping": True})

        cropping = await jira.projects.avatars("PRJ").upload(str(path), 8)

        assert cropping.needs_cropping is True
        assert fake_jira.last.url.params["filename"] == "logo.png"
        assert fake_jira.last.url.params["size"] == "8"
        assert fake_jira.last.headers["x-atlassian-token"] == "no-check"

    async def test_delete(self, jira, fake_jira):
        await jira.projects.delete("PRJ")

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last_path() == "/project/PRJ"


class TestComponents:
    """Test /component."""

    async def test_list_page(self, jira, fake_jira):
        fake_jira.route("GET", "/component/page", 200, {
            "startAt": 0, "maxResults": 50, "total": 1, "values": [{"id": "10000", "name": "Backend"}],
        })

        page = await jira.components.list(ComponentOptions(query="Back", project_ids=["10000", "10001"]))

        assert page.items[0].name == "Backend"
        assert page.is_last is True
        assert fake_jira.last.url.params["projectIds"] == "10000,10001"

    async def test_create(self, jira, fake_jira):
        fake_jira.route("POST", "/component", 201, {"id": "10001", "name": "API"})

        component = await jira.components.create(ComponentInput(name="API", project="PRJ"))

        assert component.id == "10001"
        assert fake_jira.last_json() == {"name": "API", "project": "PRJ"}

    async def test_delete_moves_issues(self, jira, fake_jira):
        await jira.components.delete("10000", move_issues_to="10001")

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last.url.params["moveIssuesTo"] == "10001"


class TestVersions:
    """Test /version."""

    async def test_create(self, jira, fake_jira):
        fake_jira.route("POST", "/version", 201, {"id": "10100", "name": "2.0"})

        version = await jira.versions.create(VersionInput(name="2.0", project="PRJ", released=False))

        assert version.id == "10100"
        assert fake_jira.last_json() == {"name": "2.0", "project": "PRJ", "released": False}

    async def test_move_to_position(self, jira, fake_jira):
        fake_jira.route("POST", "/version/10100/move", 200, {"id": "10100"})

        await jira.versions.move_to("10100", "First")

        assert fake_jira.last_json() == {"position": "First"}

    async def test_merge(self, jira, fake_jira):
        await jira.versions.merge("10100", "10101")

        assert fake_jira.last.method == "PUT"
        assert fake_jira.last_path() == "/version/10100/mergeto/10101"

    async def test_delete_moves_issues(self, jira, fake_jira):
        await jira.versions.delete("10100", move_fix_issues_to="10101")

        assert fake_jira.last.url.params["moveFixIssuesTo"] == "10101"
        assert "moveAffectedIssuesTo" not in fake_jira.last.url.params


class TestRoles:
    """Test /role."""

    async def test_add_actors(self, jira, fake_jira):
        fake_jira.route("POST", "/role/10002/actors", 200, {"actors": [{"name": "devs", "type": "atlassian-group-role-actor"}]})

        actors = await jira.roles.actors("10002").add(ActorInput(group=["devs"]))

        assert actors.actors[0].name == "devs"
        assert fake_jira.last_json() == {"group": ["devs"]}

    async def test_create(self, jira, fake_jira):
        fake_jira.route("POST", "/role", 200, {"id": 10003, "name": "Testers"})

        role = await jira.roles.create("Testers", "QA team")

        assert role.name == "Testers"
        assert fake_jira.last_json() == {"name": "Testers", "description": "QA team"}

    async def test_delete_with_swap(self, jira, fake_jira):
        await jira.roles.delete("10003", swap="10002")

        assert fake_jira.last.method == "DELETE"
        assert fake_jira.last.url.params["swap"] == "10002"
