"""
Project endpoints: projects and their per-project sub-resources, project
categories, components, versions and global roles.
"""
from typing import Any, Dict, List, Optional, Union

from ...core.domain import (
    ActorInput, Component, ComponentInput, ComponentIssuesCount, ErrorCollection,
    IssueTypeStatuses, NotificationScheme, PermissionScheme, Project, ProjectCategory,
    ProjectCategoryInput, ProjectIdentity, ProjectInput, ProjectRole,
    ProjectRoleActorsInput, ProjectsSearchResult, RemoteEntityLinks, RoleActors,
    SecurityLevels, SecurityScheme, UnresolvedVersionIssueCount, Version, VersionInput,
    VersionIssueCounts, WorkflowScheme,
)
from ...core.options import ComponentOptions, ProjectOptions, VersionOptions
from ...core.pagination import Page, PageOptions
from ..resource import ResourceClient
from .avatar import OwnedAvatarsEndpoint


class ProjectComponentsEndpoint:
    """Operations on /project/{project}/components."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/components")

    async def list(self) -> List[Component]:
        return await self._client.fetch(self._client.get(), List[Component])


class ProjectStatusesEndpoint:
    """Operations on /project/{project}/statuses."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/statuses")

    async def list(self) -> List[IssueTypeStatuses]:
        """Statuses grouped by the issue types of the project."""
        return await self._client.fetch(self._client.get(), List[IssueTypeStatuses])


class ProjectTypeEndpoint:
    """Operations on /project/{project}/type."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/type")

    async def update(self, type_key: str) -> Project:
        return await self._client.fetch(self._client.put(type_key), Project)


class ProjectVersionsEndpoint:
    """Operations on /project/{project}/version."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/version")

    async def list(self, page_options: Optional[PageOptions] = None) -> Page[Version]:
        request = self._client.get(page_options=page_options)
        return await self._client.fetch_page(request, 'values', Version)


class ProjectRolesEndpoint:
    """Operations on /project/{project}/role."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/role")

    async def list(self) -> Dict[str, str]:
        """Role names mapped to the URL of the role in this project."""
        return await self._client.execute(self._client.get())

    async def get(self, role_id: str) -> ProjectRole:
        return await self._client.fetch(self._client.get(role_id), ProjectRole)

    async def add_actors(self, role_id: str, actors: Union[ActorInput, Dict[str, List[str]]]) -> ProjectRole:
        """Add users ("user") and/or groups ("group") to the role."""
        request = self._client.post(role_id).as_json().with_body(actors)
        return await self._client.fetch(request, ProjectRole)

    async def delete_actor(self, role_id: str, name: str, is_group: bool = False) -> None:
        request = self._client.delete(role_id).with_query_param('group' if is_group else 'user', name)
        await self._client.execute(request)

    async def set_actors(self, role_id: str, actors: ProjectRoleActorsInput) -> ProjectRole:
        """Replace the actors of the role."""
        request = self._client.put(role_id).as_json().with_body(actors)
        return await self._client.fetch(request, ProjectRole)


class ProjectIssueSecurityLevelSchemeEndpoint:
    """Operations on /project/{project}/issuesecuritylevelscheme."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/issuesecuritylevelscheme")

    async def get(self) -> SecurityScheme:
        return await self._client.fetch(self._client.get(), SecurityScheme)


class ProjectNotificationSchemeEndpoint:
    """Operations on /project/{project}/notificationscheme."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/notificationscheme")

    async def get(self) -> NotificationScheme:
        return await self._client.fetch(self._client.get(), NotificationScheme)


class ProjectPermissionSchemeEndpoint:
    """Operations on /project/{project}/permissionscheme."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/permissionscheme")

    async def get(self, expand: Optional[str] = None) -> PermissionScheme:
        request = self._client.get().with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionScheme)

    async def assign(self, scheme_id: Union[int, str], expand: Optional[str] = None) -> PermissionScheme:
        request = self._client.put().as_json().with_body({'id': scheme_id}) \
            .with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionScheme)


class ProjectSecurityLevelsEndpoint:
    """Operations on /project/{project}/securitylevel."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/securitylevel")

    async def list(self) -> SecurityLevels:
        """Security levels the current user may set on issues of the project."""
        return await self._client.fetch(self._client.get(), SecurityLevels)


class ProjectWorkflowSchemeEndpoint:
    """Operations on /project/{project}/workflowscheme."""

    def __init__(self, parent: ResourceClient, project_id: str):
        self._client = parent.child(f"/{project_id}/workflowscheme")

    async def get(self) -> WorkflowScheme:
        return await self._client.fetch(self._client.get(), WorkflowScheme)


class ProjectsEndpoint:
    """Operations on /project.

    Per-project sub-resources are reached through accessors taking the
    project id or key, e.g. ``projects.versions('PRJ').list()``.
    """

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/project')

    def avatars(self, project_id: str) -> OwnedAvatarsEndpoint:
        return OwnedAvatarsEndpoint(self._client.child(f"/{project_id}"))

    def components(self, project_id: str) -> ProjectComponentsEndpoint:
        return ProjectComponentsEndpoint(self._client, project_id)

    def statuses(self, project_id: str) -> ProjectStatusesEndpoint:
        return ProjectStatusesEndpoint(self._client, project_id)

    def type(self, project_id: str) -> ProjectTypeEndpoint:
        return ProjectTypeEndpoint(self._client, project_id)

    def versions(self, project_id: str) -> ProjectVersionsEndpoint:
        return ProjectVersionsEndpoint(self._client, project_id)

    def roles(self, project_id: str) -> ProjectRolesEndpoint:
        return ProjectRolesEndpoint(self._client, project_id)

    def issue_security_level_scheme(self, project_id: str) -> ProjectIssueSecurityLevelSchemeEndpoint:
        return ProjectIssueSecurityLevelSchemeEndpoint(self._client, project_id)

    def notification_scheme(self, project_id: str) -> ProjectNotificationSchemeEndpoint:
        return ProjectNotificationSchemeEndpoint(self._client, project_id)

    def permission_scheme(self, project_id: str) -> ProjectPermissionSchemeEndpoint:
        return ProjectPermissionSchemeEndpoint(self._client, project_id)

    def security_levels(self, project_id: str) -> ProjectSecurityLevelsEndpoint:
        return ProjectSecurityLevelsEndpoint(self._client, project_id)

    def workflow_scheme(self, project_id: str) -> ProjectWorkflowSchemeEndpoint:
        return ProjectWorkflowSchemeEndpoint(self._client, project_id)

    async def list(self, options: Optional[ProjectOptions] = None) -> List[Project]:
        """Projects visible to the current user."""
        request = self._client.apply_options(self._client.get(), options)
        return await self._client.fetch(request, List[Project])

    async def pick(self, query: str, max_results: Optional[int] = None) -> ProjectsSearchResult:
        """Project suggestions matching ``query``, served from /projects/picker."""
        request = self._client.at_root('/projects').get('picker') \
            .with_query_param('query', query) \
            .with_query_param('maxResults', max_results)
        return await self._client.fetch(request, ProjectsSearchResult)

    async def validate_key(self, key: str) -> ErrorCollection:
        """Check a candidate project key; problems come back as an error collection."""
        request = self._client.at_root('/projectvalidate').get('key').with_query_param('key', key)
        return await self._client.fetch(request, ErrorCollection)

    async def create(self, project: ProjectInput) -> ProjectIdentity:
        request = self._client.post().as_json().with_body(project)
        return await self._client.fetch(request, ProjectIdentity)

    async def get(self, project_id: str, expand: Optional[str] = None) -> Project:
        request = self._client.get(project_id).with_query_param('expand', expand or None)
        return await self._client.fetch(request, Project)

    async def update(self, project_id: str, project: ProjectInput) -> Project:
        request = self._client.put(project_id).as_json().with_body(project)
        return await self._client.fetch(request, Project)

    async def archive(self, project_id: str) -> None:
        await self._client.execute(self._client.put(f"{project_id}/archive"))

    async def restore(self, project_id: str) -> None:
        await self._client.execute(self._client.put(f"{project_id}/restore"))

    async def delete(self, project_id: str) -> None:
        await self._client.execute(self._client.delete(project_id))


class ProjectCategoriesEndpoint:
    """Operations on /projectCategory."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/projectCategory')

    async def list(self) -> List[ProjectCategory]:
        return await self._client.fetch(self._client.get(), List[ProjectCategory])

    async def create(self, category: ProjectCategoryInput) -> ProjectCategory:
        request = self._client.post().as_json().with_body(category)
        return await self._client.fetch(request, ProjectCategory)

    async def get(self, category_id: str) -> ProjectCategory:
        return await self._client.fetch(self._client.get(category_id), ProjectCategory)

    async def update(self, category_id: str, category: ProjectCategoryInput) -> ProjectCategory:
        request = self._client.put(category_id).as_json().with_body(category)
        return await self._client.fetch(request, ProjectCategory)

    async def delete(self, category_id: str) -> None:
        await self._client.execute(self._client.delete(category_id))


class ComponentsEndpoint:
    """Operations on /component."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/component')

    async def list(self, options: Optional[ComponentOptions] = None) -> Page[Component]:
        request = self._client.apply_options(self._client.get('page'), options)
        return await self._client.fetch_page(request, 'values', Component)

    async def create(self, component: ComponentInput) -> Component:
        request = self._client.post().as_json().with_body(component)
        return await self._client.fetch(request, Component)

    async def get(self, component_id: str) -> Component:
        return await self._client.fetch(self._client.get(component_id), Component)

    async def update(self, component_id: str, component: ComponentInput) -> Component:
        request = self._client.put(component_id).as_json().with_body(component)
        return await self._client.fetch(request, Component)

    async def delete(self, component_id: str, move_issues_to: Optional[str] = None) -> None:
        """Delete a component, optionally moving its issues to another one."""
        request = self._client.delete(component_id).with_query_param('moveIssuesTo', move_issues_to or None)
        await self._client.execute(request)

    async def count_issues(self, component_id: str) -> ComponentIssuesCount:
        request = self._client.get(f"{component_id}/relatedIssueCounts")
        return await self._client.fetch(request, ComponentIssuesCount)


class VersionRemoteLinksEndpoint:
    """Operations on /version/{id}/remotelink."""

    def __init__(self, parent: ResourceClient, version_id: str):
        self._client = parent.child(f"/{version_id}/remotelink")

    async def list(self) -> RemoteEntityLinks:
        return await self._client.fetch(self._client.get(), RemoteEntityLinks)

    async def delete(self, global_id: str) -> None:
        await self._client.execute(self._client.delete(global_id))


class VersionsEndpoint:
    """Operations on /version."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/version')

    def remote_links(self, version_id: str) -> VersionRemoteLinksEndpoint:
        return VersionRemoteLinksEndpoint(self._client, version_id)

    async def list(self, options: Optional[VersionOptions] = None) -> Page[Version]:
        request = self._client.apply_options(self._client.get(), options)
        return await self._client.fetch_page(request, 'values', Version)

    async def issue_counts(self, version_id: str) -> VersionIssueCounts:
        """Issues fixed in or affected by the version."""
        request = self._client.get(f"{version_id}/relatedIssueCounts")
        return await self._client.fetch(request, VersionIssueCounts)

    async def unresolved_issue_count(self, version_id: str) -> UnresolvedVersionIssueCount:
        request = self._client.get(f"{version_id}/unresolvedIssueCount")
        return await self._client.fetch(request, UnresolvedVersionIssueCount)

    async def create(self, version: VersionInput) -> Version:
        request = self._client.post().as_json().with_body(version)
        return await self._client.fetch(request, Version)

    async def get(self, version_id: str, expand: Optional[str] = None) -> Version:
        request = self._client.get(version_id).with_query_param('expand', expand or None)
        return await self._client.fetch(request, Version)

    async def update(self, version_id: str, version: VersionInput) -> Version:
        request = self._client.put(version_id).as_json().with_body(version)
        return await self._client.fetch(request, Version)

    async def delete(
        self,
        version_id: str,
        move_fix_issues_to: Optional[str] = None,
        move_affected_issues_to: Optional[str] = None
    ) -> None:
        """Delete a version.

        Args:
            version_id: Version to delete
            move_fix_issues_to: Version receiving the fixVersion of affected issues
            move_affected_issues_to: Version receiving the affectedVersion of affected issues
        """
        request = self._client.delete(version_id) \
            .with_query_param('moveFixIssuesTo', move_fix_issues_to or None) \
            .with_query_param('moveAffectedIssuesTo', move_affected_issues_to or None)
        await self._client.execute(request)

    async def merge(self, version_id: str, into: str) -> None:
        """Merge the version into another one and delete it."""
        await self._client.execute(self._client.put(f"{version_id}/mergeto/{into}"))

    async def move_after(self, version_id: str, after: str) -> Version:
        """Place the version after another one, given by its self URL."""
        request = self._client.post(f"{version_id}/move").as_json().with_body({'after': after})
        return await self._client.fetch(request, Version)

    async def move_to(self, version_id: str, position: str) -> Version:
        """Move the version: "First", "Last", "Earlier" or "Later"."""
        request = self._client.post(f"{version_id}/move").as_json().with_body({'position': position})
        return await self._client.fetch(request, Version)


class RoleActorsEndpoint:
    """Operations on /role/{id}/actors."""

    def __init__(self, parent: ResourceClient, role_id: str):
        self._client = parent.child(f"/{role_id}/actors")

    async def list(self) -> RoleActors:
        return await self._client.fetch(self._client.get(), RoleActors)

    async def add(self, actors: ActorInput) -> RoleActors:
        """Add default actors of the role."""
        request = self._client.post().as_json().with_body(actors)
        return await self._client.fetch(request, RoleActors)

    async def remove(self, user: Optional[str] = None, group: Optional[str] = None) -> Any:
        request = self._client.delete() \
            .with_query_param('user', user or None) \
            .with_query_param('group', group or None)
        return await self._client.execute(request)


class RolesEndpoint:
    """Operations on /role."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/role')

    def actors(self, role_id: str) -> RoleActorsEndpoint:
        return RoleActorsEndpoint(self._client, role_id)

    async def list(self) -> List[ProjectRole]:
        return await self._client.fetch(self._client.get(), List[ProjectRole])

    async def create(self, name: str, description: Optional[str] = None) -> ProjectRole:
        body = {'name': name}
        if description:
            body['description'] = description
        request = self._client.post().as_json().with_body(body)
        return await self._client.fetch(request, ProjectRole)

    async def get(self, role_id: str) -> ProjectRole:
        return await self._client.fetch(self._client.get(role_id), ProjectRole)

    async def partial_update(
        self,
        role_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None
    ) -> ProjectRole:
        """Change only the given attributes of the role."""
        body = {}
        if name:
            body['name'] = name
        if description:
            body['description'] = description
        request = self._client.post(role_id).as_json().with_body(body)
        return await self._client.fetch(request, ProjectRole)

    async def update(
        self,
        role_id: str,
        name: Optional[str] = None,
        description: Optional[str] = None
    ) -> ProjectRole:
        """Replace name and description of the role."""
        request = self._client.put(role_id).as_json().with_body({'name': name, 'description': description})
        return await self._client.fetch(request, ProjectRole)

    async def delete(self, role_id: str, swap: Optional[str] = None) -> None:
        """Delete the role, moving its grants to the ``swap`` role if given."""
        request = self._client.delete(role_id).with_query_param('swap', swap or None)
        await self._client.execute(request)
