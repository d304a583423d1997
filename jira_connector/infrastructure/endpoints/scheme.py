"""
Scheme endpoints: permission, notification and issue security schemes, and
security levels.
"""
from typing import List, Optional

from ...core.domain import (
    IssueSecuritySchemes, NotificationScheme, PermissionGrant, PermissionGrantInput,
    PermissionScheme, PermissionSchemeInput, PermissionSchemes, SecurityLevel, SecurityScheme,
)
from ...core.pagination import Page, PageOptions
from ..resource import ResourceClient


class PermissionGrantsEndpoint:
    """Operations on /permissionscheme/{scheme}/permission."""

    def __init__(self, parent: ResourceClient, scheme_id: str):
        self._client = parent.child(f"/{scheme_id}/permission")

    async def list(self, expand: Optional[str] = None) -> List[PermissionGrant]:
        request = self._client.get().with_query_param('expand', expand or None)
        data = await self._client.execute(request) or {}
        return [PermissionGrant.from_dict(item) for item in data.get('permissions') or []]

    async def create(self, grant: PermissionGrantInput, expand: Optional[str] = None) -> PermissionGrant:
        request = self._client.post().as_json().with_body(grant) \
            .with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionGrant)

    async def get(self, grant_id: str, expand: Optional[str] = None) -> PermissionGrant:
        request = self._client.get(grant_id).with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionGrant)

    async def delete(self, grant_id: str) -> None:
        await self._client.execute(self._client.delete(grant_id))


class PermissionSchemesEndpoint:
    """Operations on /permissionscheme."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/permissionscheme')

    def permissions(self, scheme_id: str) -> PermissionGrantsEndpoint:
        return PermissionGrantsEndpoint(self._client, scheme_id)

    async def list(self, expand: Optional[str] = None) -> PermissionSchemes:
        request = self._client.get().with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionSchemes)

    async def create(self, scheme: PermissionSchemeInput, expand: Optional[str] = None) -> PermissionScheme:
        request = self._client.post().as_json().with_body(scheme) \
            .with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionScheme)

    async def get(self, scheme_id: str, expand: Optional[str] = None) -> PermissionScheme:
        request = self._client.get(scheme_id).with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionScheme)

    async def update(
        self,
        scheme_id: str,
        scheme: PermissionSchemeInput,
        expand: Optional[str] = None
    ) -> PermissionScheme:
        """Update a scheme; grants given in ``scheme.permissions`` replace the existing ones."""
        request = self._client.put(scheme_id).as_json().with_body(scheme) \
            .with_query_param('expand', expand or None)
        return await self._client.fetch(request, PermissionScheme)

    async def delete(self, scheme_id: str) -> None:
        await self._client.execute(self._client.delete(scheme_id))


class NotificationSchemesEndpoint:
    """Operations on /notificationscheme."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/notificationscheme')

    async def list(self, page_options: Optional[PageOptions] = None) -> Page[NotificationScheme]:
        request = self._client.get(page_options=page_options)
        return await self._client.fetch_page(request, 'values', NotificationScheme)

    async def get(self, scheme_id: str) -> NotificationScheme:
        return await self._client.fetch(self._client.get(scheme_id), NotificationScheme)


class IssueSecuritySchemesEndpoint:
    """Operations on /issuesecurityschemes."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/issuesecurityschemes')

    async def list(self) -> IssueSecuritySchemes:
        return await self._client.fetch(self._client.get(), IssueSecuritySchemes)

    async def get(self, scheme_id: str) -> SecurityScheme:
        return await self._client.fetch(self._client.get(scheme_id), SecurityScheme)


class SecurityLevelsEndpoint:
    """Operations on /securitylevel."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/securitylevel')

    async def get(self, level_id: str) -> SecurityLevel:
        return await self._client.fetch(self._client.get(level_id), SecurityLevel)
