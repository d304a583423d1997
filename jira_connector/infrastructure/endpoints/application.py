"""
Instance administration endpoints: permissions, application properties and
roles, configuration, server info, settings, upgrade, reindex, license and
email templates.
"""
from typing import Any, Dict, List, Optional, Union

from ...core.domain import (
    ApplicationProperty, ApplicationRole, ColumnItem, Configuration, MyPermissions,
    Permissions, Reindex, ReindexRequest, ServerInfo, UpgradeResult,
)
from ...core.options import (
    ApplicationPropertiesOptions, ReindexIssuesOptions, ReindexOptions, UserPermissionsOptions,
)
from ..resource import ResourceClient


class PermissionsEndpoint:
    """Operations on /mypermissions and /permissions."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('')

    async def list(self, options: Optional[UserPermissionsOptions] = None) -> MyPermissions:
        """Permissions of the current user, optionally in a project or issue context."""
        request = self._client.apply_options(self._client.get('mypermissions'), options)
        return await self._client.fetch(request, MyPermissions)

    async def list_all(self) -> Permissions:
        """Every permission defined on the instance."""
        return await self._client.fetch(self._client.get('permissions'), Permissions)


class ApplicationPropertiesEndpoint:
    """Operations on /application-properties."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/application-properties')

    async def list(self, options: Optional[ApplicationPropertiesOptions] = None) -> List[ApplicationProperty]:
        request = self._client.apply_options(self._client.get(), options)
        return await self._client.fetch(request, List[ApplicationProperty])

    async def update(self, property_id: str, application_property: ApplicationProperty) -> None:
        request = self._client.put(property_id).as_json().with_body(application_property)
        await self._client.execute(request)

    async def list_advanced_settings(self) -> List[ApplicationProperty]:
        return await self._client.fetch(self._client.get('advanced-settings'), List[ApplicationProperty])


class ApplicationRolesEndpoint:
    """Operations on /applicationrole."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/applicationrole')

    async def list(self) -> List[ApplicationRole]:
        return await self._client.fetch(self._client.get(), List[ApplicationRole])

    async def update_bulk(
        self,
        roles: List[ApplicationRole],
        if_match: Optional[str] = None
    ) -> List[ApplicationRole]:
        """Update several roles at once.

        Args:
            roles: Roles to update
            if_match: Optimistic locking hash, sent as the If-Match header
        """
        request = self._client.put().as_json().with_body(roles)
        if if_match:
            request = request.with_header('If-Match', if_match)
        return await self._client.fetch(request, List[ApplicationRole])

    async def get(self, key: str) -> ApplicationRole:
        return await self._client.fetch(self._client.get(key), ApplicationRole)

    async def update(self, key: str, role: ApplicationRole, if_match: Optional[str] = None) -> ApplicationRole:
        request = self._client.put(key).as_json().with_body(role)
        if if_match:
            request = request.with_header('If-Match', if_match)
        return await self._client.fetch(request, ApplicationRole)


class ConfigurationEndpoint:
    """Operations on /configuration."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/configuration')

    async def get(self) -> Configuration:
        return await self._client.fetch(self._client.get(), Configuration)


class ServerInfoEndpoint:
    """Operations on /serverInfo."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/serverInfo')

    async def get(self, do_health_check: Optional[bool] = None) -> ServerInfo:
        request = self._client.get().with_query_param('doHealthCheck', do_health_check)
        return await self._client.fetch(request, ServerInfo)


class SettingsEndpoint:
    """Operations on /settings."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/settings')

    async def update_base_url(self, url: str) -> None:
        request = self._client.put('baseUrl').as_raw().with_body(url)
        await self._client.execute(request)

    async def get_columns(self) -> List[ColumnItem]:
        """Default issue navigator columns."""
        return await self._client.fetch(self._client.get('columns'), List[ColumnItem])

    async def set_columns(self, columns: List[Union[ColumnItem, str]]) -> None:
        request = self._client.put('columns').as_json().with_body(columns)
        await self._client.execute(request)


class UpgradeEndpoint:
    """Operations on /upgrade."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/upgrade')

    async def execute(self) -> None:
        """Run any pending upgrade tasks."""
        await self._client.execute(self._client.post())

    async def result(self) -> Optional[UpgradeResult]:
        return await self._client.fetch(self._client.get(), UpgradeResult)


class ReindexRequestEndpoint:
    """Operations on /reindex/request."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/request')

    async def process(self, options: Optional[ReindexOptions] = None) -> List[int]:
        """Execute pending reindex requests; returns the ids being processed."""
        request = self._client.apply_options(self._client.post(), options)
        return await self._client.execute(request)

    async def progress(self, request_id: Union[int, str]) -> ReindexRequest:
        return await self._client.fetch(self._client.get(request_id), ReindexRequest)

    async def progress_bulk(self, request_ids: List[Union[int, str]]) -> List[ReindexRequest]:
        request = self._client.get('bulk')
        for request_id in request_ids:
            request = request.with_query_param('requestId', request_id)
        return await self._client.fetch(request, List[ReindexRequest])


class ReindexEndpoint:
    """Operations on /reindex."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/reindex')

    def request(self) -> ReindexRequestEndpoint:
        return ReindexRequestEndpoint(self._client)

    async def kick_off(self, options: Optional[ReindexOptions] = None) -> Reindex:
        request = self._client.apply_options(self._client.post(), options)
        return await self._client.fetch(request, Reindex)

    async def get(self, task_id: Optional[Union[int, str]] = None) -> Reindex:
        request = self._client.get().with_query_param('taskId', task_id)
        return await self._client.fetch(request, Reindex)

    async def issues(self, options: Optional[ReindexIssuesOptions] = None) -> Reindex:
        request = self._client.apply_options(self._client.post('issue'), options)
        return await self._client.fetch(request, Reindex)

    async def progress(self, task_id: Optional[Union[int, str]] = None) -> Reindex:
        request = self._client.get('progress').with_query_param('taskId', task_id)
        return await self._client.fetch(request, Reindex)


class LicenseEndpoint:
    """Operations on /license."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/license')

    async def validate(self, license_text: str) -> Any:
        """Validate a license string; returns the server's verdict."""
        request = self._client.post('validator').as_raw().with_body(license_text)
        return await self._client.execute(request)


class EmailTemplatesEndpoint:
    """Operations on /email-templates."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/email-templates')

    async def upload(self, path: str) -> None:
        """Upload a zip of email templates."""
        request = self._client.post().as_file().with_body(path)
        await self._client.execute(request)

    async def download(self) -> bytes:
        """Zip of the current email templates, as raw bytes."""
        return await self._client.execute(self._client.get())

    async def apply(self) -> None:
        await self._client.execute(self._client.post('apply'))

    async def revert(self) -> None:
        await self._client.execute(self._client.post('revert'))

    async def types(self) -> Dict[str, Any]:
        return await self._client.execute(self._client.get('types'))
