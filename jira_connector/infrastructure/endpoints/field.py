"""
Field, custom field, screen, filter and dashboard endpoints.
"""
from typing import Any, List, Optional, Union

from ...core.domain import (
    CustomField, CustomFieldDefinition, CustomFieldOption, Dashboard, DeletedFields,
    EntityProperty, EntityPropertyKeys, Field, Filter, FilterColumn, FilterPermission,
    Screen, ScreenableField, ScreenableTab, ShareScope,
)
from ...core.options import ListFieldOptions
from ...core.pagination import Page, PageOptions
from ..resource import ResourceClient


class FieldsEndpoint:
    """Operations on /field."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/field')

    async def list(self) -> List[Field]:
        """System and custom fields."""
        return await self._client.fetch(self._client.get(), List[Field])

    async def create(self, definition: CustomFieldDefinition) -> Field:
        request = self._client.post().as_json().with_body(definition)
        return await self._client.fetch(request, Field)


class CustomFieldsEndpoint:
    """Operations on /customFields and /customFieldOption."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('')

    async def get(self, option_id: str) -> CustomFieldOption:
        """A single option of a select-like custom field."""
        request = self._client.get(f"customFieldOption/{option_id}")
        return await self._client.fetch(request, CustomFieldOption)

    async def list(self, options: Optional[ListFieldOptions] = None) -> Page[CustomField]:
        """Custom fields, filtered and paged by ``options``.

        Paging values come from ``options.page_options``; the remaining
        attributes become filter parameters.
        """
        page_options = None
        if options is not None and options.is_set('page_options'):
            page_options = options.page_options
        request = self._client.apply_options(self._client.get('customFields', page_options), options)
        return await self._client.fetch_page(request, 'values', CustomField)

    async def delete_bulk(self, field_ids: List[str]) -> DeletedFields:
        request = self._client.delete('customFields').with_query_param('ids', field_ids)
        return await self._client.fetch(request, DeletedFields)


class ScreenTabFieldsEndpoint:
    """Operations on /screens/{screen}/tabs/{tab}/fields."""

    def __init__(self, parent: ResourceClient, tab_id: Union[int, str]):
        self._client = parent.child(f"/{tab_id}/fields")

    async def list(self, project_key: Optional[str] = None) -> List[ScreenableField]:
        request = self._client.get().with_query_param('projectKey', project_key or None)
        return await self._client.fetch(request, List[ScreenableField])

    async def add(self, field_id: str) -> ScreenableField:
        request = self._client.post().as_json().with_body({'fieldId': field_id})
        return await self._client.fetch(request, ScreenableField)

    async def remove(self, field_id: str) -> None:
        await self._client.execute(self._client.delete(field_id))

    async def move(self, field_id: str, after: Optional[str] = None, position: Optional[str] = None) -> None:
        """Move a field after another one, or to a position ("Earlier", "Later", "First", "Last")."""
        body = {}
        if after:
            body['after'] = after
        if position:
            body['position'] = position
        request = self._client.post(f"{field_id}/move").as_json().with_body(body)
        await self._client.execute(request)


class ScreenTabsEndpoint:
    """Operations on /screens/{screen}/tabs."""

    def __init__(self, parent: ResourceClient, screen_id: Union[int, str]):
        self._client = parent.child(f"/{screen_id}/tabs")

    def fields(self, tab_id: Union[int, str]) -> ScreenTabFieldsEndpoint:
        return ScreenTabFieldsEndpoint(self._client, tab_id)

    async def list(self, project_key: Optional[str] = None) -> List[ScreenableTab]:
        request = self._client.get().with_query_param('projectKey', project_key or None)
        return await self._client.fetch(request, List[ScreenableTab])

    async def add(self, name: str) -> ScreenableTab:
        request = self._client.post().as_json().with_body({'name': name})
        return await self._client.fetch(request, ScreenableTab)

    async def rename(self, tab_id: Union[int, str], name: str) -> ScreenableTab:
        request = self._client.put(tab_id).as_json().with_body({'name': name})
        return await self._client.fetch(request, ScreenableTab)

    async def remove(self, tab_id: Union[int, str]) -> None:
        await self._client.execute(self._client.delete(tab_id))

    async def move(self, tab_id: Union[int, str], position: int) -> None:
        await self._client.execute(self._client.post(f"{tab_id}/move/{position}"))


class ScreensEndpoint:
    """Operations on /screens."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/screens')

    def tabs(self, screen_id: Union[int, str]) -> ScreenTabsEndpoint:
        return ScreenTabsEndpoint(self._client, screen_id)

    async def list(self, search: Optional[str] = None, page_options: Optional[PageOptions] = None) -> Page[Screen]:
        request = self._client.get(page_options=page_options).with_query_param('search', search or None)
        return await self._client.fetch_page(request, 'screens', Screen)

    async def available_fields(self, screen_id: Union[int, str]) -> List[ScreenableField]:
        """Fields that can still be added to the screen."""
        request = self._client.get(f"{screen_id}/availableFields")
        return await self._client.fetch(request, List[ScreenableField])

    async def add_to_default(self, field_id: str) -> None:
        """Add a field to the default tab of the default screen."""
        await self._client.execute(self._client.post(f"addToDefault/{field_id}"))


class FilterFavouritesEndpoint:
    """Operations on /filter/favourite."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/favourite')

    async def list(self, expand: Optional[str] = None) -> List[Filter]:
        request = self._client.get().with_query_param('expand', expand or None)
        return await self._client.fetch(request, List[Filter])


class FilterDefaultShareScopeEndpoint:
    """Operations on /filter/defaultShareScope."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/defaultShareScope')

    async def get(self) -> ShareScope:
        return await self._client.fetch(self._client.get(), ShareScope)

    async def set(self, scope: ShareScope) -> ShareScope:
        """Set the scope new filters are shared with: "GLOBAL", "AUTHENTICATED" or "PRIVATE"."""
        request = self._client.put().as_json().with_body(scope)
        return await self._client.fetch(request, ShareScope)


class FilterColumnsEndpoint:
    """Operations on /filter/{id}/columns."""

    def __init__(self, parent: ResourceClient, filter_id: str):
        self._client = parent.child(f"/{filter_id}/columns")

    async def list(self) -> List[FilterColumn]:
        return await self._client.fetch(self._client.get(), List[FilterColumn])

    async def set(self, columns: List[Union[FilterColumn, str]]) -> Any:
        return await self._client.execute(self._client.put().as_json().with_body(columns))

    async def reset(self) -> None:
        """Restore the default column configuration."""
        await self._client.execute(self._client.delete())


class FilterPermissionsEndpoint:
    """Operations on /filter/{id}/permission."""

    def __init__(self, parent: ResourceClient, filter_id: str):
        self._client = parent.child(f"/{filter_id}/permission")

    async def list(self) -> List[FilterPermission]:
        return await self._client.fetch(self._client.get(), List[FilterPermission])

    async def create(self, permission: FilterPermission) -> List[FilterPermission]:
        """Share the filter; returns every share permission of the filter."""
        request = self._client.post().as_json().with_body(permission)
        return await self._client.fetch(request, List[FilterPermission])

    async def get(self, permission_id: str) -> FilterPermission:
        return await self._client.fetch(self._client.get(permission_id), FilterPermission)

    async def delete(self, permission_id: str) -> None:
        await self._client.execute(self._client.delete(permission_id))


class FiltersEndpoint:
    """Operations on /filter."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/filter')

    def favourites(self) -> FilterFavouritesEndpoint:
        return FilterFavouritesEndpoint(self._client)

    def default_share_scope(self) -> FilterDefaultShareScopeEndpoint:
        return FilterDefaultShareScopeEndpoint(self._client)

    def columns(self, filter_id: str) -> FilterColumnsEndpoint:
        return FilterColumnsEndpoint(self._client, filter_id)

    def permissions(self, filter_id: str) -> FilterPermissionsEndpoint:
        return FilterPermissionsEndpoint(self._client, filter_id)

    async def create(self, filter_data: Filter, expand: Optional[str] = None) -> Filter:
        request = self._client.post().as_json().with_body(filter_data) \
            .with_query_param('expand', expand or None)
        return await self._client.fetch(request, Filter)

    async def get(self, filter_id: str, expand: Optional[str] = None) -> Filter:
        request = self._client.get(filter_id).with_query_param('expand', expand or None)
        return await self._client.fetch(request, Filter)

    async def update(self, filter_id: str, filter_data: Filter, expand: Optional[str] = None) -> Filter:
        request = self._client.put(filter_id).as_json().with_body(filter_data) \
            .with_query_param('expand', expand or None)
        return await self._client.fetch(request, Filter)

    async def delete(self, filter_id: str) -> None:
        await self._client.execute(self._client.delete(filter_id))


class DashboardItemPropertiesEndpoint:
    """Operations on /dashboard/{dashboard}/items/{item}/properties."""

    def __init__(self, parent: ResourceClient, item_id: str):
        self._client = parent.child(f"/{item_id}/properties")

    async def list(self) -> EntityPropertyKeys:
        return await self._client.fetch(self._client.get(), EntityPropertyKeys)

    async def get(self, key: str) -> EntityProperty:
        return await self._client.fetch(self._client.get(key), EntityProperty)

    async def set(self, prop: EntityProperty) -> None:
        """Store ``prop.value`` under ``prop.key``."""
        request = self._client.put(prop.key).as_json().with_body(prop.value)
        await self._client.execute(request)

    async def delete(self, key: str) -> None:
        await self._client.execute(self._client.delete(key))


class DashboardItemsEndpoint:
    """Operations on /dashboard/{dashboard}/items."""

    def __init__(self, parent: ResourceClient, dashboard_id: str):
        self._client = parent.child(f"/{dashboard_id}/items")

    def properties(self, item_id: str) -> DashboardItemPropertiesEndpoint:
        return DashboardItemPropertiesEndpoint(self._client, item_id)


class DashboardsEndpoint:
    """Operations on /dashboard."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/dashboard')

    def items(self, dashboard_id: str) -> DashboardItemsEndpoint:
        return DashboardItemsEndpoint(self._client, dashboard_id)

    async def list(
        self,
        filter_name: Optional[str] = None,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None
    ) -> Page[Dashboard]:
        """Dashboards visible to the current user.

        Args:
            filter_name: "favourite" or "my" to narrow the listing
            start_at: Index of the first dashboard to return
            max_results: Page size

        Returns:
            Page of dashboards; ``next_page`` carries the server's link
        """
        request = self._client.get() \
            .with_query_param('filter', filter_name or None) \
            .with_query_param('startAt', start_at) \
            .with_query_param('maxResults', max_results)
        return await self._client.fetch_page(request, 'dashboards', Dashboard)

    async def get(self, dashboard_id: str) -> Dashboard:
        return await self._client.fetch(self._client.get(dashboard_id), Dashboard)
