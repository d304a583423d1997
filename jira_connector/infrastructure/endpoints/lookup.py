"""
Read-only lookup tables: priorities, resolutions, statuses and status
categories.
"""
from typing import List, Optional, Union

from ...core.domain import IssueStatus, Priority, Resolution, StatusCategory
from ...core.options import StatusOptions
from ...core.pagination import Page, PageOptions
from ..resource import ResourceClient


class PrioritiesEndpoint:
    """Operations on /priority."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/priority')

    async def list(self) -> List[Priority]:
        return await self._client.fetch(self._client.get(), List[Priority])

    async def get(self, priority_id: str) -> Priority:
        return await self._client.fetch(self._client.get(priority_id), Priority)


class ResolutionsEndpoint:
    """Operations on /resolution."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/resolution')

    async def list(self, query: Optional[str] = None, page_options: Optional[PageOptions] = None) -> Page[Resolution]:
        request = self._client.get('page', page_options).with_query_param('query', query or None)
        return await self._client.fetch_page(request, 'values', Resolution)

    async def get(self, resolution_id: str) -> Resolution:
        return await self._client.fetch(self._client.get(resolution_id), Resolution)


class StatusesEndpoint:
    """Operations on /status."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/status')

    async def list(
        self,
        query: Optional[Union[str, StatusOptions]] = None,
        page_options: Optional[PageOptions] = None
    ) -> Page[IssueStatus]:
        """Statuses matching a name query or a full set of status filters.

        Args:
            query: Text matched against status names, or StatusOptions
                narrowing by project, issue type and search field
            page_options: Paging parameters

        Returns:
            Page of statuses
        """
        request = self._client.get('page', page_options)
        if isinstance(query, StatusOptions):
            request = self._client.apply_options(request, query)
        else:
            request = request.with_query_param('query', query or None)
        return await self._client.fetch_page(request, 'values', IssueStatus)

    async def get(self, status_id: str) -> IssueStatus:
        """Status by id or name."""
        return await self._client.fetch(self._client.get(status_id), IssueStatus)


class StatusCategoriesEndpoint:
    """Operations on /statuscategory."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/statuscategory')

    async def list(self) -> List[StatusCategory]:
        return await self._client.fetch(self._client.get(), List[StatusCategory])

    async def get(self, category_id: str) -> StatusCategory:
        """Status category by id or key."""
        return await self._client.fetch(self._client.get(category_id), StatusCategory)
