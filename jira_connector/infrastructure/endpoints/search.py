"""
Issue search and JQL autocomplete endpoints.
"""
from ...core.domain import AutoComplete, AutoCompleteSuggestions, Issue
from ...core.options import AutoCompleteInput, SearchOptions
from ...core.pagination import Page
from ..resource import ResourceClient


class SearchEndpoint:
    """Operations on /search."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/search')

    async def list(self, options: SearchOptions) -> Page[Issue]:
        """Run a JQL search.

        The query travels as a JSON body, so long JQL is not limited by the
        URL length.
        """
        request = self._client.post().as_json().with_body(options)
        return await self._client.fetch_page(request, 'issues', Issue)


class JqlAutocompleteEndpoint:
    """Operations on /jql/autocompletedata."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/autocompletedata')

    async def get(self) -> AutoComplete:
        """Field and function names usable in JQL, with their operators."""
        return await self._client.fetch(self._client.get(), AutoComplete)

    async def suggestions(self, options: AutoCompleteInput) -> AutoCompleteSuggestions:
        request = self._client.apply_options(self._client.get('suggestions'), options)
        return await self._client.fetch(request, AutoCompleteSuggestions)


class JqlEndpoint:
    """Operations on /jql."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/jql')

    def autocomplete(self) -> JqlAutocompleteEndpoint:
        return JqlAutocompleteEndpoint(self._client)
