"""
Workflow and workflow scheme endpoints.

A workflow scheme and its draft expose the same children (default
workflow, issue type mappings, workflow mappings), so the child classes
below serve both; the draft only positions them under ``{id}/draft``.
"""
from typing import Any, List, Optional, Union

from ...core.domain import (
    IssueTypeMapping, Property, Workflow, WorkflowDefault, WorkflowMapping,
    WorkflowPropertyInput, WorkflowScheme, WorkflowSchemeInput,
)
from ...core.options import WorkflowPropertyOptions
from ..resource import ResourceClient


class WorkflowPropertiesEndpoint:
    """Operations on /workflow/transitions/{transition}/properties."""

    def __init__(self, parent: ResourceClient, transition_id: Union[int, str]):
        self._client = parent.child(f"/transitions/{transition_id}/properties")

    async def list(self, options: Optional[WorkflowPropertyOptions] = None) -> List[Property]:
        request = self._client.apply_options(self._client.get(), options)
        data = await self._client.execute(request)
        # A key lookup answers with a single property
        if isinstance(data, dict):
            return [Property.from_dict(data)]
        return [Property.from_dict(item) for item in data or []]

    def _with_target(self, request, prop: WorkflowPropertyInput):
        return request \
            .with_query_param('key', prop.get('key')) \
            .with_query_param('workflowName', prop.get('workflow_name')) \
            .with_query_param('workflowMode', prop.get('workflow_mode')) \
            .as_json() \
            .with_body({'value': prop.get('value')})

    async def create(self, prop: WorkflowPropertyInput) -> Property:
        request = self._with_target(self._client.post(), prop)
        return await self._client.fetch(request, Property)

    async def upsert(self, prop: WorkflowPropertyInput) -> Property:
        """Update the property, creating it when missing."""
        request = self._with_target(self._client.put(), prop)
        return await self._client.fetch(request, Property)

    async def delete(self, key: str, workflow_name: str, workflow_mode: Optional[str] = None) -> None:
        request = self._client.delete() \
            .with_query_param('key', key) \
            .with_query_param('workflowName', workflow_name) \
            .with_query_param('workflowMode', workflow_mode or None)
        await self._client.execute(request)


class WorkflowsEndpoint:
    """Operations on /workflow."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/workflow')

    def properties(self, transition_id: Union[int, str]) -> WorkflowPropertiesEndpoint:
        return WorkflowPropertiesEndpoint(self._client, transition_id)

    async def list(self, workflow_name: Optional[str] = None) -> List[Workflow]:
        request = self._client.get().with_query_param('workflowName', workflow_name or None)
        data = await self._client.execute(request)
        if isinstance(data, dict):
            return [Workflow.from_dict(data)]
        return [Workflow.from_dict(item) for item in data or []]


class WorkflowSchemeDefaultEndpoint:
    """Operations on the default workflow of a scheme or its draft."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/default')

    async def get(self, return_draft_if_exists: Optional[bool] = None) -> WorkflowDefault:
        request = self._client.get().with_query_param('returnDraftIfExists', return_draft_if_exists)
        return await self._client.fetch(request, WorkflowDefault)

    async def set(self, workflow: str, update_draft_if_needed: bool = False) -> WorkflowScheme:
        request = self._client.put().as_json().with_body({
            'workflow': workflow,
            'updateDraftIfNeeded': update_draft_if_needed,
        })
        return await self._client.fetch(request, WorkflowScheme)

    async def delete(self, update_draft_if_needed: Optional[bool] = None) -> WorkflowScheme:
        """Reset the default workflow to jira's system workflow."""
        request = self._client.delete().with_query_param('updateDraftIfNeeded', update_draft_if_needed)
        return await self._client.fetch(request, WorkflowScheme)


class WorkflowSchemeIssueTypeEndpoint:
    """Operations on the issue type mappings of a scheme or its draft."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/issuetype')

    async def get(self, issue_type_id: str, return_draft_if_exists: Optional[bool] = None) -> IssueTypeMapping:
        request = self._client.get(issue_type_id) \
            .with_query_param('returnDraftIfExists', return_draft_if_exists)
        return await self._client.fetch(request, IssueTypeMapping)

    async def set(self, mapping: IssueTypeMapping) -> WorkflowScheme:
        """Map ``mapping.issue_type`` to ``mapping.workflow``."""
        request = self._client.put(mapping.issue_type).as_json().with_body(mapping)
        return await self._client.fetch(request, WorkflowScheme)

    async def delete(self, issue_type_id: str, update_draft_if_needed: Optional[bool] = None) -> WorkflowScheme:
        request = self._client.delete(issue_type_id) \
            .with_query_param('updateDraftIfNeeded', update_draft_if_needed)
        return await self._client.fetch(request, WorkflowScheme)


class WorkflowSchemeWorkflowEndpoint:
    """Operations on the workflow mappings of a scheme or its draft."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/workflow')

    async def list(
        self,
        workflow_name: Optional[str] = None,
        return_draft_if_exists: Optional[bool] = None
    ) -> List[WorkflowMapping]:
        request = self._client.get() \
            .with_query_param('workflowName', workflow_name or None) \
            .with_query_param('returnDraftIfExists', return_draft_if_exists)
        data = await self._client.execute(request)
        if isinstance(data, dict):
            return [WorkflowMapping.from_dict(data)]
        return [WorkflowMapping.from_dict(item) for item in data or []]

    async def update(self, workflow_name: str, mapping: WorkflowMapping) -> WorkflowScheme:
        """Set the issue types handled by a workflow."""
        request = self._client.put().as_json().with_body(mapping) \
            .with_query_param('workflowName', workflow_name)
        return await self._client.fetch(request, WorkflowScheme)

    async def delete(self, workflow_name: str, update_draft_if_needed: Optional[bool] = None) -> Any:
        request = self._client.delete() \
            .with_query_param('workflowName', workflow_name) \
            .with_query_param('updateDraftIfNeeded', update_draft_if_needed)
        return await self._client.execute(request)


class WorkflowSchemeDraftEndpoint:
    """Operations on /workflowscheme/{id}/draft."""

    def __init__(self, parent: ResourceClient, scheme_id: Union[int, str]):
        self._client = parent.child(f"/{scheme_id}/draft")

    def default(self) -> WorkflowSchemeDefaultEndpoint:
        return WorkflowSchemeDefaultEndpoint(self._client)

    def issue_type(self) -> WorkflowSchemeIssueTypeEndpoint:
        return WorkflowSchemeIssueTypeEndpoint(self._client)

    def workflow(self) -> WorkflowSchemeWorkflowEndpoint:
        return WorkflowSchemeWorkflowEndpoint(self._client)

    async def get(self) -> WorkflowScheme:
        return await self._client.fetch(self._client.get(), WorkflowScheme)

    async def update(self, scheme: WorkflowSchemeInput) -> WorkflowScheme:
        request = self._client.put().as_json().with_body(scheme)
        return await self._client.fetch(request, WorkflowScheme)

    async def delete(self) -> None:
        await self._client.execute(self._client.delete())


class WorkflowSchemesEndpoint:
    """Operations on /workflowscheme.

    Children take the scheme id, e.g.
    ``workflow_schemes.draft(10100).issue_type().get('3')``.
    """

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/workflowscheme')

    def _scheme(self, scheme_id: Union[int, str]) -> ResourceClient:
        return self._client.child(f"/{scheme_id}")

    def default(self, scheme_id: Union[int, str]) -> WorkflowSchemeDefaultEndpoint:
        return WorkflowSchemeDefaultEndpoint(self._scheme(scheme_id))

    def issue_type(self, scheme_id: Union[int, str]) -> WorkflowSchemeIssueTypeEndpoint:
        return WorkflowSchemeIssueTypeEndpoint(self._scheme(scheme_id))

    def workflow(self, scheme_id: Union[int, str]) -> WorkflowSchemeWorkflowEndpoint:
        return WorkflowSchemeWorkflowEndpoint(self._scheme(scheme_id))

    def draft(self, scheme_id: Union[int, str]) -> WorkflowSchemeDraftEndpoint:
        return WorkflowSchemeDraftEndpoint(self._client, scheme_id)

    async def create(self, scheme: WorkflowSchemeInput) -> WorkflowScheme:
        request = self._client.post().as_json().with_body(scheme)
        return await self._client.fetch(request, WorkflowScheme)

    async def get(self, scheme_id: Union[int, str], return_draft_if_exists: Optional[bool] = None) -> WorkflowScheme:
        request = self._client.get(scheme_id).with_query_param('returnDraftIfExists', return_draft_if_exists)
        return await self._client.fetch(request, WorkflowScheme)

    async def update(self, scheme_id: Union[int, str], scheme: WorkflowSchemeInput) -> WorkflowScheme:
        request = self._client.put(scheme_id).as_json().with_body(scheme)
        return await self._client.fetch(request, WorkflowScheme)

    async def delete(self, scheme_id: Union[int, str]) -> None:
        await self._client.execute(self._client.delete(scheme_id))

    async def create_draft(self, scheme_id: Union[int, str]) -> WorkflowScheme:
        """Copy an active scheme into a draft that can be edited."""
        return await self._client.fetch(self._client.post(f"{scheme_id}/createdraft"), WorkflowScheme)
