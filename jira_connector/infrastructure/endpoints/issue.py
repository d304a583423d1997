"""
Issue endpoints: issues and their sub-resources, issue links, issue types
and issue type schemes.
"""
from pathlib import Path
from typing import Any, List, Optional

from ...core.domain import (
    Attachment, AvatarCropping, Comment, CreateMeta, EditMeta, FieldMeta, Issue,
    IssueLink, IssueLinkType, IssueLinkTypeInput, IssueLinkTypes, IssueNotification,
    IssuePickerResult, IssueRef, IssuesCreated, IssueTransitions, IssueType,
    IssueTypeCreate, IssueTypeScheme, IssueTypeSchemeInput, IssueTypeSchemes,
    IssueTypeUpdate, IssueUpdate, IssueVotes, IssueWatchers, LinkIssueRequest,
    Project, RemoteIssueLink, Worklog,
)
from ...core.options import (
    IssueOptions, IssuePickerOptions, WorklogCreateOptions, WorklogDeleteOptions,
    WorklogUpdateOptions,
)
from ...core.pagination import Page, PageOptions
from ..resource import ResourceClient


class IssueCommentsEndpoint:
    """Operations on /issue/{issue}/comment."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/comment")

    async def list(self, page_options: Optional[PageOptions] = None) -> Page[Comment]:
        request = self._client.get(page_options=page_options)
        return await self._client.fetch_page(request, 'comments', Comment)

    async def create(self, comment: Comment) -> Comment:
        request = self._client.post().as_json().with_body(comment)
        return await self._client.fetch(request, Comment)

    async def get(self, comment_id: str, expand: Optional[str] = None) -> Comment:
        request = self._client.get(comment_id).with_query_param('expand', expand or None)
        return await self._client.fetch(request, Comment)

    async def update(self, comment_id: str, comment: Comment) -> Comment:
        request = self._client.put(comment_id).as_json().with_body(comment)
        return await self._client.fetch(request, Comment)

    async def delete(self, comment_id: str) -> None:
        await self._client.execute(self._client.delete(comment_id))


class IssueEditMetaEndpoint:
    """Operations on /issue/{issue}/editmeta."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/editmeta")

    async def get(self) -> EditMeta:
        """Fields that can be edited on the issue, with their metadata."""
        return await self._client.fetch(self._client.get(), EditMeta)


class IssueCreateMetaEndpoint:
    """Operations on /issue/createmeta."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/createmeta')

    async def list(self, project_id: str, page_options: Optional[PageOptions] = None) -> Page[CreateMeta]:
        """Issue types that can be created in a project."""
        request = self._client.get(f"{project_id}/issuetypes", page_options)
        return await self._client.fetch_page(request, 'values', CreateMeta)

    async def list_fields(
        self,
        project_id: str,
        issue_type_id: str,
        start_at: Optional[int] = None,
        max_results: Optional[int] = None
    ) -> Page[FieldMeta]:
        """Fields required to create an issue of the given type."""
        request = self._client.get(f"{project_id}/issuetypes/{issue_type_id}") \
            .with_query_param('startAt', start_at) \
            .with_query_param('maxResults', max_results)
        return await self._client.fetch_page(request, 'values', FieldMeta)


class IssueRemoteLinksEndpoint:
    """Operations on /issue/{issue}/remotelink."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/remotelink")

    async def list(self, global_id: Optional[str] = None) -> List[RemoteIssueLink]:
        request = self._client.get().with_query_param('globalId', global_id or None)
        data = await self._client.execute(request)
        # A globalId lookup answers with a single link
        if isinstance(data, dict):
            return [RemoteIssueLink.from_dict(data)]
        return [RemoteIssueLink.from_dict(item) for item in data or []]

    async def upsert(self, link: RemoteIssueLink) -> RemoteIssueLink:
        """Create the link, or update the one with the same globalId."""
        request = self._client.post().as_json().with_body(link)
        return await self._client.fetch(request, RemoteIssueLink)

    async def delete_by_global_id(self, global_id: str) -> None:
        await self._client.execute(self._client.delete().with_query_param('globalId', global_id))

    async def get(self, link_id: str) -> RemoteIssueLink:
        return await self._client.fetch(self._client.get(link_id), RemoteIssueLink)

    async def update(self, link_id: str, link: RemoteIssueLink) -> None:
        await self._client.execute(self._client.put(link_id).as_json().with_body(link))

    async def delete(self, link_id: str) -> None:
        await self._client.execute(self._client.delete(link_id))


class IssueTransitionsEndpoint:
    """Operations on /issue/{issue}/transitions."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/transitions")

    async def list(self, transition_id: Optional[str] = None, expand: Optional[str] = None) -> IssueTransitions:
        request = self._client.get() \
            .with_query_param('transitionId', transition_id or None) \
            .with_query_param('expand', expand or None)
        return await self._client.fetch(request, IssueTransitions)

    async def execute(self, update: IssueUpdate, expand: Optional[str] = None) -> None:
        """Move the issue through a transition; ``update.transition`` selects it."""
        request = self._client.post().as_json().with_body(update) \
            .with_query_param('expand', expand or None)
        await self._client.execute(request)


class IssueVotesEndpoint:
    """Operations on /issue/{issue}/votes."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/votes")

    async def list(self) -> IssueVotes:
        return await self._client.fetch(self._client.get(), IssueVotes)

    async def vote(self) -> None:
        await self._client.execute(self._client.post())

    async def remove(self) -> None:
        await self._client.execute(self._client.delete())


class IssueWatchersEndpoint:
    """Operations on /issue/{issue}/watchers."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/watchers")

    async def list(self) -> IssueWatchers:
        return await self._client.fetch(self._client.get(), IssueWatchers)

    async def add(self, username: str) -> None:
        # Jira expects the bare user name as a JSON string
        await self._client.execute(self._client.post().as_json().with_body(username))

    async def remove(self, username: str) -> None:
        await self._client.execute(self._client.delete().with_query_param('username', username))


class IssueWorklogsEndpoint:
    """Operations on /issue/{issue}/worklog."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/worklog")

    async def list(self, page_options: Optional[PageOptions] = None) -> Page[Worklog]:
        request = self._client.get(page_options=page_options)
        return await self._client.fetch_page(request, 'worklogs', Worklog)

    async def create(self, worklog: Worklog, options: Optional[WorklogCreateOptions] = None) -> Worklog:
        """Log work on the issue.

        Args:
            worklog: Time spent, start and comment
            options: How the remaining estimate is adjusted
        """
        request = self._client.apply_options(self._client.post().as_json().with_body(worklog), options)
        return await self._client.fetch(request, Worklog)

    async def get(self, worklog_id: str) -> Worklog:
        return await self._client.fetch(self._client.get(worklog_id), Worklog)

    async def update(
        self,
        worklog_id: str,
        worklog: Worklog,
        options: Optional[WorklogUpdateOptions] = None
    ) -> Worklog:
        request = self._client.put(worklog_id).as_json().with_body(worklog)
        request = self._client.apply_options(request, options)
        return await self._client.fetch(request, Worklog)

    async def delete(self, worklog_id: str, options: Optional[WorklogDeleteOptions] = None) -> None:
        request = self._client.apply_options(self._client.delete(worklog_id), options)
        await self._client.execute(request)


class IssueAttachmentsEndpoint:
    """Operations on /issue/{issue}/attachments."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/attachments")

    async def upload(self, path: str) -> List[Attachment]:
        """Attach a local file to the issue."""
        request = self._client.post().as_file().with_body(path)
        return await self._client.fetch(request, List[Attachment])


class IssueSubtasksEndpoint:
    """Operations on /issue/{issue}/subtask."""

    def __init__(self, parent: ResourceClient, issue_id: str):
        self._client = parent.child(f"/{issue_id}/subtask")

    async def list(self) -> List[Issue]:
        return await self._client.fetch(self._client.get(), List[Issue])


class IssuesEndpoint:
    """Operations on /issue.

    Sub-resources of a single issue are reached through accessors taking
    the issue id or key, e.g. ``issues.comments('PRJ-1').list()``.
    """

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/issue')

    def comments(self, issue_id: str) -> IssueCommentsEndpoint:
        return IssueCommentsEndpoint(self._client, issue_id)

    def edit_meta(self, issue_id: str) -> IssueEditMetaEndpoint:
        return IssueEditMetaEndpoint(self._client, issue_id)

    def create_meta(self) -> IssueCreateMetaEndpoint:
        return IssueCreateMetaEndpoint(self._client)

    def remote_links(self, issue_id: str) -> IssueRemoteLinksEndpoint:
        return IssueRemoteLinksEndpoint(self._client, issue_id)

    def transitions(self, issue_id: str) -> IssueTransitionsEndpoint:
        return IssueTransitionsEndpoint(self._client, issue_id)

    def votes(self, issue_id: str) -> IssueVotesEndpoint:
        return IssueVotesEndpoint(self._client, issue_id)

    def watchers(self, issue_id: str) -> IssueWatchersEndpoint:
        return IssueWatchersEndpoint(self._client, issue_id)

    def worklogs(self, issue_id: str) -> IssueWorklogsEndpoint:
        return IssueWorklogsEndpoint(self._client, issue_id)

    def attachments(self, issue_id: str) -> IssueAttachmentsEndpoint:
        return IssueAttachmentsEndpoint(self._client, issue_id)

    def subtasks(self, issue_id: str) -> IssueSubtasksEndpoint:
        return IssueSubtasksEndpoint(self._client, issue_id)

    async def create(self, issue: IssueUpdate, update_history: Optional[bool] = None) -> IssueRef:
        """Create an issue or a sub-task.

        Args:
            issue: Field values of the new issue
            update_history: Add the project to the user's recent history

        Returns:
            Id, key and self link of the created issue
        """
        request = self._client.post().as_json().with_body(issue) \
            .with_query_param('updateHistory', update_history)
        return await self._client.fetch(request, IssueRef)

    async def create_bulk(self, issues: List[IssueUpdate]) -> IssuesCreated:
        request = self._client.post('bulk').as_json().with_body({'issueUpdates': issues})
        return await self._client.fetch(request, IssuesCreated)

    async def get(self, issue_id: str, options: Optional[IssueOptions] = None) -> Issue:
        request = self._client.apply_options(self._client.get(issue_id), options)
        return await self._client.fetch(request, Issue)

    async def update(self, issue_id: str, issue: IssueUpdate, notify_users: Optional[bool] = None) -> None:
        request = self._client.put(issue_id).as_json().with_body(issue) \
            .with_query_param('notifyUsers', notify_users)
        await self._client.execute(request)

    async def delete(self, issue_id: str, delete_subtasks: Optional[bool] = None) -> None:
        request = self._client.delete(issue_id).with_query_param('deleteSubtasks', delete_subtasks)
        await self._client.execute(request)

    async def archive(self, issue_id: str, notify_users: Optional[bool] = None) -> None:
        request = self._client.put(f"{issue_id}/archive").with_query_param('notifyUsers', notify_users)
        await self._client.execute(request)

    async def archive_bulk(self, issue_ids: List[str], notify_users: Optional[bool] = None) -> Any:
        request = self._client.post('archive').as_json().with_body(issue_ids) \
            .with_query_param('notifyUsers', notify_users)
        return await self._client.execute(request)

    async def assign(self, issue_id: str, username: Optional[str]) -> None:
        """Assign the issue; ``None`` unassigns it and "-1" picks the default assignee."""
        request = self._client.put(f"{issue_id}/assignee").as_json().with_body({'name': username})
        await self._client.execute(request)

    async def notify(self, issue_id: str, notification: IssueNotification) -> None:
        request = self._client.post(f"{issue_id}/notify").as_json().with_body(notification)
        await self._client.execute(request)

    async def restore(self, issue_id: str, notify_users: Optional[bool] = None) -> None:
        request = self._client.put(f"{issue_id}/restore").with_query_param('notifyUsers', notify_users)
        await self._client.execute(request)

    async def picker(self, options: Optional[IssuePickerOptions] = None) -> IssuePickerResult:
        """Issue suggestions for auto-completion."""
        request = self._client.apply_options(self._client.get('picker'), options)
        return await self._client.fetch(request, IssuePickerResult)


class IssueLinkTypesEndpoint:
    """Operations on /issueLinkType."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/issueLinkType')

    async def list(self) -> IssueLinkTypes:
        return await self._client.fetch(self._client.get(), IssueLinkTypes)

    async def create(self, link_type: IssueLinkTypeInput) -> IssueLinkType:
        request = self._client.post().as_json().with_body(link_type)
        return await self._client.fetch(request, IssueLinkType)

    async def get(self, link_type_id: str) -> IssueLinkType:
        return await self._client.fetch(self._client.get(link_type_id), IssueLinkType)

    async def update(self, link_type_id: str, link_type: IssueLinkTypeInput) -> IssueLinkType:
        request = self._client.put(link_type_id).as_json().with_body(link_type)
        return await self._client.fetch(request, IssueLinkType)

    async def delete(self, link_type_id: str) -> None:
        await self._client.execute(self._client.delete(link_type_id))


class IssueLinksEndpoint:
    """Operations on /issueLink."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('')

    def types(self) -> IssueLinkTypesEndpoint:
        return IssueLinkTypesEndpoint(self._client)

    async def create(self, link: LinkIssueRequest) -> None:
        """Link two issues, optionally adding a comment to the inward one."""
        await self._client.execute(self._client.post('issueLink').as_json().with_body(link))

    async def get(self, link_id: str) -> IssueLink:
        return await self._client.fetch(self._client.get(f"issueLink/{link_id}"), IssueLink)

    async def delete(self, link_id: str) -> None:
        await self._client.execute(self._client.delete(f"issueLink/{link_id}"))


class IssueTypeAlternativesEndpoint:
    """Operations on /issuetype/{id}/alternatives."""

    def __init__(self, parent: ResourceClient, issue_type_id: str):
        self._client = parent.child(f"/{issue_type_id}/alternatives")

    async def list(self) -> List[IssueType]:
        """Issue types an issue of this type may be migrated to."""
        return await self._client.fetch(self._client.get(), List[IssueType])


class IssueTypeAvatarEndpoint:
    """Operations on /issuetype/{id}/avatar."""

    def __init__(self, parent: ResourceClient, issue_type_id: str):
        self._client = parent.child(f"/{issue_type_id}/avatar")

    async def upload(self, path: str, size: int) -> AvatarCropping:
        request = self._client.post('temporary').as_file().with_body(path) \
            .with_query_param('filename', Path(path).name) \
            .with_query_param('size', size)
        return await self._client.fetch(request, AvatarCropping)

    async def crop(self, cropping: AvatarCropping) -> Any:
        return await self._client.execute(self._client.post().as_json().with_body(cropping))


class IssueTypesEndpoint:
    """Operations on /issuetype."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/issuetype')

    def alternatives(self, issue_type_id: str) -> IssueTypeAlternativesEndpoint:
        return IssueTypeAlternativesEndpoint(self._client, issue_type_id)

    def avatar(self, issue_type_id: str) -> IssueTypeAvatarEndpoint:
        return IssueTypeAvatarEndpoint(self._client, issue_type_id)

    async def list(self) -> List[IssueType]:
        return await self._client.fetch(self._client.get(), List[IssueType])

    async def create(self, issue_type: IssueTypeCreate) -> IssueType:
        request = self._client.post().as_json().with_body(issue_type)
        return await self._client.fetch(request, IssueType)

    async def get(self, issue_type_id: str) -> IssueType:
        return await self._client.fetch(self._client.get(issue_type_id), IssueType)

    async def update(self, issue_type_id: str, issue_type: IssueTypeUpdate) -> IssueType:
        request = self._client.put(issue_type_id).as_json().with_body(issue_type)
        return await self._client.fetch(request, IssueType)

    async def delete(self, issue_type_id: str, alternative_issue_type_id: Optional[str] = None) -> None:
        """Delete an issue type, moving its issues to the alternative type."""
        request = self._client.delete(issue_type_id) \
            .with_query_param('alternativeIssueTypeId', alternative_issue_type_id or None)
        await self._client.execute(request)


class IssueTypeSchemeAssociationsEndpoint:
    """Operations on /issuetypescheme/{id}/associations."""

    def __init__(self, parent: ResourceClient, scheme_id: str):
        self._client = parent.child(f"/{scheme_id}/associations")

    async def list(self, expand: Optional[str] = None) -> List[Project]:
        request = self._client.get().with_query_param('expand', expand or None)
        return await self._client.fetch(request, List[Project])

    async def add(self, project_ids: List[str]) -> None:
        """Associate more projects with the scheme."""
        request = self._client.post().as_json().with_body({'idsOrKeys': project_ids})
        await self._client.execute(request)

    async def set(self, project_ids: List[str]) -> None:
        """Replace the associated projects."""
        request = self._client.put().as_json().with_body({'idsOrKeys': project_ids})
        await self._client.execute(request)

    async def delete(self, project_id: str) -> None:
        await self._client.execute(self._client.delete(project_id))

    async def delete_all(self) -> None:
        await self._client.execute(self._client.delete())


class IssueTypeSchemesEndpoint:
    """Operations on /issuetypescheme."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/issuetypescheme')

    def associations(self, scheme_id: str) -> IssueTypeSchemeAssociationsEndpoint:
        return IssueTypeSchemeAssociationsEndpoint(self._client, scheme_id)

    async def list(self, expand: Optional[str] = None) -> IssueTypeSchemes:
        request = self._client.get().with_query_param('expand', expand or None)
        return await self._client.fetch(request, IssueTypeSchemes)

    async def create(self, scheme: IssueTypeSchemeInput) -> IssueTypeScheme:
        request = self._client.post().as_json().with_body(scheme)
        return await self._client.fetch(request, IssueTypeScheme)

    async def get(self, scheme_id: str) -> IssueTypeScheme:
        return await self._client.fetch(self._client.get(scheme_id), IssueTypeScheme)

    async def update(self, scheme_id: str, scheme: IssueTypeSchemeInput) -> IssueTypeScheme:
        request = self._client.put(scheme_id).as_json().with_body(scheme)
        return await self._client.fetch(request, IssueTypeScheme)

    async def delete(self, scheme_id: str) -> None:
        await self._client.execute(self._client.delete(scheme_id))
