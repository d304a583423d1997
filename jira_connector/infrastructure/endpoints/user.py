"""
User and group endpoints.
"""
from typing import Any, List, Optional

from ...core.domain import (
    A11yPersonalSetting, AnonymizationProgress, AnonymizationValidation, ColumnItem,
    EntityProperty, EntityPropertyKeys, Group, GroupSuggestions, User, UserAndGroups,
    UserInput, UserPickerResult,
)
from ...core.errors import JiraError
from ...core.options import (
    AssignableMultiProjectOptions, AssignableUserOptions, FindUserAndGroupsOptions,
    GroupMemberOptions, PickGroupsOptions, UserPickerOptions, UserSearchOptions,
)
from ...core.pagination import Page
from ...core.request import HttpRequest
from ..resource import ResourceClient
from .avatar import OwnedAvatarsEndpoint


class UserApplicationEndpoint:
    """Application access of one user: /user/application."""

    def __init__(self, parent: ResourceClient, username: str):
        self._client = parent.child('/application')
        self._username = username

    def _request(self, request: HttpRequest, application_key: str) -> HttpRequest:
        return self._client.apply_options(request, {
            'username': self._username,
            'applicationKey': application_key,
        })

    async def add(self, application_key: str) -> None:
        await self._client.execute(self._request(self._client.post(), application_key))

    async def remove(self, application_key: str) -> None:
        await self._client.execute(self._request(self._client.delete(), application_key))


class UserAssignableEndpoint:
    """Users assignable to issues: /user/assignable."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/assignable')

    async def search(self, options: AssignableUserOptions) -> List[User]:
        """Users assignable to an issue, or to issues of a project."""
        request = self._client.apply_options(self._client.get('search'), options)
        return await self._client.fetch(request, List[User])

    async def search_multi_project(self, options: AssignableMultiProjectOptions) -> List[User]:
        """Users assignable in every one of the given projects."""
        request = self._client.apply_options(self._client.get('multiProjectSearch'), options)
        return await self._client.fetch(request, List[User])


class UserColumnsEndpoint:
    """Issue navigator columns of one user: /user/columns."""

    def __init__(self, parent: ResourceClient, username: str):
        self._client = parent.child('/columns')
        self._username = username

    def _scoped(self, request: HttpRequest) -> HttpRequest:
        return request.with_query_param('username', self._username)

    async def get(self) -> List[ColumnItem]:
        return await self._client.fetch(self._scoped(self._client.get()), List[ColumnItem])

    async def set(self, columns: List[Any]) -> None:
        request = self._scoped(self._client.put()).as_json().with_body(columns)
        await self._client.execute(request)

    async def reset(self) -> None:
        """Restore the default columns."""
        await self._client.execute(self._scoped(self._client.delete()))


class UserAccessibilityEndpoint:
    """Accessibility settings: /user/a11y."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/a11y')

    async def personal_settings(self) -> List[A11yPersonalSetting]:
        request = self._client.get('personal-settings')
        return await self._client.fetch(request, List[A11yPersonalSetting])


class UserAnonymizationEndpoint:
    """Anonymization of one user: /user/anonymization.

    The validation calls answer 400 when the server finds problems; that
    body is the validation result and is returned instead of raised.
    """

    def __init__(self, parent: ResourceClient, user_key: str):
        self._client = parent.child('/anonymization')
        self._user_key = user_key

    async def _validation(self, request: HttpRequest) -> AnonymizationValidation:
        try:
            return await self._client.fetch(request, AnonymizationValidation)
        except JiraError as error:
            if error.status_code != 400:
                raise
            return AnonymizationValidation.from_dict(error.raw if isinstance(error.raw, dict) else {})

    async def validate(self, expand: Optional[str] = None) -> AnonymizationValidation:
        request = self._client.apply_options(self._client.get(), {
            'userKey': self._user_key,
            'expand': expand,
        })
        return await self._validation(request)

    async def schedule(self, new_owner_key: Optional[str] = None) -> AnonymizationProgress:
        request = self._client.apply_options(self._client.post(), {
            'userKey': self._user_key,
            'newOwnerKey': new_owner_key,
        })
        return await self._client.fetch(request, AnonymizationProgress)

    async def reschedule(self, new_owner_key: Optional[str] = None) -> AnonymizationProgress:
        request = self._client.apply_options(self._client.post('rerun'), {
            'userKey': self._user_key,
            'newOwnerKey': new_owner_key,
        })
        return await self._client.fetch(request, AnonymizationProgress)

    async def validate_reschedule(
        self,
        old_user_key: Optional[str] = None,
        old_user_name: Optional[str] = None,
        expand: Optional[str] = None
    ) -> AnonymizationValidation:
        request = self._client.apply_options(self._client.get('rerun'), {
            'userKey': self._user_key,
            'oldUserKey': old_user_key,
            'oldUserName': old_user_name,
            'expand': expand,
        })
        return await self._validation(request)

    async def progress(self, task_id: Optional[str] = None) -> AnonymizationProgress:
        request = self._client.get('progress').with_query_param('taskId', task_id)
        return await self._client.fetch(request, AnonymizationProgress)

    async def unlock(self) -> None:
        await self._client.execute(self._client.delete('unlock'))


class UserPropertiesEndpoint:
    """User properties: /user/properties, addressed by username or user key."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/properties')

    async def get_keys_by_username(self, username: str) -> EntityPropertyKeys:
        request = self._client.get().with_query_param('username', username)
        return await self._client.fetch(request, EntityPropertyKeys)

    async def get_keys_by_user_key(self, user_key: str) -> EntityPropertyKeys:
        request = self._client.get().with_query_param('userKey', user_key)
        return await self._client.fetch(request, EntityPropertyKeys)

    async def get_by_username(self, username: str, property_key: str) -> EntityProperty:
        request = self._client.get(property_key).with_query_param('username', username)
        return await self._client.fetch(request, EntityProperty)

    async def get_by_user_key(self, user_key: str, property_key: str) -> EntityProperty:
        request = self._client.get(property_key).with_query_param('userKey', user_key)
        return await self._client.fetch(request, EntityProperty)

    async def set_by_username(self, username: str, property_key: str, value: Any) -> None:
        """Store any JSON value under a property key."""
        request = self._client.put(property_key) \
            .with_query_param('username', username) \
            .as_json().with_body(value)
        await self._client.execute(request)

    async def set_by_user_key(self, user_key: str, property_key: str, value: Any) -> None:
        request = self._client.put(property_key) \
            .with_query_param('userKey', user_key) \
            .as_json().with_body(value)
        await self._client.execute(request)

    async def delete_by_username(self, username: str, property_key: str) -> None:
        request = self._client.delete(property_key).with_query_param('username', username)
        await self._client.execute(request)

    async def delete_by_user_key(self, user_key: str, property_key: str) -> None:
        request = self._client.delete(property_key).with_query_param('userKey', user_key)
        await self._client.execute(request)


class UsersEndpoint:
    """Operations on /user."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/user')

    def applications(self, username: str) -> UserApplicationEndpoint:
        return UserApplicationEndpoint(self._client, username)

    def assignable(self) -> UserAssignableEndpoint:
        return UserAssignableEndpoint(self._client)

    def avatars(self, username: str) -> OwnedAvatarsEndpoint:
        return OwnedAvatarsEndpoint(self._client, {'username': username})

    def columns(self, username: str) -> UserColumnsEndpoint:
        return UserColumnsEndpoint(self._client, username)

    def accessibility(self) -> UserAccessibilityEndpoint:
        return UserAccessibilityEndpoint(self._client)

    def anonymization(self, user_key: str) -> UserAnonymizationEndpoint:
        return UserAnonymizationEndpoint(self._client, user_key)

    def properties(self) -> UserPropertiesEndpoint:
        return UserPropertiesEndpoint(self._client)

    async def get_by_username(self, username: str, include_deleted: Optional[bool] = None) -> User:
        request = self._client.apply_options(self._client.get(), {
            'includeDeleted': include_deleted,
            'username': username,
        })
        return await self._client.fetch(request, User)

    async def get_by_key(self, key: str, include_deleted: Optional[bool] = None) -> User:
        request = self._client.apply_options(self._client.get(), {
            'includeDeleted': include_deleted,
            'key': key,
        })
        return await self._client.fetch(request, User)

    async def create(self, user: UserInput) -> User:
        request = self._client.post().as_json().with_body(user)
        return await self._client.fetch(request, User)

    async def update_by_username(self, username: str, user: UserInput) -> User:
        request = self._client.put().with_query_param('username', username).as_json().with_body(user)
        return await self._client.fetch(request, User)

    async def update_by_key(self, key: str, user: UserInput) -> User:
        request = self._client.put().with_query_param('key', key).as_json().with_body(user)
        return await self._client.fetch(request, User)

    async def remove_by_username(self, username: str) -> None:
        await self._client.execute(self._client.delete().with_query_param('username', username))

    async def remove_by_key(self, key: str) -> None:
        await self._client.execute(self._client.delete().with_query_param('key', key))

    @staticmethod
    def _password_body(old_password: Optional[str], new_password: str) -> dict:
        body = {'password': new_password}
        if old_password is not None:
            body['currentPassword'] = old_password
        return body

    async def change_password_by_username(
        self,
        username: str,
        old_password: Optional[str],
        new_password: str
    ) -> None:
        request = self._client.put('password') \
            .with_query_param('username', username) \
            .as_json().with_body(self._password_body(old_password, new_password))
        await self._client.execute(request)

    async def change_password_by_key(self, key: str, old_password: Optional[str], new_password: str) -> None:
        request = self._client.put('password') \
            .with_query_param('key', key) \
            .as_json().with_body(self._password_body(old_password, new_password))
        await self._client.execute(request)

    async def pick(self, options: UserPickerOptions) -> UserPickerResult:
        """Users matching a query, with HTML highlighting for pickers."""
        request = self._client.apply_options(self._client.get('picker'), options)
        return await self._client.fetch(request, UserPickerResult)

    async def search(self, options: UserSearchOptions) -> List[User]:
        request = self._client.apply_options(self._client.get('search'), options)
        return await self._client.fetch(request, List[User])


class GroupMembersEndpoint:
    """Members of one group: /group/member and /group/user."""

    def __init__(self, parent: ResourceClient, group_name: str):
        self._client = parent.child('/group')
        self._group_name = group_name

    async def list(self, options: Optional[GroupMemberOptions] = None) -> Page[User]:
        request = self._client.get('member').with_query_param('groupname', self._group_name)
        request = self._client.apply_options(request, options)
        return await self._client.fetch_page(request, 'values', User)

    async def add(self, username: str) -> Group:
        request = self._client.post('user') \
            .with_query_param('groupname', self._group_name) \
            .as_json().with_body({'name': username})
        return await self._client.fetch(request, Group)

    async def remove(self, username: str) -> None:
        request = self._client.apply_options(self._client.delete('user'), {
            'groupname': self._group_name,
            'username': username,
        })
        await self._client.execute(request)


class GroupsEndpoint:
    """Operations on /group, /groups/picker and /groupuserpicker."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('')

    def members(self, group_name: str) -> GroupMembersEndpoint:
        return GroupMembersEndpoint(self._client, group_name)

    async def create(self, name: str) -> Group:
        request = self._client.post('group').as_json().with_body({'name': name})
        return await self._client.fetch(request, Group)

    async def delete(self, name: str, swap_group: Optional[str] = None) -> None:
        """Delete a group, optionally moving its restrictions to ``swap_group``."""
        request = self._client.apply_options(self._client.delete('group'), {
            'groupname': name,
            'swapGroup': swap_group or None,
        })
        await self._client.execute(request)

    async def pick(self, options: PickGroupsOptions) -> GroupSuggestions:
        request = self._client.apply_options(self._client.get('groups/picker'), options)
        return await self._client.fetch(request, GroupSuggestions)

    async def find_users_and_groups(self, options: FindUserAndGroupsOptions) -> UserAndGroups:
        request = self._client.apply_options(self._client.get('groupuserpicker'), options)
        return await self._client.fetch(request, UserAndGroups)
