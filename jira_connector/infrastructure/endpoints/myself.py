"""
Endpoints acting on the authenticated user: /myself, /mypreferences and the
password policy.
"""
from typing import Any, Dict, List, Optional

from ...core.domain import PasswordPolicyCreateUser, PasswordPolicyUpdateUser, User
from ..resource import ResourceClient


class MyselfEndpoint:
    """Operations on /myself."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/myself')

    async def get(self) -> User:
        return await self._client.fetch(self._client.get(), User)

    async def update(self, display_name: Optional[str] = None, email: Optional[str] = None) -> User:
        """Change the display name and/or email of the current user.

        Jira asks for the current password on this call; the one the
        connector authenticates with is sent.
        """
        body: Dict[str, Any] = {}
        if display_name:
            body['displayName'] = display_name
        if email:
            body['emailAddress'] = email
        body['password'] = self._client.auth.password
        request = self._client.put().as_json().with_body(body)
        return await self._client.fetch(request, User)

    async def change_password(self, old_password: str, new_password: str) -> None:
        request = self._client.put('password').as_json().with_body({
            'password': new_password,
            'currentPassword': old_password,
        })
        await self._client.execute(request)


class MyPreferencesEndpoint:
    """Operations on /mypreferences."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/mypreferences')

    async def get(self, key: str) -> Any:
        return await self._client.execute(self._client.get().with_query_param('key', key))

    async def delete(self, key: str) -> None:
        await self._client.execute(self._client.delete().with_query_param('key', key))

    async def set(self, key: str, value: str) -> Any:
        request = self._client.put().with_query_param('key', key).as_raw().with_body(value)
        return await self._client.execute(request)


class PasswordPolicyEndpoint:
    """Operations on /password/policy."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/policy')

    async def get(self, has_old_password: Optional[bool] = None) -> List[str]:
        """Human readable rules of the password policy."""
        request = self._client.get().with_query_param('hasOldPassword', has_old_password)
        return await self._client.execute(request)

    async def create_user(self, check: PasswordPolicyCreateUser) -> List[str]:
        """Policy violations a new user's password would cause."""
        request = self._client.post('createUser').as_json().with_body(check)
        return await self._client.execute(request)

    async def update_user(self, check: PasswordPolicyUpdateUser) -> List[str]:
        request = self._client.post('updateUser').as_json().with_body(check)
        return await self._client.execute(request)


class PasswordEndpoint:
    """Operations on /password."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/password')

    def policy(self) -> PasswordPolicyEndpoint:
        return PasswordPolicyEndpoint(self._client)
