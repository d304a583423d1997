"""
Attachment and avatar endpoints.
"""
from pathlib import Path
from typing import List, Optional

from ...core.domain import Attachment, AttachmentMeta, Avatar, AvatarCropping, SystemAvatars
from ..resource import ResourceClient


class AttachmentsEndpoint:
    """Operations on /attachment."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/attachment')

    async def get(self, attachment_id: str) -> Attachment:
        return await self._client.fetch(self._client.get(attachment_id), Attachment)

    async def get_meta(self) -> AttachmentMeta:
        """Whether attachments are enabled and the upload size limit."""
        return await self._client.fetch(self._client.get('meta'), AttachmentMeta)

    async def delete(self, attachment_id: str) -> None:
        await self._client.execute(self._client.delete(attachment_id))


class AvatarEndpoint:
    """Operations on /avatar (system avatars per owner type)."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/avatar')

    async def list(self, avatar_type: str, width: Optional[str] = None) -> SystemAvatars:
        """System avatars for an owner type ("project", "user", "issuetype").

        ``width`` travels in the X-Requested-With header, which is where
        existing callers of this API put it.
        """
        request = self._client.get(f"{avatar_type}/system")
        if width:
            request = request.with_header('X-Requested-With', width)
        return await self._client.fetch(request, SystemAvatars)

    async def temporary(
        self,
        avatar_type: str,
        filename: str,
        size: int,
        path: Optional[str] = None
    ) -> AvatarCropping:
        """Create a temporary avatar (step 1 of 2).

        Args:
            avatar_type: Owner type of the avatar
            filename: Name of the uploaded image
            size: Size of the image in bytes
            path: Local image to upload; when omitted only the metadata is sent
        """
        request = self._client.post(f"{avatar_type}/temporary") \
            .with_query_param('filename', filename) \
            .with_query_param('size', size)
        if path is not None:
            request = request.as_file().with_body(path)
        return await self._client.fetch(request, AvatarCropping)

    async def create_from_temporary(self, avatar_type: str, cropping: AvatarCropping) -> Optional[Avatar]:
        """Crop the temporary avatar into a permanent one (step 2 of 2)."""
        request = self._client.post(f"{avatar_type}/temporaryCrop").as_json().with_body(cropping)
        return await self._client.fetch(request, Avatar)


class UniversalAvatarEndpoint:
    """Operations on /universal_avatar (avatars of any owner object)."""

    def __init__(self, parent: ResourceClient):
        self._client = parent.child('/universal_avatar')

    @staticmethod
    def _owner(avatar_type: str, owner_id: str) -> str:
        return f"type/{avatar_type}/owner/{owner_id}"

    async def list(self, avatar_type: str, owner_id: str) -> List[Avatar]:
        request = self._client.get(self._owner(avatar_type, owner_id))
        return await self._client.fetch(request, List[Avatar])

    async def upload(self, avatar_type: str, owner_id: str, path: str, size: int) -> AvatarCropping:
        """Upload an image as a temporary avatar of the owner."""
        request = self._client.post(f"{self._owner(avatar_type, owner_id)}/temp") \
            .as_file() \
            .with_body(path) \
            .with_query_param('filename', Path(path).name) \
            .with_query_param('size', size)
        return await self._client.fetch(request, AvatarCropping)

    async def crop(self, avatar_type: str, owner_id: str, cropping: AvatarCropping) -> Optional[Avatar]:
        request = self._client.post(f"{self._owner(avatar_type, owner_id)}/avatar") \
            .as_json().with_body(cropping)
        return await self._client.fetch(request, Avatar)

    async def delete(self, avatar_type: str, owner_id: str, avatar_id: str) -> None:
        request = self._client.delete(f"{self._owner(avatar_type, owner_id)}/avatar/{avatar_id}")
        await self._client.execute(request)


class OwnedAvatarsEndpoint:
    """Avatar operations of a single project or user.

    The client passed in is positioned at the owner; avatar listing lives
    at ``avatars`` and the avatar itself at ``avatar``.
    """

    def __init__(self, owner: ResourceClient, query: Optional[dict] = None):
        self._client = owner
        self._query = query or {}

    def _scoped(self, request):
        return self._client.apply_options(request, self._query)

    async def list(self) -> dict:
        """Avatars visible to the caller, grouped into "system" and "custom"."""
        request = self._scoped(self._client.get('avatars'))
        data = await self._client.execute(request)
        return {
            group: [Avatar.from_dict(item) for item in items or []]
            for group, items in (data or {}).items()
        }

    async def crop(self, cropping: AvatarCropping) -> Optional[Avatar]:
        """Convert the temporary avatar into the final one (step 2 of 3)."""
        request = self._scoped(self._client.post('avatar')).as_json().with_body(cropping)
        return await self._client.fetch(request, Avatar)

    async def update(self, avatar: Avatar) -> None:
        """Select an avatar (step 3 of 3)."""
        request = self._scoped(self._client.put('avatar')).as_json().with_body(avatar)
        await self._client.execute(request)

    async def upload(self, path: str, size: int) -> AvatarCropping:
        """Upload an image as a temporary avatar (step 1 of 3)."""
        request = self._scoped(self._client.post('avatar/temporary')) \
            .as_file() \
            .with_body(path) \
            .with_query_param('filename', Path(path).name) \
            .with_query_param('size', size)
        return await self._client.fetch(request, AvatarCropping)

    async def delete(self, avatar_id: str) -> None:
        request = self._scoped(self._client.delete(f"avatar/{avatar_id}"))
        await self._client.execute(request)
