"""
Body encoding and decoding shared by the HTTP transports.
"""
import asyncio
import json
from pathlib import Path
from typing import Any, Dict, Tuple

from ...core.request import BodyType, HttpRequest

TEXT_MARKERS = ('json', 'xml', 'javascript', 'x-www-form-urlencoded')


def parse_body(content: bytes, content_type: str = '') -> Any:
    """Decode a response body.

    JSON is parsed when the content type says so or the text looks like a
    JSON document. Binary content types (zip, octet-stream, images) come back
    as the raw bytes; anything else is returned as text. An empty body is None.

    Args:
        content: Raw response bytes
        content_type: Value of the Content-Type header

    Returns:
        Parsed JSON, text, bytes or None
    """
    if not content:
        return None
    media_type = content_type.split(';', 1)[0].strip().lower()
    if media_type and not is_textual(media_type):
        return content
    text = content.decode('utf-8', errors='replace')
    if 'json' in media_type or text.lstrip()[:1] in ('{', '['):
        try:
            return json.loads(text)
        except ValueError:
            return text
    return text


def is_textual(media_type: str) -> bool:
    return media_type.startswith('text/') or any(
        marker in media_type for marker in TEXT_MARKERS
    )


async def read_upload(path: Any) -> Tuple[str, bytes]:
    """Read a file to upload without blocking the event loop.

    Returns:
        (file name, file content)
    """
    file_path = Path(path)
    content = await asyncio.to_thread(file_path.read_bytes)
    return file_path.name, content


def prepare_headers(request: HttpRequest) -> Dict[str, str]:
    """Headers to send; multipart uploads get their Content-Type from the client."""
    headers = dict(request.headers)
    if request.body_type is BodyType.FILE:
        headers.pop('Content-Type', None)
    return headers


def encode_text(body: Any) -> bytes:
    if isinstance(body, bytes):
        return body
    return ('' if body is None else str(body)).encode('utf-8')
