"""Turn uploaded or opened files into base64 data URLs."""

from __future__ import annotations

import asyncio
import base64
import inspect
import mimetypes
import os
from typing import Any, BinaryIO, Optional, Union

from fastapi import UploadFile

DEFAULT_MIME_TYPE = "application/octet-stream"

FileLike = Union[UploadFile, BinaryIO, bytes, bytearray, memoryview]


def _guess_mime_type(file: Any) -> str:
    content_type = getattr(file, "content_type", None)
    if content_type:
        return str(content_type)

    name: Optional[str] = getattr(file, "filename", None) or getattr(file, "name", None)
    if isinstance(name, (str, os.PathLike)):
        guessed, _ = mimetypes.guess_type(os.fspath(name))
        if guessed:
            return guessed
    return DEFAULT_MIME_TYPE


async def _read_all(file: Any) -> bytes:
    if isinstance(file, (bytes, bytearray, memoryview)):
        return bytes(file)
    if isinstance(file, UploadFile):
        return await file.read()

    data = file.read()
    if inspect.isawaitable(data):
        data = await data
    return bytes(data)


def to_data_url(data: bytes, mime_type: str = DEFAULT_MIME_TYPE) -> str:
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


async def file_to_base64(file: FileLike, *, delay: float = 0.0) -> str:
    """Read ``file`` completely and encode it as a ``data:`` URL.

    Args:
        file: A FastAPI ``UploadFile``, a binary file object (sync or async
            ``read()``), or raw bytes.
        delay: Optional pause in seconds before returning.

    Returns:
        ``"data:<mime>;base64,<payload>"``. The MIME type comes from the
        upload's ``content_type``, else from the file name, else
        ``application/octet-stream``.

    Notes:
        Read errors propagate. The file is not closed.
    """

    data = await _read_all(file)
    if delay > 0:
        await asyncio.sleep(delay)
    return to_data_url(data, _guess_mime_type(file))
