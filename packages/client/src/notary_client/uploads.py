"""
uploads.py — Mocked file upload.

Nothing is stored: a file is checked against the rule for its purpose
(UPLOAD_RULES), the configured delay is awaited, and a storage-style URL is
synthesized as {upload_storage_url}/{folder}/{epoch_ms}-{filename}.

Usage:
    url = await upload_file("hop-dong.pdf", size=120_000,
                            content_type="application/pdf", purpose="applications")
"""

from __future__ import annotations

import asyncio
import mimetypes
import time
from collections.abc import Awaitable, Callable
from pathlib import Path

from notary_shared.config import settings
from notary_shared.constants import UPLOAD_RULES
from notary_client.errors import UploadRejectedError
from notary_client.utils.logging import get_logger

log = get_logger(__name__, component="uploads")


def _format_size(size: int) -> str:
    return f"{size / (1024 * 1024):g}MB"


def validate_upload(filename: str, size: int, content_type: str | None, purpose: str) -> None:
    """
    Raises:
        UploadRejectedError: wrong type or too large for `purpose`.
        KeyError:            unknown purpose.
    """
    allowed, max_size = UPLOAD_RULES[purpose]
    ctype = content_type or mimetypes.guess_type(filename)[0]
    if allowed is not None and ctype not in allowed:
        raise UploadRejectedError(filename, f"Định dạng file {filename} không được hỗ trợ")
    if max_size is not None and size > max_size:
        raise UploadRejectedError(
            filename, f"File {filename} vượt quá dung lượng cho phép ({_format_size(max_size)})"
        )


async def upload_file(
    filename: str,
    size: int,
    content_type: str | None = None,
    purpose: str = "records",
    *,
    folder: str | None = None,
    delay: float | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> str:
    """Validate and "upload" one file; returns its synthesized URL."""
    validate_upload(filename, size, content_type, purpose)
    await sleep(settings.upload_delay_seconds if delay is None else delay)
    url = f"{settings.upload_storage_url}/{folder or purpose}/{int(time.time() * 1000)}-{filename}"
    log.info("upload_mocked", filename=filename, size=size, purpose=purpose, url=url)
    return url


async def upload_path(path: Path, purpose: str = "records", **kwargs) -> str:
    """upload_file() for a file on disk."""
    return await upload_file(path.name, path.stat().st_size, None, purpose, **kwargs)


async def upload_many(
    files: list[tuple[str, int, str | None]],
    purpose: str = "records",
    **kwargs,
) -> list[str]:
    """All files are validated before any is "uploaded"."""
    for filename, size, ctype in files:
        validate_upload(filename, size, ctype, purpose)
    return list(await asyncio.gather(
        *(upload_file(name, size, ctype, purpose, **kwargs) for name, size, ctype in files)
    ))
