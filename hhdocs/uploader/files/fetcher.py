# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

"""
Download source files and prepare them for the GitHub Contents API.
"""

import asyncio
import base64

import httpx

from ..errors import DownloadError
from ..settings import SETTINGS
from ..utils.logging import get_logger
from .models import DownloadedFile, FileRequest


logger = get_logger("files")


def rewrite_docs_path(path: str, docs_prefix: str | None = None) -> str:
    """Return the repository path for a requested destination.

    MkDocs only renders Markdown, so MDX sources under the docs prefix are
    stored with a .md extension. Any other path is returned unchanged.
    """
    docs_prefix = docs_prefix or SETTINGS.docs_prefix
    if path.startswith(docs_prefix) and path.endswith(".mdx"):
        return path.removesuffix(".mdx") + ".md"
    return path


def docs_files(
    files: list[DownloadedFile], docs_prefix: str | None = None
) -> list[DownloadedFile]:
    """Return the Markdown files under the docs prefix."""
    docs_prefix = docs_prefix or SETTINGS.docs_prefix
    return [f for f in files if f.path.startswith(docs_prefix) and f.path.endswith(".md")]


class FileFetcher:
    """Fetch a batch of remote files concurrently."""

    def __init__(self, docs_prefix: str | None = None) -> None:
        self.docs_prefix = docs_prefix or SETTINGS.docs_prefix

    async def download_all(self, requests: list[FileRequest]) -> list[DownloadedFile]:
        """
        Download every requested file.

        Args:
            requests: files to download, with their destination paths

        Returns:
            Downloaded files, in request order

        Raises:
            DownloadError: if any download fails. Downloads still in progress
                are cancelled and nothing is returned.
        """
        logger.info(f"Downloading {len(requests)} files...")
        async with httpx.AsyncClient(follow_redirects=True) as session:
            tasks = [asyncio.ensure_future(self._download(session, req)) for req in requests]
            try:
                files = await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                # let cancelled and failed downloads finish before the session closes
                await asyncio.gather(*tasks, return_exceptions=True)
                raise

        logger.info("Successfully downloaded all files")
        return list(files)

    async def _download(self, session: httpx.AsyncClient, request: FileRequest) -> DownloadedFile:
        try:
            response = await session.get(request.url)
        except httpx.HTTPError as err:
            raise DownloadError(f"Error processing file {request.url}: {err}") from err

        if not response.is_success:
            raise DownloadError(
                f"Failed to download file from {request.url}: "
                f"{response.status_code} {response.reason_phrase}"
            )

        path = rewrite_docs_path(request.path, self.docs_prefix)
        if path != request.path:
            logger.info(f"Converting {request.path} to {path}")

        return DownloadedFile(
            path=path,
            content=base64.b64encode(response.content).decode("ascii"),
            url=request.url,
            original_path=request.path,
        )
