# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

"""
Add downloaded files to a branch of a GitHub repository.
"""

import asyncio

from typing import Any, NamedTuple

import pydantic

from .errors import ValidationError
from .files.fetcher import FileFetcher, docs_files
from .files.models import DownloadedFile
from .github.client import GitHubClient
from .github.models import CommitResult
from .mkdocs.nav import update_mkdocs_config
from .models import UploadRequest, UploadResponse
from .settings import SETTINGS
from .utils.logging import get_logger


logger = get_logger("orchestrator")


class HandlerResult(NamedTuple):
    """HTTP status and JSON content for a handled request."""

    status_code: int
    content: dict[str, Any]


def validate_request(body: Any) -> UploadRequest:
    """
    Validate a request body.

    Raises:
        ValidationError: with a message describing the first problem found
    """
    if not isinstance(body, dict):
        raise ValidationError("Request body must be a JSON object")

    file_urls = body.get("fileUrls")
    if not isinstance(file_urls, list) or not file_urls:
        raise ValidationError("fileUrls array is required and must not be empty")
    if not body.get("branchName"):
        raise ValidationError("branchName is required")
    if not body.get("githubToken"):
        raise ValidationError("githubToken is required")

    try:
        return UploadRequest.model_validate(body)
    except pydantic.ValidationError as err:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
            for error in err.errors()
        )
        raise ValidationError(f"Invalid request: {problems}") from err


async def add_files(request: UploadRequest) -> UploadResponse:
    """
    Download the requested files and commit them to the target branch.

    The branch is created from the base branch unless it already exists.
    Documentation pages are also added to the MkDocs navigation, on a best
    effort basis.
    """
    async with GitHubClient(request.owner, request.repo, request.github_token) as github:
        base_sha = await github.get_branch_sha(request.base_branch)
        await github.create_branch(request.branch_name, base_sha)

        files = await FileFetcher().download_all(request.file_urls)

        mkdocs_file = await _update_navigation(github, files, request)
        if mkdocs_file:
            files.append(mkdocs_file)

        logger.info(f"Adding {len(files)} files to branch {request.branch_name}...")
        results = await asyncio.gather(
            *(_commit(github, file, request) for file in files),
            return_exceptions=True,
        )
        # every commit has finished, report the first one that failed
        commits: list[CommitResult] = []
        for result in results:
            if isinstance(result, BaseException):
                raise result
            commits.append(result)
        logger.info(f"Successfully committed {len(commits)} files")

    return UploadResponse(
        message=f"Successfully added {len(files)} files to branch {request.branch_name}",
        branch=request.branch_name,
        files=[file.path for file in files],
        commits=[commit.sha for commit in commits],
        mkdocs_updated=mkdocs_file is not None,
    )


async def _update_navigation(
    github: GitHubClient, files: list[DownloadedFile], request: UploadRequest
) -> DownloadedFile | None:
    try:
        return await update_mkdocs_config(
            github,
            docs_files(files, SETTINGS.docs_prefix),
            request.branch_name,
            request.base_branch,
        )
    except Exception:
        # files are still committed without the navigation update
        logger.warning(f"Failed to update {SETTINGS.mkdocs_path}", exc_info=True)
        return None


async def _commit(
    github: GitHubClient, file: DownloadedFile, request: UploadRequest
) -> CommitResult:
    sha = file.sha or await github.get_file_sha(file.path, request.branch_name)
    return await github.put_file(
        file.path,
        file.content,
        f"{request.commit_message}: {file.path}",
        request.branch_name,
        sha,
    )


async def handle_request(body: Any) -> HandlerResult:
    """
    Handle an add-files request body.

    Returns:
        200 with the upload summary, 400 for an invalid request, 500 for any
        other failure. Errors are reported as {"error": message}.
    """
    try:
        request = validate_request(body)
    except ValidationError as err:
        return HandlerResult(400, {"error": str(err)})

    try:
        response = await add_files(request)
    except Exception as err:
        logger.exception("Adding files failed")
        return HandlerResult(500, {"error": str(err) or "An unexpected error occurred"})

    return HandlerResult(200, response.model_dump(by_alias=True))
