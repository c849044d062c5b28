# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

"""
Client for the GitHub REST API, limited to branch and contents operations.
"""

import base64

from types import TracebackType
from typing import Any, Self
from urllib.parse import quote, urljoin

import httpx

from ..errors import BranchCreateError, CommitError, GitHubError, RefNotFoundError
from ..settings import SETTINGS
from ..utils.logging import get_logger
from .models import CommitResult, FileContent


logger = get_logger("github")


class GitHubClient:
    """Client for a single GitHub repository."""

    def __init__(
        self,
        owner: str,
        repo: str,
        token: str,
        api_url: str | None = None,
        api_version: str | None = None,
    ) -> None:
        """
        Initialize the client for a repository.

        Args:
            owner: user or organization owning the repository
            repo: repository name
            token: token sent as bearer authorization
            api_url: GitHub API base URL, defaults to the configured one
            api_version: REST API version, defaults to the configured one
        """
        self.owner = owner
        self.repo = repo

        api_url = api_url or SETTINGS.github_api_url
        if not api_url.endswith("/"):
            api_url += "/"
        self.repo_url = urljoin(api_url, f"repos/{quote(owner)}/{quote(repo)}/")

        self.session = httpx.AsyncClient(
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": api_version or SETTINGS.github_api_version,
            }
        )

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self.session.aclose()

    async def _request(self, method: str, endpoint: str, **kwargs: Any) -> httpx.Response:
        """Make a request to a repository endpoint, returning the raw response."""
        url = urljoin(self.repo_url, endpoint)
        return await self.session.request(method, url, **kwargs)

    async def get_branch_sha(self, branch: str) -> str:
        """
        Return the SHA of the commit a branch points at.

        Raises:
            RefNotFoundError: if the branch doesn't exist
            GitHubError: on any other failure
        """
        logger.info(f"Getting reference for branch: {branch}")
        response = await self._request("GET", f"git/ref/heads/{quote(branch)}")
        if response.status_code == 404:
            raise RefNotFoundError(f"Branch {branch} not found: {response.text}")
        if not response.is_success:
            raise GitHubError(f"Failed to get branch reference {branch}: {response.text}")
        return response.json()["object"]["sha"]

    async def create_branch(self, branch: str, from_sha: str) -> bool:
        """
        Create a branch pointing at a commit.

        Args:
            branch: name of the branch to create
            from_sha: commit the branch starts from

        Returns:
            True if the branch was created, False if it already existed.

        Raises:
            BranchCreateError: if creation failed for any other reason
        """
        logger.info(f"Creating new branch: {branch}")
        response = await self._request(
            "POST",
            "git/refs",
            json={"ref": f"refs/heads/{branch}", "sha": from_sha},
        )
        # GitHub reports an existing ref as an unprocessable entity, along
        # with invalid names and unknown commits
        if response.status_code == 422 and "Reference already exists" in response.text:
            logger.info(f"Branch {branch} already exists, using existing branch")
            return False
        if not response.is_success:
            raise BranchCreateError(f"Failed to create branch {branch}: {response.text}")

        logger.info(f"Successfully created branch {branch}")
        return True

    async def get_file(self, path: str, ref: str) -> FileContent | None:
        """
        Read a file at a ref.

        Returns:
            The decoded file, or None if it can't be read.
        """
        data = await self._get_contents(path, ref)
        if data is None:
            return None
        return FileContent(
            path=path,
            content=base64.b64decode(data["content"]).decode(),
            sha=data["sha"],
        )

    async def get_file_sha(self, path: str, branch: str) -> str | None:
        """
        Return the blob SHA of a file on a branch.

        Returns:
            The SHA, or None if the file can't be read.
        """
        data = await self._get_contents(path, branch)
        if data is None:
            return None
        logger.info(f"File {path} already exists on branch, using SHA: {data['sha']}")
        return data["sha"]

    async def _get_contents(self, path: str, ref: str) -> dict[str, Any] | None:
        response = await self._request("GET", f"contents/{quote(path)}", params={"ref": ref})
        if response.status_code == 404:
            return None
        if not response.is_success:
            # a failed read is treated like a missing file, but keep a trace
            # since it can turn an update into a create
            logger.warning(
                f"Reading {path} at {ref} failed with status {response.status_code}: "
                f"{response.text}"
            )
            return None

        data = response.json()
        # a directory lists its entries instead
        if not isinstance(data, dict) or data.get("type", "file") != "file":
            return None
        return data

    async def put_file(
        self,
        path: str,
        content: str,
        message: str,
        branch: str,
        sha: str | None = None,
    ) -> CommitResult:
        """
        Create or update a file on a branch.

        Args:
            path: path of the file in the repository
            content: base64-encoded file content
            message: commit message
            branch: branch to commit to
            sha: blob SHA of the file being replaced; omit to create a new file

        Returns:
            The commit that wrote the file

        Raises:
            CommitError: if GitHub rejects the write
        """
        payload = {"message": message, "content": content, "branch": branch}
        if sha:
            payload["sha"] = sha

        response = await self._request("PUT", f"contents/{quote(path)}", json=payload)
        if not response.is_success:
            raise CommitError(f"Failed to add file {path}: {response.text}")

        return CommitResult(path=path, sha=response.json()["commit"]["sha"])
