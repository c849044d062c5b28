# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

"""
Errors raised while adding files to a repository.

Only ValidationError maps to a client error; NavUpdateError is caught by the
orchestrator and never reaches the caller. Everything else is reported as a
server error carrying the exception message.
"""


class UploadError(Exception):
    """Base class for upload failures."""


class ValidationError(UploadError):
    """The incoming request is malformed. No remote call has been made."""


class DownloadError(UploadError):
    """A source file could not be downloaded."""


class NavUpdateError(UploadError):
    """The MkDocs configuration could not be updated."""


class GitHubError(UploadError):
    """An unexpected response from the GitHub API."""


class RefNotFoundError(GitHubError):
    """A branch doesn't exist."""


class BranchCreateError(GitHubError):
    """Creating a branch failed for a reason other than it already existing."""


class CommitError(GitHubError):
    """Writing a file to the repository failed."""
