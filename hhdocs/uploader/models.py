# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

from pydantic import BaseModel, ConfigDict, Field

from .files.models import FileRequest
from .settings import SETTINGS


class UploadRequest(BaseModel):
    """Request to add files to a repository branch."""

    model_config = ConfigDict(populate_by_name=True)

    file_urls: list[FileRequest] = Field(..., alias="fileUrls", min_length=1)
    branch_name: str = Field(..., alias="branchName", min_length=1)
    github_token: str = Field(..., alias="githubToken", min_length=1)
    owner: str = Field(default_factory=lambda: SETTINGS.default_owner, min_length=1)
    repo: str = Field(default_factory=lambda: SETTINGS.default_repo, min_length=1)
    base_branch: str = Field(
        default_factory=lambda: SETTINGS.default_base_branch, alias="baseBranch", min_length=1
    )
    commit_message: str = Field(
        default_factory=lambda: SETTINGS.default_commit_message, alias="commitMessage"
    )


class UploadResponse(BaseModel):
    """Files added to a repository branch."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str
    branch: str
    files: list[str] = Field(..., description="Paths of the committed files")
    commits: list[str] = Field(..., description="SHA of the commit for each file")
    mkdocs_updated: bool = Field(..., alias="mkdocsUpdated")
