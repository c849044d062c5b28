# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

from pydantic import BaseModel, ConfigDict, Field


class FileRequest(BaseModel):
    """A file to download and add to the repository."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1, description="URL to download the file from")
    path: str = Field(..., min_length=1, description="Destination path in the repository")


class DownloadedFile(BaseModel):
    """A file ready to be committed."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Final path in the repository")
    content: str = Field(..., description="Base64-encoded file content")
    url: str = Field(..., description="Where the content came from")
    original_path: str = Field(..., description="Destination path as requested")
    sha: str | None = Field(
        default=None, description="Blob SHA of the existing file, when already known"
    )
