# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

from pydantic import BaseModel, Field


class FileContent(BaseModel):
    """A file read from the repository."""

    path: str = Field(..., description="Path in the repository")
    content: str = Field(..., description="Decoded file content")
    sha: str = Field(..., description="Blob SHA of the file")


class CommitResult(BaseModel):
    """Outcome of writing a single file."""

    path: str = Field(..., description="Path of the written file")
    sha: str = Field(..., description="SHA of the commit that wrote it")
