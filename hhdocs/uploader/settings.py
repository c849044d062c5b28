# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server settings."""

    model_config = SettingsConfigDict(
        env_prefix="hhdocs_uploader_",
        validate_assignment=True,
    )

    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API",
    )
    github_api_version: str = Field(
        default="2022-11-28",
        description="Value sent in the X-GitHub-Api-Version header",
    )

    default_owner: str = Field(
        default="kannwism",
        description="Repository owner used when a request doesn't specify one",
    )
    default_repo: str = Field(
        default="hh-docs",
        description="Repository name used when a request doesn't specify one",
    )
    default_base_branch: str = Field(
        default="main",
        description="Branch new branches are created from",
    )
    default_commit_message: str = Field(
        default="Add files via edge function",
        description="Commit message prefix, the file path is appended",
    )

    docs_prefix: str = Field(
        default="docs/",
        description="Repository path holding MkDocs documentation sources",
    )
    mkdocs_path: str = Field(
        default="mkdocs.yml",
        description="Repository path of the MkDocs configuration file",
    )
    default_site_name: str = Field(
        default="Documentation",
        description="site_name for a newly created MkDocs configuration",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    host: str = Field(default="0.0.0.0", description="Address the HTTP server binds to")
    port: int = Field(default=8000, description="Port the HTTP server listens on")


SETTINGS = Settings()
