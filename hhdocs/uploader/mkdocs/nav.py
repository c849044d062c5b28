# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

"""
Keep the MkDocs navigation in sync with uploaded documentation pages.
"""

import base64
import re

import yaml

from ..errors import NavUpdateError
from ..files.models import DownloadedFile
from ..github.client import GitHubClient
from ..settings import SETTINGS
from ..utils.logging import get_logger
from . import yaml_io
from .models import NavConfig, TitledEntry, nav_contains


logger = get_logger("mkdocs")

MKDOCS_UPDATE_URL = "internal://mkdocs-update"


def title_from_path(relative_path: str) -> str:
    """
    Derive a page title from its path.

    Words separated by dashes or underscores get their first letter
    capitalized, so "getting-started.md" becomes "Getting Started".
    """
    name = relative_path.removesuffix(".md")
    return " ".join(word[:1].upper() + word[1:] for word in re.split(r"[-_]", name))


def load_nav_config(content: str | None, site_name: str = "Documentation") -> NavConfig:
    """
    Parse an MkDocs configuration, or create a new one if there's none.

    Raises:
        NavUpdateError: if the content isn't a usable MkDocs configuration
    """
    if content is None:
        return NavConfig(site_name=site_name)

    try:
        data = yaml_io.load(content)
    except yaml.YAMLError as err:
        raise NavUpdateError(f"Invalid MkDocs configuration: {err}") from err

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise NavUpdateError("Invalid MkDocs configuration: expected a mapping")

    try:
        return NavConfig.from_mapping(data)
    except ValueError as err:
        raise NavUpdateError(f"Invalid MkDocs configuration: {err}") from err


def merge_doc_entries(
    existing: str | None,
    doc_files: list[DownloadedFile],
    docs_prefix: str = "docs/",
    site_name: str = "Documentation",
) -> str:
    """
    Add navigation entries for documentation pages.

    Args:
        existing: current configuration text, None if there's no config yet
        doc_files: documentation pages to reference
        docs_prefix: repository directory MkDocs serves pages from
        site_name: site name for a newly created configuration

    Returns:
        The full updated configuration text
    """
    config = load_nav_config(existing, site_name=site_name)

    for doc_file in doc_files:
        relative_path = doc_file.path.removeprefix(docs_prefix)
        if nav_contains(config.nav, relative_path):
            continue
        title = title_from_path(relative_path)
        config.nav.append(TitledEntry(title, relative_path))
        logger.info(f"Added {title} to navigation")

    return yaml_io.dump(config.to_mapping())


async def update_mkdocs_config(
    client: GitHubClient,
    doc_files: list[DownloadedFile],
    branch: str,
    base_branch: str,
) -> DownloadedFile | None:
    """
    Build the updated MkDocs configuration for a set of documentation pages.

    The configuration is read from the target branch, falling back to the base
    branch. A new one is created if neither has it.

    Returns:
        The configuration file to commit, or None if there are no pages.
    """
    if not doc_files:
        return None

    path = SETTINGS.mkdocs_path
    logger.info(f"Found {len(doc_files)} docs files, updating {path}...")

    sha = None
    existing = await client.get_file(path, branch)
    if existing:
        sha = existing.sha
    else:
        logger.info(f"{path} not found on branch {branch}, trying {base_branch}")
        # the SHA from the base branch isn't used; the commit looks it up on
        # the target branch
        existing = await client.get_file(path, base_branch)

    if existing is None:
        logger.info(f"{path} not found, creating new one")

    content = merge_doc_entries(
        existing.content if existing else None,
        doc_files,
        docs_prefix=SETTINGS.docs_prefix,
        site_name=SETTINGS.default_site_name,
    )
    return DownloadedFile(
        path=path,
        content=base64.b64encode(content.encode()).decode("ascii"),
        url=MKDOCS_UPDATE_URL,
        original_path=path,
        sha=sha,
    )
