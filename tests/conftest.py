"""
Common test fixtures and configuration.
"""

import pytest

from hhdocs.uploader.github.client import GitHubClient

from .testing.http import mock_http
from .testing.settings import default_settings, override_setting


# add imported fixtures to __all__ so they're considered in use in the module
__all__ = ["mock_http", "default_settings", "override_setting"]


@pytest.fixture
def github_token():
    return "fake-token"


@pytest.fixture
async def github(github_token):
    """A client for the kannwism/hh-docs repository."""
    async with GitHubClient("kannwism", "hh-docs", github_token) as client:
        yield client
