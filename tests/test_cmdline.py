# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025-2026 Stacklet, Inc.
#

import json

from unittest.mock import MagicMock

import pytest

from hhdocs.uploader.cmdline import CLIArguments


@pytest.fixture
def mock_server(monkeypatch):
    server = MagicMock()
    monkeypatch.setattr("hhdocs.uploader.cmdline.make_server", lambda: server)
    yield server


@pytest.fixture
def mock_uvicorn(monkeypatch):
    run = MagicMock()
    monkeypatch.setattr("hhdocs.uploader.cmdline.uvicorn.run", run)
    monkeypatch.setattr("hhdocs.uploader.cmdline.configure_logging", MagicMock())
    yield run


@pytest.fixture
def run_cli(monkeypatch):
    def run(*args):
        monkeypatch.setattr("sys.argv", ["hhdocs-uploader", *args])
        args = CLIArguments()
        args.cli_cmd()

    yield run


class TestCLIArguments:
    def test_default_run_when_no_args(self, mock_server, mock_uvicorn, run_cli):
        run_cli()

        mock_uvicorn.assert_called_once_with(
            mock_server, host="0.0.0.0", port=8000, log_level="info"
        )

    def test_explicit_run_command(self, mock_server, mock_uvicorn, run_cli):
        run_cli("run", "--host", "127.0.0.1", "--port", "9000")

        mock_uvicorn.assert_called_once_with(
            mock_server, host="127.0.0.1", port=9000, log_level="info"
        )

    def test_run_uses_settings(self, mock_server, mock_uvicorn, run_cli, override_setting):
        override_setting("port", 8080)
        override_setting("log_level", "DEBUG")
        run_cli("run")

        mock_uvicorn.assert_called_once_with(
            mock_server, host="0.0.0.0", port=8080, log_level="debug"
        )

    def test_show_settings(self, capsys, run_cli):
        run_cli("show-settings")

        out, err = capsys.readouterr()
        assert json.loads(out)["default_repo"] == "hh-docs"
        assert err == ""
