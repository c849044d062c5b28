# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright (c) 2025 Stacklet, Inc.
#

import uvicorn

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, CliApp, CliSubCommand

from .server import make_server
from .settings import SETTINGS
from .utils.logging import configure_logging


class RunCommand(BaseModel):
    """Run the HTTP server"""

    host: str | None = Field(default=None, description="address to bind to")
    port: int | None = Field(default=None, description="port to listen on")

    def cli_cmd(self) -> None:
        configure_logging(SETTINGS.log_level)
        uvicorn.run(
            make_server(),
            host=self.host or SETTINGS.host,
            port=self.port or SETTINGS.port,
            log_level=SETTINGS.log_level.lower(),
        )


class ShowSettingsCommand(BaseModel):
    """Print effective settings as JSON"""

    def cli_cmd(self) -> None:
        print(SETTINGS.model_dump_json(indent=2))


class CLIArguments(
    BaseSettings, cli_parse_args=True, cli_kebab_case=True, cli_use_class_docs_for_groups=True
):
    """Command line arguments."""

    run: CliSubCommand[RunCommand]
    show_settings: CliSubCommand[ShowSettingsCommand]

    def cli_cmd(self) -> None:
        if not self.model_dump(exclude_none=True):
            # no option was provided, run by default
            RunCommand().cli_cmd()
        else:
            CliApp.run_subcommand(self)


def main() -> None:
    CLIArguments().cli_cmd()
