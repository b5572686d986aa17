import os
import sys

import click
import yaml
from pathlib import Path

from click.core import ParameterSource
from tqdm import tqdm

from featurescan.constants import (
    FAULT_MAPPING,
    MISSING_COMMAND_SLOGAN,
    TOOL_USAGE,
    TOOL_VERSION,
)
from featurescan.logging.config import LoggingConfig

CONTEXT_SETTINGS = dict(auto_envvar_prefix="FEATURESCAN")

featurescan_folder = Path(__file__).parent
cmd_folder = featurescan_folder / "commands/"


class Environment:
    def __init__(self):
        self.home = os.getcwd()
        self.default_config_file = True
        self.params_from_config = dict()
        self.cmd = None
        self.file = None
        self.pattern = None
        self.dir = None
        self.verbose = None
        self.silent = None
        self.config = None

    def log(self, msg: str, new_line=True, *args):
        """Logs a message to stdout only is silent mode is disabled."""
        if not self.silent:
            if args:
                msg %= args
            click.echo(msg, file=sys.stdout, nl=new_line)

    def vlog(self, msg: str, *args):
        """Logs a message to stdout only if the verbose option is enabled."""
        if self.verbose:
            self.log(msg, *args)

    @staticmethod
    def elog(msg: str, new_line=True, *args):
        """Logs a message to stderr."""
        if args:
            msg %= args
        click.echo(msg, file=sys.stderr, nl=new_line)

    def get_progress_bar(self, results_amount: int, prefix: str):
        return tqdm(
            total=results_amount,
            bar_format=prefix + ": {n_fmt}/{total_fmt}{postfix}",
            disable=bool(self.silent),
        )

    def setup_logging(self):
        """Configures the structured loggers from the config file and FEATURESCAN_LOG_* variables."""
        LoggingConfig.setup_logging(config_path=self.config)

    def set_parameters(self, context: click.core.Context):
        """Sets parameters based on context. The function will override parameters with config file values
        depending on the parameter source and config file source (default or custom)"""
        if self.default_config_file:
            param_sources_types = [ParameterSource.DEFAULT]
        else:
            param_sources_types = [ParameterSource.DEFAULT, ParameterSource.ENVIRONMENT]
        for param, value in context.params.items():
            # Don't set config again
            if param == "config":
                continue
            param_config_value = self.params_from_config.get(param, None)
            param_source = context.get_parameter_source(param)
            if param_source in param_sources_types and (param_config_value is not None):
                setattr(self, param, param_config_value)
            else:
                setattr(self, param, value)

    def parse_config_file(self, context: click.Context):
        """Sets config file path from context and information if default or custom config file should be used."""
        executable_folder = Path(sys.argv[0]).parent

        if context.params.get("config"):
            self.config = context.params["config"]
            self.default_config_file = False
        elif Path(executable_folder / "config.yml").is_file():
            self.config = executable_folder / "config.yml"
        elif Path(executable_folder / "config.yaml").is_file():
            self.config = executable_folder / "config.yaml"
        else:
            self.config = None
        if self.config:
            self.parse_params_from_config_file(self.config)

    def parse_params_from_config_file(self, file_path: Path):
        self.params_from_config = {}
        try:
            with open(file_path, "r") as f:
                for page_content in yaml.safe_load_all(f):
                    if page_content:
                        self.params_from_config.update(page_content)
        except (yaml.YAMLError, ValueError, TypeError) as e:
            self.elog(FAULT_MAPPING["yaml_file_parse_issue"].format(file_path=file_path))
            self.elog(f"Error details:\n{e}")
            if not self.default_config_file:
                exit(1)
            self.params_from_config = {}
        except IOError:
            self.elog(FAULT_MAPPING["file_open_issue"].format(file_path=file_path))
            if not self.default_config_file:
                exit(1)
            self.params_from_config = {}


pass_environment = click.make_pass_decorator(Environment, ensure=True)


class FEATURESCAN(click.Group):
    def __init__(self, *args, **kwargs):
        # invoke_without_command=True lets the callback print the usage when no command is given
        click.Group.__init__(self, invoke_without_command=True, *args, **kwargs)

    def list_commands(self, context: click.Context):
        commands = []
        for filename in cmd_folder.iterdir():
            if filename.name.endswith(".py") and filename.name.startswith("cmd_"):
                commands.append(filename.name[4:-3])
        commands.sort()
        return commands

    def get_command(self, context: click.Context, name: str):
        try:
            mod = __import__(f"featurescan.commands.cmd_{name}", None, None, ["cli"])
        except ImportError:
            return None
        return mod.cli


@click.command(cls=FEATURESCAN, context_settings=CONTEXT_SETTINGS)
@click.pass_context
@pass_environment
@click.option(
    "-c",
    "--config",
    type=click.Path(),
    metavar="",
    help="Optional path to a YAML config file with parameter and logging settings.",
)
@click.option("-v", "--verbose", is_flag=True, help="Output every file and scenario analyzed.")
@click.option(
    "-s",
    "--silent",
    flag_value=True,
    is_flag=True,
    help="Silence stdout",
    default=False,
)
def cli(environment: Environment, context: click.core.Context, *args, **kwargs):
    """Gherkin feature analyzer"""
    if not sys.argv[1:]:
        click.echo(TOOL_VERSION)
        click.echo(TOOL_USAGE)
        exit(0)

    # This check is due to usage of invoke_without_command=True in FEATURESCAN class.
    if not context.invoked_subcommand:
        click.echo(MISSING_COMMAND_SLOGAN)
        exit(2)

    environment.parse_config_file(context)
    environment.set_parameters(context)
