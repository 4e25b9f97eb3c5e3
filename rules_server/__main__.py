import logging
from typing import Callable, Optional

import anyio
import click
from rich.console import Console

from rules_server.config import ServerConfig
from rules_server.constants import (
    FETCH_TIMEOUT_ENV,
    GITHUB_TOKEN_ENV,
    LOG_LEVEL_ENV,
    RULES_PATH_ENV,
)
from rules_server.dispatcher import RulesDispatcher
from rules_server.errors import ContentSourceError, RulesServerError
from rules_server.logging_config import configure_logging
from rules_server.server import run_stdio
from rules_server.sources import create_content_source
from rules_server.tui.enums import OutputFormat
from rules_server.tui.renderers import RulesConsoleUI

logger = logging.getLogger(__name__)

FORMAT_VALUES = [item.value for item in OutputFormat]
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _format_option() -> Callable:
    return click.option(
        "--format",
        "output_format",
        type=click.Choice(FORMAT_VALUES, case_sensitive=False),
        default=OutputFormat.TABLE.value,
        show_default=True,
        help="Output format.",
    )


def _config_from_obj(obj: dict) -> ServerConfig:
    try:
        return ServerConfig.create(
            obj["rules_path"],
            github_token=obj["github_token"],
            fetch_timeout=obj["fetch_timeout"],
        )
    except RulesServerError as exc:
        raise click.ClickException(str(exc))


def _dispatcher_from_obj(obj: dict) -> RulesDispatcher:
    return RulesDispatcher(create_content_source(_config_from_obj(obj)))


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option(
    "--rules-path",
    envvar=RULES_PATH_ENV,
    help=f"Local rules file or GitHub URL [env: {RULES_PATH_ENV}].",
)
@click.option(
    "--github-token",
    envvar=GITHUB_TOKEN_ENV,
    help=f"Token for private GitHub repositories [env: {GITHUB_TOKEN_ENV}].",
)
@click.option(
    "--timeout",
    "fetch_timeout",
    envvar=FETCH_TIMEOUT_ENV,
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help=f"GitHub fetch timeout in seconds [env: {FETCH_TIMEOUT_ENV}].",
)
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="INFO",
    show_default=True,
)
@click.pass_context
def cli(
    ctx: click.Context,
    rules_path: Optional[str],
    github_token: Optional[str],
    fetch_timeout: Optional[float],
    log_level: str,
) -> None:
    """MCP server for categorized markdown rules."""
    configure_logging(log_level)
    ctx.obj = {
        "rules_path": rules_path,
        "github_token": github_token,
        "fetch_timeout": fetch_timeout,
    }

    if ctx.invoked_subcommand is None:
        ctx.invoke(serve)


@cli.command(help="Run the MCP server on stdio.")
@click.pass_obj
def serve(obj: dict) -> None:
    dispatcher = _dispatcher_from_obj(obj)
    logger.debug(
        "Serving rules from %s source %s",
        dispatcher.source.origin,
        dispatcher.source.location,
    )
    anyio.run(run_stdio, dispatcher)


@cli.command(help="Print parsed rules, optionally filtered by category.")
@click.option("--category", "-c", default=None, help="Category to filter by (case-insensitive).")
@_format_option()
@click.pass_obj
def rules(obj: dict, category: Optional[str], output_format: str) -> None:
    ui = RulesConsoleUI(Console())
    dispatcher = _dispatcher_from_obj(obj)
    try:
        selected = dispatcher.get_rules(category)
    except ContentSourceError as exc:
        raise click.ClickException(str(exc))

    fmt = OutputFormat(output_format.lower())
    if fmt == OutputFormat.TABLE:
        ui.render_rules(dispatcher.source, selected, category=category)
    else:
        ui.render_payload([rule.as_dict() for rule in selected], fmt)


@cli.command(help="Print distinct rule categories.")
@_format_option()
@click.pass_obj
def categories(obj: dict, output_format: str) -> None:
    ui = RulesConsoleUI(Console())
    dispatcher = _dispatcher_from_obj(obj)
    try:
        names = dispatcher.get_categories()
    except ContentSourceError as exc:
        raise click.ClickException(str(exc))

    fmt = OutputFormat(output_format.lower())
    if fmt == OutputFormat.TABLE:
        ui.render_categories(dispatcher.source, names)
    else:
        ui.render_payload(names, fmt)


def main() -> int:
    try:
        cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.ClickException as exc:
        exc.show()
        return 2
    except click.exceptions.Abort:
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
