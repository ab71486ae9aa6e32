# src/catchdisc/cli/discover_cmds.py

import asyncio
import json
from pathlib import Path

import attrs
import click
import structlog

from catchdisc.cli.utils import build_settings, logging_options, setup_logging_from_context
from catchdisc.discovery import DiscoveryEngine
from catchdisc.exceptions import ConfigurationError
from catchdisc.models import LoggingLevel, TestCase
from catchdisc.telemetry import StructLogger

log: StructLogger = structlog.get_logger("cli.discover")

VERBOSITY_CHOICES = click.Choice([level.name.lower() for level in LoggingLevel], case_sensitive=False)


def format_testcase(testcase: TestCase) -> str:
    line = testcase.name
    if testcase.tags:
        line += " " + "".join(f"[{tag}]" for tag in testcase.tags)
    if testcase.filename:
        location = testcase.filename if testcase.line is None else f"{testcase.filename}:{testcase.line}"
        line += f" ({location})"
    return line


@click.command(name="discover")
@click.argument(
    "sources",
    nargs=-1,
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "-c",
    "--config-path",
    type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    envvar="CATCHDISC_CONF",
    show_envvar=True,
    help="TOML file with a [discovery] table.",
)
@click.option("--commandline", default=None, help="Arguments that make the executable list its tests.")
@click.option("--timeout", type=click.IntRange(min=0), default=None, help="Discovery timeout in ms (0 waits forever).")
@click.option("--filter", "filename_filter", default=None, help="Regex the executable's file stem must match.")
@click.option("--xml/--no-xml", "use_xml_discovery", default=None, help="Parse the output as an XML report.")
@click.option("--name-only", "name_only_discovery", is_flag=True, default=None, help="Output is a bare list of names.")
@click.option("--include-hidden/--exclude-hidden", default=None, help="Report hidden test cases.")
@click.option("--verbosity", type=VERBOSITY_CHOICES, default=None, help="Detail of the discovery log.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print test cases as JSON.")
@logging_options
@click.pass_context
def discover_cli(
    ctx: click.Context,
    sources: tuple[Path, ...],
    config_path: Path | None,
    commandline: str | None,
    timeout: int | None,
    filename_filter: str | None,
    use_xml_discovery: bool | None,
    name_only_discovery: bool | None,
    include_hidden: bool | None,
    verbosity: str | None,
    as_json: bool,
    **kwargs,
):
    """List the test cases exposed by one or more test executables."""
    setup_logging_from_context(
        ctx,
        local_log_level=kwargs.get("log_level"),
        local_log_file=kwargs.get("log_file"),
        local_json_logs=kwargs.get("json_logs"),
    )

    try:
        settings = build_settings(
            config_path,
            {
                "discover_commandline": commandline,
                "discover_timeout": timeout,
                "filename_filter": filename_filter,
                "use_xml_discovery": use_xml_discovery,
                "name_only_discovery": name_only_discovery,
                "include_hidden": include_hidden,
                "logging_level": verbosity,
            },
        )
    except ConfigurationError as e:
        log.error("Invalid discovery settings", error=str(e))
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    log.info("Executing 'discover' command", sources=len(sources))
    engine = DiscoveryEngine(settings)
    result = asyncio.run(engine.get_tests(sources))

    if as_json:
        click.echo(json.dumps([attrs.asdict(testcase) for testcase in result.tests], indent=2))
    else:
        for testcase in result.tests:
            click.echo(format_testcase(testcase))

    if result.log:
        click.echo(result.log, err=True, nl=False)
