"""
ElfHead CLI -- ELF Header Inspector
====================================

Click-based command-line interface that decodes and prints the ELF file
header of a single relocatable object.

Usage::

    # Pretty-print the header
    elfhead main.o

    # Machine-readable output
    elfhead main.o --json

    # Also write a JSON report
    elfhead main.o --output main.o.json

    # Debug logging
    elfhead main.o --verbose

Every failure (bad arguments, unreadable file, undecodable header) ends
the process with exit code 1 and a message on standard error.

References:
    - Click documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
import tomllib

import click

from shared.config import ElfHeadConfig
from shared.console import ElfHeadConsole
from shared.logger import ElfHeadLogger

from elfhead.core.engine import ElfHeadEngine
from elfhead.core.errors import DecodeError, ElfHeadError, UsageError
from elfhead.output.console import ElfHeadConsoleOutput
from elfhead.output.report import ElfHeadReportGenerator


EXIT_FAILURE: int = 1


class _ElfHeadCommand(click.Command):
    """Click command whose argument errors exit with status 1."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = EXIT_FAILURE
            raise


def _load_config(config_path: str | None, err: ElfHeadConsole) -> ElfHeadConfig:
    if config_path is None:
        try:
            return ElfHeadConfig.load()
        except (OSError, tomllib.TOMLDecodeError):
            return ElfHeadConfig()
    try:
        return ElfHeadConfig.load(config_path)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        err.error(f"Cannot load configuration: {exc}")
        sys.exit(EXIT_FAILURE)


# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------

@click.command("elfhead", cls=_ElfHeadCommand)
@click.argument("path", type=click.Path())
@click.option(
    "--json", "json_output",
    is_flag=True,
    default=False,
    help="Print the decoded header as JSON instead of tables.",
)
@click.option(
    "--output", "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Also write a JSON report to this path.",
)
@click.option(
    "--config", "-c",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="TOML configuration file (default: config.toml in the project root).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging on stderr.",
)
def elfhead_cli(
    path: str,
    json_output: bool,
    output_path: str | None,
    config_path: str | None,
    verbose: bool,
) -> None:
    """ElfHead -- decode the ELF header of a relocatable object.

    PATH is the object file to inspect; its name must end in ``.o``
    (configurable through ``inspect.required_extension``).

    Examples:

    \b
        elfhead hello.o
        elfhead hello.o --json
    """
    err = ElfHeadConsole(stderr=True)
    config = _load_config(config_path, err)
    settings = config.global_settings

    log_level = "DEBUG" if verbose else settings.log_level
    logger = ElfHeadLogger(
        "cli",
        log_level=log_level,
        log_file=settings.log_file,
        json_logs=settings.log_json,
        capture=("elfhead.parsers",),
    )

    try:
        extension = config.inspect.required_extension
        if not path.endswith(extension):
            raise UsageError(f"Object file name must end with `{extension}`: {path}")

        engine = ElfHeadEngine(config=config, logger=logger)
        report = engine.inspect(path)
    except KeyboardInterrupt:
        err.warning("Interrupted by user.")
        sys.exit(130)
    except DecodeError as exc:
        err.error(f"{type(exc).__name__}: {exc}")
        sys.exit(EXIT_FAILURE)
    except ElfHeadError as exc:
        logger.debug("Aborting: %s", exc)
        err.error(str(exc))
        sys.exit(EXIT_FAILURE)

    report_gen = ElfHeadReportGenerator(
        indent=config.inspect.report_indent,
        version=settings.version,
    )

    if json_output:
        click.echo(report_gen.to_json(report))
    else:
        ElfHeadConsoleOutput(console=ElfHeadConsole()).display(report)

    if output_path:
        try:
            saved = report_gen.generate_json(report, output_path)
        except OSError as exc:
            err.error(f"Cannot write report {output_path}: {exc}")
            sys.exit(EXIT_FAILURE)
        logger.info("JSON report saved: %s", saved)


# ---------------------------------------------------------------------------
# Module entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Entry point for the ``elfhead`` script and ``python -m elfhead``."""
    elfhead_cli()


if __name__ == "__main__":
    main()
