"""CLI entrypoint for restalign."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from . import __version__


def _configure_logging(verbose: bool) -> None:
    """Attach one RichHandler to the package logger, replacing any from an earlier run."""
    logger = logging.getLogger("restalign")
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group()
@click.version_option(__version__, prog_name="restalign")
@click.option("--verbose", is_flag=True, help="Log resolution details")
def cli(verbose: bool) -> None:
    """restalign - REST dependency alignment configuration.

    Resolve build properties into the settings and dependency constraints
    used when asking the alignment service for versions.
    """
    _configure_logging(verbose)


@cli.command()
@click.option(
    "--file",
    "-f",
    "property_file",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    default=None,
    help="TOML property file",
)
@click.option(
    "-D",
    "assignments",
    multiple=True,
    metavar="KEY=VALUE",
    help="Set a property (repeatable); overrides the property file",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def show(property_file: Path | None, assignments: tuple[str, ...], output_json: bool) -> None:
    """Resolve properties and show the REST alignment state.

    Examples:

        restalign show -D restURL=http://da.example.com/da/rest/v-1

        restalign show -f build.toml -D restDependencyRanks.org.foo="redhat;community"
    """
    from .commands.show import run_show

    exit_code = run_show(property_file, assignments, output_json)
    sys.exit(exit_code)


@cli.command()
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def properties(output_json: bool) -> None:
    """List recognized properties with their defaults."""
    from .commands.properties_cmd import run_properties

    exit_code = run_properties(output_json)
    sys.exit(exit_code)


def main() -> None:
    """Main entrypoint."""
    cli()


if __name__ == "__main__":
    main()
