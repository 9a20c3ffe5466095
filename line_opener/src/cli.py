"""
Command-line interface for line-opener.

Provides commands for reading line ranges, counting lines and locating line
offsets, plus configuration management.
"""

import sys

import click

from .config import ConfigManager
from .errors import LineOpenerError
from .formatter import format_lines
from .offsets import compute_offset, count_lines
from .opener import Opener
from ..utils.logger_setup import LoggerManager


@click.group()
@click.version_option(version="0.1.0")
@click.option('--log-level', default=None, help='Logging level (DEBUG, INFO, WARNING, ERROR)')
@click.option('--verbose', '-v', is_flag=True, help='Log to stderr')
@click.pass_context
def cli(ctx, log_level, verbose):
    """Line Opener - Read a range of lines from a file, forward or backward."""
    config = ConfigManager().load()
    LoggerManager.setup_logging(
        log_file=config.logging.log_file,
        level=log_level or config.logging.level,
        console=verbose or config.logging.console,
        force=True
    )
    ctx.obj = config


@cli.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.option('--position', '-p', default=None, help='Starting line: "start", "end" or a line number')
@click.option('--direction', '-d', default=None, help='"forward" or "backward"')
@click.option('--max-position', '-m', default=None, help='Stop after this line ("start", "end" or a line number)')
@click.option('--number', '-n', is_flag=True, help='Prefix lines with their line number')
@click.option('--encoding', default=None, help='Text encoding of the file')
@click.pass_obj
def read(config, path, position, direction, max_position, number, encoding):
    """Print a range of lines from PATH."""
    try:
        opener = Opener(
            path=path,
            position=position if position is not None else config.reading.position,
            direction=direction if direction is not None else config.reading.direction,
            max_position=max_position,
            encoding=encoding or config.reading.encoding,
            chunk_size=config.reading.chunk_size
        )
        extraction = opener.extract()

        numbered = number or config.output.number_lines
        for line in format_lines(extraction, numbered, config.output.number_separator):
            click.echo(line)

    except LineOpenerError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('path', type=click.Path(dir_okay=False))
def count(path):
    """Print the number of lines in PATH."""
    try:
        click.echo(count_lines(path))
    except LineOpenerError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument('path', type=click.Path(dir_okay=False))
@click.argument('line', type=click.IntRange(min=1))
def offset(path, line):
    """Print the byte offset at which LINE of PATH begins."""
    try:
        click.echo(compute_offset(path, line))
    except LineOpenerError as e:
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@cli.command()
@click.option('--overwrite', is_flag=True, help='Overwrite existing configuration')
def init(overwrite):
    """Initialize configuration in current directory."""
    config_manager = ConfigManager()

    if config_manager.init_config(overwrite=overwrite):
        click.echo("✓ Configuration initialized successfully")
        click.echo(f"  Config file: {config_manager.config_file}")
    else:
        click.echo("Configuration already exists. Use --overwrite to replace it.")

    errors = config_manager.validate(config_manager.load())
    if errors:
        click.echo("⚠ Configuration problems:")
        for error in errors:
            click.echo(f"  - {error}")


@cli.command()
def cleanup():
    """Remove configuration directory (.line-opener)."""
    config_manager = ConfigManager()

    if click.confirm("⚠️  This will delete the entire .line-opener directory. Continue?"):
        if config_manager.cleanup():
            click.echo("✓ Cleanup complete")
        else:
            click.echo(f"No configuration removed at: {config_manager.config_dir}")
            sys.exit(1)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
