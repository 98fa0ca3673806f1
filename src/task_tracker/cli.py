"""Command-line interface for the task tracker."""

import logging
import sys
from pathlib import Path

import click

from .config import ConfigModel, get_config, load_config
from .errors import StorageError, TaskTrackerError
from .session import Session
from .ui import Ui


logger = logging.getLogger(__name__)


def setup_logging(config: ConfigModel, verbose: bool = False) -> None:
    """Send log records to the log file so the console stays readable."""
    level = logging.DEBUG if verbose else getattr(logging, str(config.log_level).upper(), logging.INFO)
    logging.basicConfig(
        filename=str(config.get_log_path()),
        encoding="utf-8",
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )


def _open_session(ctx) -> Session:
    config = ctx.obj["config"]
    try:
        return Session(config)
    except StorageError as e:
        Ui(boxed=False, no_color=config.no_color).show_error(e.message)
        sys.exit(1)


@click.group(invoke_without_command=True)
@click.option("--config", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose logging")
@click.pass_context
def main(ctx, config, verbose):
    """Task Tracker - manage to-dos, deadlines and events from the terminal.

    Without a subcommand, starts the interactive prompt.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except OSError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)

    ctx.obj["config"] = cfg
    setup_logging(cfg, verbose)
    logger.debug("Using data directory %s", cfg.data_dir)

    if ctx.invoked_subcommand is None:
        _open_session(ctx).run()


@main.command(context_settings={"ignore_unknown_options": True})
@click.argument("words", nargs=-1, required=True)
@click.pass_context
def run(ctx, words):
    """Run a single command, e.g. `task-tracker run todo read book`."""
    session = _open_session(ctx)
    line = " ".join(words)
    try:
        session.execute(line)
    except TaskTrackerError as e:
        logger.info("Command %r failed: %s", line, e.message)
        session.ui.show_error(e.message, e.suggestions)
        sys.exit(1)


@main.command("config-show")
@click.pass_context
def config_show(ctx):
    """Show the effective configuration as YAML."""
    click.echo(ctx.obj["config"].to_yaml(), nl=False)


if __name__ == "__main__":
    main()
