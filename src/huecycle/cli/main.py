"""Main CLI entry point."""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import click

from huecycle import __version__
from huecycle.exceptions import HueCycleError
from huecycle.models import AppConfig

from .commands import color, config, cycle, tui

logger = logging.getLogger(__name__)

_FILE_HANDLER_NAME = "huecycle-file"
LOG_FILE_NAME = "huecycle.log"


def default_log_path(log_dir: Optional[Path] = None) -> Path:
    """Rotating log file inside `log_dir` (default ~/.huecycle/logs)."""
    return (log_dir or AppConfig().log_dir) / LOG_FILE_NAME


def setup_logging(
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str,
    log_dir: Optional[Path] = None,
) -> Path:
    """
    Configure logging for the application.

    Console and TUI output stay clean: all log records go to a rotating file.

    Args:
        verbose: Verbosity count (0 = WARNING, 1 = INFO, 2+ = DEBUG)
        debug: If True, enable debug mode with file logging in the current directory
        log_file: Custom log file path (optional)
        log_level: Log level for a custom log file (DEBUG/INFO/WARNING/ERROR)
        log_dir: Directory for the default log file (from AppConfig.log_dir)

    Returns:
        Path of the log file in use
    """
    if debug or verbose >= 2:
        level = logging.DEBUG
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    if log_file and not debug:
        level = getattr(logging, log_level.upper())

    if debug and not log_file:
        log_path = Path.cwd() / "huecycle-debug.log"
    elif log_file:
        log_path = log_file
    else:
        log_path = default_log_path(log_dir)

    log_path.parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    # Keeps last 5 files, max 10MB each
    file_handler = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=10 * 1024 * 1024,
        backupCount=5
    )
    file_handler.set_name(_FILE_HANDLER_NAME)
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if handler.get_name() == _FILE_HANDLER_NAME:
            root_logger.removeHandler(handler)
            handler.close()
    root_logger.setLevel(level)
    root_logger.addHandler(file_handler)

    logger.info(f"Logging configured: level={logging.getLevelName(level)}, file={log_path}")
    return log_path


def _configured_log_dir(config_path: Optional[Path]) -> Optional[Path]:
    """
    Read `log_dir` from the config file before logging exists.

    A broken config file yields None here; the command that loads the
    config reports it once logging is set up.
    """
    try:
        return AppConfig.load_or_default(config_path).log_dir
    except (HueCycleError, OSError):
        return None


@click.group()
@click.version_option(version=__version__, prog_name="huecycle")
@click.option(
    '--config',
    'config_path',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Config file to use (default: ~/.huecycle/config.json)'
)
@click.option(
    '-v', '--verbose',
    count=True,
    help='Increase verbosity (-v: INFO, -vv: DEBUG)'
)
@click.option(
    '--debug',
    is_flag=True,
    help='Enable debug mode (DEBUG level, logs to ./huecycle-debug.log)'
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Custom log file path'
)
@click.option(
    '--log-level',
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    default='INFO',
    help='Log level for --log-file (default: INFO)'
)
@click.pass_context
def cli(
    ctx,
    config_path: Optional[Path],
    verbose: int,
    debug: bool,
    log_file: Optional[Path],
    log_level: str
):
    """
    huecycle - cycle a surface through unique background colors.

    Every session shows a sequence of random colors with no repeats,
    optionally labelled with their hex value in a readable contrast color.

    \b
    Examples:
      # Ten colors in the terminal, one per second
      huecycle cycle

    \b
      # Full-screen with labels
      huecycle tui --label

    \b
      # Inspect a color
      huecycle color '#00abff'

    \b
      # Enable debug logging
      huecycle --debug cycle
    """
    ctx.ensure_object(dict)
    ctx.obj['config_path'] = config_path
    ctx.obj['log_path'] = setup_logging(
        verbose, debug, log_file, log_level, log_dir=_configured_log_dir(config_path)
    )


cli.add_command(cycle)
cli.add_command(tui)
cli.add_command(color)
cli.add_command(config)

if __name__ == "__main__":
    cli()
