"""Options and helpers shared by CLI commands."""

import logging
from pathlib import Path
from typing import Callable, Optional

import click

from huecycle.exceptions import HueCycleError, format_error_for_display
from huecycle.models import AppConfig, CycleConfig

logger = logging.getLogger(__name__)


def cycle_options(func: Callable) -> Callable:
    """Add the session options (--cycles, --interval, ...) to a command."""
    options = [
        click.option(
            '--cycles',
            '-n',
            type=click.IntRange(min=1),
            default=None,
            help='Number of colors to show (default: from config, 10)'
        ),
        click.option(
            '--interval',
            '-i',
            type=click.FloatRange(min=0, min_open=True),
            default=None,
            help='Seconds between colors (default: from config, 1.0)'
        ),
        click.option(
            '--label/--no-label',
            default=None,
            help='Show the hex value as a label (default: from config, off)'
        ),
        click.option(
            '--max-retries',
            type=click.IntRange(min=1),
            default=None,
            help='Give up after N duplicate draws in a row (default: unbounded)'
        ),
        click.option(
            '--seed',
            type=int,
            default=None,
            help='Random seed for a reproducible color sequence'
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_cycle_config(
    base: CycleConfig,
    cycles: Optional[int],
    interval: Optional[float],
    label: Optional[bool],
    max_retries: Optional[int],
    seed: Optional[int],
) -> CycleConfig:
    """Overlay command-line values on the configured defaults."""
    overrides = {
        'cycles': cycles,
        'interval': interval,
        'include_label': label,
        'max_retries': max_retries,
        'seed': seed,
    }
    update = {key: value for key, value in overrides.items() if value is not None}
    return CycleConfig.model_validate({**base.model_dump(), **update})


def load_app_config(ctx: click.Context) -> AppConfig:
    """Load the config file named on the root command (or the default one)."""
    try:
        return AppConfig.load_or_default(ctx.obj.get('config_path'))
    except (HueCycleError, OSError) as e:
        exit_with_error(ctx, e)


def exit_with_error(ctx: click.Context, error: Exception) -> None:
    """Show a clean error message with recovery hint and exit with status 1."""
    logger.error(f"Command failed: {error}")

    user_message, recovery_hint = format_error_for_display(error)

    click.echo("\n" + "=" * 70, err=True)
    click.echo(f"ERROR: {user_message}", err=True)
    click.echo("=" * 70, err=True)

    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)

    log_path: Optional[Path] = ctx.obj.get('log_path') if ctx.obj else None
    if log_path:
        click.echo(f"\nFor details, check the log file: {log_path}", err=True)

    ctx.exit(1)
