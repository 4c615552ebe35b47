"""Cycle command - runs a color session in the terminal."""

import logging
from typing import Optional

import click

from huecycle.core import CycleSession
from huecycle.exceptions import ErrorContext, HueCycleError
from huecycle.surfaces import ConsoleSurface

from ..options import build_cycle_config, cycle_options, exit_with_error, load_app_config

logger = logging.getLogger(__name__)


@click.command()
@cycle_options
@click.option(
    '--width',
    '-w',
    type=click.IntRange(min=8),
    default=40,
    help='Swatch width in characters (default: 40)'
)
@click.pass_context
def cycle(
    ctx,
    cycles: Optional[int],
    interval: Optional[float],
    label: Optional[bool],
    max_retries: Optional[int],
    seed: Optional[int],
    width: int,
):
    """
    Cycle through unique colors in the terminal.

    Prints one colored swatch per interval. No color repeats within a session.

    \b
    Examples:
      # Ten colors, one per second
      huecycle cycle

    \b
      # Twenty labelled colors, twice per second
      huecycle cycle -n 20 -i 0.5 --label

    \b
      # Same sequence every time
      huecycle cycle --seed 42
    """
    app_config = load_app_config(ctx)
    cycle_config = build_cycle_config(app_config.cycle, cycles, interval, label, max_retries, seed)

    session = CycleSession(surface=ConsoleSurface(width=width), config=cycle_config)

    try:
        with ErrorContext("run color session", logger_instance=logger):
            session.run()
    except KeyboardInterrupt:
        logger.info("Session interrupted by user")
        click.echo("\nStopped.", err=True)
    except HueCycleError as e:
        exit_with_error(ctx, e)
