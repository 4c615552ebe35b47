"""TUI command - runs a color session full-screen with Textual."""

import logging
from typing import Optional

import click

from ..options import build_cycle_config, cycle_options, load_app_config

logger = logging.getLogger(__name__)


@click.command()
@cycle_options
@click.pass_context
def tui(
    ctx,
    cycles: Optional[int],
    interval: Optional[float],
    label: Optional[bool],
    max_retries: Optional[int],
    seed: Optional[int],
):
    """
    Cycle colors full-screen in a Textual app.

    \b
    Keys:
      r      restart with a fresh history
      space  pause / resume
      q      quit
    """
    # Lazy import to keep textual off the path of the other commands
    from huecycle.tui import HueCycleApp

    app_config = load_app_config(ctx)
    cycle_config = build_cycle_config(app_config.cycle, cycles, interval, label, max_retries, seed)

    logger.info("Starting huecycle TUI")
    HueCycleApp(cycle_config).run()
