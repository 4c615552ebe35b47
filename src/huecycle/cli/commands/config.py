"""Config commands - show, locate and reset the configuration file."""

import click

from huecycle.exceptions import HueCycleError
from huecycle.models import AppConfig

from ..options import exit_with_error, load_app_config


def _config_path(ctx: click.Context):
    return ctx.obj.get('config_path') or AppConfig.default_path()


@click.group()
def config():
    """Manage huecycle settings."""
    pass


@config.command()
@click.pass_context
def show(ctx):
    """Print the effective configuration as JSON."""
    app_config = load_app_config(ctx)
    click.echo(app_config.model_dump_json(indent=2))


@config.command()
@click.pass_context
def path(ctx):
    """Print the configuration file location."""
    config_path = _config_path(ctx)
    status = "exists" if config_path.exists() else "not created yet"
    click.echo(f"{config_path} ({status})")


@config.command()
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.pass_context
def reset(ctx, yes: bool):
    """Overwrite the configuration file with defaults."""
    config_path = _config_path(ctx)

    if not yes and config_path.exists():
        click.confirm(f"Reset {config_path} to defaults?", abort=True)

    try:
        AppConfig().save(config_path)
    except (HueCycleError, OSError) as e:
        exit_with_error(ctx, e)

    click.echo(f"Configuration reset: {config_path}")
