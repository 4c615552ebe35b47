"""Color command - inspect a single color."""

import click

from huecycle.colors import channels_of
from huecycle.exceptions import MalformedColorError
from huecycle.models import Color
from huecycle.surfaces import ConsoleSurface


@click.command()
@click.argument('value', nargs=-1, required=True)
@click.option('--json', 'as_json', is_flag=True, help='Print the color as JSON')
def color(value: tuple[str, ...], as_json: bool):
    """
    Show a color's hex value, channels and label color.

    VALUE is either a hex color or three channel values.

    \b
    Examples:
      huecycle color '#00abff'
      huecycle color 0 171 255
    """
    try:
        if len(value) == 1:
            result = Color.from_hex(value[0])
        elif len(value) == 3:
            try:
                channels = [int(v) for v in value]
            except ValueError as e:
                raise MalformedColorError(list(value), "channels must be integers") from e
            red, green, blue = channels_of(channels)
            result = Color(red=red, green=green, blue=blue)
        else:
            raise click.UsageError("Give either one hex color or three channel values")
    except MalformedColorError as e:
        raise click.BadParameter(e.user_message, param_hint="VALUE") from e

    if as_json:
        click.echo(result.model_dump_json(indent=2))
        return

    swatch = ConsoleSurface(width=24)
    swatch.set_background(result.hex)
    swatch.set_label(result.hex, result.label)
    swatch.render()

    click.echo(f"hex:   {result.hex}")
    click.echo(f"rgb:   {result.red}, {result.green}, {result.blue}")
    click.echo(f"label: {result.label}")
