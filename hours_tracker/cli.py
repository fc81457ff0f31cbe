import logging
import os

import click
from yaml import load
try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader

from .commands import entries, history, export
from .context import HoursTrackerContext


class ClickEchoHandler(logging.Handler):

    def emit(self, record):
        click.echo(self.format(record), err=True)


def setup_logging(verbose: bool):
    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
    root = logging.getLogger('hours_tracker')
    if not root.handlers:
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group(context_settings={'auto_envvar_prefix': 'HOURS_TRACKER'})
@click.option('--config', default='config.yaml', type=click.Path(dir_okay=False))
@click.option('--verbose', '-v', is_flag=True, help='Log debug messages to stderr')
@click.pass_context
def entry_point(ctx, config, verbose):
    setup_logging(verbose)
    settings = {}
    if os.path.exists(config):
        with open(config, 'r') as f:
            settings = load(f.read(), Loader=Loader) or {}
        if not isinstance(settings, dict):
            raise click.BadParameter('expected a mapping of settings', param_hint='--config')
        ctx.default_map = settings
    try:
        ctx.obj = HoursTrackerContext(settings)
    except ValueError as e:
        raise click.BadParameter(f'{config}: {e}', param_hint='--config')


entry_point.add_command(entries.add)
entry_point.add_command(entries.edit)
entry_point.add_command(entries.delete)
entry_point.add_command(entries.list_entries)
entry_point.add_command(history.history)
entry_point.add_command(export.export)


if __name__ == '__main__':
    entry_point()
