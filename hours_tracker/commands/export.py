import click

from ..context import pass_tracker, HoursTrackerContext


@click.option('--output', '-o', help='Export output directory', type=click.Path(file_okay=False, dir_okay=True))
@click.command()
@pass_tracker
def export(tracker: HoursTrackerContext, output):
    session = tracker.session
    if not session.store.query_all():
        click.echo('no entries to export')
        return
    path = session.export(output or tracker.export_dir)
    click.echo(f'exported to {path}')
