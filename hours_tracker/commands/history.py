import click

from ..context import pass_tracker, HoursTrackerContext
from ..formatting import format_date
from . import echo_total


@click.option('--page', '-p', default=1, type=int, help='History page, newest dates first')
@click.command()
@pass_tracker
def history(tracker: HoursTrackerContext, page):
    session = tracker.session
    try:
        session.change_page(page)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--page')
    for date in session.history_page():
        echo_total(format_date(date), session.total_hours(date))
    paginator = session.paginator()
    hints = []
    if paginator.has_previous(page):
        hints.append(f'previous: --page {page - 1}')
    if paginator.has_next(page):
        hints.append(f'next: --page {page + 1}')
    click.echo(' '.join([f'Page {page} of {paginator.total_pages}'] + [f'({hint})' for hint in hints]))
