import click

from ..context import pass_tracker, HoursTrackerContext
from ..formatting import format_date
from ..session import TrackerSession
from . import ISO_DATE, echo_entry, echo_total


def select_date(session: TrackerSession, date):
    if date:
        try:
            session.select_date(date)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint='--date')


def submit(session: TrackerSession):
    entry = session.submit()
    if entry is None:
        for message in (session.errors.time, session.errors.comment):
            if message:
                click.echo(message, err=True)
        raise click.exceptions.Exit(1)
    return entry


@click.option('--date', '-d', type=ISO_DATE, help='Date in YYYY-MM-DD format, today by default')
@click.option('--time', '-t', 'duration', required=True, prompt='Time spent (e.g. 1h 45m)')
@click.option('--comment', '-c', required=True, prompt='Comment')
@click.option('--ticket', '-r', default='', help='Ticket reference')
@click.command()
@pass_tracker
def add(tracker: HoursTrackerContext, date, duration, comment, ticket):
    session = tracker.session
    select_date(session, date)
    session.set_time(duration)
    session.set_comment(comment)
    session.set_ticket_ref(ticket)
    entry = submit(session)
    click.echo(f'logged {entry.time} on {entry.date} ({entry.timestamp})')


@click.argument('timestamp', type=int)
@click.option('--time', '-t', 'duration', help='New time spent')
@click.option('--comment', '-c', help='New comment')
@click.option('--ticket', '-r', help='New ticket reference')
@click.command()
@pass_tracker
def edit(tracker: HoursTrackerContext, timestamp, duration, comment, ticket):
    session = tracker.session
    if not session.start_edit(timestamp):
        click.echo(f'no entry {timestamp}')
        return
    if duration is not None:
        session.set_time(duration)
    if comment is not None:
        session.set_comment(comment)
    if ticket is not None:
        session.set_ticket_ref(ticket)
    entry = submit(session)
    click.echo(f'updated {entry.timestamp}')


@click.argument('timestamp', type=int)
@click.option('--yes', '-y', is_flag=True, help='Do not ask for confirmation')
@click.command()
@pass_tracker
def delete(tracker: HoursTrackerContext, timestamp, yes):
    session = tracker.session
    if session.store.get(timestamp) is None:
        click.echo(f'no entry {timestamp}')
        return

    def confirm():
        return yes or click.confirm('Are you sure you want to delete this entry?')

    if session.delete(timestamp, confirm):
        click.echo(f'deleted {timestamp}')


@click.option('--date', '-d', type=ISO_DATE, help='Date in YYYY-MM-DD format, today by default')
@click.command(name='list')
@pass_tracker
def list_entries(tracker: HoursTrackerContext, date):
    session = tracker.session
    select_date(session, date)
    click.echo(session.title)
    entries = session.entries()
    if not entries:
        click.echo('no entries')
    for entry in entries:
        echo_entry(entry)
    echo_total(f'Total Hours for {format_date(session.selected_date)}', session.total_hours())
