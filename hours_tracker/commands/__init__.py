import click
import dateutil.parser

from ..formatting import DATE_FORMAT, format_hours


class IsoDate(click.ParamType):
    name = 'date'

    def convert(self, value, param, ctx):
        try:
            date = dateutil.parser.isoparse(value).strftime(DATE_FORMAT)
        except ValueError:
            date = None
        # isoparse also takes reduced forms like 2024-01 or 20240105
        if date != value:
            self.fail(f'{value!r} is not a YYYY-MM-DD date', param, ctx)


ISO_DATE = IsoDate()


def echo_entry(entry):
    ticket = f' [{entry.ticket_ref}]' if entry.ticket_ref else ''
    click.echo(f'{entry.timestamp}  {entry.time:<12} {entry.comment}{ticket}')


def echo_total(title, hours):
    click.echo(f'{title}: {format_hours(hours)} hours')
