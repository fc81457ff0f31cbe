import datetime

DATE_FORMAT = '%Y-%m-%d'


def parse_date(date_str: str) -> datetime.date:
    return datetime.datetime.strptime(date_str, DATE_FORMAT).date()


def today() -> str:
    return datetime.date.today().strftime(DATE_FORMAT)


def format_date(date_str: str) -> str:
    """Long form of a ``YYYY-MM-DD`` date, e.g. ``Monday, January 1, 2024``.

    Day and month names follow the process locale.
    """
    date = parse_date(date_str)
    return f'{date:%A}, {date:%B} {date.day}, {date.year}'


def format_hours(hours: float) -> str:
    return f'{hours:.2f}'


def format_title_date(date_str: str, current: str = None) -> str:
    if date_str == (current or today()):
        return "Today's Entries"
    return f'Entries for {format_date(date_str)}'
