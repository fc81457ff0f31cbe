import datetime
import logging
import os
import typing
from dataclasses import dataclass, field

from .aggregation import group_by_date, total_hours
from .duration import parse_duration
from .formatting import format_date, format_hours, DATE_FORMAT
from .model.entry import TimeEntry
from .model.excel import XlsxWorkbookWriter, HEADER, TOTAL_LABEL, TOTAL_VALUE

LOGGER = logging.getLogger(__name__)

HEADER_ROW = ('Date', 'Time', 'Ticket Reference', 'Comment', 'Total Hours')
COLUMN_WIDTHS = (20, 15, 20, 50, 15)
TOTAL_LABEL_TEXT = 'TOTAL HOURS'
MISSING_TICKET = '-'


@dataclass
class Cell:
    value: str
    style: typing.Optional[str] = None


@dataclass
class SheetDescription:
    title: str
    rows: list[list[Cell]]
    column_widths: tuple[int, ...] = COLUMN_WIDTHS

    @property
    def values(self) -> list[list[str]]:
        return [[cell.value for cell in row] for row in self.rows]


@dataclass
class WorkbookDescription:
    filename: str
    sheets: list[SheetDescription] = field(default_factory=list)


def export_filename(today: datetime.date) -> str:
    return f'hours-tracker-{today.strftime(DATE_FORMAT)}.xlsx'


def build_sheet(date: str, entries: list[TimeEntry]) -> SheetDescription:
    rows = [[Cell(title, HEADER) for title in HEADER_ROW]]
    for entry in entries:
        rows.append([
            Cell(format_date(date)),
            Cell(entry.time),
            Cell(entry.ticket_ref or MISSING_TICKET),
            Cell(entry.comment),
            Cell(format_hours(parse_duration(entry.time))),
        ])
    rows.append([
        Cell(''),
        Cell(''),
        Cell(''),
        Cell(TOTAL_LABEL_TEXT, TOTAL_LABEL),
        Cell(format_hours(total_hours(entries, date)), TOTAL_VALUE),
    ])
    return SheetDescription(title=date, rows=rows)


def build_workbook(entries: typing.Iterable[TimeEntry], today: datetime.date) -> WorkbookDescription:
    """One sheet per date, dates in order of their first entry."""
    workbook = WorkbookDescription(export_filename(today))
    for date, date_entries in group_by_date(entries).items():
        workbook.sheets.append(build_sheet(date, date_entries))
    return workbook


def export(entries: typing.Iterable[TimeEntry], output_dir: str = '.', today: datetime.date = None) -> str:
    workbook = build_workbook(entries, today or datetime.date.today())
    os.makedirs(output_dir, exist_ok=True)
    path = os.path.join(output_dir, workbook.filename)
    with XlsxWorkbookWriter(path) as writer:
        for sheet in workbook.sheets:
            writer.write(sheet)
    LOGGER.info('exported %d sheets to %s', len(workbook.sheets), path)
    return path
