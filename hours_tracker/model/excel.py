import typing

from openpyxl.styles import Font, PatternFill, Alignment
from openpyxl.utils import get_column_letter
from openpyxl.workbook import Workbook

HEADER = 'header'
TOTAL_LABEL = 'total-label'
TOTAL_VALUE = 'total-value'


class CellStyle:

    def __init__(self, font: Font = None, fill: PatternFill = None, alignment: Alignment = None):
        self.font = font
        self.fill = fill
        self.alignment = alignment

    def apply(self, cell):
        if self.font:
            cell.font = self.font
        if self.fill:
            cell.fill = self.fill
        if self.alignment:
            cell.alignment = self.alignment


_white_bold = Font(color='FFFFFFFF', bold=True)

STYLES = {
    HEADER: CellStyle(_white_bold, PatternFill('solid', fgColor='FF4A90E2'), Alignment(horizontal='center')),
    TOTAL_LABEL: CellStyle(_white_bold, PatternFill('solid', fgColor='FF2ECC71'), Alignment(horizontal='right')),
    TOTAL_VALUE: CellStyle(_white_bold, PatternFill('solid', fgColor='FF2ECC71'), Alignment(horizontal='center')),
}


class BaseSheet:

    _title = ''
    _columns_width = None

    def __init__(self, sheet, title=None, column_width: typing.Mapping[str, int] = None):
        self._sheet = sheet
        if title:
            self._title = title
        sheet.title = self._title
        if column_width:
            self._columns_width = column_width
        for column, width in (self._columns_width or {}).items():
            sheet.column_dimensions[column].width = width

    def set_value(self, cell, value, style: str = None):
        self._sheet[cell] = value
        if style:
            STYLES[style].apply(self[cell])

    def __getitem__(self, item):
        return self._sheet[item]


class DaySheet(BaseSheet):
    """One exported day: rows of ``(value, style)`` cells laid out from ``A1``."""

    def __init__(self, sheet, description, **kwargs):
        widths = {get_column_letter(idx + 1): width for idx, width in enumerate(description.column_widths)}
        super().__init__(sheet, title=description.title, column_width=widths, **kwargs)
        for row_idx, row in enumerate(description.rows):
            for col_idx, cell in enumerate(row):
                if cell.value == '' and not cell.style:
                    continue
                self.set_value(f'{get_column_letter(col_idx + 1)}{row_idx + 1}', cell.value, cell.style)


class XlsxWorkbookWriter:

    def __init__(self, path):
        self._path = path
        self._sheets = []

    def __enter__(self):
        self._workbook = Workbook()
        return self

    def write(self, description) -> DaySheet:
        sheet = self._workbook.active if not self._sheets else self._workbook.create_sheet()
        day_sheet = DaySheet(sheet, description)
        self._sheets.append(day_sheet)
        return day_sheet

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self._workbook.save(filename=self._path)
