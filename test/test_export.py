"""
Tests for the spreadsheet export.
"""

import datetime

import pytest
from openpyxl import load_workbook

from hours_tracker.export import HEADER_ROW, build_workbook, export, export_filename
from hours_tracker.formatting import format_date
from hours_tracker.model.entry import TimeEntry


def make_entry(date, time, comment="work", ticket_ref="", timestamp=0):
    return TimeEntry(time=time, comment=comment, ticket_ref=ticket_ref, timestamp=timestamp, date=date)


TODAY = datetime.date(2024, 1, 10)


@pytest.mark.unit
def test_export_filename():
    assert export_filename(TODAY) == "hours-tracker-2024-01-10.xlsx"


@pytest.mark.unit
def test_sheet_layout():
    entries = [
        make_entry("2024-01-01", "1h 45m", "review", "ABC-1", 1),
        make_entry("2024-01-01", "20m", "standup", "", 2),
    ]

    [sheet] = build_workbook(entries, TODAY).sheets

    assert sheet.title == "2024-01-01"
    assert sheet.values == [
        list(HEADER_ROW),
        [format_date("2024-01-01"), "1h 45m", "ABC-1", "review", "1.75"],
        [format_date("2024-01-01"), "20m", "-", "standup", "0.33"],
        ["", "", "", "TOTAL HOURS", "2.08"],
    ]


@pytest.mark.unit
def test_sheet_styles_header_and_totals():
    [sheet] = build_workbook([make_entry("2024-01-01", "1h")], TODAY).sheets

    assert {cell.style for cell in sheet.rows[0]} == {"header"}
    assert [cell.style for cell in sheet.rows[1]] == [None] * 5
    assert [cell.style for cell in sheet.rows[-1]] == [None, None, None, "total-label", "total-value"]
    assert sheet.column_widths == (20, 15, 20, 50, 15)


@pytest.mark.unit
def test_one_sheet_per_date_in_first_occurrence_order():
    entries = [
        make_entry("2024-01-02", "1h"),
        make_entry("2024-01-01", "1h"),
        make_entry("2024-01-02", "1h"),
    ]

    workbook = build_workbook(entries, TODAY)

    assert [sheet.title for sheet in workbook.sheets] == ["2024-01-02", "2024-01-01"]
    assert len(workbook.sheets[0].rows) == 4
    assert len(workbook.sheets[1].rows) == 3


@pytest.mark.integration
def test_export_writes_xlsx(tmp_path):
    entries = [
        make_entry("2024-01-01", "1h", "a", "T-1"),
        make_entry("2024-01-02", "30m", "b"),
    ]

    path = export(entries, str(tmp_path / "out"), today=TODAY)

    assert path.endswith("hours-tracker-2024-01-10.xlsx")
    workbook = load_workbook(path)
    assert workbook.sheetnames == ["2024-01-01", "2024-01-02"]

    sheet = workbook["2024-01-02"]
    assert [cell.value for cell in sheet[1]] == list(HEADER_ROW)
    assert [cell.value for cell in sheet[2]] == [format_date("2024-01-02"), "30m", "-", "b", "0.50"]
    assert sheet["D3"].value == "TOTAL HOURS"
    assert sheet["E3"].value == "0.50"
    assert sheet["A3"].value is None
    assert sheet["A1"].font.bold
    assert sheet["D3"].font.bold
    assert sheet.column_dimensions["D"].width == 50
