"""Shared pytest fixtures for TimeKeeper tests.

Fixtures:
    - excel_form: File form with an Excel source and a sheet chosen
    - csv_form: File form with a CSV source
    - workbook_path: Real .xlsx file with three sheets
    - clean_logging: Resets the timekeeper logger around a test
"""

from datetime import date
from pathlib import Path
from typing import Generator

import pytest

from src.core.config import Config
from src.core.logging import reset_logging
from src.models.file_form import DbBackend, FileFormModel, LogLevel


@pytest.fixture
def excel_form() -> FileFormModel:
    """Submittable form with an Excel source."""
    return FileFormModel(
        source_path="input.xlsx",
        database_path="app.db",
        log_directory="",
        db_backend=DbBackend.SQLITE,
        log_level=LogLevel.INFO,
        selected_sheet="Sheet1",
    )


@pytest.fixture
def csv_form() -> FileFormModel:
    """Submittable form with a CSV source."""
    return FileFormModel(source_path="input.csv", database_path="app.db")


@pytest.fixture
def workbook_path(tmp_path: Path) -> Path:
    """Create an .xlsx workbook with sheets Summary, Data, Notes."""
    import openpyxl

    wb = openpyxl.Workbook()
    wb.active.title = "Summary"
    wb.create_sheet("Data")
    wb.create_sheet("Notes")
    path = tmp_path / "book.xlsx"
    wb.save(str(path))
    return path


@pytest.fixture
def mock_config(tmp_path: Path) -> Config:
    """Test configuration pinned to a fixed reference date."""
    return Config(
        log_path=tmp_path / "logs",
        default_browse_dir=tmp_path,
        reference_date=date(2025, 11, 1),
    )


@pytest.fixture
def clean_logging() -> Generator[None, None, None]:
    """Allow setup_logging() to run and undo it afterwards."""
    reset_logging()
    yield
    reset_logging()
