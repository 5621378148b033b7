"""File selection form model for TimeKeeper.

Snapshot of the "Convert Files" form: source file, database file, log
folder, dropdown choices and checkboxes. Built fresh from the widget
values every time the host needs to classify or submit, then discarded.

This module defines:
    - Enumerations for the two dropdowns, each value doubling as its label
    - Extension-based classification of source and database paths
    - FileFormModel with accumulate-all submission validation

Usage:
    from src.models.file_form import FileFormModel

    model = FileFormModel.from_fields(source, database, log_dir, backend, level, sheet)
    errors = model.validate_for_submit()
    if errors:
        show_errors(errors)
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import PurePath
from typing import Optional

from src.core.exceptions import ValidationError

# =============================================================================
# ENUMERATIONS
# =============================================================================


class _LabeledEnum(str, Enum):
    """Enum whose values are the exact labels shown in a dropdown."""

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: Optional[str]):
        """Exact, case-sensitive lookup. Unknown labels return None."""
        if label is None:
            return None
        for member in cls:
            if member.value == label:
                return member
        return None

    @classmethod
    def labels(cls) -> list[str]:
        """Dropdown options in table order."""
        return [member.value for member in cls]


class DbBackend(_LabeledEnum):
    """Database backend offered in the "DB Backend" dropdown."""

    SQLITE = "SQLite"
    MYSQL = "MySQL"
    DB2 = "DB2"
    POSTGRESQL = "Postgresql"
    MARIADB = "MariaDB"
    MSSQL = "MSSQL"
    REDIS = "Redis"
    AWS = "AWS"
    AZURE = "Azure"
    GOOGLE_CLOUD = "Google Cloud"
    APACHE = "Apache"

    @classmethod
    def default(cls) -> "DbBackend":
        return cls.SQLITE


class LogLevel(_LabeledEnum):
    """Log level offered in the "Log Level" dropdown."""

    ERROR = "ERROR"
    WARN = "WARN"
    INFO = "INFO"
    DEBUG = "DEBUG"
    TRACE = "TRACE"

    @classmethod
    def default(cls) -> "LogLevel":
        return cls.INFO


class SourceKind(str, Enum):
    """Content type of the source file."""

    EXCEL = "excel"
    CSV = "csv"
    OTHER = "other"


class DatabaseKind(str, Enum):
    """Content type of the database file."""

    SQLITE = "sqlite"
    OTHER = "other"


EXCEL_EXTENSIONS = frozenset({"xlsx", "xlsm", "xlsb", "xls"})
CSV_EXTENSIONS = frozenset({"csv"})
# sqlite3 is not in this list; the picker filter never offered it.
SQLITE_EXTENSIONS = frozenset({"db", "db3", "sqlite"})

# File picker filters: (name, extensions)
SOURCE_FILTERS: list[tuple[str, list[str]]] = [
    ("Excel", ["xlsx", "xlsm"]),
    ("CSV", ["csv"]),
]
DATABASE_FILTERS: list[tuple[str, list[str]]] = [
    ("SQLite", ["db", "db3", "sqlite"]),
]

# =============================================================================
# CLASSIFICATION
# =============================================================================


def _extension(path: Optional[str]) -> str:
    """Lowercase extension without the dot, or "" when there is none."""
    if not path:
        return ""
    return PurePath(path.strip()).suffix.lstrip(".").lower()


def classify_source(path: Optional[str]) -> SourceKind:
    """Classify a source path by extension.

    "report.XLSX" -> EXCEL, "data.csv" -> CSV, anything else -> OTHER.
    """
    ext = _extension(path)
    if ext in EXCEL_EXTENSIONS:
        return SourceKind.EXCEL
    if ext in CSV_EXTENSIONS:
        return SourceKind.CSV
    return SourceKind.OTHER


def classify_database(path: Optional[str]) -> DatabaseKind:
    """Classify a database path by extension.

    "app.db" -> SQLITE, "main.sqlite3" -> OTHER.
    """
    if _extension(path) in SQLITE_EXTENSIONS:
        return DatabaseKind.SQLITE
    return DatabaseKind.OTHER


def file_dialog_filters() -> dict[str, list[tuple[str, list[str]]]]:
    """Filter tables for the host's source and database pickers."""
    return {
        "source": [(name, list(exts)) for name, exts in SOURCE_FILTERS],
        "database": [(name, list(exts)) for name, exts in DATABASE_FILTERS],
    }


# =============================================================================
# FORM MODEL
# =============================================================================


@dataclass
class FileFormModel:
    """Values collected from the file selection form.

    Attributes:
        source_path: Spreadsheet or CSV to convert (may be empty)
        database_path: Target database file (may be empty)
        log_directory: Folder for log files; empty disables file logging
        db_backend: Selected database backend
        log_level: Selected log level
        selected_sheet: Chosen worksheet, only meaningful for Excel sources
        log_to_stdout: "Log to stdout" checkbox
        has_headers: "Input Has Headers" checkbox
    """

    source_path: str = ""
    database_path: str = ""
    log_directory: str = ""
    db_backend: DbBackend = DbBackend.SQLITE
    log_level: LogLevel = LogLevel.INFO
    selected_sheet: Optional[str] = None
    log_to_stdout: bool = False
    has_headers: bool = True

    @classmethod
    def from_fields(
        cls,
        source_path: Optional[str] = "",
        database_path: Optional[str] = "",
        log_directory: Optional[str] = "",
        db_backend: Optional[str] = None,
        log_level: Optional[str] = None,
        selected_sheet: Optional[str] = None,
        log_to_stdout: bool = False,
        has_headers: bool = True,
    ) -> "FileFormModel":
        """Build a snapshot from raw widget values.

        Paths are trimmed. Dropdown labels that don't match a known label
        fall back to the default choice. A blank sheet becomes None.
        """
        sheet = selected_sheet.strip() if selected_sheet else ""
        return cls(
            source_path=(source_path or "").strip(),
            database_path=(database_path or "").strip(),
            log_directory=(log_directory or "").strip(),
            db_backend=DbBackend.from_label(db_backend) or DbBackend.default(),
            log_level=LogLevel.from_label(log_level) or LogLevel.default(),
            selected_sheet=sheet or None,
            log_to_stdout=bool(log_to_stdout),
            has_headers=bool(has_headers),
        )

    @property
    def source_kind(self) -> SourceKind:
        return classify_source(self.source_path)

    @property
    def database_kind(self) -> DatabaseKind:
        return classify_database(self.database_path)

    @property
    def needs_sheet(self) -> bool:
        """True when the sheet selector should be shown."""
        return self.source_kind == SourceKind.EXCEL

    def validate_for_submit(self) -> list[str]:
        """Check the snapshot is ready to submit.

        Every rule is checked; messages come back in a fixed order
        (source, database, sheet).

        Returns:
            List of messages (empty if ready)
        """
        errors: list[str] = []

        if not self.source_path:
            errors.append("Source file is required.")

        if not self.database_path:
            errors.append("Database file is required.")

        if self.needs_sheet and not (self.selected_sheet or "").strip():
            errors.append("Sheet selection is required for Excel sources.")

        return errors

    def ensure_submittable(self) -> None:
        """Raise ValidationError carrying every message if not ready."""
        errors = self.validate_for_submit()
        if errors:
            raise ValidationError(errors)

    def __str__(self) -> str:
        return "\n".join(
            [
                f"Source file:   {self.source_path}",
                f"Database:      {self.database_path}",
                f"Log folder:    {self.log_directory}",
                f"DB backend:    {self.db_backend.label}",
                f"Log level:     {self.log_level.label}",
                f"Sheet:         {self.selected_sheet or ''}",
                f"Log to stdout: {str(self.log_to_stdout).lower()}",
                f"Has headers:   {str(self.has_headers).lower()}",
            ]
        )
