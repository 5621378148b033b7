"""Models package - Form snapshots.

Modules:
    - file_form: File selection form (source, database, logging options)
    - registration: Account registration form
"""

from src.models.file_form import (
    DatabaseKind,
    DbBackend,
    FileFormModel,
    LogLevel,
    SourceKind,
    classify_database,
    classify_source,
    file_dialog_filters,
)
from src.models.registration import RegistrationModel

__all__ = [
    "DatabaseKind",
    "DbBackend",
    "FileFormModel",
    "LogLevel",
    "SourceKind",
    "classify_database",
    "classify_source",
    "file_dialog_filters",
    "RegistrationModel",
]
